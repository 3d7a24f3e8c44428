"""Preview branches for the non-chart special layouts.

Timeline, comparison and iconography change structure per style family;
quote, media and agenda are driven by the style parameters alone.
"""

from ..layout.geometry import region_rect, regions_by_role
from ..schema.models import Layout, RegionRole, StyleFamily
from ..style.compiler import RenderParams
from ..style.params import ChartStyle
from .scene import (
    Circle,
    GradientStop,
    Group,
    Line,
    LinearGradient,
    Path,
    Polygon,
    Rectangle,
    Scene,
    Text,
)

YEARS = [2024, 2025, 2026, 2027]
AGENDA_ITEMS = ["Strategic Overview", "Market Analysis", "Implementation Plan", "Next Steps"]
SERIF = "Georgia, serif"

_GRID_FAMILIES = (StyleFamily.BRUTALIST, StyleFamily.SWISS)


def _timeline_x(p: RenderParams, i: int, count: int = 4) -> float:
    start, end = p.width * 0.1, p.width * 0.9
    return start + (end - start) / (count - 1) * i


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

def _timeline_bento(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    card_w, card_h, card_y = W * 0.18, H * 0.35, H * 0.35
    g = Group()
    for i, year in enumerate(YEARS):
        x = W * 0.08 + i * (card_w + W * 0.04)
        g.add(Rectangle(x=x, y=card_y, w=card_w, h=card_h,
                        fill=c.accent + "20" if i == 1 else c.secondary + "10", rx=12 * s))
        g.add(Rectangle(x=x + 6 * s, y=card_y + 6 * s, w=card_w * 0.5, h=14 * s,
                        fill=c.accent if i == 1 else c.primary, rx=7 * s))
        g.add(Text(x=x + 6 * s + card_w * 0.25, y=card_y + 15 * s, text=str(year),
                   font_size=7 * s, fill=c.background, anchor="middle"))
        g.add(Rectangle(x=x + 8 * s, y=card_y + card_h - 20 * s, w=card_w * 0.7, h=6 * s,
                        fill=c.neutral + "40", rx=3 * s))
    return g


def _timeline_vertical(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    start_y, end_y, line_x = H * 0.2, H * 0.85, W * 0.15
    g = Group()
    g.add(Line(x1=line_x, y1=start_y, x2=line_x, y2=end_y, stroke=c.neutral,
               stroke_width=p.style.border_thickness * s))
    for i, year in enumerate(YEARS):
        y = start_y + (end_y - start_y) / (len(YEARS) - 1) * i
        g.add(Line(x1=line_x, y1=y, x2=W * 0.9, y2=y, stroke=c.neutral + "30", stroke_width=1 * s))
        g.add(Rectangle(x=line_x - 6 * s, y=y - 6 * s, w=12 * s, h=12 * s,
                        fill=c.accent if i == 1 else c.primary))
        g.add(Text(x=line_x + 15 * s, y=y + 4 * s, text=str(year), font_size=10 * s,
                   fill=c.neutral, font_weight=700))
        g.add(Rectangle(x=line_x + 60 * s, y=y - 3 * s, w=W * 0.4, h=6 * s, fill=c.neutral + "30"))
    return g


def _timeline_neubrutalist(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    line_y = H * 0.5
    shadow = p.style.shadow_offset * s
    card_w, card_h = 45 * s, 30 * s
    g = Group()
    g.add(Line(x1=W * 0.1, y1=line_y, x2=W * 0.9, y2=line_y, stroke=c.neutral, stroke_width=3 * s))
    for i, year in enumerate(YEARS):
        x = _timeline_x(p, i)
        top = line_y - card_h - 10 * s
        g.add(Rectangle(x=x - card_w / 2 + shadow, y=top + shadow, w=card_w, h=card_h,
                        fill=p.style.shadow_color))
        g.add(Rectangle(x=x - card_w / 2, y=top, w=card_w, h=card_h,
                        fill=c.accent if i == 1 else c.background,
                        stroke=c.neutral, stroke_width=2 * s))
        g.add(Text(x=x, y=line_y - card_h / 2 - 5 * s, text=str(year), font_size=9 * s,
                   fill=c.background if i == 1 else c.neutral, anchor="middle", font_weight=700))
        g.add(Line(x1=x, y1=line_y - 10 * s, x2=x, y2=line_y, stroke=c.neutral, stroke_width=2 * s))
        g.add(Rectangle(x=x - 5 * s, y=line_y - 5 * s, w=10 * s, h=10 * s,
                        fill=c.accent if i == 1 else c.primary, stroke=c.neutral, stroke_width=2 * s))
    return g


def _timeline_default(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    line_y = H * 0.55
    end_x = W * 0.9
    point_r = (8 if p.style.title_weight_multiplier > 1.2 else 6) * s
    g = Group()
    g.add(Line(x1=W * 0.1, y1=line_y, x2=end_x, y2=line_y, stroke=c.secondary,
               stroke_width=p.line_thickness * 1.5))
    if p.style.decorative_elements:
        g.add(Polygon(points=[(end_x, line_y), (end_x - 8 * s, line_y - 4 * s),
                              (end_x - 8 * s, line_y + 4 * s)], fill=c.secondary))
    for i, year in enumerate(YEARS):
        x = _timeline_x(p, i)
        g.add(Circle(cx=x, cy=line_y, r=point_r, fill=c.accent if i == 1 else c.primary,
                     stroke=c.background, stroke_width=p.line_thickness))
        g.add(Text(x=x, y=line_y - 14 * s, text=str(year), font_size=8 * s * p.type_scale_factor,
                   fill=c.neutral, anchor="middle", font_weight=p.body_weight))
        g.add(Text(x=x, y=line_y + 20 * s, text=f"Q{i + 1}", font_size=6 * s * p.type_scale_factor,
                   fill=c.neutral + "AA", anchor="middle"))
    return g


def render_timeline(family: StyleFamily, p: RenderParams) -> Group:
    if family == StyleFamily.BENTO:
        return _timeline_bento(p)
    if family in _GRID_FAMILIES:
        return _timeline_vertical(p)
    if family == StyleFamily.NEUBRUTALIST:
        return _timeline_neubrutalist(p)
    return _timeline_default(p)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def _comparison_clean(p: RenderParams, scene: Scene) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    card_w, card_h, card_y = W * 0.4, H * 0.55, H * 0.28
    for gid, color in (("clean-grad-l", c.primary), ("clean-grad-r", c.secondary)):
        scene.defs.append(LinearGradient(gid, [GradientStop(0, color, 0.08),
                                               GradientStop(1, color, 0.02)]))
    g = Group()
    sides = ((W * 0.075, W * 0.095, "clean-grad-l", c.primary, "Option A", 0.75, 0.1),
             (W * 0.525, W * 0.545, "clean-grad-r", c.secondary, "Option B", 0.7, 0.08))
    for x, inner_x, gid, color, label, width_pct, step in sides:
        g.add(Rectangle(x=x, y=card_y, w=card_w, h=card_h, fill=f"url(#{gid})", rx=12 * s))
        g.add(Rectangle(x=x, y=card_y, w=card_w, h=card_h, fill="none", stroke=color + "20",
                        stroke_width=1 * s, rx=12 * s))
        g.add(Text(x=x + card_w / 2, y=card_y + 18 * s, text=label, font_size=9 * s, fill=color,
                   anchor="middle", font_weight=500))
        for i in range(3):
            g.add(Rectangle(x=inner_x, y=card_y + 30 + i * 16 * s, w=card_w * (width_pct - i * step),
                            h=5 * s, fill=c.neutral + "25", rx=2.5 * s))
    # Checkmark on the left card
    cx, cy = W * 0.095 + card_w * 0.8, card_y + 35 * s
    g.add(Circle(cx=cx, cy=cy, r=6 * s, fill=c.accent + "20"))
    g.add(Path(d=f"M {cx - 3 * s} {cy} l 2 2 l 4 -4", fill="none", stroke=c.accent,
               stroke_width=1.5 * s))
    return g


def _comparison_editorial(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    col_w, col_y, col_h = W * 0.38, H * 0.25, H * 0.6
    g = Group()
    g.add(Text(x=W / 2, y=H * 0.65, text="VS", font_size=80 * s, fill=c.neutral + "08",
               anchor="middle", font_weight=900, font_family=SERIF))
    g.add(Line(x1=W / 2, y1=col_y, x2=W / 2, y2=col_y + col_h, stroke=c.neutral, stroke_width=2 * s))
    for x, color, label, width_pct, step in ((W * 0.08, c.primary, "OPTION A", 0.9, 0.1),
                                             (W * 0.54, c.secondary, "OPTION B", 0.85, 0.08)):
        g.add(Text(x=x, y=col_y + 20 * s, text=label, font_size=16 * s, fill=color,
                   font_weight=700, font_family=SERIF, letter_spacing=0.1))
        g.add(Line(x1=x, y1=col_y + 28 * s, x2=x + col_w * 0.3, y2=col_y + 28 * s,
                   stroke=c.accent, stroke_width=3 * s))
        for i in range(4):
            g.add(Rectangle(x=x, y=col_y + 45 + i * 22 * s, w=col_w * (width_pct - i * step),
                            h=6 * s, fill=c.neutral + "30"))
    return g


def _comparison_bold(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    block_w, block_h, block_y = W * 0.42, H * 0.5, H * 0.3
    mid_y = block_y + block_h / 2
    g = Group()
    for x, color, label in ((W * 0.06, c.primary, "PLAN A"), (W * 0.52, c.accent, "PLAN B")):
        g.add(Rectangle(x=x, y=block_y, w=block_w, h=block_h, fill=color, rx=4 * s))
        g.add(Text(x=x + block_w / 2, y=mid_y - 10 * s, text=label, font_size=18 * s,
                   fill=c.background, anchor="middle", font_weight=800))
        g.add(Rectangle(x=x + block_w * 0.2, y=mid_y + 10 * s, w=block_w * 0.6, h=4 * s,
                        fill=c.background + "60", rx=2 * s))
        g.add(Rectangle(x=x + block_w * 0.25, y=mid_y + 22 * s, w=block_w * 0.5, h=4 * s,
                        fill=c.background + "40", rx=2 * s))
    g.add(Polygon(points=[(W / 2 - 8 * s, mid_y), (W / 2 + 8 * s, mid_y - 10 * s),
                          (W / 2 + 8 * s, mid_y + 10 * s)], fill=c.secondary))
    return g


def _comparison_minimal(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    line_y = H * 0.5
    g = Group()
    g.add(Line(x1=W * 0.1, y1=line_y, x2=W * 0.9, y2=line_y, stroke=c.neutral + "20",
               stroke_width=0.5 * s))
    g.add(Text(x=W * 0.15, y=line_y - 30 * s, text="A", font_size=10 * s, fill=c.neutral,
               font_weight=300, letter_spacing=0.15))
    g.add(Rectangle(x=W * 0.15, y=line_y - 18 * s, w=W * 0.25, h=3 * s, fill=c.neutral + "20"))
    g.add(Rectangle(x=W * 0.15, y=line_y - 10 * s, w=W * 0.2, h=3 * s, fill=c.neutral + "15"))
    g.add(Text(x=W * 0.6, y=line_y + 45 * s, text="B", font_size=10 * s, fill=c.neutral,
               font_weight=300, letter_spacing=0.15))
    g.add(Rectangle(x=W * 0.6, y=line_y + 18 * s, w=W * 0.25, h=3 * s, fill=c.neutral + "20"))
    g.add(Rectangle(x=W * 0.6, y=line_y + 26 * s, w=W * 0.18, h=3 * s, fill=c.neutral + "15"))
    g.add(Circle(cx=W / 2, cy=line_y, r=3 * s, fill=c.accent + "40"))
    return g


def _comparison_corporate(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    card_w, card_h, card_y = W * 0.4, H * 0.5, H * 0.32
    g = Group()
    g.add(Rectangle(x=0, y=H * 0.2, w=W, h=20 * s, fill=c.primary + "10"))
    sides = ((W * 0.07, W * 0.09, c.primary, "Solution A", 0.6),
             (W * 0.53, W * 0.55, c.secondary, "Solution B", 0.55))
    for x, inner_x, color, label, width_pct in sides:
        g.add(Rectangle(x=x, y=card_y, w=card_w, h=card_h, fill=c.background, rx=4 * s,
                        stroke=c.neutral + "14", stroke_width=1 * s))
        g.add(Rectangle(x=x, y=card_y, w=card_w, h=22 * s, fill=color, rx=4 * s))
        g.add(Rectangle(x=x, y=card_y + 18 * s, w=card_w, h=6 * s, fill=color))
        g.add(Text(x=x + card_w / 2, y=card_y + 15 * s, text=label, font_size=9 * s,
                   fill=c.background, anchor="middle", font_weight=600))
        for i in range(3):
            g.add(Rectangle(x=inner_x, y=card_y + 35 + i * 20 * s, w=6 * s, h=6 * s,
                            fill=c.accent, rx=1 * s))
            g.add(Rectangle(x=inner_x + 12 * s, y=card_y + 36 + i * 20 * s, w=card_w * width_pct,
                            h=4 * s, fill=c.neutral + "25", rx=2 * s))
    return g


def _comparison_bento(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    left_x, right_x = W * 0.08, W * 0.5
    card_y, card_w, card_h = H * 0.25, W * 0.45, H * 0.55
    g = Group()
    g.add(Rectangle(x=left_x, y=card_y, w=card_w, h=card_h, fill=c.primary + "15", rx=16 * s))
    g.add(Rectangle(x=right_x, y=card_y + 15 * s, w=card_w, h=card_h - 10 * s,
                    fill=c.background, rx=16 * s))
    g.add(Rectangle(x=right_x, y=card_y + 15 * s, w=card_w, h=card_h - 10 * s, fill="none",
                    stroke=c.secondary + "30", stroke_width=1 * s, rx=16 * s))
    g.add(Text(x=left_x + 15 * s, y=card_y + 25 * s, text="BEFORE", font_size=8 * s,
               fill=c.primary, font_weight=600))
    g.add(Text(x=right_x + 15 * s, y=card_y + 40 * s, text="AFTER", font_size=8 * s,
               fill=c.secondary, font_weight=600))
    for i in range(3):
        g.add(Rectangle(x=left_x + 15 * s, y=card_y + 40 + i * 20 * s, w=card_w * 0.6 - i * 15 * s,
                        h=6 * s, fill=c.neutral + "30", rx=3 * s))
    for i in range(3):
        g.add(Rectangle(x=right_x + 15 * s, y=card_y + 55 + i * 20 * s, w=card_w * 0.7 - i * 10 * s,
                        h=6 * s, fill=c.neutral + "30", rx=3 * s))
    return g


def _comparison_neubrutalist(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    box_w, box_h, box_y = W * 0.38, H * 0.5, H * 0.3
    shadow = p.style.shadow_offset * s
    g = Group()
    for x, color, label in ((W * 0.08, c.primary, "PLAN A"), (W * 0.54, c.accent, "PLAN B")):
        g.add(Rectangle(x=x + shadow, y=box_y + shadow, w=box_w, h=box_h, fill=p.style.shadow_color))
        g.add(Rectangle(x=x, y=box_y, w=box_w, h=box_h, fill=color + "20",
                        stroke=c.neutral, stroke_width=3 * s))
        g.add(Text(x=x + box_w / 2, y=box_y + 20 * s, text=label, font_size=11 * s,
                   fill=c.neutral, anchor="middle", font_weight=800))
    g.add(Rectangle(x=W / 2 - 15 * s, y=box_y + box_h / 2 - 10 * s, w=30 * s, h=20 * s,
                    fill=c.accent, stroke=c.neutral, stroke_width=2 * s))
    g.add(Text(x=W / 2, y=box_y + box_h / 2 + 4 * s, text="VS", font_size=10 * s,
               fill=c.background, anchor="middle", font_weight=900))
    return g


def _comparison_table(p: RenderParams) -> Group:
    c, s, W, H = p.colors, p.scale, p.width, p.height
    x0, y0, tw, th = W * 0.1, H * 0.25, W * 0.8, H * 0.6
    cols, rows = 3, 4
    cell_w, cell_h = tw / cols, th / rows
    g = Group()
    for i in range(cols + 1):
        g.add(Line(x1=x0 + i * cell_w, y1=y0, x2=x0 + i * cell_w, y2=y0 + th, stroke=c.neutral,
                   stroke_width=2 if i in (0, cols) else 1))
    for i in range(rows + 1):
        g.add(Line(x1=x0, y1=y0 + i * cell_h, x2=x0 + tw, y2=y0 + i * cell_h, stroke=c.neutral,
                   stroke_width=2 if i in (0, 1) else 1))
    g.add(Rectangle(x=x0 + cell_w, y=y0, w=cell_w, h=cell_h, fill=c.primary + "20"))
    g.add(Rectangle(x=x0 + cell_w * 2, y=y0, w=cell_w, h=cell_h, fill=c.secondary + "20"))
    g.add(Text(x=x0 + cell_w * 1.5, y=y0 + cell_h / 2 + 4 * s, text="OPTION A", font_size=8 * s,
               fill=c.primary, anchor="middle", font_weight=700))
    g.add(Text(x=x0 + cell_w * 2.5, y=y0 + cell_h / 2 + 4 * s, text="OPTION B", font_size=8 * s,
               fill=c.secondary, anchor="middle", font_weight=700))
    for i, label in enumerate(["Price", "Speed", "Quality"]):
        g.add(Text(x=x0 + 10 * s, y=y0 + (i + 1.5) * cell_h + 4 * s, text=label, font_size=7 * s,
                   fill=c.neutral, font_weight=600))
    return g


def render_comparison(family: StyleFamily, p: RenderParams, scene: Scene) -> Group:
    """Families without a dedicated comparison arrangement use the clean one."""
    if family == StyleFamily.EDITORIAL:
        return _comparison_editorial(p)
    if family == StyleFamily.BOLD:
        return _comparison_bold(p)
    if family == StyleFamily.MINIMAL:
        return _comparison_minimal(p)
    if family == StyleFamily.CORPORATE:
        return _comparison_corporate(p)
    if family == StyleFamily.BENTO:
        return _comparison_bento(p)
    if family == StyleFamily.NEUBRUTALIST:
        return _comparison_neubrutalist(p)
    if family in _GRID_FAMILIES:
        return _comparison_table(p)
    return _comparison_clean(p, scene)


# ---------------------------------------------------------------------------
# Quote, media, agenda
# ---------------------------------------------------------------------------

def render_quote(family: StyleFamily, p: RenderParams) -> Group:
    c, s, W, H, style = p.colors, p.scale, p.width, p.height, p.style
    x, y = W * 0.15, H * 0.35
    mark_size = 48 * s * p.type_scale_factor * style.title_weight_multiplier
    if family == StyleFamily.BOLD:
        mark_opacity = 0.8
    elif family == StyleFamily.MINIMAL:
        mark_opacity = 0.4
    else:
        mark_opacity = 0.6
    font = SERIF if family == StyleFamily.EDITORIAL else None

    g = Group()
    g.add(Text(x=x, y=y, text="“", font_size=mark_size, fill=c.accent, font_family=font,
               opacity=mark_opacity, font_weight=700 if style.title_weight_multiplier > 1.2 else 400))
    if style.decorative_elements:
        g.add(Text(x=x + W * 0.65, y=y + 25 * s, text="”", font_size=mark_size * 0.7,
                   fill=c.accent, font_family=font, opacity=mark_opacity * 0.6))
    for i in range(2):
        g.add(Rectangle(x=x + 25 * s, y=y + i * 15 * s, w=W * 0.6 - i * W * 0.15,
                        h=6 * s * style.body_weight_multiplier, fill=c.neutral + "60",
                        rx=3 * s * style.element_roundness))
    # Attribution
    g.add(Rectangle(x=x + 25 * s, y=y + 45 * s, w=W * 0.25, h=4 * s, fill=c.secondary + "80",
                    rx=2 * s))
    if style.decorative_elements:
        g.add(Line(x1=x + 25 * s, y1=y + 52 * s, x2=x + 25 * s + W * 0.15, y2=y + 52 * s,
                   stroke=c.accent, stroke_width=p.accent_thickness * 0.75, opacity=p.accent_opacity))
    return g


def render_media(family: StyleFamily, layout: Layout, p: RenderParams) -> Group | None:
    """Dashed image placeholder in the first media region; None when there is none."""
    media = regions_by_role(layout, RegionRole.MEDIA)
    if not media:
        return None
    c, s, style = p.colors, p.scale, p.style
    r = region_rect(media[0], layout, p.width, p.height).inset(p.base_spacing)
    dash = 6 if family == StyleFamily.MINIMAL else 4

    g = Group()
    g.add(Rectangle(x=r.x, y=r.y, w=r.w, h=r.h,
                    fill=c.secondary + ("20" if style.decorative_elements else "10"),
                    rx=p.element_radius, stroke=c.secondary + "30",
                    stroke_width=p.line_thickness * 0.75,
                    dasharray=None if family == StyleFamily.BOLD else f"{dash * s} {dash * s}"))
    icon = Group(translate=(r.center_x - 15 * s, r.center_y - 12 * s))
    icon.add(Rectangle(x=0, y=0, w=30 * s, h=24 * s, fill="none", stroke=c.secondary,
                       stroke_width=p.line_thickness, rx=3 * s * style.element_roundness))
    icon.add(Circle(cx=10 * s, cy=9 * s, r=3 * s, fill=c.secondary))
    icon.add(Path(d=f"M {4 * s} {20 * s} L {12 * s} {12 * s} L {18 * s} {16 * s} L {26 * s} {10 * s}",
                  fill="none", stroke=c.secondary, stroke_width=p.line_thickness))
    g.add(icon)
    return g


def render_agenda(p: RenderParams) -> Group:
    c, s, W, H, style = p.colors, p.scale, p.width, p.height, p.style
    x, y = W * 0.12, H * 0.35
    badge_r = (10 if style.title_weight_multiplier > 1.2 else 8) * s
    step = 22 * s * style.spacing_multiplier

    g = Group()
    for i, _item in enumerate(AGENDA_ITEMS):
        cy = y + i * step
        fill = c.accent if i == 0 else c.primary + "20"
        if style.element_roundness < 0.5:
            g.add(Rectangle(x=x - badge_r, y=cy - badge_r, w=badge_r * 2, h=badge_r * 2,
                            fill=fill, rx=2 * s))
        else:
            g.add(Circle(cx=x, cy=cy, r=badge_r, fill=fill))
        g.add(Text(x=x, y=cy + 3 * s, text=str(i + 1), font_size=7 * s * style.title_weight_multiplier,
                   fill=c.background if i == 0 else c.primary, anchor="middle",
                   font_weight=p.title_weight))
        g.add(Rectangle(x=x + 18 * s, y=cy - 4 * s, w=W * 0.5 - i * 15 * s,
                        h=6 * s * style.body_weight_multiplier, fill=c.neutral + "50",
                        rx=3 * s * style.element_roundness))
        if style.decorative_elements and i < len(AGENDA_ITEMS) - 1:
            g.add(Line(x1=x, y1=cy + badge_r + 2 * s, x2=x, y2=y + (i + 1) * step - badge_r - 2 * s,
                       stroke=c.primary + "30", stroke_width=p.line_thickness * 0.5))
    return g


# ---------------------------------------------------------------------------
# Iconography
# ---------------------------------------------------------------------------

def _icon(family: StyleFamily, p: RenderParams, x: float, y: float, size: float, index: int) -> Group:
    c, s, style = p.colors, p.scale, p.style
    highlighted = index == 0
    color = c.accent if highlighted else c.primary
    filled = style.chart_style in (ChartStyle.FILLED, ChartStyle.GRADIENT)
    bg_fill = color + "15" if filled else "none"
    corner = style.element_roundness * 8 * s
    stroke_w = p.line_thickness * 1.5 if style.border_thickness > 0 else p.line_thickness
    mid_x, mid_y = x + size / 2, y + size / 2

    g = Group()
    if family in _GRID_FAMILIES:
        g.add(Rectangle(x=x, y=y, w=size, h=size, fill=bg_fill, stroke=color, stroke_width=stroke_w))
        g.add(Polygon(points=[(x + size * 0.5, y + size * 0.2), (x + size * 0.8, y + size * 0.8),
                              (x + size * 0.2, y + size * 0.8)],
                      fill=color if highlighted else "none", stroke=color, stroke_width=stroke_w))
    elif family == StyleFamily.NEUBRUTALIST:
        shadow = style.shadow_offset * s
        g.add(Rectangle(x=x + shadow, y=y + shadow, w=size, h=size, fill=style.shadow_color))
        g.add(Rectangle(x=x, y=y, w=size, h=size, fill=color if highlighted else c.background,
                        stroke=c.neutral, stroke_width=3 * s))
        g.add(Circle(cx=mid_x, cy=mid_y, r=size * 0.3, fill=c.background if highlighted else color))
    elif family == StyleFamily.MINIMAL:
        g.add(Circle(cx=mid_x, cy=mid_y, r=size * 0.4, fill="none", stroke=color,
                     stroke_width=0.75 * s))
        g.add(Line(x1=x + size * 0.35, y1=mid_y, x2=x + size * 0.65, y2=mid_y, stroke=color,
                   stroke_width=0.75 * s))
        g.add(Line(x1=mid_x, y1=y + size * 0.35, x2=mid_x, y2=y + size * 0.65, stroke=color,
                   stroke_width=0.75 * s))
    elif family == StyleFamily.BENTO:
        g.add(Rectangle(x=x, y=y, w=size, h=size, fill=color + "10", rx=12 * s))
        g.add(Circle(cx=mid_x, cy=y + size * 0.45, r=size * 0.25, fill=color + "40"))
        g.add(Circle(cx=mid_x, cy=y + size * 0.45, r=size * 0.15, fill=color))
        g.add(Rectangle(x=x + size * 0.2, y=y + size * 0.75, w=size * 0.6, h=4 * s,
                        fill=c.neutral + "30", rx=2 * s))
    elif family == StyleFamily.BOLD:
        g.add(Circle(cx=mid_x, cy=mid_y, r=size * 0.45, fill=color))
        g.add(Rectangle(x=x + size * 0.35, y=y + size * 0.35, w=size * 0.3, h=size * 0.3,
                        fill=c.background, rx=2 * s))
    elif family == StyleFamily.EDITORIAL:
        g.add(Rectangle(x=x, y=y, w=size, h=size, fill="none", stroke=color, stroke_width=1 * s))
        g.add(Polygon(points=[(mid_x, y + size * 0.15), (x + size * 0.85, mid_y),
                              (mid_x, y + size * 0.85), (x + size * 0.15, mid_y)],
                      fill="none", stroke=color, stroke_width=1 * s))
    elif family == StyleFamily.CORPORATE:
        g.add(Rectangle(x=x, y=y, w=size, h=size, fill=c.background, rx=corner))
        g.add(Rectangle(x=x, y=y, w=size, h=size, fill="none", stroke=color + "30",
                        stroke_width=1 * s, rx=corner))
        g.add(Circle(cx=mid_x, cy=mid_y, r=size * 0.3, fill=color + "20", stroke=color,
                     stroke_width=1.5 * s))
    else:
        g.add(Rectangle(x=x, y=y, w=size, h=size, fill=bg_fill, stroke=color + "40",
                        stroke_width=1 * s, rx=corner))
        g.add(Circle(cx=mid_x, cy=mid_y, r=size * 0.3, fill="none", stroke=color,
                     stroke_width=1.5 * s))
        g.add(Path(d=(f"M {x + size * 0.35} {mid_y} L {x + size * 0.45} {y + size * 0.6} "
                      f"L {x + size * 0.65} {y + size * 0.4}"),
                   fill="none", stroke=color, stroke_width=1.5 * s, linecap="round", linejoin="round"))
    return g


def render_iconography(family: StyleFamily, layout: Layout, p: RenderParams) -> Group:
    """One square icon per media region, centred in the region."""
    g = Group()
    for index, region in enumerate(regions_by_role(layout, RegionRole.MEDIA)):
        r = region_rect(region, layout, p.width, p.height).inset(p.base_spacing)
        size = min(r.w, r.h)
        g.add(_icon(family, p, r.x + (r.w - size) / 2, r.y + (r.h - size) / 2, size, index))
    return g
