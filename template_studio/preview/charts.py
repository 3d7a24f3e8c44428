"""Preview chart rendering - one branch per chart kind and chart style.

Dispatch order: line, area, pie, donut, scatter, horizontal bar, stacked
bar, then the vertical-bar styles (outlined, gradient, filled).  The legacy
``data`` layout picks line or stacked from the style family's chart style.
"""

import math

from ..layout.geometry import Rect, cell_size
from ..schema.models import Layout, LayoutType, RegionRole
from ..style.compiler import RenderParams
from ..style.params import ChartStyle, DataPointStyle
from .scene import (
    Circle,
    GradientStop,
    Group,
    Line,
    LinearGradient,
    Node,
    Path,
    Polygon,
    Polyline,
    Rectangle,
    Scene,
    Text,
)

BAR_VALUES = [0.6, 0.85, 0.45, 0.95, 0.7]
PIE_VALUES = [0.35, 0.25, 0.20, 0.12, 0.08]
PIE_LABELS = ["Product A", "Product B", "Product C", "Product D", "Other"]
SCATTER_POINTS = [
    (0.15, 0.3), (0.25, 0.45), (0.35, 0.55), (0.45, 0.5), (0.5, 0.7), (0.55, 0.65),
    (0.65, 0.75), (0.75, 0.8), (0.85, 0.85), (0.2, 0.2), (0.4, 0.35), (0.6, 0.6),
]
STACK_VALUES = [[0.3, 0.2, 0.5], [0.4, 0.35, 0.25], [0.2, 0.5, 0.3], [0.35, 0.25, 0.4]]
HIGHLIGHT = 3


def chart_kind(layout_type: LayoutType) -> str:
    """'data-line' -> 'line'; the legacy 'data' type draws vertical bars."""
    if layout_type.value.startswith("data-"):
        return layout_type.value[len("data-"):]
    return "bar-vertical"


def chart_area(layout: Layout, p: RenderParams) -> Rect:
    """The chart's box: the first media/'chart' region inset by the base spacing."""
    cw, ch = cell_size(layout, p.width, p.height)
    for region in layout.regions:
        if region.role == RegionRole.MEDIA or region.id in ("chart", "chart1"):
            b = region.bounds
            return Rect(b.x * cw, b.y * ch, b.w * cw, b.h * ch).inset(p.base_spacing)
    return Rect(cw * 1.5, ch * 2.5, cw * 9, ch * 4)


def _hgrid(r: Rect, pcts, color: str, width: float) -> list[Line]:
    return [Line(x1=r.x, y1=r.y + r.h * (1 - pct), x2=r.right, y2=r.y + r.h * (1 - pct),
                 stroke=color, stroke_width=width) for pct in pcts]


def _series_points(r: Rect, values) -> list[tuple[float, float]]:
    step = r.w / (len(values) - 1)
    return [(r.x + step * i, r.y + r.h * (1 - v)) for i, v in enumerate(values)]


def _marker(point_style: DataPointStyle, x: float, y: float, radius: float,
            **paint) -> Node | None:
    """Data point in the style family's marker shape; None for 'none'."""
    if point_style == DataPointStyle.NONE:
        return None
    if point_style == DataPointStyle.SQUARE:
        return Rectangle(x=x - radius, y=y - radius, w=radius * 2, h=radius * 2, **paint)
    if point_style == DataPointStyle.DIAMOND:
        return Polygon(points=[(x, y - radius), (x + radius, y), (x, y + radius), (x - radius, y)],
                       **paint)
    return Circle(cx=x, cy=y, r=radius, **paint)


# ---------------------------------------------------------------------------
# Branches
# ---------------------------------------------------------------------------

def _line(r: Rect, p: RenderParams) -> Group:
    c, s = p.colors, p.scale
    g = Group()
    g.add(Line(x1=r.x, y1=r.bottom, x2=r.right, y2=r.bottom,
               stroke=c.neutral + "20", stroke_width=0.5 * s))
    g.children.extend(_hgrid(r, (0.25, 0.5, 0.75), c.neutral + "15", 0.5 * s))
    points = _series_points(r, BAR_VALUES)
    g.add(Polyline(points=points, stroke=c.primary, stroke_width=2 * s, linejoin="round"))
    for i, (x, y) in enumerate(points):
        marker = _marker(p.style.data_point_style, x, y, 4 * s, fill=c.background,
                         stroke=c.accent if i == HIGHLIGHT else c.primary, stroke_width=2 * s)
        if marker is not None:
            g.add(marker)
    for i, label in enumerate(["Jan", "Feb", "Mar", "Apr", "May"]):
        g.add(Text(x=r.x + (r.w / 4) * i, y=r.bottom + 12 * s, text=label,
                   font_size=6 * s, fill=c.neutral + "AA", anchor="middle"))
    return g


def _area(r: Rect, p: RenderParams, layout: Layout, scene: Scene) -> Group:
    c, s = p.colors, p.scale
    gradient_id = f"area-grad-{layout.type.value}"
    scene.defs.append(LinearGradient(gradient_id, [
        GradientStop(0, c.primary, 0.4), GradientStop(1, c.primary, 0.05)]))

    points = _series_points(r, BAR_VALUES)
    d = f"M {r.x},{r.bottom} " + " ".join(f"L {x},{y}" for x, y in points)
    d += f" L {r.right},{r.bottom} Z"

    g = Group()
    g.children.extend(_hgrid(r, (0.25, 0.5, 0.75), c.neutral + "15", 0.5 * s))
    g.add(Path(d=d, fill=f"url(#{gradient_id})"))
    g.add(Polyline(points=points, stroke=c.primary, stroke_width=2 * s, linejoin="round"))
    for i, (x, y) in enumerate(points):
        marker = _marker(p.style.data_point_style, x, y, 3 * s,
                         fill=c.accent if i == HIGHLIGHT else c.primary)
        if marker is not None:
            g.add(marker)
    g.add(Line(x1=r.x, y1=r.bottom, x2=r.right, y2=r.bottom,
               stroke=c.neutral + "30", stroke_width=1 * s))
    return g


def _pie_colors(p: RenderParams) -> list[str]:
    c = p.colors
    return [c.primary, c.secondary, c.accent, c.primary + "80", c.secondary + "80"]


def _polar(cx: float, cy: float, radius: float, degrees: float) -> tuple[float, float]:
    rad = math.radians(degrees)
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def _pie(r: Rect, p: RenderParams) -> Group:
    c, s = p.colors, p.scale
    colors = _pie_colors(p)
    cx, cy = r.center_x, r.center_y
    radius = min(r.w, r.h) / 2 - 10 * s

    g = Group()
    start = -90.0
    for value, color in zip(PIE_VALUES, colors):
        sweep = value * 360
        end = start + sweep
        x1, y1 = _polar(cx, cy, radius, start)
        x2, y2 = _polar(cx, cy, radius, end)
        large = 1 if sweep > 180 else 0
        g.add(Path(d=f"M {cx} {cy} L {x1} {y1} A {radius} {radius} 0 {large} 1 {x2} {y2} Z",
                   fill=color, stroke=c.background, stroke_width=2 * s))
        start = end

    for i, (label, color) in enumerate(zip(PIE_LABELS, colors)):
        item = Group(translate=(r.right + 10 * s, r.y + 10 + i * 14 * s))
        item.add(Rectangle(x=0, y=0, w=8 * s, h=8 * s, fill=color, rx=2 * s))
        item.add(Text(x=12 * s, y=7 * s, text=label, font_size=6 * s, fill=c.neutral))
        g.add(item)
    return g


def _donut(r: Rect, p: RenderParams) -> Group:
    c, s = p.colors, p.scale
    cx, cy = r.center_x, r.center_y
    outer = min(r.w, r.h) / 2 - 10 * s
    inner = outer * 0.6

    g = Group()
    start = -90.0
    for value, color in zip(PIE_VALUES, _pie_colors(p)):
        sweep = value * 360
        end = start + sweep
        large = 1 if sweep > 180 else 0
        ox1, oy1 = _polar(cx, cy, outer, start)
        ox2, oy2 = _polar(cx, cy, outer, end)
        ix1, iy1 = _polar(cx, cy, inner, start)
        ix2, iy2 = _polar(cx, cy, inner, end)
        d = (f"M {ox1} {oy1} A {outer} {outer} 0 {large} 1 {ox2} {oy2} "
             f"L {ix2} {iy2} A {inner} {inner} 0 {large} 0 {ix1} {iy1} Z")
        g.add(Path(d=d, fill=color, stroke=c.background, stroke_width=2 * s))
        start = end

    g.add(Text(x=cx, y=cy - 5 * s, text="$2.4M", font_size=14 * s, fill=c.primary,
               anchor="middle", font_weight=600))
    g.add(Text(x=cx, y=cy + 10 * s, text="Total Revenue", font_size=6 * s,
               fill=c.neutral + "AA", anchor="middle"))
    return g


def _scatter(r: Rect, p: RenderParams) -> Group:
    c, s = p.colors, p.scale
    g = Group()
    for pct in (0.25, 0.5, 0.75):
        g.add(Line(x1=r.x, y1=r.y + r.h * (1 - pct), x2=r.right, y2=r.y + r.h * (1 - pct),
                   stroke=c.neutral + "15", stroke_width=0.5 * s))
        g.add(Line(x1=r.x + r.w * pct, y1=r.y, x2=r.x + r.w * pct, y2=r.bottom,
                   stroke=c.neutral + "15", stroke_width=0.5 * s))
    g.add(Line(x1=r.x, y1=r.bottom, x2=r.right, y2=r.bottom,
               stroke=c.neutral + "40", stroke_width=1 * s))
    g.add(Line(x1=r.x, y1=r.y, x2=r.x, y2=r.bottom,
               stroke=c.neutral + "40", stroke_width=1 * s))
    for i, (px, py) in enumerate(SCATTER_POINTS):
        x, y = r.x + px * r.w, r.y + r.h * (1 - py)
        marker = _marker(p.style.data_point_style, x, y, 4 * s,
                         fill=c.primary if i < 6 else c.accent, opacity=0.7)
        if marker is not None:
            g.add(marker)
    # Trend line
    g.add(Line(x1=r.x + r.w * 0.1, y1=r.y + r.h * 0.8, x2=r.x + r.w * 0.9, y2=r.y + r.h * 0.15,
               stroke=c.secondary, stroke_width=1.5 * s, dasharray=f"{4 * s} {2 * s}"))
    return g


def _bar_horizontal(r: Rect, p: RenderParams) -> Group:
    c, s = p.colors, p.scale
    categories = ["Category A", "Category B", "Category C", "Category D", "Category E"]
    bar_h = r.h / (len(categories) + 1)
    radius = p.style.element_roundness * 4 * s
    shadow = p.style.shadow_offset * s

    g = Group()
    for pct in (0.25, 0.5, 0.75, 1):
        g.add(Line(x1=r.x + r.w * pct, y1=r.y, x2=r.x + r.w * pct, y2=r.bottom,
                   stroke=c.neutral + "20", stroke_width=0.5 * s))
    for i, value in enumerate(BAR_VALUES):
        top = r.y + i * bar_h + bar_h * 0.2
        if shadow > 0:
            g.add(Rectangle(x=r.x + shadow, y=top + shadow, w=r.w * value, h=bar_h * 0.6,
                            fill=p.style.shadow_color))
        g.add(Rectangle(x=r.x, y=top, w=r.w * value, h=bar_h * 0.6,
                        fill=c.accent if i == HIGHLIGHT else c.primary, rx=radius))
        g.add(Text(x=r.x + r.w * value + 5 * s, y=r.y + i * bar_h + bar_h * 0.55,
                   text=f"{round(value * 100)}%", font_size=6 * s, fill=c.neutral))
    for i, label in enumerate(categories):
        g.add(Text(x=r.x - 5 * s, y=r.y + i * bar_h + bar_h * 0.55, text=label,
                   font_size=6 * s, fill=c.neutral, anchor="end"))
    return g


def _stacked(r: Rect, p: RenderParams) -> Group:
    c, s = p.colors, p.scale
    colors = [c.primary, c.secondary, c.accent]
    bar_w = r.w / (len(STACK_VALUES) + 1)
    radius = p.style.element_roundness * 4 * s

    g = Group()
    g.add(Rectangle(x=r.x, y=r.y, w=r.w, h=r.h, fill=c.neutral + "05", rx=p.element_radius))
    g.children.extend(_hgrid(r, (0.25, 0.5, 0.75), c.neutral + "15", 0.5 * s))
    for bar, stack in enumerate(STACK_VALUES):
        offset = 0.0
        bar_x = r.x + (bar + 0.5) * bar_w
        for seg, value in enumerate(stack):
            seg_h = value * r.h
            g.add(Rectangle(x=bar_x, y=r.bottom - offset - seg_h, w=bar_w * 0.7,
                            h=seg_h - 1 * s, fill=colors[seg], rx=radius))
            offset += seg_h
        g.add(Text(x=bar_x + bar_w * 0.35, y=r.bottom + 10 * s, text=f"Q{bar + 1}",
                   font_size=6 * s, fill=c.neutral, anchor="middle"))
    for i, label in enumerate(["Series A", "Series B", "Series C"]):
        item = Group(translate=(r.right - 60 * s + i * 25 * s, r.y - 12 * s))
        item.add(Rectangle(x=0, y=0, w=6 * s, h=6 * s, fill=colors[i], rx=1 * s))
        item.add(Text(x=8 * s, y=5 * s, text=label, font_size=5 * s, fill=c.neutral))
        g.add(item)
    return g


def _bar_x(r: Rect, i: int, spread: float = 1.1, lead: float = 0.5) -> float:
    bar_w = r.w / 6
    return r.x + bar_w * lead + i * bar_w * spread


def _bars_outlined(r: Rect, p: RenderParams) -> Group:
    c, s = p.colors, p.scale
    bar_w = r.w / 6
    g = Group()
    g.children.extend(_hgrid(r, (0.25, 0.5, 0.75, 1), c.neutral + "30", 1 * s))
    for i, value in enumerate(BAR_VALUES):
        g.add(Rectangle(x=_bar_x(r, i), y=r.y + r.h * (1 - value), w=bar_w * 0.8, h=r.h * value,
                        fill="none", stroke=c.accent if i == HIGHLIGHT else c.primary,
                        stroke_width=p.style.border_thickness * s))
    for i, value in enumerate(BAR_VALUES):
        g.add(Text(x=_bar_x(r, i) + bar_w * 0.4, y=r.y + r.h * (1 - value) - 4 * s,
                   text=str(round(value * 100)), font_size=6 * s, fill=c.neutral, anchor="middle"))
    return g


def _bars_gradient(r: Rect, p: RenderParams, layout: Layout, scene: Scene) -> Group:
    c, s = p.colors, p.scale
    bar_w = r.w / 6
    radius = p.style.element_roundness * 4 * s
    gradient_id = f"grad-{layout.type.value}"
    for gid, color in ((gradient_id, c.primary), (f"{gradient_id}-accent", c.accent)):
        scene.defs.append(LinearGradient(gid, [GradientStop(0, color, 0.6), GradientStop(1, color, 1)],
                                         x1=0, y1=1, x2=0, y2=0))

    g = Group()
    for i, value in enumerate(BAR_VALUES):
        fill = f"url(#{gradient_id}-accent)" if i == HIGHLIGHT else f"url(#{gradient_id})"
        g.add(Rectangle(x=_bar_x(r, i, 1.15, 0.4), y=r.y + r.h * (1 - value), w=bar_w * 0.9,
                        h=r.h * value, fill=fill, rx=radius))
    hx = _bar_x(r, HIGHLIGHT, 1.15, 0.4)
    hy = r.y + r.h * (1 - BAR_VALUES[HIGHLIGHT]) + 2 * s
    g.add(Line(x1=hx, y1=hy, x2=hx + bar_w * 0.9, y2=hy, stroke=c.background,
               stroke_width=2 * s, opacity=0.5))
    return g


def _bars_filled(r: Rect, p: RenderParams) -> Group:
    c, s, style = p.colors, p.scale, p.style
    bar_w = r.w / 6
    radius = style.element_roundness * 4 * s
    shadow = style.shadow_offset * s

    g = Group()
    if shadow > 0:
        for i, value in enumerate(BAR_VALUES):
            g.add(Rectangle(x=_bar_x(r, i) + shadow, y=r.y + r.h * (1 - value) + shadow,
                            w=bar_w * 0.8, h=r.h * value, fill=style.shadow_color))
    if style.grid_visible:
        for pct in (0, 0.25, 0.5, 0.75, 1):
            g.add(Line(x1=r.x, y1=r.y + r.h * pct, x2=r.right, y2=r.y + r.h * pct,
                       stroke=c.neutral, stroke_width=1 * s))
        for i in range(len(BAR_VALUES)):
            x = _bar_x(r, i) + bar_w * 0.4
            g.add(Line(x1=x, y1=r.y, x2=x, y2=r.bottom, stroke=c.neutral + "40", stroke_width=1 * s))
    for i, value in enumerate(BAR_VALUES):
        top = r.y + r.h * (1 - value)
        g.add(Rectangle(x=_bar_x(r, i), y=top, w=bar_w * 0.8, h=r.h * value,
                        fill=c.accent if i == HIGHLIGHT else c.primary, rx=radius,
                        stroke=c.neutral if style.border_thickness > 0 else "none",
                        stroke_width=style.border_thickness * s))
        if style.data_point_style == DataPointStyle.CIRCLE and style.border_thickness > 0:
            g.add(Circle(cx=_bar_x(r, i) + bar_w * 0.4, cy=top, r=3 * s, fill=c.background,
                         stroke=c.accent if i == HIGHLIGHT else c.primary, stroke_width=1.5 * s))
    return g


def render_chart(scene: Scene, layout: Layout, p: RenderParams) -> Group:
    """Draw the chart for a data layout into a group (and gradients into *scene*)."""
    r = chart_area(layout, p)
    kind = chart_kind(layout.type)
    legacy = layout.type == LayoutType.DATA
    chart_style = p.style.chart_style

    if kind == "line" or (legacy and chart_style == ChartStyle.MINIMAL):
        return _line(r, p)
    if kind == "area":
        return _area(r, p, layout, scene)
    if kind == "pie":
        return _pie(r, p)
    if kind == "donut":
        return _donut(r, p)
    if kind == "scatter":
        return _scatter(r, p)
    if kind == "bar-horizontal":
        return _bar_horizontal(r, p)
    if kind == "stacked-bar" or (legacy and chart_style == ChartStyle.STACKED):
        return _stacked(r, p)
    if chart_style == ChartStyle.OUTLINED:
        return _bars_outlined(r, p)
    if chart_style == ChartStyle.GRADIENT:
        return _bars_gradient(r, p, layout, scene)
    return _bars_filled(r, p)
