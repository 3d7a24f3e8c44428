"""Special slide content for exported timeline, comparison and iconography layouts.

Each renderer picks one of four treatments from the export style parameters:

    card     filled, clearly rounded styles (bento, retro70s, organic ...)
    border   heavy-border or outlined styles (brutalist, editorial, swiss ...)
    minimal  hairline styles (minimal, scandinavian, luxury)
    default  everything else (clean, corporate ...)

All positions are inches on the 10 x 5.625 in slide, font sizes are
fractions of the body font size.  Gaps and padding scale with the composed
spacing multiplier, corners with the mood's radius multiplier, and text is
dimmed by the contrast and mood intensity.  Families with a shadow offset
get a flat silhouette behind every card, box and marker.
"""

from ..schema.models import ColorTokens, Layout, RegionRole
from ..style.params import ChartStyle
from .shapes import add_box, add_line, add_text, region_box
from .style import ExportRenderParams

SHADOW = "#000000"
SHADOW_STEP = 0.02  # inches per unit of shadow offset

MILESTONES = [
    ("2024", "Research", "Market analysis complete"),
    ("2025", "Design", "Product prototype ready"),
    ("2026", "Launch", "Global market release"),
    ("2027", "Scale", "International expansion"),
]

OPTION_A_FEATURES = ["Lower upfront cost", "Standard support", "Basic analytics", "99.5% uptime SLA"]
OPTION_B_FEATURES = ["Premium features", "Priority support 24/7", "Advanced analytics", "99.99% uptime SLA"]

SAMPLE_ICONS = [
    ("★", "Excellence", "Striving for the highest quality"),
    ("◆", "Innovation", "Pioneering new solutions"),
    ("●", "Integrity", "Building trust through action"),
    ("▲", "Growth", "Continuous improvement"),
    ("■", "Teamwork", "Achieving more together"),
    ("♦", "Focus", "Delivering on priorities"),
]

ICON_LIBRARY: dict[str, dict[str, str]] = {
    "shapes": {
        "circle": "●", "circleOutline": "○", "square": "■", "squareOutline": "□",
        "diamond": "◆", "diamondOutline": "◇", "triangle": "▲", "triangleDown": "▼",
        "triangleRight": "▶", "triangleLeft": "◀",
    },
    "stars": {
        "star": "★", "starOutline": "☆", "sparkle": "✦", "sparkleAlt": "✧",
        "asterisk": "✱", "florette": "✿",
    },
    "status": {
        "check": "✓", "checkBold": "✔", "cross": "✗", "crossBold": "✘",
        "plus": "+", "minus": "−",
    },
    "arrows": {
        "right": "→", "left": "←", "up": "↑", "down": "↓",
        "doubleRight": "»", "doubleLeft": "«", "rightBold": "➔", "circleRight": "➜",
    },
    "bullets": {
        "bullet": "•", "dash": "–", "diamond": "◆", "arrow": "▸",
        "circle": "○", "square": "▪", "triangleSmall": "‣",
    },
    "business": {
        "target": "◎", "gear": "⚙", "lightning": "⚡", "flag": "⚑",
        "crown": "♔", "heart": "♥", "club": "♣", "spade": "♠",
    },
    "numberedCircles": {
        "one": "①", "two": "②", "three": "③", "four": "④", "five": "⑤",
        "six": "⑥", "seven": "⑦", "eight": "⑧", "nine": "⑨", "ten": "⑩",
    },
    "letteredCircles": {
        "a": "Ⓐ", "b": "Ⓑ", "c": "Ⓒ", "d": "Ⓓ", "e": "Ⓔ", "f": "Ⓕ",
    },
}


def _first_region(layout: Layout, role: RegionRole):
    return next((r for r in layout.regions if r.role == role), None)


def _shadowed_box(slide, params: ExportRenderParams, x: float, y: float, w: float, h: float,
                  **box):
    """add_box, preceded by an offset silhouette when the family casts shadows."""
    offset = params.style.shadow_offset
    if offset > 0:
        off = offset * SHADOW_STEP
        add_box(slide, x + off, y + off, w, h, fill=SHADOW,
                transparency=params.shadow_transparency,
                radius=box.get("radius", 0), ellipse=box.get("ellipse", False))
    return add_box(slide, x, y, w, h, **box)


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

def add_timeline(slide, layout: Layout, colors: ColorTokens, font: str,
                 base: float, params: ExportRenderParams) -> bool:
    """Four milestones across the body region.

    Returns:
        False when the layout has no body region (nothing is drawn).
    """
    region = _first_region(layout, RegionRole.BODY)
    if region is None:
        return False
    style = params.style
    x, y, w, h = region_box(region, layout)
    fmt = style.format_label
    line_y = y + h * 0.4
    padding = params.spacing(0.3)
    spacing = (w - padding * 2) / (len(MILESTONES) - 1)
    title_fade = params.fade(muted=False)

    if style.is_card_style:
        gap = params.spacing(0.15)
        card_w = (w - padding * 2) / len(MILESTONES) - gap
        card_h = h * 0.7
        card_y = y + h * 0.15
        radius = params.radius(style.element_roundness * 0.15)
        for i, (year, label, desc) in enumerate(MILESTONES):
            first = i == 0
            card_x = x + padding + i * (card_w + gap)
            _shadowed_box(slide, params, card_x, card_y, card_w, card_h,
                          fill=colors.primary if first else colors.secondary,
                          transparency=0 if first else 85, radius=radius)
            add_text(slide, year, card_x, card_y + 0.15, card_w, 0.3, font=font,
                     size=base * 0.55, color=colors.background if first else colors.primary,
                     bold=True, align="center", transparency=0 if first else title_fade)
            add_text(slide, fmt(label), card_x, card_y + card_h * 0.4, card_w, 0.3, font=font,
                     size=base * 0.5, color=colors.background if first else colors.neutral,
                     bold=True, align="center", transparency=0 if first else params.fade())
            add_text(slide, desc, card_x + 0.1, card_y + card_h * 0.6, card_w - 0.2, 0.4,
                     font=font, size=base * 0.35,
                     color=colors.background if first else colors.neutral,
                     transparency=30 if first else params.fade(40), align="center")
        return True

    if style.border_thickness >= 3 or style.chart_style == ChartStyle.OUTLINED:
        add_line(slide, x + padding, line_y, w - padding * 2, 0,
                 color=colors.primary, width=style.line_thickness, dash=params.dashed)
        marker = 0.25
        for i, (year, label, _desc) in enumerate(MILESTONES):
            first = i == 0
            px = x + padding + i * spacing
            if style.element_roundness == 0:
                _shadowed_box(slide, params, px - marker / 2, line_y - marker / 2, marker, marker,
                              fill=colors.accent if first else colors.primary,
                              line=colors.primary, line_width=style.border_thickness * 0.5)
            else:
                _shadowed_box(slide, params, px - marker / 2, line_y - marker / 2, marker, marker,
                              fill=colors.background,
                              line=colors.accent if first else colors.primary,
                              line_width=2, ellipse=True)
            add_text(slide, fmt(year), px - 0.5, line_y - 0.6, 1, 0.35, font=font,
                     size=base * 0.65, color=colors.primary, bold=True, align="center",
                     transparency=title_fade)
            add_text(slide, fmt(label), px - 0.6, line_y + 0.25, 1.2, 0.3, font=font,
                     size=base * 0.5, color=colors.neutral, bold=True, align="center",
                     transparency=params.fade())
        return True

    if style.chart_style == ChartStyle.MINIMAL:
        add_line(slide, x + padding, line_y, w - padding * 2, 0,
                 color=colors.neutral, width=0.75, transparency=50, dash=params.dashed)
        dot = 0.08
        for i, (year, label, _desc) in enumerate(MILESTONES):
            px = x + padding + i * spacing
            add_box(slide, px - dot / 2, line_y - dot / 2, dot, dot,
                    fill=colors.accent if i == 0 else colors.neutral, ellipse=True)
            add_text(slide, year, px - 0.4, line_y - 0.45, 0.8, 0.25, font=font,
                     size=base * 0.45, color=colors.neutral, transparency=params.fade(30),
                     align="center")
            add_text(slide, label, px - 0.5, line_y + 0.2, 1, 0.25, font=font,
                     size=base * 0.45, color=colors.neutral, transparency=params.fade(),
                     align="center")
        return True

    add_line(slide, x + padding, line_y, w - padding * 2, 0,
             color=colors.secondary, width=style.line_thickness, dash=params.dashed)
    marker = 0.2
    for i, (year, label, desc) in enumerate(MILESTONES):
        first = i == 0
        px = x + padding + i * spacing
        _shadowed_box(slide, params, px - marker / 2, line_y - marker / 2, marker, marker,
                      fill=colors.accent if first else colors.primary, ellipse=True)
        add_text(slide, fmt(year), px - 0.4, line_y - 0.55, 0.8, 0.3, font=font,
                 size=base * 0.6, color=colors.primary, bold=True, align="center",
                 transparency=title_fade)
        add_text(slide, fmt(label), px - 0.5, line_y + 0.2, 1, 0.25, font=font,
                 size=base * 0.55, color=colors.neutral, bold=True, align="center",
                 transparency=params.fade())
        add_text(slide, desc, px - 0.7, line_y + 0.45, 1.4, 0.3, font=font,
                 size=base * 0.4, color=colors.neutral, transparency=params.fade(40),
                 align="center")
    return True


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def _feature_list(slide, features, x, y0, step, w, h, *, font, size, color,
                  prefix="", transparency=0, fmt=None):
    for i, feature in enumerate(features):
        text = fmt(feature) if fmt else f"{prefix}{feature}"
        add_text(slide, text, x, y0 + i * step, w, h, font=font, size=size,
                 color=color, transparency=transparency)


def add_comparison(slide, layout: Layout, colors: ColorTokens, font: str,
                   base: float, params: ExportRenderParams) -> bool:
    """Two option cards side by side in the body region, Option B recommended."""
    region = _first_region(layout, RegionRole.BODY)
    if region is None:
        return False
    style = params.style
    x, y, w, h = region_box(region, layout)
    fmt = style.format_label
    gap = params.spacing(0.4)
    card_w = (w - gap) / 2
    card_h = h * 0.88
    pad = params.spacing(0.18)
    corner = params.radius(style.element_roundness * 0.12)
    ax, bx = x, x + card_w + gap
    inner_w = card_w - pad * 2
    title_fade = params.fade(muted=False)

    if style.is_card_style:
        _shadowed_box(slide, params, ax, y, card_w, card_h,
                      fill=colors.secondary, transparency=88, radius=corner)
        add_text(slide, fmt("Option A"), ax + pad, y + pad, inner_w, 0.4, font=font,
                 size=base * 0.75, color=colors.primary, bold=True, transparency=title_fade)
        _feature_list(slide, OPTION_A_FEATURES, ax + pad, y + pad + 0.52, 0.38, inner_w, 0.32,
                      font=font, size=base * 0.48, color=colors.neutral, prefix="•  ",
                      transparency=params.fade())

        _shadowed_box(slide, params, bx, y, card_w, card_h, fill=colors.primary, radius=corner)
        add_text(slide, fmt("Option B") + "  ★", bx + pad, y + pad, inner_w, 0.4, font=font,
                 size=base * 0.75, color=colors.background, bold=True)
        _feature_list(slide, OPTION_B_FEATURES, bx + pad, y + pad + 0.52, 0.38, inner_w, 0.32,
                      font=font, size=base * 0.48, color=colors.background,
                      prefix="•  ", transparency=15)
        return True

    if style.border_thickness >= 2:
        for cx, fill, title, features, text_color in (
            (ax, colors.background, "PLAN A", OPTION_A_FEATURES, colors.neutral),
            (bx, colors.accent, "PLAN B ★", OPTION_B_FEATURES, colors.primary),
        ):
            _shadowed_box(slide, params, cx, y, card_w, card_h, fill=fill,
                          line=colors.primary, line_width=style.border_thickness)
            add_text(slide, fmt(title), cx + pad, y + pad, inner_w, 0.45, font=font,
                     size=base * 0.8, color=colors.primary, bold=True, transparency=title_fade)
            add_line(slide, cx + pad, y + pad + 0.42, inner_w, 0,
                     color=colors.primary, width=style.border_thickness * 0.5)
            _feature_list(slide, features, cx + pad, y + pad + 0.57, 0.4, inner_w, 0.35,
                          font=font, size=base * 0.5, color=text_color, fmt=fmt,
                          transparency=params.fade())
        return True

    if style.chart_style == ChartStyle.MINIMAL:
        add_line(slide, x + card_w + gap / 2, y, 0, card_h,
                 color=colors.neutral, width=0.5, transparency=60, dash=params.dashed)
        add_text(slide, "Option A", ax, y, card_w, 0.35, font=font, size=base * 0.6,
                 color=colors.neutral, transparency=params.fade(30))
        _feature_list(slide, OPTION_A_FEATURES, ax, y + 0.5, 0.35, card_w, 0.3,
                      font=font, size=base * 0.45, color=colors.neutral,
                      transparency=params.fade())
        add_text(slide, "Option B  •  Recommended", bx, y, card_w, 0.35, font=font,
                 size=base * 0.6, color=colors.primary, transparency=title_fade)
        _feature_list(slide, OPTION_B_FEATURES, bx, y + 0.5, 0.35, card_w, 0.3,
                      font=font, size=base * 0.45, color=colors.neutral,
                      transparency=params.fade())
        return True

    _shadowed_box(slide, params, ax, y, card_w, card_h, fill=colors.primary, transparency=92,
                  line=colors.primary if style.border_thickness > 0 else None,
                  line_width=style.border_thickness, radius=corner)
    add_text(slide, fmt("Option A"), ax + pad, y + pad, inner_w, 0.38, font=font,
             size=base * 0.7, color=colors.primary, bold=True, transparency=title_fade)
    _feature_list(slide, OPTION_A_FEATURES, ax + pad, y + pad + 0.42, 0.36, inner_w, 0.3,
                  font=font, size=base * 0.5, color=colors.neutral, prefix="✓  ",
                  transparency=params.fade())

    _shadowed_box(slide, params, bx, y, card_w, card_h, fill=colors.accent, transparency=88,
                  line=colors.accent, line_width=max(style.border_thickness, 2), radius=corner)
    add_text(slide, fmt("Option B") + "  ★ Recommended", bx + pad, y + pad, inner_w, 0.38,
             font=font, size=base * 0.7, color=colors.accent, bold=True)
    _feature_list(slide, OPTION_B_FEATURES, bx + pad, y + pad + 0.42, 0.36, inner_w, 0.3,
                  font=font, size=base * 0.5, color=colors.neutral, prefix="✓  ",
                  transparency=params.fade())
    return True


# ---------------------------------------------------------------------------
# Iconography
# ---------------------------------------------------------------------------

def add_iconography(slide, layout: Layout, colors: ColorTokens, font: str,
                    base: float, params: ExportRenderParams) -> bool:
    """One symbol, label and description per media region; icons cycle after six."""
    regions = [r for r in layout.regions if r.role == RegionRole.MEDIA]
    if not regions:
        return False
    style = params.style
    fmt = style.format_label
    title_fade = params.fade(muted=False)

    for i, region in enumerate(regions):
        symbol, label, desc = SAMPLE_ICONS[i % len(SAMPLE_ICONS)]
        first = i == 0
        x, y, w, h = region_box(region, layout)
        size = min(w, h) * 0.5
        icon_x = x + (w - size) / 2
        icon_y = y + h * 0.08
        below = icon_y + size

        if style.is_card_style:
            _shadowed_box(slide, params, icon_x, icon_y, size, size,
                          fill=colors.accent if first else colors.primary,
                          transparency=0 if first else 10,
                          radius=params.radius(style.element_roundness * 0.15))
            add_text(slide, symbol, icon_x, icon_y, size, size, font=font, size=base * 1.4,
                     color=colors.background, align="center", valign="middle")
            add_text(slide, fmt(label), x, below + params.spacing(0.18), w, 0.35, font=font,
                     size=base * 0.6, color=colors.neutral, bold=True, align="center",
                     transparency=params.fade())
            add_text(slide, desc, x, below + params.spacing(0.18) + 0.34, w, 0.4, font=font,
                     size=base * 0.4, color=colors.neutral, transparency=params.fade(40),
                     align="center")
        elif style.border_thickness >= 2:
            _shadowed_box(slide, params, icon_x, icon_y, size, size,
                          fill=colors.accent if first else colors.background,
                          line=colors.primary, line_width=style.border_thickness)
            add_text(slide, symbol, icon_x, icon_y, size, size, font=font, size=base * 1.3,
                     color=colors.background if first else colors.primary,
                     align="center", valign="middle")
            add_text(slide, fmt(label), x, below + params.spacing(0.15), w, 0.38, font=font,
                     size=base * 0.65, color=colors.primary, bold=True, align="center",
                     transparency=title_fade)
        elif style.chart_style == ChartStyle.MINIMAL:
            add_text(slide, symbol, icon_x, icon_y, size, size, font=font, size=base * 1.5,
                     color=colors.neutral, transparency=params.fade(30),
                     align="center", valign="middle")
            add_text(slide, label, x, below + params.spacing(0.1), w, 0.3, font=font,
                     size=base * 0.5, color=colors.neutral, transparency=params.fade(),
                     align="center")
            add_text(slide, desc, x, below + params.spacing(0.1) + 0.3, w, 0.35, font=font,
                     size=base * 0.38, color=colors.neutral, transparency=params.fade(50),
                     align="center")
        else:
            _shadowed_box(slide, params, icon_x, icon_y, size, size,
                          fill=colors.primary, transparency=88,
                          line=colors.primary if style.border_thickness > 0 else None,
                          line_width=style.border_thickness, ellipse=True)
            add_text(slide, symbol, icon_x, icon_y, size, size, font=font, size=base * 1.2,
                     color=colors.primary, align="center", valign="middle",
                     transparency=title_fade)
            add_text(slide, fmt(label), x, below + params.spacing(0.15), w, 0.35, font=font,
                     size=base * 0.65, color=colors.neutral, bold=True, align="center",
                     transparency=params.fade())
            add_text(slide, desc, x, below + params.spacing(0.15) + 0.35, w, 0.4, font=font,
                     size=base * 0.45, color=colors.neutral, transparency=params.fade(35),
                     align="center")
    return True
