"""Style family and mood parameter tables.

Each style family and each mood maps to one literal parameter record.  The
families are independently authored presets; nothing is inherited between
them.  Lookups are total: an unrecognized value gets the default record.
"""

from dataclasses import dataclass, fields
from enum import Enum

from ..schema.models import MoodPreset, StyleFamily


class ChartStyle(Enum):
    FILLED = "filled"
    OUTLINED = "outlined"
    MINIMAL = "minimal"
    GRADIENT = "gradient"
    STACKED = "stacked"


class DataPointStyle(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"
    NONE = "none"


@dataclass(frozen=True)
class StyleParams:
    """Visual parameters for one style family (preview pixel domain)."""
    # Typography
    title_weight_multiplier: float
    body_weight_multiplier: float
    letter_spacing: float            # -0.05 to 0.2 em
    text_transform: str              # none | uppercase | lowercase

    # Spacing and layout
    spacing_multiplier: float
    grid_visible: bool
    asymmetric: bool

    # Visual elements
    accent_thickness: float
    accent_opacity: float
    element_roundness: float         # 0 sharp, 1 rounded, 2+ pill/blob
    decorative_elements: bool
    line_thickness: float

    # Effects
    shadow_offset: float             # 0 = no offset shadow
    shadow_color: str
    border_thickness: float
    use_gradients: bool

    # Charts
    chart_style: ChartStyle
    data_point_style: DataPointStyle

    @property
    def label_style(self) -> str:
        return "uppercase" if self.text_transform == "uppercase" else "normal"

    def to_dict(self) -> dict:
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[f.name] = value.value if isinstance(value, Enum) else value
        return out


def _style(tw, bw, ls, tt, sm, grid, asym, at, ao, rnd, deco, lt,
           so, sc, bt, grad, chart, point) -> StyleParams:
    return StyleParams(
        title_weight_multiplier=tw, body_weight_multiplier=bw,
        letter_spacing=ls, text_transform=tt,
        spacing_multiplier=sm, grid_visible=grid, asymmetric=asym,
        accent_thickness=at, accent_opacity=ao, element_roundness=rnd,
        decorative_elements=deco, line_thickness=lt,
        shadow_offset=so, shadow_color=sc, border_thickness=bt,
        use_gradients=grad,
        chart_style=ChartStyle(chart), data_point_style=DataPointStyle(point),
    )


_NO_SHADOW = "transparent"

_STYLE_PARAMS: dict[StyleFamily, StyleParams] = {
    StyleFamily.CLEAN: _style(
        1.0, 1.0, 0, "none", 1.0, False, False, 2, 0.8, 1.0, False, 1.5,
        0, _NO_SHADOW, 0, False, "filled", "circle"),
    StyleFamily.EDITORIAL: _style(
        1.4, 0.85, 0.1, "uppercase", 0.9, False, True, 4, 1.0, 0, True, 3,
        0, _NO_SHADOW, 2, False, "outlined", "square"),
    StyleFamily.BOLD: _style(
        1.6, 1.2, -0.02, "uppercase", 0.85, False, False, 6, 1.0, 0.5, True, 4,
        0, _NO_SHADOW, 0, True, "gradient", "circle"),
    StyleFamily.MINIMAL: _style(
        0.8, 0.8, 0.15, "none", 1.5, False, False, 1, 0.4, 0, False, 0.5,
        0, _NO_SHADOW, 0.5, False, "minimal", "none"),
    StyleFamily.BRUTALIST: _style(
        1.8, 1.0, -0.05, "uppercase", 0.7, True, True, 8, 1.0, 0, True, 5,
        0, _NO_SHADOW, 4, False, "outlined", "square"),
    StyleFamily.NEUBRUTALIST: _style(
        1.5, 1.1, 0, "none", 0.9, False, False, 5, 1.0, 0.3, True, 3,
        4, "#000000", 3, False, "filled", "square"),
    StyleFamily.BENTO: _style(
        1.1, 1.0, 0, "none", 0.8, False, True, 0, 0, 1.5, False, 0,
        0, _NO_SHADOW, 0, True, "filled", "circle"),
    StyleFamily.SWISS: _style(
        1.2, 1.0, 0.05, "none", 1.0, True, False, 2, 1.0, 0, False, 2,
        0, _NO_SHADOW, 1, False, "outlined", "circle"),
    StyleFamily.CORPORATE: _style(
        1.1, 1.0, 0.02, "none", 1.1, False, False, 3, 0.9, 0.5, False, 2,
        2, "rgba(0,0,0,0.1)", 1, False, "stacked", "circle"),
    # Era styles
    StyleFamily.ARTDECO: _style(
        1.3, 0.9, 0.15, "uppercase", 1.0, False, False, 3, 1.0, 0, True, 2,
        0, _NO_SHADOW, 2, True, "outlined", "diamond"),
    StyleFamily.RETRO70S: _style(
        1.4, 1.1, 0, "none", 0.9, False, True, 5, 1.0, 2.0, True, 4,
        3, "rgba(0,0,0,0.15)", 3, True, "filled", "circle"),
    StyleFamily.Y2K: _style(
        1.2, 1.0, 0.05, "none", 0.95, False, True, 2, 0.9, 1.5, True, 2,
        2, "rgba(0,0,0,0.1)", 1, True, "gradient", "circle"),
    # Industry styles
    StyleFamily.TECH: _style(
        1.0, 0.95, 0.03, "none", 1.0, True, False, 2, 0.8, 0.3, False, 1.5,
        0, _NO_SHADOW, 1, False, "filled", "circle"),
    # Design movements
    StyleFamily.BAUHAUS: _style(
        1.4, 1.0, 0.1, "uppercase", 1.0, True, True, 4, 1.0, 0, True, 3,
        0, _NO_SHADOW, 3, False, "filled", "square"),
    StyleFamily.MEMPHIS: _style(
        1.3, 1.0, 0.05, "none", 0.9, False, True, 4, 1.0, 0.8, True, 3,
        4, "#000000", 3, False, "filled", "square"),
    StyleFamily.SCANDINAVIAN: _style(
        0.9, 0.9, 0.08, "none", 1.4, False, False, 1, 0.5, 0.8, False, 1,
        0, _NO_SHADOW, 0, False, "minimal", "none"),
    # Mood-led styles
    StyleFamily.FUTURISTIC: _style(
        1.2, 1.0, 0.1, "uppercase", 1.0, True, True, 2, 1.0, 0.2, True, 2,
        0, _NO_SHADOW, 1, True, "gradient", "circle"),
    StyleFamily.ORGANIC: _style(
        1.0, 0.95, 0.02, "none", 1.2, False, True, 3, 0.7, 2.5, False, 2,
        1, "rgba(0,0,0,0.08)", 0, True, "filled", "circle"),
    StyleFamily.LUXURY: _style(
        0.85, 0.85, 0.2, "uppercase", 1.5, False, False, 1, 0.6, 0.4, False, 0.75,
        1, "rgba(0,0,0,0.05)", 0.5, False, "minimal", "none"),
    StyleFamily.HANDCRAFTED: _style(
        1.1, 1.0, 0, "none", 1.1, False, True, 3, 0.9, 1.0, True, 2.5,
        2, "rgba(0,0,0,0.1)", 2, False, "filled", "circle"),
    StyleFamily.INDUSTRIAL: _style(
        1.5, 1.1, 0.05, "uppercase", 0.85, True, False, 6, 1.0, 0, False, 4,
        0, _NO_SHADOW, 4, False, "outlined", "square"),
}

DEFAULT_STYLE_PARAMS = _style(
    1.0, 1.0, 0, "none", 1.0, False, False, 2, 0.8, 1.0, False, 1.5,
    0, _NO_SHADOW, 0, False, "filled", "circle")


def get_style_params(style_family: StyleFamily | str) -> StyleParams:
    """Look up the parameter record for a style family.

    Accepts the enum or its wire string.  Unknown values get
    ``DEFAULT_STYLE_PARAMS`` rather than an error.
    """
    if isinstance(style_family, str):
        try:
            style_family = StyleFamily(style_family)
        except ValueError:
            return DEFAULT_STYLE_PARAMS
    return _STYLE_PARAMS.get(style_family, DEFAULT_STYLE_PARAMS)


# ---------------------------------------------------------------------------
# Mood
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MoodParams:
    """Color, spacing and depth adjustments for one mood."""
    color_intensity: float           # opacity multiplier, not a hue shift
    accent_emphasis: float
    element_scale: float
    shadow_intensity: float          # 0-1
    line_style: str                  # sharp | soft
    spacing_modifier: float
    saturation_shift: float          # -50 to +50
    background_tint: str             # only used on near-white backgrounds
    corner_radius_multiplier: float
    stroke_dasharray: str            # "none" or an SVG dash pattern

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_MOOD_PARAMS: dict[MoodPreset, MoodParams] = {
    # Relaxed, muted, soft
    MoodPreset.CALM: MoodParams(0.7, 0.6, 0.9, 0.08, "soft", 1.3, -20, "#F5F5F0", 1.5, "none"),
    # Vibrant, dynamic
    MoodPreset.ENERGETIC: MoodParams(1.3, 1.6, 1.2, 0.45, "sharp", 0.8, 25, "#FFFFFF", 0.5, "none"),
    # Refined, elegant
    MoodPreset.PREMIUM: MoodParams(0.85, 1.2, 1.05, 0.2, "soft", 1.2, -5, "#FAFAF8", 0.8, "none"),
    # Precise, data-focused
    MoodPreset.TECHNICAL: MoodParams(1.0, 0.85, 0.95, 0.05, "sharp", 0.95, -10, "#F8FAFC", 0.3, "4 2"),
}

DEFAULT_MOOD_PARAMS = MoodParams(1.0, 1.0, 1.0, 0.2, "sharp", 1.0, 0, "#FFFFFF", 1.0, "none")


def get_mood_params(mood: MoodPreset | str) -> MoodParams:
    """Look up the parameter record for a mood; unknown values get the default."""
    if isinstance(mood, str):
        try:
            mood = MoodPreset(mood)
        except ValueError:
            return DEFAULT_MOOD_PARAMS
    return _MOOD_PARAMS.get(mood, DEFAULT_MOOD_PARAMS)
