"""Style parameters for the exported document (inch/point domain).

The family table is independent of :mod:`template_studio.style.params`,
which drives the pixel-domain preview.  Both tables are total over
:class:`StyleFamily`.  :func:`compile_export_params` composes the family
record with the mood and the user knobs through the same factors the
preview compiler uses, so spacing, corner radii, text and accent opacity and
the background tint agree between the two outputs.
"""

from dataclasses import dataclass

from ..schema.models import StyleFamily
from ..style.compiler import combined_intensity, compose_spacing, tinted_background
from ..style.params import (
    ChartStyle,
    DataPointStyle,
    MoodParams,
    get_mood_params,
    get_style_params,
)


@dataclass(frozen=True)
class ExportStyleParams:
    # Shapes
    element_roundness: float         # 0 sharp corners
    border_thickness: float          # points
    shadow_offset: float             # 0 = none
    use_gradients: bool

    # Charts
    chart_style: ChartStyle
    bar_gap: float

    # Lines
    line_thickness: float
    line_style: str                  # solid | dashed

    accent_thickness: float
    decorative_elements: bool
    label_style: str                 # normal | uppercase | small

    def format_label(self, label: str) -> str:
        return label.upper() if self.label_style == "uppercase" else label

    @property
    def is_card_style(self) -> bool:
        """Filled, clearly rounded styles render as cards (bento and friends)."""
        return self.chart_style == ChartStyle.FILLED and self.element_roundness > 0.2


def _p(rnd, border, shadow, grad, chart, gap, line, line_style, accent, deco, label):
    return ExportStyleParams(
        element_roundness=rnd, border_thickness=border, shadow_offset=shadow,
        use_gradients=grad, chart_style=ChartStyle(chart), bar_gap=gap,
        line_thickness=line, line_style=line_style, accent_thickness=accent,
        decorative_elements=deco, label_style=label,
    )


_EXPORT_STYLE_PARAMS: dict[StyleFamily, ExportStyleParams] = {
    StyleFamily.CLEAN: _p(0.15, 0, 0, False, "filled", 0.3, 1.5, "solid", 2, False, "normal"),
    StyleFamily.EDITORIAL: _p(0, 2, 0, False, "outlined", 0.4, 3, "solid", 4, True, "uppercase"),
    StyleFamily.BOLD: _p(0.1, 0, 0, True, "gradient", 0.25, 4, "solid", 6, True, "uppercase"),
    StyleFamily.MINIMAL: _p(0, 0.5, 0, False, "minimal", 0.5, 0.75, "solid", 1, False, "small"),
    StyleFamily.BRUTALIST: _p(0, 4, 0, False, "outlined", 0.15, 5, "solid", 8, True, "uppercase"),
    StyleFamily.NEUBRUTALIST: _p(0.08, 3, 4, False, "filled", 0.2, 3, "solid", 5, True, "normal"),
    StyleFamily.BENTO: _p(0.25, 0, 0, True, "filled", 0.35, 0, "solid", 0, False, "normal"),
    StyleFamily.SWISS: _p(0, 1, 0, False, "outlined", 0.3, 2, "solid", 2, False, "normal"),
    StyleFamily.CORPORATE: _p(0.1, 1, 2, False, "stacked", 0.25, 2, "solid", 3, False, "normal"),
    # Era styles
    StyleFamily.ARTDECO: _p(0, 2, 0, True, "outlined", 0.35, 2, "solid", 3, True, "uppercase"),
    StyleFamily.RETRO70S: _p(0.4, 3, 3, True, "filled", 0.2, 4, "solid", 5, True, "normal"),
    StyleFamily.Y2K: _p(0.3, 1, 2, True, "gradient", 0.25, 2, "solid", 2, True, "normal"),
    # Industry
    StyleFamily.TECH: _p(0.05, 1, 0, False, "filled", 0.2, 1.5, "solid", 2, False, "small"),
    # Design movements
    StyleFamily.BAUHAUS: _p(0, 3, 0, False, "filled", 0.3, 3, "solid", 4, True, "uppercase"),
    StyleFamily.MEMPHIS: _p(0.2, 3, 4, False, "filled", 0.25, 3, "dashed", 4, True, "normal"),
    StyleFamily.SCANDINAVIAN: _p(0.15, 0, 0, False, "minimal", 0.4, 1, "solid", 1, False, "small"),
    # Mood-led styles
    StyleFamily.FUTURISTIC: _p(0.05, 1, 0, True, "gradient", 0.3, 2, "solid", 2, True, "uppercase"),
    StyleFamily.ORGANIC: _p(0.5, 0, 1, True, "filled", 0.35, 2, "solid", 3, False, "normal"),
    StyleFamily.LUXURY: _p(0.08, 0.5, 1, False, "minimal", 0.45, 0.75, "solid", 1, False, "small"),
    StyleFamily.HANDCRAFTED: _p(0.2, 2, 2, False, "filled", 0.3, 2.5, "solid", 3, True, "normal"),
    StyleFamily.INDUSTRIAL: _p(0, 4, 0, False, "outlined", 0.15, 4, "solid", 6, False, "uppercase"),
}

DEFAULT_EXPORT_STYLE_PARAMS = _p(0.1, 1, 0, False, "filled", 0.3, 2, "solid", 2, False, "normal")


def get_export_style_params(style_family: StyleFamily | str | None) -> ExportStyleParams:
    """Export parameters for *style_family*; None and unknown names get the defaults."""
    if style_family is None:
        return DEFAULT_EXPORT_STYLE_PARAMS
    if isinstance(style_family, str):
        try:
            style_family = StyleFamily(style_family)
        except ValueError:
            return DEFAULT_EXPORT_STYLE_PARAMS
    return _EXPORT_STYLE_PARAMS.get(style_family, DEFAULT_EXPORT_STYLE_PARAMS)


# ---------------------------------------------------------------------------
# Composition with the mood and user knobs
# ---------------------------------------------------------------------------

def _transparency(opacity: float) -> float:
    """0-1 opacity as a 0-100 transparency percentage."""
    return (1 - max(0.0, min(opacity, 1.0))) * 100


def _shadow_transparency(shadow_color: str) -> float:
    """'#000000' is a hard shadow; 'rgba(0,0,0,a)' keeps its alpha."""
    if shadow_color.startswith("rgba("):
        return _transparency(float(shadow_color[5:-1].split(",")[3]))
    if shadow_color == "transparent":
        return 100
    return 0


@dataclass(frozen=True)
class ExportRenderParams:
    """Export parameters for one template.

    The family record composed with the mood and the density and contrast
    knobs, using the same factors as the preview compiler.
    """
    style: ExportStyleParams
    mood: MoodParams
    background: str                  # mood tint on near-white backgrounds
    spacing_multiplier: float        # density x style spacing x mood spacing
    combined_intensity: float        # contrast factor x mood intensity
    accent_opacity: float            # style accent opacity x min(intensity, 1)
    accent_thickness: float          # points, scaled by mood accent emphasis
    radius_multiplier: float
    shadow_transparency: float
    dashed: bool
    data_point_style: DataPointStyle

    @property
    def text_transparency(self) -> float:
        return _transparency(min(self.combined_intensity, 1))

    @property
    def muted_transparency(self) -> float:
        """Body text dims slightly more than titles, as in the preview."""
        if self.combined_intensity >= 1:
            return 0
        return _transparency(self.combined_intensity * 0.95)

    @property
    def accent_transparency(self) -> float:
        return _transparency(self.accent_opacity)

    def spacing(self, inches: float) -> float:
        return inches * self.spacing_multiplier

    def radius(self, inches: float) -> float:
        return inches * self.radius_multiplier

    def fade(self, transparency: float = 0, muted: bool = True) -> float:
        """Compose a local text transparency with the intensity dimming."""
        dim = self.muted_transparency if muted else self.text_transparency
        return 100 - (100 - transparency) * (100 - dim) / 100


def compile_export_params(template) -> ExportRenderParams:
    """Resolve the export parameters of *template*.

    Plain templates carry no knobs; they export as the ``clean`` family with
    the default mood, density 1 and contrast 50.
    """
    family = getattr(template, "style_family", None) or StyleFamily.CLEAN
    style = get_export_style_params(family)
    preview = get_style_params(family)
    mood = get_mood_params(getattr(template, "mood", None))
    combined = combined_intensity(getattr(template, "contrast_level", 50), mood)

    return ExportRenderParams(
        style=style,
        mood=mood,
        background=tinted_background(template.tokens.colors.background, mood),
        spacing_multiplier=compose_spacing(
            getattr(template, "spacing_density", 1.0), preview, mood),
        combined_intensity=combined,
        accent_opacity=preview.accent_opacity * min(combined, 1),
        accent_thickness=style.accent_thickness * mood.accent_emphasis,
        radius_multiplier=mood.corner_radius_multiplier,
        shadow_transparency=_shadow_transparency(preview.shadow_color),
        dashed=mood.stroke_dasharray != "none",
        data_point_style=preview.data_point_style,
    )
