"""Style compiler - expands template knobs into concrete render parameters.

Every compound property is a product of independent factors, never an
override:

    spacing        = tokens.spacing.base x density x style.spacing x mood.spacing x scale
    accent opacity = style.accent_opacity x min(contrast x mood.intensity, 1)
    corner radius  = tokens.radius.md x style.roundness x mood.radius x scale

``scale`` is ``target_width / 960``; 960px is the canonical design width.
"""

from dataclasses import dataclass

from ..color.contrast import parse_hex
from ..schema.models import ColorTokens, TemplateState
from .params import MoodParams, StyleParams, get_mood_params, get_style_params

DESIGN_WIDTH = 960


def clamp_weight(weight: float) -> int:
    """Round to the nearest hundred and clamp to the CSS range 100-900."""
    # Python rounds half to even; CSS weights round half up
    return max(100, min(900, int(weight / 100 + 0.5) * 100))


def adjust_color_intensity(hex_color: str, intensity: float) -> str:
    """Express a mood intensity as an alpha suffix on '#RRGGBB'.

    Intensity is clamped to 0.5-1.5; anything at or above 1 returns the color
    unchanged.
    """
    clamped = max(0.5, min(1.5, intensity))
    if clamped >= 1:
        return hex_color
    return f"{hex_color}{round(clamped * 255):02X}"


def is_near_white(hex_color: str) -> bool:
    """True when every RGB channel is above 240."""
    return all(c > 240 for c in parse_hex(hex_color))


def alpha_hex(fraction: float) -> str:
    """Two-digit lowercase alpha for an opacity fraction, capped at ff."""
    return f"{min(round(fraction * 255), 255):02x}"


def with_alpha(color: str, fraction: float) -> str:
    """Scale the opacity of '#RRGGBB' or '#RRGGBBAA' by *fraction*.

    An existing alpha suffix is multiplied, never appended to.
    """
    current = int(color[7:9], 16) / 255 if len(color) == 9 else 1.0
    return color[:7] + alpha_hex(current * fraction)


# ---------------------------------------------------------------------------
# Shared factors (preview and export)
# ---------------------------------------------------------------------------

def tinted_background(background: str, mood: MoodParams) -> str:
    """The mood's tint replaces near-white backgrounds only."""
    if is_near_white(background) and mood.background_tint != "#FFFFFF":
        return mood.background_tint
    return background


def combined_intensity(contrast_level: float, mood: MoodParams) -> float:
    """contrast factor x mood color intensity, unclamped."""
    return contrast_level / 50 * mood.color_intensity


def compose_spacing(spacing_density: float, style: StyleParams, mood: MoodParams) -> float:
    return spacing_density * style.spacing_multiplier * mood.spacing_modifier


@dataclass(frozen=True)
class RenderParams:
    """Fully resolved parameters for one render at one target size."""
    width: float
    height: float
    scale: float
    style: StyleParams
    mood: MoodParams
    colors: ColorTokens

    spacing_multiplier: float
    base_spacing: float
    type_scale_factor: float

    background: str                  # mood tint on near-white backgrounds
    title_weight: int
    body_weight: int
    title_font: str
    body_font: str
    title_font_size: float
    body_font_size: float

    contrast_factor: float
    combined_intensity: float
    accent_thickness: float
    accent_opacity: float
    line_thickness: float
    element_radius: float
    element_scale: float
    stroke_dasharray: str

    primary_text: str                # primary with intensity alpha when dimmed
    neutral_text: str


def compile_render_params(state: TemplateState, width: float, height: float) -> RenderParams:
    """Resolve the style, mood and user knobs of *state* for a target size.

    Parameters
    ----------
    state : TemplateState
        Supplies tokens, typography and the presentation knobs.  Nothing
        else is read.
    width, height : float
        Target canvas size in pixels.

    Returns
    -------
    RenderParams
    """
    style = get_style_params(state.style_family)
    mood = get_mood_params(state.mood)
    colors = state.tokens.colors
    title = state.typography.title
    body = state.typography.body

    scale = width / DESIGN_WIDTH
    spacing_multiplier = compose_spacing(state.spacing_density, style, mood)
    base_spacing = state.tokens.spacing.base * spacing_multiplier * scale
    type_scale_factor = state.type_scale / 1.25
    background = tinted_background(colors.background, mood)

    contrast_factor = state.contrast_level / 50
    combined = combined_intensity(state.contrast_level, mood)

    if combined < 1:
        primary_text = colors.primary + alpha_hex(combined)
        neutral_text = colors.neutral + alpha_hex(combined * 0.95)
    else:
        primary_text = colors.primary
        neutral_text = colors.neutral

    return RenderParams(
        width=width,
        height=height,
        scale=scale,
        style=style,
        mood=mood,
        colors=colors,
        spacing_multiplier=spacing_multiplier,
        base_spacing=base_spacing,
        type_scale_factor=type_scale_factor,
        background=background,
        title_weight=clamp_weight(title.weight * style.title_weight_multiplier),
        body_weight=clamp_weight(body.weight * style.body_weight_multiplier),
        title_font=title.font_family,
        body_font=body.font_family,
        title_font_size=title.font_size * scale * type_scale_factor * mood.element_scale,
        body_font_size=body.font_size * scale,
        contrast_factor=contrast_factor,
        combined_intensity=combined,
        accent_thickness=style.accent_thickness * scale * mood.accent_emphasis,
        accent_opacity=style.accent_opacity * min(combined, 1),
        line_thickness=style.line_thickness * scale,
        element_radius=(state.tokens.radius.md * style.element_roundness
                        * mood.corner_radius_multiplier * scale),
        element_scale=mood.element_scale,
        stroke_dasharray=mood.stroke_dasharray,
        primary_text=primary_text,
        neutral_text=neutral_text,
    )
