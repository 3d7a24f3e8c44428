"""Style compiler package.

- params.py: Style family and mood lookup tables
- compiler.py: Multiplicative composition into per-render parameters
"""

from .compiler import (
    DESIGN_WIDTH,
    RenderParams,
    adjust_color_intensity,
    clamp_weight,
    combined_intensity,
    compile_render_params,
    compose_spacing,
    is_near_white,
    tinted_background,
    with_alpha,
)
from .params import (
    DEFAULT_MOOD_PARAMS,
    DEFAULT_STYLE_PARAMS,
    ChartStyle,
    DataPointStyle,
    MoodParams,
    StyleParams,
    get_mood_params,
    get_style_params,
)

__all__ = [
    # Tables
    "DEFAULT_MOOD_PARAMS",
    "DEFAULT_STYLE_PARAMS",
    "ChartStyle",
    "DataPointStyle",
    "MoodParams",
    "StyleParams",
    "get_mood_params",
    "get_style_params",
    # Compiler
    "DESIGN_WIDTH",
    "RenderParams",
    "adjust_color_intensity",
    "clamp_weight",
    "combined_intensity",
    "compile_render_params",
    "compose_spacing",
    "is_near_white",
    "tinted_background",
    "with_alpha",
]
