"""Color package - WCAG contrast checks and harmony-based palette generation."""

from .contrast import (
    WCAG_AA_LARGE_TEXT,
    WCAG_AA_NORMAL_TEXT,
    ContrastIssue,
    InvalidColorFormat,
    contrast_ratio,
    meets_aa,
    meets_aa_large,
    parse_hex,
    relative_luminance,
    suggest_contrast_adjustment,
    validate_color_contrast,
)
from .harmony import (
    HSL,
    ColorMood,
    GeneratedPalette,
    HarmonyMode,
    ensure_contrast,
    generate_from_primary_with_metadata,
    generate_from_seed,
    generate_palette,
    hex_to_hsl,
    hsl_to_hex,
)

__all__ = [
    # Contrast
    "WCAG_AA_LARGE_TEXT",
    "WCAG_AA_NORMAL_TEXT",
    "ContrastIssue",
    "InvalidColorFormat",
    "contrast_ratio",
    "meets_aa",
    "meets_aa_large",
    "parse_hex",
    "relative_luminance",
    "suggest_contrast_adjustment",
    "validate_color_contrast",
    # Harmony
    "HSL",
    "ColorMood",
    "GeneratedPalette",
    "HarmonyMode",
    "ensure_contrast",
    "generate_from_primary_with_metadata",
    "generate_from_seed",
    "generate_palette",
    "hex_to_hsl",
    "hsl_to_hex",
]
