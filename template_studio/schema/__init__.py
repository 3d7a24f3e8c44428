"""Template schema package - typed models for brand templates.

Provides the contract between the editing store, the style compiler, and
both renderers:

- models.py: Core dataclasses (Template, TemplateState, Layout, Region, etc.)
- defaults.py: Initial session state, default layouts, per-style fonts
- loader.py: YAML template files and JSON style presets
- validation.py: Bounds checks for raw template documents
"""

from .defaults import (
    STYLE_FONT_CONFIG,
    STYLE_ICONOGRAPHY,
    create_initial_state,
    default_layouts,
)
from .loader import (
    load_style_preset,
    load_template,
    save_style_preset,
    save_template,
)
from .models import (
    COLOR_ROLES,
    Accent,
    AccentType,
    Bounds,
    ChartType,
    ColorTokens,
    ExportFormat,
    GridConfig,
    Layout,
    LayoutRules,
    LayoutType,
    MoodPreset,
    Radius,
    Region,
    RegionRole,
    Spacing,
    StyleFamily,
    StylePreset,
    Template,
    TemplateState,
    Tokens,
    Typography,
    TypographyStyle,
)
from .validation import validate_template_document

__all__ = [
    # Models
    "COLOR_ROLES",
    "Accent",
    "AccentType",
    "Bounds",
    "ChartType",
    "ColorTokens",
    "ExportFormat",
    "GridConfig",
    "Layout",
    "LayoutRules",
    "LayoutType",
    "MoodPreset",
    "Radius",
    "Region",
    "RegionRole",
    "Spacing",
    "StyleFamily",
    "StylePreset",
    "Template",
    "TemplateState",
    "Tokens",
    "Typography",
    "TypographyStyle",
    # Defaults
    "STYLE_FONT_CONFIG",
    "STYLE_ICONOGRAPHY",
    "create_initial_state",
    "default_layouts",
    # Loader
    "load_style_preset",
    "load_template",
    "save_style_preset",
    "save_template",
    # Validation
    "validate_template_document",
]
