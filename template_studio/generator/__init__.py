"""Document generator package - PPTX export of brand templates.

Modules:
    pptx_builder: TemplateExporter, master layouts and region population
    charts: Native chart builders (bar, line, area, pie, donut, scatter, stacked)
    content: Timeline, comparison and iconography shapes
    fonts: Export font fallback table
    style: Inch-domain style parameters, composed with mood and user knobs
    results: ExportResult, warnings, errors and metrics
"""

from .charts import add_data_chart, chart_region
from .content import ICON_LIBRARY, add_comparison, add_iconography, add_timeline
from .fonts import DEFAULT_FALLBACK, FONT_FALLBACKS, FontFallback, resolve_font_fallback
from .pptx_builder import TemplateExporter, export_template
from .results import (
    AdapterCapabilities,
    ExportError,
    ExportMetrics,
    ExportResult,
    ExportWarning,
)
from .style import (
    ExportRenderParams,
    ExportStyleParams,
    compile_export_params,
    get_export_style_params,
)

__all__ = [
    # Exporter
    "TemplateExporter",
    "export_template",
    # Results
    "AdapterCapabilities",
    "ExportError",
    "ExportMetrics",
    "ExportResult",
    "ExportWarning",
    # Fonts
    "DEFAULT_FALLBACK",
    "FONT_FALLBACKS",
    "FontFallback",
    "resolve_font_fallback",
    # Styling
    "ExportRenderParams",
    "ExportStyleParams",
    "compile_export_params",
    "get_export_style_params",
    # Content
    "ICON_LIBRARY",
    "add_data_chart",
    "chart_region",
    "add_comparison",
    "add_iconography",
    "add_timeline",
]
