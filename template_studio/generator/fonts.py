"""Font fallback table for exported documents.

Lookup is a case-insensitive exact match on the family name.  CSS font
stacks (``"Inter, -apple-system, sans-serif"``) are not split; anything not
in the table resolves to :data:`DEFAULT_FALLBACK`.
"""

from dataclasses import dataclass

from ..schema.models import ExportFormat

DEFAULT_FALLBACK = "Arial"


@dataclass(frozen=True)
class FontFallback:
    original: str
    fallback: str
    platform: ExportFormat = ExportFormat.PPTX


FONT_FALLBACKS: tuple[FontFallback, ...] = (
    FontFallback("Arial", "Arial"),
    FontFallback("Helvetica", "Arial"),
    FontFallback("Avenir Next", "Calibri"),
    FontFallback("SF Pro Display", "Segoe UI"),
    FontFallback("Georgia", "Georgia"),
    FontFallback("Times New Roman", "Times New Roman"),
)


def resolve_font_fallback(font_family: str,
                          platform: ExportFormat | str = ExportFormat.PPTX) -> str:
    """Return the export-safe family for *font_family* on *platform*."""
    platform = ExportFormat(platform)
    wanted = font_family.strip().lower()
    for entry in FONT_FALLBACKS:
        if entry.platform == platform and entry.original.lower() == wanted:
            return entry.fallback
    return DEFAULT_FALLBACK
