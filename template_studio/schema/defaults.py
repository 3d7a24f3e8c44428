"""Default template - the starting state of every editing session.

Grid system: 12 columns x 9 rows (16:9 slides).  Content sits in columns
1-11 and rows 1-8, with headers in the top third and two-column splits
separated by half a column.  Chart layouts share a single header + media
arrangement; pie and donut use a narrower, centred chart area.

Also holds the per-style-family font stacks and iconography treatments the
editor applies when a style family is selected.
"""

from dataclasses import dataclass

from .models import (
    Bounds,
    ColorTokens,
    ContentType,
    GridConfig,
    Layout,
    LayoutRules,
    LayoutType,
    Radius,
    Region,
    RegionRole,
    Spacing,
    StyleFamily,
    TemplateState,
    Tokens,
    Typography,
    TypographyStyle,
)


# ---------------------------------------------------------------------------
# Style font configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FontConfig:
    title: str
    body: str
    title_weight: int
    body_weight: int


_SYSTEM_SANS = '-apple-system, BlinkMacSystemFont, "Helvetica Neue", Helvetica, Arial, sans-serif'
_MONTSERRAT = 'Montserrat, "Helvetica Neue", Helvetica, Arial, sans-serif'
_INTER = 'Inter, Roboto, "Helvetica Neue", Arial, sans-serif'

STYLE_FONT_CONFIG: dict[StyleFamily, FontConfig] = {
    StyleFamily.CLEAN: FontConfig(_SYSTEM_SANS, _SYSTEM_SANS, 600, 400),
    StyleFamily.EDITORIAL: FontConfig(
        'Playfair Display, Georgia, "Times New Roman", serif',
        'Georgia, "Times New Roman", serif', 700, 400),
    StyleFamily.BOLD: FontConfig(_MONTSERRAT, _MONTSERRAT, 800, 500),
    StyleFamily.MINIMAL: FontConfig(_INTER, _INTER, 300, 300),
    StyleFamily.BRUTALIST: FontConfig(
        '"Courier New", Courier, monospace',
        '"Courier New", Courier, monospace', 700, 400),
    StyleFamily.NEUBRUTALIST: FontConfig(
        '"Space Grotesk", Archivo, "Helvetica Neue", sans-serif',
        '"Space Grotesk", Archivo, "Helvetica Neue", sans-serif', 700, 500),
    StyleFamily.BENTO: FontConfig(
        '-apple-system, BlinkMacSystemFont, "SF Pro Display", system-ui, sans-serif',
        '-apple-system, BlinkMacSystemFont, "SF Pro Text", system-ui, sans-serif', 600, 400),
    StyleFamily.SWISS: FontConfig(
        'Helvetica, "Helvetica Neue", Arial, sans-serif',
        'Helvetica, "Helvetica Neue", Arial, sans-serif', 700, 400),
    StyleFamily.CORPORATE: FontConfig(
        'Calibri, "Segoe UI", Roboto, Arial, sans-serif',
        'Calibri, "Segoe UI", Roboto, Arial, sans-serif', 600, 400),
    # Era-based
    StyleFamily.ARTDECO: FontConfig(
        '"Poiret One", "Playfair Display", Georgia, serif',
        'Montserrat, "Helvetica Neue", Arial, sans-serif', 400, 400),
    StyleFamily.RETRO70S: FontConfig(
        'Righteous, "Cooper Black", Georgia, serif',
        'Poppins, "Segoe UI", Arial, sans-serif', 400, 400),
    StyleFamily.Y2K: FontConfig(
        'Nunito, "Trebuchet MS", Verdana, sans-serif',
        'Nunito, "Trebuchet MS", Verdana, sans-serif', 800, 500),
    # Industry
    StyleFamily.TECH: FontConfig(
        'Inter, Roboto, "Segoe UI", Arial, sans-serif',
        'Inter, Roboto, "Segoe UI", Arial, sans-serif', 600, 400),
    # Design movements
    StyleFamily.BAUHAUS: FontConfig(
        'Montserrat, Futura, "Helvetica Neue", sans-serif',
        'Montserrat, Futura, "Helvetica Neue", sans-serif', 700, 400),
    StyleFamily.MEMPHIS: FontConfig(
        '"Bebas Neue", Impact, "Arial Black", sans-serif',
        'Poppins, "Segoe UI", Arial, sans-serif', 400, 500),
    StyleFamily.SCANDINAVIAN: FontConfig(
        'Raleway, "Work Sans", "Helvetica Neue", sans-serif',
        'Raleway, "Work Sans", "Helvetica Neue", sans-serif', 300, 300),
    # Mood-based
    StyleFamily.FUTURISTIC: FontConfig(
        '"Orbitron", "Roboto Mono", Consolas, monospace',
        'Inter, Roboto, "Segoe UI", sans-serif', 700, 400),
    StyleFamily.ORGANIC: FontConfig(
        'Lora, Georgia, "Times New Roman", serif',
        'Lato, "Open Sans", "Segoe UI", sans-serif', 500, 400),
    StyleFamily.LUXURY: FontConfig(
        '"Playfair Display", Didot, Georgia, serif',
        'Montserrat, "Helvetica Neue", Arial, sans-serif', 600, 400),
    StyleFamily.HANDCRAFTED: FontConfig(
        'Caveat, "Comic Sans MS", cursive',
        'Lato, "Open Sans", Arial, sans-serif', 700, 400),
    StyleFamily.INDUSTRIAL: FontConfig(
        '"Oswald", "Impact", "Arial Black", sans-serif',
        '"Roboto Condensed", "Arial Narrow", Arial, sans-serif', 700, 400),
}


# ---------------------------------------------------------------------------
# Iconography configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IconographyConfig:
    style: str            # outline | solid | duotone | linear | hand-drawn
    stroke_weight: float  # 1-3
    corners: str          # sharp | rounded | soft
    filled: bool
    description: str


STYLE_ICONOGRAPHY: dict[StyleFamily, IconographyConfig] = {
    StyleFamily.CLEAN: IconographyConfig(
        "outline", 1.5, "rounded", False,
        "Simple outlined icons with consistent stroke weight"),
    StyleFamily.EDITORIAL: IconographyConfig(
        "linear", 1, "sharp", False,
        "Elegant thin-line icons with refined details"),
    StyleFamily.BOLD: IconographyConfig(
        "solid", 2, "rounded", True,
        "Strong filled icons with high visual impact"),
    StyleFamily.MINIMAL: IconographyConfig(
        "outline", 1, "rounded", False,
        "Ultra-light outlined icons with minimal detail"),
    StyleFamily.BRUTALIST: IconographyConfig(
        "outline", 3, "sharp", False,
        "Raw thick-stroke icons with hard edges"),
    StyleFamily.NEUBRUTALIST: IconographyConfig(
        "solid", 2.5, "sharp", True,
        "Bold filled icons with thick outlines"),
    StyleFamily.BENTO: IconographyConfig(
        "duotone", 1.5, "soft", True,
        "Two-tone icons with depth and dimension"),
    StyleFamily.SWISS: IconographyConfig(
        "outline", 2, "sharp", False,
        "Geometric icons with precise construction"),
    StyleFamily.CORPORATE: IconographyConfig(
        "outline", 1.5, "rounded", False,
        "Professional icons with balanced proportions"),
    StyleFamily.ARTDECO: IconographyConfig(
        "linear", 1, "sharp", False,
        "Geometric angular icons with Art Deco symmetry"),
    StyleFamily.RETRO70S: IconographyConfig(
        "solid", 2, "soft", True,
        "Rounded groovy icons with organic curves"),
    StyleFamily.Y2K: IconographyConfig(
        "duotone", 2, "soft", True,
        "Glossy 3D-style icons with metallic feel"),
    StyleFamily.TECH: IconographyConfig(
        "outline", 1.5, "rounded", False,
        "Clean tech icons with modern aesthetic"),
    StyleFamily.BAUHAUS: IconographyConfig(
        "solid", 2, "sharp", True,
        "Geometric primary-color icons with Bauhaus simplicity"),
    StyleFamily.MEMPHIS: IconographyConfig(
        "solid", 2.5, "rounded", True,
        "Bold colorful icons with playful Memphis patterns"),
    StyleFamily.SCANDINAVIAN: IconographyConfig(
        "outline", 1, "soft", False,
        "Minimal functional icons with natural simplicity"),
    StyleFamily.FUTURISTIC: IconographyConfig(
        "outline", 1.5, "sharp", False,
        "Sci-fi inspired icons with neon glow aesthetic"),
    StyleFamily.ORGANIC: IconographyConfig(
        "outline", 1.5, "soft", False,
        "Nature-inspired icons with organic flowing lines"),
    StyleFamily.LUXURY: IconographyConfig(
        "linear", 1, "sharp", False,
        "Refined elegant icons with sophisticated detail"),
    StyleFamily.HANDCRAFTED: IconographyConfig(
        "hand-drawn", 2, "soft", False,
        "Sketchy imperfect icons with authentic handmade feel"),
    StyleFamily.INDUSTRIAL: IconographyConfig(
        "solid", 2.5, "sharp", True,
        "Bold utilitarian icons with industrial strength"),
}


# ---------------------------------------------------------------------------
# Tokens and typography
# ---------------------------------------------------------------------------

def default_tokens() -> Tokens:
    return Tokens(
        colors=ColorTokens(
            primary="#0A2A43",
            secondary="#3D6B82",
            neutral="#2B2B2B",
            background="#FFFFFF",
            accent="#E1A73B",
        ),
        spacing=Spacing(base=4, m=12, l=24),
        radius=Radius(sm=2, md=6, lg=12),
    )


def default_typography() -> Typography:
    clean = STYLE_FONT_CONFIG[StyleFamily.CLEAN]
    return Typography(
        title=TypographyStyle(font_family=clean.title, font_size=34,
                              line_height=1.1, weight=clean.title_weight),
        body=TypographyStyle(font_family=clean.body, font_size=14,
                             line_height=1.4, weight=clean.body_weight),
    )


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------

_GRID = (12, 9, 16)
_TITLE_BOUNDS = (1, 1, 10, 1)
_CHART_RULES = ([ContentType.CHART, ContentType.TABLE], 12)


def _region(region_id: str, role: RegionRole, x: float, y: float,
            w: float, h: float) -> Region:
    return Region(id=region_id, role=role, bounds=Bounds(x=x, y=y, w=w, h=h))


def _rules(content_types: list[ContentType], min_font_size: float,
           max_line_count: int | None = None) -> LayoutRules:
    return LayoutRules(min_font_size=min_font_size, max_line_count=max_line_count,
                       content_types=content_types)


def _header() -> Region:
    return _region("title", RegionRole.HEADER, *_TITLE_BOUNDS)


def _grid() -> GridConfig:
    columns, rows, gutter = _GRID
    return GridConfig(columns=columns, rows=rows, gutter=gutter)


def _chart_layout(name: str, layout_type: LayoutType, enabled: bool,
                  centred: bool = False) -> Layout:
    chart_bounds = (2, 2.5, 8, 5.75) if centred else (0.75, 2.5, 10.5, 5.75)
    content_types, min_size = _CHART_RULES
    return Layout(
        name=name,
        type=layout_type,
        grid=_grid(),
        regions=[
            _region("title", RegionRole.HEADER, *_TITLE_BOUNDS),
            _region("chart", RegionRole.MEDIA, *chart_bounds),
        ],
        rules=_rules(content_types, min_size),
        enabled=enabled,
    )


def default_layouts() -> list[Layout]:
    """The eighteen layouts every new template starts with."""
    text = [ContentType.TEXT]

    return [
        Layout("Title Slide", LayoutType.TITLE, _grid(), [
            _region("title", RegionRole.HEADER, 1.5, 3, 9, 2),
            _region("subtitle", RegionRole.BODY, 2, 5.5, 8, 1),
        ], _rules(text, 18, 3)),
        Layout("Section Header", LayoutType.SECTION, _grid(), [
            _region("section-title", RegionRole.HEADER, 1.5, 3.5, 9, 2),
        ], _rules(text, 24, 2)),
        Layout("Agenda", LayoutType.AGENDA, _grid(), [
            _header(),
            _region("items", RegionRole.BODY, 1, 2.5, 10, 5.5),
        ], _rules(text, 14, 10)),
        Layout("Content", LayoutType.CONTENT, _grid(), [
            _header(),
            _region("content", RegionRole.BODY, 1, 2.5, 10, 5.5),
        ], _rules([ContentType.TEXT, ContentType.IMAGE], 12)),
        Layout("Media", LayoutType.MEDIA, _grid(), [
            _header(),
            _region("media", RegionRole.MEDIA, 1, 2.5, 10, 5),
            _region("caption", RegionRole.CAPTION, 1, 7.75, 10, 0.75),
        ], _rules([ContentType.IMAGE, ContentType.CHART], 12)),
        Layout("Comparison", LayoutType.COMPARISON, _grid(), [
            _header(),
            _region("left", RegionRole.BODY, 1, 2.5, 4.75, 5.5),
            _region("right", RegionRole.BODY, 6.25, 2.5, 4.75, 5.5),
        ], _rules([ContentType.TEXT, ContentType.IMAGE], 12)),
        Layout("Timeline", LayoutType.TIMELINE, _grid(), [
            _header(),
            _region("timeline", RegionRole.BODY, 0.5, 2.5, 11, 5.5),
        ], _rules(text, 12)),
        Layout("Quote", LayoutType.QUOTE, _grid(), [
            _region("quote", RegionRole.BODY, 2, 2.5, 8, 3.5),
            _region("attribution", RegionRole.CAPTION, 3, 6.5, 6, 1),
        ], _rules(text, 18, 4)),
        _chart_layout("Bar Chart (Vertical)", LayoutType.DATA_BAR_VERTICAL, True),
        _chart_layout("Bar Chart (Horizontal)", LayoutType.DATA_BAR_HORIZONTAL, False),
        _chart_layout("Line Chart", LayoutType.DATA_LINE, False),
        _chart_layout("Pie Chart", LayoutType.DATA_PIE, False, centred=True),
        _chart_layout("Donut Chart", LayoutType.DATA_DONUT, False, centred=True),
        _chart_layout("Scatter Plot", LayoutType.DATA_SCATTER, False),
        _chart_layout("Area Chart", LayoutType.DATA_AREA, False),
        _chart_layout("Stacked Bar Chart", LayoutType.DATA_STACKED_BAR, False),
        Layout("Iconography", LayoutType.ICONOGRAPHY, _grid(), [
            _header(),
            _region("icon-1", RegionRole.MEDIA, 1, 2.75, 3, 3),
            _region("icon-2", RegionRole.MEDIA, 4.5, 2.75, 3, 3),
            _region("icon-3", RegionRole.MEDIA, 8, 2.75, 3, 3),
            _region("labels", RegionRole.CAPTION, 1, 6.25, 10, 1.5),
        ], _rules([ContentType.IMAGE, ContentType.TEXT], 12)),
        Layout("Appendix", LayoutType.APPENDIX, _grid(), [
            _region("title", RegionRole.HEADER, 1, 0.75, 10, 0.75),
            _region("content", RegionRole.BODY, 1, 1.75, 10, 6.5),
        ], _rules([ContentType.TEXT, ContentType.TABLE], 10), enabled=False),
    ]


def create_initial_state() -> TemplateState:
    """Fresh editing-session state with all defaults applied."""
    return TemplateState(
        id="new-template",
        name="Untitled Template",
        version="1.0.0",
        tokens=default_tokens(),
        typography=default_typography(),
        layouts=default_layouts(),
        accents=[],
    )
