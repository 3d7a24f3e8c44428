"""Template models - the contract between the editor, the previewer, and the exporter.

Defines the typed structure of a brand template: color/spacing/radius tokens,
typography, the grid layouts that make up a deck, and the presentation-only
knobs (style family, mood, density, type scale, contrast) that the style
compiler expands into concrete visual parameters.

Dictionary forms use the camelCase keys of the persisted JSON/YAML documents
so files written by other tools load unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class StyleFamily(Enum):
    """Named aesthetic presets controlling shape, border, shadow and chart choices."""
    CLEAN = "clean"                  # Apple-inspired hierarchy
    EDITORIAL = "editorial"          # Magazine typography
    BOLD = "bold"                    # High-impact, gradients
    MINIMAL = "minimal"              # Sparse, thin lines
    BRUTALIST = "brutalist"          # Raw, thick borders
    NEUBRUTALIST = "neubrutalist"    # Offset shadows, thick outlines
    BENTO = "bento"                  # Modular rounded cards
    SWISS = "swiss"                  # Grid precision
    CORPORATE = "corporate"          # Structured, professional
    ARTDECO = "artdeco"
    RETRO70S = "retro70s"
    Y2K = "y2k"
    TECH = "tech"
    BAUHAUS = "bauhaus"
    MEMPHIS = "memphis"
    SCANDINAVIAN = "scandinavian"
    FUTURISTIC = "futuristic"
    ORGANIC = "organic"
    LUXURY = "luxury"
    HANDCRAFTED = "handcrafted"
    INDUSTRIAL = "industrial"


class MoodPreset(Enum):
    """Orthogonal color/spacing/shadow adjustment preset."""
    CALM = "calm"
    ENERGETIC = "energetic"
    PREMIUM = "premium"
    TECHNICAL = "technical"


class LayoutType(Enum):
    """Slide archetypes a template can provide."""
    TITLE = "title"
    SECTION = "section"
    AGENDA = "agenda"
    CONTENT = "content"
    MEDIA = "media"
    COMPARISON = "comparison"
    TIMELINE = "timeline"
    QUOTE = "quote"
    DATA = "data"                                # Legacy chart layout, style-driven
    DATA_BAR_VERTICAL = "data-bar-vertical"
    DATA_BAR_HORIZONTAL = "data-bar-horizontal"
    DATA_LINE = "data-line"
    DATA_PIE = "data-pie"
    DATA_DONUT = "data-donut"
    DATA_SCATTER = "data-scatter"
    DATA_AREA = "data-area"
    DATA_STACKED_BAR = "data-stacked-bar"
    ICONOGRAPHY = "iconography"
    APPENDIX = "appendix"

    @property
    def is_chart(self) -> bool:
        return self.value == "data" or self.value.startswith("data-")


class ChartType(Enum):
    """Chart kinds used by the data-visualization layouts."""
    BAR_VERTICAL = "bar-vertical"
    BAR_HORIZONTAL = "bar-horizontal"
    LINE = "line"
    PIE = "pie"
    DONUT = "donut"
    SCATTER = "scatter"
    AREA = "area"
    STACKED_BAR = "stacked-bar"


class RegionRole(Enum):
    """Semantic role of a layout region."""
    HEADER = "header"
    BODY = "body"
    FOOTER = "footer"
    MEDIA = "media"
    CAPTION = "caption"


class ContentType(Enum):
    TEXT = "text"
    IMAGE = "image"
    CHART = "chart"
    TABLE = "table"


class AccentType(Enum):
    SHAPE = "shape"
    LINE = "line"
    PATTERN = "pattern"
    GRADIENT = "gradient"
    ICON_SET = "iconSet"


class ExportFormat(Enum):
    PPTX = "pptx"


COLOR_ROLES = ("primary", "secondary", "neutral", "background", "accent")


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

@dataclass
class ColorTokens:
    """The five brand color roles, each '#RRGGBB'."""
    primary: str
    secondary: str
    neutral: str
    background: str
    accent: str

    def to_dict(self) -> dict:
        return {role: getattr(self, role) for role in COLOR_ROLES}

    @classmethod
    def from_dict(cls, d: dict) -> "ColorTokens":
        return cls(**{role: d[role] for role in COLOR_ROLES})


@dataclass
class Spacing:
    """Spacing scale in pixels at the 960px design width."""
    base: float = 4
    m: float = 12
    l: float = 24

    def to_dict(self) -> dict:
        return {"base": self.base, "m": self.m, "l": self.l}

    @classmethod
    def from_dict(cls, d: dict) -> "Spacing":
        return cls(base=d.get("base", 4), m=d.get("m", 12), l=d.get("l", 24))


@dataclass
class Radius:
    """Corner-radius scale."""
    sm: float = 2
    md: float = 6
    lg: float = 12

    def to_dict(self) -> dict:
        return {"sm": self.sm, "md": self.md, "lg": self.lg}

    @classmethod
    def from_dict(cls, d: dict) -> "Radius":
        return cls(sm=d.get("sm", 2), md=d.get("md", 6), lg=d.get("lg", 12))


@dataclass
class Tokens:
    colors: ColorTokens
    spacing: Spacing = field(default_factory=Spacing)
    radius: Radius = field(default_factory=Radius)

    def to_dict(self) -> dict:
        return {
            "colors": self.colors.to_dict(),
            "spacing": self.spacing.to_dict(),
            "radius": self.radius.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Tokens":
        return cls(
            colors=ColorTokens.from_dict(d["colors"]),
            spacing=Spacing.from_dict(d.get("spacing", {})),
            radius=Radius.from_dict(d.get("radius", {})),
        )


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------

@dataclass
class TypographyStyle:
    """One text role: font stack, size (pt), line height and CSS weight."""
    font_family: str
    font_size: float
    line_height: float = 1.2
    weight: int = 400

    def to_dict(self) -> dict:
        return {
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
            "lineHeight": self.line_height,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "TypographyStyle":
        return cls(
            font_family=d["fontFamily"],
            font_size=d["fontSize"],
            line_height=d.get("lineHeight", 1.2),
            weight=d.get("weight", 400),
        )


@dataclass
class Typography:
    title: TypographyStyle
    body: TypographyStyle

    def to_dict(self) -> dict:
        return {"title": self.title.to_dict(), "body": self.body.to_dict()}

    @classmethod
    def from_dict(cls, d: dict) -> "Typography":
        return cls(
            title=TypographyStyle.from_dict(d["title"]),
            body=TypographyStyle.from_dict(d["body"]),
        )


# ---------------------------------------------------------------------------
# Layout geometry
# ---------------------------------------------------------------------------

@dataclass
class GridConfig:
    """Layout grid; region bounds are expressed in these units."""
    columns: float = 12
    rows: float = 9
    gutter: float = 16

    def to_dict(self) -> dict:
        return {"columns": self.columns, "rows": self.rows, "gutter": self.gutter}

    @classmethod
    def from_dict(cls, d: dict) -> "GridConfig":
        return cls(
            columns=d.get("columns", 12),
            rows=d.get("rows", 9),
            gutter=d.get("gutter", 16),
        )


@dataclass
class Bounds:
    """Region box in grid units (not pixels or inches)."""
    x: float
    y: float
    w: float
    h: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, d: dict) -> "Bounds":
        return cls(x=d["x"], y=d["y"], w=d["w"], h=d["h"])


@dataclass
class Region:
    id: str
    role: RegionRole
    bounds: Bounds

    def to_dict(self) -> dict:
        return {"id": self.id, "role": self.role.value, "bounds": self.bounds.to_dict()}

    @classmethod
    def from_dict(cls, d: dict) -> "Region":
        return cls(
            id=d["id"],
            role=RegionRole(d["role"]),
            bounds=Bounds.from_dict(d["bounds"]),
        )


@dataclass
class LayoutRules:
    min_font_size: float | None = None
    max_line_count: int | None = None
    content_types: list[ContentType] = field(default_factory=list)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {}
        if self.min_font_size is not None:
            d["minFontSize"] = self.min_font_size
        if self.max_line_count is not None:
            d["maxLineCount"] = self.max_line_count
        if self.content_types:
            d["contentTypes"] = [c.value for c in self.content_types]
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "LayoutRules":
        return cls(
            min_font_size=d.get("minFontSize"),
            max_line_count=d.get("maxLineCount"),
            content_types=[ContentType(c) for c in d.get("contentTypes", [])],
        )


@dataclass
class Layout:
    """A named, typed grid definition with its regions."""
    name: str
    type: LayoutType
    grid: GridConfig
    regions: list[Region] = field(default_factory=list)
    rules: LayoutRules | None = None
    enabled: bool = True
    chart_type: ChartType | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "grid": self.grid.to_dict(),
            "regions": [r.to_dict() for r in self.regions],
        }
        if self.rules is not None:
            d["rules"] = self.rules.to_dict()
        d["enabled"] = self.enabled
        if self.chart_type is not None:
            d["chartType"] = self.chart_type.value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Layout":
        return cls(
            name=d["name"],
            type=LayoutType(d["type"]),
            grid=GridConfig.from_dict(d.get("grid", {})),
            regions=[Region.from_dict(r) for r in d.get("regions", [])],
            rules=LayoutRules.from_dict(d["rules"]) if d.get("rules") else None,
            # Only an explicit false disables a layout
            enabled=d.get("enabled") is not False,
            chart_type=ChartType(d["chartType"]) if d.get("chartType") else None,
        )


# ---------------------------------------------------------------------------
# Accents and export profiles
# ---------------------------------------------------------------------------

@dataclass
class Accent:
    id: str
    type: AccentType
    props: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"id": self.id, "type": self.type.value}
        if self.props:
            d["props"] = dict(self.props)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Accent":
        return cls(id=d["id"], type=AccentType(d["type"]), props=d.get("props", {}))


@dataclass
class ExportProfile:
    format: ExportFormat
    font_fallbacks: dict[str, str] = field(default_factory=dict)
    color_mapping: dict[str, str] | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "format": self.format.value,
            "fontFallbacks": dict(self.font_fallbacks),
        }
        if self.color_mapping is not None:
            d["colorMapping"] = dict(self.color_mapping)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "ExportProfile":
        return cls(
            format=ExportFormat(d["format"]),
            font_fallbacks=d.get("fontFallbacks", {}),
            color_mapping=d.get("colorMapping"),
        )


# ---------------------------------------------------------------------------
# Template documents
# ---------------------------------------------------------------------------

@dataclass
class Template:
    """The root brand-template document."""
    id: str
    name: str
    version: str
    tokens: Tokens | None
    typography: Typography | None
    layouts: list[Layout] = field(default_factory=list)
    accents: list[Accent] = field(default_factory=list)
    description: str | None = None
    export_profiles: list[ExportProfile] = field(default_factory=list)

    @property
    def enabled_layouts(self) -> list[Layout]:
        return [layout for layout in self.layouts if layout.enabled]

    def get_layout(self, layout_type: LayoutType | str) -> Layout | None:
        """Return the first layout of the given type, or None."""
        if isinstance(layout_type, str):
            layout_type = LayoutType(layout_type)
        for layout in self.layouts:
            if layout.type == layout_type:
                return layout
        return None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
        }
        if self.description is not None:
            d["description"] = self.description
        d["version"] = self.version
        d["tokens"] = self.tokens.to_dict() if self.tokens else None
        d["typography"] = self.typography.to_dict() if self.typography else None
        d["layouts"] = [layout.to_dict() for layout in self.layouts]
        d["accents"] = [a.to_dict() for a in self.accents]
        if self.export_profiles:
            d["exportProfiles"] = [p.to_dict() for p in self.export_profiles]
        return d

    @classmethod
    def _base_kwargs(cls, d: dict) -> dict[str, Any]:
        return dict(
            id=d.get("id", ""),
            name=d.get("name", ""),
            version=d.get("version", "1.0.0"),
            tokens=Tokens.from_dict(d["tokens"]) if d.get("tokens") else None,
            typography=Typography.from_dict(d["typography"]) if d.get("typography") else None,
            layouts=[Layout.from_dict(layout) for layout in d.get("layouts") or []],
            accents=[Accent.from_dict(a) for a in d.get("accents") or []],
            description=d.get("description"),
            export_profiles=[ExportProfile.from_dict(p)
                             for p in d.get("exportProfiles") or []],
        )

    @classmethod
    def from_dict(cls, d: dict) -> "Template":
        return cls(**cls._base_kwargs(d))


@dataclass
class TemplateState(Template):
    """Template plus the presentation-only knobs read by the style compiler."""
    style_family: StyleFamily = StyleFamily.CLEAN
    mood: MoodPreset = MoodPreset.CALM
    spacing_density: float = 1.0     # 0.5 - 2.0
    type_scale: float = 1.25         # 1.1 - 1.5
    contrast_level: int = 50         # 0 - 100

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update({
            "styleFamily": self.style_family.value,
            "mood": self.mood.value,
            "spacingDensity": self.spacing_density,
            "typeScale": self.type_scale,
            "contrastLevel": self.contrast_level,
        })
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TemplateState":
        return cls(
            **cls._base_kwargs(d),
            style_family=StyleFamily(d.get("styleFamily", "clean")),
            mood=MoodPreset(d.get("mood", "calm")),
            spacing_density=d.get("spacingDensity", 1.0),
            type_scale=d.get("typeScale", 1.25),
            contrast_level=d.get("contrastLevel", 50),
        )

    @classmethod
    def from_template(cls, template: Template, **knobs) -> "TemplateState":
        """Wrap a plain Template with presentation knobs (defaults when omitted)."""
        d = template.to_dict()
        state = cls.from_dict(d)
        for key, value in knobs.items():
            setattr(state, key, value)
        return state


# ---------------------------------------------------------------------------
# Style presets
# ---------------------------------------------------------------------------

@dataclass
class PresetTypography:
    title_font: str
    body_font: str
    title_weight: int
    body_weight: int

    def to_dict(self) -> dict:
        return {
            "titleFont": self.title_font,
            "bodyFont": self.body_font,
            "titleWeight": self.title_weight,
            "bodyWeight": self.body_weight,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "PresetTypography":
        return cls(
            title_font=d.get("titleFont", ""),
            body_font=d.get("bodyFont", ""),
            title_weight=d.get("titleWeight", 0),
            body_weight=d.get("bodyWeight", 0),
        )


@dataclass
class StylePreset:
    """A portable look: colors, fonts and the presentation knobs."""
    id: str
    name: str
    created_at: str
    colors: ColorTokens
    typography: PresetTypography
    style_family: StyleFamily
    mood: MoodPreset
    spacing_density: float
    type_scale: float
    contrast_level: int
    description: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.description is not None:
            d["description"] = self.description
        d.update({
            "createdAt": self.created_at,
            "colors": self.colors.to_dict(),
            "typography": self.typography.to_dict(),
            "styleFamily": self.style_family.value,
            "mood": self.mood.value,
            "spacingDensity": self.spacing_density,
            "typeScale": self.type_scale,
            "contrastLevel": self.contrast_level,
        })
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "StylePreset":
        return cls(
            id=d["id"],
            name=d["name"],
            description=d.get("description"),
            created_at=d.get("createdAt", ""),
            colors=ColorTokens.from_dict(d["colors"]),
            typography=PresetTypography.from_dict(d.get("typography", {})),
            style_family=StyleFamily(d["styleFamily"]),
            mood=MoodPreset(d["mood"]),
            spacing_density=d["spacingDensity"],
            type_scale=d["typeScale"],
            contrast_level=d["contrastLevel"],
        )


@dataclass
class UploadedAsset:
    """A logo or font registered with the editing session."""
    id: str
    name: str
    type: str                 # "logo" or "font"
    url: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
