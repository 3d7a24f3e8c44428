"""Preview renderer - turns (TemplateState, Layout, size) into a Scene.

Rendering is a pure function of its inputs and is cheap enough to re-run on
every edit.  Precondition: ``layout.grid.columns`` and ``rows`` are >= 1.
"""

from ..layout.geometry import region_rect, regions_by_role
from ..schema.models import Layout, LayoutType, RegionRole, TemplateState
from ..style.compiler import RenderParams, compile_render_params, with_alpha
from .charts import render_chart
from .content import (
    render_agenda,
    render_comparison,
    render_iconography,
    render_media,
    render_quote,
    render_timeline,
)
from .scene import Group, Line, Node, Rectangle, Scene, Text

PREVIEW_SIZES = {
    "small": (160, 90),
    "medium": (320, 180),
    "large": (640, 360),
    "fullscreen": (1280, 720),
}

SPECIAL_CONTENT_TYPES = frozenset(
    t for t in LayoutType
    if t.is_chart or t in (LayoutType.TIMELINE, LayoutType.COMPARISON, LayoutType.QUOTE,
                           LayoutType.MEDIA, LayoutType.AGENDA, LayoutType.ICONOGRAPHY)
)

PLACEHOLDER_TEXT = {
    LayoutType.TITLE: "Subtitle or tagline",
    LayoutType.CONTENT: "Body content goes here...",
}


def _special_content(state: TemplateState, layout: Layout, p: RenderParams,
                     scene: Scene) -> Node | None:
    family = state.style_family
    if layout.type.is_chart:
        return render_chart(scene, layout, p)
    if layout.type == LayoutType.TIMELINE:
        return render_timeline(family, p)
    if layout.type == LayoutType.COMPARISON:
        return render_comparison(family, p, scene)
    if layout.type == LayoutType.QUOTE:
        return render_quote(family, p)
    if layout.type == LayoutType.MEDIA:
        return render_media(family, layout, p)
    if layout.type == LayoutType.AGENDA:
        return render_agenda(p)
    if layout.type == LayoutType.ICONOGRAPHY:
        return render_iconography(family, layout, p)
    return None


def _regions(layout: Layout, p: RenderParams) -> Group:
    """Header titles, body placeholder copy and captions."""
    special = layout.type in SPECIAL_CONTENT_TYPES
    g = Group()
    for region in layout.regions:
        role = region.role
        if special and role in (RegionRole.BODY, RegionRole.MEDIA):
            continue
        r = region_rect(region, layout, p.width, p.height)

        color, size = p.neutral_text, p.body_font_size
        if role == RegionRole.HEADER:
            color, size = p.primary_text, p.title_font_size
            content = "Presentation Title" if layout.type == LayoutType.TITLE else layout.name
        elif role == RegionRole.BODY:
            content = PLACEHOLDER_TEXT.get(layout.type, "")
        elif role == RegionRole.CAPTION:
            size *= 0.8
            content = "Caption text goes here"
            color = with_alpha(p.neutral_text, 0xAA / 255)
        else:
            content = ""
        if not content:
            continue

        header = role == RegionRole.HEADER
        g.add(Text(x=r.x + p.base_spacing, y=r.center_y if header else r.y + size,
                   text=content, font_size=size, fill=color,
                   font_weight=p.title_weight if header else p.body_weight,
                   font_family=p.title_font if header else p.body_font,
                   baseline="middle" if header else "hanging"))
    return g


def _accents(p: RenderParams) -> Node:
    c, style = p.colors, p.style
    y = p.height - p.base_spacing * 2

    if style.accent_opacity < 0.6:
        return Line(x1=p.base_spacing * 3, y1=y, x2=p.width * 0.15, y2=y, stroke=c.accent,
                    stroke_width=p.accent_thickness * 0.5, opacity=p.accent_opacity * 0.7)

    if style.decorative_elements:
        g = Group()
        g.add(Line(x1=p.base_spacing * 2, y1=y, x2=p.width * 0.3, y2=y, stroke=c.accent,
                   stroke_width=p.accent_thickness, opacity=p.accent_opacity))
        if style.title_weight_multiplier > 1.2:
            y2 = y - p.accent_thickness * 2
            g.add(Line(x1=p.base_spacing * 2, y1=y2, x2=p.width * 0.15, y2=y2, stroke=c.primary,
                       stroke_width=p.accent_thickness * 0.5, opacity=p.accent_opacity * 0.5))
        return g

    return Line(x1=p.base_spacing * 2, y1=y, x2=p.width * 0.25, y2=y, stroke=c.accent,
                stroke_width=p.accent_thickness, opacity=p.accent_opacity)


def _region_label(layout: Layout, region, index: int) -> str:
    if region.role == RegionRole.HEADER:
        return "Title"
    if region.role == RegionRole.MEDIA:
        return "Chart" if "chart" in region.id else "Media"
    if region.role == RegionRole.BODY:
        return f"Col {index + 1}" if len(regions_by_role(layout, RegionRole.BODY)) > 1 else "Content"
    return region.role.value.capitalize()


def _region_visualization(layout: Layout, p: RenderParams) -> Group:
    """Labelled role boxes for every region plus a grid-size note."""
    c, s = p.colors, p.scale
    role_colors = {
        RegionRole.HEADER: (c.primary + "20", c.primary),
        RegionRole.BODY: (c.secondary + "15", c.secondary),
        RegionRole.MEDIA: (c.accent + "15", c.accent),
        RegionRole.CAPTION: (c.neutral + "10", c.neutral),
        RegionRole.FOOTER: (c.neutral + "10", c.neutral),
    }
    pad = 2 * s
    g = Group()
    for index, region in enumerate(layout.regions):
        r = region_rect(region, layout, p.width, p.height)
        fill, stroke = role_colors.get(region.role, role_colors[RegionRole.BODY])
        box = Group()
        box.add(Rectangle(x=r.x + pad, y=r.y + pad, w=r.w - pad * 2, h=r.h - pad * 2,
                          fill=fill, stroke=stroke, stroke_width=1.5 * s, rx=p.element_radius * 0.5,
                          dasharray=f"{4 * s} {2 * s}" if region.role == RegionRole.MEDIA else None))
        box.add(Text(x=r.center_x, y=r.center_y, text=_region_label(layout, region, index),
                     font_size=min(10 * s, r.h * 0.3), fill=stroke, anchor="middle",
                     baseline="middle", font_weight=500))
        if r.h > 30 * s:
            b = region.bounds
            box.add(Text(x=r.center_x, y=r.center_y + 12 * s,
                         text=f"{round(b.w)}/{round(b.h)} cells", font_size=6 * s,
                         fill=stroke + "80", anchor="middle"))
        g.add(box)
    g.add(Text(x=p.width - 5 * s, y=p.height - 5 * s,
               text=f"{layout.grid.columns:g}×{layout.grid.rows:g} grid", font_size=6 * s,
               fill=c.neutral + "60", anchor="end"))
    return g


def render_preview(state: TemplateState, layout: Layout, size: str = "medium",
                   show_regions: bool = False) -> Scene:
    """Render *layout* styled by *state* at one of the :data:`PREVIEW_SIZES`.

    Parameters
    ----------
    state : TemplateState
        Tokens, typography and the style/mood knobs.
    layout : Layout
        The slide archetype to draw.
    size : str
        Key into :data:`PREVIEW_SIZES`.
    show_regions : bool
        Draw labelled region boxes instead of content.

    Returns
    -------
    Scene
    """
    if size not in PREVIEW_SIZES:
        raise ValueError(f"Unknown preview size {size!r}; expected one of {sorted(PREVIEW_SIZES)}")
    width, height = PREVIEW_SIZES[size]
    p = compile_render_params(state, width, height)

    scene = Scene(
        width=width,
        height=height,
        background=state.tokens.colors.background if show_regions else p.background,
        label=layout.name,
        layout_type=layout.type.value,
        font_title=p.title_font,
        font_body=p.body_font,
    )

    if show_regions:
        scene.add(_region_visualization(layout, p))
        return scene

    scene.add(_special_content(state, layout, p, scene))
    scene.add(_regions(layout, p))
    scene.add(_accents(p))
    return scene
