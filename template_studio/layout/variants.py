"""Layout variants - alternative region arrangements per layout type.

Each variant is a complete replacement layout: same name, type, rules and
enabled flag as the base, with its own grid and regions.  Choosing one
replaces the template's layout wholesale.
"""

import copy
from dataclasses import dataclass

from ..schema.models import Bounds, GridConfig, Layout, LayoutType, Region, RegionRole


@dataclass
class LayoutVariant:
    id: str
    name: str
    description: str
    layout: Layout

    def matches(self, layout: Layout) -> bool:
        """True when *layout* already uses this variant's grid and regions."""
        return (self.layout.grid == layout.grid
                and self.layout.regions == layout.regions)


_H, _B, _M, _C = RegionRole.HEADER, RegionRole.BODY, RegionRole.MEDIA, RegionRole.CAPTION

# (id, name, description, (columns, rows, gutter), [(region id, role, x, y, w, h), ...])
_VARIANTS: dict[str, list[tuple]] = {
    "title": [
        ("title-centered", "Centered", "Title centered with subtitle below", (12, 6, 16), [
            ("title", _H, 2, 2, 8, 2), ("subtitle", _B, 3, 4, 6, 1)]),
        ("title-left", "Left Aligned", "Title left-aligned with accent line", (12, 6, 16), [
            ("title", _H, 1, 1, 7, 2), ("subtitle", _B, 1, 3, 5, 1)]),
        ("title-bottom", "Bottom Heavy", "Title at bottom third", (12, 6, 16), [
            ("title", _H, 1, 4, 10, 1), ("subtitle", _B, 1, 5, 8, 1)]),
        ("title-split", "Split Layout", "Title left, media right", (12, 6, 24), [
            ("title", _H, 0, 1, 5, 3), ("subtitle", _B, 0, 4, 5, 1), ("media", _M, 6, 0, 6, 6)]),
    ],
    "content": [
        ("content-standard", "Standard", "Title top, content below", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("content", _B, 1, 2, 10, 5)]),
        ("content-two-column", "Two Column", "Content split into two columns", (12, 8, 20), [
            ("title", _H, 1, 0, 10, 1), ("left", _B, 1, 2, 5, 5), ("right", _B, 6, 2, 5, 5)]),
        ("content-sidebar", "With Sidebar", "Main content with narrow sidebar", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("content", _B, 1, 2, 7, 5), ("sidebar", _B, 9, 2, 2, 5)]),
        ("content-compact", "Compact", "Tighter spacing, more content area", (12, 8, 8), [
            ("title", _H, 0, 0, 12, 1), ("content", _B, 0, 1, 12, 7)]),
    ],
    "data": [
        ("data-full", "Full Width Chart", "Chart spans full width", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("chart", _M, 0, 2, 12, 5)]),
        ("data-with-legend", "Chart + Legend", "Chart left, legend/notes right", (12, 8, 20), [
            ("title", _H, 1, 0, 10, 1), ("chart", _M, 1, 2, 7, 5), ("legend", _B, 9, 2, 2, 5)]),
        ("data-dashboard", "Dashboard Grid", "Multiple smaller charts", (12, 8, 12), [
            ("title", _H, 0, 0, 12, 1), ("chart1", _M, 0, 1, 6, 3), ("chart2", _M, 6, 1, 6, 3),
            ("chart3", _M, 0, 4, 12, 3)]),
        ("data-metrics", "Key Metrics", "Big numbers with supporting chart", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("metrics", _B, 1, 1, 10, 2), ("chart", _M, 1, 4, 10, 3)]),
    ],
    "comparison": [
        ("comparison-equal", "Equal Split", "Two equal columns", (12, 8, 24), [
            ("title", _H, 1, 0, 10, 1), ("left", _B, 0, 2, 5, 5), ("right", _B, 7, 2, 5, 5)]),
        ("comparison-stacked", "Stacked", "Options stacked vertically", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("top", _B, 1, 1, 10, 3), ("bottom", _B, 1, 5, 10, 3)]),
        ("comparison-asymmetric", "Asymmetric", "Featured option larger", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("featured", _B, 0, 2, 7, 5), ("other", _B, 8, 2, 4, 5)]),
        ("comparison-triple", "Three Options", "Compare three items", (12, 8, 12), [
            ("title", _H, 0, 0, 12, 1), ("opt1", _B, 0, 2, 4, 5), ("opt2", _B, 4, 2, 4, 5),
            ("opt3", _B, 8, 2, 4, 5)]),
    ],
    "timeline": [
        ("timeline-horizontal", "Horizontal", "Timeline flows left to right", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("timeline", _B, 0, 2, 12, 5)]),
        ("timeline-vertical", "Vertical", "Timeline flows top to bottom", (12, 8, 16), [
            ("title", _H, 1, 0, 5, 1), ("timeline", _B, 1, 1, 3, 7), ("detail", _B, 5, 1, 6, 7)]),
        ("timeline-cards", "Card Grid", "Milestones as cards", (12, 8, 12), [
            ("title", _H, 0, 0, 12, 1), ("card1", _B, 0, 2, 3, 5), ("card2", _B, 3, 2, 3, 5),
            ("card3", _B, 6, 2, 3, 5), ("card4", _B, 9, 2, 3, 5)]),
        ("timeline-roadmap", "Roadmap", "Phased with descriptions", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("phases", _B, 0, 1, 12, 2), ("details", _B, 1, 4, 10, 3)]),
    ],
    "quote": [
        ("quote-centered", "Centered", "Quote centered on slide", (12, 8, 16), [
            ("quote", _B, 2, 2, 8, 3), ("attribution", _C, 3, 5, 6, 1)]),
        ("quote-left", "Left Aligned", "Quote aligned left with accent", (12, 8, 16), [
            ("quote", _B, 1, 1, 7, 4), ("attribution", _C, 1, 5, 5, 1)]),
        ("quote-with-image", "With Portrait", "Quote with speaker image", (12, 8, 20), [
            ("image", _M, 1, 1, 3, 5), ("quote", _B, 5, 2, 6, 3), ("attribution", _C, 5, 5, 6, 1)]),
        ("quote-full", "Full Bleed", "Large dramatic quote", (12, 8, 8), [
            ("quote", _B, 1, 1, 10, 5), ("attribution", _C, 1, 7, 10, 1)]),
    ],
    "media": [
        ("media-full", "Full Bleed", "Media fills the slide", (12, 8, 0), [
            ("title", _H, 1, 0, 10, 1), ("media", _M, 0, 1, 12, 7)]),
        ("media-captioned", "With Caption", "Media with description below", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("media", _M, 1, 1, 10, 5), ("caption", _C, 1, 6, 10, 2)]),
        ("media-side-text", "Side by Side", "Media left, text right", (12, 8, 20), [
            ("title", _H, 0, 0, 12, 1), ("media", _M, 0, 1, 6, 6), ("content", _B, 7, 2, 5, 5)]),
        ("media-gallery", "Gallery", "Multiple images grid", (12, 8, 8), [
            ("title", _H, 0, 0, 12, 1), ("img1", _M, 0, 1, 6, 3), ("img2", _M, 6, 1, 6, 3),
            ("img3", _M, 0, 4, 4, 4), ("img4", _M, 4, 4, 8, 4)]),
    ],
    "agenda": [
        ("agenda-list", "Numbered List", "Simple numbered items", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("items", _B, 1, 2, 10, 5)]),
        ("agenda-two-col", "Two Columns", "Items split into columns", (12, 8, 20), [
            ("title", _H, 1, 0, 10, 1), ("left", _B, 1, 2, 5, 5), ("right", _B, 6, 2, 5, 5)]),
        ("agenda-cards", "Card Grid", "Each topic as a card", (12, 8, 12), [
            ("title", _H, 0, 0, 12, 1), ("card1", _B, 0, 2, 4, 3), ("card2", _B, 4, 2, 4, 3),
            ("card3", _B, 8, 2, 4, 3), ("card4", _B, 2, 5, 4, 3), ("card5", _B, 6, 5, 4, 3)]),
        ("agenda-timeline", "Timeline Style", "Agenda as time blocks", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("times", _C, 0, 2, 2, 5), ("items", _B, 2, 2, 9, 5)]),
    ],
    "section": [
        ("section-centered", "Centered", "Section title centered", (12, 6, 16), [
            ("section-title", _H, 2, 2, 8, 2)]),
        ("section-left", "Left Aligned", "Section title left with accent", (12, 6, 16), [
            ("section-title", _H, 1, 2, 6, 2)]),
        ("section-numbered", "With Number", "Large section number", (12, 6, 16), [
            ("number", _C, 1, 1, 2, 3), ("section-title", _H, 3, 2, 8, 2)]),
        ("section-bottom", "Bottom Third", "Title in lower portion", (12, 6, 16), [
            ("section-title", _H, 1, 4, 10, 2)]),
    ],
    "iconography": [
        ("iconography-trio", "Three Icons", "Three icons in a row with labels", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("icon-1", _M, 1, 2, 3, 3), ("icon-2", _M, 4.5, 2, 3, 3),
            ("icon-3", _M, 8, 2, 3, 3), ("labels", _C, 1, 6, 10, 1)]),
        ("iconography-quad", "Four Icons", "Four icons in a 2x2 grid", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("icon-1", _M, 2, 2, 3, 2), ("icon-2", _M, 7, 2, 3, 2),
            ("icon-3", _M, 2, 5, 3, 2), ("icon-4", _M, 7, 5, 3, 2)]),
        ("iconography-featured", "Featured Icon", "One large icon with supporting icons", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("main-icon", _M, 1, 2, 5, 5), ("icon-1", _M, 7, 2, 2, 2),
            ("icon-2", _M, 9.5, 2, 2, 2), ("icon-3", _M, 7, 5, 2, 2), ("icon-4", _M, 9.5, 5, 2, 2)]),
        ("iconography-strip", "Icon Strip", "Horizontal row of icons", (12, 8, 12), [
            ("title", _H, 1, 0, 10, 1), ("icon-1", _M, 1, 3, 2, 2), ("icon-2", _M, 3.5, 3, 2, 2),
            ("icon-3", _M, 6, 3, 2, 2), ("icon-4", _M, 8.5, 3, 2, 2), ("description", _B, 1, 6, 10, 1)]),
    ],
    "appendix": [
        ("appendix-standard", "Standard", "Simple reference layout", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("content", _B, 1, 2, 10, 6)]),
        ("appendix-dense", "Dense", "Maximum content area", (12, 8, 8), [
            ("title", _H, 0, 0, 12, 1), ("content", _B, 0, 1, 12, 7)]),
        ("appendix-sources", "Sources", "Formatted for citations", (12, 8, 16), [
            ("title", _H, 1, 0, 10, 1), ("sources", _B, 1, 2, 5, 5), ("notes", _B, 7, 2, 4, 5)]),
        ("appendix-data", "Data Table", "Optimized for tables", (12, 8, 12), [
            ("title", _H, 0, 0, 12, 1), ("table", _M, 0, 1, 12, 7)]),
    ],
}


def _build(base: Layout, entry: tuple) -> LayoutVariant:
    variant_id, name, description, (columns, rows, gutter), regions = entry
    layout = copy.deepcopy(base)
    layout.grid = GridConfig(columns=columns, rows=rows, gutter=gutter)
    layout.regions = [Region(rid, role, Bounds(x, y, w, h))
                      for rid, role, x, y, w, h in regions]
    return LayoutVariant(variant_id, name, description, layout)


def generate_layout_variants(base_layout: Layout,
                             layout_type: LayoutType | str | None = None) -> list[LayoutVariant]:
    """Alternative arrangements for *base_layout*'s type (or *layout_type*).

    Every chart subtype shares the ``data`` arrangements.  A type with no
    table gets a single ``Default`` variant wrapping the base layout.
    """
    layout_type = LayoutType(layout_type) if layout_type is not None else base_layout.type
    key = "data" if layout_type.is_chart else layout_type.value
    entries = _VARIANTS.get(key)
    if not entries:
        return [LayoutVariant("default-1", "Default", "Standard layout", copy.deepcopy(base_layout))]
    return [_build(base_layout, entry) for entry in entries]


def current_variant(base_layout: Layout) -> LayoutVariant | None:
    """The variant *base_layout* currently matches, if any."""
    for variant in generate_layout_variants(base_layout):
        if variant.matches(base_layout):
            return variant
    return None
