"""Tests for grid geometry and layout variants."""

import pytest

from template_studio.layout.geometry import (
    Rect,
    cell_size,
    find_region,
    region_rect,
    regions_by_role,
    role_rects,
)
from template_studio.layout.variants import (
    LayoutVariant,
    current_variant,
    generate_layout_variants,
)
from template_studio.schema.defaults import default_layouts
from template_studio.schema.models import (
    Bounds,
    GridConfig,
    Layout,
    LayoutType,
    Region,
    RegionRole,
)


@pytest.fixture
def layouts():
    return {layout.type: layout for layout in default_layouts()}


@pytest.fixture
def simple_layout():
    return Layout(
        name="Simple",
        type=LayoutType.CONTENT,
        grid=GridConfig(columns=12, rows=9, gutter=16),
        regions=[
            Region("title", RegionRole.HEADER, Bounds(1, 1, 10, 1)),
            Region("content", RegionRole.BODY, Bounds(1, 2.5, 10, 5.5)),
        ],
    )


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

class TestRect:
    def test_edges_and_centre(self):
        r = Rect(10, 20, 30, 40)
        assert (r.right, r.bottom) == (40, 60)
        assert (r.center_x, r.center_y) == (25, 40)

    def test_inset(self):
        assert Rect(0, 0, 100, 50).inset(5) == Rect(5, 5, 90, 40)
        assert Rect(0, 0, 100, 50).inset(5, 2) == Rect(5, 2, 90, 46)


class TestRegionRect:
    def test_cell_size(self, simple_layout):
        assert cell_size(simple_layout, 960, 540) == (80, 60)

    def test_scales_bounds(self, simple_layout):
        rect = region_rect(simple_layout.regions[1], simple_layout, 960, 540)
        assert rect == Rect(80, 150, 800, 330)

    def test_same_layout_any_resolution(self, simple_layout):
        small = region_rect(simple_layout.regions[0], simple_layout, 320, 180)
        large = region_rect(simple_layout.regions[0], simple_layout, 1280, 720)
        assert large.x == pytest.approx(small.x * 4)
        assert large.h == pytest.approx(small.h * 4)

    def test_out_of_range_bounds_not_rejected(self, simple_layout):
        region = Region("overflow", RegionRole.BODY, Bounds(11, 8, 4, 4))
        rect = region_rect(region, simple_layout, 960, 540)
        assert rect.right > 960


class TestRegionLookup:
    def test_find_by_id(self, simple_layout):
        assert find_region(simple_layout, "content").id == "content"

    def test_find_by_role(self, simple_layout):
        assert find_region(simple_layout, "header").id == "title"

    def test_find_missing(self, simple_layout):
        assert find_region(simple_layout, "caption") is None

    def test_regions_by_role(self, layouts):
        comparison = layouts[LayoutType.COMPARISON]
        assert [r.id for r in regions_by_role(comparison, "body")] == ["left", "right"]

    def test_role_rects_in_order(self, layouts):
        icons = role_rects(layouts[LayoutType.ICONOGRAPHY], RegionRole.MEDIA, 960, 540)
        assert [r.id for r, _ in icons] == ["icon-1", "icon-2", "icon-3"]
        assert icons[0][1].x < icons[1][1].x < icons[2][1].x


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class TestLayoutVariants:
    @pytest.mark.parametrize("layout_type", [
        LayoutType.TITLE, LayoutType.CONTENT, LayoutType.COMPARISON, LayoutType.TIMELINE,
        LayoutType.QUOTE, LayoutType.MEDIA, LayoutType.AGENDA, LayoutType.SECTION,
        LayoutType.ICONOGRAPHY, LayoutType.APPENDIX,
    ])
    def test_four_variants_per_type(self, layouts, layout_type):
        variants = generate_layout_variants(layouts[layout_type])
        assert len(variants) == 4
        assert all(isinstance(v, LayoutVariant) for v in variants)

    def test_variant_keeps_identity(self, layouts):
        base = layouts[LayoutType.CONTENT]
        for variant in generate_layout_variants(base):
            assert variant.layout.name == base.name
            assert variant.layout.type == base.type
            assert variant.layout.enabled == base.enabled
            assert variant.layout.rules == base.rules

    def test_base_not_mutated(self, layouts):
        base = layouts[LayoutType.TITLE]
        regions_before = list(base.regions)
        generate_layout_variants(base)
        assert base.regions == regions_before

    def test_chart_subtypes_share_data_variants(self, layouts):
        ids = [v.id for v in generate_layout_variants(layouts[LayoutType.DATA_PIE])]
        assert ids == ["data-full", "data-with-legend", "data-dashboard", "data-metrics"]

    def test_explicit_type_overrides_base(self, layouts):
        variants = generate_layout_variants(layouts[LayoutType.CONTENT], "quote")
        assert variants[0].id.startswith("quote")

    def test_legacy_data_type_uses_data_variants(self, layouts):
        base = layouts[LayoutType.DATA_LINE]
        base.type = LayoutType.DATA
        assert generate_layout_variants(base)[0].id == "data-full"

    def test_current_variant(self, layouts):
        base = layouts[LayoutType.CONTENT]
        chosen = generate_layout_variants(base)[1]
        assert current_variant(chosen.layout).id == chosen.id

    def test_default_layout_matches_no_variant(self, layouts):
        assert current_variant(layouts[LayoutType.CONTENT]) is None
