"""Tests for exported timeline, comparison and iconography shapes."""

import pytest
from pptx import Presentation
from pptx.enum.dml import MSO_FILL
from pptx.enum.shapes import MSO_SHAPE, MSO_SHAPE_TYPE
from pptx.oxml.ns import qn

from template_studio.generator import (
    ICON_LIBRARY,
    add_comparison,
    add_iconography,
    add_timeline,
    compile_export_params,
)
from template_studio.generator.content import MILESTONES, SAMPLE_ICONS
from template_studio.schema.defaults import create_initial_state, default_layouts
from template_studio.schema.models import (
    Bounds,
    GridConfig,
    Layout,
    LayoutType,
    MoodPreset,
    Region,
    RegionRole,
    StyleFamily,
)


@pytest.fixture
def colors():
    return create_initial_state().tokens.colors


@pytest.fixture
def layouts():
    return {layout.type: layout for layout in default_layouts()}


@pytest.fixture
def slide():
    prs = Presentation()
    return prs.slides.add_slide(prs.slide_layouts[6])


@pytest.fixture
def header_only():
    return Layout(name="Bare", type=LayoutType.CONTENT, grid=GridConfig(12, 9, 16), regions=[
        Region("title", RegionRole.HEADER, Bounds(1, 1, 10, 1)),
    ])


def _params(family, **knobs):
    state = create_initial_state()
    state.style_family = StyleFamily(family)
    for name, value in knobs.items():
        setattr(state, name, value)
    return compile_export_params(state)


def _black(shapes):
    return [s for s in shapes
            if s.fill.type == MSO_FILL.SOLID and str(s.fill.fore_color.rgb) == "000000"]


def _alphas(shape):
    return shape._element.findall(".//" + qn("a:alpha"))


def _texts(slide) -> list[str]:
    return [s.text_frame.text for s in slide.shapes if s.has_text_frame]


def _autoshapes(slide, kind):
    return [s for s in slide.shapes
            if s.shape_type == MSO_SHAPE_TYPE.AUTO_SHAPE and s.auto_shape_type == kind]


# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

class TestTimeline:
    @pytest.mark.parametrize("family", list(StyleFamily))
    def test_every_family(self, slide, layouts, colors, family):
        params = _params(family)
        assert add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14, params)
        texts = " ".join(_texts(slide))
        for year, _label, _desc in MILESTONES:
            assert year in texts

    def test_default_draws_round_markers(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("clean"))
        assert len(_autoshapes(slide, MSO_SHAPE.OVAL)) == 4
        assert "Market analysis complete" in _texts(slide)

    def test_square_markers_for_sharp_outlined(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("brutalist"))
        assert len(_autoshapes(slide, MSO_SHAPE.RECTANGLE)) == 4
        assert "RESEARCH" in _texts(slide)

    def test_card_style_one_card_per_milestone(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("bento"))
        assert len(_autoshapes(slide, MSO_SHAPE.ROUNDED_RECTANGLE)) == 4

    def test_minimal_has_no_descriptions(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("minimal"))
        assert "Market analysis complete" not in _texts(slide)

    def test_axis_line(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("clean"))
        lines = [s for s in slide.shapes if s.shape_type == MSO_SHAPE_TYPE.LINE]
        assert len(lines) == 1

    def test_needs_body_region(self, slide, header_only, colors):
        assert not add_timeline(slide, header_only, colors, "Arial", 14,
                                _params("clean"))
        assert len(slide.shapes) == 0

    def test_outlined_markers_cast_shadows(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("neubrutalist"))
        ovals = _autoshapes(slide, MSO_SHAPE.OVAL)
        assert len(ovals) == 8
        assert len(_black(ovals)) == 4

    def test_minimal_casts_no_shadows(self, slide, layouts, colors):
        # luxury has a shadow offset but renders the hairline treatment
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("luxury"))
        assert len(_autoshapes(slide, MSO_SHAPE.OVAL)) == 4

    def test_low_contrast_dims_text(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("clean", contrast_level=20))
        year = next(s for s in slide.shapes if s.has_text_frame and s.text_frame.text == "2024")
        assert _alphas(year)

    def test_high_contrast_text_is_opaque(self, slide, layouts, colors):
        add_timeline(slide, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                     _params("clean", mood=MoodPreset.ENERGETIC, contrast_level=100))
        year = next(s for s in slide.shapes if s.has_text_frame and s.text_frame.text == "2024")
        assert not _alphas(year)

    def test_dense_spacing_moves_cards(self, layouts, colors):
        lefts = []
        for density in (0.5, 2.0):
            prs = Presentation()
            page = prs.slides.add_slide(prs.slide_layouts[6])
            add_timeline(page, layouts[LayoutType.TIMELINE], colors, "Arial", 14,
                         _params("bento", spacing_density=density))
            lefts.append([s.left for s in _autoshapes(page, MSO_SHAPE.ROUNDED_RECTANGLE)])
        assert lefts[0] != lefts[1]


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

class TestComparison:
    @pytest.mark.parametrize("family", list(StyleFamily))
    def test_every_family(self, slide, layouts, colors, family):
        params = _params(family)
        assert add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14, params)
        assert any("99.99% uptime sla" in t.lower() for t in _texts(slide))

    def test_default_marks_recommended(self, slide, layouts, colors):
        add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                       _params("clean"))
        assert "Option B  ★ Recommended" in _texts(slide)
        assert "✓  Lower upfront cost" in _texts(slide)

    def test_bordered_plans(self, slide, layouts, colors):
        add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                       _params("brutalist"))
        texts = _texts(slide)
        assert "PLAN A" in texts
        assert "LOWER UPFRONT COST" in texts

    def test_card_style(self, slide, layouts, colors):
        add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                       _params("organic"))
        assert "Option B  ★" in _texts(slide)
        # organic casts a soft shadow behind each card
        assert len(_autoshapes(slide, MSO_SHAPE.ROUNDED_RECTANGLE)) == 4

    def test_minimal_divider(self, slide, layouts, colors):
        add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                       _params("scandinavian"))
        assert "Option B  •  Recommended" in _texts(slide)
        lines = [s for s in slide.shapes if s.shape_type == MSO_SHAPE_TYPE.LINE]
        assert len(lines) == 1

    def test_shadow_cards(self, slide, layouts, colors):
        add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                       _params("corporate"))
        # two shadows behind two cards
        assert len(_autoshapes(slide, MSO_SHAPE.ROUNDED_RECTANGLE)) == 4

    def test_needs_body_region(self, slide, header_only, colors):
        assert not add_comparison(slide, header_only, colors, "Arial", 14,
                                  _params("clean"))

    @pytest.mark.parametrize("family", ["neubrutalist", "memphis"])
    def test_bordered_plans_cast_hard_shadows(self, slide, layouts, colors, family):
        add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                       _params(family))
        boxes = _autoshapes(slide, MSO_SHAPE.RECTANGLE)
        assert len(boxes) == 4
        shadows = _black(boxes)
        assert len(shadows) == 2
        assert not any(_alphas(s) for s in shadows)

    def test_card_shadows_sit_offset_behind(self, slide, layouts, colors):
        add_comparison(slide, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                       _params("retro70s"))
        shapes = _autoshapes(slide, MSO_SHAPE.ROUNDED_RECTANGLE)
        assert len(shapes) == 4
        shadow, card = shapes[0], shapes[1]
        assert str(shadow.fill.fore_color.rgb) == "000000"
        assert shadow.left > card.left
        assert shadow.top > card.top

    def test_mood_changes_card_geometry(self, layouts, colors):
        geometry = []
        for mood in (MoodPreset.CALM, MoodPreset.ENERGETIC):
            prs = Presentation()
            page = prs.slides.add_slide(prs.slide_layouts[6])
            add_comparison(page, layouts[LayoutType.COMPARISON], colors, "Arial", 14,
                           _params("clean", mood=mood))
            cards = _autoshapes(page, MSO_SHAPE.ROUNDED_RECTANGLE)
            geometry.append([(c.left, c.width, c.adjustments[0]) for c in cards])
        assert geometry[0] != geometry[1]


# ---------------------------------------------------------------------------
# Iconography
# ---------------------------------------------------------------------------

class TestIconography:
    @pytest.mark.parametrize("family", list(StyleFamily))
    def test_every_family(self, slide, layouts, colors, family):
        params = _params(family)
        assert add_iconography(slide, layouts[LayoutType.ICONOGRAPHY], colors, "Arial", 14, params)

    def test_one_icon_per_media_region(self, slide, layouts, colors):
        layout = layouts[LayoutType.ICONOGRAPHY]
        add_iconography(slide, layout, colors, "Arial", 14, _params("clean"))
        count = sum(1 for r in layout.regions if r.role == RegionRole.MEDIA)
        symbols = [t for t in _texts(slide) if t in {s for s, _, _ in SAMPLE_ICONS}]
        assert len(symbols) == count

    def test_icons_cycle(self, slide, colors):
        regions = [Region(f"icon-{i}", RegionRole.MEDIA, Bounds(i, 2, 1, 2)) for i in range(8)]
        layout = Layout(name="Many", type=LayoutType.ICONOGRAPHY,
                        grid=GridConfig(12, 9, 16), regions=regions)
        add_iconography(slide, layout, colors, "Arial", 14, _params("minimal"))
        texts = _texts(slide)
        assert texts.count("★") == 2
        assert texts.count("Excellence") == 2

    def test_uppercase_labels(self, slide, layouts, colors):
        add_iconography(slide, layouts[LayoutType.ICONOGRAPHY], colors, "Arial", 14,
                        _params("bold"))
        assert "EXCELLENCE" in _texts(slide)

    def test_needs_media_region(self, slide, header_only, colors):
        assert not add_iconography(slide, header_only, colors, "Arial", 14,
                                   _params("clean"))

    def test_bordered_icons_cast_shadows(self, slide, layouts, colors):
        layout = layouts[LayoutType.ICONOGRAPHY]
        add_iconography(slide, layout, colors, "Arial", 14, _params("neubrutalist"))
        count = sum(1 for r in layout.regions if r.role == RegionRole.MEDIA)
        boxes = _autoshapes(slide, MSO_SHAPE.RECTANGLE)
        assert len(boxes) == count * 2
        assert len(_black(boxes)) == count

    def test_card_icons_cast_shadows(self, slide, layouts, colors):
        layout = layouts[LayoutType.ICONOGRAPHY]
        add_iconography(slide, layout, colors, "Arial", 14, _params("retro70s"))
        count = sum(1 for r in layout.regions if r.role == RegionRole.MEDIA)
        assert len(_black(_autoshapes(slide, MSO_SHAPE.ROUNDED_RECTANGLE))) == count


class TestIconLibrary:
    def test_categories(self):
        assert set(ICON_LIBRARY) == {
            "shapes", "stars", "status", "arrows", "bullets", "business",
            "numberedCircles", "letteredCircles",
        }

    def test_single_glyphs(self):
        for category in ICON_LIBRARY.values():
            assert all(len(glyph) == 1 for glyph in category.values())

    def test_known_glyphs(self):
        assert ICON_LIBRARY["status"]["check"] == "✓"
        assert ICON_LIBRARY["numberedCircles"]["ten"] == "⑩"
