"""Tests for the style tables and the style compiler."""

import dataclasses

import pytest

from template_studio.schema.defaults import create_initial_state
from template_studio.schema.models import MoodPreset, StyleFamily
from template_studio.style import (
    DEFAULT_MOOD_PARAMS,
    DEFAULT_STYLE_PARAMS,
    ChartStyle,
    adjust_color_intensity,
    clamp_weight,
    combined_intensity,
    compile_render_params,
    compose_spacing,
    get_mood_params,
    get_style_params,
    is_near_white,
    tinted_background,
    with_alpha,
)
from template_studio.style.compiler import alpha_hex


@pytest.fixture
def state():
    return create_initial_state()


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

class TestStyleParams:
    @pytest.mark.parametrize("family", list(StyleFamily))
    def test_every_family_has_params(self, family):
        params = get_style_params(family)
        assert params.title_weight_multiplier > 0
        assert isinstance(params.chart_style, ChartStyle)

    def test_string_lookup_matches_enum(self):
        assert get_style_params("bento") is get_style_params(StyleFamily.BENTO)

    def test_unknown_family_gets_default(self):
        assert get_style_params("vaporwave") is DEFAULT_STYLE_PARAMS

    def test_families_are_independent(self):
        assert get_style_params("brutalist").border_thickness == 4
        assert get_style_params("bento").border_thickness == 0

    def test_label_style(self):
        assert get_style_params("editorial").label_style == "uppercase"
        assert get_style_params("clean").label_style == "normal"

    def test_to_dict_uses_wire_values(self):
        d = get_style_params("corporate").to_dict()
        assert d["chart_style"] == "stacked"
        assert d["data_point_style"] == "circle"


class TestMoodParams:
    @pytest.mark.parametrize("mood", list(MoodPreset))
    def test_every_mood_has_params(self, mood):
        assert get_mood_params(mood).color_intensity > 0

    def test_technical_is_dashed(self):
        assert get_mood_params("technical").stroke_dasharray == "4 2"

    def test_unknown_mood_gets_default(self):
        assert get_mood_params("sleepy") is DEFAULT_MOOD_PARAMS

    def test_to_dict(self):
        assert get_mood_params("calm").to_dict()["background_tint"] == "#F5F5F0"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    @pytest.mark.parametrize("weight,expected", [
        (450, 500), (640, 600), (50, 100), (1280, 900), (600, 600),
    ])
    def test_clamp_weight(self, weight, expected):
        assert clamp_weight(weight) == expected

    def test_intensity_dims_with_alpha(self):
        assert adjust_color_intensity("#112233", 0.7) == "#112233B2"

    def test_intensity_clamped_low(self):
        assert adjust_color_intensity("#112233", 0.1) == "#11223380"

    def test_intensity_at_or_above_one_unchanged(self):
        assert adjust_color_intensity("#112233", 1.0) == "#112233"
        assert adjust_color_intensity("#112233", 1.3) == "#112233"

    def test_is_near_white(self):
        assert is_near_white("#FFFFFF")
        assert is_near_white("#FAFAF8")
        assert not is_near_white("#F0F0F0")
        assert not is_near_white("#0A2A43")

    def test_alpha_hex(self):
        assert alpha_hex(0.5) == "80"
        assert alpha_hex(1.5) == "ff"

    def test_with_alpha_opaque_color(self):
        assert with_alpha("#2B2B2B", 0xAA / 255) == "#2B2B2Baa"

    def test_with_alpha_multiplies_existing(self):
        # 0x80 x 0.5 = 0x40
        assert with_alpha("#2B2B2B80", 0.5) == "#2B2B2B40"
        assert len(with_alpha("#2B2B2Baa", 0xAA / 255)) == 9

    def test_tinted_background(self):
        calm = get_mood_params(MoodPreset.CALM)
        assert tinted_background("#FFFFFF", calm) == "#F5F5F0"
        assert tinted_background("#101820", calm) == "#101820"
        assert tinted_background("#FAFAFA", get_mood_params(MoodPreset.ENERGETIC)) == "#FAFAFA"

    def test_shared_factors(self):
        calm = get_mood_params(MoodPreset.CALM)
        assert combined_intensity(100, calm) == pytest.approx(1.4)
        assert compose_spacing(2.0, get_style_params("clean"), calm) == pytest.approx(
            2.0 * get_style_params("clean").spacing_multiplier * 1.3)


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------

class TestCompileRenderParams:
    def test_scale_from_design_width(self, state):
        assert compile_render_params(state, 960, 540).scale == 1
        assert compile_render_params(state, 320, 180).scale == pytest.approx(1 / 3)

    def test_spacing_is_multiplicative(self, state):
        state.spacing_density = 1.5
        state.style_family = StyleFamily.BRUTALIST
        state.mood = MoodPreset.PREMIUM
        p = compile_render_params(state, 480, 270)
        expected = 1.5 * 0.7 * 1.2
        assert p.spacing_multiplier == pytest.approx(expected)
        assert p.base_spacing == pytest.approx(4 * expected * 0.5)

    def test_calm_tints_white_background(self, state):
        assert compile_render_params(state, 320, 180).background == "#F5F5F0"

    def test_energetic_keeps_white_background(self, state):
        state.mood = MoodPreset.ENERGETIC
        assert compile_render_params(state, 320, 180).background == "#FFFFFF"

    def test_dark_background_never_tinted(self, state):
        state.tokens.colors = dataclasses.replace(state.tokens.colors, background="#101820")
        assert compile_render_params(state, 320, 180).background == "#101820"

    def test_low_intensity_dims_text(self, state):
        p = compile_render_params(state, 320, 180)
        assert p.combined_intensity == pytest.approx(0.7)
        assert p.primary_text == "#0A2A43b2"
        assert p.neutral_text == "#2B2B2Baa"

    def test_full_intensity_plain_text(self, state):
        state.mood = MoodPreset.ENERGETIC
        state.contrast_level = 100
        p = compile_render_params(state, 320, 180)
        assert p.primary_text == "#0A2A43"
        assert p.neutral_text == "#2B2B2B"

    def test_accent_opacity_capped_by_intensity(self, state):
        p = compile_render_params(state, 320, 180)
        assert p.accent_opacity == pytest.approx(0.8 * 0.7)
        state.contrast_level = 100
        state.mood = MoodPreset.ENERGETIC
        assert compile_render_params(state, 320, 180).accent_opacity == pytest.approx(0.8)

    def test_weights_clamped(self, state):
        state.style_family = StyleFamily.BOLD
        p = compile_render_params(state, 320, 180)
        assert p.title_weight == 900

    def test_type_scale_factor(self, state):
        state.type_scale = 1.5
        p = compile_render_params(state, 960, 540)
        assert p.type_scale_factor == pytest.approx(1.2)
        assert p.title_font_size == pytest.approx(34 * 1.2 * 0.9)

    def test_body_size_scales_linearly(self, state):
        small = compile_render_params(state, 320, 180)
        large = compile_render_params(state, 1280, 720)
        assert large.body_font_size == pytest.approx(small.body_font_size * 4)

    def test_corner_radius(self, state):
        state.style_family = StyleFamily.BENTO
        p = compile_render_params(state, 960, 540)
        assert p.element_radius == pytest.approx(6 * 1.5 * 1.5)
