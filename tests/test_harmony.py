"""Tests for harmony-based palette generation."""

import random

import pytest

from template_studio.color.contrast import contrast_ratio
from template_studio.color.harmony import (
    HSL,
    ColorMood,
    GeneratedPalette,
    HarmonyMode,
    ensure_contrast,
    generate_from_primary_with_metadata,
    generate_from_seed,
    generate_palette,
    harmony_hues,
    hex_to_hsl,
    hsl_to_hex,
    random_hue,
)
from template_studio.schema.models import ColorTokens
from template_studio.style.compiler import is_near_white


def _assert_readable(palette: ColorTokens):
    bg = palette.background
    for role in ("primary", "secondary", "neutral"):
        assert contrast_ratio(getattr(palette, role), bg) >= 4.5, role
    assert contrast_ratio(palette.accent, bg) >= 3.0


@pytest.fixture
def current():
    return ColorTokens(
        primary="#112233",
        secondary="#445566",
        neutral="#222222",
        background="#FFFFFF",
        accent="#CC5500",
    )


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

class TestConversions:
    def test_hex_to_hsl_red(self):
        assert hex_to_hsl("#FF0000") == HSL(0, 100, 50)

    def test_hex_to_hsl_gray_has_no_saturation(self):
        hsl = hex_to_hsl("#808080")
        assert hsl.s == 0
        assert hsl.l == 50

    def test_hsl_to_hex_uppercase(self):
        assert hsl_to_hex(HSL(240, 100, 50)) == "#0000FF"

    def test_hsl_to_hex_white(self):
        assert hsl_to_hex(HSL(0, 0, 100)) == "#FFFFFF"

    def test_primary_colors_survive_round_trip(self):
        for color in ("#FF0000", "#00FF00", "#0000FF"):
            assert hsl_to_hex(hex_to_hsl(color)) == color


# ---------------------------------------------------------------------------
# Hue rules
# ---------------------------------------------------------------------------

class TestHarmonyHues:
    def test_complementary(self):
        assert harmony_hues(10, HarmonyMode.COMPLEMENTARY) == [10, 190]

    def test_analogous_wraps(self):
        assert harmony_hues(10, HarmonyMode.ANALOGOUS) == [340, 10, 40]

    def test_triadic(self):
        assert harmony_hues(200, HarmonyMode.TRIADIC) == [200, 320, 80]

    def test_split_complementary(self):
        assert harmony_hues(0, HarmonyMode.SPLIT_COMPLEMENTARY) == [0, 150, 210]

    def test_monochromatic_is_base_only(self):
        assert harmony_hues(75, HarmonyMode.MONOCHROMATIC) == [75]


class TestRandomHue:
    def test_warm_band(self):
        rng = random.Random(1)
        for _ in range(200):
            hue = random_hue(ColorMood.WARM, rng)
            assert hue < 60 or hue >= 300

    def test_cool_band(self):
        rng = random.Random(2)
        for _ in range(200):
            assert 120 <= random_hue(ColorMood.COOL, rng) < 300

    def test_neutral_full_wheel(self):
        rng = random.Random(3)
        for _ in range(200):
            assert 0 <= random_hue(ColorMood.NEUTRAL, rng) < 360


class TestEnsureContrast:
    def test_darkens_on_light_background(self):
        adjusted = ensure_contrast(HSL(50, 80, 70), "#FFFFFF")
        assert adjusted.l < 70
        assert contrast_ratio(hsl_to_hex(adjusted), "#FFFFFF") >= 4.5

    def test_lightens_on_dark_background(self):
        adjusted = ensure_contrast(HSL(220, 60, 20), "#000000")
        assert adjusted.l > 20
        assert contrast_ratio(hsl_to_hex(adjusted), "#000000") >= 4.5

    def test_already_passing_unchanged(self):
        color = HSL(210, 60, 15)
        assert ensure_contrast(color, "#FFFFFF") == color

    def test_hue_and_saturation_kept(self):
        adjusted = ensure_contrast(HSL(50, 80, 70), "#FFFFFF")
        assert (adjusted.h, adjusted.s) == (50, 80)


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

class TestGeneratePalette:
    @pytest.mark.parametrize("mode", list(HarmonyMode))
    @pytest.mark.parametrize("mood", list(ColorMood))
    def test_every_mode_is_readable(self, mode, mood):
        rng = random.Random(42)
        for _ in range(10):
            _assert_readable(generate_palette(mode, mood, rng=rng))

    def test_deterministic_with_seeded_rng(self):
        a = generate_palette("triadic", "warm", rng=random.Random(7))
        b = generate_palette("triadic", "warm", rng=random.Random(7))
        assert a == b

    def test_accepts_strings(self):
        palette = generate_palette("analogous", "cool", rng=random.Random(0))
        assert isinstance(palette, ColorTokens)

    def test_locked_roles_from_list(self, current):
        palette = generate_palette(HarmonyMode.TRIADIC, current=current,
                                   locked=["primary", "accent"], rng=random.Random(5))
        assert palette.primary == "#112233"
        assert palette.accent == "#CC5500"

    def test_locked_roles_from_mapping(self, current):
        palette = generate_palette(HarmonyMode.COMPLEMENTARY, current=current,
                                   locked={"neutral": True, "primary": False},
                                   rng=random.Random(5))
        assert palette.neutral == "#222222"

    def test_locks_ignored_without_current(self):
        unlocked = generate_palette("complementary", rng=random.Random(9))
        locked = generate_palette("complementary", locked=["primary"], rng=random.Random(9))
        assert unlocked == locked

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            generate_palette("tetradic")


class TestGenerateFromSeed:
    @pytest.mark.parametrize("mode", list(HarmonyMode))
    @pytest.mark.parametrize("temperature", list(ColorMood))
    def test_readable(self, mode, temperature):
        _assert_readable(generate_from_seed("#1A6B8F", mode, temperature))

    @pytest.mark.parametrize("temperature", list(ColorMood))
    def test_background_near_white(self, temperature):
        palette = generate_from_seed("#C0392B", temperature=temperature)
        assert is_near_white(palette.background)

    def test_temperature_shifts_derived_colors(self):
        warm = generate_from_seed("#1A6B8F", temperature="warm")
        cool = generate_from_seed("#1A6B8F", temperature="cool")
        assert warm.secondary != cool.secondary

    def test_primary_keeps_seed_hue(self):
        palette = generate_from_seed("#1A6B8F")
        assert abs(hex_to_hsl(palette.primary).h - hex_to_hsl("#1A6B8F").h) <= 3

    def test_light_seed_is_darkened(self):
        palette = generate_from_seed("#FFE066")
        assert palette.primary != "#FFE066"
        assert contrast_ratio(palette.primary, palette.background) >= 4.5

    def test_locked_dark_background(self, current):
        current.background = "#101820"
        palette = generate_from_seed("#1A6B8F", current=current, locked=["background"])
        assert palette.background == "#101820"
        _assert_readable(palette)

    def test_derived_hue_zero_kept(self):
        # hue 180 seed; the complement sits exactly at 0 degrees
        palette = generate_from_seed("#1A8F8F", "complementary")
        for color in (palette.secondary, palette.accent):
            hue = hex_to_hsl(color).h % 360
            assert min(hue, 360 - hue) <= 2

    def test_invalid_seed(self):
        with pytest.raises(ValueError):
            generate_from_seed("blue")


class TestGeneratedPalette:
    def test_metadata(self):
        result = generate_from_primary_with_metadata("#1A6B8F", "triadic", "neutral")
        assert isinstance(result, GeneratedPalette)
        assert result.mode == HarmonyMode.TRIADIC
        assert len(result.hues) == 3

    def test_to_dict(self):
        d = generate_from_primary_with_metadata("#1A6B8F", "complementary", "warm").to_dict()
        assert set(d) == {"palette", "harmony"}
        assert d["harmony"]["mode"] == "complementary"
        assert d["harmony"]["temperature"] == "warm"
        assert set(d["palette"]) == {"primary", "secondary", "neutral", "background", "accent"}
