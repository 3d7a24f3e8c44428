"""Tests for WCAG contrast math and palette checks."""

import pytest

from template_studio.color.contrast import (
    WCAG_AA_LARGE_TEXT,
    WCAG_AA_NORMAL_TEXT,
    InvalidColorFormat,
    contrast_ratio,
    meets_aa,
    meets_aa_large,
    parse_hex,
    relative_luminance,
    rgb_to_hex,
    suggest_contrast_adjustment,
    validate_color_contrast,
)
from template_studio.schema.defaults import default_tokens


# ---------------------------------------------------------------------------
# Hex parsing
# ---------------------------------------------------------------------------

class TestParseHex:
    def test_with_hash(self):
        assert parse_hex("#0A2A43") == (10, 42, 67)

    def test_without_hash(self):
        assert parse_hex("ffffff") == (255, 255, 255)

    def test_lowercase(self):
        assert parse_hex("#0a2a43") == (10, 42, 67)

    @pytest.mark.parametrize("value", ["#FFF", "#GGGGGG", "", "#1234567", "rgb(0,0,0)"])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidColorFormat):
            parse_hex(value)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidColorFormat):
            parse_hex(None)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex("nope")

    def test_rgb_to_hex_lowercase(self):
        assert rgb_to_hex(10, 42, 67) == "#0a2a43"


# ---------------------------------------------------------------------------
# Luminance and ratios
# ---------------------------------------------------------------------------

class TestContrastRatio:
    def test_black_white_is_21(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_symmetric(self):
        assert contrast_ratio("#0A2A43", "#FFFFFF") == pytest.approx(
            contrast_ratio("#FFFFFF", "#0A2A43"))

    def test_same_color_is_1(self):
        assert contrast_ratio("#3D6B82", "#3D6B82") == pytest.approx(1.0)

    def test_luminance_bounds(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_luminance_accepts_tuple(self):
        assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)

    def test_mid_gray(self):
        ratio = contrast_ratio("#888888", "#FFFFFF")
        assert 3.0 < ratio < 4.5

    def test_meets_aa(self):
        assert meets_aa("#0A2A43", "#FFFFFF")
        assert not meets_aa("#888888", "#FFFFFF")

    def test_meets_aa_large(self):
        assert meets_aa_large("#888888", "#FFFFFF")
        assert not meets_aa_large("#CCCCCC", "#FFFFFF")


# ---------------------------------------------------------------------------
# Palette validation
# ---------------------------------------------------------------------------

class TestValidateColorContrast:
    def test_default_palette_flags_only_accent(self):
        issues = validate_color_contrast(default_tokens().colors)
        assert len(issues) == 1
        assert issues[0].foreground == "#E1A73B"
        assert issues[0].required == WCAG_AA_LARGE_TEXT

    def test_accepts_dict(self):
        colors = default_tokens().colors.to_dict()
        colors["primary"] = "#CCCCCC"
        issues = validate_color_contrast(colors)
        contexts = [i.context for i in issues]
        assert "Primary text on background" in contexts

    def test_text_roles_use_normal_threshold(self):
        colors = default_tokens().colors.to_dict()
        colors["neutral"] = "#888888"
        issue = next(i for i in validate_color_contrast(colors)
                     if i.foreground == "#888888")
        assert issue.required == WCAG_AA_NORMAL_TEXT

    def test_issue_str(self):
        colors = default_tokens().colors
        text = str(validate_color_contrast(colors)[0])
        assert text.startswith("Accent on background")
        assert ":1" in text


class TestSuggestContrastAdjustment:
    def test_darkens_on_light_background(self):
        suggestion = suggest_contrast_adjustment("#CCCCCC", "#FFFFFF")
        assert contrast_ratio(suggestion, "#FFFFFF") >= WCAG_AA_NORMAL_TEXT
        assert relative_luminance(suggestion) < relative_luminance("#CCCCCC")

    def test_lightens_on_dark_background(self):
        suggestion = suggest_contrast_adjustment("#333333", "#000000")
        assert contrast_ratio(suggestion, "#000000") >= WCAG_AA_NORMAL_TEXT
        assert relative_luminance(suggestion) > relative_luminance("#333333")

    def test_passing_color_unchanged(self):
        assert suggest_contrast_adjustment("#0A2A43", "#FFFFFF") == "#0a2a43"

    def test_custom_target(self):
        suggestion = suggest_contrast_adjustment("#CCCCCC", "#FFFFFF", target_ratio=7.0)
        assert contrast_ratio(suggestion, "#FFFFFF") >= 7.0
