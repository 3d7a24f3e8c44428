"""Tests for the template schema, defaults, loader and document validation."""

import json

import pytest

from template_studio.schema.defaults import (
    STYLE_FONT_CONFIG,
    STYLE_ICONOGRAPHY,
    create_initial_state,
    default_layouts,
)
from template_studio.schema.loader import (
    dump_style_preset,
    load_style_preset,
    load_template,
    parse_style_preset,
    save_style_preset,
    save_template,
)
from template_studio.schema.models import (
    Accent,
    AccentType,
    ChartType,
    ColorTokens,
    Layout,
    LayoutType,
    MoodPreset,
    PresetTypography,
    StyleFamily,
    StylePreset,
    Template,
    TemplateState,
)
from template_studio.schema.validation import HEX_PATTERN, validate_template_document


@pytest.fixture
def state():
    return create_initial_state()


@pytest.fixture
def preset():
    return StylePreset(
        id="preset-1",
        name="Harbour Style",
        description="Style preset exported from Harbour",
        created_at="2024-05-01T12:00:00+00:00",
        colors=ColorTokens("#123456", "#345678", "#222222", "#FFFFFF", "#D9822B"),
        typography=PresetTypography("Georgia", "Arial", 700, 400),
        style_family=StyleFamily.EDITORIAL,
        mood=MoodPreset.PREMIUM,
        spacing_density=1.2,
        type_scale=1.333,
        contrast_level=70,
    )


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_eighteen_layouts(self):
        assert len(default_layouts()) == 18

    def test_enabled_layouts(self, state):
        enabled = [layout.type for layout in state.enabled_layouts]
        assert len(enabled) == 10
        assert LayoutType.DATA_BAR_VERTICAL in enabled
        assert LayoutType.DATA_PIE not in enabled
        assert LayoutType.APPENDIX not in enabled

    def test_initial_knobs(self, state):
        assert state.style_family == StyleFamily.CLEAN
        assert state.mood == MoodPreset.CALM
        assert (state.spacing_density, state.type_scale, state.contrast_level) == (1.0, 1.25, 50)

    def test_initial_fonts_follow_clean_family(self, state):
        clean = STYLE_FONT_CONFIG[StyleFamily.CLEAN]
        assert state.typography.title.font_family == clean.title
        assert state.typography.title.weight == clean.title_weight

    @pytest.mark.parametrize("family", list(StyleFamily))
    def test_every_family_has_fonts_and_icons(self, family):
        assert STYLE_FONT_CONFIG[family].title
        assert family in STYLE_ICONOGRAPHY

    def test_fresh_state_each_call(self):
        a, b = create_initial_state(), create_initial_state()
        a.layouts[0].enabled = False
        assert b.layouts[0].enabled

    def test_get_layout(self, state):
        assert state.get_layout("timeline").name == "Timeline"
        assert state.get_layout(LayoutType.DATA) is None


# ---------------------------------------------------------------------------
# Dictionary round trips
# ---------------------------------------------------------------------------

class TestSerialization:
    def test_state_round_trip(self, state):
        state.accents = [Accent("rule", AccentType.LINE, {"width": 2})]
        assert TemplateState.from_dict(state.to_dict()) == state

    def test_wire_keys_camel_case(self, state):
        d = state.to_dict()
        assert d["styleFamily"] == "clean"
        assert d["typography"]["title"]["fontFamily"]
        assert d["layouts"][0]["regions"][0]["bounds"] == {"x": 1.5, "y": 3, "w": 9, "h": 2}

    def test_plain_template_has_no_knobs(self, state):
        plain = Template.from_dict(state.to_dict())
        assert "styleFamily" not in plain.to_dict()

    def test_layout_enabled_unless_explicitly_false(self):
        base = {"name": "X", "type": "content", "regions": []}
        assert Layout.from_dict(base).enabled
        assert Layout.from_dict({**base, "enabled": None}).enabled
        assert not Layout.from_dict({**base, "enabled": False}).enabled

    def test_layout_chart_type(self):
        layout = Layout.from_dict({"name": "Legacy", "type": "data", "chartType": "donut"})
        assert layout.chart_type == ChartType.DONUT
        assert layout.to_dict()["chartType"] == "donut"

    def test_from_template_applies_knobs(self, state):
        plain = Template.from_dict(state.to_dict())
        wrapped = TemplateState.from_template(plain, style_family=StyleFamily.SWISS)
        assert wrapped.style_family == StyleFamily.SWISS
        assert wrapped.mood == MoodPreset.CALM

    def test_preset_round_trip(self, preset):
        assert StylePreset.from_dict(preset.to_dict()) == preset


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

class TestLoader:
    def test_yaml_round_trip(self, state, tmp_path):
        path = tmp_path / "nested" / "brand.yaml"
        state.name = "Harbour"
        save_template(state, path)
        assert path.exists()
        assert load_template(path) == state

    def test_loads_json_document(self, state, tmp_path):
        path = tmp_path / "brand.json"
        path.write_text(json.dumps(state.to_dict()), encoding="utf-8")
        assert load_template(path) == state

    def test_preset_json_round_trip(self, preset, tmp_path):
        path = tmp_path / "look.json"
        save_style_preset(preset, path)
        assert load_style_preset(path) == preset

    def test_preset_json_shape(self, preset):
        d = json.loads(dump_style_preset(preset))
        assert d["styleFamily"] == "editorial"
        assert d["typography"] == {
            "titleFont": "Georgia", "bodyFont": "Arial", "titleWeight": 700, "bodyWeight": 400,
        }

    def test_parse_preset_missing_field(self):
        with pytest.raises(KeyError):
            parse_style_preset('{"id": "x", "name": "y"}')


# ---------------------------------------------------------------------------
# Document validation
# ---------------------------------------------------------------------------

class TestValidateTemplateDocument:
    def test_default_document_valid(self, state):
        assert validate_template_document(state.to_dict()) == []

    def test_hex_pattern(self):
        assert HEX_PATTERN.match("#0a2A43")
        assert not HEX_PATTERN.match("0A2A43")
        assert not HEX_PATTERN.match("#FFF")

    def test_bad_color(self, state):
        d = state.to_dict()
        d["tokens"]["colors"]["accent"] = "orange"
        assert any("accent" in e for e in validate_template_document(d))

    def test_spacing_minimum(self, state):
        d = state.to_dict()
        d["tokens"]["spacing"]["base"] = 1
        assert "Spacing base must be at least 2" in validate_template_document(d)

    def test_font_minimums(self, state):
        d = state.to_dict()
        d["typography"]["title"]["fontSize"] = 12
        d["typography"]["body"]["fontSize"] = 8
        errors = validate_template_document(d)
        assert "Title font size must be at least 18pt" in errors
        assert "Body font size must be at least 12pt" in errors

    def test_missing_identity(self):
        errors = validate_template_document({})
        assert "Template ID is required" in errors
        assert "Tokens are required" in errors
        assert "Template must have at least one layout" in errors

    def test_unknown_layout_type(self, state):
        d = state.to_dict()
        d["layouts"][0]["type"] = "hero"
        assert any("unknown layout type" in e for e in validate_template_document(d))

    def test_negative_bounds(self, state):
        d = state.to_dict()
        d["layouts"][0]["regions"][0]["bounds"]["w"] = -1
        assert any("bounds must be non-negative" in e for e in validate_template_document(d))

    def test_knob_ranges(self, state):
        d = state.to_dict()
        d["spacingDensity"] = 3
        d["contrastLevel"] = 120
        errors = validate_template_document(d)
        assert "Spacing density must be between 0.5 and 2.0" in errors
        assert "Contrast level must be between 0 and 100" in errors
