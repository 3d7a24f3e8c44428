"""Tests for template QA checks and exported-document checks."""

import dataclasses
import io

import pytest
from pptx import Presentation

from template_studio.generator import export_template
from template_studio.qa import ExportChecker, ValidationIssue, validate_template
from template_studio.schema.defaults import create_initial_state
from template_studio.schema.models import LayoutType, Template, UploadedAsset


@pytest.fixture
def state():
    return create_initial_state()


def _recolor(state, **colors):
    state.tokens.colors = dataclasses.replace(state.tokens.colors, **colors)
    return state


def _only(state, *types):
    for layout in state.layouts:
        layout.enabled = layout.type in types
    return state


# ---------------------------------------------------------------------------
# Template checks
# ---------------------------------------------------------------------------

class TestValidateTemplate:
    def test_default_template(self, state):
        result = validate_template(state)
        assert result.valid
        assert [i.id for i in result.warnings] == ["contrast-accent-bg"]
        assert [i.id for i in result.info] == ["brand-no-logo"]
        assert result.summary() == "Validation PASS: 0 error(s), 1 warning(s), 1 info"

    def test_low_contrast_error(self, state):
        _recolor(state, secondary="#CCCCCC")
        issue = validate_template(state).find("contrast-secondary-bg")
        assert issue.severity == "error"
        assert issue.field == "tokens.colors.secondary"
        assert "minimum 4.5:1" in issue.details

    def test_borderline_contrast_warning(self, state):
        _recolor(state, neutral="#808080")  # about 3.9:1 on white
        assert validate_template(state).find("contrast-neutral-bg").severity == "warning"

    def test_accent_passes_at_large_text_threshold(self, state):
        _recolor(state, accent="#0A2A43")
        assert validate_template(state).find("contrast-accent-bg") is None

    def test_spacing(self, state):
        state.tokens.spacing = dataclasses.replace(state.tokens.spacing, base=1, m=6, l=12)
        state.spacing_density = 0.6
        result = validate_template(state)
        assert result.find("spacing-base-min").severity == "error"
        assert result.find("spacing-m-min").severity == "warning"
        assert result.find("spacing-l-min").severity == "warning"
        assert result.find("spacing-density-low").severity == "warning"
        assert not result.valid

    def test_plain_template_density_assumed(self, state):
        plain = Template.from_dict(state.to_dict())
        assert validate_template(plain).find("spacing-density-low") is None

    def test_typography(self, state):
        state.typography.title.font_size = 16
        state.typography.title.line_height = 0.9
        state.typography.body.font_size = 10
        state.typography.body.line_height = 1.1
        result = validate_template(state)
        assert result.find("typography-title-size").severity == "error"
        assert result.find("typography-body-size").severity == "error"
        assert result.find("typography-title-lineheight").severity == "warning"
        assert result.find("typography-body-lineheight").severity == "info"
        assert "16pt" in result.find("typography-title-size").details

    def test_brand_assets(self, state):
        logo = UploadedAsset("logo-1", "logo.svg", "logo")
        assert validate_template(state, logos=[logo]).find("brand-no-logo") is None

    def test_default_fonts_only_for_arial(self, state):
        assert validate_template(state).find("brand-default-fonts") is None
        state.typography.title.font_family = "Arial"
        assert validate_template(state).find("brand-default-fonts") is not None
        font = UploadedAsset("font-1", "Brand.ttf", "font")
        assert validate_template(state, fonts=[font]).find("brand-default-fonts") is None

    def test_report(self, state):
        report = validate_template(state).report().splitlines()
        assert report[0].startswith("Validation PASS")
        assert report[1].startswith("  [WARNING] tokens.colors.accent: Accent color")

    def test_issue_str(self):
        issue = ValidationIssue("x", "brand", "info", "No logo uploaded", "logos")
        assert str(issue) == "[INFO] logos: No logo uploaded"


# ---------------------------------------------------------------------------
# Exported document checks
# ---------------------------------------------------------------------------

class TestExportChecker:
    def test_clean_export(self, state):
        result = ExportChecker().check(export_template(state).buffer, state)
        assert result.issues == []

    def test_every_layout_export(self, state):
        for layout in state.layouts:
            layout.enabled = True
        result = ExportChecker().check(export_template(state).buffer, state)
        assert result.issues == []

    def test_not_a_zip(self, state):
        result = ExportChecker().check(b"nope", state)
        assert [i.id for i in result.issues] == ["export-signature"]

    def test_unreadable(self, state):
        result = ExportChecker().check(b"PK\x03\x04broken", state)
        assert [i.id for i in result.issues] == ["export-unreadable"]

    def test_slide_count(self, state):
        buffer = export_template(state).buffer
        state.get_layout(LayoutType.APPENDIX).enabled = True
        result = ExportChecker().check(buffer, state)
        assert [i.id for i in result.issues] == ["export-slide-count"]
        assert "Expected 11 slides" in result.issues[0].details

    def test_wrong_master_and_missing_chart(self, state):
        buffer = export_template(_only(state, LayoutType.CONTENT, LayoutType.QUOTE)).buffer
        expected = _only(create_initial_state(), LayoutType.CONTENT, LayoutType.DATA_PIE)
        result = ExportChecker().check(buffer, expected)
        assert result.find("export-master-name").field == "slides[1]"
        assert result.find("export-chart-missing").severity == "warning"

    def test_dimensions(self, state):
        buf = io.BytesIO()
        Presentation().save(buf)
        result = ExportChecker().check(buf.getvalue(), _only(state))
        assert [i.id for i in result.issues] == ["export-dimensions"]
        assert result.valid
