"""Tests for the CLI entry point (template_studio.cli).

Covers argument parsing, command dispatch, template loading, the export,
preview, palette, validate, variants, inspect and preset commands, and
error handling.  Commands run against files in tmp_path.
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from template_studio.cli import (
    _load_state,
    build_parser,
    cmd_export,
    main,
)
from template_studio.schema.defaults import create_initial_state
from template_studio.schema.loader import load_template, save_template
from template_studio.schema.models import MoodPreset, StyleFamily


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def parser():
    return build_parser()


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "brand.yaml"
    state = create_initial_state()
    state.name = "Harbour"
    save_template(state, path)
    return path


@pytest.fixture
def broken_template_file(tmp_path):
    path = tmp_path / "broken.yaml"
    state = create_initial_state()
    state.typography.title.font_size = 10
    save_template(state, path)
    return path


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParser:
    def test_command_required(self, parser):
        with pytest.raises(SystemExit) as exc:
            parser.parse_args([])
        assert exc.value.code == 2

    def test_export_defaults(self, parser):
        args = parser.parse_args(["export", "-o", "out.pptx"])
        assert args.func is cmd_export
        assert args.template is None
        assert args.style is None
        assert not args.skip_qa
        assert not args.verbose

    def test_export_requires_output(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["export"])

    def test_unknown_style_rejected(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["export", "-o", "x.pptx", "--style", "vaporwave"])

    def test_preview_size_default(self, parser):
        args = parser.parse_args(["preview", "--layout", "title", "-o", "t.svg"])
        assert args.size == "medium"
        assert not args.regions

    def test_palette_locks_repeatable(self, parser):
        args = parser.parse_args(["palette", "--lock", "primary", "--lock", "accent"])
        assert args.lock == ["primary", "accent"]
        assert args.mode == "complementary"

    def test_preset_subcommand_required(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["preset"])

    def test_verbose_flag(self, parser):
        args = parser.parse_args(["-v", "inspect"])
        assert args.verbose


# ---------------------------------------------------------------------------
# Template loading
# ---------------------------------------------------------------------------

class TestLoadState:
    def test_default(self):
        assert _load_state(None) == create_initial_state()

    def test_from_file(self, template_file):
        assert _load_state(str(template_file)).name == "Harbour"

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            _load_state(str(tmp_path / "nope.yaml"))
        assert exc.value.code == 1
        assert "Template file not found" in capsys.readouterr().err

    def test_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("name: Harbour\nstyleFamily: vaporwave\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            _load_state(str(path))
        assert exc.value.code == 1
        assert "Invalid template file" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class TestExportCommand:
    def test_writes_pptx(self, template_file, tmp_path, capsys):
        output = tmp_path / "out" / "brand.pptx"
        main(["export", "--template", str(template_file), "-o", str(output)])
        assert output.read_bytes()[:2] == b"PK"
        err = capsys.readouterr().err
        assert "Template: Harbour" in err
        assert "Written:" in err
        assert "Validation PASS" in err

    def test_font_warnings_reported(self, tmp_path, capsys):
        main(["export", "-o", str(tmp_path / "t.pptx"), "--skip-qa"])
        err = capsys.readouterr().err
        assert 'WARNING: Title font' in err
        assert "Document check skipped" in err

    def test_style_override(self, template_file, tmp_path, capsys):
        main(["export", "--template", str(template_file), "--style", "bento",
              "--mood", "premium", "-o", str(tmp_path / "t.pptx")])
        assert "style bento, mood premium" in capsys.readouterr().err

    def test_failed_export(self, broken_template_file, tmp_path, capsys):
        output = tmp_path / "t.pptx"
        with pytest.raises(SystemExit) as exc:
            main(["export", "--template", str(broken_template_file), "-o", str(output)])
        assert exc.value.code == 1
        assert "Title font size must be at least 18pt" in capsys.readouterr().err
        assert not output.exists()

    def test_qa_runs_on_buffer(self, tmp_path):
        checker = MagicMock()
        checker.check.return_value.valid = True
        checker.check.return_value.summary.return_value = "Validation PASS"
        with patch("template_studio.cli.ExportChecker", return_value=checker):
            main(["export", "-o", str(tmp_path / "t.pptx")])
        buffer, template = checker.check.call_args.args
        assert buffer[:2] == b"PK"
        assert template.name == "Untitled Template"


class TestPreviewCommand:
    def test_writes_svg(self, template_file, tmp_path, capsys):
        output = tmp_path / "timeline.svg"
        main(["preview", "--template", str(template_file), "--layout", "timeline",
              "--size", "large", "-o", str(output)])
        svg = output.read_bytes()
        assert svg.startswith(b"<?xml")
        assert b'width="640"' in svg
        assert "640x360, Timeline" in capsys.readouterr().err

    def test_regions(self, tmp_path):
        output = tmp_path / "regions.svg"
        main(["preview", "--layout", "comparison", "--regions", "-o", str(output)])
        assert b"Col 2" in output.read_bytes()

    def test_missing_layout(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["preview", "--layout", "data", "-o", str(tmp_path / "x.svg")])
        assert exc.value.code == 1
        assert "Template has no 'data' layout" in capsys.readouterr().err


class TestPaletteCommand:
    def test_seeded_palette(self, capsys):
        main(["palette", "--seed", "#1A6B8F", "--mode", "triadic"])
        lines = capsys.readouterr().out.splitlines()
        assert [line.split()[0] for line in lines] == [
            "primary", "secondary", "neutral", "background", "accent"]
        assert lines[3].split() == ["background", lines[3].split()[1]]
        assert lines[0].endswith(":1")

    def test_invalid_seed(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["palette", "--seed", "teal"])
        assert exc.value.code == 1

    def test_random_seed_reproducible(self, capsys):
        main(["palette", "--random-seed", "7"])
        first = capsys.readouterr().out
        main(["palette", "--random-seed", "7"])
        assert capsys.readouterr().out == first

    def test_locked_role(self, capsys):
        main(["palette", "--random-seed", "3", "--lock", "accent"])
        out = capsys.readouterr().out
        accent = next(line for line in out.splitlines() if line.startswith("accent"))
        assert "#E1A73B" in accent
        assert accent.endswith("(locked)")

    def test_apply_writes_template(self, template_file, capsys):
        main(["palette", "--seed", "#1A6B8F", "--apply", str(template_file)])
        primary = capsys.readouterr().out.splitlines()[0].split()[1]
        reloaded = load_template(template_file)
        assert reloaded.tokens.colors.primary == primary
        assert reloaded.name == "Harbour"


class TestValidateCommand:
    def test_valid_template(self, template_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["validate", "--template", str(template_file)])
        assert exc.value.code == 0
        assert "Validation PASS" in capsys.readouterr().out

    def test_errors_exit_nonzero(self, broken_template_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["validate", "--template", str(broken_template_file)])
        assert exc.value.code == 1
        assert "[ERROR] typography.title.fontSize" in capsys.readouterr().out


class TestVariantsCommand:
    def test_lists_four(self, capsys):
        main(["variants", "--layout", "content"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert not any(line.startswith("*") for line in lines)

    def test_verbose_shows_regions(self, capsys):
        main(["-v", "variants", "--layout", "quote"])
        assert "grid 12x8" in capsys.readouterr().out


class TestInspectCommand:
    def test_summary(self, template_file, capsys):
        main(["inspect", "--template", str(template_file)])
        out = capsys.readouterr().out
        assert "Template:    Harbour (new-template" in out
        assert "Style:       clean / calm" in out
        assert "Layouts:     10 of 18 enabled" in out

    def test_verbose_lists_layouts(self, capsys):
        main(["-v", "inspect"])
        out = capsys.readouterr().out
        assert "[x] title" in out
        assert "[ ] appendix" in out


class TestPresetCommands:
    def test_export_then_apply(self, tmp_path, capsys):
        source = tmp_path / "source.yaml"
        target = tmp_path / "target.yaml"
        state = create_initial_state()
        state.name = "Source"
        state.style_family = StyleFamily.EDITORIAL
        state.mood = MoodPreset.PREMIUM
        save_template(state, source)
        save_template(create_initial_state(), target)

        preset = tmp_path / "look.json"
        main(["preset", "export", "--template", str(source), "-o", str(preset)])
        assert json.loads(preset.read_text())["name"] == "Source Style"

        result = tmp_path / "result.yaml"
        main(["preset", "apply", "--preset", str(preset), "--template", str(target),
              "-o", str(result)])
        applied = load_template(result)
        assert applied.style_family == StyleFamily.EDITORIAL
        assert applied.mood == MoodPreset.PREMIUM
        assert load_template(target).style_family == StyleFamily.CLEAN
        assert "Applied Source Style" in capsys.readouterr().err

    def test_missing_preset(self, template_file, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["preset", "apply", "--preset", str(tmp_path / "nope.json"),
                  "--template", str(template_file)])
        assert exc.value.code == 1
        assert "Preset file not found" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

class TestMain:
    def test_verbose_configures_logging(self):
        with patch("template_studio.cli.logging.basicConfig") as basic:
            main(["-v", "inspect"])
        basic.assert_called_once()

    def test_quiet_by_default(self):
        with patch("template_studio.cli.logging.basicConfig") as basic:
            main(["inspect"])
        basic.assert_not_called()
