"""CLI entry point for Template Studio.

Exports brand templates to PPTX, renders SVG layout previews, generates
palettes and checks template quality.

Usage::

    # Export a template (the default template when --template is omitted)
    python -m template_studio.cli export \\
        --template brand.yaml --style bento --mood premium \\
        --output output/brand.pptx

    # Preview one layout as SVG
    python -m template_studio.cli preview \\
        --template brand.yaml --layout timeline --size large \\
        --output output/timeline.svg

    # Generate a palette from a seed and write it into a template
    python -m template_studio.cli palette \\
        --mode triadic --seed "#1A6B8F" --apply brand.yaml

    # Quality report (exit code 1 on errors)
    python -m template_studio.cli validate --template brand.yaml

    # Layout variants and template summary
    python -m template_studio.cli variants --layout comparison
    python -m template_studio.cli inspect --template brand.yaml

    # Move a look between templates
    python -m template_studio.cli preset export --template brand.yaml --output look.json
    python -m template_studio.cli preset apply --preset look.json --template other.yaml
"""

import argparse
import logging
import random
import sys
from pathlib import Path

import yaml

from template_studio.color.contrast import InvalidColorFormat, contrast_ratio
from template_studio.color.harmony import (
    ColorMood,
    HarmonyMode,
    generate_from_seed,
    generate_palette,
)
from template_studio.generator import TemplateExporter
from template_studio.layout.variants import current_variant, generate_layout_variants
from template_studio.preview import PREVIEW_SIZES, render_preview, scene_to_svg
from template_studio.qa import ExportChecker, validate_template
from template_studio.schema.defaults import create_initial_state
from template_studio.schema.loader import (
    load_style_preset,
    load_template,
    save_style_preset,
    save_template,
)
from template_studio.schema.models import (
    COLOR_ROLES,
    LayoutType,
    MoodPreset,
    StyleFamily,
)
from template_studio.store import TemplateStore


# ---------------------------------------------------------------------------
# Template loading
# ---------------------------------------------------------------------------

def _load_state(path):
    """Load a TemplateState from *path*, or the default state when None."""
    if path is None:
        return create_initial_state()
    path = Path(path)
    if not path.exists():
        _error(f"Template file not found: {path}")
    try:
        return load_template(path)
    except (KeyError, ValueError, TypeError, yaml.YAMLError) as e:
        _error(f"Invalid template file {path}: {e}")


def _styled_store(args):
    """Store holding the loaded template with --style / --mood applied."""
    store = TemplateStore(_load_state(args.template))
    if getattr(args, "style", None):
        store.set_style_family(args.style)
    if getattr(args, "mood", None):
        store.set_mood(args.mood)
    return store


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_export(args):
    """Export a template to PPTX."""
    template = _styled_store(args).template
    _info(f"Template: {template.name} ({len(template.enabled_layouts)} enabled layouts, "
          f"style {template.style_family.value}, mood {template.mood.value})")

    _info("Building PPTX...")
    result = TemplateExporter(template).export()
    for warning in result.warnings:
        _warn(warning.message)
    if not result.success:
        for message in result.error_messages:
            print(f"  ERROR: {message}", file=sys.stderr)
        _error("Export failed.")

    if not args.skip_qa:
        _info("Checking exported document...")
        check = ExportChecker().check(result.buffer, template)
        if check.valid:
            _info(check.summary())
        else:
            _warn(check.summary())
            if args.verbose:
                print(check.report(), file=sys.stderr)
    else:
        _info("Document check skipped (--skip-qa)")

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.buffer)
    _info(f"Written: {output} ({len(result.buffer):,} bytes, "
          f"{result.metrics.slide_count} slides, {result.metrics.duration_ms} ms)")


def cmd_preview(args):
    """Render one layout to SVG."""
    template = _styled_store(args).template
    layout = template.get_layout(args.layout)
    if layout is None:
        _error(f"Template has no {args.layout!r} layout")

    scene = render_preview(template, layout, size=args.size, show_regions=args.regions)
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(scene_to_svg(scene))
    _info(f"Written: {output} ({scene.width}x{scene.height}, {layout.name})")


def cmd_palette(args):
    """Generate a palette, optionally writing it into a template file."""
    target = args.apply or args.template
    store = TemplateStore(_load_state(target))
    current = store.template.tokens.colors
    locked = args.lock or []

    try:
        if args.seed:
            palette = generate_from_seed(args.seed, args.mode, args.temperature,
                                         current=current, locked=locked)
        else:
            rng = random.Random(args.random_seed) if args.random_seed is not None else None
            palette = generate_palette(args.mode, args.temperature,
                                       current=current, locked=locked, rng=rng)
    except InvalidColorFormat as e:
        _error(str(e))

    for role in COLOR_ROLES:
        value = getattr(palette, role)
        if role == "background":
            print(f"{role:<11} {value}")
        else:
            ratio = contrast_ratio(value, palette.background)
            lock = "  (locked)" if role in locked else ""
            print(f"{role:<11} {value}  {ratio:5.2f}:1{lock}")

    if args.apply:
        store.set_colors(**palette.to_dict())
        save_template(store.template, args.apply)
        _info(f"Palette written to {args.apply}")


def cmd_validate(args):
    """Print the template quality report."""
    template = _load_state(args.template)
    _info(f"Validating {template.name}")
    result = validate_template(template)
    print(result.report())
    sys.exit(0 if result.valid else 1)


def cmd_variants(args):
    """List the layout variants for a layout type."""
    template = _load_state(args.template)
    layout_type = LayoutType(args.layout)
    base = template.get_layout(layout_type)
    if base is None:
        _error(f"Template has no {args.layout!r} layout")

    active = current_variant(base)
    for variant in generate_layout_variants(base, layout_type):
        marker = "*" if active is not None and variant.id == active.id else " "
        regions = ", ".join(f"{r.id}:{r.role.value}" for r in variant.layout.regions)
        print(f"{marker} {variant.id:<22} {variant.name:<18} {variant.description}")
        if args.verbose:
            print(f"    grid {variant.layout.grid.columns:g}x{variant.layout.grid.rows:g}  "
                  f"[{regions}]")


def cmd_inspect(args):
    """Show a template summary."""
    t = _load_state(args.template)

    print(f"Template:    {t.name} ({t.id}, v{t.version})")
    if t.description:
        print(f"Description: {t.description}")
    print(f"Style:       {t.style_family.value} / {t.mood.value}")
    print(f"Knobs:       density {t.spacing_density:g}, type scale {t.type_scale:g}, "
          f"contrast {t.contrast_level}")
    print(f"Title font:  {t.typography.title.font_family} "
          f"{t.typography.title.font_size:g}pt / {t.typography.title.weight}")
    print(f"Body font:   {t.typography.body.font_family} "
          f"{t.typography.body.font_size:g}pt / {t.typography.body.weight}")
    print("Colors:      " + "  ".join(
        f"{role}={getattr(t.tokens.colors, role)}" for role in COLOR_ROLES))
    print(f"Layouts:     {len(t.enabled_layouts)} of {len(t.layouts)} enabled")

    if args.verbose:
        print()
        for layout in t.layouts:
            flag = "x" if layout.enabled else " "
            print(f"  [{flag}] {layout.type.value:<20} {layout.name}"
                  f" - {len(layout.regions)} region(s)")


def cmd_preset_export(args):
    """Write the template's look as a JSON style preset."""
    store = TemplateStore(_load_state(args.template))
    preset = store.export_style_preset()
    save_style_preset(preset, args.output)
    _info(f"Written: {args.output} ({preset.style_family.value} / {preset.mood.value})")


def cmd_preset_apply(args):
    """Apply a JSON style preset to a template file."""
    path = Path(args.preset)
    if not path.exists():
        _error(f"Preset file not found: {path}")
    try:
        preset = load_style_preset(path)
    except (KeyError, ValueError) as e:
        _error(f"Invalid preset file {path}: {e}")

    store = TemplateStore(_load_state(args.template))
    store.apply_custom_style(preset)
    output = args.output or args.template
    save_template(store.template, output)
    _info(f"Applied {preset.name} to {output}")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _info(msg):
    print(f"  {msg}", file=sys.stderr)


def _warn(msg):
    print(f"  WARNING: {msg}", file=sys.stderr)


def _error(msg):
    print(f"  ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="template-studio",
        description="Compile brand templates into previews and PowerPoint files.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Debug logging and detailed reports.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- export ----
    exp = subparsers.add_parser(
        "export",
        help="Export a template to PPTX.",
    )
    _add_template_arg(exp)
    _add_style_args(exp)
    exp.add_argument(
        "-o", "--output",
        required=True,
        help="Output PPTX file path.",
    )
    exp.add_argument(
        "--skip-qa",
        action="store_true",
        default=False,
        help="Skip reading the exported document back.",
    )
    exp.set_defaults(func=cmd_export)

    # ---- preview ----
    prev = subparsers.add_parser(
        "preview",
        help="Render a layout preview as SVG.",
    )
    _add_template_arg(prev)
    _add_style_args(prev)
    _add_layout_arg(prev)
    prev.add_argument(
        "-o", "--output",
        required=True,
        help="Output SVG file path.",
    )
    prev.add_argument(
        "--size",
        choices=list(PREVIEW_SIZES),
        default="medium",
        help="Preview size (default: medium).",
    )
    prev.add_argument(
        "--regions",
        action="store_true",
        default=False,
        help="Draw labelled region boxes instead of content.",
    )
    prev.set_defaults(func=cmd_preview)

    # ---- palette ----
    pal = subparsers.add_parser(
        "palette",
        help="Generate a harmonious, contrast-checked palette.",
    )
    _add_template_arg(pal)
    pal.add_argument(
        "--mode",
        choices=[m.value for m in HarmonyMode],
        default=HarmonyMode.COMPLEMENTARY.value,
        help="Harmony rule (default: complementary).",
    )
    pal.add_argument(
        "--temperature",
        choices=[m.value for m in ColorMood],
        default=ColorMood.NEUTRAL.value,
        help="Hue band, or temperature when seeded (default: neutral).",
    )
    pal.add_argument(
        "--seed",
        help="Seed primary color (#RRGGBB).",
    )
    pal.add_argument(
        "--lock",
        action="append",
        choices=list(COLOR_ROLES),
        help="Keep this role from the template (repeatable).",
    )
    pal.add_argument(
        "--random-seed",
        type=int,
        dest="random_seed",
        help="Seed for the random generator (unseeded palettes only).",
    )
    pal.add_argument(
        "--apply",
        help="Template file to write the palette into.",
    )
    pal.set_defaults(func=cmd_palette)

    # ---- validate ----
    val = subparsers.add_parser(
        "validate",
        help="Check contrast, spacing, typography and brand completeness.",
    )
    _add_template_arg(val)
    val.set_defaults(func=cmd_validate)

    # ---- variants ----
    var = subparsers.add_parser(
        "variants",
        help="List alternative arrangements for a layout type.",
    )
    _add_template_arg(var)
    _add_layout_arg(var)
    var.set_defaults(func=cmd_variants)

    # ---- inspect ----
    insp = subparsers.add_parser(
        "inspect",
        help="Show a template summary.",
    )
    _add_template_arg(insp)
    insp.set_defaults(func=cmd_inspect)

    # ---- preset ----
    preset = subparsers.add_parser(
        "preset",
        help="Export or apply JSON style presets.",
    )
    preset_sub = preset.add_subparsers(dest="preset_command", required=True)

    pexp = preset_sub.add_parser("export", help="Write a template's look to JSON.")
    _add_template_arg(pexp)
    pexp.add_argument(
        "-o", "--output",
        required=True,
        help="Output JSON file path.",
    )
    pexp.set_defaults(func=cmd_preset_export)

    papp = preset_sub.add_parser("apply", help="Apply a JSON preset to a template file.")
    papp.add_argument(
        "--preset",
        required=True,
        help="Style preset JSON file.",
    )
    papp.add_argument(
        "--template",
        required=True,
        help="Template YAML file to update.",
    )
    papp.add_argument(
        "-o", "--output",
        help="Write the result here instead of overwriting --template.",
    )
    papp.set_defaults(func=cmd_preset_apply)

    return parser


def _add_template_arg(parser):
    parser.add_argument(
        "--template",
        help="Template YAML file (default: the built-in starting template).",
    )


def _add_style_args(parser):
    parser.add_argument(
        "--style",
        choices=[s.value for s in StyleFamily],
        help="Override the template's style family.",
    )
    parser.add_argument(
        "--mood",
        choices=[m.value for m in MoodPreset],
        help="Override the template's mood.",
    )


def _add_layout_arg(parser):
    parser.add_argument(
        "--layout",
        required=True,
        choices=[t.value for t in LayoutType],
        help="Layout type.",
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
