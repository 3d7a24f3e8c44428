"""Document-level bounds checks for raw template dictionaries.

Run at the input boundary (file load, API payloads) before a document is
turned into model objects.  Returns human-readable messages; an empty list
means the document is acceptable.
"""

import re
from typing import Any

from .models import COLOR_ROLES, AccentType, LayoutType, RegionRole

HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

_SPACING_MINIMUMS = {"base": 2, "m": 8, "l": 16}
_FONT_MINIMUMS = {"title": 18, "body": 12}
_LAYOUT_TYPES = {t.value for t in LayoutType}
_REGION_ROLES = {r.value for r in RegionRole}
_ACCENT_TYPES = {a.value for a in AccentType}


def _check_tokens(tokens: Any, errors: list[str]) -> None:
    if not isinstance(tokens, dict):
        errors.append("Tokens are required")
        return
    colors = tokens.get("colors") or {}
    for role in COLOR_ROLES:
        value = colors.get(role)
        if not isinstance(value, str) or not HEX_PATTERN.match(value):
            errors.append(f"Invalid hex color for {role}: {value!r}")
    spacing = tokens.get("spacing") or {}
    for key, minimum in _SPACING_MINIMUMS.items():
        value = spacing.get(key)
        if value is None or value < minimum:
            errors.append(f"Spacing {key} must be at least {minimum}")
    radius = tokens.get("radius") or {}
    for key in ("sm", "md", "lg"):
        value = radius.get(key)
        if value is None or value < 0:
            errors.append(f"Radius {key} must be non-negative")


def _check_typography(typography: Any, errors: list[str]) -> None:
    if not isinstance(typography, dict):
        errors.append("Typography is required")
        return
    for role, minimum in _FONT_MINIMUMS.items():
        style = typography.get(role)
        if not isinstance(style, dict):
            errors.append(f"Typography {role} is required")
            continue
        if not style.get("fontFamily"):
            errors.append(f"{role.capitalize()} font family is required")
        size = style.get("fontSize")
        if size is None or size < minimum:
            errors.append(f"{role.capitalize()} font size must be at least {minimum}pt")
        line_height = style.get("lineHeight")
        if line_height is None or line_height < 1:
            errors.append(f"{role.capitalize()} line height must be at least 1")
        weight = style.get("weight")
        if weight is None or not 100 <= weight <= 900:
            errors.append(f"{role.capitalize()} weight must be between 100 and 900")


def _check_layout(index: int, layout: dict, errors: list[str]) -> None:
    where = f"Layout {index}"
    if layout.get("type") not in _LAYOUT_TYPES:
        errors.append(f"{where}: unknown layout type {layout.get('type')!r}")
    grid = layout.get("grid") or {}
    if grid.get("columns", 0) < 1 or grid.get("rows", 0) < 1:
        errors.append(f"{where}: grid columns and rows must be at least 1")
    if grid.get("gutter", 0) < 0:
        errors.append(f"{where}: grid gutter must be non-negative")
    regions = layout.get("regions") or []
    if not regions:
        errors.append(f"{where}: at least one region is required")
    for region in regions:
        if not region.get("id"):
            errors.append(f"{where}: region id is required")
        if region.get("role") not in _REGION_ROLES:
            errors.append(f"{where}: unknown region role {region.get('role')!r}")
        bounds = region.get("bounds") or {}
        if any(bounds.get(k, -1) < 0 for k in ("x", "y", "w", "h")):
            errors.append(f"{where}: region {region.get('id')!r} bounds must be non-negative")


def validate_template_document(data: dict) -> list[str]:
    """Check a raw template dictionary against the document schema bounds."""
    errors: list[str] = []
    if not data.get("id"):
        errors.append("Template ID is required")
    if not data.get("name"):
        errors.append("Template name is required")
    if not data.get("version"):
        errors.append("Version is required")

    _check_tokens(data.get("tokens"), errors)
    _check_typography(data.get("typography"), errors)

    layouts = data.get("layouts") or []
    if not layouts:
        errors.append("Template must have at least one layout")
    for i, layout in enumerate(layouts):
        _check_layout(i, layout, errors)

    for accent in data.get("accents") or []:
        if not accent.get("id"):
            errors.append("Accent id is required")
        if accent.get("type") not in _ACCENT_TYPES:
            errors.append(f"Unknown accent type {accent.get('type')!r}")

    # Presentation knobs are optional on plain templates
    if "spacingDensity" in data and not 0.5 <= data["spacingDensity"] <= 2.0:
        errors.append("Spacing density must be between 0.5 and 2.0")
    if "typeScale" in data and not 1.1 <= data["typeScale"] <= 1.5:
        errors.append("Type scale must be between 1.1 and 1.5")
    if "contrastLevel" in data and not 0 <= data["contrastLevel"] <= 100:
        errors.append("Contrast level must be between 0 and 100")

    return errors
