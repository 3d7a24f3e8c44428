"""WCAG contrast utilities.

Relative luminance and contrast ratio per WCAG 2.1, plus the checks the
editor and exporter run against a five-role color palette.
"""

import re
from dataclasses import dataclass


class InvalidColorFormat(ValueError):
    """Raised when a color is not a 6-digit hex string."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value}")


_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

# WCAG thresholds
WCAG_AA_NORMAL_TEXT = 4.5
WCAG_AA_LARGE_TEXT = 3.0
WCAG_AAA_NORMAL_TEXT = 7.0
WCAG_AAA_LARGE_TEXT = 4.5


def parse_hex(value: str) -> tuple[int, int, int]:
    """Parse '#RRGGBB' (leading '#' optional) into an (r, g, b) tuple.

    Raises
    ------
    InvalidColorFormat
        If *value* is not exactly six hex digits.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    match = _HEX_RE.match(value)
    if not match:
        raise InvalidColorFormat(value)
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def _channel(c: int) -> float:
    s = c / 255
    return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str | tuple[int, int, int]) -> float:
    """Relative luminance of a hex string or RGB tuple, in [0, 1]."""
    r, g, b = parse_hex(color) if isinstance(color, str) else color
    return 0.2126 * _channel(r) + 0.7152 * _channel(g) + 0.0722 * _channel(b)


def contrast_ratio(color1: str, color2: str) -> float:
    """WCAG contrast ratio between two hex colors, in [1, 21]."""
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_aa(foreground: str, background: str) -> bool:
    """True when the pair meets WCAG AA for normal text (4.5:1)."""
    return contrast_ratio(foreground, background) >= WCAG_AA_NORMAL_TEXT


def meets_aa_large(foreground: str, background: str) -> bool:
    """True when the pair meets WCAG AA for large text (3:1)."""
    return contrast_ratio(foreground, background) >= WCAG_AA_LARGE_TEXT


# ---------------------------------------------------------------------------
# Palette checks
# ---------------------------------------------------------------------------

@dataclass
class ContrastIssue:
    foreground: str
    background: str
    ratio: float
    required: float
    context: str

    def __str__(self) -> str:
        return (f"{self.context}: {self.ratio:.2f}:1 "
                f"(requires {self.required}:1)")


_PALETTE_CHECKS = (
    ("primary", WCAG_AA_NORMAL_TEXT, "Primary text on background"),
    ("secondary", WCAG_AA_NORMAL_TEXT, "Secondary text on background"),
    ("neutral", WCAG_AA_NORMAL_TEXT, "Neutral text on background"),
    ("accent", WCAG_AA_LARGE_TEXT, "Accent on background (large text)"),
)


def validate_color_contrast(colors) -> list[ContrastIssue]:
    """Check every foreground role of a palette against its background.

    Parameters
    ----------
    colors : ColorTokens or dict
        Anything exposing primary/secondary/neutral/background/accent,
        either as attributes or as mapping keys.

    Returns
    -------
    list[ContrastIssue]
        One issue per role below its threshold; accent is held to the
        large-text threshold.
    """
    if isinstance(colors, dict):
        lookup = colors.__getitem__
    else:
        lookup = lambda role: getattr(colors, role)  # noqa: E731

    background = lookup("background")
    issues = []
    for role, required, context in _PALETTE_CHECKS:
        foreground = lookup(role)
        ratio = contrast_ratio(foreground, background)
        if ratio < required:
            issues.append(ContrastIssue(foreground, background, ratio, required, context))
    return issues


def suggest_contrast_adjustment(foreground: str, background: str,
                                target_ratio: float = WCAG_AA_NORMAL_TEXT) -> str:
    """Step the foreground towards black or white until it reaches *target_ratio*.

    Each step moves every RGB channel by 5; gives up after 100 steps and
    returns the closest color reached.
    """
    needs_darker = relative_luminance(background) > 0.5
    r, g, b = parse_hex(foreground)

    for _ in range(100):
        if contrast_ratio(rgb_to_hex(r, g, b), background) >= target_ratio:
            break
        if needs_darker:
            r, g, b = max(0, r - 5), max(0, g - 5), max(0, b - 5)
        else:
            r, g, b = min(255, r + 5), min(255, g + 5), min(255, b + 5)

    return rgb_to_hex(r, g, b)
