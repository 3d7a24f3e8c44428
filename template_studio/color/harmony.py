"""Color harmony - palette generation from color-wheel rules.

Two entry points:

    generate_palette(mode, mood)          random base hue within a mood band
    generate_from_seed(seed, mode, temp)  hues derived from a chosen color

Both assign fixed saturation/lightness roles (deep primary, near-white
background, vibrant accent), then walk primary/secondary/neutral lightness
until each reaches WCAG AA against the background.  Locked roles are copied
from the current palette as a final step.
"""

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Mapping

from ..schema.models import COLOR_ROLES, ColorTokens
from .contrast import (
    WCAG_AA_LARGE_TEXT,
    WCAG_AA_NORMAL_TEXT,
    contrast_ratio,
    parse_hex,
    relative_luminance,
)


class HarmonyMode(Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    MONOCHROMATIC = "monochromatic"


class ColorMood(Enum):
    """Hue band for random generation, or temperature for seeded generation."""
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class HSL:
    h: float   # 0-360
    s: float   # 0-100
    l: float   # 0-100


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def hex_to_hsl(hex_color: str) -> HSL:
    """Convert '#RRGGBB' to HSL with each channel rounded to an integer."""
    r, g, b = (c / 255 for c in parse_hex(hex_color))
    mx, mn = max(r, g, b), min(r, g, b)
    h = s = 0.0
    lightness = (mx + mn) / 2

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)
        if mx == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif mx == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return HSL(round(h * 360), round(s * 100), round(lightness * 100))


def hsl_to_hex(hsl: HSL) -> str:
    """Convert HSL to an uppercase '#RRGGBB' string."""
    h = hsl.h
    s = hsl.s / 100
    lightness = hsl.l / 100

    c = (1 - abs(2 * lightness - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = lightness - c / 2

    if 0 <= h < 60:
        r, g, b = c, x, 0
    elif 60 <= h < 120:
        r, g, b = x, c, 0
    elif 120 <= h < 180:
        r, g, b = 0, c, x
    elif 180 <= h < 240:
        r, g, b = 0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    return "#" + "".join(f"{round((v + m) * 255):02X}" for v in (r, g, b))


def ensure_contrast(color: HSL, background: str,
                    min_ratio: float = WCAG_AA_NORMAL_TEXT) -> HSL:
    """Walk lightness in steps of 2 (at most 50) until *color* clears *min_ratio*.

    Darkens on light backgrounds and lightens on dark ones.
    """
    light_bg = relative_luminance(background) > 0.5
    adjusted = color
    for _ in range(50):
        if contrast_ratio(hsl_to_hex(adjusted), background) >= min_ratio:
            break
        if light_bg:
            adjusted = replace(adjusted, l=max(0, adjusted.l - 2))
        else:
            adjusted = replace(adjusted, l=min(100, adjusted.l + 2))
    return adjusted


# ---------------------------------------------------------------------------
# Hue rules
# ---------------------------------------------------------------------------

def random_hue(mood: ColorMood, rng=random) -> int:
    rand = rng.random()
    if mood == ColorMood.WARM:
        # reds/oranges/yellows (0-60) or magentas (300-360)
        return int(rand * 2 * 60) if rand < 0.5 else int(300 + rand * 60)
    if mood == ColorMood.COOL:
        return int(120 + rand * 180)
    return int(rand * 360)


def harmony_hues(base_hue: float, mode: HarmonyMode) -> list[float]:
    """Hues for a harmony rule; monochromatic yields the base hue alone."""
    if mode == HarmonyMode.COMPLEMENTARY:
        return [base_hue, (base_hue + 180) % 360]
    if mode == HarmonyMode.ANALOGOUS:
        return [(base_hue - 30 + 360) % 360, base_hue, (base_hue + 30) % 360]
    if mode == HarmonyMode.TRIADIC:
        return [base_hue, (base_hue + 120) % 360, (base_hue + 240) % 360]
    if mode == HarmonyMode.SPLIT_COMPLEMENTARY:
        complement = (base_hue + 180) % 360
        return [base_hue, (complement - 30 + 360) % 360, (complement + 30) % 360]
    return [base_hue]


def _role_colors(mode: HarmonyMode, base_hue: float) -> list[HSL]:
    """Primary, secondary, neutral, background, accent for a random palette."""
    if mode == HarmonyMode.MONOCHROMATIC:
        return [HSL(base_hue, 70, 35), HSL(base_hue, 60, 50), HSL(base_hue, 50, 65),
                HSL(base_hue, 30, 85), HSL(base_hue, 80, 45)]

    hues = harmony_hues(base_hue, mode)
    if mode == HarmonyMode.COMPLEMENTARY:
        return [HSL(hues[0], 65, 35), HSL(hues[1], 50, 45), HSL(hues[0], 10, 25),
                HSL(hues[0], 5, 98), HSL(hues[1], 70, 50)]
    if mode == HarmonyMode.ANALOGOUS:
        return [HSL(hues[1], 60, 35), HSL(hues[0], 45, 50), HSL(hues[1], 10, 25),
                HSL(hues[1], 8, 97), HSL(hues[2], 65, 45)]
    if mode == HarmonyMode.TRIADIC:
        return [HSL(hues[0], 55, 35), HSL(hues[1], 40, 50), HSL(hues[0], 10, 25),
                HSL(hues[0], 5, 98), HSL(hues[2], 70, 50)]
    # split-complementary
    return [HSL(hues[0], 60, 35), HSL(hues[1], 45, 50), HSL(hues[0], 10, 25),
            HSL(hues[0], 5, 98), HSL(hues[2], 65, 50)]


def _locked_roles(locked) -> set[str]:
    if not locked:
        return set()
    if isinstance(locked, Mapping):
        return {role for role, flag in locked.items() if flag}
    return set(locked)


def _apply_locks(palette: ColorTokens, current: ColorTokens | None, locked) -> ColorTokens:
    roles = _locked_roles(locked)
    if current is None or not roles:
        return palette
    for role in COLOR_ROLES:
        if role in roles:
            setattr(palette, role, getattr(current, role))
    return palette


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

def generate_palette(mode: HarmonyMode | str,
                     mood: ColorMood | str = ColorMood.NEUTRAL,
                     current: ColorTokens | None = None,
                     locked: Mapping[str, bool] | Iterable[str] | None = None,
                     rng: random.Random | None = None) -> ColorTokens:
    """Generate a harmonious palette around a random hue.

    Parameters
    ----------
    mode : HarmonyMode or str
        Color-wheel rule used to derive the role hues.
    mood : ColorMood or str
        Hue band the random base hue is drawn from.
    current : ColorTokens, optional
        Palette that locked roles are copied from.
    locked : mapping or iterable of role names, optional
        Roles to keep from *current*; applied after generation.
    rng : random.Random, optional
        Source of randomness; the module RNG when omitted.

    Returns
    -------
    ColorTokens
        Primary, secondary and neutral clear 4.5:1 against the background
        and the accent clears 3:1, unless locked.
    """
    mode = HarmonyMode(mode)
    mood = ColorMood(mood)
    base_hue = random_hue(mood, rng or random)
    primary, secondary, neutral, background, accent = _role_colors(mode, base_hue)

    bg = hsl_to_hex(background)
    palette = ColorTokens(
        primary=hsl_to_hex(ensure_contrast(primary, bg)),
        secondary=hsl_to_hex(ensure_contrast(secondary, bg)),
        neutral=hsl_to_hex(ensure_contrast(neutral, bg)),
        background=bg,
        accent=hsl_to_hex(ensure_contrast(accent, bg, WCAG_AA_LARGE_TEXT)),
    )
    return _apply_locks(palette, current, locked)


@dataclass(frozen=True)
class _Temperature:
    saturation_multiplier: float
    lightness_shift: float
    accent_saturation: float
    background_warmth: float


_TEMPERATURES = {
    ColorMood.WARM: _Temperature(1.1, 2, 75, 3),
    ColorMood.COOL: _Temperature(0.9, -2, 65, -3),
    ColorMood.NEUTRAL: _Temperature(1.0, 0, 70, 0),
}


def _shift_hue(hue: float, temperature: ColorMood) -> float:
    """Nudge a derived hue towards the warm or cool side of the wheel."""
    if temperature == ColorMood.WARM and 180 <= hue < 300:
        return (hue + 30) % 360
    if temperature == ColorMood.COOL and (hue < 120 or hue >= 300):
        return (hue + 150) % 360
    return hue


def generate_from_seed(seed: str,
                       mode: HarmonyMode | str = HarmonyMode.COMPLEMENTARY,
                       temperature: ColorMood | str = ColorMood.NEUTRAL,
                       current: ColorTokens | None = None,
                       locked: Mapping[str, bool] | Iterable[str] | None = None) -> ColorTokens:
    """Generate a palette whose hues derive from *seed*.

    The seed becomes the primary after contrast repair, so its exact value
    can shift.  Temperature scales saturation and lightness, tints the
    background and pushes derived hues towards its side of the wheel.
    """
    mode = HarmonyMode(mode)
    temperature = ColorMood(temperature)
    seed_hsl = hex_to_hsl(seed)
    base_hue = seed_hsl.h
    config = _TEMPERATURES[temperature]

    if mode == HarmonyMode.MONOCHROMATIC:
        hues = [base_hue, base_hue, base_hue]
    else:
        hues = harmony_hues(base_hue, mode)
    # The primary hue is never shifted
    hues = [h if i == 0 else _shift_hue(h, temperature) for i, h in enumerate(hues)]

    roles = _locked_roles(locked)
    if current is not None and "background" in roles:
        background = current.background
    else:
        if temperature == ColorMood.WARM:
            bg_hue = 40
        elif temperature == ColorMood.COOL:
            bg_hue = 220
        else:
            bg_hue = base_hue
        background = hsl_to_hex(HSL(bg_hue, abs(config.background_warmth), 98))

    shift = config.lightness_shift
    secondary = HSL(
        hues[1] if len(hues) > 1 else base_hue,
        min(100, max(20, 45 * config.saturation_multiplier)),
        min(70, max(30, 50 + shift)),
    )
    neutral = HSL(base_hue, 10, max(15, 25 + shift))
    accent_hue = hues[-1] if len(hues) > 1 else (base_hue + 180) % 360
    accent = HSL(accent_hue, config.accent_saturation, 50 + shift)

    palette = ColorTokens(
        primary=hsl_to_hex(ensure_contrast(seed_hsl, background)),
        secondary=hsl_to_hex(ensure_contrast(secondary, background)),
        neutral=hsl_to_hex(ensure_contrast(neutral, background)),
        background=background,
        accent=hsl_to_hex(ensure_contrast(accent, background, WCAG_AA_LARGE_TEXT)),
    )
    return _apply_locks(palette, current, roles)


@dataclass
class GeneratedPalette:
    palette: ColorTokens
    mode: HarmonyMode
    temperature: ColorMood
    hues: list[float]

    def to_dict(self) -> dict:
        return {
            "palette": self.palette.to_dict(),
            "harmony": {
                "mode": self.mode.value,
                "temperature": self.temperature.value,
                "hues": list(self.hues),
            },
        }


def generate_from_primary_with_metadata(primary: str, mode: HarmonyMode | str,
                                        temperature: ColorMood | str) -> GeneratedPalette:
    """Seeded palette plus the harmony hues it was built from (unshifted)."""
    mode = HarmonyMode(mode)
    temperature = ColorMood(temperature)
    hues = harmony_hues(hex_to_hsl(primary).h, mode)
    return GeneratedPalette(
        palette=generate_from_seed(primary, mode, temperature),
        mode=mode,
        temperature=temperature,
        hues=hues,
    )
