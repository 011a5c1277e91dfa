#!/usr/bin/env python3
"""
Color Engine for the Dot Wheel Sketches

Provides the predefined HSB palettes, palette selection, per-motif base color
picks and the jitter-and-clamp rule every dot color goes through.

Two policies exist and are chosen by configuration:
- fixed: one palette per run, each motif picks a base color from it
- random: every draw call gets an independent random RGB color
"""

from typing import Sequence, Tuple

from dotwheels.core import get_logger

from .rng import SeedController
from .sdk import HUE_MAX, RGB_MAX, Color

log = get_logger("dotwheels.color_engine")

HSBTriple = Tuple[float, float, float]
Palette = Tuple[HSBTriple, ...]

# High-saturation HSB palettes.
PALETTES: Tuple[Palette, ...] = (
    ((355, 85, 95), (45, 95, 95), (195, 70, 90), (115, 70, 90), (270, 50, 90)),
    ((5, 90, 95), (35, 95, 95), (200, 70, 92), (140, 60, 92), (290, 55, 90)),
    ((355, 80, 96), (28, 95, 96), (210, 55, 95), (150, 55, 92), (300, 45, 92)),
)


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def select_palette(index: int = 0) -> Palette:
    """
    Return one of the predefined palettes.

    Out-of-range indices are clamped to the first or last palette rather than
    raising.
    """
    clamped = int(clamp(index, 0, len(PALETTES) - 1))
    if clamped != index:
        log.debug(f"Palette index {index} clamped to {clamped}")
    return PALETTES[clamped]


def pick_base_color(palette: Sequence[HSBTriple], rng: SeedController) -> Color:
    """Pick one palette entry uniformly at random."""
    h, s, b = rng.choice(palette)
    return Color.hsb(h, s, b)


def random_rgb_color(rng: SeedController, alpha: float = RGB_MAX) -> Color:
    """Unconstrained random RGB color, independent of any palette."""
    return Color.rgb(
        rng.uniform(0, RGB_MAX),
        rng.uniform(0, RGB_MAX),
        rng.uniform(0, RGB_MAX),
        alpha,
    )


def jitter_hsb(
    rng: SeedController,
    base_hue: float,
    hue_offsets: Sequence[float],
    saturation: float,
    brightness: float,
    sat_range: Tuple[float, float],
    bright_range: Tuple[float, float],
    alpha: float = 100,
) -> Color:
    """
    Perturb a base hue by one of ``hue_offsets`` and clamp saturation and
    brightness into their ranges.

    ``saturation`` and ``brightness`` are the already-jittered raw values;
    the clamp is applied here so no caller can emit an out-of-range color.
    """
    h = (base_hue + rng.choice(hue_offsets)) % HUE_MAX
    s = clamp(saturation, *sat_range)
    b = clamp(brightness, *bright_range)
    return Color.hsb(h, s, b, alpha)

