#!/usr/bin/env python3
"""
Procedural Wheel Generators

Draws one wheel motif onto a Canvas. Two styles share the same entry point:

dots (layered, back to front)
- optional soft glow behind the wheel
- a dense core cluster whose radial density falls off towards the rim
- concentric ring bands made of jittered dots instead of solid strokes
- spokes drawn as chains of dots that shrink, saturate and darken outwards

compact
- optional soft glow
- one filled main disc
- outline ring lines at fixed radius steps
- an inner and an outer ring of evenly spaced dots
- straight line spokes
- a two-tier center dot

Shape and dot counts depend only on the configuration; positions, sizes and
colors are drawn from the seed controller passed in.
"""

import math

from dotwheels.config.schemas import WheelCfg
from dotwheels.core import get_logger

from .canvas import Canvas
from .color_engine import clamp, jitter_hsb, lerp, random_rgb_color
from .rng import SeedController
from .sdk import Color, Motif

log = get_logger("dotwheels.motif_generators")

# Hue offsets narrow from core to spokes.
CORE_HUE_OFFSETS = (-20, -10, 0, 10, 20)
BAND_HUE_OFFSETS = (-12, -6, 0, 6, 12)
SPOKE_HUE_OFFSETS = (-5, 0, 5)

CORE_SAT_RANGE = (40, 100)
CORE_BRIGHT_RANGE = (50, 100)
BAND_SAT_RANGE = (35, 100)
BAND_BRIGHT_RANGE = (40, 100)
SPOKE_SAT_RANGE = (20, 100)
SPOKE_BRIGHT_RANGE = (40, 100)

GLOW_COLOR = (0, 0, 10)


class WheelRenderer:
    """Renders motifs onto one canvas with one random stream."""

    def __init__(self, canvas: Canvas, rng: SeedController, config: WheelCfg, random_colors: bool = False):
        self.canvas = canvas
        self.rng = rng
        self.config = config
        self.random_colors = random_colors

    def render(self, motif: Motif) -> None:
        cfg = self.config
        log.debug(f"Rendering {cfg.style} wheel at ({motif.x:.1f}, {motif.y:.1f}) r={motif.radius:.1f}")
        if cfg.glow:
            self.draw_glow(motif)
        if cfg.style == "compact":
            self.draw_compact(motif)
            return
        if cfg.core:
            self.draw_core_cluster(motif)
        if cfg.bands:
            self.draw_ring_bands(motif)
        if cfg.spokes:
            self.draw_spoke_chains(motif)

    # ------------------------------------------------------------------
    # shared layers
    # ------------------------------------------------------------------

    def draw_glow(self, motif: Motif) -> None:
        """Single large low-opacity dark disc slightly larger than the wheel."""
        with self.canvas.scope() as c:
            c.no_stroke()
            alpha = self.config.glow_alpha
            if motif.base_color.mode == "rgb":
                c.fill(Color.rgb(0, 0, 0, alpha * 255 / 100))
            else:
                c.fill(Color.hsb(*GLOW_COLOR, alpha))
            d = motif.radius * 2 * self.config.glow_scale
            c.ellipse(motif.x, motif.y, d, d)

    # ------------------------------------------------------------------
    # dots style
    # ------------------------------------------------------------------

    def draw_core_cluster(self, motif: Motif) -> None:
        # Multiplying two uniform draws biases dots towards the center.
        rng = self.rng
        radius = motif.radius
        r_max = radius * self.config.core_extent
        with self.canvas.scope() as c:
            c.no_stroke()
            for _ in range(self.config.core_dots):
                a = rng.angle()
                r = rng.uniform(0, r_max) * rng.uniform(0.2, 1)
                x = motif.x + r * math.cos(a)
                y = motif.y + r * math.sin(a)

                s = 70 + rng.uniform(-10, 15)
                b = 95 + rng.uniform(-10, 0)
                c.fill(jitter_hsb(rng, motif.base_hue, CORE_HUE_OFFSETS, s, b, CORE_SAT_RANGE, CORE_BRIGHT_RANGE))
                d = rng.uniform(radius * 0.05, radius * 0.11)
                c.ellipse(x, y, d, d)

    def draw_ring_bands(self, motif: Motif) -> None:
        rng = self.rng
        cfg = self.config
        radius = motif.radius
        bands = cfg.band_count
        with self.canvas.scope() as c:
            c.no_stroke()
            for i in range(bands):
                t = 0.0 if bands <= 1 else i / (bands - 1)
                band_r = radius * lerp(cfg.band_inner, cfg.band_outer, t)
                base_size = lerp(radius * 0.04, radius * 0.10, t)

                for _ in range(cfg.band_dots):
                    a = rng.angle()
                    r = band_r + rng.uniform(-radius * 0.03, radius * 0.03)
                    x = motif.x + r * math.cos(a)
                    y = motif.y + r * math.sin(a)

                    s = 65 + rng.uniform(-15, 15)
                    b = 90 + rng.uniform(-15, 10)
                    c.fill(jitter_hsb(rng, motif.base_hue, BAND_HUE_OFFSETS, s, b, BAND_SAT_RANGE, BAND_BRIGHT_RANGE))
                    d = base_size * rng.uniform(0.75, 1.25)
                    c.ellipse(x, y, d, d)

    def draw_spoke_chains(self, motif: Motif) -> None:
        """
        Spokes as chains of dots from the inner to the outer radius.

        Along each chain the dots shrink while saturation rises and
        brightness falls, so the spoke fades into the outer ring.
        """
        rng = self.rng
        cfg = self.config
        radius = motif.radius
        inner_r = radius * cfg.spoke_inner
        outer_r = radius * cfg.spoke_outer
        steps = cfg.spoke_steps
        with self.canvas.scope() as c:
            c.no_stroke()
            for i in range(cfg.spoke_count):
                a = math.radians(i * 360 / cfg.spoke_count)
                for k in range(steps + 1):
                    t = k / steps
                    r = lerp(inner_r, outer_r, t) + rng.uniform(-radius * 0.01, radius * 0.01)
                    x = motif.x + r * math.cos(a)
                    y = motif.y + r * math.sin(a)

                    s = 30 + t * 55 + rng.uniform(-10, 10)
                    b = 100 - t * 45 + rng.uniform(-5, 5)
                    c.fill(jitter_hsb(rng, motif.base_hue, SPOKE_HUE_OFFSETS, s, b, SPOKE_SAT_RANGE, SPOKE_BRIGHT_RANGE))
                    d = lerp(radius * 0.09, radius * 0.03, t) * rng.uniform(0.85, 1.1)
                    c.ellipse(x, y, d, d)

    # ------------------------------------------------------------------
    # compact style
    # ------------------------------------------------------------------

    def _color(self, motif: Motif, sat_shift: float = 0, bright_shift: float = 0) -> Color:
        """Random RGB per call, or a tint of the base hue when a palette is fixed."""
        if self.random_colors:
            return random_rgb_color(self.rng)
        base = motif.base_color
        s = base.c2 if base.mode == "hsb" else 70
        b = base.c3 if base.mode == "hsb" else 90
        return Color.hsb(
            motif.base_hue,
            clamp(s + sat_shift, 20, 100),
            clamp(b + bright_shift, 40, 100),
        )

    def draw_compact(self, motif: Motif) -> None:
        rng = self.rng
        cfg = self.config
        radius = motif.radius
        cx, cy = motif.x, motif.y
        with self.canvas.scope() as c:
            c.translate(cx, cy)

            # main disc
            c.no_stroke()
            c.fill(self._color(motif))
            c.ellipse(0, 0, radius * 2, radius * 2)

            # ring lines at fixed steps inside the disc
            c.no_fill()
            for k in range(cfg.ring_lines):
                ring_d = radius * 2 * (0.9 - k * 0.15)
                if ring_d <= 0:
                    break
                weight = cfg.ring_weight * (0.75 + 0.5 * rng.noise(cx * 0.01 + k, cy * 0.01))
                c.stroke(self._color(motif, bright_shift=-25), weight)
                c.ellipse(0, 0, ring_d, ring_d)

            # inner and outer dot rings
            c.no_stroke()
            self._dot_ring(motif, cfg.inner_ring_dots, radius * 0.55, radius * 0.10)
            self._dot_ring(motif, cfg.outer_ring_dots, radius * 0.85, radius * 0.06)

            # straight spokes
            c.no_fill()
            for i in range(cfg.spoke_count):
                a = math.radians(i * 360 / cfg.spoke_count)
                c.stroke(self._color(motif, sat_shift=10, bright_shift=-35), cfg.spoke_weight)
                c.line(
                    radius * 0.15 * math.cos(a),
                    radius * 0.15 * math.sin(a),
                    radius * 0.5 * math.cos(a),
                    radius * 0.5 * math.sin(a),
                )

            # two-tier center dot
            c.no_stroke()
            c.fill(self._color(motif, bright_shift=-30))
            c.ellipse(0, 0, radius * 0.3, radius * 0.3)
            c.fill(self._color(motif, sat_shift=-40, bright_shift=10))
            c.ellipse(0, 0, radius * 0.12, radius * 0.12)

    def _dot_ring(self, motif: Motif, count: int, ring_r: float, d: float) -> None:
        c = self.canvas
        for j in range(count):
            a = j * math.tau / count
            c.fill(self._color(motif, sat_shift=-15, bright_shift=5))
            c.ellipse(ring_r * math.cos(a), ring_r * math.sin(a), d, d)
