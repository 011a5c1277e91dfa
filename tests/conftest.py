"""
Test configuration and fixtures for the dot wheel sketches.

This module provides pytest fixtures to ensure:
- no test picks up seed or config overrides from the environment
- renderer output can be inspected without a real drawing backend
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from dotwheels.config.schemas import SketchCfg, WheelCfg
from dotwheels.core import build_config
from dotwheels.sketch.canvas import Canvas
from dotwheels.sketch.rng import SeedController
from dotwheels.sketch.sdk import Color, Motif


class RecordingCanvas(Canvas):
    """Canvas that records every primitive instead of drawing it."""

    def __init__(self, width: int = 800, height: int = 600):
        super().__init__(width, height)
        self.ops = []

    def _draw_background(self, color):
        self.ops.append(("background", color))

    def _draw_ellipse(self, cx, cy, rx, ry, fill, stroke, weight):
        self.ops.append(("ellipse", cx, cy, rx, ry, fill, stroke, weight))

    def _draw_line(self, x1, y1, x2, y2, stroke, weight):
        self.ops.append(("line", x1, y1, x2, y2, stroke, weight))

    def save(self, path):
        return str(path)

    @property
    def ellipses(self):
        return [op for op in self.ops if op[0] == "ellipse"]

    @property
    def lines(self):
        return [op for op in self.ops if op[0] == "line"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DOTWHEELS_* overrides from leaking into tests"""
    monkeypatch.delenv("DOTWHEELS_SEED", raising=False)
    monkeypatch.delenv("DOTWHEELS_CONFIG", raising=False)


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()


@pytest.fixture
def rng():
    return SeedController(20251114)


@pytest.fixture
def static_cfg() -> SketchCfg:
    return build_config("static_group")


@pytest.fixture
def scatter_cfg() -> SketchCfg:
    return build_config("scatter")


@pytest.fixture
def dots_cfg() -> WheelCfg:
    return WheelCfg()


@pytest.fixture
def compact_cfg() -> WheelCfg:
    return WheelCfg(style="compact", glow=True)


@pytest.fixture
def hsb_motif() -> Motif:
    return Motif(x=400, y=300, radius=100, base_color=Color.hsb(195, 70, 90))


@pytest.fixture
def rgb_motif() -> Motif:
    return Motif(x=200, y=150, radius=80, base_color=Color.rgb(200, 40, 40))
