"""
Dot Wheel Sketches - Sketch Package

This package provides the layout planner, color engine, wheel renderer and
scene orchestrator that draw static compositions of dot wheels.
"""

from .canvas import Canvas, ImageCanvas, SvgCanvas, canvas_for_path
from .color_engine import (
    PALETTES,
    clamp,
    jitter_hsb,
    pick_base_color,
    random_rgb_color,
    select_palette,
)
from .layout_engine import LayoutEngine, content_rect, grid_centers, random_placements
from .motif_generators import WheelRenderer
from .rng import SeedController
from .scene_orchestrator import SceneOrchestrator
from .sdk import (
    CanvasFrame,
    Color,
    ContentRect,
    Motif,
    Placement,
    Point,
    Scene,
)

__all__ = [
    "Color",
    "CanvasFrame",
    "ContentRect",
    "Point",
    "Placement",
    "Motif",
    "Scene",
    "SeedController",
    "PALETTES",
    "clamp",
    "select_palette",
    "pick_base_color",
    "random_rgb_color",
    "jitter_hsb",
    "LayoutEngine",
    "content_rect",
    "grid_centers",
    "random_placements",
    "WheelRenderer",
    "Canvas",
    "SvgCanvas",
    "ImageCanvas",
    "canvas_for_path",
    "SceneOrchestrator",
]
