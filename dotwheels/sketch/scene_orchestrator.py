#!/usr/bin/env python3
"""
Scene Orchestrator for the Dot Wheel Sketches

Owns the seed controller and the current scene. Every (re)generation reseeds
first, so the same seed and frame size always rebuild the same scene; a
resize is a full regeneration, never an incremental adjustment.
"""

from typing import List, Optional

from dotwheels.config.schemas import SketchCfg
from dotwheels.core import get_logger

from .canvas import Canvas
from .color_engine import pick_base_color, random_rgb_color, select_palette
from .layout_engine import LayoutEngine, content_rect
from .motif_generators import WheelRenderer
from .rng import SeedController
from .sdk import CanvasFrame, Color, Motif, Placement, Scene

log = get_logger("dotwheels.scene_orchestrator")


class SceneOrchestrator:
    """Builds scenes from a sketch config and renders them onto canvases."""

    def __init__(self, config: Optional[SketchCfg] = None):
        self.config = config if config is not None else SketchCfg()
        self.seed = self.config.seed
        self.rng = SeedController(self.seed)
        self.layout = LayoutEngine(self.rng)
        self.scene: Optional[Scene] = None

    def initialize(self, frame: CanvasFrame, seed: Optional[int] = None) -> Scene:
        """Set the seed (config default when omitted) and build the first scene."""
        if seed is not None:
            self.seed = seed
        return self.regenerate(frame)

    def resize(self, width: float, height: float) -> Scene:
        """Host resize notification: rebuild the scene for the new frame size."""
        log.info(f"Resize to {width}x{height}, regenerating scene")
        return self.regenerate(CanvasFrame(width=width, height=height))

    def regenerate(self, frame: CanvasFrame) -> Scene:
        self.rng.seed(self.seed)

        cfg = self.config
        rect = content_rect(frame, cfg.canvas.margin_ratio)
        placements = self._plan(frame, rect)

        palette = select_palette(cfg.palette.index)
        motifs: List[Motif] = []
        for p in placements:
            if cfg.palette.policy == "fixed":
                base = pick_base_color(palette, self.rng)
            else:
                base = random_rgb_color(self.rng)
            motifs.append(Motif(x=p.x, y=p.y, radius=p.radius, base_color=base))

        self.scene = Scene(seed=self.seed, frame=frame, rect=rect, motifs=tuple(motifs))
        log.info(
            f"Generated scene with {len(motifs)} wheels "
            f"({cfg.layout.strategy} layout, seed {self.seed}, frame {frame.width}x{frame.height})"
        )
        return self.scene

    def _plan(self, frame: CanvasFrame, rect) -> List[Placement]:
        layout = self.config.layout
        if layout.strategy == "random":
            return self.layout.random_placements(
                layout.count, frame, (layout.size_min, layout.size_max), layout.margin_factor
            )

        centers = self.layout.grid_centers(
            layout.count, rect, layout.grid_cols, layout.grid_rows, layout.jitter_ratio
        )
        factors = layout.radius_factors
        return [
            Placement(x=pt.x, y=pt.y, radius=rect.unit * factors[idx % len(factors)])
            for idx, pt in enumerate(centers)
        ]

    def render_frame(self, canvas: Canvas) -> Canvas:
        """Fill the background and draw every wheel in scene order."""
        if self.scene is None:
            raise RuntimeError("render_frame() called before initialize()")

        cfg = self.config
        canvas.background(Color.from_channels(cfg.canvas.color_mode, cfg.canvas.background))
        renderer = WheelRenderer(
            canvas, self.rng, cfg.wheel, random_colors=cfg.palette.policy == "random"
        )
        for motif in self.scene.motifs:
            renderer.render(motif)
        return canvas
