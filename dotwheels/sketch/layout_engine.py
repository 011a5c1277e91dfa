#!/usr/bin/env python3
"""
Layout Engine for the Dot Wheel Sketches

Provides deterministic placement of wheels on the canvas:
- content_rect: margin-inset drawable area scaled from the smaller dimension
- grid_centers: row-major grid with per-cell jitter so wheels do not look
  mechanically aligned
- random_placements: free sampling with a size-proportional margin; overlap
  is allowed and expected

All units in pixels.
"""

from typing import List, Optional, Tuple

from dotwheels.core import get_logger

from .rng import SeedController
from .sdk import CanvasFrame, ContentRect, Placement, Point

log = get_logger("dotwheels.layout_engine")


def content_rect(frame: CanvasFrame, margin_ratio: float) -> ContentRect:
    """
    Compute the content rectangle for a frame.

    The margin is ``margin_ratio`` of the smaller frame dimension so the layout
    scales proportionally when the frame is resized.
    """
    if not 0 <= margin_ratio < 0.5:
        raise ValueError(f"margin_ratio must be in [0, 0.5), got {margin_ratio}")
    unit = min(frame.width, frame.height)
    m = unit * margin_ratio
    return ContentRect(
        x=m,
        y=m,
        w=frame.width - 2 * m,
        h=frame.height - 2 * m,
        margin=m,
        unit=unit,
    )


class LayoutEngine:
    """Placement algorithms driven by one seed controller."""

    def __init__(self, rng: Optional[SeedController] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else SeedController(seed)

    def grid_centers(
        self, n: int, rect: ContentRect, cols: int, rows: int, jitter: float = 0.15
    ) -> List[Point]:
        """
        Generate jittered grid cell centers, row-major.

        Args:
            n: Number of centers wanted
            rect: Content rectangle the grid spans
            cols: Grid columns
            rows: Grid rows
            jitter: Max offset as a fraction of the cell size, per axis

        Returns:
            min(n, cols * rows) points; excess cells stay unused
        """
        if n <= 0 or cols <= 0 or rows <= 0:
            return []
        if n > cols * rows:
            log.warning(f"Requested {n} grid centers but grid holds {cols * rows}, truncating")

        cw = rect.w / cols
        ch = rect.h / rows
        jx = cw * jitter
        jy = ch * jitter

        pts: List[Point] = []
        for r in range(rows):
            for c in range(cols):
                cx = rect.x + c * cw + cw * 0.5 + self.rng.uniform(-jx, jx)
                cy = rect.y + r * ch + ch * 0.5 + self.rng.uniform(-jy, jy)
                pts.append(Point(x=cx, y=cy))
                if len(pts) >= n:
                    return pts
        return pts

    def random_placements(
        self,
        count: int,
        frame: CanvasFrame,
        size_range: Tuple[float, float],
        margin_factor: float = 0.7,
    ) -> List[Placement]:
        """
        Place ``count`` wheels uniformly at random, without collision checks.

        Each wheel draws a size from ``size_range``; its margin is
        ``margin_factor * size``, clamped to half the frame dimension on each
        axis so an oversized wheel is centered instead of producing an
        inverted sampling range.
        """
        lo, hi = size_range
        if lo <= 0 or hi < lo:
            raise ValueError(f"Invalid size range: {size_range}")

        placements: List[Placement] = []
        for _ in range(max(0, count)):
            size = self.rng.uniform(lo, hi)
            margin = size * margin_factor
            mx = min(margin, frame.width / 2)
            my = min(margin, frame.height / 2)
            x = self.rng.uniform(mx, frame.width - mx)
            y = self.rng.uniform(my, frame.height - my)
            placements.append(Placement(x=x, y=y, radius=size / 2))
        return placements


# Convenience functions that create a default engine instance
def grid_centers(
    n: int, rect: ContentRect, cols: int, rows: int, jitter: float = 0.15, seed: Optional[int] = None
) -> List[Point]:
    """Generate jittered grid centers."""
    engine = LayoutEngine(seed=seed)
    return engine.grid_centers(n, rect, cols, rows, jitter)


def random_placements(
    count: int,
    frame: CanvasFrame,
    size_range: Tuple[float, float],
    margin_factor: float = 0.7,
    seed: Optional[int] = None,
) -> List[Placement]:
    """Sample random placements with size-proportional margins."""
    engine = LayoutEngine(seed=seed)
    return engine.random_placements(count, frame, size_range, margin_factor)
