#!/usr/bin/env python3
"""
Drawing Canvases for the Dot Wheel Sketches

The wheel renderer only talks to the ``Canvas`` interface: background,
fill/stroke state, ellipses, lines, push/pop and translate. Two backends are
provided:

- SvgCanvas: builds an SVG document string
- ImageCanvas: rasterizes with Pillow, optionally supersampled for smoother
  dot edges
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional, Union

from PIL import Image, ImageDraw

from dotwheels.core import get_logger

from .sdk import Color

log = get_logger("dotwheels.canvas")

RASTER_SUFFIXES = (".png", ".jpg", ".jpeg", ".webp")


class Canvas(ABC):
    """Drawing-state machine shared by every backend."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._fill: Optional[Color] = None
        self._stroke: Optional[Color] = None
        self._weight = 1.0
        self._tx = 0.0
        self._ty = 0.0
        self._stack: List[tuple] = []

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------

    def fill(self, color: Color) -> None:
        self._fill = color

    def no_fill(self) -> None:
        self._fill = None

    def stroke(self, color: Color, weight: Optional[float] = None) -> None:
        self._stroke = color
        if weight is not None:
            self.stroke_weight(weight)

    def stroke_weight(self, weight: float) -> None:
        self._weight = max(0.0, float(weight))

    def no_stroke(self) -> None:
        self._stroke = None

    def translate(self, dx: float, dy: float) -> None:
        self._tx += dx
        self._ty += dy

    def push(self) -> None:
        self._stack.append((self._fill, self._stroke, self._weight, self._tx, self._ty))

    def pop(self) -> None:
        if not self._stack:
            raise RuntimeError("pop() without matching push()")
        self._fill, self._stroke, self._weight, self._tx, self._ty = self._stack.pop()

    @contextmanager
    def scope(self):
        """push()/pop() pair as a context manager."""
        self.push()
        try:
            yield self
        finally:
            self.pop()

    # ------------------------------------------------------------------
    # primitives
    # ------------------------------------------------------------------

    def background(self, color: Color) -> None:
        self._draw_background(color)

    def ellipse(self, x: float, y: float, w: float, h: Optional[float] = None) -> None:
        """Ellipse centered on (x, y) with diameters w and h (h defaults to w)."""
        if h is None:
            h = w
        if w <= 0 or h <= 0:
            return
        if self._fill is None and self._stroke is None:
            return
        self._draw_ellipse(
            x + self._tx, y + self._ty, w / 2, h / 2, self._fill, self._stroke, self._weight
        )

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if self._stroke is None or self._weight <= 0:
            return
        self._draw_line(
            x1 + self._tx, y1 + self._ty, x2 + self._tx, y2 + self._ty, self._stroke, self._weight
        )

    @abstractmethod
    def _draw_background(self, color: Color) -> None:
        ...

    @abstractmethod
    def _draw_ellipse(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        fill: Optional[Color],
        stroke: Optional[Color],
        weight: float,
    ) -> None:
        ...

    @abstractmethod
    def _draw_line(
        self, x1: float, y1: float, x2: float, y2: float, stroke: Color, weight: float
    ) -> None:
        ...

    @abstractmethod
    def save(self, path: Union[str, Path]) -> str:
        ...


class SvgCanvas(Canvas):
    """Collects SVG elements; ``to_svg`` assembles the document."""

    def __init__(self, width: int, height: int, desc: str = "Dot wheel composition"):
        super().__init__(width, height)
        self.desc = desc
        self.elements: List[str] = []

    @staticmethod
    def _paint(attr: str, color: Optional[Color]) -> str:
        if color is None:
            return f'{attr}="none"'
        opacity = color.opacity
        if opacity >= 1.0:
            return f'{attr}="{color.to_hex()}"'
        return f'{attr}="{color.to_hex()}" {attr}-opacity="{opacity:.3f}"'

    def _draw_background(self, color: Color) -> None:
        self.elements.append(
            f'<rect x="0" y="0" width="{self.width}" height="{self.height}" '
            f'{self._paint("fill", color)}/>'
        )

    def _draw_ellipse(self, cx, cy, rx, ry, fill, stroke, weight) -> None:
        stroke_attrs = self._paint("stroke", stroke)
        if stroke is not None:
            stroke_attrs += f' stroke-width="{weight:.2f}"'
        if abs(rx - ry) < 1e-9:
            self.elements.append(
                f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{rx:.2f}" '
                f'{self._paint("fill", fill)} {stroke_attrs}/>'
            )
        else:
            self.elements.append(
                f'<ellipse cx="{cx:.2f}" cy="{cy:.2f}" rx="{rx:.2f}" ry="{ry:.2f}" '
                f'{self._paint("fill", fill)} {stroke_attrs}/>'
            )

    def _draw_line(self, x1, y1, x2, y2, stroke, weight) -> None:
        self.elements.append(
            f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
            f'{self._paint("stroke", stroke)} stroke-width="{weight:.2f}" stroke-linecap="round"/>'
        )

    def to_svg(self) -> str:
        svg_content = "\n  ".join(self.elements)
        return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}" viewBox="0 0 {self.width} {self.height}">
  <desc>{self.desc}</desc>
  {svg_content}
</svg>"""

    def save(self, path: Union[str, Path]) -> str:
        path_obj = Path(path)
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        with open(path_obj, "w", encoding="utf-8") as f:
            f.write(self.to_svg())
        log.info(f"Wrote SVG with {len(self.elements)} elements to {path_obj}")
        return str(path_obj)


class ImageCanvas(Canvas):
    """
    Pillow raster backend.

    Drawing happens on an image ``supersample`` times larger than the frame;
    ``image`` downsamples it with Lanczos filtering.
    """

    def __init__(self, width: int, height: int, supersample: int = 2):
        super().__init__(width, height)
        if supersample < 1:
            raise ValueError(f"supersample must be >= 1, got {supersample}")
        self.supersample = supersample
        self._img = Image.new("RGB", (self.width * supersample, self.height * supersample), "white")
        self._draw = ImageDraw.Draw(self._img, "RGBA")

    def _draw_background(self, color: Color) -> None:
        self._draw.rectangle([0, 0, self._img.width, self._img.height], fill=color.to_rgba())

    def _draw_ellipse(self, cx, cy, rx, ry, fill, stroke, weight) -> None:
        s = self.supersample
        bbox = [(cx - rx) * s, (cy - ry) * s, (cx + rx) * s, (cy + ry) * s]
        self._draw.ellipse(
            bbox,
            fill=fill.to_rgba() if fill is not None else None,
            outline=stroke.to_rgba() if stroke is not None else None,
            width=max(1, int(round(weight * s))) if stroke is not None else 0,
        )

    def _draw_line(self, x1, y1, x2, y2, stroke, weight) -> None:
        s = self.supersample
        self._draw.line(
            [(x1 * s, y1 * s), (x2 * s, y2 * s)],
            fill=stroke.to_rgba(),
            width=max(1, int(round(weight * s))),
        )

    @property
    def image(self) -> Image.Image:
        if self.supersample == 1:
            return self._img.copy()
        return self._img.resize((self.width, self.height), Image.LANCZOS)

    def save(self, path: Union[str, Path]) -> str:
        path_obj = Path(path)
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path_obj)
        log.info(f"Wrote {self.width}x{self.height} raster to {path_obj}")
        return str(path_obj)


def canvas_for_path(path: Union[str, Path], width: int, height: int) -> Canvas:
    """Pick the backend matching an output file extension."""
    suffix = Path(path).suffix.lower()
    if suffix == ".svg":
        return SvgCanvas(width, height)
    if suffix in RASTER_SUFFIXES:
        return ImageCanvas(width, height)
    raise ValueError(f"Unsupported output format '{suffix}', use .svg or .png")
