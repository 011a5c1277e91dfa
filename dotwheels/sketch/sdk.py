#!/usr/bin/env python3
"""
Core SDK for the Dot Wheel Sketches

This module provides the single source of truth for the geometric records
shared by the layout planner, the wheel renderer and the scene orchestrator.
All sketch modules import their types from here.
"""

import colorsys
from dataclasses import dataclass
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator

from dotwheels.config.schemas import ColorMode

# ============================================================================
# CONSTANTS
# ============================================================================

HUE_MAX = 360.0
HSB_MAX = 100.0
RGB_MAX = 255.0

# ============================================================================
# COLOR
# ============================================================================


@dataclass(frozen=True)
class Color:
    """
    A drawing color in one of the two sketch color modes.

    HSB channels use hue 0-360, saturation/brightness 0-100 and alpha 0-100.
    RGB channels and alpha use 0-255.
    """

    mode: ColorMode
    c1: float
    c2: float
    c3: float
    alpha: float

    @classmethod
    def hsb(cls, h: float, s: float, b: float, alpha: float = HSB_MAX) -> "Color":
        return cls("hsb", h, s, b, alpha)

    @classmethod
    def rgb(cls, r: float, g: float, b: float, alpha: float = RGB_MAX) -> "Color":
        return cls("rgb", r, g, b, alpha)

    @classmethod
    def from_channels(cls, mode: ColorMode, channels: List[float]) -> "Color":
        """Build a color from a 3 or 4 item channel list (config backgrounds)."""
        default_alpha = HSB_MAX if mode == "hsb" else RGB_MAX
        alpha = channels[3] if len(channels) > 3 else default_alpha
        return cls(mode, channels[0], channels[1], channels[2], alpha)

    @property
    def hue(self) -> float:
        if self.mode == "hsb":
            return self.c1 % HUE_MAX
        h, _, _ = colorsys.rgb_to_hsv(self.c1 / RGB_MAX, self.c2 / RGB_MAX, self.c3 / RGB_MAX)
        return h * HUE_MAX

    def to_rgba(self) -> Tuple[int, int, int, int]:
        """8-bit RGBA tuple, channels clamped to 0-255."""
        if self.mode == "hsb":
            r, g, b = colorsys.hsv_to_rgb(
                (self.c1 % HUE_MAX) / HUE_MAX,
                min(1.0, max(0.0, self.c2 / HSB_MAX)),
                min(1.0, max(0.0, self.c3 / HSB_MAX)),
            )
            a = self.alpha / HSB_MAX
            channels = (r * RGB_MAX, g * RGB_MAX, b * RGB_MAX, a * RGB_MAX)
        else:
            channels = (self.c1, self.c2, self.c3, self.alpha)
        return tuple(int(round(max(0.0, min(RGB_MAX, c)))) for c in channels)

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba()
        return f"#{r:02x}{g:02x}{b:02x}"

    @property
    def opacity(self) -> float:
        """Alpha as a 0.0-1.0 fraction."""
        return self.to_rgba()[3] / RGB_MAX


# ============================================================================
# PYDANTIC MODELS
# ============================================================================


class CanvasFrame(BaseModel):
    """Frame size reported by the host."""

    width: float = Field(..., gt=0, description="Frame width in pixels")
    height: float = Field(..., gt=0, description="Frame height in pixels")

    class Config:
        frozen = True


class ContentRect(BaseModel):
    """Drawable area inside the frame after subtracting the margin."""

    x: float
    y: float
    w: float = Field(..., ge=0)
    h: float = Field(..., ge=0)
    margin: float = Field(..., ge=0)
    unit: float = Field(..., gt=0, description="Smaller frame dimension")

    class Config:
        frozen = True


class Point(BaseModel):
    x: float
    y: float

    class Config:
        frozen = True


class Placement(BaseModel):
    """A motif center and scale."""

    x: float
    y: float
    radius: float

    class Config:
        frozen = True

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v):
        if v <= 0:
            raise ValueError(f"Placement radius must be positive, got {v}")
        return v


class Motif(BaseModel):
    """One wheel, consumed by the renderer and never mutated."""

    x: float
    y: float
    radius: float
    base_color: Color

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v):
        if v <= 0:
            raise ValueError(f"Motif radius must be positive, got {v}")
        return v

    @property
    def base_hue(self) -> float:
        return self.base_color.hue


class Scene(BaseModel):
    """Ordered motifs for the current run. Replaced wholesale on regeneration."""

    seed: int
    frame: CanvasFrame
    rect: ContentRect
    motifs: Tuple[Motif, ...] = ()

    class Config:
        frozen = True

    def __len__(self) -> int:
        return len(self.motifs)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    # Constants
    "HUE_MAX", "HSB_MAX", "RGB_MAX",

    # Color
    "Color",

    # Models
    "CanvasFrame", "ContentRect", "Point", "Placement", "Motif", "Scene",
]
