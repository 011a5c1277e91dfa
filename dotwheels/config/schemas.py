from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

# Shared literals
ColorMode = Literal["hsb", "rgb"]
LayoutStrategy = Literal["grid", "random"]
PalettePolicy = Literal["fixed", "random"]
WheelStyle = Literal["dots", "compact"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_PRESET = "static_group"
DEFAULT_SEED = 20251114
DEFAULT_RADIUS_FACTORS = [0.14, 0.18, 0.24, 0.20, 0.26, 0.16, 0.22, 0.13, 0.28]


class CanvasCfg(BaseModel):
    width: int = Field(800, gt=0)
    height: int = Field(600, gt=0)
    margin_ratio: float = Field(0.08, ge=0.0, lt=0.5)
    color_mode: ColorMode = "hsb"
    background: List[float] = Field(default_factory=lambda: [220, 10, 97, 100])

    class Config:
        extra = "forbid"

    @field_validator("background")
    @classmethod
    def validate_background(cls, v):
        if len(v) not in (3, 4):
            raise ValueError("background must have 3 channels plus an optional alpha")
        return v


class LayoutCfg(BaseModel):
    strategy: LayoutStrategy = "grid"
    count: int = Field(9, ge=0)
    grid_cols: int = Field(3, ge=1)
    grid_rows: int = Field(3, ge=1)
    jitter_ratio: float = Field(0.15, ge=0.0, le=0.5)
    radius_factors: List[float] = Field(default_factory=lambda: list(DEFAULT_RADIUS_FACTORS))
    size_min: float = Field(70.0, gt=0)
    size_max: float = Field(190.0, gt=0)
    margin_factor: float = Field(0.7, ge=0.0)

    class Config:
        extra = "forbid"

    @field_validator("radius_factors")
    @classmethod
    def validate_radius_factors(cls, v):
        if not v:
            raise ValueError("radius_factors must not be empty")
        if any(f <= 0 for f in v):
            raise ValueError("radius_factors must all be positive")
        return v

    @model_validator(mode="after")
    def validate_size_range(self):
        if self.size_min > self.size_max:
            raise ValueError(f"size_min ({self.size_min}) exceeds size_max ({self.size_max})")
        return self


class PaletteCfg(BaseModel):
    policy: PalettePolicy = "fixed"
    index: int = 0

    class Config:
        extra = "forbid"


class WheelCfg(BaseModel):
    style: WheelStyle = "dots"

    glow: bool = False
    glow_scale: float = Field(1.15, gt=0)
    glow_alpha: float = Field(12.0, ge=0, le=100)

    core: bool = True
    core_dots: int = Field(50, ge=0)
    core_extent: float = Field(0.35, gt=0)

    bands: bool = True
    band_count: int = Field(3, ge=0)
    band_dots: int = Field(60, ge=0)
    band_inner: float = Field(0.55, gt=0)
    band_outer: float = Field(0.95, gt=0)

    spokes: bool = True
    spoke_count: int = Field(8, ge=0)
    spoke_steps: int = Field(11, ge=1)
    spoke_inner: float = Field(0.2, ge=0)
    spoke_outer: float = Field(0.9, gt=0)

    # compact style only
    ring_lines: int = Field(4, ge=0)
    inner_ring_dots: int = Field(12, ge=0)
    outer_ring_dots: int = Field(24, ge=0)
    ring_weight: float = Field(1.5, gt=0)
    spoke_weight: float = Field(2.0, gt=0)

    class Config:
        extra = "forbid"


class LoggingCfg(BaseModel):
    level: LogLevel = "INFO"
    log_file: Optional[str] = None

    class Config:
        extra = "forbid"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class SketchCfg(BaseModel):
    preset: str = DEFAULT_PRESET
    seed: int = DEFAULT_SEED
    canvas: CanvasCfg = Field(default_factory=CanvasCfg)
    layout: LayoutCfg = Field(default_factory=LayoutCfg)
    palette: PaletteCfg = Field(default_factory=PaletteCfg)
    wheel: WheelCfg = Field(default_factory=WheelCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)

    class Config:
        extra = "forbid"


# Presets are plain dicts so YAML overrides can be deep-merged before validation.
PRESETS: Dict[str, Dict[str, Any]] = {
    # 9 dot wheels on a loose 3x3 grid, one fixed HSB palette.
    "static_group": {},
    # Overlapping compact wheels at random positions, random RGB per draw.
    "scatter": {
        "canvas": {
            "color_mode": "rgb",
            "margin_ratio": 0.0,
            "background": [245, 240, 232, 255],
        },
        "layout": {
            "strategy": "random",
            "count": 18,
            "size_min": 70.0,
            "size_max": 190.0,
        },
        "palette": {"policy": "random"},
        "wheel": {"style": "compact", "glow": True},
    },
}
