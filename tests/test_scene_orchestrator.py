# tests/test_scene_orchestrator.py
import pytest

from dotwheels.config.schemas import DEFAULT_RADIUS_FACTORS
from dotwheels.core import build_config
from dotwheels.sketch.color_engine import PALETTES
from dotwheels.sketch.scene_orchestrator import SceneOrchestrator
from dotwheels.sketch.sdk import CanvasFrame

from conftest import RecordingCanvas

FRAME = CanvasFrame(width=800, height=600)
DOTS_PER_WHEEL = 50 + 3 * 60 + 8 * 12


def _grid_cfg(**layout):
    return build_config("static_group", {"layout": layout})


def test_static_group_scene_on_800x600(static_cfg):
    scene = SceneOrchestrator(static_cfg).initialize(FRAME)
    assert len(scene) == 9
    assert scene.seed == static_cfg.seed
    assert (scene.rect.x, scene.rect.y, scene.rect.w, scene.rect.h) == (
        pytest.approx(48), pytest.approx(48), pytest.approx(704), pytest.approx(504)
    )

    first = scene.motifs[0]
    cw, ch = 704 / 3, 504 / 3
    assert abs(first.x - (48 + cw / 2)) <= 0.15 * cw + 1e-9
    assert abs(first.y - (48 + ch / 2)) <= 0.15 * ch + 1e-9


def test_grid_radii_follow_factor_list(static_cfg):
    scene = SceneOrchestrator(static_cfg).initialize(FRAME)
    for motif, factor in zip(scene.motifs, DEFAULT_RADIUS_FACTORS):
        assert motif.radius == pytest.approx(600 * factor)


def test_grid_count_above_capacity_is_truncated():
    scene = SceneOrchestrator(_grid_cfg(count=12)).initialize(FRAME)
    assert len(scene) == 9


def test_radius_factors_cycle_on_larger_grid():
    cfg = _grid_cfg(count=12, grid_cols=4, grid_rows=3)
    scene = SceneOrchestrator(cfg).initialize(FRAME)
    assert len(scene) == 12
    assert scene.motifs[9].radius == pytest.approx(600 * DEFAULT_RADIUS_FACTORS[0])
    assert scene.motifs[11].radius == pytest.approx(600 * DEFAULT_RADIUS_FACTORS[2])


def test_zero_count_builds_empty_scene():
    orch = SceneOrchestrator(_grid_cfg(count=0))
    scene = orch.initialize(FRAME)
    assert len(scene) == 0
    canvas = orch.render_frame(RecordingCanvas())
    assert [op[0] for op in canvas.ops] == ["background"]


def test_same_seed_same_scene(static_cfg):
    a = SceneOrchestrator(static_cfg).initialize(FRAME)
    b = SceneOrchestrator(static_cfg).initialize(FRAME)
    assert a == b


def test_explicit_seed_overrides_config(static_cfg):
    orch = SceneOrchestrator(static_cfg)
    default_scene = orch.initialize(FRAME)
    seeded = orch.initialize(FRAME, seed=7)
    assert seeded.seed == 7
    assert seeded.motifs != default_scene.motifs


def test_resize_regenerates_and_is_reversible(static_cfg):
    orch = SceneOrchestrator(static_cfg)
    original = orch.initialize(FRAME)

    small = orch.resize(400, 300)
    assert small.frame.width == 400
    assert small.rect.unit == 300
    assert small.motifs[0].radius == pytest.approx(300 * DEFAULT_RADIUS_FACTORS[0])
    assert orch.scene is small

    assert orch.resize(800, 600) == original


def test_fixed_policy_uses_selected_palette():
    cfg = build_config("static_group", {"palette": {"index": 2}})
    scene = SceneOrchestrator(cfg).initialize(FRAME)
    for motif in scene.motifs:
        c = motif.base_color
        assert c.mode == "hsb"
        assert (c.c1, c.c2, c.c3) in PALETTES[2]


def test_scatter_scene_random_placements(scatter_cfg):
    scene = SceneOrchestrator(scatter_cfg).initialize(FRAME)
    assert len(scene) == 18
    assert scene.rect.margin == 0
    for motif in scene.motifs:
        assert motif.base_color.mode == "rgb"
        size = motif.radius * 2
        assert 70 <= size <= 190
        margin = 0.7 * size
        assert margin - 1e-9 <= motif.x <= 800 - margin + 1e-9
        assert margin - 1e-9 <= motif.y <= 600 - margin + 1e-9


def test_render_before_initialize_raises(static_cfg):
    with pytest.raises(RuntimeError):
        SceneOrchestrator(static_cfg).render_frame(RecordingCanvas())


def test_render_static_group_draws_background_then_wheels(static_cfg):
    orch = SceneOrchestrator(static_cfg)
    orch.initialize(FRAME)
    canvas = orch.render_frame(RecordingCanvas())
    kind, background = canvas.ops[0]
    assert kind == "background"
    assert background.mode == "hsb"
    assert (background.c1, background.c2, background.c3, background.alpha) == (220, 10, 97, 100)
    assert len(canvas.ellipses) == 9 * DOTS_PER_WHEEL
    assert canvas.lines == []


def test_render_scatter_draws_compact_wheels(scatter_cfg):
    orch = SceneOrchestrator(scatter_cfg)
    orch.initialize(FRAME)
    canvas = orch.render_frame(RecordingCanvas())
    background = canvas.ops[0][1]
    assert background.to_rgba() == (245, 240, 232, 255)
    # glow + main disc + 4 ring lines + 12 + 24 ring dots + 2 center tiers
    assert len(canvas.ellipses) == 18 * 44
    assert len(canvas.lines) == 18 * 8


def test_render_after_regenerate_is_reproducible(static_cfg):
    orch = SceneOrchestrator(static_cfg)
    orch.initialize(FRAME)
    first = orch.render_frame(RecordingCanvas()).ops
    orch.regenerate(FRAME)
    assert orch.render_frame(RecordingCanvas()).ops == first


def test_render_continues_the_random_stream(static_cfg):
    orch = SceneOrchestrator(static_cfg)
    orch.initialize(FRAME)
    first = orch.render_frame(RecordingCanvas()).ops
    assert orch.render_frame(RecordingCanvas()).ops != first


def test_orchestrators_do_not_share_state(static_cfg):
    a = SceneOrchestrator(static_cfg)
    b = SceneOrchestrator(static_cfg)
    expected = a.initialize(FRAME)
    b.initialize(FRAME, seed=99)
    b.render_frame(RecordingCanvas())
    assert a.regenerate(FRAME) == expected


def test_default_config_when_none_given():
    orch = SceneOrchestrator()
    assert orch.config.preset == "static_group"
    assert len(orch.initialize(FRAME)) == 9
