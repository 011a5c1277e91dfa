#!/usr/bin/env python3
"""
Render a dot wheel composition to an SVG or PNG file.

The command line stands in for the drawing host: it reports the frame size,
triggers one render pass and can replay resize events with ``--resize``.
Each resize regenerates the scene with the same seed and is written next to
the main output with the frame size appended to the file name.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from dotwheels.cli.args import build_common_parser, parse_size
from dotwheels.core import build_config, configure_logging, deep_merge, get_logger, load_config
from dotwheels.sketch.canvas import RASTER_SUFFIXES, canvas_for_path
from dotwheels.sketch.scene_orchestrator import SceneOrchestrator
from dotwheels.sketch.sdk import CanvasFrame

log = get_logger("dotwheels.render_scene")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a static dot wheel composition", parents=[build_common_parser()]
    )
    parser.add_argument("--out", default="renders/dotwheels.svg", help="Output path (.svg or .png)")
    parser.add_argument(
        "--resize",
        type=parse_size,
        action="append",
        default=[],
        metavar="WxH",
        help="Replay a window resize to this size (repeatable)",
    )
    return parser


def _resized_path(out: Path, width: int, height: int) -> Path:
    return out.with_name(f"{out.stem}_{width}x{height}{out.suffix}")


def render(orchestrator: SceneOrchestrator, out: Path) -> str:
    scene = orchestrator.scene
    canvas = canvas_for_path(out, int(scene.frame.width), int(scene.frame.height))
    orchestrator.render_frame(canvas)
    return canvas.save(out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config, preset=args.preset)
        overrides = {}
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.width is not None or args.height is not None:
            overrides["canvas"] = {
                "width": args.width or cfg.canvas.width,
                "height": args.height or cfg.canvas.height,
            }
        if args.log_level:
            overrides["logging"] = {"level": args.log_level}
        if overrides:
            dumped = cfg.model_dump()
            dumped.pop("preset")
            cfg = build_config(cfg.preset, deep_merge(dumped, overrides))
    except (ValidationError, ValueError, FileNotFoundError) as e:
        log.error(f"Invalid configuration: {e}")
        return 2

    configure_logging(cfg)
    out = Path(args.out)
    if out.suffix.lower() not in RASTER_SUFFIXES + (".svg",):
        log.error(f"Unsupported output format '{out.suffix}', use .svg or .png")
        return 2

    log.info(f"Rendering preset '{cfg.preset}' with seed {cfg.seed}")
    orchestrator = SceneOrchestrator(cfg)
    orchestrator.initialize(CanvasFrame(width=cfg.canvas.width, height=cfg.canvas.height))
    written = [render(orchestrator, out)]

    for width, height in args.resize:
        orchestrator.resize(width, height)
        written.append(render(orchestrator, _resized_path(out, width, height)))

    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
