import argparse

from dotwheels.config.schemas import PRESETS


def parse_size(value: str):
    try:
        w, h = value.lower().split("x", 1)
        size = (int(w), int(h))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {value!r}") from None
    if size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"Frame size must be positive, got {value!r}")
    return size


def build_common_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(add_help=False)
    ap.add_argument("--config", default=None, help="Path to sketch YAML (default conf/sketch.yaml)")
    ap.add_argument("--preset", choices=sorted(PRESETS), default=None, help="Preset overriding the config file")
    ap.add_argument("--seed", type=int, default=None, help="Seed override")
    ap.add_argument("--width", type=int, default=None, help="Frame width override")
    ap.add_argument("--height", type=int, default=None, help="Frame height override")
    ap.add_argument("--log-level", default=None, help="Logging level override (DEBUG, INFO, ...)")
    return ap
