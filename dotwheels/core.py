import copy
import logging
import logging.handlers
import os
import sys
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from dotwheels.config.schemas import DEFAULT_PRESET, PRESETS, SketchCfg

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Config keys that apply to every preset.
PORTABLE_KEYS = ("seed", "logging")

# ---------------- Logging ----------------

_FORMAT = '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'


def get_logger(name="dotwheels", log_file=None, level=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        logger.propagate = False
        sh = logging.StreamHandler(sys.stdout)
        sh.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(sh)
    if level is not None:
        logger.setLevel(level)
    if log_file and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(fh)
    return logger


log = get_logger("dotwheels")


def configure_logging(cfg: SketchCfg) -> None:
    """Apply the logging section of a loaded config to every dotwheels logger."""
    level = getattr(logging, cfg.logging.level)
    for name in list(logging.Logger.manager.loggerDict):
        if name == "dotwheels" or name.startswith("dotwheels."):
            get_logger(name, log_file=cfg.logging.log_file, level=level)


# ---------------- Config ----------------


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must be a mapping/object.")
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with ``override`` merged in, recursing into dicts."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_env() -> dict:
    load_dotenv(os.path.join(BASE, ".env"))
    env = {k: v for k, v in os.environ.items()}
    return env


def default_config_path() -> Optional[str]:
    env = load_env()
    if env.get("DOTWHEELS_CONFIG"):
        return env["DOTWHEELS_CONFIG"]
    path = os.path.join(BASE, "conf", "sketch.yaml")
    if not os.path.exists(path):
        path = os.path.join(BASE, "conf", "sketch.example.yaml")
    if not os.path.exists(path):
        return None
    return path


def build_config(preset: str = DEFAULT_PRESET, overrides: Optional[Dict[str, Any]] = None) -> SketchCfg:
    """Validate a preset merged with overrides. Unknown presets raise ValueError."""
    if preset not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}', expected one of: {sorted(PRESETS)}")
    raw = deep_merge(PRESETS[preset], overrides or {})
    raw["preset"] = preset
    try:
        cfg = SketchCfg(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


def load_config(path: Optional[str] = None, preset: Optional[str] = None) -> SketchCfg:
    """
    Load the sketch configuration.

    The YAML file names a preset and may override any of its fields. An
    explicit ``preset`` argument wins over the file's choice; when it names a
    different preset, only the file's preset-independent keys (``seed`` and
    ``logging``) are kept, since the section overrides were written for the
    file's own preset. Without a file the preset defaults are used as-is.
    ``DOTWHEELS_SEED`` overrides the seed.
    """
    if path is None:
        path = default_config_path()
    raw: Dict[str, Any] = {}
    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file missing: {path}")
        raw = load_yaml(path)
        log.debug(f"Loaded sketch config from {path}")

    file_preset = raw.pop("preset", None) or DEFAULT_PRESET
    chosen = preset or file_preset
    if chosen != file_preset:
        dropped = sorted(k for k in raw if k not in PORTABLE_KEYS)
        if dropped:
            log.info(f"Preset '{chosen}' replaces '{file_preset}', ignoring file sections: {dropped}")
        raw = {k: v for k, v in raw.items() if k in PORTABLE_KEYS}

    env_seed = os.environ.get("DOTWHEELS_SEED")
    if env_seed:
        try:
            raw["seed"] = int(env_seed)
        except ValueError:
            raise ValueError(f"DOTWHEELS_SEED must be an integer, got {env_seed!r}") from None

    return build_config(chosen, raw)
