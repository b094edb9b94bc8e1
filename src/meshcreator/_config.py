from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_FILE = Path.home() / ".meshcreator" / "meshcreator.cfg"
DEFAULT_CONFIG = {
    "_comment": "Default primitive dimensions used when the CLI is not given explicit sizes.",
    "width": 1.0,
    "height": 1.0,
    "length": 1.0,
}


@dataclass(frozen=True)
class Dimensions:
    """Resolved default sizes from meshcreator.cfg."""

    width: float
    height: float
    length: float


def ensure_user_config() -> None:
    """Ensure ~/.meshcreator/meshcreator.cfg exists with sane defaults."""

    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        data = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        return DEFAULT_CONFIG.copy()
    return data


def _coerce_dimension(value: Any, fallback: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(number):
        return fallback
    return number


def get_default_dimensions() -> Dimensions:
    """Return the configured default width, height and length."""

    raw_config = _load_user_config()
    values = {
        key: _coerce_dimension(raw_config.get(key, DEFAULT_CONFIG[key]), DEFAULT_CONFIG[key])
        for key in ("width", "height", "length")
    }
    return Dimensions(**values)
