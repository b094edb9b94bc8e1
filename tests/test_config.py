from __future__ import annotations

import json
from pathlib import Path

from meshcreator._config import DEFAULT_CONFIG, Dimensions, get_default_dimensions


def test_defaults_written_on_first_read(user_config: Path):
    assert not user_config.exists()
    assert get_default_dimensions() == Dimensions(width=1.0, height=1.0, length=1.0)
    assert json.loads(user_config.read_text()) == DEFAULT_CONFIG


def test_custom_values_are_read(user_config: Path):
    user_config.parent.mkdir(parents=True)
    user_config.write_text(json.dumps({"width": 2, "height": "0.5", "length": 4.25}))
    assert get_default_dimensions() == Dimensions(width=2.0, height=0.5, length=4.25)


def test_invalid_values_fall_back(user_config: Path):
    user_config.parent.mkdir(parents=True)
    user_config.write_text(json.dumps({"width": "wide", "height": None, "length": "nan"}))
    assert get_default_dimensions() == Dimensions(width=1.0, height=1.0, length=1.0)


def test_broken_json_falls_back(user_config: Path):
    user_config.parent.mkdir(parents=True)
    user_config.write_text("{not json")
    assert get_default_dimensions().width == 1.0
