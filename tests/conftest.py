from __future__ import annotations

import os
from pathlib import Path

import pytest

from meshcreator import _config

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure():
    os.environ.setdefault("PYVISTA_OFF_SCREEN", "true")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture(autouse=True)
def user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_file = tmp_path / "config" / "meshcreator.cfg"
    monkeypatch.setattr(_config, "CONFIG_FILE", config_file)
    return config_file
