from __future__ import annotations

import importlib.util
from pathlib import Path

import numpy as np


def _load_example(path: Path):
    spec = importlib.util.spec_from_file_location("meshcreator_example", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_hello_cube_builds_and_exports(project_root: Path, tmp_path: Path):
    module = _load_example(project_root / "examples" / "hello_cube.py")
    collector, viewer = module.build(tmp_path)

    assert set(collector.meshes) == {"Cube", "Quad"}
    assert viewer.mesh is collector.meshes["Cube"]
    assert np.allclose(viewer.bounds, (-6.0, 6.0, -3.0, 3.0, -2.0, 2.0))
    assert (tmp_path / "cube.stl").stat().st_size == 84 + 50 * 12
    assert (tmp_path / "quad.stl").read_text().startswith("solid Quad")
