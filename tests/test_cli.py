from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from meshcreator.cli import _next_available_path, app

runner = CliRunner()


def test_cube_prints_summary():
    result = runner.invoke(app, ["cube", "--width", "2", "--height", "4", "--length", "6"])
    assert result.exit_code == 0, result.output
    assert "Vertices: 24" in result.output
    assert "Triangles: 12" in result.output


def test_quad_uses_configured_defaults(user_config: Path, tmp_path: Path):
    user_config.parent.mkdir(parents=True)
    user_config.write_text(json.dumps({"width": 3.0, "height": 1.0, "length": 5.0}))
    output = tmp_path / "quad.stl"

    result = runner.invoke(app, ["quad", "--output", str(output), "--ascii"])
    assert result.exit_code == 0, result.output
    text = output.read_text()
    assert "vertex 3.000000e+00 0.000000e+00 5.000000e+00" in text


def test_zero_cube_reports_degenerate_faces():
    result = runner.invoke(app, ["cube", "--width=0", "--height=0", "--length=0"])
    assert result.exit_code == 0, result.output
    assert "12 degenerate faces" in result.output


def test_existing_output_is_not_overwritten(tmp_path: Path):
    output = tmp_path / "cube.stl"
    output.write_text("keep")

    result = runner.invoke(app, ["cube", "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert output.read_text() == "keep"
    assert (tmp_path / "cube (1).stl").exists()


def test_overwrite_replaces_output(tmp_path: Path):
    output = tmp_path / "cube.stl"
    output.write_text("old")

    result = runner.invoke(app, ["cube", "-o", str(output), "--overwrite"])
    assert result.exit_code == 0, result.output
    assert output.stat().st_size == 84 + 50 * 12


def test_non_finite_dimension_is_rejected():
    result = runner.invoke(app, ["quad", "--width", "nan"])
    assert result.exit_code != 0


def test_next_available_path(tmp_path: Path):
    target = tmp_path / "model.stl"
    assert _next_available_path(target) == target
    target.write_text("")
    (tmp_path / "model (1).stl").write_text("")
    assert _next_available_path(target) == tmp_path / "model (2).stl"


def test_cube_screenshot_is_written(tmp_path: Path):
    screenshot = tmp_path / "s.png"
    result = runner.invoke(app, ["cube", "--screenshot", str(screenshot)])
    assert result.exit_code == 0, result.output
    assert screenshot.exists()
    assert "Saved screenshot" in result.output
