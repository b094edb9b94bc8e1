"""Consumers of finished meshes.

The geometry core only ever calls ``accept``; everything a renderer or an
exporter needs (bounds, datasets, files, display color) lives here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Protocol, runtime_checkable

from meshcreator.io.stl import write_stl
from meshcreator.mesh import Mesh, mesh_to_pyvista

DEFAULT_COLOR = (0.8, 0.8, 0.8, 1.0)


@runtime_checkable
class MeshSink(Protocol):
    def accept(self, mesh: Mesh) -> None: ...


class MeshCollector:
    """Keep every accepted mesh, keyed by name; the latest one wins."""

    def __init__(self) -> None:
        self.meshes: Dict[str, Mesh] = {}
        self.last: Mesh | None = None

    def accept(self, mesh: Mesh) -> None:
        self.meshes[mesh.name] = mesh
        self.last = mesh

    def __len__(self) -> int:
        return len(self.meshes)


class PyVistaSink:
    """Turn accepted meshes into renderable PyVista datasets."""

    def __init__(self, color: tuple[float, float, float, float] = DEFAULT_COLOR) -> None:
        if len(color) == 3:
            color = (color[0], color[1], color[2], 1.0)
        self.color = color
        self.mesh: Mesh | None = None
        self.dataset = None
        self.bounds: tuple[float, float, float, float, float, float] | None = None

    def accept(self, mesh: Mesh) -> None:
        self.mesh = mesh
        self.dataset = mesh_to_pyvista(mesh)
        self.bounds = tuple(float(v) for v in self.dataset.bounds)

    def plot(self, screenshot: Path | None = None, show_edges: bool = True) -> None:
        if self.dataset is None:
            raise RuntimeError("PyVistaSink has no mesh to plot; build one first.")

        import pyvista as pv

        off_screen = screenshot is not None
        plotter = pv.Plotter(window_size=(1280, 800), off_screen=off_screen)
        plotter.add_mesh(
            self.dataset,
            color=self.color[:3],
            opacity=self.color[3],
            show_edges=show_edges,
            smooth_shading=False,
        )
        plotter.add_axes()
        plotter.reset_camera()
        title = f"meshcreator: {self.mesh.name}"
        if screenshot is not None:
            screenshot = Path(screenshot)
            screenshot.parent.mkdir(parents=True, exist_ok=True)
            plotter.show(title=title, auto_close=True, screenshot=str(screenshot))
        else:
            plotter.show(title=title)
        plotter.close()


class StlSink:
    """Write every accepted mesh to ``path`` as STL."""

    def __init__(self, path: Path, ascii: bool = False) -> None:
        self.path = Path(path)
        self.ascii = ascii

    def accept(self, mesh: Mesh) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        write_stl(mesh, self.path, ascii=self.ascii)


class SinkGroup:
    """Forward each accepted mesh to several sinks, in order."""

    def __init__(self, *sinks: MeshSink) -> None:
        self.sinks = list(sinks)

    def accept(self, mesh: Mesh) -> None:
        for sink in self.sinks:
            sink.accept(mesh)
