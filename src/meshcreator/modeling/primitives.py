from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from meshcreator.buffer import MeshBuffer
from meshcreator.mesh import Mesh
from meshcreator.sink import MeshSink

ZERO = np.zeros(3)
RIGHT = np.array([1.0, 0.0, 0.0])
UP = np.array([0.0, 1.0, 0.0])
FORWARD = np.array([0.0, 0.0, 1.0])

# The fourth corner reuses the third corner's (1, 1).
QUAD_UVS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (1.0, 1.0))


def _vector(value: Sequence[float]) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    if norm == 0:
        return np.zeros(3)
    return vector / norm


def _check_dimensions(**dims: float) -> None:
    for label, value in dims.items():
        if not math.isfinite(value):
            raise ValueError(f"{label} must be finite.")


class PrimitiveBuilder:
    """Build quad and box meshes into a reusable buffer.

    A builder is not safe to share between concurrent callers; each build
    resets the buffer it owns. When a ``sink`` is given, every finished mesh
    is handed to it.
    """

    def __init__(self, sink: MeshSink | None = None) -> None:
        self.buffer = MeshBuffer()
        self.sink = sink

    def build_quad(
        self,
        origin: Sequence[float],
        width_dir: Sequence[float],
        length_dir: Sequence[float],
    ) -> None:
        """Append one parallelogram spanned by ``length_dir`` then ``width_dir``.

        The face normal is ``normalize(length_dir x width_dir)`` and both
        triangles wind counter-clockwise around it.
        """

        origin = _vector(origin)
        width_dir = _vector(width_dir)
        length_dir = _vector(length_dir)
        normal = _normalize(np.cross(length_dir, width_dir))

        corners = (
            origin,
            origin + length_dir,
            origin + length_dir + width_dir,
            origin + width_dir,
        )
        for corner, uv in zip(corners, QUAD_UVS):
            self.buffer.append_vertex(corner, normal, uv)

        base = self.buffer.n_vertices - 4
        self.buffer.append_triangle(base, base + 1, base + 2)
        self.buffer.append_triangle(base, base + 2, base + 3)

    def build_box(self, width: float, height: float, length: float) -> None:
        """Append the six outward-facing faces of a box centered on the origin."""

        up = UP * height
        right = RIGHT * width
        forward = FORWARD * length

        far_corner = (up + right + forward) / 2
        near_corner = -far_corner

        # bottom, back, left
        self.build_quad(near_corner, forward, right)
        self.build_quad(near_corner, right, up)
        self.build_quad(near_corner, up, forward)

        # top, front, right
        self.build_quad(far_corner, -right, -forward)
        self.build_quad(far_corner, -up, -right)
        self.build_quad(far_corner, -forward, -up)

    def create_quad_mesh(self, width: float = 1.0, length: float = 1.0) -> Mesh:
        """Flat quad in the XZ plane from the origin, facing +Y."""

        _check_dimensions(width=width, length=length)
        self.buffer.reset()
        self.build_quad(ZERO, RIGHT * width, FORWARD * length)
        return self._finish("Quad")

    def create_cube_mesh(self, width: float = 1.0, height: float = 1.0, length: float = 1.0) -> Mesh:
        _check_dimensions(width=width, height=height, length=length)
        self.buffer.reset()
        self.build_box(width, height, length)
        return self._finish("Cube")

    def _finish(self, name: str) -> Mesh:
        mesh = self.buffer.finalize(name)
        if self.sink is not None:
            self.sink.accept(mesh)
        return mesh


def make_quad(width: float = 1.0, length: float = 1.0, sink: MeshSink | None = None) -> Mesh:
    return PrimitiveBuilder(sink=sink).create_quad_mesh(width, length)


def make_box(
    width: float = 1.0,
    height: float = 1.0,
    length: float = 1.0,
    sink: MeshSink | None = None,
) -> Mesh:
    """Axis-aligned box of size (width, height, length) with its pivot at the center."""

    return PrimitiveBuilder(sink=sink).create_cube_mesh(width, height, length)
