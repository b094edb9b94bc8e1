from __future__ import annotations

import operator
from typing import Sequence

from meshcreator.mesh import Mesh


class InvalidIndexError(IndexError):
    """Raised when a triangle references a vertex the buffer does not hold."""


class MeshBuffer:
    """Accumulates per-vertex attributes and triangle indices for one build.

    The three attribute lists only ever grow together, so ``normals`` and
    ``uvs`` always match ``positions`` in length.
    """

    def __init__(self) -> None:
        self.positions: list[tuple[float, float, float]] = []
        self.normals: list[tuple[float, float, float]] = []
        self.uvs: list[tuple[float, float]] = []
        self.indices: list[int] = []

    @property
    def n_vertices(self) -> int:
        return len(self.positions)

    @property
    def n_indices(self) -> int:
        return len(self.indices)

    def reset(self) -> None:
        self.positions.clear()
        self.normals.clear()
        self.uvs.clear()
        self.indices.clear()

    def append_vertex(
        self,
        position: Sequence[float],
        normal: Sequence[float],
        uv: Sequence[float],
    ) -> int:
        px, py, pz = position
        nx, ny, nz = normal
        u, v = uv
        self.positions.append((float(px), float(py), float(pz)))
        self.normals.append((float(nx), float(ny), float(nz)))
        self.uvs.append((float(u), float(v)))
        return len(self.positions) - 1

    def append_triangle(self, i0: int, i1: int, i2: int) -> None:
        count = len(self.positions)
        checked = []
        for index in (i0, i1, i2):
            try:
                value = operator.index(index)
            except TypeError as exc:
                raise InvalidIndexError(f"Vertex index {index!r} is not an integer.") from exc
            if not 0 <= value < count:
                raise InvalidIndexError(f"Vertex index {value} out of range for {count} vertices.")
            checked.append(value)
        self.indices.extend(checked)

    def finalize(self, name: str = "mesh") -> Mesh:
        """Snapshot the buffer into a :class:`Mesh`; the buffer keeps its contents."""

        return Mesh(
            name=name,
            vertices=self.positions,
            normals=self.normals,
            uvs=self.uvs,
            indices=self.indices,
        )
