from __future__ import annotations

from dataclasses import dataclass

import numpy as np


class MeshAttributeError(ValueError):
    """Raised when mesh attributes disagree with the vertex count."""


@dataclass
class MeshAnalysis:
    n_vertices: int
    n_faces: int
    degenerate_faces: int
    invalid_vertices: int

    @property
    def has_degenerate_faces(self) -> bool:
        return self.degenerate_faces > 0

    @property
    def has_invalid_vertices(self) -> bool:
        return self.invalid_vertices > 0

    def issues(self) -> list[str]:
        issues: list[str] = []
        if self.has_invalid_vertices:
            issues.append(f"{self.invalid_vertices} invalid vertices (NaN/inf)")
        if self.has_degenerate_faces:
            issues.append(f"{self.degenerate_faces} degenerate faces")
        return issues


@dataclass
class Mesh:
    """Finished triangle mesh handed to a sink.

    ``normals`` and ``uvs`` are either empty or carry one entry per vertex.
    ``indices`` is flat; every consecutive triple is one triangle.
    """

    name: str
    vertices: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray

    def __post_init__(self) -> None:
        self.vertices = np.asarray(self.vertices, dtype=float).reshape(-1, 3).copy()
        self.normals = np.asarray(self.normals, dtype=float).reshape(-1, 3).copy()
        self.uvs = np.asarray(self.uvs, dtype=float).reshape(-1, 2).copy()
        self.indices = np.asarray(self.indices, dtype=int).reshape(-1).copy()

        n = self.n_vertices
        if len(self.normals) not in (0, n):
            raise MeshAttributeError(f"Mesh '{self.name}' has {len(self.normals)} normals for {n} vertices.")
        if len(self.uvs) not in (0, n):
            raise MeshAttributeError(f"Mesh '{self.name}' has {len(self.uvs)} uvs for {n} vertices.")
        if self.indices.size % 3 != 0:
            raise MeshAttributeError(f"Mesh '{self.name}' index count {self.indices.size} is not a multiple of 3.")

    def copy(self) -> "Mesh":
        return Mesh(
            name=self.name,
            vertices=self.vertices.copy(),
            normals=self.normals.copy(),
            uvs=self.uvs.copy(),
            indices=self.indices.copy(),
        )

    @property
    def n_vertices(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def n_faces(self) -> int:
        return int(self.indices.size // 3)

    @property
    def faces(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)

    @property
    def has_normals(self) -> bool:
        return len(self.normals) == self.n_vertices and self.n_vertices > 0

    @property
    def has_uvs(self) -> bool:
        return len(self.uvs) == self.n_vertices and self.n_vertices > 0

    @property
    def bounds(self) -> tuple[float, float, float, float, float, float]:
        if self.n_vertices == 0:
            return (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
        mins = self.vertices.min(axis=0)
        maxs = self.vertices.max(axis=0)
        return (float(mins[0]), float(maxs[0]), float(mins[1]), float(maxs[1]), float(mins[2]), float(maxs[2]))


def face_normals(mesh: Mesh) -> np.ndarray:
    """Geometric (winding-derived) unit normal of every triangle; zero for degenerate ones."""

    if mesh.n_faces == 0:
        return np.zeros((0, 3), dtype=float)
    faces = mesh.faces
    v0 = mesh.vertices[faces[:, 0]]
    v1 = mesh.vertices[faces[:, 1]]
    v2 = mesh.vertices[faces[:, 2]]
    normals = np.cross(v1 - v0, v2 - v0)
    lengths = np.linalg.norm(normals, axis=1)
    out = np.zeros_like(normals)
    np.divide(normals, lengths[:, np.newaxis], out=out, where=lengths[:, np.newaxis] > 0)
    return out


def analyze_mesh(mesh: Mesh, area_epsilon: float = 1e-12) -> MeshAnalysis:
    verts = mesh.vertices
    faces = mesh.faces
    invalid_vertices = int(np.count_nonzero(~np.isfinite(verts).all(axis=1)))

    degenerate_faces = 0
    if faces.size > 0:
        v0 = verts[faces[:, 0]]
        v1 = verts[faces[:, 1]]
        v2 = verts[faces[:, 2]]
        cross = np.cross(v1 - v0, v2 - v0)
        areas = np.linalg.norm(cross, axis=1) * 0.5
        degenerate_faces = int(np.count_nonzero(areas <= area_epsilon))

    return MeshAnalysis(
        n_vertices=mesh.n_vertices,
        n_faces=mesh.n_faces,
        degenerate_faces=degenerate_faces,
        invalid_vertices=invalid_vertices,
    )


def mesh_to_pyvista(mesh: Mesh):
    import pyvista as pv

    if mesh.n_faces == 0:
        poly = pv.PolyData(mesh.vertices, deep=True)
    else:
        faces = np.hstack([np.array([3, *tri], dtype=np.int64) for tri in mesh.faces])
        poly = pv.PolyData(mesh.vertices, faces, deep=True)
    if mesh.has_normals:
        poly.point_data["Normals"] = mesh.normals
        poly.point_data.active_normals_name = "Normals"
    if mesh.has_uvs:
        poly.active_texture_coordinates = mesh.uvs
    return poly
