from __future__ import annotations

import numpy as np

from meshcreator.mesh import Mesh, face_normals


def assert_winding_matches_normals(mesh: Mesh) -> None:
    """Every triangle's geometric normal must agree with its vertices' normals."""
    geometric = face_normals(mesh)
    for tri, normal in zip(mesh.faces, geometric):
        for vidx in tri:
            assert np.dot(normal, mesh.normals[vidx]) > 0
