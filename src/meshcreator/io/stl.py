from __future__ import annotations

from pathlib import Path
import struct

from meshcreator.mesh import Mesh, face_normals


def write_stl(mesh: Mesh, path: Path, ascii: bool = False) -> None:
    path = Path(path)
    normals = face_normals(mesh)
    faces = mesh.faces
    vertices = mesh.vertices
    solid = mesh.name or "meshcreator"

    if ascii:
        lines = [f"solid {solid}"]
        for idx, tri in enumerate(faces):
            nx, ny, nz = normals[idx]
            lines.append(f"  facet normal {nx:.6e} {ny:.6e} {nz:.6e}")
            lines.append("    outer loop")
            for vidx in tri:
                vx, vy, vz = vertices[vidx]
                lines.append(f"      vertex {vx:.6e} {vy:.6e} {vz:.6e}")
            lines.append("    endloop")
            lines.append("  endfacet")
        lines.append(f"endsolid {solid}")
        path.write_text("\n".join(lines) + "\n")
        return

    header = f"meshcreator {solid}".encode("ascii", "replace")[:80].ljust(80, b"\0")
    with path.open("wb") as handle:
        handle.write(header)
        handle.write(struct.pack("<I", faces.shape[0]))
        for idx, tri in enumerate(faces):
            v0, v1, v2 = vertices[tri[0]], vertices[tri[1]], vertices[tri[2]]
            handle.write(struct.pack("<12fH", *normals[idx], *v0, *v1, *v2, 0))
