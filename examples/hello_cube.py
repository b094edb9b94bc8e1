"""Build a box and a quad, export both, and print what the sinks received."""

from __future__ import annotations

from pathlib import Path

from meshcreator import MeshCollector, PrimitiveBuilder, PyVistaSink, SinkGroup, StlSink


def build(out_dir: Path = Path("out")):
    collector = MeshCollector()
    viewer = PyVistaSink(color=(0.2, 0.6, 0.9))

    cube_builder = PrimitiveBuilder(sink=SinkGroup(collector, viewer, StlSink(out_dir / "cube.stl")))
    cube_builder.create_cube_mesh(width=12, height=6, length=4)

    quad_builder = PrimitiveBuilder(sink=SinkGroup(collector, StlSink(out_dir / "quad.stl", ascii=True)))
    quad_builder.create_quad_mesh(width=12, length=4)

    return collector, viewer


if __name__ == "__main__":
    collector, viewer = build()
    for name, mesh in collector.meshes.items():
        print(f"{name}: {mesh.n_vertices} vertices, {mesh.n_faces} triangles, bounds {mesh.bounds}")
    viewer.plot()
