"""meshcreator – procedural quad and box meshes for renderers and colliders."""

from __future__ import annotations

from .buffer import InvalidIndexError, MeshBuffer
from .mesh import Mesh, MeshAttributeError, analyze_mesh
from .modeling import PrimitiveBuilder, make_box, make_quad
from .sink import MeshCollector, MeshSink, PyVistaSink, SinkGroup, StlSink

__all__ = [
    "__version__",
    "InvalidIndexError",
    "Mesh",
    "MeshAttributeError",
    "MeshBuffer",
    "MeshCollector",
    "MeshSink",
    "PrimitiveBuilder",
    "PyVistaSink",
    "SinkGroup",
    "StlSink",
    "analyze_mesh",
    "make_box",
    "make_quad",
]

__version__ = "0.1.0"
