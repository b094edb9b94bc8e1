"""Modeling utilities: the procedural quad and box builders."""

from __future__ import annotations

from .primitives import PrimitiveBuilder, make_box, make_quad

__all__ = [
    "PrimitiveBuilder",
    "make_box",
    "make_quad",
]
