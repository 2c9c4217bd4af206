"""Primitive mesh builders and shared geometry helpers."""

from .normals import compute_vertex_normals
from .primitives import create_cube, create_cylinder, create_plane, create_sphere
from .samples import sample_obj

__all__ = [
    "compute_vertex_normals",
    "create_cube",
    "create_cylinder",
    "create_plane",
    "create_sphere",
    "sample_obj",
]
