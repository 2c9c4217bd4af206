"""Concrete text format parsers."""

from .obj_mesh_parser import PolygonMeshParser, parse_obj, triangulate_face
from .pdb_record_parser import StructuralRecordParser, parse_structure

__all__ = [
    "PolygonMeshParser",
    "StructuralRecordParser",
    "parse_obj",
    "parse_structure",
    "triangulate_face",
]
