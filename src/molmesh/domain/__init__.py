"""Core domain models, exceptions and parsers."""

from .exceptions import (
    GeometryError,
    MalformedRecordError,
    StructureFetchError,
    UnsupportedReferenceError,
)
from .models.atom import Atom
from .models.bond import Bond
from .models.element import Element
from .models.mesh_buffer import MeshBuffer
from .models.molecular_graph import MolecularGraph

__all__ = [
    "GeometryError",
    "MalformedRecordError",
    "StructureFetchError",
    "UnsupportedReferenceError",
    "Atom",
    "Bond",
    "Element",
    "MeshBuffer",
    "MolecularGraph",
]
