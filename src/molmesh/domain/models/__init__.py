"""Domain model classes."""

from .atom import Atom
from .bond import Bond
from .element import Element
from .backbone import BackboneSegment, BackboneTrace
from .mesh_buffer import MeshBuffer
from .molecular_graph import MolecularGraph
from .simple_geometry import AtomArrays, LineArrays, SimpleGeometry

__all__ = [
    "Atom",
    "Bond",
    "Element",
    "BackboneSegment",
    "BackboneTrace",
    "MeshBuffer",
    "MolecularGraph",
    "AtomArrays",
    "LineArrays",
    "SimpleGeometry",
]
