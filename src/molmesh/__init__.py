"""Structure and mesh text ingestion into render-ready geometry buffers."""

from .config import GeometryOptions
from .domain.exceptions import (
    GeometryError,
    MalformedRecordError,
    StructureFetchError,
    UnsupportedReferenceError,
)
from .domain.implementations import (
    PolygonMeshParser,
    StructuralRecordParser,
    parse_obj,
    parse_structure,
)
from .domain.models import (
    Atom,
    BackboneSegment,
    BackboneTrace,
    Bond,
    Element,
    MeshBuffer,
    MolecularGraph,
    SimpleGeometry,
)
from .geometry import create_cube, create_cylinder, create_plane, create_sphere, sample_obj
from .services import (
    backbone_geometry,
    build_merged_mesh,
    build_simple_geometry,
    center_molecule,
    extract_backbone_trace,
    infer_bonds,
    load_structure,
)

__version__ = "0.1.0"

__all__ = [
    "GeometryOptions",
    "GeometryError",
    "MalformedRecordError",
    "StructureFetchError",
    "UnsupportedReferenceError",
    "PolygonMeshParser",
    "StructuralRecordParser",
    "parse_obj",
    "parse_structure",
    "Atom",
    "BackboneSegment",
    "BackboneTrace",
    "Bond",
    "Element",
    "MeshBuffer",
    "MolecularGraph",
    "SimpleGeometry",
    "create_cube",
    "create_cylinder",
    "create_plane",
    "create_sphere",
    "sample_obj",
    "backbone_geometry",
    "build_merged_mesh",
    "build_simple_geometry",
    "center_molecule",
    "extract_backbone_trace",
    "infer_bonds",
    "load_structure",
]
