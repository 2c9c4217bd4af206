"""Services implementing the geometry pipeline steps."""

from .backbone_service import BackboneService, backbone_geometry, extract_backbone_trace
from .bond_inference_service import BondInferenceService, infer_bonds
from .geometry_service import (
    GeometryService,
    build_merged_mesh,
    build_simple_geometry,
    merge_meshes,
)
from .normalization_service import center_molecule, center_of_mass
from .structure_service import StructureService, load_structure

__all__ = [
    "BackboneService",
    "BondInferenceService",
    "GeometryService",
    "StructureService",
    "backbone_geometry",
    "build_merged_mesh",
    "build_simple_geometry",
    "center_molecule",
    "center_of_mass",
    "extract_backbone_trace",
    "infer_bonds",
    "load_structure",
    "merge_meshes",
]
