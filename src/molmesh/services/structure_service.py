"""Service running the parse, centre and bond inference steps for one load."""

import logging
from typing import Optional

from ..config import GeometryOptions
from ..domain.implementations.pdb_record_parser import StructuralRecordParser
from ..domain.models.molecular_graph import MolecularGraph
from .bond_inference_service import BondInferenceService
from .normalization_service import center_molecule

logger = logging.getLogger(__name__)


class StructureService:
    """Turn structure text into a centred MolecularGraph with inferred bonds."""

    def __init__(self, options: Optional[GeometryOptions] = None):
        """Initialize service with geometry options (defaults if omitted)."""
        self._options = options or GeometryOptions()
        self._bonds = BondInferenceService(self._options.bond_threshold)

    @property
    def options(self) -> GeometryOptions:
        return self._options

    def load(self, text: str, model: Optional[int] = None) -> MolecularGraph:
        """
        Parse, centre and bond a structure.

        Args:
            text: PDB-style file content
            model: Optional model number to keep

        Returns:
            MolecularGraph whose atoms are centred on the origin

        Raises:
            MalformedRecordError: If any atom record is unreadable
        """
        atoms = StructuralRecordParser(model=model).parse(text)
        centered, _ = center_molecule(atoms)
        bonds = self._bonds.infer_bonds(centered)
        return MolecularGraph(centered, bonds, model_num=model or 1)


def load_structure(text: str, options: Optional[GeometryOptions] = None) -> MolecularGraph:
    """Convenience wrapper around :meth:`StructureService.load`."""
    return StructureService(options).load(text)
