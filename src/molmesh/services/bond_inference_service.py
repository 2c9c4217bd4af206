"""Service inferring covalent bonds from interatomic distances."""

import logging
from typing import List

import numpy as np

from ..domain.models.atom import Atom
from ..domain.models.bond import Bond

logger = logging.getLogger(__name__)

DEFAULT_BOND_THRESHOLD = 1.8


class BondInferenceService:
    """Find bonds as pairs of heavy atoms closer than a distance threshold.

    Every pair is examined, so run time grows with the square of the atom
    count. That is acceptable for structures of a few thousand atoms; larger
    inputs would need spatial binning.
    """

    def __init__(self, threshold: float = DEFAULT_BOND_THRESHOLD):
        if threshold <= 0:
            raise ValueError(f"Bond threshold must be positive, got {threshold}")
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def infer_bonds(self, atoms: List[Atom]) -> List[Bond]:
        """
        Infer bonds between non-hydrogen atoms.

        Args:
            atoms: Atoms in load order; bond indices point into this list

        Returns:
            Bonds sorted by (atom1_index, atom2_index), one per pair whose
            distance is strictly below the threshold
        """
        n_atoms = len(atoms)
        if n_atoms < 2:
            return []

        coords = np.array([atom.coordinates for atom in atoms], dtype=np.float64)
        heavy = np.array([not atom.is_hydrogen for atom in atoms], dtype=bool)

        bonds: List[Bond] = []
        for i in range(n_atoms - 1):
            if not heavy[i]:
                continue
            # One row of the distance matrix at a time keeps scratch space O(N).
            distances = np.linalg.norm(coords[i + 1 :] - coords[i], axis=1)
            candidates = np.nonzero((distances < self._threshold) & heavy[i + 1 :])[0]
            for offset in candidates:
                bonds.append(Bond(i, i + 1 + int(offset), float(distances[offset])))

        logger.info(f"Inferred {len(bonds)} bonds among {n_atoms} atoms")
        return bonds


def infer_bonds(atoms: List[Atom], threshold: float = DEFAULT_BOND_THRESHOLD) -> List[Bond]:
    """Convenience wrapper around :class:`BondInferenceService`."""
    return BondInferenceService(threshold).infer_bonds(atoms)
