"""Service recentring a structure on its mean position."""

import logging
from typing import List, Tuple

import numpy as np

from ..domain.models.atom import Atom

logger = logging.getLogger(__name__)


def center_of_mass(atoms: List[Atom]) -> np.ndarray:
    """Unweighted mean of atom positions; the zero vector for no atoms."""
    if not atoms:
        return np.zeros(3, dtype=np.float64)
    coords = np.array([atom.coordinates for atom in atoms], dtype=np.float64)
    return coords.mean(axis=0)


def center_molecule(atoms: List[Atom]) -> Tuple[List[Atom], np.ndarray]:
    """
    Shift every atom so the mean position lands on the origin.

    The atom masses are ignored. The input list and its atoms are left
    untouched; shifted copies are returned.

    Args:
        atoms: Atoms to recentre

    Returns:
        Tuple of (centred atoms, centre that was subtracted)
    """
    center = center_of_mass(atoms)
    if not atoms:
        return [], center

    coords = np.array([atom.coordinates for atom in atoms], dtype=np.float64) - center
    centered = [atom.moved_to(tuple(xyz)) for atom, xyz in zip(atoms, coords)]
    logger.debug(f"Centred {len(atoms)} atoms on ({center[0]:.3f}, {center[1]:.3f}, {center[2]:.3f})")
    return centered, center
