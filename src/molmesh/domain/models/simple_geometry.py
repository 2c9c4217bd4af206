"""Lightweight per-atom arrays for renderers that instance their own spheres."""

from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass
class AtomArrays:
    """Flat per-atom arrays: 3 floats of position/colour and one radius per atom."""

    positions: np.ndarray
    colors: np.ndarray
    radii: np.ndarray
    elements: List[str]

    def __len__(self) -> int:
        return len(self.elements)

    def without_hydrogens(self) -> "AtomArrays":
        """Drop atoms tagged ``H``."""
        keep = np.array([e.upper() != "H" for e in self.elements], dtype=bool)
        return AtomArrays(
            positions=self.positions.reshape(-1, 3)[keep].reshape(-1),
            colors=self.colors.reshape(-1, 3)[keep].reshape(-1),
            radii=self.radii[keep],
            elements=[e for e, k in zip(self.elements, keep) if k],
        )


@dataclass
class LineArrays:
    """Line segments: two endpoints (6 floats) and two colours per segment."""

    positions: np.ndarray
    colors: np.ndarray

    @property
    def segment_count(self) -> int:
        return int(self.positions.size // 6)


@dataclass
class SimpleGeometry:
    """Atoms as instancing data and bonds as line segments."""

    atoms: AtomArrays
    bonds: LineArrays

    def to_arrays(self) -> dict:
        return {
            "atom_positions": self.atoms.positions,
            "atom_colors": self.atoms.colors,
            "atom_radii": self.atoms.radii,
            "atom_elements": np.array(self.atoms.elements, dtype="U2"),
            "bond_positions": self.bonds.positions,
            "bond_colors": self.bonds.colors,
        }
