#!/usr/bin/env python3
# src/molmesh/domain/models/atom.py

"""
Domain model representing an atom decoded from a structure record.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from .element import Element


@dataclass(frozen=True)
class Atom:
    """Represents an atom in a molecular structure."""

    serial: int
    atom_name: str
    residue_name: str
    chain_id: str
    residue_seq: int
    coordinates: Tuple[float, float, float]
    element: str
    record_type: str = "ATOM"
    alt_loc: str = ""
    occupancy: float = 1.0
    b_factor: float = 0.0
    model_num: int = 1

    @property
    def element_kind(self) -> Element:
        return Element.from_symbol(self.element)

    @property
    def is_hydrogen(self) -> bool:
        return self.element_kind is Element.H

    @property
    def is_hetero(self) -> bool:
        return self.record_type == "HETATM"

    def moved_to(self, coordinates: Tuple[float, float, float]) -> "Atom":
        """Return a copy of this atom at new coordinates."""
        x, y, z = coordinates
        return replace(self, coordinates=(float(x), float(y), float(z)))
