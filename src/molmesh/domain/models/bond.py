#!/usr/bin/env python3
# src/molmesh/domain/models/bond.py

"""
Domain model representing an inferred bond between two atoms.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Bond:
    """Bond between two atoms, stored once per unordered pair.

    Indices refer to positions in the originating atom sequence and
    always satisfy ``atom1_index < atom2_index``.
    """

    atom1_index: int
    atom2_index: int
    distance: float

    def __post_init__(self):
        if self.atom1_index >= self.atom2_index:
            raise ValueError(
                f"Bond indices must be ordered, got "
                f"({self.atom1_index}, {self.atom2_index})"
            )
