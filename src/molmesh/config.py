"""Tunable parameters for geometry generation."""

from dataclasses import dataclass

DEFAULT_ATOM_SCALE = 0.3


@dataclass
class GeometryOptions:
    """Options consumed by the structure pipeline.

    atom_scale multiplies van der Waals radii, position_scale multiplies
    coordinates of atoms, bonds and backbone segments.
    """

    atom_scale: float = DEFAULT_ATOM_SCALE
    position_scale: float = 1.0
    sphere_detail: int = 10
    bond_threshold: float = 1.8
    bond_radius: float = 0.1
    bond_segments: int = 8
    max_residue_gap: int = 2

    def __post_init__(self):
        """Reject values no mesh can be built from."""
        for name in ("atom_scale", "position_scale", "bond_threshold", "bond_radius"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("sphere_detail", "bond_segments"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")
