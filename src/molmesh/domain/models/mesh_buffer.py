#!/usr/bin/env python3
# src/molmesh/domain/models/mesh_buffer.py

"""
Flat-array geometry container shared by every mesh producer.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class MeshBuffer:
    """
    Render-ready triangle mesh stored as flat arrays.

    positions: (3 * V,) float32
    normals:   (3 * V,) float32
    indices:   (3 * T,) uint32, each < V
    colors:    (3 * V,) float32, optional
    """

    positions: np.ndarray
    normals: np.ndarray
    indices: np.ndarray
    colors: Optional[np.ndarray] = None

    def __post_init__(self):
        self.positions = np.ascontiguousarray(self.positions, dtype=np.float32).reshape(-1)
        self.normals = np.ascontiguousarray(self.normals, dtype=np.float32).reshape(-1)
        self.indices = np.ascontiguousarray(self.indices, dtype=np.uint32).reshape(-1)
        if self.colors is not None:
            self.colors = np.ascontiguousarray(self.colors, dtype=np.float32).reshape(-1)
        self._validate()

    def _validate(self) -> None:
        if self.positions.size % 3:
            raise ValueError("positions length must be a multiple of 3")
        if self.normals.size != self.positions.size:
            raise ValueError(
                f"normals ({self.normals.size}) and positions "
                f"({self.positions.size}) differ in length"
            )
        if self.colors is not None and self.colors.size != self.positions.size:
            raise ValueError(
                f"colors ({self.colors.size}) and positions "
                f"({self.positions.size}) differ in length"
            )
        if self.indices.size % 3:
            raise ValueError("indices length must be a multiple of 3")
        if self.indices.size and int(self.indices.max()) >= self.vertex_count:
            raise ValueError(
                f"index {int(self.indices.max())} out of range for "
                f"{self.vertex_count} vertices"
            )

    @classmethod
    def empty(cls, with_colors: bool = False) -> "MeshBuffer":
        """Zero-length but valid buffer."""
        return cls(
            positions=np.zeros(0, dtype=np.float32),
            normals=np.zeros(0, dtype=np.float32),
            indices=np.zeros(0, dtype=np.uint32),
            colors=np.zeros(0, dtype=np.float32) if with_colors else None,
        )

    @property
    def vertex_count(self) -> int:
        return int(self.positions.size // 3)

    @property
    def triangle_count(self) -> int:
        return int(self.indices.size // 3)

    @property
    def has_colors(self) -> bool:
        return self.colors is not None

    def vertices(self) -> np.ndarray:
        """Positions viewed as an (V, 3) array."""
        return self.positions.reshape(-1, 3)

    def triangles(self) -> np.ndarray:
        """Indices viewed as a (T, 3) array."""
        return self.indices.reshape(-1, 3)

    def translated(self, offset) -> "MeshBuffer":
        """Return a copy with every position shifted by ``offset``."""
        moved = self.vertices() + np.asarray(offset, dtype=np.float32)
        return MeshBuffer(
            positions=moved,
            normals=self.normals.copy(),
            indices=self.indices.copy(),
            colors=None if self.colors is None else self.colors.copy(),
        )

    def with_color(self, color) -> "MeshBuffer":
        """Return a copy with ``color`` broadcast to every vertex."""
        rgb = np.asarray(color, dtype=np.float32).reshape(1, 3)
        return MeshBuffer(
            positions=self.positions.copy(),
            normals=self.normals.copy(),
            indices=self.indices.copy(),
            colors=np.repeat(rgb, self.vertex_count, axis=0),
        )

    def to_arrays(self) -> dict:
        """Arrays keyed by name, suitable for ``numpy.savez``."""
        arrays = {
            "positions": self.positions,
            "normals": self.normals,
            "indices": self.indices,
        }
        if self.colors is not None:
            arrays["colors"] = self.colors
        return arrays
