#!/usr/bin/env python3
# src/molmesh/services/geometry_service.py

"""
Service turning a molecular graph into render buffers.
"""

import logging
from typing import List

import numpy as np

from ..domain.models.element import BOND_COLOR
from ..domain.models.mesh_buffer import MeshBuffer
from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.simple_geometry import AtomArrays, LineArrays, SimpleGeometry
from ..geometry.primitives import create_cylinder, create_sphere

logger = logging.getLogger(__name__)


def merge_meshes(parts: List[MeshBuffer]) -> MeshBuffer:
    """
    Concatenate coloured meshes into one buffer with a shared index space.

    Each part's indices are offset by the number of vertices emitted before it.
    The result carries colours only when every part does.

    Raises:
        ValueError: If some parts are coloured and others are not
    """
    if not parts:
        return MeshBuffer.empty(with_colors=True)

    coloured = [p.has_colors for p in parts]
    if any(coloured) and not all(coloured):
        raise ValueError("merge_meshes needs either all parts coloured or none")

    indices = []
    vertex_offset = 0
    for part in parts:
        indices.append(part.indices.astype(np.uint32) + np.uint32(vertex_offset))
        vertex_offset += part.vertex_count

    return MeshBuffer(
        positions=np.concatenate([p.positions for p in parts]),
        normals=np.concatenate([p.normals for p in parts]),
        indices=np.concatenate(indices),
        colors=np.concatenate([p.colors for p in parts]) if all(coloured) else None,
    )


class GeometryService:
    """Assemble atoms and bonds into either flat arrays or one merged mesh."""

    def build_simple(
        self,
        graph: MolecularGraph,
        atom_scale: float = 0.3,
        position_scale: float = 1.0,
    ) -> SimpleGeometry:
        """
        Build per-atom instancing arrays and bond line segments.

        Args:
            graph: Atoms and bonds of one structure
            atom_scale: Multiplier for van der Waals radii
            position_scale: Multiplier for atom and bond coordinates only

        Returns:
            SimpleGeometry with atom positions/colours/radii/elements and
            bond endpoint positions with gray colours
        """
        coords = graph.get_coordinates() * position_scale
        kinds = [atom.element_kind for atom in graph.atoms]

        atoms = AtomArrays(
            positions=coords.astype(np.float32).reshape(-1),
            colors=np.array([k.color for k in kinds], dtype=np.float32).reshape(-1),
            radii=np.array([k.vdw_radius * atom_scale for k in kinds], dtype=np.float32),
            elements=[atom.element for atom in graph.atoms],
        )

        bond_positions = np.zeros((len(graph.bonds) * 2, 3), dtype=np.float32)
        for i, bond in enumerate(graph.bonds):
            bond_positions[2 * i] = coords[bond.atom1_index]
            bond_positions[2 * i + 1] = coords[bond.atom2_index]
        bond_colors = np.tile(np.array(BOND_COLOR, dtype=np.float32), len(graph.bonds) * 2)

        logger.debug(f"Simple geometry: {len(atoms)} atoms, {len(graph.bonds)} bond lines")
        return SimpleGeometry(
            atoms=atoms,
            bonds=LineArrays(positions=bond_positions.reshape(-1), colors=bond_colors),
        )

    def build_merged(
        self,
        graph: MolecularGraph,
        atom_scale: float = 0.3,
        sphere_detail: int = 10,
        bond_radius: float = 0.1,
        bond_segments: int = 8,
    ) -> MeshBuffer:
        """
        Build a single coloured mesh of atom spheres and bond cylinders.

        Cylinders are translated to the bond midpoint but keep their Y-axis
        orientation; they are not rotated onto the bond direction.

        Args:
            graph: Atoms and bonds of one structure
            atom_scale: Multiplier for van der Waals radii
            sphere_detail: Latitude and longitude bands per sphere
            bond_radius: Cylinder radius
            bond_segments: Radial segments per cylinder

        Returns:
            Coloured MeshBuffer; empty when the graph has no atoms
        """
        if not graph.atoms:
            return MeshBuffer.empty(with_colors=True)

        coords = graph.get_coordinates()
        parts: List[MeshBuffer] = []

        for atom, position in zip(graph.atoms, coords):
            kind = atom.element_kind
            sphere = create_sphere(kind.vdw_radius * atom_scale, sphere_detail, sphere_detail)
            parts.append(sphere.translated(position).with_color(kind.color))

        for bond in graph.bonds:
            start = coords[bond.atom1_index]
            end = coords[bond.atom2_index]
            length = float(np.linalg.norm(end - start))
            cylinder = create_cylinder(bond_radius, bond_radius, length, bond_segments)
            parts.append(cylinder.translated((start + end) / 2.0).with_color(BOND_COLOR))

        mesh = merge_meshes(parts)
        logger.info(
            f"Merged mesh: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles "
            f"for {len(graph.atoms)} atoms and {len(graph.bonds)} bonds"
        )
        return mesh


def build_simple_geometry(
    graph: MolecularGraph, atom_scale: float = 0.3, position_scale: float = 1.0
) -> SimpleGeometry:
    """Convenience wrapper around :meth:`GeometryService.build_simple`."""
    return GeometryService().build_simple(graph, atom_scale, position_scale)


def build_merged_mesh(
    graph: MolecularGraph,
    atom_scale: float = 0.3,
    sphere_detail: int = 10,
    bond_radius: float = 0.1,
    bond_segments: int = 8,
) -> MeshBuffer:
    """Convenience wrapper around :meth:`GeometryService.build_merged`."""
    return GeometryService().build_merged(
        graph, atom_scale, sphere_detail, bond_radius, bond_segments
    )
