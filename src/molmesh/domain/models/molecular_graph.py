#!/usr/bin/env python3
# src/molmesh/domain/models/molecular_graph.py

"""
Domain model holding the atoms and inferred bonds of one structure load.
"""

from typing import List

import networkx as nx
import numpy as np

from .atom import Atom
from .bond import Bond


class MolecularGraph:
    """Graph representation of a molecular structure."""

    def __init__(self, atoms: List[Atom], bonds: List[Bond], model_num: int = 1):
        """
        Initialize a MolecularGraph.

        Args:
            atoms: List of Atom objects
            bonds: List of Bond objects indexing into ``atoms``
            model_num: Model number the atoms were read from
        """
        self.atoms = atoms
        self.bonds = bonds
        self.model_num = model_num

    def __len__(self) -> int:
        return len(self.atoms)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the graph.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self.atoms:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([atom.coordinates for atom in self.atoms], dtype=np.float64)

    def to_networkx(self) -> nx.Graph:
        """Build a NetworkX graph with one node per atom index.

        Node attributes carry the atom identity; edges carry the bond distance.
        """
        G = nx.Graph()
        for i, atom in enumerate(self.atoms):
            G.add_node(
                i,
                serial=atom.serial,
                name=atom.atom_name,
                element=atom.element,
                residue_name=atom.residue_name,
                residue_seq=atom.residue_seq,
                chain_id=atom.chain_id,
            )
        for bond in self.bonds:
            G.add_edge(bond.atom1_index, bond.atom2_index, distance=bond.distance)
        return G

    def fragment_count(self) -> int:
        """Number of connected fragments in the bond graph."""
        if not self.atoms:
            return 0
        return nx.number_connected_components(self.to_networkx())
