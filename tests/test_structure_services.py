"""Tests for centring, bond inference and structure loading."""

import itertools

import numpy as np
import pytest

from molmesh.config import GeometryOptions
from molmesh.domain.models.atom import Atom
from molmesh.domain.models.bond import Bond
from molmesh.services.bond_inference_service import BondInferenceService, infer_bonds
from molmesh.services.normalization_service import center_molecule, center_of_mass
from molmesh.services.structure_service import StructureService, load_structure


def make_atom(serial, xyz, element="C", name=None):
    return Atom(
        serial=serial,
        atom_name=name or element,
        residue_name="LIG",
        chain_id="A",
        residue_seq=1,
        coordinates=tuple(float(c) for c in xyz),
        element=element,
    )


class TestCenterMolecule:
    def test_two_atoms(self):
        atoms = [make_atom(1, (0, 0, 0)), make_atom(2, (0, 0, 1.5))]
        centered, center = center_molecule(atoms)

        assert np.allclose(center, [0.0, 0.0, 0.75])
        assert centered[0].coordinates == pytest.approx((0.0, 0.0, -0.75))
        assert centered[1].coordinates == pytest.approx((0.0, 0.0, 0.75))

    def test_input_not_mutated(self):
        atoms = [make_atom(1, (1, 2, 3)), make_atom(2, (3, 4, 5))]
        center_molecule(atoms)
        assert atoms[0].coordinates == (1.0, 2.0, 3.0)

    def test_empty(self):
        centered, center = center_molecule([])
        assert centered == []
        assert np.allclose(center, 0.0)

    def test_reapplying_stays_at_origin(self):
        rng = np.random.default_rng(7)
        atoms = [make_atom(i, rng.normal(50.0, 20.0, 3)) for i in range(200)]
        once, _ = center_molecule(atoms)
        twice, shift = center_molecule(once)

        assert np.allclose(shift, 0.0, atol=1e-9)
        assert np.allclose(center_of_mass(twice), 0.0, atol=1e-9)

    def test_identity_fields_preserved(self):
        atom = make_atom(42, (1, 1, 1), element="N", name="NZ")
        (moved,), _ = center_molecule([atom])
        assert moved.serial == 42
        assert moved.atom_name == "NZ"
        assert moved.element == "N"


class TestBondInference:
    def test_two_carbons_bonded(self):
        atoms = [make_atom(1, (0, 0, 0)), make_atom(2, (0, 0, 1.5))]
        bonds = infer_bonds(atoms)

        assert len(bonds) == 1
        assert (bonds[0].atom1_index, bonds[0].atom2_index) == (0, 1)
        assert bonds[0].distance == pytest.approx(1.5)

    def test_threshold_is_strict(self):
        atoms = [make_atom(1, (0, 0, 0)), make_atom(2, (0, 0, 1.8))]
        assert infer_bonds(atoms) == []
        assert len(infer_bonds(atoms, threshold=1.81)) == 1

    def test_hydrogen_never_bonded(self):
        atoms = [
            make_atom(1, (0, 0, 0), "C"),
            make_atom(2, (0, 0, 1.0), "H"),
            make_atom(3, (0, 1.0, 0), "h"),
        ]
        assert infer_bonds(atoms) == []

    def test_matches_bruteforce(self):
        rng = np.random.default_rng(11)
        elements = ["C", "N", "O", "H", "S"]
        atoms = [
            make_atom(i, rng.uniform(0.0, 6.0, 3), elements[i % len(elements)])
            for i in range(60)
        ]
        threshold = 1.8
        expected = set()
        for i, j in itertools.combinations(range(len(atoms)), 2):
            if atoms[i].element == "H" or atoms[j].element == "H":
                continue
            d = np.linalg.norm(np.subtract(atoms[i].coordinates, atoms[j].coordinates))
            if d < threshold:
                expected.add((i, j))

        bonds = infer_bonds(atoms, threshold)
        found = [(b.atom1_index, b.atom2_index) for b in bonds]

        assert set(found) == expected
        assert found == sorted(found)
        assert all(i < j for i, j in found)

    def test_fewer_than_two_atoms(self):
        assert infer_bonds([]) == []
        assert infer_bonds([make_atom(1, (0, 0, 0))]) == []

    def test_rejects_non_positive_threshold(self):
        with pytest.raises(ValueError):
            BondInferenceService(threshold=0.0)

    def test_bond_requires_ordered_indices(self):
        with pytest.raises(ValueError):
            Bond(2, 1, 1.0)


class TestStructureService:
    def test_two_carbon_scenario(self, two_carbon_pdb):
        graph = load_structure(two_carbon_pdb)

        assert len(graph.atoms) == 2
        assert len(graph.bonds) == 1
        assert graph.bonds[0].distance == pytest.approx(1.5)
        assert graph.atoms[0].coordinates == pytest.approx((0.0, 0.0, -0.75))
        assert graph.atoms[1].coordinates == pytest.approx((0.0, 0.0, 0.75))

    def test_dipeptide_bonds(self, dipeptide_pdb):
        graph = load_structure(dipeptide_pdb)
        pairs = [(b.atom1_index, b.atom2_index) for b in graph.bonds]

        assert pairs == [(0, 1), (1, 2), (2, 3), (2, 5), (5, 6)]
        # peptide + hydrogen + isolated water
        assert graph.fragment_count() == 3

    def test_custom_threshold(self, dipeptide_pdb):
        service = StructureService(GeometryOptions(bond_threshold=1.3))
        graph = service.load(dipeptide_pdb)
        pairs = [(b.atom1_index, b.atom2_index) for b in graph.bonds]
        assert pairs == [(2, 3)]

    def test_networkx_view(self, dipeptide_pdb):
        G = load_structure(dipeptide_pdb).to_networkx()
        assert G.number_of_nodes() == 8
        assert G.number_of_edges() == 5
        assert G.nodes[1]["name"] == "CA"
        assert G.edges[2, 3]["distance"] == pytest.approx(1.231, abs=1e-3)

    def test_empty_structure(self):
        graph = load_structure("REMARK nothing\n")
        assert graph.atoms == []
        assert graph.bonds == []
        assert graph.get_coordinates().shape == (0, 3)
        assert graph.fragment_count() == 0


class TestGeometryOptions:
    def test_defaults(self):
        options = GeometryOptions()
        assert options.atom_scale == 0.3
        assert options.sphere_detail == 10
        assert options.max_residue_gap == 2

    @pytest.mark.parametrize(
        "field, value",
        [("atom_scale", 0.0), ("position_scale", -1.0), ("bond_threshold", 0.0), ("sphere_detail", 0)],
    )
    def test_rejects_invalid(self, field, value):
        with pytest.raises(ValueError):
            GeometryOptions(**{field: value})
