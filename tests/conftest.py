import pytest


def format_atom_line(
    serial,
    name,
    res_name="ALA",
    chain="A",
    res_seq=1,
    x=0.0,
    y=0.0,
    z=0.0,
    element="",
    record="ATOM",
    alt_loc="",
    occupancy=1.0,
    b_factor=0.0,
):
    """Format an ATOM/HETATM record following the PDB column layout."""
    return (
        f"{record:<6s}{serial:5d} {name:<4s}{alt_loc:1s}{res_name:>3s} {chain:1s}"
        f"{res_seq:4d}    {x:8.3f}{y:8.3f}{z:8.3f}{occupancy:6.2f}{b_factor:6.2f}"
        f"          {element:>2s}"
    )


@pytest.fixture
def atom_line():
    """Factory producing fixed-column atom records."""
    return format_atom_line


@pytest.fixture
def two_carbon_pdb():
    return "\n".join(
        [
            "HEADER    TEST",
            format_atom_line(1, "C1", "LIG", "A", 1, 0.0, 0.0, 0.0, "C"),
            format_atom_line(2, "C2", "LIG", "A", 1, 0.0, 0.0, 1.5, "C"),
            "END",
        ]
    )


@pytest.fixture
def dipeptide_pdb():
    """Two residues of chain A plus a water oxygen and hydrogens."""
    return "\n".join(
        [
            format_atom_line(1, "N", "ALA", "A", 1, 0.000, 0.000, 0.000, "N"),
            format_atom_line(2, "CA", "ALA", "A", 1, 1.458, 0.000, 0.000, "C"),
            format_atom_line(3, "C", "ALA", "A", 1, 2.009, 1.420, 0.000, "C"),
            format_atom_line(4, "O", "ALA", "A", 1, 1.251, 2.390, 0.000, "O"),
            format_atom_line(5, "H", "ALA", "A", 1, -0.500, -0.800, 0.000, "H"),
            format_atom_line(6, "N", "GLY", "A", 2, 3.332, 1.536, 0.000, "N"),
            format_atom_line(7, "CA", "GLY", "A", 2, 3.988, 2.839, 0.000, "C"),
            format_atom_line(8, "O", "HOH", "W", 100, 20.0, 20.0, 20.0, "O", record="HETATM"),
            "END",
        ]
    )


@pytest.fixture
def triangle_obj():
    return "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
