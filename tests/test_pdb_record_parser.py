"""Tests for fixed-column structure record decoding."""

import pytest

from molmesh.domain.exceptions import MalformedRecordError
from molmesh.domain.implementations.pdb_record_parser import (
    ATOM_NAME,
    CHAIN_ID,
    ELEMENT,
    RESIDUE_NAME,
    RESIDUE_SEQ,
    SERIAL,
    X,
    Y,
    Z,
    StructuralRecordParser,
    parse_structure,
)
from molmesh.domain.models.element import Element, guess_element

CRAMBIN_LINE = "ATOM      1  N   THR A   1      17.047  14.099   3.625  1.00 13.79           N"


def test_parse_real_record():
    atom = StructuralRecordParser.parse_atom_line(CRAMBIN_LINE)

    assert atom.serial == 1
    assert atom.atom_name == "N"
    assert atom.residue_name == "THR"
    assert atom.chain_id == "A"
    assert atom.residue_seq == 1
    assert atom.coordinates == pytest.approx((17.047, 14.099, 3.625))
    assert atom.element == "N"
    assert atom.occupancy == pytest.approx(1.0)
    assert atom.b_factor == pytest.approx(13.79)
    assert atom.record_type == "ATOM"


def test_fields_match_column_slices(atom_line):
    line = atom_line(1234, "CB", "SER", "Q", 57, -12.5, 3.25, 100.125, "C")
    atom = StructuralRecordParser.parse_atom_line(line)

    assert str(atom.serial) == SERIAL.extract(line).strip()
    assert atom.atom_name == ATOM_NAME.extract(line).strip()
    assert atom.residue_name == RESIDUE_NAME.extract(line).strip()
    assert atom.chain_id == CHAIN_ID.extract(line).strip()
    assert str(atom.residue_seq) == RESIDUE_SEQ.extract(line).strip()
    assert atom.coordinates == (
        float(X.extract(line)),
        float(Y.extract(line)),
        float(Z.extract(line)),
    )
    assert atom.element == ELEMENT.extract(line).strip()


def test_columns_are_positional_not_whitespace_delimited():
    # Coordinates run together with no separating whitespace.
    line = "ATOM      7  CA  GLY B  12    -100.123-200.456-300.789  1.00  0.00           C"
    atom = StructuralRecordParser.parse_atom_line(line)

    assert atom.coordinates == pytest.approx((-100.123, -200.456, -300.789))
    assert atom.chain_id == "B"
    assert atom.residue_seq == 12


def test_only_atom_and_hetatm_records(atom_line):
    text = "\n".join(
        [
            "HEADER    PLANT PROTEIN",
            "REMARK   2 RESOLUTION.",
            atom_line(1, "N", element="N"),
            "ANISOU    1  N   ALA A   1     2406   1892   1614    198    519   -328       N",
            atom_line(2, "O", "HOH", "W", 5, 1.0, 1.0, 1.0, "O", record="HETATM"),
            "ATOMS this is not an atom record",
            "CONECT    1    2",
            "END",
        ]
    )
    atoms = parse_structure(text)

    assert [a.serial for a in atoms] == [1, 2]
    assert atoms[1].is_hetero
    assert not atoms[0].is_hetero


def test_empty_input_yields_no_atoms():
    assert parse_structure("") == []
    assert parse_structure("HEADER    NOTHING HERE\nEND\n") == []


def test_short_line_missing_trailing_columns():
    # Line stops right after the z column: no occupancy, b-factor or element.
    line = "ATOM      3  OG  SER A   4       1.000   2.000   3.000"
    atom = StructuralRecordParser.parse_atom_line(line)

    assert atom.coordinates == (1.0, 2.0, 3.0)
    assert atom.element == "O"
    assert atom.occupancy == 1.0
    assert atom.b_factor == 0.0


def test_truncated_line_treats_absent_columns_as_zero():
    atom = StructuralRecordParser.parse_atom_line("ATOM      9  CA  ALA A")

    assert atom.serial == 9
    assert atom.residue_seq == 0
    assert atom.coordinates == (0.0, 0.0, 0.0)
    assert atom.element == "C"


def test_blank_chain_defaults_to_a(atom_line):
    atom = StructuralRecordParser.parse_atom_line(atom_line(1, "CA", chain=" "))
    assert atom.chain_id == "A"


def test_malformed_coordinate_aborts_parse(atom_line):
    good = atom_line(1, "CA", element="C")
    bad = good[:30] + "   abc.d" + good[38:]
    text = "\n".join([good, bad, atom_line(3, "CB", element="C")])

    with pytest.raises(MalformedRecordError) as exc_info:
        parse_structure(text)

    assert exc_info.value.line_number == 2
    assert exc_info.value.field == "x"
    assert "line 2" in str(exc_info.value)


def test_malformed_serial_raises(atom_line):
    line = atom_line(1, "CA")
    bad = line[:6] + "  x1 " + line[11:]
    with pytest.raises(MalformedRecordError) as exc_info:
        parse_structure(bad)
    assert exc_info.value.field == "serial"


def test_malformed_optional_fields_degrade(atom_line):
    line = atom_line(1, "CA")
    bad = line[:54] + "  n/a " + "  ??  " + line[66:]
    atom = StructuralRecordParser.parse_atom_line(bad)
    assert atom.occupancy == 1.0
    assert atom.b_factor == 0.0


def test_element_guessed_from_atom_name(atom_line):
    names = {"CA": "C", "NZ": "N", "OXT": "O", "SG": "S", "HB2": "H", "P": "P", "ZN": "C"}
    for name, expected in names.items():
        atom = StructuralRecordParser.parse_atom_line(atom_line(1, name))
        assert atom.element == expected, name


def test_explicit_element_column_wins(atom_line):
    atom = StructuralRecordParser.parse_atom_line(atom_line(1, "CA", "CA", element="CA", record="HETATM"))
    assert atom.element == "CA"
    assert atom.element_kind is Element.CA


def test_guess_element_blank_name():
    assert guess_element("   ") == "C"


def test_model_records_and_filter(atom_line):
    text = "\n".join(
        [
            "MODEL        1",
            atom_line(1, "CA", res_seq=1),
            "ENDMDL",
            "MODEL        2",
            atom_line(1, "CA", res_seq=1, x=5.0),
            atom_line(2, "CB", res_seq=1, x=6.0),
            "ENDMDL",
        ]
    )
    atoms = parse_structure(text)
    assert [a.model_num for a in atoms] == [1, 2, 2]

    second = parse_structure(text, model=2)
    assert len(second) == 2
    assert second[0].coordinates[0] == 5.0


def test_windows_line_endings(atom_line):
    text = atom_line(1, "CA") + "\r\n" + atom_line(2, "CB") + "\r\n"
    assert len(parse_structure(text)) == 2
