#!/usr/bin/env python3
# src/molmesh/domain/implementations/pdb_record_parser.py

"""
Fixed-column decoder for ATOM/HETATM structure records.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import MalformedRecordError
from ..interfaces.text_parser import TextParser
from ..models.atom import Atom
from ..models.element import guess_element

logger = logging.getLogger(__name__)

ATOM_RECORDS = ("ATOM  ", "HETATM")
DEFAULT_CHAIN_ID = "A"


@dataclass(frozen=True)
class ColumnRange:
    """Inclusive 1-based column range, as numbered in the PDB format guide."""

    start: int
    end: int

    def extract(self, line: str) -> str:
        # Slicing past the end of a short line yields "" rather than failing.
        return line[self.start - 1 : self.end]


SERIAL = ColumnRange(7, 11)
ATOM_NAME = ColumnRange(13, 16)
ALT_LOC = ColumnRange(17, 17)
RESIDUE_NAME = ColumnRange(18, 20)
CHAIN_ID = ColumnRange(22, 22)
RESIDUE_SEQ = ColumnRange(23, 26)
X = ColumnRange(31, 38)
Y = ColumnRange(39, 46)
Z = ColumnRange(47, 54)
OCCUPANCY = ColumnRange(55, 60)
B_FACTOR = ColumnRange(61, 66)
ELEMENT = ColumnRange(77, 78)


class StructuralRecordParser(TextParser[List[Atom]]):
    """Parse ATOM/HETATM records into an ordered list of atoms.

    Lines with any other record type are skipped, apart from MODEL which
    sets the model number attached to the atoms that follow it.
    """

    def __init__(self, model: Optional[int] = None):
        """
        Initialize the parser.

        Args:
            model: If given, keep only atoms belonging to this model number
        """
        self._model = model

    def parse(self, text: str) -> List[Atom]:
        """
        Decode every atom record in ``text``.

        Args:
            text: Content of a PDB-style file

        Returns:
            Atoms in file order

        Raises:
            MalformedRecordError: If a required numeric column is unreadable
        """
        atoms: List[Atom] = []
        current_model = 1
        seen_models = 0

        for line_number, line in enumerate(text.splitlines(), start=1):
            record_type = line[0:6]

            if record_type == "MODEL ":
                seen_models += 1
                current_model = self._model_number(line, default=seen_models)
            elif record_type in ATOM_RECORDS:
                if self._model is not None and current_model != self._model:
                    continue
                atoms.append(self.parse_atom_line(line, line_number, current_model))

        logger.info(f"Parsed {len(atoms)} atoms")
        return atoms

    @staticmethod
    def parse_atom_line(line: str, line_number: int = 1, model_num: int = 1) -> Atom:
        """Parse a single ATOM/HETATM record line."""
        atom_name = ATOM_NAME.extract(line).strip()
        element = ELEMENT.extract(line).strip() or guess_element(atom_name)

        return Atom(
            serial=_required_int(line, SERIAL, "serial", line_number),
            atom_name=atom_name,
            residue_name=RESIDUE_NAME.extract(line).strip(),
            chain_id=CHAIN_ID.extract(line).strip() or DEFAULT_CHAIN_ID,
            residue_seq=_required_int(line, RESIDUE_SEQ, "resSeq", line_number),
            coordinates=(
                _required_float(line, X, "x", line_number),
                _required_float(line, Y, "y", line_number),
                _required_float(line, Z, "z", line_number),
            ),
            element=element,
            record_type=line[0:6].strip(),
            alt_loc=ALT_LOC.extract(line).strip(),
            occupancy=_optional_float(line, OCCUPANCY, 1.0),
            b_factor=_optional_float(line, B_FACTOR, 0.0),
            model_num=model_num,
        )

    @staticmethod
    def _model_number(line: str, default: int) -> int:
        parts = line.split()
        try:
            return int(parts[1])
        except (IndexError, ValueError):
            logger.debug(f"MODEL record without a serial, numbering it {default}")
            return default


def _required_int(line: str, column: ColumnRange, field: str, line_number: int) -> int:
    text = column.extract(line).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        raise MalformedRecordError(
            f"non-numeric {field} {text!r} in columns {column.start}-{column.end}",
            line_number=line_number,
            record=line,
            field=field,
        ) from None


def _required_float(line: str, column: ColumnRange, field: str, line_number: int) -> float:
    text = column.extract(line).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        raise MalformedRecordError(
            f"non-numeric {field} {text!r} in columns {column.start}-{column.end}",
            line_number=line_number,
            record=line,
            field=field,
        ) from None


def _optional_float(line: str, column: ColumnRange, default: float) -> float:
    text = column.extract(line).strip()
    try:
        return float(text) if text else default
    except ValueError:
        return default


def parse_structure(text: str, model: Optional[int] = None) -> List[Atom]:
    """Convenience wrapper around :class:`StructuralRecordParser`."""
    return StructuralRecordParser(model=model).parse(text)
