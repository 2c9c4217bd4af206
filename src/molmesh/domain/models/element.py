"""Closed set of chemical elements known to the renderer."""

from enum import Enum
from typing import Tuple

Color = Tuple[float, float, float]


class Element(Enum):
    """Elements with a CPK colour and display radius.

    Anything outside the set maps to ``UNKNOWN``.
    """

    H = "H"
    C = "C"
    N = "N"
    O = "O"
    S = "S"
    P = "P"
    F = "F"
    CL = "CL"
    BR = "BR"
    I = "I"
    FE = "FE"
    CA = "CA"
    UNKNOWN = "?"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Element":
        """Look up a symbol case-insensitively; unknown symbols give UNKNOWN."""
        try:
            return cls((symbol or "").strip().upper())
        except ValueError:
            return cls.UNKNOWN

    @property
    def color(self) -> Color:
        """CPK colour as an RGB triple in [0, 1]."""
        if self is Element.UNKNOWN:
            return DEFAULT_COLOR
        return _CPK_COLORS[self]

    @property
    def vdw_radius(self) -> float:
        """Display radius in Angstrom before atom scaling."""
        return _VDW_RADII.get(self, DEFAULT_RADIUS)


DEFAULT_COLOR: Color = (0.8, 0.0, 0.8)
DEFAULT_RADIUS = 0.4
BOND_COLOR: Color = (0.5, 0.5, 0.5)

_CPK_COLORS = {
    Element.H: (1.0, 1.0, 1.0),
    Element.C: (0.2, 0.2, 0.2),
    Element.N: (0.0, 0.0, 1.0),
    Element.O: (1.0, 0.0, 0.0),
    Element.S: (1.0, 1.0, 0.0),
    Element.P: (1.0, 0.5, 0.0),
    Element.F: (0.0, 1.0, 0.0),
    Element.CL: (0.0, 1.0, 0.0),
    Element.BR: (0.5, 0.0, 0.0),
    Element.I: (0.5, 0.0, 0.5),
    Element.FE: (1.0, 0.5, 0.0),
    Element.CA: (0.0, 1.0, 0.0),
}

# Elements without an entry use DEFAULT_RADIUS.
_VDW_RADII = {
    Element.H: 0.3,
    Element.C: 0.4,
    Element.N: 0.35,
    Element.O: 0.35,
    Element.S: 0.45,
    Element.P: 0.45,
}

# First character of an atom name -> element, used when the element column is blank.
_NAME_PREFIXES = {
    "C": Element.C,
    "N": Element.N,
    "O": Element.O,
    "S": Element.S,
    "H": Element.H,
    "P": Element.P,
}


def guess_element(atom_name: str) -> str:
    """Guess an element symbol from the leading character of an atom name."""
    name = atom_name.strip()
    if not name:
        return Element.C.value
    return _NAME_PREFIXES.get(name[0].upper(), Element.C).value
