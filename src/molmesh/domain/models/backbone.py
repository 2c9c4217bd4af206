"""Backbone trace models."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .atom import Atom

Point = Tuple[float, float, float]


@dataclass(frozen=True)
class BackboneSegment:
    """Line segment between two consecutive alpha carbons of one chain."""

    start: Point
    end: Point
    chain_id: str


@dataclass
class BackboneTrace:
    """Alpha-carbon trace of a structure.

    ``atoms`` lists the selected atoms chain by chain, each chain sorted by
    residue number; ``chains`` holds chain ids in first-seen order.
    """

    atoms: List[Atom] = field(default_factory=list)
    segments: List[BackboneSegment] = field(default_factory=list)
    chains: List[str] = field(default_factory=list)
    sequences: Dict[str, str] = field(default_factory=dict)

    def segments_for_chain(self, chain_id: str) -> List[BackboneSegment]:
        return [s for s in self.segments if s.chain_id == chain_id]
