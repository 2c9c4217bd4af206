"""Service extracting the alpha-carbon backbone trace of a structure."""

import logging
from typing import Dict, List

import numpy as np
from Bio.SeqUtils import seq1

from ..domain.models.atom import Atom
from ..domain.models.backbone import BackboneSegment, BackboneTrace
from ..domain.models.simple_geometry import LineArrays

logger = logging.getLogger(__name__)

ALPHA_CARBON = "CA"
DEFAULT_CHAIN_ID = "A"
MAX_RESIDUE_GAP = 2

CHAIN_COLORS = [
    (0.2, 0.6, 1.0),  # blue
    (1.0, 0.5, 0.0),  # orange
    (0.0, 0.8, 0.3),  # green
    (0.9, 0.2, 0.5),  # pink
    (0.7, 0.7, 0.0),  # yellow
    (0.5, 0.0, 0.8),  # purple
]
FALLBACK_CHAIN_COLOR = (0.8, 0.8, 0.8)


class BackboneService:
    """Build per-chain CA traces and their line geometry."""

    def __init__(self, max_residue_gap: int = MAX_RESIDUE_GAP):
        self._max_residue_gap = max_residue_gap

    def extract_trace(self, atoms: List[Atom]) -> BackboneTrace:
        """
        Link consecutive alpha carbons of each chain into segments.

        Records are not guaranteed to be ordered by chain or residue in the
        file, so each chain is sorted by residue number before linking.
        Neighbours more than ``max_residue_gap`` residues apart are treated
        as a chain break and left unlinked.

        Args:
            atoms: Parsed atoms

        Returns:
            BackboneTrace with segments, chain ids in first-seen order and
            the one-letter sequence of each chain
        """
        chains: Dict[str, List[Atom]] = {}
        for atom in atoms:
            if atom.atom_name != ALPHA_CARBON:
                continue
            chain_id = atom.chain_id or DEFAULT_CHAIN_ID
            chains.setdefault(chain_id, []).append(atom)

        trace = BackboneTrace(chains=list(chains))
        for chain_id, members in chains.items():
            # sorted() is stable, so altLoc duplicates keep file order
            ordered = sorted(members, key=lambda a: a.residue_seq)
            trace.atoms.extend(ordered)
            trace.sequences[chain_id] = "".join(
                seq1(a.residue_name) or "X" for a in ordered
            )
            for current, following in zip(ordered, ordered[1:]):
                if abs(following.residue_seq - current.residue_seq) <= self._max_residue_gap:
                    trace.segments.append(
                        BackboneSegment(
                            start=current.coordinates,
                            end=following.coordinates,
                            chain_id=chain_id,
                        )
                    )

        logger.info(
            f"Backbone trace: {len(trace.atoms)} CA atoms, "
            f"{len(trace.segments)} segments, {len(trace.chains)} chains"
        )
        return trace

    @staticmethod
    def chain_color_map(chains: List[str]) -> Dict[str, tuple]:
        """Assign palette colours to chains in the order given, cycling."""
        return {
            chain_id: CHAIN_COLORS[i % len(CHAIN_COLORS)]
            for i, chain_id in enumerate(chains)
        }

    def build_geometry(self, trace: BackboneTrace, scale: float = 1.0) -> LineArrays:
        """
        Flatten a trace into line-segment arrays coloured by chain.

        Args:
            trace: Trace from :meth:`extract_trace`
            scale: Factor applied to every coordinate

        Returns:
            LineArrays with two endpoints and two colours per segment
        """
        color_map = self.chain_color_map(trace.chains)
        positions = np.zeros((len(trace.segments) * 2, 3), dtype=np.float32)
        colors = np.zeros_like(positions)
        for i, segment in enumerate(trace.segments):
            color = color_map.get(segment.chain_id, FALLBACK_CHAIN_COLOR)
            positions[2 * i] = segment.start
            positions[2 * i + 1] = segment.end
            colors[2 * i] = color
            colors[2 * i + 1] = color
        return LineArrays(positions=(positions * scale).reshape(-1), colors=colors.reshape(-1))


def extract_backbone_trace(atoms: List[Atom], max_residue_gap: int = MAX_RESIDUE_GAP) -> BackboneTrace:
    """Convenience wrapper around :meth:`BackboneService.extract_trace`."""
    return BackboneService(max_residue_gap).extract_trace(atoms)


def backbone_geometry(trace: BackboneTrace, scale: float = 1.0) -> LineArrays:
    """Convenience wrapper around :meth:`BackboneService.build_geometry`."""
    return BackboneService().build_geometry(trace, scale)
