#!/usr/bin/env python3
# src/molmesh/domain/implementations/obj_mesh_parser.py

"""
Decoder for OBJ-style polygon mesh text.
"""

import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ...geometry.normals import compute_vertex_normals
from ..exceptions import MalformedRecordError, UnsupportedReferenceError
from ..interfaces.text_parser import TextParser
from ..models.mesh_buffer import MeshBuffer

logger = logging.getLogger(__name__)

# (position, texcoord, normal), 0-based; -1 marks an absent reference.
VertexKey = Tuple[int, int, int]
MISSING = -1
DEFAULT_NORMAL = (0.0, 0.0, 1.0)


def triangulate_face(face: Sequence[int]) -> List[Tuple[int, int, int]]:
    """
    Split a polygon into triangles fanning out from its first vertex.

    A triangle is returned as is and a quad becomes (0, 1, 2), (0, 2, 3);
    an n-gon always yields n - 2 triangles.
    """
    if len(face) < 3:
        raise ValueError(f"A face needs at least 3 vertices, got {len(face)}")
    first = face[0]
    return [(first, face[i], face[i + 1]) for i in range(1, len(face) - 1)]


class PolygonMeshParser(TextParser[MeshBuffer]):
    """Parse ``v``/``vn``/``vt``/``f`` records into a deduplicated MeshBuffer.

    Each distinct (position, texcoord, normal) reference becomes exactly one
    output vertex, shared by every face that uses it. When the file declares
    no normals at all they are synthesised from the triangles.
    """

    def parse(self, text: str) -> MeshBuffer:
        """
        Decode a complete OBJ file.

        Args:
            text: OBJ file content

        Returns:
            MeshBuffer without colours

        Raises:
            MalformedRecordError: On unreadable numbers or faces with < 3 vertices
            UnsupportedReferenceError: On zero, negative or out-of-range indices
        """
        positions: List[Tuple[float, ...]] = []
        normals: List[Tuple[float, ...]] = []
        texcoords: List[Tuple[float, ...]] = []

        vertex_map: Dict[VertexKey, int] = {}
        vertex_keys: List[VertexKey] = []
        indices: List[int] = []

        for line_number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            keyword = parts[0]

            if keyword == "v":
                positions.append(_components(parts, 3, line_number, raw))
            elif keyword == "vn":
                normals.append(_components(parts, 3, line_number, raw))
            elif keyword == "vt":
                texcoords.append(_components(parts, 1, line_number, raw))
            elif keyword == "f":
                if len(parts) < 4:
                    raise MalformedRecordError(
                        f"face has {len(parts) - 1} vertices, at least 3 required",
                        line_number=line_number,
                        record=raw,
                    )
                face = []
                for token in parts[1:]:
                    key = self._vertex_key(
                        token, line_number, len(positions), len(texcoords), len(normals)
                    )
                    index = vertex_map.get(key)
                    if index is None:
                        index = len(vertex_keys)
                        vertex_map[key] = index
                        vertex_keys.append(key)
                    face.append(index)
                for triangle in triangulate_face(face):
                    indices.extend(triangle)

        if not vertex_keys:
            logger.info("Parsed mesh with no faces")
            return MeshBuffer.empty()

        out_positions = np.array([positions[p] for p, _, _ in vertex_keys], dtype=np.float64)

        if normals:
            out_normals = np.array(
                [normals[n] if n != MISSING else DEFAULT_NORMAL for _, _, n in vertex_keys],
                dtype=np.float64,
            )
        else:
            logger.debug("No vertex normals declared, computing them from faces")
            out_normals = compute_vertex_normals(out_positions, np.array(indices).reshape(-1, 3))

        mesh = MeshBuffer(positions=out_positions, normals=out_normals, indices=indices)
        logger.info(
            f"Parsed mesh: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles "
            f"from {len(positions)} positions"
        )
        return mesh

    @staticmethod
    def _vertex_key(
        token: str,
        line_number: int,
        position_count: int,
        texcoord_count: int,
        normal_count: int,
    ) -> VertexKey:
        fields = token.split("/")
        if len(fields) > 3 or not fields[0]:
            raise MalformedRecordError(
                f"invalid face vertex {token!r}", line_number=line_number, record=token
            )

        position = _reference(fields[0], position_count, "position", line_number, token)
        texcoord = MISSING
        normal = MISSING
        if len(fields) > 1 and fields[1]:
            texcoord = _reference(fields[1], texcoord_count, "texcoord", line_number, token)
        if len(fields) > 2 and fields[2]:
            normal = _reference(fields[2], normal_count, "normal", line_number, token)
        return position, texcoord, normal


def _components(parts: List[str], minimum: int, line_number: int, raw: str) -> Tuple[float, ...]:
    values = parts[1:4]
    if len(values) < minimum:
        raise MalformedRecordError(
            f"{parts[0]!r} record needs {minimum} components, got {len(values)}",
            line_number=line_number,
            record=raw,
        )
    try:
        return tuple(float(v) for v in values)
    except ValueError:
        raise MalformedRecordError(
            f"non-numeric component in {parts[0]!r} record",
            line_number=line_number,
            record=raw,
        ) from None


def _reference(text: str, count: int, kind: str, line_number: int, token: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise MalformedRecordError(
            f"non-numeric {kind} index in {token!r}", line_number=line_number, record=token
        ) from None
    if value < 1 or value > count:
        raise UnsupportedReferenceError(
            f"{kind} index {value} out of range 1..{count} in {token!r}",
            line_number=line_number,
            token=token,
        )
    return value - 1


def parse_obj(text: str) -> MeshBuffer:
    """Convenience wrapper around :class:`PolygonMeshParser`."""
    return PolygonMeshParser().parse(text)
