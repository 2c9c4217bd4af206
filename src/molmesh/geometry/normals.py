"""Per-vertex normal synthesis."""

import numpy as np


def compute_vertex_normals(vertices: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """
    Accumulate face normals at the vertices they touch and normalise.

    Face normals are ``cross(v1 - v0, v2 - v0)`` (unnormalised, so larger
    triangles weigh more); counter-clockwise winding points them outward.
    Vertices with no incident triangle, or whose accumulated normal
    cancels out, keep a zero vector.

    Args:
        vertices: (V, 3) positions
        triangles: (T, 3) vertex indices

    Returns:
        (V, 3) float64 array of unit or zero normals
    """
    vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    triangles = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    normals = np.zeros_like(vertices)
    if triangles.size == 0:
        return normals

    v0 = vertices[triangles[:, 0]]
    v1 = vertices[triangles[:, 1]]
    v2 = vertices[triangles[:, 2]]
    face_normals = np.cross(v1 - v0, v2 - v0)

    for corner in range(3):
        np.add.at(normals, triangles[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1)
    nonzero = lengths > 0.0
    normals[nonzero] /= lengths[nonzero, None]
    return normals
