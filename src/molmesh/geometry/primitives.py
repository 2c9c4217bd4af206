"""
Parametric primitive meshes.

All builders are pure: they return a fresh colourless MeshBuffer and never
touch shared state. Segment counts below the minimum a shape needs are
clamped up to that minimum instead of raising.
"""

import logging
import math

import numpy as np

from ..domain.models.mesh_buffer import MeshBuffer

logger = logging.getLogger(__name__)

MIN_LATITUDE_BANDS = 2
MIN_LONGITUDE_BANDS = 3
MIN_RADIAL_SEGMENTS = 3
MIN_PLANE_SEGMENTS = 1


def _clamp_segments(value: int, minimum: int, name: str) -> int:
    value = int(value)
    if value < minimum:
        logger.debug(f"{name}={value} below minimum, clamped to {minimum}")
        return minimum
    return value


# Four corners per face, counter-clockwise seen from outside.
_CUBE_FACES = (
    # normal, corners
    ((0.0, 0.0, 1.0), ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1))),  # front
    ((0.0, 0.0, -1.0), ((-1, -1, -1), (-1, 1, -1), (1, 1, -1), (1, -1, -1))),  # back
    ((0.0, 1.0, 0.0), ((-1, 1, -1), (-1, 1, 1), (1, 1, 1), (1, 1, -1))),  # top
    ((0.0, -1.0, 0.0), ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1))),  # bottom
    ((1.0, 0.0, 0.0), ((1, -1, -1), (1, 1, -1), (1, 1, 1), (1, -1, 1))),  # right
    ((-1.0, 0.0, 0.0), ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1))),  # left
)


def create_cube(size: float = 1.0) -> MeshBuffer:
    """
    Axis-aligned cube centred on the origin.

    Args:
        size: Half-extent; corners sit at +/- size on every axis

    Returns:
        24 vertices (4 per face, unshared so normals stay flat) and 36 indices
    """
    positions = []
    normals = []
    indices = []
    for face, (normal, corners) in enumerate(_CUBE_FACES):
        for corner in corners:
            positions.append([c * size for c in corner])
            normals.append(normal)
        base = face * 4
        indices.extend([base, base + 1, base + 2, base, base + 2, base + 3])
    return MeshBuffer(positions=positions, normals=normals, indices=indices)


def create_sphere(
    radius: float = 1.0, latitude_bands: int = 30, longitude_bands: int = 30
) -> MeshBuffer:
    """
    UV sphere built from a (lat + 1) x (lon + 1) vertex grid.

    theta runs over [0, pi] from the +Y pole, phi over [0, 2 pi]. The seam
    column is duplicated. Cells touching a pole contain one zero-area
    triangle because the whole pole row collapses to a single point.

    Args:
        radius: Sphere radius
        latitude_bands: Rings between the poles (min 2)
        longitude_bands: Segments around the Y axis (min 3)
    """
    lat_bands = _clamp_segments(latitude_bands, MIN_LATITUDE_BANDS, "latitude_bands")
    lon_bands = _clamp_segments(longitude_bands, MIN_LONGITUDE_BANDS, "longitude_bands")

    theta = np.arange(lat_bands + 1) * math.pi / lat_bands
    phi = np.arange(lon_bands + 1) * 2.0 * math.pi / lon_bands
    theta_grid, phi_grid = np.meshgrid(theta, phi, indexing="ij")

    unit = np.stack(
        [
            np.cos(phi_grid) * np.sin(theta_grid),
            np.cos(theta_grid),
            np.sin(phi_grid) * np.sin(theta_grid),
        ],
        axis=-1,
    ).reshape(-1, 3)

    indices = []
    for lat in range(lat_bands):
        for lon in range(lon_bands):
            first = lat * (lon_bands + 1) + lon
            second = first + lon_bands + 1
            indices.extend([first, first + 1, second])
            indices.extend([second, first + 1, second + 1])

    return MeshBuffer(positions=unit * radius, normals=unit, indices=indices)


def create_cylinder(
    radius_top: float = 1.0,
    radius_bottom: float = 1.0,
    height: float = 2.0,
    radial_segments: int = 32,
) -> MeshBuffer:
    """
    Open cylinder (no caps) along the Y axis, centred on the origin.

    Two rings of ``radial_segments + 1`` vertices sit at y = -height/2
    (bottom) and y = +height/2 (top). Normals point radially outward.
    """
    segments = _clamp_segments(radial_segments, MIN_RADIAL_SEGMENTS, "radial_segments")
    half_height = height / 2.0

    positions = []
    normals = []
    for ring in range(2):
        radius = ring * (radius_top - radius_bottom) + radius_bottom
        y = ring * height - half_height
        for x in range(segments + 1):
            angle = x / segments * 2.0 * math.pi
            cos_a = math.cos(angle)
            sin_a = math.sin(angle)
            positions.append([radius * cos_a, y, radius * sin_a])
            normals.append([cos_a, 0.0, sin_a])

    indices = []
    for x in range(segments):
        a = x
        b = a + segments + 1
        indices.extend([a, b, a + 1])
        indices.extend([b, b + 1, a + 1])

    return MeshBuffer(positions=positions, normals=normals, indices=indices)


def create_plane(
    width: float = 2.0,
    height: float = 2.0,
    width_segments: int = 1,
    height_segments: int = 1,
) -> MeshBuffer:
    """Subdivided rectangle in the XY plane facing +Z."""
    w_segments = _clamp_segments(width_segments, MIN_PLANE_SEGMENTS, "width_segments")
    h_segments = _clamp_segments(height_segments, MIN_PLANE_SEGMENTS, "height_segments")

    xs = np.arange(w_segments + 1) * width / w_segments - width / 2.0
    ys = np.arange(h_segments + 1) * height / h_segments - height / 2.0
    y_grid, x_grid = np.meshgrid(ys, xs, indexing="ij")
    positions = np.stack([x_grid, y_grid, np.zeros_like(x_grid)], axis=-1).reshape(-1, 3)
    normals = np.tile([0.0, 0.0, 1.0], (positions.shape[0], 1))

    indices = []
    for iy in range(h_segments):
        for ix in range(w_segments):
            a = iy * (w_segments + 1) + ix
            b = a + 1
            c = a + w_segments + 1
            d = c + 1
            indices.extend([a, b, c])
            indices.extend([b, d, c])

    return MeshBuffer(positions=positions, normals=normals, indices=indices)
