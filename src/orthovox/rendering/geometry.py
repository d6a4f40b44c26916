"""Rotation, isometric projection and the constant unit-cube tables."""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

import numpy as np

# Isometric axes sit 30 degrees below the horizontal.
_PROJ_ANGLE = np.pi / 6
ISO_X_COEFF: float = float(np.cos(_PROJ_ANGLE))
ISO_Y_COEFF: float = float(np.sin(_PROJ_ANGLE))


# ---------------------------------------------------------------------------
# Rotation helpers
# ---------------------------------------------------------------------------

def _rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0,   c,  -s],
        [0.0,   s,   c],
    ])


def _rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [ c,  0.0,  s],
        [0.0, 1.0, 0.0],
        [-s,  0.0,  c],
    ])


def rotation_matrix(rotation_x: float, rotation_y: float) -> np.ndarray:
    """Yaw about the vertical axis, then pitch about the horizontal axis."""
    return _rotation_x(rotation_x) @ _rotation_y(rotation_y)


def rotate(
    points: np.ndarray, rotation_x: float, rotation_y: float,
) -> np.ndarray:
    """Rotate ``(n, 3)`` points (or a single 3-vector) about the origin.

    Direction vectors such as face normals are rotated the same way.
    """
    pts = np.asarray(points, dtype=float)
    return pts @ rotation_matrix(rotation_x, rotation_y).T


def isometric_project(points: np.ndarray, block_size: float) -> np.ndarray:
    """Map rotated 3D points to raw 2D isometric screen coordinates.

    Screen y grows downwards, so a larger height moves a point up the
    screen.  No perspective is applied: parallel edges stay parallel.

    Args:
        points: Array of shape ``(n, 3)`` or ``(3,)``.
        block_size: Screen length of one unit.

    Returns:
        Array of shape ``(n, 2)`` (or ``(2,)`` for a single point).
    """
    pts = np.asarray(points, dtype=float)
    x, y, z = pts[..., 0], pts[..., 1], pts[..., 2]
    raw_x = (x - z) * block_size * ISO_X_COEFF
    raw_y = (x + z) * block_size * ISO_Y_COEFF - y * block_size
    return np.stack([raw_x, raw_y], axis=-1)


# ---------------------------------------------------------------------------
# Unit cube tables
# ---------------------------------------------------------------------------

UNIT_CUBE_CORNERS = np.array([
    [0, 0, 0],  # 0
    [1, 0, 0],  # 1
    [0, 1, 0],  # 2
    [0, 0, 1],  # 3
    [1, 1, 0],  # 4
    [1, 0, 1],  # 5
    [0, 1, 1],  # 6
    [1, 1, 1],  # 7
], dtype=float)
UNIT_CUBE_CORNERS.flags.writeable = False


class FaceName(StrEnum):
    """The six faces of a unit cube, named by their local orientation."""

    TOP = "top"
    BOTTOM = "bottom"
    FRONT = "front"
    BACK = "back"
    RIGHT = "right"
    LEFT = "left"


class FaceDefinition(NamedTuple):
    """One face of the unit cube.

    Attributes:
        name: Which face this is.
        corners: Indices into :data:`UNIT_CUBE_CORNERS`, in drawing order.
        normal: Outward unit normal in the cube's unrotated frame.
    """

    name: FaceName
    corners: tuple[int, int, int, int]
    normal: tuple[int, int, int]


FACES: tuple[FaceDefinition, ...] = (
    FaceDefinition(FaceName.TOP, (2, 4, 7, 6), (0, 1, 0)),
    FaceDefinition(FaceName.BOTTOM, (0, 3, 5, 1), (0, -1, 0)),
    FaceDefinition(FaceName.FRONT, (3, 6, 7, 5), (0, 0, 1)),
    FaceDefinition(FaceName.BACK, (0, 1, 4, 2), (0, 0, -1)),
    FaceDefinition(FaceName.RIGHT, (1, 5, 7, 4), (1, 0, 0)),
    FaceDefinition(FaceName.LEFT, (0, 2, 6, 3), (-1, 0, 0)),
)
"""Face table in emission order."""

FACE_NORMALS = np.array([f.normal for f in FACES], dtype=float)
FACE_NORMALS.flags.writeable = False
