"""Whole-solid transforms."""

from __future__ import annotations

import numpy as np

from orthovox.construction.normalise import normalise_grid
from orthovox.model.voxel_grid import VoxelGrid


def rotate_quarter_turn(solid: VoxelGrid, turns: int = 1) -> VoxelGrid:
    """Rotate *solid* by quarter turns about the vertical axis.

    One turn sends ``(x, y, z)`` to ``(z, y, G - 1 - x)``.  The result is
    normalised and frozen; *solid* is left untouched.
    """
    size = solid.size
    cells = solid.cells
    for _ in range(turns % 4):
        rotated = np.zeros_like(cells)
        xs, ys, zs = np.nonzero(cells)
        rotated[zs, ys, size - 1 - xs] = True
        cells = rotated
    normalised, _ = normalise_grid(VoxelGrid(size, cells))
    return normalised
