"""Bounds normalisation for solids and silhouettes.

Normalisation shifts every occupied cell so that the smallest occupied
coordinate on each axis is zero, and crops the container to the tight
bounding extent.  Comparing normalised grids is how silhouettes are
checked independently of where they were drawn on the canvas.
"""

from __future__ import annotations

import numpy as np

from orthovox._constants import GRID_SIZE
from orthovox.model._util import _as_occupancy, _nesting_depth
from orthovox.model.silhouette import OrthographicSilhouette
from orthovox.model.voxel_grid import Dimensions, VoxelGrid


def _occupancy_array(
    occupancy: object, shape: tuple[int, ...] | None,
) -> np.ndarray:
    if isinstance(occupancy, VoxelGrid):
        return occupancy.cells
    if isinstance(occupancy, OrthographicSilhouette):
        return occupancy.cells
    if isinstance(occupancy, np.ndarray) and shape is None:
        return occupancy.astype(bool)
    if shape is None:
        ndim = _nesting_depth(occupancy)
        if ndim == 0:
            raise ValueError(f"cannot read occupancy from {occupancy!r}")
        shape = (GRID_SIZE,) * (ndim or 2)
    return _as_occupancy(occupancy, shape)


def normalise(
    occupancy: object,
    *,
    shape: tuple[int, ...] | None = None,
) -> tuple[np.ndarray, tuple[int, ...]]:
    """Shift occupied cells to the origin and crop to their tight extent.

    Works on occupancy of any dimensionality: a :class:`VoxelGrid`, an
    :class:`OrthographicSilhouette`, a boolean or 0/1 numpy array, or
    nested sequences.  Nested sequences may be ragged; missing rows and
    cells read as empty.

    Args:
        occupancy: The grid to normalise.
        shape: Shape to read nested-sequence input as (or to crop/pad
            an array to).  Defaults to the array's own shape for arrays;
            nested input is read as a ``GRID_SIZE`` cube of the
            dimensionality its nesting shows (a square when nothing is
            occupied).

    Returns:
        Tuple of ``(tight, extents)`` where *tight* is a boolean array
        of shape *extents* holding the shifted cells, and *extents* is
        ``max - min + 1`` per axis.  If nothing is occupied, *tight* has
        zero size and every extent is 0.

    Raises:
        ValueError: If *occupancy* is a scalar rather than a grid.
    """
    arr = _occupancy_array(occupancy, shape)
    coords = np.argwhere(arr)
    if len(coords) == 0:
        zero = (0,) * arr.ndim
        return np.zeros(zero, dtype=bool), zero

    lo = coords.min(axis=0)
    hi = coords.max(axis=0)
    extents = tuple(int(e) for e in hi - lo + 1)
    tight = np.zeros(extents, dtype=bool)
    tight[tuple((coords - lo).T)] = True
    return tight, extents


def normalise_grid(grid: VoxelGrid) -> tuple[VoxelGrid, Dimensions]:
    """Normalise a solid while keeping its fixed grid size.

    The tight solid is re-embedded at the origin of a fresh grid of the
    same size.  The result is frozen.

    Returns:
        Tuple of ``(normalised, dimensions)``.
    """
    tight, extents = normalise(grid)
    cells = np.zeros((grid.size,) * 3, dtype=bool)
    if tight.size:
        w, h, d = extents
        cells[:w, :h, :d] = tight
    return VoxelGrid(grid.size, cells).freeze(), Dimensions(*extents)


def shapes_match(a: object, b: object, *, shape: tuple[int, ...] | None = None) -> bool:
    """Whether two grids hold the same pattern once normalised."""
    tight_a, ext_a = normalise(a, shape=shape)
    tight_b, ext_b = normalise(b, shape=shape)
    return ext_a == ext_b and bool(np.array_equal(tight_a, tight_b))
