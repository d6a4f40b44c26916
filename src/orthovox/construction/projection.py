"""Forward and inverse orthographic projection between solids and silhouettes.

Each view maps a voxel ``(x, y, z)`` onto a ``G x G`` canvas, centred by
a per-view offset ``floor((G - extent) / 2)``:

- front: row ``G - 1 - (y + offset.row)``, col ``x + offset.col``
- top: row ``x + offset.row``, col ``z + offset.col``
- side: row ``G - 1 - (y + offset.row)``, col ``z + offset.col``

Front and side rows are flipped so that height increases up the
canvas.  The top view puts the x extent on rows and the z extent on
columns.
"""

from __future__ import annotations

import numpy as np

from orthovox.model.silhouette import (
    OrthographicSilhouette,
    ProjectionSet,
    ViewOffset,
    ViewType,
)
from orthovox.model.voxel_grid import BlockCoordinate, Dimensions, VoxelGrid


def view_offsets(
    dimensions: Dimensions | tuple[int, int, int], grid_size: int,
) -> dict[ViewType, ViewOffset]:
    """Centring offsets for each view of a solid with the given extents.

    All offsets are zero if any extent is zero.
    """
    width, height, depth = dimensions
    if width == 0 or height == 0 or depth == 0:
        return {view: ViewOffset(0, 0) for view in ViewType}
    return {
        ViewType.FRONT: ViewOffset(
            col=(grid_size - width) // 2, row=(grid_size - height) // 2,
        ),
        ViewType.TOP: ViewOffset(
            col=(grid_size - depth) // 2, row=(grid_size - width) // 2,
        ),
        ViewType.SIDE: ViewOffset(
            col=(grid_size - depth) // 2, row=(grid_size - height) // 2,
        ),
    }


def _project_coords(
    coords: np.ndarray, view: ViewType, offset: ViewOffset, grid_size: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised forward mapping of ``(n, 3)`` voxel coordinates."""
    x, y, z = coords[:, 0], coords[:, 1], coords[:, 2]
    if view is ViewType.FRONT:
        return grid_size - 1 - (y + offset.row), x + offset.col
    if view is ViewType.TOP:
        return x + offset.row, z + offset.col
    return grid_size - 1 - (y + offset.row), z + offset.col


def project_block(
    block: tuple[int, int, int],
    view: ViewType | str,
    offset: ViewOffset | tuple[int, int],
    grid_size: int,
) -> tuple[int, int]:
    """Canvas ``(row, col)`` that one voxel lands on in *view*.

    The result may fall outside the canvas for out-of-contract input.
    """
    rows, cols = _project_coords(
        np.array([block], dtype=int), ViewType(view), ViewOffset(*offset), grid_size,
    )
    return int(rows[0]), int(cols[0])


def project(
    solid: VoxelGrid, dimensions: Dimensions | tuple[int, int, int] | None = None,
) -> ProjectionSet:
    """Compute the front, top and side silhouettes of *solid*.

    A canvas cell is filled if any voxel projects onto it, so hidden
    voxels still contribute.  Cells that would land outside the canvas
    are dropped.

    Args:
        solid: The solid to project, normally a normalised solid from
            :func:`~orthovox.generate_shape`.
        dimensions: Tight extents of *solid*; computed if omitted.

    Returns:
        A :class:`ProjectionSet` whose silhouettes carry the offsets
        they were centred with.
    """
    size = solid.size
    dims = Dimensions(*(dimensions if dimensions is not None else solid.dimensions()))
    if dims.is_empty:
        empty = OrthographicSilhouette.empty(size)
        return ProjectionSet(front=empty, top=empty, side=empty)

    offsets = view_offsets(dims, size)
    coords = np.argwhere(solid.cells)
    views: dict[str, OrthographicSilhouette] = {}
    for view in ViewType:
        canvas = np.zeros((size, size), dtype=bool)
        rows, cols = _project_coords(coords, view, offsets[view], size)
        keep = (rows >= 0) & (rows < size) & (cols >= 0) & (cols < size)
        canvas[rows[keep], cols[keep]] = True
        views[view.value] = OrthographicSilhouette(canvas, offsets[view])
    return ProjectionSet(**views)


def unproject(
    solid: VoxelGrid,
    view: ViewType | str,
    row: int,
    col: int,
    offset: ViewOffset | tuple[int, int] | None = None,
) -> frozenset[BlockCoordinate]:
    """Find every voxel of *solid* that projects onto ``(row, col)``.

    This is the exact inverse of the mapping used by :func:`project`:
    one canvas cell fixes two coordinates and leaves the third (the
    viewing axis) free.

    Args:
        solid: The solid whose silhouette was produced.
        view: Which view the cell belongs to.
        row: Canvas row.
        col: Canvas column.
        offset: The view's centring offset, as stored on the
            silhouette.  If omitted it is recomputed from the solid's
            dimensions.

    Returns:
        The contributing voxels; empty if the cell is not filled.
    """
    view = ViewType(view)
    size = solid.size
    if offset is None:
        offset = view_offsets(solid.dimensions(), size)[view]
    offset = ViewOffset(*offset)

    coords = np.argwhere(solid.cells)
    if view is ViewType.FRONT:
        mask = (coords[:, 0] == col - offset.col) & (
            coords[:, 1] == size - 1 - row - offset.row
        )
    elif view is ViewType.TOP:
        mask = (coords[:, 0] == row - offset.row) & (
            coords[:, 2] == col - offset.col
        )
    else:
        mask = (coords[:, 2] == col - offset.col) & (
            coords[:, 1] == size - 1 - row - offset.row
        )
    return frozenset(
        BlockCoordinate(int(x), int(y), int(z)) for x, y, z in coords[mask]
    )
