from __future__ import annotations

import hashlib
from collections import deque
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

from orthovox._constants import GRID_SIZE, MAX_GRID_SIZE
from orthovox.model._util import _as_occupancy

#: Offsets to the six face-adjacent neighbours of a cell, in the order
#: used when growing a solid.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int, int], ...] = (
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
)


class BlockCoordinate(NamedTuple):
    """Integer grid position of one voxel.

    ``y`` is the vertical axis; ``x`` and ``z`` are horizontal.
    """

    x: int
    y: int
    z: int

    @property
    def key(self) -> str:
        """Canonical ``"x,y,z"`` form used for set and map membership."""
        return f"{self.x},{self.y},{self.z}"

    @classmethod
    def from_key(cls, key: str) -> BlockCoordinate:
        """Parse the ``"x,y,z"`` form produced by :attr:`key`.

        Raises:
            ValueError: If *key* does not hold exactly three integers.
        """
        parts = key.split(",")
        if len(parts) != 3:
            raise ValueError(f"block key must have 3 components, got {key!r}")
        x, y, z = (int(p) for p in parts)
        return cls(x, y, z)

    def neighbours(self) -> list[BlockCoordinate]:
        """The six face-adjacent coordinates (not bounds-checked)."""
        return [
            BlockCoordinate(self.x + dx, self.y + dy, self.z + dz)
            for dx, dy, dz in NEIGHBOUR_OFFSETS
        ]


class Dimensions(NamedTuple):
    """Tight bounding-box extents of a solid along x, y and z."""

    width: int
    height: int
    depth: int

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0 or self.depth == 0


def _check_grid_size(size: int) -> None:
    if not 1 <= size <= MAX_GRID_SIZE:
        raise ValueError(
            f"grid size must be between 1 and {MAX_GRID_SIZE}, got {size}"
        )


class VoxelGrid:
    """Fixed-size three-axis occupancy grid.

    Cells are indexed ``(x, y, z)`` with every index in ``[0, size)``.
    Reads outside the grid return ``False``; writes outside the grid
    raise :class:`IndexError`.  Once :meth:`freeze` has been called the
    grid is read-only, which is how generated solids are handed out.

    Attributes:
        size: Edge length of the grid along every axis.

    Raises:
        ValueError: If *size* is outside ``1..8`` or *cells* does not
            have shape ``(size, size, size)``.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int = GRID_SIZE, cells: np.ndarray | None = None) -> None:
        _check_grid_size(size)
        if cells is None:
            arr = np.zeros((size, size, size), dtype=bool)
        else:
            arr = np.array(cells, dtype=bool)
            if arr.shape != (size, size, size):
                raise ValueError(
                    f"cells must have shape {(size, size, size)}, got {arr.shape}"
                )
        self._size = size
        self._cells = arr

    # ---- Construction ----

    @classmethod
    def from_blocks(
        cls, blocks: Iterable[tuple[int, int, int]], size: int = GRID_SIZE,
    ) -> VoxelGrid:
        """Build a grid with exactly the given cells occupied."""
        grid = cls(size)
        for x, y, z in blocks:
            grid.set(x, y, z)
        return grid

    @classmethod
    def from_nested(cls, nested: object, size: int = GRID_SIZE) -> VoxelGrid:
        """Build a grid from nested ``[x][y][z]`` 0/1 data.

        Ragged or short input is padded with empty cells.
        """
        _check_grid_size(size)
        return cls(size, _as_occupancy(nested, (size, size, size)))

    # ---- Access ----

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying boolean array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def frozen(self) -> bool:
        return not self._cells.flags.writeable

    @property
    def count(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, x: int, y: int, z: int) -> bool:
        n = self._size
        return 0 <= x < n and 0 <= y < n and 0 <= z < n

    def get(self, x: int, y: int, z: int) -> bool:
        """Return whether ``(x, y, z)`` is occupied; ``False`` if out of range."""
        if not self.in_bounds(x, y, z):
            return False
        return bool(self._cells[x, y, z])

    def set(self, x: int, y: int, z: int, value: bool = True) -> None:
        """Occupy (or clear) a cell.

        Raises:
            ValueError: If the grid is frozen.
            IndexError: If ``(x, y, z)`` lies outside the grid.
        """
        if self.frozen:
            raise ValueError("cannot modify a frozen VoxelGrid")
        if not self.in_bounds(x, y, z):
            raise IndexError(
                f"block ({x}, {y}, {z}) outside grid of size {self._size}"
            )
        self._cells[x, y, z] = bool(value)

    def __contains__(self, block: object) -> bool:
        if not isinstance(block, tuple) or len(block) != 3:
            return False
        return self.get(*block)

    def freeze(self) -> VoxelGrid:
        """Make the grid read-only and return it."""
        self._cells.flags.writeable = False
        return self

    def copy(self) -> VoxelGrid:
        """Return a writable copy."""
        return VoxelGrid(self._size, self._cells)

    # ---- Queries ----

    def blocks(self) -> list[BlockCoordinate]:
        """Occupied coordinates in x-major, then y, then z order."""
        return [BlockCoordinate(int(x), int(y), int(z))
                for x, y, z in np.argwhere(self._cells)]

    def bounds(self) -> tuple[BlockCoordinate, BlockCoordinate] | None:
        """Per-axis minimum and maximum occupied coordinates, or ``None``."""
        coords = np.argwhere(self._cells)
        if len(coords) == 0:
            return None
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return (
            BlockCoordinate(int(lo[0]), int(lo[1]), int(lo[2])),
            BlockCoordinate(int(hi[0]), int(hi[1]), int(hi[2])),
        )

    def dimensions(self) -> Dimensions:
        """Tight bounding-box extents; all zero for an empty grid."""
        b = self.bounds()
        if b is None:
            return Dimensions(0, 0, 0)
        lo, hi = b
        return Dimensions(hi.x - lo.x + 1, hi.y - lo.y + 1, hi.z - lo.z + 1)

    def is_connected(self) -> bool:
        """Whether all occupied cells form one 6-connected component.

        An empty grid counts as connected.
        """
        blocks = self.blocks()
        if not blocks:
            return True
        seen = {blocks[0]}
        queue = deque([blocks[0]])
        while queue:
            current = queue.popleft()
            for nb in current.neighbours():
                if nb not in seen and self.get(*nb):
                    seen.add(nb)
                    queue.append(nb)
        return len(seen) == len(blocks)

    def fingerprint(self) -> str:
        """Stable identity string for the occupancy pattern."""
        digest = hashlib.sha1(np.packbits(self._cells).tobytes())
        return f"{self._size}:{digest.hexdigest()}"

    # ---- Serialisation ----

    def to_nested(self) -> list[list[list[int]]]:
        """Nested ``[x][y][z]`` lists of 0/1 for plain-data consumers."""
        return self._cells.astype(int).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VoxelGrid):
            return NotImplemented
        return (
            self._size == other._size
            and bool(np.array_equal(self._cells, other._cells))
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = ", frozen" if self.frozen else ""
        return f"VoxelGrid(size={self._size}, count={self.count}{state})"
