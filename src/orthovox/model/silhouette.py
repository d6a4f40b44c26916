from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple

import numpy as np

from orthovox._constants import GRID_SIZE
from orthovox.model._util import _as_occupancy


class ViewType(StrEnum):
    """The three principal orthographic views.

    Attributes:
        FRONT: Looking along +z; rows carry height, columns carry x.
        TOP: Looking along +y; rows carry x, columns carry z.
        SIDE: Looking along +x; rows carry height, columns carry z.
    """

    FRONT = "front"
    TOP = "top"
    SIDE = "side"


class ViewOffset(NamedTuple):
    """Where the tight projection was placed inside the canvas.

    Attributes:
        col: Column offset from the left edge.
        row: Row offset from the top edge.
    """

    col: int = 0
    row: int = 0


@dataclass(frozen=True, eq=False)
class OrthographicSilhouette:
    """One projected view: a square boolean canvas plus its centring offset.

    The canvas is copied and made read-only on construction.

    Attributes:
        cells: Boolean array of shape ``(size, size)`` indexed
            ``[row, col]``.
        offset: Centring offset applied when the view was produced.

    Raises:
        ValueError: If *cells* is not a square 2D array.
    """

    cells: np.ndarray
    offset: ViewOffset = field(default_factory=ViewOffset)

    def __post_init__(self) -> None:
        arr = np.array(self.cells, dtype=bool)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(
                f"silhouette cells must be a square 2D array, got shape {arr.shape}"
            )
        arr.flags.writeable = False
        object.__setattr__(self, "cells", arr)
        object.__setattr__(self, "offset", ViewOffset(*self.offset))

    @classmethod
    def empty(cls, size: int = GRID_SIZE) -> OrthographicSilhouette:
        return cls(np.zeros((size, size), dtype=bool))

    @classmethod
    def from_nested(
        cls,
        nested: object,
        size: int = GRID_SIZE,
        offset: ViewOffset | tuple[int, int] = ViewOffset(),
    ) -> OrthographicSilhouette:
        """Build from nested ``[row][col]`` data; missing cells are empty."""
        return cls(_as_occupancy(nested, (size, size)), ViewOffset(*offset))

    @property
    def size(self) -> int:
        return self.cells.shape[0]

    @property
    def count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def is_filled(self, row: int, col: int) -> bool:
        """Whether ``(row, col)`` is filled; ``False`` outside the canvas."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            return False
        return bool(self.cells[row, col])

    def filled_cells(self) -> list[tuple[int, int]]:
        """Filled ``(row, col)`` pairs in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.cells)]

    def to_nested(self) -> list[list[int]]:
        return self.cells.astype(int).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrthographicSilhouette):
            return NotImplemented
        return (
            self.offset == other.offset
            and bool(np.array_equal(self.cells, other.cells))
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class ProjectionSet:
    """The front, top and side silhouettes of one solid.

    Attributes:
        front: Front view (looking along +z).
        top: Top view (looking along +y).
        side: Side view (looking along +x).
    """

    front: OrthographicSilhouette
    top: OrthographicSilhouette
    side: OrthographicSilhouette

    def __getitem__(self, view: ViewType | str) -> OrthographicSilhouette:
        return getattr(self, ViewType(view).value)

    def offset_for(self, view: ViewType | str) -> ViewOffset:
        return self[view].offset

    def items(self) -> list[tuple[ViewType, OrthographicSilhouette]]:
        return [(v, self[v]) for v in ViewType]

    def to_dict(self) -> dict:
        """Serialise to plain nested lists and offset pairs.

        Keys follow the ``front`` / ``frontOffsets`` layout so the result
        can be handed directly to a tutoring or drawing front end.
        """
        d: dict = {}
        for view, sil in self.items():
            d[view.value] = sil.to_nested()
            d[f"{view.value}Offsets"] = {"x": sil.offset.col, "y": sil.offset.row}
        return d

    @classmethod
    def from_dict(cls, d: dict, size: int = GRID_SIZE) -> ProjectionSet:
        """Deserialise from the layout produced by :meth:`to_dict`.

        Missing offsets default to zero.
        """
        views = {}
        for view in ViewType:
            off = d.get(f"{view.value}Offsets") or {}
            views[view.value] = OrthographicSilhouette.from_nested(
                d[view.value], size,
                ViewOffset(col=off.get("x", 0), row=off.get("y", 0)),
            )
        return cls(**views)
