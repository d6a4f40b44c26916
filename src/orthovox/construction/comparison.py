"""Position-agnostic checking of drawn silhouettes against a solution.

A drawing is judged on its shape alone: both grids are normalised
before comparison, so a correct silhouette drawn anywhere on the canvas
is accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from orthovox.construction.normalise import normalise
from orthovox.model.silhouette import OrthographicSilhouette, ProjectionSet, ViewType
from orthovox.model.voxel_grid import VoxelGrid


@dataclass(frozen=True)
class SilhouetteComparison:
    """Outcome of comparing one drawn silhouette with the solution.

    Attributes:
        outline_matches: Whether the normalised extents agree.
        missing: Cells in the solution absent from the drawing.  Only
            counted when the outlines match.
        extra: Cells in the drawing absent from the solution.  Only
            counted when the outlines match.
    """

    outline_matches: bool
    missing: int = 0
    extra: int = 0

    @property
    def matches(self) -> bool:
        return self.outline_matches and self.missing == 0 and self.extra == 0

    def describe(self, view: ViewType | str | None = None) -> str:
        """Short plain-language summary, empty when the drawing matches."""
        subject = f"your {ViewType(view).value} view" if view is not None else "your drawing"
        if not self.outline_matches:
            return f"The overall outline (width or height) of {subject} doesn't match."
        parts = []
        if self.missing:
            parts.append(f"{subject} is missing {self.missing} block(s)")
        if self.extra:
            parts.append(f"{subject} has {self.extra} extra block(s)")
        if not parts:
            return ""
        text = " and ".join(parts)
        return text[0].upper() + text[1:] + "."


def compare_silhouettes(
    drawn: object, solution: object, *, size: int | None = None,
) -> SilhouetteComparison:
    """Compare a drawn grid with a solution grid, ignoring placement.

    Args:
        drawn: The learner's grid: an :class:`OrthographicSilhouette`,
            an array, or (possibly ragged) nested 0/1 rows.
        solution: The reference grid, in any of the same forms.
        size: Canvas size used to read nested input.  Defaults to the
            solution's size when it is a silhouette.

    Returns:
        A :class:`SilhouetteComparison`.
    """
    if size is None and isinstance(solution, OrthographicSilhouette):
        size = solution.size
    shape = (size, size) if size is not None else None
    drawn_tight, drawn_ext = normalise(drawn, shape=shape)
    solution_tight, solution_ext = normalise(solution, shape=shape)

    if drawn_ext != solution_ext:
        return SilhouetteComparison(outline_matches=False)
    missing = int(np.count_nonzero(solution_tight & ~drawn_tight))
    extra = int(np.count_nonzero(drawn_tight & ~solution_tight))
    return SilhouetteComparison(True, missing, extra)


def check_projections(
    drawings: Mapping[ViewType | str, object], solution: ProjectionSet,
) -> dict[ViewType, SilhouetteComparison]:
    """Compare every view; views absent from *drawings* count as blank."""
    by_view = {ViewType(k): v for k, v in drawings.items()}
    results: dict[ViewType, SilhouetteComparison] = {}
    for view, sil in solution.items():
        drawn = by_view.get(view, [])
        results[view] = compare_silhouettes(drawn, sil)
    return results


def incorrect_views(
    drawings: Mapping[ViewType | str, object], solution: ProjectionSet,
) -> list[ViewType]:
    """Views whose drawing does not match the solution, in view order."""
    return [
        view for view, result in check_projections(drawings, solution).items()
        if not result.matches
    ]


def _as_silhouette(drawn: object, size: int) -> OrthographicSilhouette:
    if isinstance(drawn, OrthographicSilhouette):
        return drawn
    return OrthographicSilhouette.from_nested(drawn, size)


def tutor_payload(
    solid: VoxelGrid,
    solution: ProjectionSet,
    drawings: Mapping[ViewType | str, object] | None = None,
) -> dict:
    """Bundle the current exercise as plain data for a hint service.

    The result holds only nested lists, ints and strings, so it can be
    JSON-encoded directly.

    Returns:
        A dict with ``grid_size``, ``solid`` (nested ``[x][y][z]`` 0/1),
        ``solution`` (see :meth:`ProjectionSet.to_dict`) and, when
        *drawings* is given, ``drawings`` and ``incorrect_views``.
    """
    payload: dict = {
        "grid_size": solid.size,
        "solid": solid.to_nested(),
        "solution": solution.to_dict(),
    }
    if drawings is not None:
        by_view = {ViewType(k): v for k, v in drawings.items()}
        payload["drawings"] = {
            view.value: _as_silhouette(by_view.get(view, []), solid.size).to_nested()
            for view in ViewType
        }
        payload["incorrect_views"] = [
            v.value for v in incorrect_views(drawings, solution)
        ]
    return payload
