"""Shared helpers for model dataclasses and occupancy data."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

import numpy as np

_field_defaults_cache: dict[tuple[type, frozenset[str]], dict] = {}


def _field_defaults(cls: type, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with simple defaults (not ``MISSING`` and not
    ``default_factory``) are included.  Fields listed in *exclude*
    are skipped.  This is used by ``to_dict()`` methods to compare
    current values against defaults so only non-default fields are
    serialised.  Results are cached per ``(cls, exclude)`` pair.
    """
    key = (cls, exclude)
    if key not in _field_defaults_cache:
        _field_defaults_cache[key] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
            and f.name not in exclude
        }
    return _field_defaults_cache[key]


def _as_occupancy(data: object, shape: tuple[int, ...]) -> np.ndarray:
    """Coerce occupancy data to a boolean array of exactly *shape*.

    *data* may be a numpy array or nested sequences of 0/1 (or bool)
    values, possibly ragged.  Missing rows and cells read as empty and
    anything beyond *shape* is ignored, so partially populated grids
    from a drawing front end are accepted as-is.

    Raises:
        ValueError: If *data* is an array whose dimensionality differs
            from ``len(shape)``.
    """
    out = np.zeros(shape, dtype=bool)
    if isinstance(data, np.ndarray):
        src = data.astype(bool)
        if src.ndim != len(shape):
            raise ValueError(
                f"expected a {len(shape)}-dimensional array, "
                f"got {src.ndim} dimensions"
            )
        region = tuple(slice(0, min(a, b)) for a, b in zip(src.shape, shape))
        out[region] = src[region]
        return out
    _fill_occupancy(out, data, ())
    return out


def _fill_occupancy(out: np.ndarray, data: object, index: tuple[int, ...]) -> None:
    depth = len(index)
    if depth == out.ndim:
        out[index] = data is not None and bool(data)
        return
    if isinstance(data, np.ndarray):
        data = data.tolist()
    if not isinstance(data, Sequence) or isinstance(data, str):
        # Missing or malformed row: leave empty.
        return
    for i, item in enumerate(data):
        if i >= out.shape[depth]:
            break
        _fill_occupancy(out, item, index + (i,))


def _nesting_depth(data: object) -> int | None:
    """Number of sequence levels above the first scalar in *data*.

    Empty branches are skipped.  Returns ``None`` if no scalar is
    reached, i.e. *data* holds only (possibly nested) empty sequences.
    """
    if isinstance(data, np.ndarray):
        return data.ndim
    if not isinstance(data, Sequence) or isinstance(data, str):
        return 0
    for item in data:
        depth = _nesting_depth(item)
        if depth is not None:
            return depth + 1
    return None
