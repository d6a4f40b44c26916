"""Tests for OrthographicSilhouette and ProjectionSet."""

import numpy as np
import pytest

from orthovox.model.silhouette import (
    OrthographicSilhouette,
    ProjectionSet,
    ViewOffset,
    ViewType,
)


class TestOrthographicSilhouette:
    def test_empty(self):
        sil = OrthographicSilhouette.empty(4)
        assert sil.size == 4
        assert sil.count == 0
        assert sil.offset == ViewOffset(0, 0)

    def test_non_square_raises(self):
        with pytest.raises(ValueError, match="square"):
            OrthographicSilhouette(np.zeros((3, 4), dtype=bool))

    def test_cells_are_copied_and_read_only(self):
        src = np.zeros((3, 3), dtype=bool)
        sil = OrthographicSilhouette(src)
        src[0, 0] = True
        assert not sil.is_filled(0, 0)
        with pytest.raises(ValueError):
            sil.cells[1, 1] = True

    def test_from_nested_ragged(self):
        sil = OrthographicSilhouette.from_nested([[0, 1], [], [1]], size=3)
        assert sil.filled_cells() == [(0, 1), (2, 0)]

    def test_offset_tuple_coerced(self):
        sil = OrthographicSilhouette.from_nested([[1]], 2, (1, 0))
        assert sil.offset == ViewOffset(col=1, row=0)

    def test_is_filled_out_of_range(self):
        sil = OrthographicSilhouette.from_nested([[1]], 2)
        assert sil.is_filled(0, 0)
        assert not sil.is_filled(-1, 0)
        assert not sil.is_filled(0, 2)

    def test_equality_includes_offset(self):
        a = OrthographicSilhouette.from_nested([[1]], 2, (0, 0))
        b = OrthographicSilhouette.from_nested([[1]], 2, (1, 0))
        assert a == OrthographicSilhouette.from_nested([[1]], 2)
        assert a != b

    def test_to_nested(self):
        sil = OrthographicSilhouette.from_nested([[0, 1]], 2)
        assert sil.to_nested() == [[0, 1], [0, 0]]


class TestProjectionSet:
    def _make(self):
        return ProjectionSet(
            front=OrthographicSilhouette.from_nested([[1]], 2, (1, 0)),
            top=OrthographicSilhouette.from_nested([[0, 1]], 2, (0, 1)),
            side=OrthographicSilhouette.empty(2),
        )

    def test_getitem_by_view_and_name(self):
        ps = self._make()
        assert ps[ViewType.TOP] is ps.top
        assert ps["side"] is ps.side

    def test_items_order(self):
        assert [v for v, _ in self._make().items()] == [
            ViewType.FRONT, ViewType.TOP, ViewType.SIDE,
        ]

    def test_offset_for(self):
        assert self._make().offset_for(ViewType.FRONT) == ViewOffset(1, 0)

    def test_to_dict_layout(self):
        d = self._make().to_dict()
        assert d["front"] == [[1, 0], [0, 0]]
        assert d["frontOffsets"] == {"x": 1, "y": 0}
        assert d["topOffsets"] == {"x": 0, "y": 1}

    def test_dict_round_trip(self):
        ps = self._make()
        assert ProjectionSet.from_dict(ps.to_dict(), size=2) == ps

    def test_from_dict_missing_offsets(self):
        d = {"front": [[1]], "top": [[1]], "side": [[1]]}
        ps = ProjectionSet.from_dict(d, size=2)
        assert ps.side.offset == ViewOffset(0, 0)
