"""Tests for bounds normalisation."""

import numpy as np
import pytest

from orthovox.construction.normalise import normalise, normalise_grid, shapes_match
from orthovox.model.silhouette import OrthographicSilhouette
from orthovox.model.voxel_grid import Dimensions, VoxelGrid


class TestNormalise:
    def test_shifts_to_origin_2d(self):
        arr = np.zeros((8, 8), dtype=bool)
        arr[3, 4] = arr[3, 5] = arr[4, 4] = True
        tight, extents = normalise(arr)
        assert extents == (2, 2)
        np.testing.assert_array_equal(tight, [[True, True], [True, False]])

    def test_empty(self):
        tight, extents = normalise(np.zeros((8, 8), dtype=bool))
        assert extents == (0, 0)
        assert tight.size == 0

    def test_empty_3d(self):
        tight, extents = normalise(VoxelGrid())
        assert extents == (0, 0, 0)
        assert tight.size == 0

    def test_ragged_nested_input(self):
        tight, extents = normalise([[0, 0], [0, 1, 1]])
        assert extents == (1, 2)
        np.testing.assert_array_equal(tight, [[True, True]])

    def test_nested_input_with_explicit_shape(self):
        _, extents = normalise([[1], [], [], [1]], shape=(3, 3))
        assert extents == (1, 1)

    def test_voxel_grid_input(self):
        grid = VoxelGrid.from_blocks([(2, 3, 4), (3, 3, 4)])
        tight, extents = normalise(grid)
        assert extents == (2, 1, 1)
        assert tight.all()

    def test_nested_3d_input(self):
        grid = VoxelGrid.from_blocks([(2, 3, 4), (3, 3, 4)])
        tight, extents = normalise(grid.to_nested())
        assert extents == (2, 1, 1)
        assert tight.ndim == 3
        assert tight.all()

    def test_ragged_nested_3d_input(self):
        _, extents = normalise([[], [[], [0, 1, 1]]])
        assert extents == (1, 1, 2)

    def test_nested_matches_grid(self, l_solid):
        from_nested, ext_nested = normalise(l_solid.to_nested())
        from_grid, ext_grid = normalise(l_solid)
        assert ext_nested == ext_grid
        np.testing.assert_array_equal(from_nested, from_grid)

    def test_scalar_input_raises(self):
        with pytest.raises(ValueError, match="cannot read occupancy"):
            normalise(1)

    def test_silhouette_input(self):
        sil = OrthographicSilhouette.from_nested([[], [0, 0, 1]], 4)
        _, extents = normalise(sil)
        assert extents == (1, 1)

    def test_idempotent(self):
        arr = np.zeros((8, 8, 8), dtype=bool)
        arr[1, 2, 3] = arr[2, 2, 3] = arr[2, 3, 3] = True
        once, ext1 = normalise(arr)
        twice, ext2 = normalise(once)
        assert ext1 == ext2
        np.testing.assert_array_equal(once, twice)


class TestNormaliseGrid:
    def test_re_embedded_at_origin(self):
        grid = VoxelGrid.from_blocks([(3, 2, 5), (4, 2, 5), (4, 3, 5)])
        normalised, dims = normalise_grid(grid)
        assert dims == Dimensions(2, 2, 1)
        assert normalised.size == 8
        assert normalised.frozen
        assert normalised.bounds()[0] == (0, 0, 0)
        assert normalised.count == 3

    def test_idempotent(self, l_solid):
        once, d1 = normalise_grid(l_solid)
        twice, d2 = normalise_grid(once)
        assert once == twice
        assert d1 == d2

    def test_dimensions_consistent(self, l_solid):
        normalised, dims = normalise_grid(l_solid)
        assert dims == normalised.dimensions()

    def test_empty(self):
        normalised, dims = normalise_grid(VoxelGrid(4))
        assert dims.is_empty
        assert normalised.count == 0


class TestShapesMatch:
    def test_translated_match(self):
        a = [[1, 1], [0, 1]]
        b = [[], [], [0, 0, 1, 1], [0, 0, 0, 1]]
        assert shapes_match(a, b)

    def test_different_shapes(self):
        assert not shapes_match([[1, 1]], [[1], [1]])

    @pytest.mark.parametrize("a, b", [([], []), ([[0]], [[]])])
    def test_both_empty_match(self, a, b):
        assert shapes_match(a, b)
