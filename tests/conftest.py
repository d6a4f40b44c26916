"""Shared test fixtures for orthovox."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from orthovox.model.voxel_grid import VoxelGrid


@pytest.fixture
def single_voxel():
    """A frozen grid with one block at the origin."""
    return VoxelGrid.from_blocks([(0, 0, 0)]).freeze()


@pytest.fixture
def l_solid():
    """A frozen four-block L: three along x on the floor, one stacked on the first."""
    return VoxelGrid.from_blocks(
        [(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0)]
    ).freeze()


@pytest.fixture
def rng():
    """A seeded numpy Generator."""
    return np.random.default_rng(1234)
