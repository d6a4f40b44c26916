"""Tests for random solid generation."""

import logging

import numpy as np
import pytest

import orthovox.construction.generator as generator_module
from orthovox.construction.generator import GenerationFailure, generate_shape
from orthovox.model.difficulty import BLOCK_COUNTS, BlockCountRange, Tier
from orthovox.model.voxel_grid import BlockCoordinate, VoxelGrid


class TestGenerateShape:
    @pytest.mark.parametrize("tier", list(Tier))
    def test_solid_is_valid(self, tier):
        for seed in range(20):
            solid = generate_shape(tier, rng=seed)
            assert isinstance(solid, VoxelGrid)
            assert solid.count in BLOCK_COUNTS[tier]
            assert solid.is_connected()
            assert solid.frozen

    def test_solid_is_normalised(self):
        for seed in range(20):
            solid = generate_shape(Tier.ADVANCED, rng=seed)
            assert solid.bounds()[0] == (0, 0, 0)
            assert max(solid.dimensions()) <= solid.size

    def test_seeded_generation_is_reproducible(self):
        assert generate_shape(Tier.INTERMEDIATE, rng=7) == generate_shape(
            Tier.INTERMEDIATE, rng=7,
        )

    def test_accepts_generator_instance(self, rng):
        assert generate_shape(rng=rng)

    def test_tier_by_value(self):
        solid = generate_shape("advanced", rng=3)
        assert solid.count in BLOCK_COUNTS[Tier.ADVANCED]

    def test_custom_range(self):
        solid = generate_shape(BlockCountRange(2, 2), rng=0)
        assert solid.count == 2

    def test_small_grid(self):
        solid = generate_shape(BlockCountRange(8, 8), rng=0, grid_size=2)
        assert solid.count == 8
        assert solid.size == 2

    def test_simple_tier_success_rate(self):
        rng = np.random.default_rng(99)
        results = [generate_shape(Tier.SIMPLE, rng=rng) for _ in range(200)]
        successes = sum(1 for r in results if r)
        assert successes / len(results) >= 0.99

    def test_zero_attempts_raises(self):
        with pytest.raises(ValueError, match="max_attempts"):
            generate_shape(max_attempts=0)

    def test_range_too_large_for_grid_raises(self):
        with pytest.raises(ValueError, match="cannot place"):
            generate_shape(BlockCountRange(10, 12), grid_size=2)


class TestGenerationFailure:
    def test_exhausted_budget_returns_failure(self, monkeypatch, caplog):
        monkeypatch.setattr(
            generator_module, "_grow",
            lambda rng, size, target: [BlockCoordinate(0, 0, 0)],
        )
        with caplog.at_level(logging.WARNING, logger="orthovox.construction.generator"):
            result = generate_shape(Tier.SIMPLE, max_attempts=3, rng=0)
        assert isinstance(result, GenerationFailure)
        assert not result
        assert result.attempts == 3
        assert result.tier is Tier.SIMPLE
        assert result.block_range == BlockCountRange(4, 7)
        assert "after 3 attempt(s)" in caplog.text

    def test_custom_range_has_no_tier(self, monkeypatch):
        monkeypatch.setattr(generator_module, "_grow", lambda rng, size, target: [])
        result = generate_shape(BlockCountRange(2, 3), max_attempts=1)
        assert result.tier is None
        assert "custom range" in result.message


class TestGrow:
    def test_grows_connected_to_target(self, rng):
        blocks = generator_module._grow(rng, 8, 12)
        assert len(blocks) == 12
        assert len({b.key for b in blocks}) == 12
        assert VoxelGrid.from_blocks(blocks).is_connected()

    def test_seed_on_floor_in_lower_half(self):
        for seed in range(30):
            first = generator_module._grow(np.random.default_rng(seed), 8, 1)[0]
            assert first.y == 0
            assert 0 <= first.x < 4
            assert 0 <= first.z < 4

    def test_stops_when_grid_full(self, rng):
        assert len(generator_module._grow(rng, 1, 5)) == 1
