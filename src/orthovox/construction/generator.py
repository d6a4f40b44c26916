"""Random growth of connected voxel solids."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from orthovox._constants import GRID_SIZE, MAX_REGEN_ATTEMPTS
from orthovox.construction.normalise import normalise_grid
from orthovox.model.difficulty import BlockCountRange, Tier, block_range
from orthovox.model.voxel_grid import BlockCoordinate, VoxelGrid

logger = logging.getLogger(__name__)

# Candidates are ranked by height and one of the first few is chosen,
# which favours upward growth without forbidding sideways growth.
_TOP_CANDIDATES = 5


@dataclass(frozen=True)
class GenerationFailure:
    """Returned when no acceptable solid was found within the attempt budget.

    This is a recoverable outcome: callers should retry, possibly with
    a smaller tier.  A failure is falsy, so ``if not result:`` detects it.

    Attributes:
        block_range: The block-count range that was requested.
        attempts: Number of attempts made.
        tier: The requested tier, or ``None`` if an explicit range was
            given.
    """

    block_range: BlockCountRange
    attempts: int
    tier: Tier | None = None

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        label = self.tier.value if self.tier is not None else "custom range"
        return (
            f"failed to generate a {self.block_range.min}-"
            f"{self.block_range.max} block solid ({label}) "
            f"after {self.attempts} attempt(s)"
        )


def _grow(
    rng: np.random.Generator, size: int, target: int,
) -> list[BlockCoordinate]:
    """Grow one connected set of up to *target* blocks from a floor seed.

    Returns the placed blocks in placement order.  Fewer than *target*
    are returned only if growth ran out of free neighbours.
    """
    seed_range = max(1, size // 2)
    seed = BlockCoordinate(
        int(rng.integers(seed_range)), 0, int(rng.integers(seed_range)),
    )
    placed = {seed.key}
    blocks = [seed]

    while len(blocks) < target:
        candidates: list[BlockCoordinate] = []
        queued: set[str] = set()
        for block in blocks:
            for nb in block.neighbours():
                key = nb.key
                if (
                    0 <= nb.x < size and 0 <= nb.y < size and 0 <= nb.z < size
                    and key not in placed
                    and key not in queued
                ):
                    candidates.append(nb)
                    queued.add(key)

        if not candidates:
            break

        # list.sort is stable, so ties keep discovery order.
        candidates.sort(key=lambda c: -c.y)
        pick = candidates[int(rng.integers(min(_TOP_CANDIDATES, len(candidates))))]
        placed.add(pick.key)
        blocks.append(pick)

    return blocks


def generate_shape(
    tier: Tier | str | BlockCountRange = Tier.SIMPLE,
    max_attempts: int = MAX_REGEN_ATTEMPTS,
    *,
    rng: np.random.Generator | int | None = None,
    grid_size: int = GRID_SIZE,
) -> VoxelGrid | GenerationFailure:
    """Generate a random connected solid for a difficulty tier.

    Each attempt picks a target block count uniformly from the tier's
    range, seeds one block on the floor (``y = 0``) in the lower half of
    the x and z ranges, and grows the solid one face-adjacent block at a
    time, preferring higher candidates.  Attempts that end with too few
    blocks, or whose normalised extent does not fit the grid, are
    discarded.

    Example usage::

        solid = generate_shape(Tier.INTERMEDIATE, rng=42)
        if not solid:
            print(solid.message)

    Args:
        tier: A :class:`Tier` (or its name), or an explicit
            :class:`BlockCountRange`.
        max_attempts: Attempt budget before giving up.
        rng: A numpy ``Generator`` or an integer seed for reproducible
            output.  ``None`` draws fresh entropy.
        grid_size: Edge length of the grid to grow in.

    Returns:
        A frozen, normalised :class:`VoxelGrid`, or a
        :class:`GenerationFailure` if the budget was exhausted.

    Raises:
        ValueError: If *max_attempts* is less than 1, *tier* is not a
            recognised tier name, or the range's minimum cannot fit in
            the grid.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    counts = block_range(tier)
    if counts.min > grid_size ** 3:
        raise ValueError(
            f"cannot place {counts.min} blocks in a grid of size {grid_size}"
        )
    resolved_tier = None if isinstance(tier, BlockCountRange) else Tier(tier)
    rng = np.random.default_rng(rng)

    for attempt in range(1, max_attempts + 1):
        target = int(rng.integers(counts.min, counts.max + 1))
        blocks = _grow(rng, grid_size, target)
        if len(blocks) < counts.min:
            logger.debug(
                "attempt %d: grew %d of %d blocks, below minimum %d",
                attempt, len(blocks), target, counts.min,
            )
            continue

        solid, dims = normalise_grid(VoxelGrid.from_blocks(blocks, grid_size))
        if dims.is_empty or max(dims) > grid_size:
            logger.debug("attempt %d: rejected dimensions %s", attempt, dims)
            continue

        logger.debug(
            "generated %d-block solid %s after %d attempt(s)",
            len(blocks), tuple(dims), attempt,
        )
        return solid

    failure = GenerationFailure(counts, max_attempts, resolved_tier)
    logger.warning(failure.message)
    return failure
