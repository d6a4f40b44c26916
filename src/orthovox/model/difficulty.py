from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Tier(StrEnum):
    """Named difficulty levels.

    Attributes:
        SIMPLE: Small solids of 4 to 7 blocks.
        INTERMEDIATE: 7 to 10 blocks.
        ADVANCED: 10 to 15 blocks.
    """

    SIMPLE = "simple"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class BlockCountRange:
    """Inclusive range of block counts a generated solid must satisfy.

    Attributes:
        min: Fewest blocks accepted.
        max: Most blocks the generator will place.

    Raises:
        ValueError: If *min* is less than 1 or *max* is less than *min*.
    """

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min < 1:
            raise ValueError(f"min must be at least 1, got {self.min}")
        if self.max < self.min:
            raise ValueError(
                f"max must be >= min, got min={self.min}, max={self.max}"
            )

    def __contains__(self, count: object) -> bool:
        return isinstance(count, int) and self.min <= count <= self.max


BLOCK_COUNTS: dict[Tier, BlockCountRange] = {
    Tier.SIMPLE: BlockCountRange(4, 7),
    Tier.INTERMEDIATE: BlockCountRange(7, 10),
    Tier.ADVANCED: BlockCountRange(10, 15),
}
"""Block-count range for each difficulty tier."""


def block_range(tier: Tier | str | BlockCountRange) -> BlockCountRange:
    """Resolve a tier name (or an explicit range) to its block-count range.

    Raises:
        ValueError: If *tier* is not a recognised tier name.
    """
    if isinstance(tier, BlockCountRange):
        return tier
    return BLOCK_COUNTS[Tier(tier)]
