"""Core data model for orthovox: grids, silhouettes, colours and view state.

Everything is re-exported here so that ``from orthovox.model import
VoxelGrid`` works without knowing the submodule layout.
"""

from orthovox.model.colour import RGB, Colour, normalise_colour
from orthovox.model.difficulty import BLOCK_COUNTS, BlockCountRange, Tier, block_range
from orthovox.model.iso_style import IsoStyle
from orthovox.model.rotation_state import DragAnchor, RotationState
from orthovox.model.silhouette import (
    OrthographicSilhouette,
    ProjectionSet,
    ViewOffset,
    ViewType,
)
from orthovox.model.voxel_grid import (
    NEIGHBOUR_OFFSETS,
    BlockCoordinate,
    Dimensions,
    VoxelGrid,
)

__all__ = [
    "BLOCK_COUNTS",
    "BlockCoordinate",
    "BlockCountRange",
    "Colour",
    "Dimensions",
    "DragAnchor",
    "IsoStyle",
    "NEIGHBOUR_OFFSETS",
    "OrthographicSilhouette",
    "ProjectionSet",
    "RGB",
    "RotationState",
    "Tier",
    "ViewOffset",
    "ViewType",
    "VoxelGrid",
    "block_range",
    "normalise_colour",
]
