"""Orthovox: orthographic projection exercises built on random voxel solids.

Orthovox generates small connected block solids, computes their front,
top and side silhouettes, checks learners' drawings of those
silhouettes, and renders the solids as shaded isometric views.

Example usage::

    from orthovox import Tier, generate_shape, project, render_mpl

    solid = generate_shape(Tier.INTERMEDIATE, rng=42)
    if solid:
        views = project(solid)
        render_mpl(solid, "solid.png", rotation_y=0.3)
"""

from orthovox._constants import GRID_SIZE, MAX_REGEN_ATTEMPTS
from orthovox.construction import (
    GenerationFailure,
    SilhouetteComparison,
    check_projections,
    compare_silhouettes,
    generate_shape,
    incorrect_views,
    normalise,
    normalise_grid,
    project,
    project_block,
    rotate_quarter_turn,
    shapes_match,
    tutor_payload,
    unproject,
    view_offsets,
)
from orthovox.model import (
    BLOCK_COUNTS,
    RGB,
    BlockCoordinate,
    BlockCountRange,
    Colour,
    Dimensions,
    DragAnchor,
    IsoStyle,
    OrthographicSilhouette,
    ProjectionSet,
    RotationState,
    Tier,
    ViewOffset,
    ViewType,
    VoxelGrid,
    block_range,
    normalise_colour,
)
from orthovox.rendering import (
    ScreenPolygon,
    axis_lines,
    render_isometric,
    render_mpl,
    render_projections_mpl,
    render_view,
)

__version__ = "0.1.0"

__all__ = [
    "BLOCK_COUNTS",
    "BlockCoordinate",
    "BlockCountRange",
    "Colour",
    "Dimensions",
    "DragAnchor",
    "GRID_SIZE",
    "GenerationFailure",
    "IsoStyle",
    "MAX_REGEN_ATTEMPTS",
    "OrthographicSilhouette",
    "ProjectionSet",
    "RGB",
    "RotationState",
    "ScreenPolygon",
    "SilhouetteComparison",
    "Tier",
    "ViewOffset",
    "ViewType",
    "VoxelGrid",
    "axis_lines",
    "block_range",
    "check_projections",
    "compare_silhouettes",
    "generate_shape",
    "incorrect_views",
    "normalise",
    "normalise_colour",
    "normalise_grid",
    "project",
    "project_block",
    "render_isometric",
    "render_mpl",
    "render_projections_mpl",
    "render_view",
    "rotate_quarter_turn",
    "shapes_match",
    "tutor_payload",
    "unproject",
    "view_offsets",
]
