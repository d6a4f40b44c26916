"""Construction layer: solid generation, normalisation, projection and checking."""

from orthovox.construction.comparison import (
    SilhouetteComparison,
    check_projections,
    compare_silhouettes,
    incorrect_views,
    tutor_payload,
)
from orthovox.construction.generator import GenerationFailure, generate_shape
from orthovox.construction.normalise import normalise, normalise_grid, shapes_match
from orthovox.construction.projection import (
    project,
    project_block,
    unproject,
    view_offsets,
)
from orthovox.construction.transforms import rotate_quarter_turn

__all__ = [
    "GenerationFailure",
    "SilhouetteComparison",
    "check_projections",
    "compare_silhouettes",
    "generate_shape",
    "incorrect_views",
    "normalise",
    "normalise_grid",
    "project",
    "project_block",
    "rotate_quarter_turn",
    "shapes_match",
    "tutor_payload",
    "unproject",
    "view_offsets",
]
