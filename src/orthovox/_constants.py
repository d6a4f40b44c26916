"""Shared constants used across the model, construction and rendering layers."""

GRID_SIZE: int = 8
"""Default edge length of the voxel grid and of every silhouette canvas."""

MAX_GRID_SIZE: int = 8
"""Largest supported grid edge length."""

MAX_REGEN_ATTEMPTS: int = 50
"""Default attempt budget for :func:`~orthovox.generate_shape`."""

VIEWPORT_SIZE: float = 300.0
"""Side length of the square isometric canvas, in screen units."""

CELL_SIZE: float = VIEWPORT_SIZE / GRID_SIZE
"""Screen size of one block edge at the default grid size."""

DRAG_SENSITIVITY: float = 0.01
"""Radians of rotation per pixel of pointer drag."""
