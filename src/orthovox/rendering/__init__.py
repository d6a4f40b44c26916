"""Rendering: depth-sorted isometric polygons and matplotlib output."""

from orthovox.rendering.isometric import (
    AxisLine,
    DrawableBlock,
    ScreenPolygon,
    axis_lines,
    drawable_blocks,
    face_shading,
    render_isometric,
    render_view,
)
from orthovox.rendering.static import (
    draw_polygons,
    draw_silhouette,
    render_mpl,
    render_projections_mpl,
)

__all__ = [
    "AxisLine",
    "DrawableBlock",
    "ScreenPolygon",
    "axis_lines",
    "draw_polygons",
    "draw_silhouette",
    "drawable_blocks",
    "face_shading",
    "render_isometric",
    "render_mpl",
    "render_projections_mpl",
    "render_view",
]
