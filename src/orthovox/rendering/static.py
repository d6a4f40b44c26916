"""Matplotlib drawing of isometric polygons and silhouette grids."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.figure import Figure

from orthovox.model.colour import Colour, normalise_colour
from orthovox.model.iso_style import IsoStyle
from orthovox.model.silhouette import OrthographicSilhouette, ProjectionSet
from orthovox.model.voxel_grid import VoxelGrid
from orthovox.rendering.isometric import (
    AxisLine,
    ScreenPolygon,
    _resolve_style,
    axis_lines,
    render_isometric,
)

_DASH_PATTERN = (0, (4, 2))
_CELL_FILL_COLOUR = "#3b82f6"
_CELL_STROKE_COLOUR = "#60a5fa"
_GRID_LINE_COLOUR = (0.8, 0.8, 0.8)


def draw_polygons(
    ax: Axes,
    polygons: Sequence[ScreenPolygon],
    *,
    axes: Sequence[AxisLine] = (),
    line_width: float = 1.0,
) -> None:
    """Paint *polygons* into *ax* in the order given.

    Everything goes into a single :class:`PolyCollection`, which keeps
    the painter's-algorithm order intact.  Axis lines, if any, are
    drawn underneath.
    """
    if axes:
        ax.add_collection(LineCollection(
            [[a.start, a.end] for a in axes],
            colors=[a.colour.as_tuple() for a in axes],
            linewidths=2.0,
            zorder=1,
        ))
        for a in axes:
            ax.text(
                a.end[0], a.end[1], a.label,
                color=a.colour.as_tuple(), ha="center", va="center",
                fontsize=9, zorder=1,
            )

    if not polygons:
        return
    pc = PolyCollection(
        [p.points for p in polygons],
        closed=True,
        facecolors=[p.fill.as_tuple() for p in polygons],
        edgecolors=[p.stroke.as_tuple() for p in polygons],
        linewidths=line_width,
        linestyles=[_DASH_PATTERN if p.dashed else "solid" for p in polygons],
        zorder=2,
    )
    ax.add_collection(pc)


def _finish_canvas(ax: Axes, size: float) -> None:
    ax.set_aspect("equal")
    ax.set_xlim(0, size)
    # Screen coordinates grow downwards.
    ax.set_ylim(size, 0)
    ax.axis("off")


def render_mpl(
    solid: VoxelGrid,
    output: str | Path | None = None,
    *,
    rotation_x: float = 0.0,
    rotation_y: float = 0.0,
    ax: Axes | None = None,
    style: IsoStyle | None = None,
    show_axes: bool = True,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    background: Colour = "white",
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Draw the isometric view of *solid* with matplotlib.

    Example usage::

        solid = generate_shape(Tier.SIMPLE, rng=1)
        render_mpl(solid, "solid.png", rotation_y=0.5)

    Args:
        solid: The solid to draw.
        output: Optional file path to save the figure.  Ignored when
            *ax* is provided.
        rotation_x: Pitch in radians.
        rotation_y: Yaw in radians.
        ax: Optional axes to draw into.  The caller then owns the
            figure; *output*, *figsize*, *dpi*, *background* and *show*
            are ignored.
        style: An :class:`IsoStyle`.  Any field name may also be passed
            as a keyword argument.
        show_axes: Whether to draw the coordinate axis lines.
        figsize: Figure size in inches.
        dpi: Resolution for raster output.
        background: Figure background colour.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure`.
    """
    resolved = _resolve_style(style, **style_kwargs)
    polygons = render_isometric(solid, rotation_x, rotation_y, style=resolved)
    lines = []
    if show_axes and polygons:
        lines = axis_lines(solid, rotation_x, rotation_y, style=resolved)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        draw_polygons(ax, polygons, axes=lines)
        _finish_canvas(ax, resolved.canvas_size)
        return fig

    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    draw_polygons(ax, polygons, axes=lines)
    _finish_canvas(ax, resolved.canvas_size)
    fig.tight_layout()
    return _save_or_show(fig, output, dpi, show)


def draw_silhouette(
    ax: Axes,
    silhouette: OrthographicSilhouette,
    *,
    colour: Colour = _CELL_FILL_COLOUR,
    edge_colour: Colour = _CELL_STROKE_COLOUR,
    title: str | None = None,
) -> None:
    """Draw one silhouette as a grid of unit cells, row 0 at the top."""
    n = silhouette.size
    grid = [[(0, i), (n, i)] for i in range(n + 1)]
    grid += [[(i, 0), (i, n)] for i in range(n + 1)]
    ax.add_collection(LineCollection(
        grid, colors=[_GRID_LINE_COLOUR], linewidths=0.5, zorder=1,
    ))
    cells = [
        [(c, r), (c + 1, r), (c + 1, r + 1), (c, r + 1)]
        for r, c in silhouette.filled_cells()
    ]
    if cells:
        ax.add_collection(PolyCollection(
            cells,
            closed=True,
            facecolors=[normalise_colour(colour)],
            edgecolors=[normalise_colour(edge_colour)],
            linewidths=1.0,
            zorder=2,
        ))
    ax.set_aspect("equal")
    ax.set_xlim(0, n)
    ax.set_ylim(n, 0)
    ax.axis("off")
    if title:
        ax.set_title(title)


def render_projections_mpl(
    projections: ProjectionSet,
    output: str | Path | None = None,
    *,
    figsize: tuple[float, float] = (9.0, 3.0),
    dpi: int = 150,
    background: Colour = "white",
    show: bool | None = None,
) -> Figure:
    """Draw the front, top and side silhouettes side by side."""
    bg_rgb = normalise_colour(background)
    fig, axes = plt.subplots(1, 3, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    for ax, (view, sil) in zip(axes, projections.items()):
        draw_silhouette(ax, sil, title=view.value.capitalize())
    fig.tight_layout()
    return _save_or_show(fig, output, dpi, show)


def _save_or_show(
    fig: Figure, output: str | Path | None, dpi: int, show: bool | None,
) -> Figure:
    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")
    if show is None:
        show = output is None
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig
