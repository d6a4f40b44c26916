"""Isometric rendering of a solid into depth-ordered, shaded screen polygons.

Blocks are rotated, sorted back-to-front by a scalar depth and emitted
face by face (painter's algorithm).  Rasterisation is left to the
caller; see :mod:`orthovox.rendering.static` for a matplotlib one.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

import numpy as np

from orthovox.model.colour import RGB
from orthovox.model.iso_style import IsoStyle
from orthovox.model.rotation_state import RotationState
from orthovox.model.voxel_grid import BlockCoordinate, VoxelGrid
from orthovox.rendering.geometry import (
    FACE_NORMALS,
    FACES,
    UNIT_CUBE_CORNERS,
    FaceDefinition,
    FaceName,
    isometric_project,
    rotate,
)

_STYLE_FIELDS = frozenset(f.name for f in fields(IsoStyle))
_DEFAULT_STYLE = IsoStyle()

_AXIS_LABELS = ("X", "Y", "Z")


def _resolve_style(style: IsoStyle | None, **kwargs: Any) -> IsoStyle:
    """Build an :class:`IsoStyle` from an optional base plus overrides.

    Any kwarg whose name matches an ``IsoStyle`` field replaces that
    field's value; ``None`` values are treated as "not provided".

    Raises:
        TypeError: If a kwarg name does not match any ``IsoStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )
    s = style if style is not None else _DEFAULT_STYLE
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


@dataclass(frozen=True)
class DrawableBlock:
    """Per-pass rendering record for one occupied voxel.

    Attributes:
        block: Grid coordinate of the voxel.
        rotated_centre: The voxel centre after rotation.
        depth: Sort key; larger values are nearer the viewer.
    """

    block: BlockCoordinate
    rotated_centre: tuple[float, float, float]
    depth: float


@dataclass(frozen=True)
class ScreenPolygon:
    """One visible cube face, ready to rasterise.

    Attributes:
        block: Voxel the face belongs to.
        face: Which face of the voxel.
        points: Four screen-space corners in drawing order.
        fill: Fill colour.
        stroke: Outline colour.
        dashed: Whether the outline is dashed.  Set for faces whose
            unrotated normal points along -x or -z.
        depth: Depth key of the owning voxel.
    """

    block: BlockCoordinate
    face: FaceName
    points: tuple[tuple[float, float], ...]
    fill: RGB
    stroke: RGB
    dashed: bool
    depth: float


@dataclass(frozen=True)
class AxisLine:
    """A coordinate axis drawn from the grid origin, rotating with the solid."""

    label: str
    start: tuple[float, float]
    end: tuple[float, float]
    colour: RGB


def drawable_blocks(
    solid: VoxelGrid, rotation_x: float = 0.0, rotation_y: float = 0.0,
) -> list[DrawableBlock]:
    """Occupied voxels sorted back-to-front.

    Each block's centre is rotated and its depth taken as the sum of
    the rotated coordinates.  This is an approximation that can
    misorder faces at extreme angles.  Ties keep grid scan order.
    """
    blocks = solid.blocks()
    if not blocks:
        return []
    centres = np.array(blocks, dtype=float) + 0.5
    rotated = rotate(centres, rotation_x, rotation_y)
    depth = rotated.sum(axis=1)
    order = np.argsort(depth, kind="stable")
    return [
        DrawableBlock(
            blocks[i],
            (float(rotated[i, 0]), float(rotated[i, 1]), float(rotated[i, 2])),
            float(depth[i]),
        )
        for i in order
    ]


def face_shading(face: FaceDefinition, style: IsoStyle) -> tuple[RGB, RGB, bool]:
    """Fill, stroke and dash flag for *face*, from its unrotated normal.

    Shading depends only on the face's own orientation, never on the
    current rotation, so colours stay attached to the same faces as the
    model turns.
    """
    nx, ny, nz = face.normal
    stroke = style.rgb("stroke_colour")
    if nx < 0 or nz < 0:
        return style.rgb("back_face_colour"), stroke, True
    if ny > 0:
        fill = style.rgb("top_colour")
    elif nz > 0:
        fill = style.rgb("front_colour").scale(style.front_shade)
    elif nx > 0:
        fill = style.rgb("side_colour").scale(style.side_shade)
    else:
        fill = style.rgb("top_colour").scale(style.bottom_shade)
    return fill, stroke, False


def _centring_translation(
    solid: VoxelGrid, rotation_x: float, rotation_y: float, style: IsoStyle,
) -> np.ndarray:
    """Screen offset that centres the solid's projected bounding box."""
    centre = np.full(2, style.canvas_size / 2)
    bounds = solid.bounds()
    if bounds is None:
        return centre
    lo = np.array(bounds[0], dtype=float)
    hi = np.array(bounds[1], dtype=float) + 1.0
    box_corners = lo + UNIT_CUBE_CORNERS * (hi - lo)
    projected = isometric_project(
        rotate(box_corners, rotation_x, rotation_y), style.block_size,
    )
    lo2 = projected.min(axis=0)
    hi2 = projected.max(axis=0)
    return centre - (lo2 + (hi2 - lo2) / 2)


def render_isometric(
    solid: VoxelGrid,
    rotation_x: float = 0.0,
    rotation_y: float = 0.0,
    *,
    style: IsoStyle | None = None,
    **style_kwargs: Any,
) -> list[ScreenPolygon]:
    """Render *solid* as an ordered list of shaded screen polygons.

    A face is emitted only if the neighbouring cell in the direction of
    its normal is empty (or outside the grid) and its rotated normal
    points towards the viewer.  Polygons are ordered back-to-front by
    block, then by face table order within a block, so drawing them in
    sequence gives correct overlap.

    Example usage::

        polygons = render_isometric(solid, rotation_y=0.4)
        for poly in polygons:
            canvas.fill(poly.points, poly.fill.to_hex())

    Args:
        solid: The solid to draw.
        rotation_x: Pitch in radians.
        rotation_y: Yaw in radians.
        style: An :class:`IsoStyle`; defaults are used if ``None``.
        **style_kwargs: Any :class:`IsoStyle` field name, overriding
            *style*.  Unknown names raise :class:`TypeError`.

    Returns:
        Polygons in painting order; empty for an empty solid.
    """
    resolved = _resolve_style(style, **style_kwargs)
    order = drawable_blocks(solid, rotation_x, rotation_y)
    if not order:
        return []

    translation = _centring_translation(solid, rotation_x, rotation_y, resolved)
    view_dir = np.asarray(resolved.view_direction, dtype=float)
    facing = rotate(FACE_NORMALS, rotation_x, rotation_y) @ view_dir > 0
    shading = [face_shading(face, resolved) for face in FACES]

    polygons: list[ScreenPolygon] = []
    for item in order:
        b = item.block
        corners = isometric_project(
            rotate(UNIT_CUBE_CORNERS + np.array(b, dtype=float), rotation_x, rotation_y),
            resolved.block_size,
        ) + translation
        for i, face in enumerate(FACES):
            nx, ny, nz = face.normal
            if solid.get(b.x + nx, b.y + ny, b.z + nz):
                continue
            if not facing[i]:
                continue
            fill, stroke, dashed = shading[i]
            points = tuple(
                (float(corners[c, 0]), float(corners[c, 1])) for c in face.corners
            )
            polygons.append(ScreenPolygon(
                block=b,
                face=face.name,
                points=points,
                fill=fill,
                stroke=stroke,
                dashed=dashed,
                depth=item.depth,
            ))
    return polygons


def axis_lines(
    solid: VoxelGrid,
    rotation_x: float = 0.0,
    rotation_y: float = 0.0,
    *,
    style: IsoStyle | None = None,
) -> list[AxisLine]:
    """The X, Y and Z axis segments from the grid origin.

    They share the translation used by :func:`render_isometric` for the
    same solid and angles, so they line up with its polygons.  Draw them
    first so the solid paints over them.
    """
    resolved = _resolve_style(style)
    translation = _centring_translation(solid, rotation_x, rotation_y, resolved)
    ends = np.vstack([np.zeros(3), np.eye(3) * resolved.axis_length])
    screen = isometric_project(
        rotate(ends, rotation_x, rotation_y), resolved.block_size,
    ) + translation
    origin = (float(screen[0, 0]), float(screen[0, 1]))
    return [
        AxisLine(
            label=label,
            start=origin,
            end=(float(screen[i + 1, 0]), float(screen[i + 1, 1])),
            colour=RGB.from_colour(colour),
        )
        for i, (label, colour) in enumerate(zip(_AXIS_LABELS, resolved.axis_colours))
    ]


def render_view(
    solid: VoxelGrid,
    state: RotationState,
    *,
    style: IsoStyle | None = None,
) -> tuple[list[ScreenPolygon], RotationState]:
    """Render with an explicit rotation state.

    If *state* was last bound to a different solid its angles are reset
    first, so a new solid always appears in the canonical orientation.

    Returns:
        Tuple of ``(polygons, state)`` where *state* is bound to *solid*.
    """
    state = state.for_solid(solid)
    polygons = render_isometric(
        solid, state.rotation_x, state.rotation_y, style=style,
    )
    return polygons, state
