from __future__ import annotations

from dataclasses import dataclass

from orthovox._constants import CELL_SIZE, VIEWPORT_SIZE
from orthovox.model._util import _field_defaults
from orthovox.model.colour import RGB, Colour, normalise_colour

_COLOUR_FIELDS = frozenset({
    "top_colour", "front_colour", "side_colour",
    "stroke_colour", "back_face_colour",
})

_SHADE_FIELDS = ("front_shade", "side_shade", "bottom_shade")


@dataclass(frozen=True)
class IsoStyle:
    """Visual configuration for the isometric renderer.

    Face colours follow the convention shared with the silhouette views:
    yellow for faces seen from above, red for faces seen from the front
    and blue for faces seen from the side.

    Attributes:
        block_size: Screen length of one block edge.
        canvas_size: Side of the square output canvas; the model is
            centred on it.
        top_colour: Base colour of upward faces (and of bottom faces,
            darkened by *bottom_shade*).
        front_colour: Base colour of +z faces.
        side_colour: Base colour of +x faces.
        stroke_colour: Outline colour for shaded faces.
        back_face_colour: Fill for faces whose local normal points
            along -x or -z.  These faces are also drawn dashed.
        front_shade: Brightness factor for +z faces.
        side_shade: Brightness factor for +x faces.
        bottom_shade: Brightness factor for -y faces.
        view_direction: Vector a rotated face normal must have a
            positive dot product with for the face to be drawn.
        axis_length: Length of the axis gizmo lines, in blocks.
        axis_colours: Colours of the X, Y and Z gizmo lines.

    Raises:
        ValueError: If a size is not positive, a shade factor lies
            outside ``[0, 1]``, the view direction is zero, or a colour
            cannot be interpreted.
    """

    block_size: float = CELL_SIZE
    canvas_size: float = VIEWPORT_SIZE
    top_colour: Colour = "#fde047"
    front_colour: Colour = "#ef4444"
    side_colour: Colour = "#3b82f6"
    stroke_colour: Colour = "#1f2937"
    back_face_colour: Colour = "#a6a6a6"
    front_shade: float = 0.9
    side_shade: float = 0.8
    bottom_shade: float = 0.7
    view_direction: tuple[float, float, float] = (0.5, 0.5, 0.5)
    axis_length: float = 2.0
    axis_colours: tuple[Colour, Colour, Colour] = (
        "#ef4444", "#22c55e", "#3b82f6",
    )

    def __post_init__(self) -> None:
        if self.block_size <= 0:
            raise ValueError(
                f"block_size must be positive, got {self.block_size}"
            )
        if self.canvas_size <= 0:
            raise ValueError(
                f"canvas_size must be positive, got {self.canvas_size}"
            )
        for name in _SHADE_FIELDS:
            val = getattr(self, name)
            if not 0.0 <= val <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {val}")
        if len(self.view_direction) != 3:
            raise ValueError(
                f"view_direction must have 3 components, "
                f"got {len(self.view_direction)}"
            )
        if all(c == 0 for c in self.view_direction):
            raise ValueError("view_direction must be non-zero")
        if self.axis_length < 0:
            raise ValueError(
                f"axis_length must be non-negative, got {self.axis_length}"
            )
        if len(self.axis_colours) != 3:
            raise ValueError(
                f"axis_colours must have 3 entries, got {len(self.axis_colours)}"
            )
        for name in _COLOUR_FIELDS:
            normalise_colour(getattr(self, name))
        for c in self.axis_colours:
            normalise_colour(c)

    def rgb(self, name: str) -> RGB:
        """Resolve one of the ``*_colour`` fields to an :class:`RGB`."""
        if name not in _COLOUR_FIELDS:
            raise KeyError(f"{name!r} is not a colour field")
        return RGB.from_colour(getattr(self, name))

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        normalised to ``[r, g, b]`` lists.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        for name, default in defaults.items():
            val = getattr(self, name)
            if name in _COLOUR_FIELDS:
                if normalise_colour(val) != normalise_colour(default):
                    d[name] = list(normalise_colour(val))
            elif name == "axis_colours":
                norm = [list(normalise_colour(c)) for c in val]
                if norm != [list(normalise_colour(c)) for c in default]:
                    d[name] = norm
            elif name == "view_direction":
                if tuple(val) != tuple(default):
                    d[name] = list(val)
            elif val != default:
                d[name] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> IsoStyle:
        """Deserialise from a dictionary.

        Accepts any colour format understood by
        :func:`normalise_colour`.  Unknown keys are ignored.
        """
        kwargs: dict = {}
        for key in _field_defaults(cls):
            if key not in d:
                continue
            val = d[key]
            if key in _COLOUR_FIELDS and isinstance(val, list):
                val = tuple(val)
            elif key == "axis_colours":
                val = tuple(
                    tuple(c) if isinstance(c, list) else c for c in val
                )
            elif key == "view_direction":
                val = tuple(val)
            kwargs[key] = val
        return cls(**kwargs)
