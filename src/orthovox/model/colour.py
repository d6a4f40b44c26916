from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """An RGB colour with float channels in ``[0, 1]``.

    Shading is done by :meth:`scale`, which multiplies every channel by
    the same factor.  Factors are expected to be at most 1, so results
    stay in range without clamping.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.

    Raises:
        ValueError: If any channel lies outside ``[0, 1]``.
    """

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            val = getattr(self, name)
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"RGB component {name} must be in [0, 1], got {val}"
                )

    @classmethod
    def from_colour(cls, colour: Colour) -> RGB:
        """Build from any specification accepted by :func:`normalise_colour`."""
        return cls(*normalise_colour(colour))

    @classmethod
    def from_hex(cls, hex_string: str) -> RGB:
        """Parse a ``"#"``-prefixed hex string.

        Any hex form matplotlib understands is accepted (``"#rgb"``,
        ``"#rrggbb"`` and their alpha variants); alpha is discarded.

        Raises:
            ValueError: If *hex_string* is not a valid hex colour.
        """
        from matplotlib.colors import to_rgb

        if not hex_string.startswith("#"):
            raise ValueError(f"Invalid hex colour: {hex_string!r}")
        try:
            return cls(*to_rgb(hex_string))
        except ValueError:
            raise ValueError(f"Invalid hex colour: {hex_string!r}")

    def scale(self, factor: float) -> RGB:
        """Return this colour with every channel multiplied by *factor*.

        Raises:
            ValueError: If *factor* is outside ``[0, 1]``.
        """
        if not 0.0 <= factor <= 1.0:
            raise ValueError(f"shade factor must be in [0, 1], got {factor}")
        return RGB(self.r * factor, self.g * factor, self.b * factor)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Format as ``"#rrggbb"``, rounding each channel to 8 bits."""
        from matplotlib.colors import to_hex

        return to_hex(self.as_tuple())


#: A colour specification accepted throughout orthovox.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"red"``, ``"#ef4444"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``
#:   (e.g. ``(1.0, 0.0, 0.0)``).
#: - An :class:`RGB` instance.
#:
#: See :func:`normalise_colour` for conversion to a normalised RGB tuple.
Colour = str | float | tuple[float, float, float] | list[float] | RGB


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour specification to a normalised (r, g, b) tuple.

    Accepts CSS colour names (e.g. ``"red"``), hex strings
    (e.g. ``"#FF0000"``), grey floats (e.g. ``0.7``), RGB tuples
    (e.g. ``(1.0, 0.3, 0.3)``) or :class:`RGB` instances.

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of three floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, RGB):
        return colour.as_tuple()

    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        return (f, f, f)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (float(c) for c in colour)
        for name, val in [("r", r), ("g", g), ("b", b)]:
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"RGB component {name} must be in [0, 1], got {val}"
                )
        return (r, g, b)

    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")
