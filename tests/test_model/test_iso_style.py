"""Tests for IsoStyle validation and serialisation."""

import pytest

from orthovox.model.colour import RGB
from orthovox.model.iso_style import IsoStyle


class TestIsoStyleDefaults:
    def test_block_size_fills_canvas(self):
        style = IsoStyle()
        assert style.canvas_size == 300.0
        assert style.block_size == pytest.approx(300.0 / 8)

    def test_face_colours(self):
        style = IsoStyle()
        assert style.rgb("top_colour") == RGB.from_hex("#fde047")
        assert style.rgb("back_face_colour") == RGB.from_hex("#a6a6a6")

    def test_rgb_rejects_non_colour_field(self):
        with pytest.raises(KeyError):
            IsoStyle().rgb("block_size")


class TestIsoStyleValidation:
    def test_non_positive_block_size_raises(self):
        with pytest.raises(ValueError, match="block_size"):
            IsoStyle(block_size=0)

    def test_non_positive_canvas_raises(self):
        with pytest.raises(ValueError, match="canvas_size"):
            IsoStyle(canvas_size=-1)

    @pytest.mark.parametrize("name", ["front_shade", "side_shade", "bottom_shade"])
    def test_shade_out_of_range_raises(self, name):
        with pytest.raises(ValueError, match=name):
            IsoStyle(**{name: 1.1})

    def test_zero_view_direction_raises(self):
        with pytest.raises(ValueError, match="non-zero"):
            IsoStyle(view_direction=(0.0, 0.0, 0.0))

    def test_bad_colour_raises(self):
        with pytest.raises(ValueError, match="Unrecognised colour"):
            IsoStyle(top_colour="notacolour")

    def test_negative_axis_length_raises(self):
        with pytest.raises(ValueError, match="axis_length"):
            IsoStyle(axis_length=-1.0)


class TestIsoStyleSerialisation:
    def test_defaults_serialise_empty(self):
        assert IsoStyle().to_dict() == {}

    def test_colour_serialised_as_list(self):
        d = IsoStyle(top_colour="red", side_shade=0.5).to_dict()
        assert d == {"top_colour": [1.0, 0.0, 0.0], "side_shade": 0.5}

    def test_equivalent_colour_not_serialised(self):
        assert IsoStyle(stroke_colour="#1F2937").to_dict() == {}

    def test_round_trip(self):
        style = IsoStyle(
            block_size=20.0,
            front_colour=(0.2, 0.4, 0.6),
            view_direction=(1.0, 1.0, 1.0),
            axis_colours=("red", "green", "blue"),
        )
        restored = IsoStyle.from_dict(style.to_dict())
        assert restored.to_dict() == style.to_dict()
        assert restored.block_size == 20.0

    def test_from_dict_ignores_unknown_keys(self):
        assert IsoStyle.from_dict({"nonsense": 1}) == IsoStyle()
