"""Tests for colour normalisation and the RGB type."""

import pytest

from orthovox.model.colour import RGB, normalise_colour


class TestNormaliseColour:
    def test_css_name(self):
        assert normalise_colour("red") == (1.0, 0.0, 0.0)

    def test_hex_string(self):
        assert normalise_colour("#00FF00") == pytest.approx((0.0, 1.0, 0.0))

    def test_grey_float(self):
        assert normalise_colour(0.7) == pytest.approx((0.7, 0.7, 0.7))

    def test_rgb_tuple(self):
        assert normalise_colour((0.5, 0.3, 0.1)) == pytest.approx((0.5, 0.3, 0.1))

    def test_rgb_instance(self):
        assert normalise_colour(RGB(0.1, 0.2, 0.3)) == (0.1, 0.2, 0.3)

    def test_invalid_name_raises(self):
        with pytest.raises(ValueError, match="Unrecognised colour"):
            normalise_colour("notacolour")

    def test_grey_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Grey value"):
            normalise_colour(1.5)

    def test_rgb_wrong_length_raises(self):
        with pytest.raises(ValueError, match="3 elements"):
            normalise_colour((0.5, 0.3))  # type: ignore[arg-type]

    def test_rgb_out_of_range_raises(self):
        with pytest.raises(ValueError, match="RGB component"):
            normalise_colour((0.5, 1.5, 0.0))


class TestRGB:
    def test_channel_out_of_range_raises(self):
        with pytest.raises(ValueError, match="RGB component"):
            RGB(1.2, 0.0, 0.0)

    def test_from_hex(self):
        c = RGB.from_hex("#ef4444")
        assert c.as_tuple() == pytest.approx((239 / 255, 68 / 255, 68 / 255))

    def test_from_short_hex(self):
        assert RGB.from_hex("#fff") == RGB(1.0, 1.0, 1.0)

    def test_from_hex_with_alpha(self):
        assert RGB.from_hex("#ef4444ff") == RGB.from_hex("#ef4444")
        assert RGB.from_hex("#fff8") == RGB(1.0, 1.0, 1.0)

    def test_from_hex_requires_hash(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            RGB.from_hex("red")

    def test_from_hex_invalid_raises(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            RGB.from_hex("#12345")
        with pytest.raises(ValueError, match="Invalid hex"):
            RGB.from_hex("#zzzzzz")

    def test_to_hex(self):
        assert RGB.from_hex("#1f2937").to_hex() == "#1f2937"

    def test_to_hex_rounds_channels(self):
        assert RGB(0.5, 0.0, 1.0).to_hex() == "#8000ff"

    def test_from_colour(self):
        assert RGB.from_colour("blue") == RGB(0.0, 0.0, 1.0)

    def test_scale(self):
        scaled = RGB(1.0, 0.5, 0.0).scale(0.8)
        assert scaled.as_tuple() == pytest.approx((0.8, 0.4, 0.0))

    def test_scale_out_of_range_raises(self):
        with pytest.raises(ValueError, match="shade factor"):
            RGB(1.0, 1.0, 1.0).scale(1.5)
