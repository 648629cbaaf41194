"""
Unit tests for the color module.

Tests hex parsing/formatting, validation and the default palette.
"""

import pytest

from PP_Libs.RasterLib.color import (
    default_palette,
    hex_to_rgb,
    normalize_color,
    rgb_to_hex,
    validate_rgb,
)


class TestHexToRgb:
    """Tests for hex_to_rgb function."""

    def test_parses_with_hash(self):
        """Should parse a '#rrggbb' string."""
        assert hex_to_rgb("#ff8000") == (255, 128, 0)

    def test_parses_without_hash(self):
        """Should parse a bare 'rrggbb' string."""
        assert hex_to_rgb("00FF00") == (0, 255, 0)

    def test_is_case_insensitive(self):
        """Should accept upper-case hex digits."""
        assert hex_to_rgb("#C0c0C0") == (192, 192, 192)

    @pytest.mark.parametrize("value", ["", "#fff", "#12345", "#gggggg", "#1234567"])
    def test_rejects_malformed_strings(self, value):
        """Should raise ValueError for malformed hex strings."""
        with pytest.raises(ValueError):
            hex_to_rgb(value)


class TestRgbToHex:
    """Tests for rgb_to_hex function."""

    def test_formats_lower_case(self):
        """Should format colors as lower-case hex."""
        assert rgb_to_hex((255, 0, 171)) == "#ff00ab"

    def test_pads_single_digit_channels(self):
        """Should zero-pad channels below 16."""
        assert rgb_to_hex((1, 2, 3)) == "#010203"

    def test_round_trips_palette(self):
        """Should round trip every default palette color."""
        for color in default_palette():
            assert hex_to_rgb(rgb_to_hex(color)) == color


class TestValidation:
    """Tests for validate_rgb and normalize_color."""

    def test_rejects_out_of_range_channel(self):
        """Should raise ValueError for channels outside 0-255."""
        with pytest.raises(ValueError):
            validate_rgb((256, 0, 0))

    def test_rejects_wrong_channel_count(self):
        """Should raise ValueError unless there are three channels."""
        with pytest.raises(ValueError):
            validate_rgb((0, 0, 0, 255))

    def test_rejects_non_numeric(self):
        """Should raise ValueError for non-numeric channels."""
        with pytest.raises(ValueError):
            validate_rgb(None)

    def test_normalize_accepts_both_forms(self):
        """Should accept a hex string or an RGB sequence."""
        assert normalize_color("#0000ff") == (0, 0, 255)
        assert normalize_color([0, 0, 255]) == (0, 0, 255)


def test_default_palette_has_sixteen_colors():
    palette = default_palette()

    assert len(palette) == 16
    assert palette[0] == (0, 0, 0)
    assert palette[-1] == (255, 255, 255)
