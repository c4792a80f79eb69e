"""
Unit tests for the color model

Pins exact integer outputs for known HEX/RGB/HSL triples and checks the
parser's accepted notations and rejections.
"""

import dataclasses
import random

import pytest

from colorlab.services.colors import (
    HSL, RGB, ColorInfo, InvalidFormat, generate_random_color, hex_to_rgb,
    hsl_to_rgb, parse_color, rgb_to_hex, rgb_to_hsl, round_half_up
)

RED = ColorInfo(hex="#FF0000", rgb=RGB(255, 0, 0), hsl=HSL(0, 100, 50))


def _hue_distance(a: int, b: int) -> int:
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


class TestHexToRgb:
    """Test HEX -> RGB parsing."""

    def test_full_form_with_and_without_hash(self):
        assert hex_to_rgb("#FF0000") == RGB(255, 0, 0)
        assert hex_to_rgb("00FF00") == RGB(0, 255, 0)
        assert hex_to_rgb("#1a2B3c") == RGB(26, 43, 60)

    def test_shorthand_duplicates_digits(self):
        assert hex_to_rgb("#F00") == RGB(255, 0, 0)
        assert hex_to_rgb("abc") == RGB(0xAA, 0xBB, 0xCC)

    def test_invalid_hex_format(self):
        """Test that invalid hex strings raise InvalidFormat."""
        with pytest.raises(InvalidFormat):
            hex_to_rgb("#FF00")  # Neither 3 nor 6 digits

        with pytest.raises(InvalidFormat):
            hex_to_rgb("#GGGGGG")  # Invalid hex digits

        with pytest.raises(InvalidFormat):
            hex_to_rgb("")


class TestRgbToHex:
    """Test RGB -> HEX formatting."""

    def test_zero_padded_upper_case(self):
        assert rgb_to_hex(RGB(0, 15, 255)) == "#000FFF"
        assert rgb_to_hex(RGB(171, 205, 239)) == "#ABCDEF"

    def test_out_of_range_channels_are_clamped(self):
        assert rgb_to_hex((-5, 300, 127.6)) == "#00FF80"

    def test_canonical_rgb_roundtrip(self):
        """HEX round trip is exact for integer channels."""
        for r in range(0, 256, 17):
            for g in range(0, 256, 17):
                for b in (0, 1, 127, 128, 254, 255):
                    rgb = RGB(r, g, b)
                    assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


class TestRgbToHsl:
    """Golden vectors for RGB -> HSL."""

    @pytest.mark.parametrize("rgb, expected", [
        (RGB(255, 0, 0), HSL(0, 100, 50)),
        (RGB(0, 255, 255), HSL(180, 100, 50)),
        (RGB(0, 0, 128), HSL(240, 100, 25)),
        (RGB(128, 0, 128), HSL(300, 100, 25)),
        (RGB(255, 165, 0), HSL(39, 100, 50)),
        (RGB(255, 192, 203), HSL(350, 100, 88)),
        (RGB(0, 128, 128), HSL(180, 100, 25)),
        (RGB(128, 128, 128), HSL(0, 0, 50)),
        (RGB(0, 0, 0), HSL(0, 0, 0)),
        (RGB(255, 255, 255), HSL(0, 0, 100)),
    ])
    def test_known_colors(self, rgb, expected):
        assert rgb_to_hsl(rgb) == expected

    def test_hue_rounding_up_to_360_wraps_to_zero(self):
        # Raw hue is ~359.76 degrees
        assert rgb_to_hsl(RGB(255, 0, 1)) == HSL(0, 100, 50)


class TestHslToRgb:
    """Golden vectors for HSL -> RGB."""

    @pytest.mark.parametrize("hsl, expected", [
        (HSL(0, 100, 50), RGB(255, 0, 0)),
        (HSL(120, 100, 50), RGB(0, 255, 0)),
        (HSL(240, 100, 50), RGB(0, 0, 255)),
        (HSL(180, 100, 50), RGB(0, 255, 255)),
        (HSL(240, 100, 25), RGB(0, 0, 128)),
        (HSL(0, 100, 90), RGB(255, 204, 204)),
        (HSL(0, 100, 10), RGB(51, 0, 0)),
    ])
    def test_known_colors(self, hsl, expected):
        assert hsl_to_rgb(hsl) == expected

    def test_achromatic_uses_lightness_directly(self):
        # 127.5 rounds half up
        assert hsl_to_rgb(HSL(200, 0, 50)) == RGB(128, 128, 128)
        assert hsl_to_rgb(HSL(0, 0, 100)) == RGB(255, 255, 255)

    def test_hsl_roundtrip_drift_bounded_for_saturated_midtones(self):
        """
        HSL -> RGB -> HSL drifts by at most one unit per component when
        saturation >= 75 and lightness is within 40..60.
        """
        for h in range(0, 360, 15):
            for s in (75, 90, 100):
                for l in (40, 50, 60):
                    back = rgb_to_hsl(hsl_to_rgb(HSL(h, s, l)))
                    assert _hue_distance(back.h, h) <= 1, (h, s, l, back)
                    assert abs(back.s - s) <= 1, (h, s, l, back)
                    assert abs(back.l - l) <= 1, (h, s, l, back)

    @pytest.mark.parametrize("hsl, expected", [
        (HSL(0, 10, 5), HSL(0, 12, 5)),
        (HSL(0, 10, 95), HSL(0, 12, 95)),
    ])
    def test_hsl_roundtrip_drifts_further_at_low_saturation_and_extreme_lightness(self, hsl, expected):
        # Channels are only a few 8-bit steps apart, so saturation moves by 2
        assert rgb_to_hsl(hsl_to_rgb(hsl)) == expected


class TestRounding:
    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestParseColor:
    """Test free-form color parsing."""

    @pytest.mark.parametrize("text", [
        "#FF0000",
        "FF0000",
        "rgb(255, 0, 0)",
        "hsl(0, 100%, 50%)",
    ])
    def test_notations_yield_identical_color(self, text):
        assert parse_color(text) == RED

    @pytest.mark.parametrize("text", [
        "  #ff0000  ",
        "#f00",
        "ff0000",
        "rgb(255,0,0)",
        "RGB( 255 , 0 , 0 )",
        "HSL(0,100%,50%)",
    ])
    def test_case_whitespace_and_shorthand(self, text):
        assert parse_color(text) == RED

    def test_hsl_input_is_kept_exactly(self):
        color = parse_color("hsl(210, 65%, 40%)")
        assert color.hsl == HSL(210, 65, 40)
        assert color.rgb == hsl_to_rgb(HSL(210, 65, 40))
        assert color.hex == rgb_to_hex(color.rgb)

    def test_rgb_input_derives_hsl(self):
        color = parse_color("rgb(0, 128, 128)")
        assert color.hex == "#008080"
        assert color.hsl == HSL(180, 100, 25)

    @pytest.mark.parametrize("text", [
        "notacolor",
        "",
        "#GG0000",
        "#FF00",
        "f00",
        "rgb(256, 0, 0)",
        "rgb(255, 0)",
        "hsl(360, 50%, 50%)",
        "hsl(0, 101%, 50%)",
        "hsl(0, 100, 50)",
    ])
    def test_rejects_invalid_input(self, text):
        with pytest.raises(InvalidFormat):
            parse_color(text)

    def test_invalid_format_is_a_value_error(self):
        with pytest.raises(ValueError, match="Invalid color format"):
            parse_color("notacolor")


class TestColorInfo:
    """Test the ColorInfo value object."""

    def test_to_dict_matches_wire_contract(self):
        assert RED.to_dict() == {
            "hex": "#FF0000",
            "rgb": {"r": 255, "g": 0, "b": 0},
            "hsl": {"h": 0, "s": 100, "l": 50},
        }

    def test_with_name_returns_new_value(self):
        named = RED.with_name("Vivid Red")
        assert named.name == "Vivid Red"
        assert RED.name is None
        assert named.to_dict()["name"] == "Vivid Red"

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            RED.hex = "#000000"

    def test_constructors_agree(self):
        assert ColorInfo.from_hex("#008080") == ColorInfo.from_rgb(RGB(0, 128, 128))


class TestRandomColor:
    def test_random_colors_are_consistent(self):
        rng = random.Random(42)
        for _ in range(50):
            color = generate_random_color(rng)
            assert all(0 <= channel <= 255 for channel in color.rgb)
            assert color.hex == rgb_to_hex(color.rgb)
            assert color.hsl == rgb_to_hsl(color.rgb)

    def test_seeded_rng_is_reproducible(self):
        assert generate_random_color(random.Random(7)) == generate_random_color(random.Random(7))
