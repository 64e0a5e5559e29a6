import numpy as np
import pytest

from paint_composer.colors import (
    BLEND_MODES,
    HSVA,
    RGBA,
    clamp,
    color_to_hex,
    color_to_hsl_string,
    color_to_rgb_string,
    find_hex,
    format_number,
    from_hsv,
    hex_to_color,
    hex_to_rgba,
    parse_blend_mode,
    to_hsv,
    to_hsv_preserving_hue,
)


def test_short_hex_red():
    assert hex_to_rgba("#F00") == RGBA(255, 0, 0, 1.0)
    assert color_to_rgb_string(hex_to_color("#F00")) == "rgba(255, 0, 0, 1)"


def test_short_hex_with_alpha_duplicates_digits():
    rgba = hex_to_rgba("abcd")
    assert (rgba.r, rgba.g, rgba.b) == (0xAA, 0xBB, 0xCC)
    assert np.isclose(rgba.a, 0xDD / 255)


@pytest.mark.parametrize("bad", ["", "#", "#12345", "#1234567", "#ggg", "red", "#123456789"])
def test_malformed_hex_is_none(bad):
    assert hex_to_rgba(bad) is None
    assert hex_to_color(bad) is None


@pytest.mark.parametrize(
    "hexa", ["#12345678", "#ABCDEF00", "#00000080", "#FFFFFFFF", "#7F7F7F33", "#C0FFEE99"]
)
def test_eight_digit_round_trip(hexa):
    assert color_to_hex(hex_to_color(hexa)) == hexa
    assert color_to_hex(hex_to_color(hexa.lower())) == hexa


def test_six_digit_round_trip_gains_opaque_alpha():
    rng = np.random.default_rng(7)
    for r, g, b in rng.integers(0, 256, size=(200, 3)):
        six = "#" + "".join(f"{int(c):02x}" for c in (r, g, b))
        assert color_to_hex(hex_to_color(six)) == six.upper() + "FF"


def test_hex_output_is_always_eight_digits_upper():
    assert color_to_hex(HSVA(0, 0, 0, 1)) == "#000000FF"
    assert color_to_hex(HSVA(120, 1, 1, 0)) == "#00FF0000"


def test_to_hsv_sectors():
    assert to_hsv(255, 0, 0) == HSVA(0.0, 1.0, 1.0, 1.0)
    assert to_hsv(0, 255, 0).h == 120
    assert to_hsv(0, 0, 255).h == 240
    assert to_hsv(255, 0, 255).h == 300


def test_grey_hue_unsafe_vs_preserving():
    assert to_hsv(128, 128, 128).h == 0
    assert to_hsv_preserving_hue(128, 128, 128, 1.0, 200).h == 200
    # chromatic input ignores the fallback
    assert to_hsv_preserving_hue(255, 0, 0, 1.0, 200).h == 0


def test_hue_survives_desaturate_and_back():
    start = HSVA(200, 0.5, 0.5, 1)
    grey = from_hsv(HSVA(start.h, 0.0, start.v, start.a))
    back = to_hsv_preserving_hue(grey.r, grey.g, grey.b, grey.a, start.h)
    assert back.s == 0
    assert back.h == 200


def test_from_hsv_wraps_at_360():
    assert from_hsv(HSVA(360, 1, 1, 1)) == RGBA(255, 0, 0, 1)


def test_from_hsv_clamps_out_of_range_input():
    assert from_hsv(HSVA(-30, 2, 5, 3)) == RGBA(255, 0, 0, 1)


def test_rgba_string_alpha_three_decimals():
    assert color_to_rgb_string(HSVA(0, 1, 1, 0.12345)) == "rgba(255, 0, 0, 0.123)"
    assert color_to_rgb_string(HSVA(0, 1, 1, 0.5)) == "rgba(255, 0, 0, 0.5)"


def test_hsl_string():
    assert color_to_hsl_string(HSVA(0, 1, 1, 1)) == "hsla(0, 100%, 50%, 1)"
    # l == 1 is achromatic
    assert color_to_hsl_string(HSVA(0, 0, 1, 0.5)) == "hsla(0, 0%, 100%, 0.5)"
    assert color_to_hsl_string(HSVA(210, 0, 0, 1)) == "hsla(210, 0%, 0%, 1)"


@pytest.mark.parametrize(
    "x, text",
    [(50.0, "50"), (0.5, "0.5"), (220.55, "220.55"), (1 / 3, "0.333"), (-0.0001, "0"), (0, "0")],
)
def test_format_number(x, text):
    assert format_number(x) == text


def test_find_hex_in_pasted_text():
    assert find_hex("background-image: #ff0000; color: #00f") == "#ff0000"
    assert find_hex("rgba(1, 2, 3, 1)") is None
    assert find_hex("#12345 oops") is None
    assert find_hex("#ABCD") == "#ABCD"


def test_blend_modes():
    assert len(BLEND_MODES) == 16
    assert BLEND_MODES[0] == "normal"
    assert parse_blend_mode(" Multiply ") == "multiply"
    assert parse_blend_mode("plus-lighter") == "normal"
    assert parse_blend_mode(None) == "normal"


def test_clamp_maps_nan_to_lower_bound():
    assert clamp(float("nan")) == 0.0
    assert clamp(float("nan"), 4, 64) == 4
    assert clamp(float("inf"), 0, 360) == 360
    assert clamp(float("-inf")) == 0.0
