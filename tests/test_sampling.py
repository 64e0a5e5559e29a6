from paint_composer.colors import HSVA
from paint_composer.sampling import (
    SAMPLE_MAX,
    color_at,
    hue_track,
    sample_gradient,
    track_preview,
)
from paint_composer.stops import GradientStops


def test_black_to_white_midpoint():
    out = sample_gradient(GradientStops.create_default(), 3)
    assert out[0] == "#000000FF"
    assert out[1] in ("#7F7F7FFF", "#808080FF")
    assert out[-1] == "#FFFFFFFF"


def test_sample_count_is_clamped():
    stops = GradientStops.create_default()
    assert len(sample_gradient(stops, 1)) == 2
    assert len(sample_gradient(stops, 10_000)) == SAMPLE_MAX
    assert len(sample_gradient(stops, 7)) == 7


def test_color_at_ends_match_stops():
    stops = GradientStops.create_default()
    stops.insert_at_click(50, "#ff0000")
    assert color_at(stops, 0) == "#000000FF"
    assert color_at(stops, 50) == "#FF0000FF"
    assert color_at(stops, 100) == "#FFFFFFFF"
    assert color_at(stops, 250) == "#FFFFFFFF"


def test_alpha_is_interpolated():
    stops = GradientStops.create_default()
    stops.set_color("stop-1", "#00000000")
    mid = sample_gradient(stops, 3)[1]
    assert mid.startswith("#000000")
    assert mid[-2:] in ("7F", "80")


def test_previews():
    stops = GradientStops.create_default()
    assert track_preview(stops) == "linear-gradient(to right, #000000FF 0%, #FFFFFFFF 100%)"
    assert "hsl(200, 100%, 50%)" in hue_track(HSVA(199.6, 1, 1))
