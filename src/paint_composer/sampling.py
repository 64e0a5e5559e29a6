"""Sample colours along a stop collection (track previews, swatch strips)."""

from __future__ import annotations

import numpy as np
from coloraide import Color, stop

from .colors import HSVA, Hex, RGBA, clamp, rgba_to_hex, round_half_up
from .stops import GradientStops

SAMPLE_MIN, SAMPLE_MAX = 2, 512
SAMPLE_SPACE = "srgb"  # legacy CSS gradients interpolate in gamma-encoded sRGB


def _interpolator(stops: GradientStops):
    # ColorAide reads '#RRGGBBAA' directly; positions go from 0-100 to 0-1
    return Color.interpolate(
        [stop(s.color, s.position / 100.0) for s in stops],
        space=SAMPLE_SPACE,
        out_space="srgb",
    )


def _to_hex(c: Color) -> Hex:
    r, g, b = (clamp(float(x)) for x in c.clip().coords()[:3])
    alpha = clamp(float(c["alpha"]))
    return rgba_to_hex(
        RGBA(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255), alpha)
    )


def color_at(stops: GradientStops, position: float) -> Hex:
    """Colour the gradient shows at ``position`` (0-100)."""
    return _to_hex(_interpolator(stops)(clamp(float(position), 0, 100) / 100.0))


def sample_gradient(stops: GradientStops, n: int) -> list[Hex]:
    n = max(SAMPLE_MIN, min(int(n), SAMPLE_MAX))
    lerp = _interpolator(stops)
    ts = np.linspace(0.0, 1.0, n, dtype=np.float64)
    return [_to_hex(lerp(float(t))) for t in ts]


def track_preview(stops: GradientStops) -> str:
    """Horizontal strip used behind the stop markers."""
    return f"linear-gradient(to right, {stops.to_css_stop_list()})"


def hue_track(color: HSVA) -> str:
    """Background for the saturation/value area at the colour's hue."""
    return (
        "linear-gradient(to top, #000, transparent), "
        f"linear-gradient(to right, #fff, hsl({round_half_up(color.h)}, 100%, 50%))"
    )


__all__ = ["color_at", "hue_track", "sample_gradient", "track_preview"]
