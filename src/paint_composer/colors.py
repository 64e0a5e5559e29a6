"""HSVA colour model and conversions to the CSS text forms (HEXA, RGBA, HSLA).

HSVA is the canonical in-memory form: hue in degrees, everything else in [0, 1].
Channels in RGBA are 0-255 integers, alpha stays a 0-1 float.
"""

from __future__ import annotations

import math
import re
import string
from dataclasses import dataclass
from typing import Optional

Hex = str

BLEND_MODES: tuple[str, ...] = (
    "normal",
    "multiply",
    "screen",
    "overlay",
    "darken",
    "lighten",
    "color-dodge",
    "color-burn",
    "hard-light",
    "soft-light",
    "difference",
    "exclusion",
    "hue",
    "saturation",
    "color",
    "luminosity",
)

# first "#rgb", "#rgba", "#rrggbb" or "#rrggbbaa" in free text
_HEX_IN_TEXT = re.compile(
    r"#([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})\b", re.IGNORECASE
)


@dataclass(frozen=True)
class HSVA:
    h: float  # 0-360
    s: float  # 0-1
    v: float  # 0-1
    a: float = 1.0  # 0-1


@dataclass(frozen=True)
class RGBA:
    r: int  # 0-255
    g: int  # 0-255
    b: int  # 0-255
    a: float = 1.0  # 0-1


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    if math.isnan(x):
        return lo
    return hi if x > hi else lo if x < lo else x


def round_half_up(x: float) -> int:
    # JS Math.round semantics; round() would pick the even neighbour at .5
    return int((x + 0.5) // 1)


def format_number(x: float, places: int = 3) -> str:
    """Print ``x`` the way a JS number rounded to ``places`` decimals prints."""
    q = round(float(x), places)
    if q == 0:
        q = 0.0  # no "-0"
    text = f"{q:.{places}f}".rstrip("0").rstrip(".")
    return text or "0"


# ----------------------------- parsing --------------------------------------


def hex_to_rgba(text: str) -> Optional[RGBA]:
    """Parse 3/4/6/8-digit hex, with or without '#'. None when malformed."""
    raw = (text or "").strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) not in (3, 4, 6, 8) or not all(c in string.hexdigits for c in raw):
        return None
    if len(raw) <= 4:
        raw = "".join(ch * 2 for ch in raw)
    r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
    a = int(raw[6:8], 16) / 255 if len(raw) == 8 else 1.0
    return RGBA(r, g, b, a)


def find_hex(text: str) -> Optional[Hex]:
    """Locate the first hex colour literal inside pasted text."""
    m = _HEX_IN_TEXT.search(text or "")
    return m.group(0) if m else None


# ----------------------------- RGB <-> HSV ----------------------------------


def _hsv_components(r: float, g: float, b: float) -> tuple[Optional[float], float, float]:
    r, g, b = clamp(r, 0, 255) / 255, clamp(g, 0, 255) / 255, clamp(b, 0, 255) / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn

    h: Optional[float] = None  # undefined for greys
    if d != 0:
        if mx == r:
            h = ((g - b) / d + (6 if g < b else 0)) * 60
        elif mx == g:
            h = ((b - r) / d + 2) * 60
        else:
            h = ((r - g) / d + 4) * 60

    s = 0.0 if mx == 0 else d / mx
    return h, s, mx


def to_hsv(r: float, g: float, b: float, a: float = 1.0) -> HSVA:
    """RGB(0-255) -> HSVA. Greys get hue 0; use for fresh intake like swatches."""
    h, s, v = _hsv_components(r, g, b)
    return HSVA(0.0 if h is None else h, s, v, clamp(a))


def to_hsv_preserving_hue(
    r: float, g: float, b: float, a: float = 1.0, previous_hue: float | None = None
) -> HSVA:
    """Like :func:`to_hsv`, but greys keep ``previous_hue`` instead of dropping to 0."""
    h, s, v = _hsv_components(r, g, b)
    if h is None:
        h = 0.0 if previous_hue is None else clamp(previous_hue, 0, 360)
    return HSVA(h, s, v, clamp(a))


def from_hsv(color: HSVA) -> RGBA:
    h = clamp(color.h, 0, 360)
    s = clamp(color.s)
    v = clamp(color.v)

    c = v * s
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = v - c

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGBA(
        round_half_up((r + m) * 255),
        round_half_up((g + m) * 255),
        round_half_up((b + m) * 255),
        clamp(color.a),
    )


# ----------------------------- text forms -----------------------------------


def hex_to_color(text: str, previous_hue: float | None = None) -> Optional[HSVA]:
    rgba = hex_to_rgba(text)
    if rgba is None:
        return None
    return to_hsv_preserving_hue(rgba.r, rgba.g, rgba.b, rgba.a, previous_hue)


def rgba_to_hex(rgba: RGBA) -> Hex:
    """Always 8 digits, upper case: '#RRGGBBAA'."""
    channels = (rgba.r, rgba.g, rgba.b, clamp(rgba.a) * 255)
    return "#" + "".join(f"{round_half_up(clamp(n, 0, 255)):02X}" for n in channels)


def rgba_to_string(rgba: RGBA) -> str:
    return (
        f"rgba({round_half_up(rgba.r)}, {round_half_up(rgba.g)}, "
        f"{round_half_up(rgba.b)}, {format_number(clamp(rgba.a))})"
    )


def color_to_hex(color: HSVA) -> Hex:
    return rgba_to_hex(from_hsv(color))


def color_to_rgb_string(color: HSVA) -> str:
    return rgba_to_string(from_hsv(color))


def color_to_hsl_string(color: HSVA) -> str:
    s, v = clamp(color.s), clamp(color.v)
    l = v - v * s / 2
    sl = 0.0 if l in (0, 1) else (v - l) / min(l, 1 - l)
    return (
        f"hsla({round_half_up(clamp(color.h, 0, 360))}, {round_half_up(sl * 100)}%, "
        f"{round_half_up(l * 100)}%, {format_number(clamp(color.a))})"
    )


def parse_blend_mode(val: str | None) -> str:
    m = (val or "normal").strip().lower()
    return m if m in BLEND_MODES else "normal"


__all__ = [
    "BLEND_MODES",
    "HSVA",
    "RGBA",
    "clamp",
    "color_to_hex",
    "color_to_hsl_string",
    "color_to_rgb_string",
    "find_hex",
    "format_number",
    "from_hsv",
    "hex_to_color",
    "hex_to_rgba",
    "parse_blend_mode",
    "rgba_to_hex",
    "rgba_to_string",
    "round_half_up",
    "to_hsv",
    "to_hsv_preserving_hue",
]
