from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .colors import HSVA, color_to_rgb_string, format_number
from .paint import (
    ConicGradientPaint,
    ImagePaint,
    LinearGradientPaint,
    NoisePaint,
    Paint,
    PatternPaint,
    PresetPaint,
    RadialGradientPaint,
    SolidPaint,
)


@dataclass(frozen=True)
class BackgroundCss:
    background_image: str
    background_repeat: str
    background_blend_mode: str
    background_size: Optional[str] = None
    background_position: Optional[str] = None

    def declarations(self) -> list[tuple[str, str]]:
        """(property, value) pairs in stylesheet order, unset fields left out."""
        pairs = [
            ("background-image", self.background_image),
            ("background-repeat", self.background_repeat),
            ("background-blend-mode", self.background_blend_mode),
            ("background-size", self.background_size),
            ("background-position", self.background_position),
        ]
        return [(prop, value) for prop, value in pairs if value is not None]

    def as_dict(self) -> dict[str, str]:
        """camelCase keys, as a style object; unset fields are omitted."""
        out = {
            "backgroundImage": self.background_image,
            "backgroundRepeat": self.background_repeat,
            "backgroundBlendMode": self.background_blend_mode,
        }
        if self.background_size is not None:
            out["backgroundSize"] = self.background_size
        if self.background_position is not None:
            out["backgroundPosition"] = self.background_position
        return out


def _pattern_image(color: str, tile_size: int) -> str:
    half = format_number(tile_size / 2)
    return ", ".join(
        f"repeating-linear-gradient({axis}deg, {color} 0px, transparent 1px, "
        f"transparent {half}px)"
        for axis in (0, 90)
    )


def to_css(paint: Paint, color: HSVA) -> BackgroundCss:
    """Render ``paint`` as background declarations.

    ``color`` is the editor's flat colour: the fill for solid and pattern
    paints and the fallback when an image or noise paint has no URL.
    """
    flat = color_to_rgb_string(color)
    size: Optional[str] = None
    position: Optional[str] = None

    if isinstance(paint, SolidPaint):
        image = flat
    elif isinstance(paint, LinearGradientPaint):
        image = f"linear-gradient({format_number(paint.angle)}deg, {paint.stops.to_css_stop_list()})"
    elif isinstance(paint, RadialGradientPaint):
        image = f"radial-gradient(circle, {paint.stops.to_css_stop_list()})"
    elif isinstance(paint, ConicGradientPaint):
        image = f"conic-gradient(from {format_number(paint.angle)}deg, {paint.stops.to_css_stop_list()})"
    elif isinstance(paint, ImagePaint):
        image = f"url({paint.url})" if paint.url else flat
        size, position = "cover", "center"
    elif isinstance(paint, PatternPaint):
        image = _pattern_image(flat, paint.tile_size)
        size = f"{paint.tile_size}px {paint.tile_size}px"
    elif isinstance(paint, NoisePaint):
        image = f"url({paint.url})" if paint.url else flat
    elif isinstance(paint, PresetPaint):
        image = paint.css or flat
        size, position = "cover", "center"
    else:  # pragma: no cover
        raise TypeError(f"not a paint: {paint!r}")

    return BackgroundCss(
        background_image=image,
        background_repeat="repeat" if paint.repeat else "no-repeat",
        background_blend_mode=paint.blend_mode,
        background_size=size,
        background_position=position,
    )


def to_clipboard_css(paint: Paint, color: HSVA) -> str:
    return format_clipboard(to_css(paint, color))


def format_clipboard(css: BackgroundCss) -> str:
    """One ``property: value;`` line per declaration, ready for a stylesheet."""
    return "\n".join(f"{prop}: {value};" for prop, value in css.declarations())


def to_inline_style(css: BackgroundCss) -> str:
    return " ".join(f"{prop}: {value};" for prop, value in css.declarations())


__all__ = [
    "BackgroundCss",
    "format_clipboard",
    "to_clipboard_css",
    "to_css",
    "to_inline_style",
]
