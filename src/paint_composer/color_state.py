from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Literal, get_args

from .colors import (
    HSVA,
    RGBA,
    Hex,
    clamp,
    color_to_hex,
    color_to_hsl_string,
    color_to_rgb_string,
    find_hex,
    from_hsv,
    hex_to_color,
    hex_to_rgba,
    to_hsv,
)

log = logging.getLogger(__name__)

ColorFormat = Literal["HEXA", "RGBA", "HSLA"]
COLOR_FORMATS: tuple[str, ...] = get_args(ColorFormat)

Listener = Callable[[HSVA], None]

DEFAULT_COLOR = HSVA(180.0, 0.5, 0.7, 1.0)

_RENDERERS: dict[str, Callable[[HSVA], str]] = {
    "HEXA": color_to_hex,
    "RGBA": color_to_rgb_string,
    "HSLA": color_to_hsl_string,
}


class ColorState:
    """One editable HSVA colour plus the text format it is displayed in.

    Every setter clamps its input, touches only its own component and then
    calls the listeners synchronously, in subscription order.
    """

    def __init__(self, color: HSVA = DEFAULT_COLOR, fmt: ColorFormat = "HEXA") -> None:
        self._color = color
        self._format: ColorFormat = fmt
        self._listeners: List[Listener] = []

    @classmethod
    def from_hex(cls, text: str, fmt: ColorFormat = "HEXA") -> "ColorState":
        rgba = hex_to_rgba(text)
        if rgba is None:
            raise ValueError(f"invalid hex: {text}")
        return cls(to_hsv(rgba.r, rgba.g, rgba.b, rgba.a), fmt)

    # ---- observers ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self._color)

    # ---- reads ----

    @property
    def color(self) -> HSVA:
        return self._color

    @property
    def format(self) -> ColorFormat:
        return self._format

    @property
    def rgba(self) -> RGBA:
        return from_hsv(self._color)

    @property
    def hex(self) -> Hex:
        return color_to_hex(self._color)

    def current_text(self) -> str:
        return _RENDERERS[self._format](self._color)

    # ---- writes ----

    def set_color(self, color: HSVA) -> None:
        self._color = HSVA(
            clamp(color.h, 0, 360), clamp(color.s), clamp(color.v), clamp(color.a)
        )
        self._changed()

    def set_from_hex(self, text: str) -> bool:
        """Typed or pasted hex. Greys keep the current hue; bad text changes nothing."""
        color = hex_to_color(text, previous_hue=self._color.h)
        if color is None:
            log.debug("ignoring malformed hex %r", text)
            return False
        self._color = color
        self._changed()
        return True

    def set_from_swatch(self, text: str) -> bool:
        """Fresh intake: greys reset hue to 0."""
        rgba = hex_to_rgba(text)
        if rgba is None:
            log.debug("ignoring malformed swatch %r", text)
            return False
        self._color = to_hsv(rgba.r, rgba.g, rgba.b, rgba.a)
        self._changed()
        return True

    def paste(self, text: str) -> bool:
        found = find_hex(text)
        return found is not None and self.set_from_hex(found)

    def set_hue(self, degrees: float) -> None:
        self._color = replace(self._color, h=clamp(float(degrees), 0, 360))
        self._changed()

    def set_saturation(self, ratio: float) -> None:
        self._color = replace(self._color, s=clamp(float(ratio)))
        self._changed()

    def set_value(self, ratio: float) -> None:
        self._color = replace(self._color, v=clamp(float(ratio)))
        self._changed()

    def set_saturation_value(self, s: float, v: float) -> None:
        # one SV-area drag sample moves both axes at once
        self._color = replace(self._color, s=clamp(float(s)), v=clamp(float(v)))
        self._changed()

    def set_alpha(self, ratio: float) -> None:
        self._color = replace(self._color, a=clamp(float(ratio)))
        self._changed()

    def set_format(self, fmt: str) -> None:
        """Display switch only; the colour itself is untouched."""
        key = (fmt or "").strip().upper()
        if key not in COLOR_FORMATS:
            raise ValueError(f"unknown color format '{fmt}'")
        self._format = key  # type: ignore[assignment]
        self._changed()


__all__ = ["COLOR_FORMATS", "ColorFormat", "ColorState", "DEFAULT_COLOR"]
