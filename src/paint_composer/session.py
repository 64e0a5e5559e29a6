from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, Sequence

from .color_state import ColorState
from .colors import HSVA, color_to_hex, find_hex
from .layers import LayerStack
from .paint import (
    EDITABLE_KINDS,
    Paint,
    SolidPaint,
    convert_paint,
    is_gradient,
    paint_to_record,
    parse_kind,
)
from .paint import update_paint as apply_params
from .presets import gradient_preset
from .sampling import hue_track, track_preview
from .serializer import BackgroundCss, format_clipboard, to_css
from .stops import GradientStops

log = logging.getLogger(__name__)

ChangeListener = Callable[[BackgroundCss, str], None]

DEFAULT_SWATCHES: tuple[str, ...] = (
    "#ff4d4f",
    "#f759ab",
    "#9254de",
    "#597ef7",
    "#40a9ff",
    "#36cfc9",
    "#73d13d",
    "#bae637",
    "#ffd666",
    "#ffa940",
    "#ff7a45",
    "#8c8c8c",
    "#009688",
    "#FFD439",
)


class EditorSession:
    """One editing session: colour state, the paint being edited and the layer stack.

    The paint being edited is the selected layer's paint, or a free-standing
    draft when no layer is selected. After every mutation the listeners get
    the serializer output for that paint plus its clipboard text, in order.
    """

    def __init__(
        self,
        default_color: str | None = None,
        swatches: Sequence[str] | None = None,
        layers: LayerStack | None = None,
    ) -> None:
        self.color = ColorState.from_hex(default_color) if default_color else ColorState()
        self.layers = layers if layers is not None else LayerStack()
        self.swatches: List[str] = list(swatches or DEFAULT_SWATCHES)
        self._draft: Paint = SolidPaint()
        self._listeners: List[ChangeListener] = []
        self._loading = False
        self._batch_depth = 0
        self.color.subscribe(self._on_color)

    # ---- observers ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        if self._batch_depth:
            return
        css = self.css()
        clipboard = format_clipboard(css)
        for listener in list(self._listeners):
            listener(css, clipboard)

    @contextmanager
    def _batch(self) -> Iterator[None]:
        # several model writes, one notification
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
        self._emit()

    def _on_color(self, color: HSVA) -> None:
        if self._loading:
            return
        # synchronous write-through before anything is serialized
        stops = self.stops
        if stops is not None and stops.selected_id is not None:
            stops.set_color(stops.selected_id, color_to_hex(color))
        layer = self.layers.selected
        if layer is not None:
            layer.color = color
        self._emit()

    def _load_color(self, color: HSVA) -> None:
        # show a stored colour without writing it anywhere
        self._loading = True
        try:
            self.color.set_color(color)
        finally:
            self._loading = False

    # ---- reads ----

    @property
    def paint(self) -> Paint:
        layer = self.layers.selected
        return layer.paint if layer is not None else self._draft

    @property
    def stops(self) -> Optional[GradientStops]:
        paint = self.paint
        return paint.stops if is_gradient(paint) else None  # type: ignore[union-attr]

    def css(self) -> BackgroundCss:
        return to_css(self.paint, self.color.color)

    def clipboard_css(self) -> str:
        return format_clipboard(self.css())

    def layer_css(self, layer_id: str) -> Optional[BackgroundCss]:
        """Preview for one layer on its own; layers are never composited."""
        layer = self.layers.get(layer_id)
        if layer is None:
            return None
        return to_css(layer.paint, layer.color)

    def snapshot(self) -> dict[str, Any]:
        stops = self.stops
        css = self.css()
        return {
            "color": {
                "format": self.color.format,
                "text": self.color.current_text(),
                "hex": self.color.hex,
                "hsva": {
                    "h": self.color.color.h,
                    "s": self.color.color.s,
                    "v": self.color.color.v,
                    "a": self.color.color.a,
                },
            },
            "paint": paint_to_record(self.paint),
            "selectedStopId": stops.selected_id if stops is not None else None,
            "layers": self.layers.to_records(),
            "selectedLayerId": self.layers.selected_id,
            "swatches": list(self.swatches),
            # backgrounds for the picker area and the stop track
            "previews": {
                "svArea": hue_track(self.color.color),
                "stopTrack": track_preview(stops) if stops is not None else None,
            },
            "css": css.as_dict(),
            "clipboard": format_clipboard(css),
        }

    # ---- colour intake ----

    def apply_swatch(self, text: str) -> bool:
        return self.color.set_from_swatch(text)

    def paste(self, text: str) -> bool:
        """Pull the first hex literal out of pasted CSS and edit it as a solid fill."""
        found = find_hex(text)
        if found is None:
            log.debug("paste without a hex colour: %r", text[:80])
            return False
        with self._batch():
            # switch first so the pasted colour does not land in a gradient stop
            self._set_paint(convert_paint(self.paint, "solid"))
            self.color.set_from_hex(found)
        return True

    # ---- paint ----

    def _set_paint(self, paint: Paint) -> None:
        layer = self.layers.selected
        if layer is not None:
            layer.paint = paint
        else:
            self._draft = paint

    def select_kind(self, kind: str) -> Paint:
        kind = parse_kind(kind)
        if kind not in EDITABLE_KINDS:
            raise ValueError(f"'{kind}' paints come from the preset catalog")
        paint = convert_paint(self.paint, kind)
        self._set_paint(paint)
        log.debug("editing %s paint", kind)
        self._emit()
        return paint

    def update_paint(self, **params: Any) -> Paint:
        paint = apply_params(self.paint, **params)
        self._emit()
        return paint

    # ---- gradient stops ----

    def add_stop(self, position: float | None = None) -> Optional[str]:
        """New stop in the current colour: at ``position`` (track click) or at 50."""
        stops = self.stops
        if stops is None:
            return None
        if position is None:
            stop_id = stops.insert_default(self.color.hex)
        else:
            stop_id = stops.insert_at_click(position, self.color.hex)
        self._emit()
        return stop_id

    def move_stop(self, stop_id: str, position: float) -> bool:
        stops = self.stops
        if stops is None or not stops.move_stop(stop_id, position):
            return False
        self._emit()
        return True

    def remove_stop(self, stop_id: str) -> bool:
        stops = self.stops
        if stops is None or not stops.remove_stop(stop_id):
            return False
        self._emit()
        return True

    def select_stop(self, stop_id: str) -> bool:
        stops = self.stops
        if stops is None or not stops.select(stop_id):
            return False
        # greys keep the hue the editor is showing
        self.color.set_from_hex(stops.get(stop_id).color)  # type: ignore[union-attr]
        return True

    # ---- layers ----

    def _open_selected_layer(self) -> None:
        layer = self.layers.selected
        if layer is not None:
            self._load_color(layer.color)

    def add_layer(self, kind: str) -> str:
        kind = parse_kind(kind)
        if kind not in EDITABLE_KINDS:
            raise ValueError(f"'{kind}' layers come from the preset catalog")
        layer_id = self.layers.add_layer(kind)
        self._open_selected_layer()
        self._emit()
        return layer_id

    def add_preset(self, index: int, mode: str = "add") -> str:
        preset = gradient_preset(index)
        layer_id = self.layers.add_from_preset(preset.css, mode)
        log.debug("preset %r -> %s (%s)", preset.name, layer_id, mode)
        self._open_selected_layer()
        self._emit()
        return layer_id

    def select_layer(self, layer_id: str | None) -> bool:
        if not self.layers.select(layer_id):
            return False
        self._open_selected_layer()
        self._emit()
        return True

    def toggle_layer(self, layer_id: str) -> bool:
        if not self.layers.toggle_visible(layer_id):
            return False
        self._emit()
        return True

    def remove_layer(self, layer_id: str) -> bool:
        was_selected = self.layers.selected_id == layer_id
        if not self.layers.remove_layer(layer_id):
            return False
        if was_selected:
            self._open_selected_layer()
        self._emit()
        return True

    def move_layer(self, layer_id: str, direction: int) -> bool:
        if not self.layers.move_layer(layer_id, direction):
            return False
        self._emit()
        return True

    def load_layers(self, records: Sequence[dict[str, Any]]) -> None:
        """Restore a stack saved with ``layers.to_records()``."""
        self.layers = LayerStack.from_records(records)
        if len(self.layers):
            self.layers.select(self.layers[0].id)
            self._open_selected_layer()
        self._emit()


__all__ = ["ChangeListener", "DEFAULT_SWATCHES", "EditorSession"]
