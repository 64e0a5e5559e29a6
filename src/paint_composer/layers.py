from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Literal, Mapping, Optional

from .colors import HSVA, color_to_hex, hex_to_color
from .paint import Paint, PresetPaint, create_paint, paint_from_record, paint_to_record

log = logging.getLogger(__name__)

WHITE = HSVA(0.0, 0.0, 1.0, 1.0)

PresetMode = Literal["add", "replace"]

_ID_NUMBER = re.compile(r"^layer-(\d+)$")


@dataclass
class Layer:
    id: str
    paint: Paint
    visible: bool = True
    # flat colour last edited on this layer: fill for solid/pattern, fallback for image/noise
    color: HSVA = WHITE


def layer_to_record(layer: Layer) -> dict[str, Any]:
    return {
        "id": layer.id,
        **paint_to_record(layer.paint),
        "color": color_to_hex(layer.color),
        "visible": layer.visible,
    }


def layer_from_record(record: Mapping[str, Any]) -> Layer:
    if "id" not in record:
        raise ValueError(f"layer record without id: {record!r}")
    color = hex_to_color(str(record.get("color", "#FFFFFFFF")))
    if color is None:
        raise ValueError(f"invalid layer color {record.get('color')!r}")
    return Layer(
        str(record["id"]),
        paint_from_record(record),
        bool(record.get("visible", True)),
        color,
    )


class LayerStack:
    """Ordered layers, index 0 is the top of the visual stack.

    New layers go on top. Hidden layers stay in the list; they are just not
    rendered. ``selected_id`` is the layer currently open for editing.
    """

    def __init__(self, layers: Iterable[Layer] = ()) -> None:
        self._layers: List[Layer] = list(layers)
        self._next_id = 1 + max((_id_number(l.id) for l in self._layers), default=0)
        self.selected_id: Optional[str] = None

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __getitem__(self, index: int) -> Layer:
        return self._layers[index]

    @property
    def ids(self) -> list[str]:
        return [l.id for l in self._layers]

    def get(self, layer_id: str | None) -> Optional[Layer]:
        return next((l for l in self._layers if l.id == layer_id), None)

    @property
    def selected(self) -> Optional[Layer]:
        return self.get(self.selected_id)

    def visible_layers(self) -> list[Layer]:
        return [l for l in self._layers if l.visible]

    # ---- mutations ----

    def _push(self, paint: Paint) -> str:
        layer = Layer(f"layer-{self._next_id}", paint)
        self._next_id += 1
        self._layers.insert(0, layer)
        self.selected_id = layer.id
        return layer.id

    def add_layer(self, kind: str) -> str:
        layer_id = self._push(create_paint(kind))
        log.debug("added %s layer %s", kind, layer_id)
        return layer_id

    def add_from_preset(self, css: str, mode: str = "add") -> str:
        if mode not in ("add", "replace"):
            raise ValueError(f"unknown preset mode '{mode}'")
        if mode == "replace":
            log.debug("preset replaces %d layers", len(self._layers))
            self._layers.clear()
        return self._push(PresetPaint(css=css))

    def toggle_visible(self, layer_id: str) -> bool:
        layer = self.get(layer_id)
        if layer is None:
            return False
        layer.visible = not layer.visible
        return True

    def remove_layer(self, layer_id: str) -> bool:
        layer = self.get(layer_id)
        if layer is None:
            return False
        self._layers.remove(layer)
        if self.selected_id == layer_id:
            self.selected_id = self._layers[0].id if self._layers else None
        return True

    def move_layer(self, layer_id: str, direction: int) -> bool:
        """Swap one step up (-1) or down (+1); no-op at either end."""
        layer = self.get(layer_id)
        if layer is None or direction == 0:
            return False
        index = self._layers.index(layer)
        new_index = index + (1 if direction > 0 else -1)
        if not 0 <= new_index < len(self._layers):
            log.debug("move of %s by %d is out of bounds", layer_id, direction)
            return False
        self._layers.insert(new_index, self._layers.pop(index))
        return True

    def replace_paint(self, layer_id: str, paint: Paint) -> bool:
        layer = self.get(layer_id)
        if layer is None:
            return False
        layer.paint = paint
        return True

    def select(self, layer_id: str | None) -> bool:
        if layer_id is not None and self.get(layer_id) is None:
            return False
        self.selected_id = layer_id
        return True

    # ---- records ----

    def to_records(self) -> list[dict[str, Any]]:
        return [layer_to_record(l) for l in self._layers]

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "LayerStack":
        layers = [layer_from_record(r) for r in records]
        if len({l.id for l in layers}) != len(layers):
            raise ValueError("layer ids must be unique")
        return cls(layers)


def _id_number(layer_id: str) -> int:
    m = _ID_NUMBER.match(layer_id)
    return int(m.group(1)) if m else 0


__all__ = ["Layer", "LayerStack", "PresetMode", "layer_from_record", "layer_to_record"]
