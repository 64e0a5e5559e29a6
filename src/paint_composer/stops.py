from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from .colors import Hex, clamp, format_number, hex_to_rgba, rgba_to_hex

log = logging.getLogger(__name__)

MIN_STOPS = 2
DEFAULT_POSITION = 50.0

_ID_NUMBER = re.compile(r"^stop-(\d+)$")


@dataclass
class GradientStop:
    id: str
    color: Hex  # '#RRGGBBAA'
    position: float  # 0..100

    def to_css(self) -> str:
        return f"{self.color} {format_number(self.position)}%"


class GradientStops:
    """Stops along the 0-100 gradient axis, always sorted by position.

    Ids are ``stop-<n>`` with ``n`` handed out monotonically, so creation
    order stays recoverable after sorting. There are never fewer than two stops.
    """

    def __init__(self, stops: Iterable[GradientStop], next_id: int | None = None) -> None:
        self._stops: List[GradientStop] = list(stops)
        if len(self._stops) < MIN_STOPS:
            raise ValueError(f"a gradient needs at least {MIN_STOPS} stops")
        if len({s.id for s in self._stops}) != len(self._stops):
            raise ValueError("stop ids must be unique")
        if next_id is None:
            next_id = 1 + max((_id_number(s.id) for s in self._stops), default=-1)
        self._next_id = next_id
        self._sort()
        self.selected_id: Optional[str] = self._stops[0].id

    @classmethod
    def create_default(cls) -> "GradientStops":
        return cls(
            [
                GradientStop("stop-0", "#000000FF", 0.0),
                GradientStop("stop-1", "#FFFFFFFF", 100.0),
            ],
            next_id=2,
        )

    # ---- container protocol ----

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[GradientStop]:
        return iter(self._stops)

    def __getitem__(self, index: int) -> GradientStop:
        return self._stops[index]

    def get(self, stop_id: str) -> Optional[GradientStop]:
        return next((s for s in self._stops if s.id == stop_id), None)

    @property
    def ids(self) -> list[str]:
        return [s.id for s in self._stops]

    @property
    def positions(self) -> list[float]:
        return [s.position for s in self._stops]

    @property
    def selected(self) -> Optional[GradientStop]:
        return self.get(self.selected_id) if self.selected_id else None

    # ---- mutations ----

    def insert_at_click(self, position: float, color: Hex) -> str:
        stop = GradientStop(
            f"stop-{self._next_id}", _canon_color(color), clamp(float(position), 0, 100)
        )
        self._next_id += 1
        self._stops.append(stop)
        self._sort()
        self.selected_id = stop.id
        log.debug("added %s at %s%%", stop.id, stop.position)
        return stop.id

    def insert_default(self, color: Hex) -> str:
        return self.insert_at_click(DEFAULT_POSITION, color)

    def move_stop(self, stop_id: str, position: float) -> bool:
        # called for every drag sample; re-sort each time, not just on release
        stop = self.get(stop_id)
        if stop is None:
            return False
        stop.position = clamp(float(position), 0, 100)
        self._sort()
        return True

    def set_color(self, stop_id: str, color: Hex) -> bool:
        stop = self.get(stop_id)
        if stop is None:
            return False
        stop.color = _canon_color(color)
        return True

    def remove_stop(self, stop_id: str) -> bool:
        if len(self._stops) <= MIN_STOPS:
            log.debug("refusing to remove %s: %d stops is the floor", stop_id, MIN_STOPS)
            return False
        stop = self.get(stop_id)
        if stop is None:
            return False
        self._stops.remove(stop)
        if self.selected_id == stop_id:
            self.selected_id = self._stops[0].id
        self._check()
        return True

    def select(self, stop_id: str) -> bool:
        if self.get(stop_id) is None:
            return False
        self.selected_id = stop_id
        return True

    # ---- rendering / records ----

    def to_css_stop_list(self) -> str:
        return ", ".join(s.to_css() for s in self._stops)

    def to_records(self) -> list[dict[str, Any]]:
        return [{"id": s.id, "color": s.color, "position": s.position} for s in self._stops]

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "GradientStops":
        stops = []
        for rec in records:
            try:
                stops.append(
                    GradientStop(
                        str(rec["id"]),
                        _canon_color(str(rec["color"])),
                        clamp(float(rec["position"]), 0, 100),
                    )
                )
            except (KeyError, TypeError) as exc:
                raise ValueError(f"malformed stop record {rec!r}") from exc
        return cls(stops)

    def copy(self) -> "GradientStops":
        dup = GradientStops(
            [GradientStop(s.id, s.color, s.position) for s in self._stops],
            next_id=self._next_id,
        )
        dup.selected_id = self.selected_id
        return dup

    # ---- internals ----

    def _sort(self) -> None:
        # stable: equal positions keep their relative order
        self._stops.sort(key=lambda s: s.position)
        self._check()

    def _check(self) -> None:
        assert len(self._stops) >= MIN_STOPS, "gradient stop floor violated"


def _id_number(stop_id: str) -> int:
    m = _ID_NUMBER.match(stop_id)
    return int(m.group(1)) if m else -1


def _canon_color(text: str) -> Hex:
    rgba = hex_to_rgba(text)
    if rgba is None:
        raise ValueError(f"invalid hex: {text}")
    return rgba_to_hex(rgba)


__all__ = ["DEFAULT_POSITION", "GradientStop", "GradientStops", "MIN_STOPS"]
