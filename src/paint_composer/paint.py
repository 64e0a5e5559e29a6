"""Paint kinds as a tagged union: one dataclass per kind, each with only its own fields."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Mapping, Union, get_args

from .colors import clamp, parse_blend_mode
from .presets import PATTERN_PRESETS
from .stops import GradientStops

PaintKind = Literal[
    "solid",
    "linear-gradient",
    "radial-gradient",
    "conic-gradient",
    "image",
    "pattern",
    "noise",
    "preset",
]
PAINT_KINDS: tuple[str, ...] = get_args(PaintKind)
# what a user can pick in the editor; "preset" only comes from the catalog
EDITABLE_KINDS: tuple[str, ...] = PAINT_KINDS[:-1]
GRADIENT_KINDS: tuple[str, ...] = ("linear-gradient", "radial-gradient", "conic-gradient")

DEFAULT_ANGLE = 90.0
TILE_MIN, TILE_MAX = 4, 64
DEFAULT_TILE = 20
DEFAULT_NOISE_OPACITY = 0.3


@dataclass
class _PaintBase:
    kind: ClassVar[str]
    blend_mode: str = "normal"
    repeat: bool = False


@dataclass
class SolidPaint(_PaintBase):
    kind: ClassVar[str] = "solid"


@dataclass
class _GradientPaint(_PaintBase):
    stops: GradientStops = field(default_factory=GradientStops.create_default)


@dataclass
class LinearGradientPaint(_GradientPaint):
    kind: ClassVar[str] = "linear-gradient"
    angle: float = DEFAULT_ANGLE


@dataclass
class RadialGradientPaint(_GradientPaint):
    kind: ClassVar[str] = "radial-gradient"


@dataclass
class ConicGradientPaint(_GradientPaint):
    kind: ClassVar[str] = "conic-gradient"
    angle: float = DEFAULT_ANGLE


@dataclass
class ImagePaint(_PaintBase):
    kind: ClassVar[str] = "image"
    url: str = ""


@dataclass
class PatternPaint(_PaintBase):
    kind: ClassVar[str] = "pattern"
    preset_index: int = 0  # 0 = none, else 1-based into PATTERN_PRESETS
    tile_size: int = DEFAULT_TILE

    def __post_init__(self) -> None:
        self.preset_index = int(clamp(int(self.preset_index), 0, len(PATTERN_PRESETS)))
        self.tile_size = int(clamp(int(self.tile_size), TILE_MIN, TILE_MAX))


@dataclass
class NoisePaint(_PaintBase):
    kind: ClassVar[str] = "noise"
    url: str = ""
    opacity: float = DEFAULT_NOISE_OPACITY

    def __post_init__(self) -> None:
        self.opacity = clamp(float(self.opacity))


@dataclass
class PresetPaint(_PaintBase):
    """A catalog gradient kept as its opaque CSS string, not decomposed into stops."""

    kind: ClassVar[str] = "preset"
    css: str = ""


Paint = Union[
    SolidPaint,
    LinearGradientPaint,
    RadialGradientPaint,
    ConicGradientPaint,
    ImagePaint,
    PatternPaint,
    NoisePaint,
    PresetPaint,
]
GradientPaint = Union[LinearGradientPaint, RadialGradientPaint, ConicGradientPaint]

PAINT_TYPES: dict[str, type] = {
    cls.kind: cls
    for cls in (
        SolidPaint,
        LinearGradientPaint,
        RadialGradientPaint,
        ConicGradientPaint,
        ImagePaint,
        PatternPaint,
        NoisePaint,
        PresetPaint,
    )
}


def parse_kind(val: str | None) -> str:
    k = (val or "").strip().lower()
    if k not in PAINT_KINDS:
        raise ValueError(f"unknown paint kind '{val}'")
    return k


def is_gradient(paint: Paint) -> bool:
    return paint.kind in GRADIENT_KINDS


def create_paint(kind: str) -> Paint:
    """Default paint for ``kind``; gradients start with black@0 / white@100."""
    return PAINT_TYPES[parse_kind(kind)]()


def convert_paint(paint: Paint, kind: str) -> Paint:
    """Switch ``paint`` to another kind.

    Blend mode and repeat always carry over. Between gradient kinds the stop
    collection and angle are kept, so flipping linear -> conic -> linear is lossless.
    """
    kind = parse_kind(kind)
    if kind == paint.kind:
        return paint
    new = create_paint(kind)
    new.blend_mode = paint.blend_mode
    new.repeat = paint.repeat
    if is_gradient(paint) and is_gradient(new):
        new.stops = paint.stops  # type: ignore[union-attr]
        if hasattr(new, "angle"):
            new.angle = getattr(paint, "angle", DEFAULT_ANGLE)  # type: ignore[union-attr]
    return new


def _finite(value: Any, name: str) -> float:
    x = float(value)
    if not math.isfinite(x):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return x


def update_paint(paint: Paint, **params: Any) -> Paint:
    """Apply editor control values; unknown or irrelevant keys are ignored."""
    if "blend_mode" in params:
        paint.blend_mode = parse_blend_mode(params["blend_mode"])
    if "repeat" in params:
        paint.repeat = bool(params["repeat"])

    if isinstance(paint, (LinearGradientPaint, ConicGradientPaint)) and "angle" in params:
        paint.angle = _finite(params["angle"], "angle")
    elif isinstance(paint, (ImagePaint, NoisePaint)) and "url" in params:
        paint.url = str(params["url"] or "")
    elif isinstance(paint, PresetPaint) and "css" in params:
        paint.css = str(params["css"] or "")

    if isinstance(paint, PatternPaint):
        if "preset_index" in params:
            index = _finite(params["preset_index"], "preset_index")
            paint.preset_index = int(clamp(index, 0, len(PATTERN_PRESETS)))
        if "tile_size" in params:
            size = _finite(params["tile_size"], "tile_size")
            paint.tile_size = int(clamp(size, TILE_MIN, TILE_MAX))
    if isinstance(paint, NoisePaint) and "opacity" in params:
        paint.opacity = clamp(_finite(params["opacity"], "opacity"))
    return paint


# ----------------------------- records --------------------------------------

_RECORD_KEYS = {
    "blend_mode": "blendMode",
    "preset_index": "presetIndex",
    "tile_size": "tileSize",
}


def paint_to_record(paint: Paint) -> dict[str, Any]:
    """Plain, ordered mapping: kind first, then shared fields, then kind-specific ones."""
    rec: dict[str, Any] = {
        "kind": paint.kind,
        "blendMode": paint.blend_mode,
        "repeat": paint.repeat,
    }
    if isinstance(paint, (LinearGradientPaint, ConicGradientPaint)):
        rec["angle"] = paint.angle
    if is_gradient(paint):
        rec["stops"] = paint.stops.to_records()  # type: ignore[union-attr]
    elif isinstance(paint, ImagePaint):
        rec["url"] = paint.url
    elif isinstance(paint, PatternPaint):
        rec["presetIndex"] = paint.preset_index
        rec["tileSize"] = paint.tile_size
    elif isinstance(paint, NoisePaint):
        rec["url"] = paint.url
        rec["opacity"] = paint.opacity
    elif isinstance(paint, PresetPaint):
        rec["css"] = paint.css
    return rec


def paint_from_record(record: Mapping[str, Any]) -> Paint:
    paint = create_paint(record.get("kind"))
    params = {
        py: record[js] for py, js in _RECORD_KEYS.items() if js in record
    }
    for key in ("repeat", "angle", "url", "opacity", "css"):
        if key in record:
            params[key] = record[key]
    try:
        update_paint(paint, **params)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"malformed paint record: {exc}") from exc
    if is_gradient(paint) and "stops" in record:
        paint.stops = GradientStops.from_records(record["stops"])  # type: ignore[union-attr]
    return paint


__all__ = [
    "ConicGradientPaint",
    "EDITABLE_KINDS",
    "GRADIENT_KINDS",
    "GradientPaint",
    "ImagePaint",
    "LinearGradientPaint",
    "NoisePaint",
    "PAINT_KINDS",
    "Paint",
    "PaintKind",
    "PatternPaint",
    "PresetPaint",
    "RadialGradientPaint",
    "SolidPaint",
    "convert_paint",
    "create_paint",
    "is_gradient",
    "paint_from_record",
    "paint_to_record",
    "parse_kind",
    "update_paint",
]
