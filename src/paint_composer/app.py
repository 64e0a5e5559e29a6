from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from flask import Flask, current_app, jsonify, request

from .colors import (
    color_to_hex,
    color_to_hsl_string,
    color_to_rgb_string,
    hex_to_color,
    hex_to_rgba,
)
from .paint import paint_from_record
from .presets import GRADIENT_PRESETS, PATTERN_PRESETS
from .sampling import sample_gradient
from .serializer import format_clipboard, to_css, to_inline_style
from .session import DEFAULT_SWATCHES, EditorSession
from .stops import GradientStops

log = logging.getLogger(__name__)

EXTENSION_KEY = "paint_composer"

DEFAULT_CONFIG: Mapping[str, Any] = {
    "DEFAULT_COLOR": None,  # hex; None keeps the editor default
    "SWATCHES": list(DEFAULT_SWATCHES),
}

# JSON (camelCase) -> paint parameter names
PAINT_PARAMS = {
    "blendMode": "blend_mode",
    "repeat": "repeat",
    "angle": "angle",
    "url": "url",
    "presetIndex": "preset_index",
    "tileSize": "tile_size",
    "opacity": "opacity",
}

COLOR_SETTERS = {
    "hue": "set_hue",
    "saturation": "set_saturation",
    "value": "set_value",
    "alpha": "set_alpha",
}


def _body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _number(body: Mapping[str, Any], key: str) -> float:
    try:
        value = float(body[key])
    except KeyError:
        raise ValueError(f"missing '{key}'") from None
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be a number") from None
    # the JSON parser lets NaN and Infinity through
    if not math.isfinite(value):
        raise ValueError(f"'{key}' must be a finite number")
    return value


def _session() -> EditorSession:
    return current_app.extensions[EXTENSION_KEY]


def _not_found(what: str, ident: str):
    return jsonify({"error": f"unknown {what} '{ident}'"}), 404


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("PAINT_COMPOSER")
    if config:
        app.config.from_mapping(config)

    app.extensions[EXTENSION_KEY] = EditorSession(
        default_color=app.config["DEFAULT_COLOR"],
        swatches=app.config["SWATCHES"],
    )

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    # ---- stateless helpers ----

    @app.route("/presets")
    def presets():
        return jsonify(
            [{"index": i, "name": p.name, "css": p.css} for i, p in enumerate(GRADIENT_PRESETS)]
        )

    @app.route("/presets/patterns")
    def pattern_presets():
        # 1-based: index 0 is "no pattern"
        return jsonify(
            [{"index": i, "name": p.name, "css": p.css} for i, p in enumerate(PATTERN_PRESETS, 1)]
        )

    @app.route("/convert")
    def convert():
        text = request.args.get("hex", "")
        color = hex_to_color(text)
        if color is None:
            return jsonify({"error": f"invalid color: {text!r}"}), 400
        rgba = hex_to_rgba(text)
        return jsonify(
            {
                "hex": color_to_hex(color),
                "rgba": color_to_rgb_string(color),
                "hsla": color_to_hsl_string(color),
                "hsva": {"h": color.h, "s": color.s, "v": color.v, "a": color.a},
                "rgb": {"r": rgba.r, "g": rgba.g, "b": rgba.b, "a": rgba.a},
            }
        )

    @app.route("/css", methods=["POST"])
    def css():
        body = _body()
        paint = paint_from_record(body.get("paint") or {})
        color = hex_to_color(str(body.get("color", "#FFFFFFFF")))
        if color is None:
            return jsonify({"error": f"invalid color: {body.get('color')!r}"}), 400
        out = to_css(paint, color)
        return jsonify(
            {
                "css": out.as_dict(),
                "clipboard": format_clipboard(out),
                "style": to_inline_style(out),
            }
        )

    @app.route("/sample", methods=["POST"])
    def sample():
        body = _body()
        stops = GradientStops.from_records(body.get("stops") or [])
        try:
            n = int(body.get("n", 21))
        except (TypeError, ValueError, OverflowError):
            return jsonify({"error": "n must be an integer"}), 400
        try:
            palette = sample_gradient(stops, n)
        except Exception as exc:
            log.exception("Gradient sampling failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(palette)

    # ---- the editing session ----

    @app.route("/session")
    def session_state():
        return jsonify(_session().snapshot())

    @app.route("/session/color", methods=["POST"])
    def session_color():
        s = _session()
        body = _body()
        if "format" in body:
            s.color.set_format(str(body["format"]))
        if "hex" in body:
            # malformed text is ignored, the colour stays as it was
            s.color.set_from_hex(str(body["hex"]))
        if "swatch" in body:
            s.apply_swatch(str(body["swatch"]))
        if "paste" in body:
            s.paste(str(body["paste"]))
        if "saturation" in body and "value" in body:
            s.color.set_saturation_value(_number(body, "saturation"), _number(body, "value"))
            body = {k: v for k, v in body.items() if k not in ("saturation", "value")}
        for key, setter in COLOR_SETTERS.items():
            if key in body:
                getattr(s.color, setter)(_number(body, key))
        return jsonify(s.snapshot())

    @app.route("/session/kind", methods=["POST"])
    def session_kind():
        s = _session()
        s.select_kind(str(_body().get("kind", "")))
        return jsonify(s.snapshot())

    @app.route("/session/paint", methods=["POST"])
    def session_paint():
        s = _session()
        body = _body()
        params = {py: body[js] for js, py in PAINT_PARAMS.items() if js in body}
        try:
            s.update_paint(**params)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
        return jsonify(s.snapshot())

    @app.route("/session/stops", methods=["POST"])
    def session_add_stop():
        s = _session()
        body = _body()
        position = _number(body, "position") if "position" in body else None
        stop_id = s.add_stop(position)
        if stop_id is None:
            return jsonify({"error": "the current paint has no gradient stops"}), 409
        return jsonify({"id": stop_id, **s.snapshot()}), 201

    @app.route("/session/stops/<stop_id>", methods=["PATCH"])
    def session_edit_stop(stop_id: str):
        s = _session()
        body = _body()
        stops = s.stops
        if stops is None or stops.get(stop_id) is None:
            return _not_found("stop", stop_id)
        if body.get("select"):
            s.select_stop(stop_id)
        if "position" in body:
            s.move_stop(stop_id, _number(body, "position"))
        return jsonify(s.snapshot())

    @app.route("/session/stops/<stop_id>", methods=["DELETE"])
    def session_remove_stop(stop_id: str):
        s = _session()
        stops = s.stops
        if stops is None or stops.get(stop_id) is None:
            return _not_found("stop", stop_id)
        removed = s.remove_stop(stop_id)
        return jsonify({"removed": removed, **s.snapshot()})

    @app.route("/session/layers", methods=["POST"])
    def session_add_layer():
        s = _session()
        body = _body()
        if "preset" in body:
            try:
                index = int(body["preset"])
            except (TypeError, ValueError, OverflowError):
                return jsonify({"error": "preset must be an integer"}), 400
            layer_id = s.add_preset(index, str(body.get("mode", "add")))
        else:
            layer_id = s.add_layer(str(body.get("kind", "solid")))
        return jsonify({"id": layer_id, **s.snapshot()}), 201

    @app.route("/session/layers", methods=["PUT"])
    def session_load_layers():
        s = _session()
        records = request.get_json(silent=True)
        if not isinstance(records, list):
            return jsonify({"error": "expected a list of layer records"}), 400
        s.load_layers(records)
        return jsonify(s.snapshot())

    @app.route("/session/layers/<layer_id>", methods=["DELETE"])
    def session_remove_layer(layer_id: str):
        s = _session()
        if not s.remove_layer(layer_id):
            return _not_found("layer", layer_id)
        return jsonify(s.snapshot())

    @app.route("/session/layers/<layer_id>/select", methods=["POST"])
    def session_select_layer(layer_id: str):
        s = _session()
        if not s.select_layer(layer_id):
            return _not_found("layer", layer_id)
        return jsonify(s.snapshot())

    @app.route("/session/layers/<layer_id>/toggle", methods=["POST"])
    def session_toggle_layer(layer_id: str):
        s = _session()
        if not s.toggle_layer(layer_id):
            return _not_found("layer", layer_id)
        return jsonify(s.snapshot())

    @app.route("/session/layers/<layer_id>/move", methods=["POST"])
    def session_move_layer(layer_id: str):
        s = _session()
        if s.layers.get(layer_id) is None:
            return _not_found("layer", layer_id)
        moved = s.move_layer(layer_id, int(_number(_body(), "direction")))
        return jsonify({"moved": moved, **s.snapshot()})

    @app.route("/session/layers/<layer_id>/css")
    def session_layer_css(layer_id: str):
        out = _session().layer_css(layer_id)
        if out is None:
            return _not_found("layer", layer_id)
        return jsonify({"css": out.as_dict(), "clipboard": format_clipboard(out)})

    return app
