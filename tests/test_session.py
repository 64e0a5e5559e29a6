import pytest

from paint_composer.colors import HSVA, color_to_hex
from paint_composer.paint import LinearGradientPaint, SolidPaint
from paint_composer.session import DEFAULT_SWATCHES, EditorSession


@pytest.fixture
def session():
    return EditorSession()


@pytest.fixture
def events(session):
    seen = []
    session.subscribe(lambda css, clipboard: seen.append((css, clipboard)))
    return seen


def test_starts_as_solid_draft(session):
    assert isinstance(session.paint, SolidPaint)
    assert session.stops is None
    assert len(session.layers) == 0
    assert session.swatches == list(DEFAULT_SWATCHES)


def test_every_color_edit_notifies(session, events):
    session.color.set_hue(10)
    session.color.set_alpha(0.5)
    assert len(events) == 2
    css, clipboard = events[-1]
    assert css.background_image.startswith("rgba(")
    assert css.background_image.endswith(", 0.5)")
    assert clipboard.startswith("background-image: rgba(")


def test_color_edit_writes_through_to_selected_stop(session, events):
    session.select_kind("linear-gradient")
    assert session.stops.selected_id == "stop-0"
    session.color.set_from_hex("#ff0000")
    assert session.stops.get("stop-0").color == "#FF0000FF"
    # the notification already carries the new stop colour
    css, _ = events[-1]
    assert css.background_image == "linear-gradient(90deg, #FF0000FF 0%, #FFFFFFFF 100%)"


def test_drag_samples_each_reserialize(session, events):
    session.select_kind("linear-gradient")
    stop_id = session.add_stop(10)
    images = []
    for pos in (20, 40, 60):
        session.move_stop(stop_id, pos)
        images.append(events[-1][0].background_image)
    assert [f" {p}%," in img for p, img in zip((20, 40, 60), images)] == [True] * 3


def test_select_stop_loads_its_color_keeping_hue(session):
    session.select_kind("linear-gradient")
    hue = session.color.color.h
    assert session.select_stop("stop-1")
    assert session.color.hex == "#FFFFFFFF"
    assert session.color.color.h == hue
    assert session.stops.get("stop-1").color == "#FFFFFFFF"


def test_add_stop_uses_current_color_and_selects_it(session):
    session.select_kind("radial-gradient")
    session.color.set_from_swatch("#00ff00")  # also recolours stop-0
    stop_id = session.add_stop()
    assert session.stops.selected_id == stop_id
    assert session.stops.get(stop_id).color == "#00FF00FF"
    assert session.stops.get(stop_id).position == 50


def test_stop_ops_without_gradient(session, events):
    assert session.add_stop() is None
    assert session.move_stop("stop-0", 10) is False
    assert session.select_stop("stop-0") is False
    assert events == []


def test_refused_removal_does_not_notify(session, events):
    session.select_kind("conic-gradient")
    events.clear()
    assert session.remove_stop("stop-0") is False
    assert len(session.stops) == 2
    assert events == []


def test_kind_switch_keeps_stops(session):
    session.select_kind("linear-gradient")
    stop_id = session.add_stop(30)
    session.select_kind("conic-gradient")
    assert session.stops.get(stop_id) is not None
    session.select_kind("pattern")
    session.select_kind("linear-gradient")
    assert session.stops.get(stop_id) is None


def test_preset_kind_not_selectable(session):
    with pytest.raises(ValueError):
        session.select_kind("preset")


def test_paste_switches_to_solid_without_touching_stops(session, events):
    session.select_kind("linear-gradient")
    stops = session.stops
    events.clear()
    assert session.paste("color: #0000ff;")
    assert isinstance(session.paint, SolidPaint)
    assert stops.get("stop-0").color == "#000000FF"
    assert len(events) == 1
    assert events[0][0].background_image == "rgba(0, 0, 255, 1)"
    assert session.paste("nothing here") is False


def test_update_paint(session, events):
    session.select_kind("pattern")
    session.update_paint(tile_size=32, blend_mode="overlay", repeat=True)
    css = events[-1][0]
    assert css.background_size == "32px 32px"
    assert css.background_blend_mode == "overlay"
    assert css.background_repeat == "repeat"


def test_layers_keep_their_own_flat_color(session):
    first = session.add_layer("solid")
    assert session.color.hex == "#FFFFFFFF"  # new layers start white
    session.color.set_from_hex("#ff0000")
    second = session.add_layer("solid")
    assert session.layers.selected_id == second
    assert session.css().background_image == "rgba(255, 255, 255, 1)"
    assert session.layer_css(first).background_image == "rgba(255, 0, 0, 1)"

    session.select_layer(first)
    assert session.color.hex == "#FF0000FF"


def test_opening_a_gradient_layer_leaves_its_stops_alone(session):
    grad = session.add_layer("linear-gradient")
    session.color.set_from_hex("#123456")
    session.add_layer("solid")
    session.color.set_from_hex("#abcdef")
    session.select_layer(grad)
    assert isinstance(session.paint, LinearGradientPaint)
    assert session.paint.stops.get("stop-0").color == "#123456FF"
    assert session.paint.stops.get("stop-1").color == "#FFFFFFFF"
    assert session.color.hex == "#123456FF"


def test_edits_follow_the_selected_layer(session):
    a = session.add_layer("solid")
    session.add_layer("solid")
    session.select_kind("image")
    session.update_paint(url="bg.png")
    assert session.layer_css(a).background_image == "rgba(255, 255, 255, 1)"
    assert session.css().background_image == "url(bg.png)"


def test_preset_replace_and_add(session):
    for _ in range(3):
        session.add_layer("solid")
    session.add_preset(3, "replace")
    assert len(session.layers) == 1
    assert session.css().background_image == "linear-gradient(0deg, #08AEEA 0%, #2AF598 100%)"
    layer_id = session.add_preset(1, "add")
    assert session.layers.ids[0] == layer_id
    with pytest.raises(ValueError):
        session.add_preset(99)


def test_remove_selected_layer_opens_next(session):
    bottom = session.add_layer("solid")
    session.color.set_from_hex("#00ff00")
    top = session.add_layer("solid")
    assert session.remove_layer(top)
    assert session.layers.selected_id == bottom
    assert session.color.hex == "#00FF00FF"
    assert session.remove_layer(bottom)
    assert session.layers.selected_id is None
    assert isinstance(session.paint, SolidPaint)
    assert session.remove_layer("layer-99") is False


def test_toggle_and_move_notify(session, events):
    a = session.add_layer("solid")
    b = session.add_layer("noise")
    events.clear()
    assert session.toggle_layer(a)
    assert session.move_layer(b, 1)
    assert session.move_layer(b, 1) is False
    assert len(events) == 2
    assert session.layers.ids == [a, b]


def test_load_layers_opens_top_layer(session):
    other = EditorSession()
    other.add_layer("solid")
    other.color.set_color(HSVA(240, 1, 1, 1))
    other.add_layer("linear-gradient")
    records = other.layers.to_records()

    session.load_layers(records)
    assert session.layers.to_records() == records
    assert session.layers.selected_id == records[0]["id"]
    assert isinstance(session.paint, LinearGradientPaint)


def test_snapshot_shape(session):
    session.add_layer("linear-gradient")
    snap = session.snapshot()
    assert snap["paint"]["kind"] == "linear-gradient"
    assert snap["selectedStopId"] == "stop-0"
    assert snap["selectedLayerId"] == snap["layers"][0]["id"]
    assert snap["css"]["backgroundImage"].startswith("linear-gradient(90deg")
    assert snap["color"]["text"] == color_to_hex(session.color.color)


def test_default_color_option():
    session = EditorSession(default_color="#336699")
    assert session.color.hex == "#336699FF"
    with pytest.raises(ValueError):
        EditorSession(default_color="nope")


def test_snapshot_previews(session):
    snap = session.snapshot()
    assert snap["previews"]["stopTrack"] is None
    assert snap["previews"]["svArea"].endswith("hsl(180, 100%, 50%))")

    session.select_kind("radial-gradient")
    assert session.snapshot()["previews"]["stopTrack"] == (
        "linear-gradient(to right, #000000FF 0%, #FFFFFFFF 100%)"
    )
