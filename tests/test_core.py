import pytest

from evolasm.content import Content
from evolasm.core import TICK_SECONDS, Core, EventKind, WindowEvent
from evolasm.primitives import Key, Keyboard, Vector2
from evolasm.state import State


class CountingState(State):
    def __init__(self):
        self.ticks = 0

    def tick(self):
        self.ticks += 1


@pytest.fixture
def core(tmp_path):
    return Core(content=Content(tmp_path), keyboard=Keyboard())


@pytest.fixture
def counting(core):
    state = CountingState()
    core.state_manager.add("count", state)
    core.state_manager.set("count")
    return state


def test_less_than_one_tick_runs_nothing(core, counting):
    assert core.advance(TICK_SECONDS * 0.5) == 0
    assert counting.ticks == 0


def test_advance_runs_whole_ticks(core, counting):
    ran = core.advance(0.105)
    assert ran == 6
    assert counting.ticks == ran


def test_time_accumulates_between_calls(core, counting):
    core.advance(TICK_SECONDS * 0.6)
    core.advance(TICK_SECONDS * 0.6)
    assert counting.ticks == 1


def test_advance_without_state_raises(core):
    with pytest.raises(RuntimeError):
        core.advance(1.0)


def test_close_event_stops(core):
    assert core.is_open
    core.handle_event(WindowEvent(EventKind.CLOSED))
    assert not core.is_open


def test_stop(core):
    core.stop()
    assert core.is_open is False


def test_wheel_ignored_while_camera_locked(core):
    before = core.camera.view.size
    core.handle_event(WindowEvent(EventKind.MOUSE_WHEEL_SCROLLED, delta=1.0))
    assert core.camera.view.size == before


def test_wheel_zooms_in_keeping_aspect(core):
    core.camera.unlock()
    before = core.camera.view.size
    core.handle_event(WindowEvent(EventKind.MOUSE_WHEEL_SCROLLED, delta=1.0))
    after = core.camera.view.size
    assert after.x < before.x
    assert after.y < before.y
    assert after.x / after.y == pytest.approx(before.x / before.y)


def test_resize_updates_view_and_window(core):
    core.handle_event(WindowEvent(EventKind.RESIZED, width=800, height=600))
    assert core.camera.view.size == Vector2(800.0, 600.0)
    assert core.window_size == Vector2(800.0, 600.0)


def test_key_events_update_keyboard(core):
    core.handle_event(WindowEvent(EventKind.KEY_PRESSED, key=Key.W))
    assert core.keyboard.is_pressed(Key.W)
    core.handle_event(WindowEvent(EventKind.KEY_RELEASED, key=Key.W))
    assert not core.keyboard.is_pressed(Key.W)


def test_camera_starts_at_origin(core):
    assert core.camera.view.center == Vector2(0.0, 0.0)


def test_window_center_maps_to_view_center(core):
    pixel = Vector2(core.window_size.x / 2, core.window_size.y / 2)
    assert core.map_pixel_to_coords(pixel) == core.camera.view.center


def test_advance_moves_free_camera_with_keyboard(core, counting):
    core.camera.unlock()
    start = core.camera.view.center
    core.handle_event(WindowEvent(EventKind.KEY_PRESSED, key=Key.D))
    core.advance(0.0)
    assert core.camera.view.center.x > start.x
    assert core.camera.view.center.y == start.y