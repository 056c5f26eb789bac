from rubydung.input import (
    MAX_KEYS,
    Event,
    EventType,
    InputState,
    Key,
    MouseButton,
)


def test_escape_key_code_is_tracked():
    state = InputState()
    state.process_event(Event(EventType.KEY_PRESSED, key=256))
    assert state.is_key_pressed(Key.ESCAPE)
    state.process_event(Event(EventType.KEY_PRESSED, key=32))
    assert state.is_key_pressed(Key.SPACE)


def test_last_key_is_menu():
    state = InputState()
    state.process_event(Event(EventType.KEY_PRESSED, key=Key.MENU))
    assert state.is_key_pressed(Key.LAST)


def test_mouse_button_aliases_share_state():
    state = InputState()
    state.process_event(Event(EventType.BUTTON_PRESSED, button=MouseButton.BUTTON_1))
    assert state.is_mouse_button_pressed(MouseButton.LEFT)
    assert not state.is_mouse_button_pressed(MouseButton.RIGHT)
    state.process_event(Event(EventType.BUTTON_PRESSED, button=MouseButton.BUTTON_2))
    assert state.is_mouse_button_pressed(MouseButton.RIGHT)


def test_key_press_and_release():
    state = InputState()
    state.process_event(Event(EventType.KEY_PRESSED, key=Key.W))
    assert state.is_key_pressed(Key.W)
    assert not state.is_key_pressed(Key.S)
    state.process_event(Event(EventType.KEY_RELEASED, key=Key.W))
    assert not state.is_key_pressed(Key.W)


def test_out_of_range_keys_are_ignored():
    state = InputState()
    state.process_event(Event(EventType.KEY_PRESSED, key=MAX_KEYS + 10))
    state.process_event(Event(EventType.KEY_PRESSED, key=-1))
    assert not state.is_key_pressed(MAX_KEYS + 10)
    assert not state.is_key_pressed(-1)


def test_mouse_buttons():
    state = InputState()
    state.process_event(Event(EventType.BUTTON_PRESSED, button=MouseButton.LEFT))
    assert state.is_mouse_button_pressed(MouseButton.LEFT)
    assert not state.is_mouse_button_pressed(MouseButton.RIGHT)
    state.process_event(Event(EventType.BUTTON_RELEASED, button=MouseButton.LEFT))
    assert not state.is_mouse_button_pressed(MouseButton.LEFT)


def test_out_of_range_button_ignored():
    state = InputState()
    state.process_event(Event(EventType.BUTTON_PRESSED, button=42))
    assert not state.is_mouse_button_pressed(42)


def test_cursor_moved_updates_position():
    state = InputState()
    state.process_event(Event(EventType.CURSOR_MOVED, x=120.0, y=45.5))
    assert (state.mouse_x, state.mouse_y) == (120.0, 45.5)


def test_unrelated_events_do_not_change_state():
    state = InputState()
    state.process_event(Event(EventType.WINDOW_RESIZED, width=800, height=600))
    assert not state.is_key_pressed(0)
    assert (state.mouse_x, state.mouse_y) == (0.0, 0.0)


def test_reset_releases_everything():
    state = InputState()
    state.process_event(Event(EventType.KEY_PRESSED, key=Key.A))
    state.process_event(Event(EventType.BUTTON_PRESSED, button=MouseButton.RIGHT))
    state.reset()
    assert not state.is_key_pressed(Key.A)
    assert not state.is_mouse_button_pressed(MouseButton.RIGHT)