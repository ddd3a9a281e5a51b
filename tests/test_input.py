import pytest

from rgsskit.input import InputState
from rgsskit.keys import JoyAxis, Keyboard, MouseButton, VirtualKey


@pytest.fixture
def state():
    return InputState(60)


def test_key_press_and_trigger(state):
    state.update_key(Keyboard.C, True)
    assert state.is_pressed("A")
    assert not state.is_triggered("A")
    state.tick()
    assert state.is_triggered("A")
    state.tick()
    assert not state.is_triggered("A")
    assert state.is_pressed(VirtualKey.A)


def test_release_detected_next_frame(state):
    state.update_key(Keyboard.Escape, True)
    state.tick()
    state.update_key(Keyboard.Escape, False)
    assert not state.is_pressed("B")
    state.tick()
    assert state.is_released("B")
    assert not state.is_triggered("B")


def test_unbound_key_changes_nothing(state):
    state.update_key(Keyboard.F5, True)
    assert all(not state.is_pressed(key) for key in VirtualKey)


def test_lowercase_alias(state):
    state.update_key(Keyboard.Up, True)
    assert state.is_pressed("up") == state.is_pressed("UP") is True


def test_repeat_pattern(state):
    state.update_key(Keyboard.Space, True)
    hits = []
    for _ in range(60):
        state.tick()
        if state.is_repeated("A"):
            hits.append(state.frame_count)
    assert hits == [1, 40, 50, 60]


def test_repeat_false_when_not_pressed(state):
    state.tick()
    assert state.is_repeated("A") is False


def test_dir4_and_dir8(state):
    assert state.dir4() == 0 and state.dir8() == 0
    state.update_key(Keyboard.Up, True)
    state.update_key(Keyboard.Left, True)
    assert state.dir8() == 7
    assert state.dir4() == 8
    state.update_key(Keyboard.Up, False)
    state.update_key(Keyboard.Down, True)
    assert state.dir8() == 1
    state.update_key(Keyboard.Left, False)
    state.update_key(Keyboard.Right, True)
    assert state.dir8() == 3
    state.update_key(Keyboard.Down, False)
    assert state.dir8() == 6 and state.dir4() == 6


def test_joy_button(state):
    state.update_joy_button(0, 1, True)
    assert state.is_pressed("B")
    state.update_joy_button(1, 0, True)
    assert not state.is_pressed("A")


def test_joy_axis_deadzone(state):
    state.update_joy_axis(0, JoyAxis.X, -50.0)
    assert state.is_pressed("LEFT") and not state.is_pressed("RIGHT")
    state.update_joy_axis(0, JoyAxis.X, 50.0)
    assert state.is_pressed("RIGHT") and not state.is_pressed("LEFT")
    state.update_joy_axis(0, JoyAxis.X, 10.0)
    assert not state.is_pressed("RIGHT") and not state.is_pressed("LEFT")
    state.update_joy_axis(0, JoyAxis.Y, -50.0)
    assert state.dir4() == 8


def test_joy_axis_inverted_and_other_joy(state):
    state.y_axis_inverted = True
    state.update_joy_axis(0, JoyAxis.Y, -50.0)
    assert state.is_pressed("DOWN")
    state.update_joy_axis(1, JoyAxis.X, -50.0)
    assert not state.is_pressed("LEFT")


def test_reset_joy_axes(state):
    state.update_joy_axis(0, JoyAxis.X, 80.0)
    state.update_joy_axis(0, JoyAxis.Y, 80.0)
    state.reset_joy_axes(0)
    assert state.dir8() == 0


def test_setters_require_integers(state):
    with pytest.raises(TypeError):
        state.main_joy = "1"
    with pytest.raises(TypeError):
        state.x_axis = 1.5
    state.main_joy = 2
    assert state.main_joy == 2


def test_reset_releases_everything(state):
    state.update_key(Keyboard.C, True)
    state.update_mouse_button(MouseButton.Left, True)
    state.tick()
    state.reset()
    assert not state.is_pressed("A")
    assert not state.mouse_pressed("left")
    state.tick()
    assert state.is_released("A")


def test_mouse_buttons(state):
    state.update_mouse_button(1, True)
    state.update_mouse_button(9, True)
    state.tick()
    assert state.mouse_triggered("RIGHT")
    assert state.mouse_pressed(MouseButton.Right)
    state.update_mouse_button(1, False)
    state.tick()
    assert state.mouse_released("right")


def test_mouse_position_and_wheel(state):
    state.update_mouse_position(40, 20)
    assert state.mouse_x(2) == 20 and state.mouse_y(2) == 10
    state.update_mouse_position(-5, 3)
    assert state.mouse_x() == -256
    state.update_mouse_wheel(3)
    state.update_mouse_wheel(-1)
    assert state.wheel == 2
    state.wheel = 0
    assert state.wheel == 0


def test_text(state):
    assert state.get_text() is None
    state.entered_text = "héllo"
    assert state.get_text() == "héllo"


def test_invalid_frame_rate():
    with pytest.raises(ValueError):
        InputState(3)