"""Frame-based state of the virtual pad, the mouse and text entry."""

from rgsskit.keys import (
    JoyAxis,
    MouseButton,
    VirtualKey,
    default_key_bindings,
    joypad_key_code,
    mouse_button_index,
    virtual_key_index,
)

JOY_DEADZONE = 25.0
_OFFSCREEN_X = -256


def _require_int(value, what):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an Integer, got {type(value).__name__}")
    return value


class InputState:
    """Tracks which virtual keys and mouse buttons are held and when they changed.

    Changes are stamped with the current frame number; :meth:`tick` advances
    it once per displayed frame.  A key is "triggered" on the frame right
    after its change was recorded.
    """

    def __init__(self, frame_rate=60):
        frame_rate = _require_int(frame_rate, "frame rate")
        if frame_rate < 6:
            raise ValueError("frame rate must be at least 6")
        self.frame_rate = frame_rate
        self.frame_count = 0
        self.bindings = default_key_bindings()
        self._key_pressed = {key: False for key in VirtualKey}
        self._key_stamp = {key: 0 for key in VirtualKey}
        self._mouse_pressed = {button: False for button in MouseButton}
        self._mouse_stamp = {button: 0 for button in MouseButton}
        self._main_joy = 0
        self._x_axis = int(JoyAxis.X)
        self._y_axis = int(JoyAxis.Y)
        self.x_axis_inverted = False
        self.y_axis_inverted = False
        self._wheel = 0
        self._mouse_pos_x = 0.0
        self._mouse_pos_y = 0.0
        self.entered_text = ""

    # -- configuration -------------------------------------------------

    @property
    def main_joy(self):
        return self._main_joy

    @main_joy.setter
    def main_joy(self, value):
        self._main_joy = _require_int(value, "joystick id")

    @property
    def x_axis(self):
        return self._x_axis

    @x_axis.setter
    def x_axis(self, value):
        self._x_axis = _require_int(value, "axis")

    @property
    def y_axis(self):
        return self._y_axis

    @y_axis.setter
    def y_axis(self, value):
        self._y_axis = _require_int(value, "axis")

    @property
    def wheel(self):
        """Accumulated mouse wheel movement."""
        return self._wheel

    @wheel.setter
    def wheel(self, value):
        self._wheel = int(_require_int(value, "wheel delta"))

    # -- frame clock ---------------------------------------------------

    def tick(self):
        """Advance to the next frame and return its number."""
        self.frame_count += 1
        return self.frame_count

    def reset(self):
        """Release every key and button, stamping them with the current frame."""
        for key in VirtualKey:
            self._key_pressed[key] = False
            self._key_stamp[key] = self.frame_count
        for button in MouseButton:
            self._mouse_pressed[button] = False
            self._mouse_stamp[button] = self.frame_count

    # -- event updates -------------------------------------------------

    def _set_key(self, key, pressed):
        self._key_pressed[key] = pressed
        self._key_stamp[key] = self.frame_count

    def update_key(self, code, pressed):
        """Apply a press or release of ``code`` to every virtual key bound to it."""
        pressed = bool(pressed)
        for key, codes in self.bindings.items():
            if code in codes and self._key_pressed[key] != pressed:
                self._set_key(key, pressed)

    def update_joy_button(self, joy_id, button, pressed):
        """Apply a joystick button event through its bound code."""
        self.update_key(joypad_key_code(joy_id, button), pressed)

    def _update_axis(self, position, inverted, negative, positive):
        if inverted:
            position = -position
        if position < -JOY_DEADZONE:
            if not self._key_pressed[negative]:
                self._set_key(negative, True)
                self._set_key(positive, False)
        elif position > JOY_DEADZONE:
            if not self._key_pressed[positive]:
                self._set_key(negative, False)
                self._set_key(positive, True)
        else:
            if self._key_pressed[positive]:
                self._set_key(positive, False)
            if self._key_pressed[negative]:
                self._set_key(negative, False)

    def update_joy_axis(self, joy_id, axis, position):
        """Turn a main-joystick axis position into direction key presses."""
        if joy_id != self._main_joy:
            return
        if axis == self._x_axis:
            self._update_axis(
                position, self.x_axis_inverted, VirtualKey.LEFT, VirtualKey.RIGHT
            )
        elif axis == self._y_axis:
            self._update_axis(
                position, self.y_axis_inverted, VirtualKey.UP, VirtualKey.DOWN
            )

    def reset_joy_axes(self, joy_id):
        """Centre both main axes of ``joy_id``."""
        self.update_joy_axis(joy_id, self._x_axis, 0.0)
        self.update_joy_axis(joy_id, self._y_axis, 0.0)

    def update_mouse_position(self, x, y):
        """Record the pointer position; a negative x marks it as off screen."""
        if x < 0:
            x = _OFFSCREEN_X
        self._mouse_pos_x = float(x)
        self._mouse_pos_y = float(y)

    def update_mouse_wheel(self, delta):
        self._wheel += int(delta)

    def update_mouse_button(self, button, pressed):
        """Record a mouse button change; unknown buttons are ignored."""
        if not 0 <= button < len(MouseButton):
            return
        button = MouseButton(button)
        pressed = bool(pressed)
        if self._mouse_pressed[button] != pressed:
            self._mouse_pressed[button] = pressed
            self._mouse_stamp[button] = self.frame_count

    # -- queries -------------------------------------------------------

    def _just_changed(self, stamp):
        return stamp == self.frame_count - 1

    def is_pressed(self, key):
        return self._key_pressed[virtual_key_index(key)]

    def is_triggered(self, key):
        key = virtual_key_index(key)
        return self._key_pressed[key] and self._just_changed(self._key_stamp[key])

    def is_repeated(self, key):
        """True on the trigger frame, then periodically while the key is held."""
        key = virtual_key_index(key)
        if not self._key_pressed[key]:
            return False
        if self._just_changed(self._key_stamp[key]):
            return True
        held = self.frame_count - self._key_stamp[key]
        delay = self.frame_rate // 2
        if held > delay:
            return (held - delay) % (self.frame_rate // 6) == 0
        return False

    def is_released(self, key):
        key = virtual_key_index(key)
        return not self._key_pressed[key] and self._just_changed(self._key_stamp[key])

    def dir4(self):
        """Numpad-style direction of the pad: 8, 2, 4, 6 or 0."""
        pressed = self._key_pressed
        if pressed[VirtualKey.UP]:
            return 8
        if pressed[VirtualKey.DOWN]:
            return 2
        if pressed[VirtualKey.LEFT]:
            return 4
        if pressed[VirtualKey.RIGHT]:
            return 6
        return 0

    def dir8(self):
        """Numpad-style direction including diagonals, or 0."""
        pressed = self._key_pressed
        left = pressed[VirtualKey.LEFT]
        right = pressed[VirtualKey.RIGHT]
        if pressed[VirtualKey.UP]:
            return 7 if left else 9 if right else 8
        if pressed[VirtualKey.DOWN]:
            return 1 if left else 3 if right else 2
        if left:
            return 4
        if right:
            return 6
        return 0

    def mouse_pressed(self, button):
        return self._mouse_pressed[mouse_button_index(button)]

    def mouse_triggered(self, button):
        button = mouse_button_index(button)
        return self._mouse_pressed[button] and self._just_changed(
            self._mouse_stamp[button]
        )

    def mouse_released(self, button):
        button = mouse_button_index(button)
        return not self._mouse_pressed[button] and self._just_changed(
            self._mouse_stamp[button]
        )

    def mouse_x(self, scale=1):
        """Pointer x in game pixels for a window drawn at ``scale``."""
        return int(self._mouse_pos_x / scale)

    def mouse_y(self, scale=1):
        """Pointer y in game pixels for a window drawn at ``scale``."""
        return int(self._mouse_pos_y / scale)

    def get_text(self):
        """Text typed since the last frame, or ``None`` when there is none."""
        return self.entered_text or None