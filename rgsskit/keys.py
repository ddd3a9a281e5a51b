"""Key codes, joystick axes and the default bindings of the virtual pad."""

from enum import IntEnum


class Keyboard(IntEnum):
    """Physical keyboard key codes."""

    Unknown = -1
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    L = 11
    M = 12
    N = 13
    O = 14  # noqa: E741
    P = 15
    Q = 16
    R = 17
    S = 18
    T = 19
    U = 20
    V = 21
    W = 22
    X = 23
    Y = 24
    Z = 25
    Num0 = 26
    Num1 = 27
    Num2 = 28
    Num3 = 29
    Num4 = 30
    Num5 = 31
    Num6 = 32
    Num7 = 33
    Num8 = 34
    Num9 = 35
    Escape = 36
    LControl = 37
    LShift = 38
    LAlt = 39
    LSystem = 40
    RControl = 41
    RShift = 42
    RAlt = 43
    RSystem = 44
    Menu = 45
    LBracket = 46
    RBracket = 47
    Semicolon = 48
    Comma = 49
    Period = 50
    Quote = 51
    Slash = 52
    Backslash = 53
    Tilde = 54
    Equal = 55
    Hyphen = 56
    Space = 57
    Enter = 58
    Backspace = 59
    Tab = 60
    PageUp = 61
    PageDown = 62
    End = 63
    Home = 64
    Insert = 65
    Delete = 66
    Add = 67
    Subtract = 68
    Multiply = 69
    Divide = 70
    Left = 71
    Right = 72
    Up = 73
    Down = 74
    Numpad0 = 75
    Numpad1 = 76
    Numpad2 = 77
    Numpad3 = 78
    Numpad4 = 79
    Numpad5 = 80
    Numpad6 = 81
    Numpad7 = 82
    Numpad8 = 83
    Numpad9 = 84
    F1 = 85
    F2 = 86
    F3 = 87
    F4 = 88
    F5 = 89
    F6 = 90
    F7 = 91
    F8 = 92
    F9 = 93
    F10 = 94
    F11 = 95
    F12 = 96
    F13 = 97
    F14 = 98
    F15 = 99
    Pause = 100
    # Older spellings kept as aliases.
    Return = 58
    BackSpace = 59


class MouseButton(IntEnum):
    """Mouse buttons; the value is also the button's slot in the input state."""

    Left = 0
    Right = 1
    Middle = 2
    XButton1 = 3
    XButton2 = 4


class JoyAxis(IntEnum):
    """Joystick axes."""

    X = 0
    Y = 1
    Z = 2
    R = 3
    U = 4
    V = 5
    PovX = 6
    PovY = 7


class VirtualKey(IntEnum):
    """Keys of the in-game virtual pad, valued by their slot in the input state."""

    A = 0
    B = 1
    X = 2
    Y = 3
    L = 4
    R = 5
    L2 = 6
    R2 = 7
    L3 = 8
    R3 = 9
    START = 10
    SELECT = 11
    HOME = 12
    UP = 13
    DOWN = 14
    LEFT = 15
    RIGHT = 16


def joypad_key_code(joy_id, button):
    """Return the negative code under which a joystick button is bound."""
    if joy_id < 0 or button < 0:
        raise ValueError("joystick id and button must not be negative")
    return -(32 * joy_id) - button - 1


def default_key_bindings():
    """Return a fresh mapping of each virtual key to the codes that drive it.

    Keyboard codes are non-negative; joystick buttons use
    :func:`joypad_key_code` codes of the first joystick.
    """
    k = Keyboard
    joy = joypad_key_code
    return {
        VirtualKey.A: [k.C, k.Enter, k.Space, joy(0, 0)],
        VirtualKey.B: [k.X, k.Escape, k.LShift, k.RShift, k.Backspace, joy(0, 1)],
        VirtualKey.X: [k.V, k.LAlt, joy(0, 2)],
        VirtualKey.Y: [k.W, k.RAlt, joy(0, 3)],
        VirtualKey.L: [k.A, joy(0, 4)],
        VirtualKey.R: [k.E, joy(0, 5)],
        VirtualKey.L2: [k.Num1],
        VirtualKey.R2: [k.Num3],
        VirtualKey.L3: [],
        VirtualKey.R3: [],
        VirtualKey.START: [k.B, joy(0, 7)],
        VirtualKey.SELECT: [k.N, joy(0, 6)],
        VirtualKey.HOME: [k.LControl, k.RControl],
        VirtualKey.UP: [k.Up, k.Z, k.Numpad8],
        VirtualKey.DOWN: [k.Down, k.S, k.Numpad2],
        VirtualKey.LEFT: [k.Left, k.Q, k.Numpad4],
        VirtualKey.RIGHT: [k.Right, k.D, k.Numpad6],
    }


_VIRTUAL_KEY_NAMES = {key.name: key for key in VirtualKey}
_VIRTUAL_KEY_NAMES.update(
    {
        name.lower(): VirtualKey[name]
        for name in ("START", "SELECT", "HOME", "UP", "DOWN", "LEFT", "RIGHT")
    }
)

_MOUSE_NAMES = {
    "LEFT": MouseButton.Left,
    "RIGHT": MouseButton.Right,
    "MIDDLE": MouseButton.Middle,
    "X1": MouseButton.XButton1,
    "X2": MouseButton.XButton2,
}
_MOUSE_NAMES.update({name.lower(): button for name, button in list(_MOUSE_NAMES.items())})


def virtual_key_index(name):
    """Resolve a virtual key by member or name; unknown names give ``VirtualKey.A``."""
    if isinstance(name, VirtualKey):
        return name
    return _VIRTUAL_KEY_NAMES.get(name, VirtualKey.A)


def mouse_button_index(name):
    """Resolve a mouse button by member or name; unknown names give the left button."""
    if isinstance(name, MouseButton):
        return name
    return _MOUSE_NAMES.get(name, MouseButton.Left)