# rgsskit

This package provides building blocks for 2D role-playing game engines:

- small value types that serialise to a fixed binary layout
- tile tables for map data
- a frame-driven input tracker

It has no dependencies outside the standard library.

## Installation

```
pip install rgsskit
```

## Modules

### `rgsskit.rect`

`Rect` is a rectangle of 32-bit integers with the fields `x`, `y`, `width` and `height`.

- Construction takes two to four arguments:
  - `Rect(width, height)`
  - `Rect(x, width, height)`
  - `Rect(x, y, width, height)`
- `set(x, y=None, width=None, height=None)` changes only the fields you pass.
- `empty()` sets every field to zero.
- A `Rect` compares equal to another `Rect` or to a 4-item list or tuple.
- `dump()` returns 16 little-endian bytes. `Rect.load(data)` reads them back. Data shorter than 16 bytes gives `Rect(1, 1)`.
- `str(rect)` looks like `(x, y, width, height)`.

### `rgsskit.tone`

`Tone(red, green=None, blue=None, gray=None)` is a colour tone.

- Red, green and blue are clamped to -255..255, and gray to 0..255.
- The values are stored as single-precision fractions of 255.
- `set(...)` leaves unchanged any channel given as `None` or `False`.
- `copy()` returns an independent copy.
- `dump()` returns 32 bytes holding four little-endian doubles. `Tone.load(data)` reads them back. Data that is too short gives a neutral tone.

### `rgsskit.table`

`Table` is a 1D, 2D or 3D grid of signed 16-bit values. `Table32` is the same grid with signed 32-bit values.

- Construction: `Table(xsize)`, `Table(xsize, ysize)` or `Table(xsize, ysize, zsize)`.
  - A size of zero becomes one.
  - Any other number of dimensions raises `RGSSError`.
- Indexing uses `t[x]`, `t[x, y]` or `t[x, y, z]`.
  - Reading outside the grid returns `None`.
  - Writing outside the grid does nothing.
- Values that do not fit:
  - `Table` raises `OverflowError`.
  - `Table32` wraps the value around.
- The properties `xsize`, `ysize`, `zsize` and `dim` give the shape.
- `resize(*sizes)` keeps the values that still fit.
- `fill(value)` sets every cell.
- `copy(source, dest_x, dest_y)` copies a table into this one, clipped to its bounds.
- `copy_modulo(source, source_x, source_y, dest_x, dest_y, width, height)` fills a region with the source table repeated as tiles.
- Both copy methods return `False` when an origin lies outside its table.
- `dump()` writes a header of five uint32 values followed by the cells. `Table.load(data)` and `Table32.load(data)` read them back.

### `rgsskit.keys`

This module holds key codes and the default bindings.

- Enums:
  - `Keyboard`: key codes.
  - `MouseButton`: `Left`, `Right`, `Middle`, `XButton1`, `XButton2`.
  - `JoyAxis`: `X`, `Y`, `Z`, `R`, `U`, `V`, `PovX`, `PovY`.
  - `VirtualKey`: the 17 keys of the in-game pad, `A` through `RIGHT`.
- `default_key_bindings()` returns a fresh dict that maps each virtual key to the keyboard and joystick codes that drive it.
- `joypad_key_code(joy_id, button)` returns the negative code used to bind a joystick button.
- `virtual_key_index(name)` resolves names such as `"A"` or `"up"`. Unknown names resolve to `VirtualKey.A`.
- `mouse_button_index(name)` resolves names such as `"left"` or `"X1"`. Unknown names resolve to the left button.

### `rgsskit.input`

`InputState(frame_rate=60)` holds the input state and advances one frame per `tick()`.

Feeding events:
- `update_key(code, pressed)`
- `update_joy_button(joy_id, button, pressed)`
- `update_joy_axis(joy_id, axis, position)`: axis positions beyond ±25 press the direction keys.
- `reset_joy_axes(joy_id)`
- `update_mouse_position(x, y)`
- `update_mouse_wheel(delta)`
- `update_mouse_button(button, pressed)`

Querying state:
- `is_pressed`, `is_triggered`, `is_repeated` and `is_released`.
- `dir4()` and `dir8()` give numpad-style directions.
- `mouse_pressed`, `mouse_triggered` and `mouse_released`.
- `mouse_x(scale)` and `mouse_y(scale)` give the pointer position.
- `get_text()` returns `entered_text`, or `None` when it is empty.

Configuration:
- `main_joy`, `x_axis` and `y_axis`.
- `x_axis_inverted` and `y_axis_inverted`.
- `wheel`.
- `bindings`.

### `rgsskit.errors`

- `RGSSError` is the package's exception.
- `clamp(value, low, high)` limits a value to a range.

## Examples

```python
from rgsskit.rect import Rect
from rgsskit.table import Table

r = Rect(10, 20)             # (0, 0, 10, 20)
assert Rect.load(r.dump()) == r
assert r == [0, 0, 10, 20]

t = Table(4, 3)
t[1, 2] = 7
bigger = Table.load(t.dump())
bigger.resize(8, 8)
assert bigger[1, 2] == 7
```

Your event loop drives the input tracker. Call `tick()` once per frame and pass events in:

```python
from rgsskit.input import InputState
from rgsskit.keys import Keyboard

state = InputState(frame_rate=60)
state.update_key(Keyboard.C, True)
state.tick()
assert state.is_triggered("A")
assert state.is_pressed("A")
```

## What the package does not do

- It opens no window and draws nothing. There are no sprites, text, shapes or viewports.
- It does not read keyboards, mice or joysticks by itself. Your own event loop must pass events to `InputState`.
- It does not keep the frame count for you. Your own loop calls `tick()`.

## Running the tests

```
pip install "rgsskit[test]"
pytest
```