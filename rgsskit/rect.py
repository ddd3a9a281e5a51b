"""Integer rectangle with a compact binary dump format."""

import struct

_FORMAT = "<4i"
_SIZE = struct.calcsize(_FORMAT)


def _to_long(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"no implicit conversion into Integer from {type(value).__name__}"
        )
    return int(value)


def _to_int32(value):
    return ((_to_long(value) + 2**31) % 2**32) - 2**31


class Rect:
    """A rectangle of 32-bit integer coordinates.

    ``Rect(width, height)``, ``Rect(x, width, height)`` and
    ``Rect(x, y, width, height)`` are all accepted.
    """

    __slots__ = ("_x", "_y", "_width", "_height")

    def __init__(self, *args):
        if not 2 <= len(args) <= 4:
            raise TypeError(
                f"wrong number of arguments (given {len(args)}, expected 2..4)"
            )
        x, y, width, height = (*args, None, None)[:4]
        if width is None:
            x, y, width, height = 0, 0, x, y
        elif height is None:
            height, width, y = width, y, 0
        self._x = _to_int32(x)
        self._y = _to_int32(y)
        self._width = _to_int32(width)
        self._height = _to_int32(height)

    @property
    def x(self):
        return self._x

    @x.setter
    def x(self, value):
        self._x = _to_int32(value)

    @property
    def y(self):
        return self._y

    @y.setter
    def y(self, value):
        self._y = _to_int32(value)

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, value):
        self._width = _to_int32(value)

    @property
    def height(self):
        return self._height

    @height.setter
    def height(self, value):
        self._height = _to_int32(value)

    def set(self, x, y=None, width=None, height=None):
        """Update the given fields; ``None`` leaves a field unchanged."""
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height
        return self

    def empty(self):
        """Reset every field to zero."""
        self._x = self._y = self._width = self._height = 0
        return self

    def dump(self):
        """Serialise to 16 bytes: x, y, width, height as little-endian int32."""
        return struct.pack(_FORMAT, self._x, self._y, self._width, self._height)

    @classmethod
    def load(cls, data):
        """Rebuild a rect from :meth:`dump` output; short data gives a 1x1 rect."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, got {type(data).__name__}")
        data = bytes(data)
        if len(data) < _SIZE:
            return cls(1, 1)
        return cls(*struct.unpack(_FORMAT, data[:_SIZE]))

    def __copy__(self):
        return type(self)(self._x, self._y, self._width, self._height)

    def __eq__(self, other):
        if isinstance(other, Rect):
            return (self._x, self._y, self._width, self._height) == (
                other._x,
                other._y,
                other._width,
                other._height,
            )
        if isinstance(other, (list, tuple)):
            if len(other) != 4:
                return False
            return [_to_long(v) for v in other] == [
                self._x,
                self._y,
                self._width,
                self._height,
            ]
        return False

    __hash__ = None

    def __str__(self):
        return f"({self._x}, {self._y}, {self._width}, {self._height})"

    __repr__ = __str__