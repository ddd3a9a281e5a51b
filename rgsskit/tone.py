"""Colour tone: red, green and blue shifts plus a gray level."""

import struct

from rgsskit.errors import clamp

_FORMAT = "<4d"
_SIZE = struct.calcsize(_FORMAT)


def _f32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _to_long(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"no implicit conversion into Integer from {type(value).__name__}"
        )
    return int(value)


def _given(value):
    return value is not None and value is not False


class Tone:
    """A tone stored as single-precision fractions of 255.

    Red, green and blue range over -255..255, gray over 0..255.
    """

    __slots__ = ("_vec",)

    def __init__(self, red, green=None, blue=None, gray=None):
        self._vec = [0.0, 0.0, 0.0, 0.0]
        self.set(red, green, blue, gray)

    @staticmethod
    def _encode(value, low):
        return _f32(clamp(_to_long(value), low, 255) / 255.0)

    def _scaled(self, index):
        return _f32(self._vec[index] * 255.0)

    def _read(self, index):
        return int(self._scaled(index))

    def set(self, red, green=None, blue=None, gray=None):
        """Assign the given channels; ``None`` or ``False`` leaves one unchanged."""
        for index, (value, low) in enumerate(
            ((red, -255), (green, -255), (blue, -255), (gray, 0))
        ):
            if _given(value):
                self._vec[index] = self._encode(value, low)
        return self

    @property
    def red(self):
        return self._read(0)

    @red.setter
    def red(self, value):
        self._vec[0] = self._encode(value, -255)

    @property
    def green(self):
        return self._read(1)

    @green.setter
    def green(self, value):
        self._vec[1] = self._encode(value, -255)

    @property
    def blue(self):
        return self._read(2)

    @blue.setter
    def blue(self, value):
        self._vec[2] = self._encode(value, -255)

    @property
    def gray(self):
        return self._read(3)

    @gray.setter
    def gray(self, value):
        self._vec[3] = self._encode(value, 0)

    def copy(self):
        """Return an independent tone with the same channels."""
        other = type(self)(0)
        other._vec = list(self._vec)
        return other

    __copy__ = copy

    def dump(self):
        """Serialise to 32 bytes: four little-endian doubles on the 0..255 scale."""
        return struct.pack(_FORMAT, *(self._scaled(i) for i in range(4)))

    @classmethod
    def load(cls, data):
        """Rebuild a tone from :meth:`dump` output; short data gives a neutral tone."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, got {type(data).__name__}")
        data = bytes(data)
        if len(data) < _SIZE:
            return cls(0, 0, 0, 0)
        return cls(*(int(v) for v in struct.unpack(_FORMAT, data[:_SIZE])))

    def __eq__(self, other):
        if not isinstance(other, Tone):
            return False
        return self._vec == other._vec

    __hash__ = None

    def __str__(self):
        return "({}, {}, {}, {})".format(*(self._read(i) for i in range(4)))

    __repr__ = __str__