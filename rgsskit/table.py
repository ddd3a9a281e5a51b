"""Fixed-size 1D, 2D or 3D grids of 16-bit or 32-bit signed integers."""

import struct

from rgsskit.errors import RGSSError, clamp

_HEADER = struct.Struct("<5I")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


def _to_long(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"no implicit conversion into Integer from {type(value).__name__}"
        )
    result = int(value)
    if not _LONG_MIN <= result <= _LONG_MAX:
        raise OverflowError("bignum too big to convert into 'long'")
    return result


def _to_size(value):
    size = _to_long(value)
    if size < 0:
        raise ValueError(f"table size cannot be negative: {size}")
    return size or 1


class Table:
    """A grid of signed 16-bit values, all zero when created.

    ``Table(xsize)``, ``Table(xsize, ysize)`` and ``Table(xsize, ysize, zsize)``
    are accepted; a size of zero becomes one.  Indexing outside the grid reads
    ``None`` and writes nothing.
    """

    _code = "h"

    def __init__(self, *args):
        self._define(args)

    def _define(self, args):
        if not 1 <= len(args) <= 3:
            raise RGSSError(
                f"{type(self).__name__} can be 1D, 2D or 3D but nothing else, "
                f"requested dimension : {len(args)}D"
            )
        sizes = [_to_size(value) for value in args] + [1, 1]
        self._xsize, self._ysize, self._zsize = sizes[:3]
        self._dim = len(args)
        self._data = [0] * (self._xsize * self._ysize * self._zsize)

    @staticmethod
    def _convert(value):
        number = _to_long(value)
        if number > 32767:
            raise OverflowError(f"integer {number} too big to convert to 'short'")
        if number < -32768:
            raise OverflowError(f"integer {number} too small to convert to 'short'")
        return number

    @property
    def xsize(self):
        return self._xsize

    @property
    def ysize(self):
        return self._ysize

    @property
    def zsize(self):
        return self._zsize

    @property
    def dim(self):
        return self._dim

    def _flat(self, x, y, z):
        return x + y * self._xsize + z * self._xsize * self._ysize

    def _position(self, coords):
        x, y, z = (*coords, None, None)[:3]
        x = _to_long(x)
        y = 0 if y is None else _to_long(y)
        z = 0 if z is None else _to_long(z)
        if not (0 <= x < self._xsize and 0 <= y < self._ysize and 0 <= z < self._zsize):
            return None
        return self._flat(x, y, z)

    @staticmethod
    def _coords(index):
        coords = index if isinstance(index, tuple) else (index,)
        if not 1 <= len(coords) <= 3:
            raise TypeError(
                f"wrong number of indices (given {len(coords)}, expected 1..3)"
            )
        return coords

    def __getitem__(self, index):
        position = self._position(self._coords(index))
        return None if position is None else self._data[position]

    def __setitem__(self, index, value):
        coords = self._coords(index)
        value = self._convert(value)
        position = self._position(coords)
        if position is not None:
            self._data[position] = value

    def resize(self, *args):
        """Change the dimensions, keeping the values that still fit."""
        old_data = self._data
        old_x, old_y, old_z = self._xsize, self._ysize, self._zsize
        self._define(args)
        width = min(self._xsize, old_x)
        for z in range(min(self._zsize, old_z)):
            for y in range(min(self._ysize, old_y)):
                src = z * old_x * old_y + y * old_x
                dst = self._flat(0, y, z)
                self._data[dst:dst + width] = old_data[src:src + width]
        return self

    def fill(self, value):
        """Set every cell to ``value``."""
        value = self._convert(value)
        self._data = [value] * len(self._data)
        return self

    def _check_source(self, source):
        if not isinstance(source, Table) or source._code != self._code:
            raise TypeError(
                f"expected {type(self).__name__}, got {type(source).__name__}"
            )

    def copy(self, source, dest_x, dest_y):
        """Copy ``source`` into this table at ``(dest_x, dest_y)``, clipped.

        Returns ``False`` when the offset lies outside this table.
        """
        self._check_source(source)
        dx = _to_long(dest_x)
        dy = _to_long(dest_y)
        if not (0 <= dx < self._xsize and 0 <= dy < self._ysize):
            return False
        width = min(dx + source._xsize, self._xsize) - dx
        end_y = min(dy + source._ysize, self._ysize)
        for z in range(min(self._zsize, source._zsize)):
            for y in range(dy, end_y):
                dst = self._flat(dx, y, z)
                src = source._flat(0, y - dy, z)
                self._data[dst:dst + width] = source._data[src:src + width]
        return True

    def copy_modulo(self, source, source_x, source_y, dest_x, dest_y, width, height):
        """Fill a region with ``source`` tiled, starting at ``(source_x, source_y)``.

        The region begins at ``(dest_x, dest_y)`` and is clipped to this table.
        Returns ``False`` when an origin lies outside its table.
        """
        self._check_source(source)
        dx = _to_long(dest_x)
        dy = _to_long(dest_y)
        ox = _to_long(source_x)
        oy = _to_long(source_y)
        if not (0 <= dx < self._xsize and 0 <= dy < self._ysize):
            return False
        if not (0 <= ox < source._xsize and 0 <= oy < source._ysize):
            return False
        region_w = min(dx + _to_long(width), self._xsize) - dx
        region_h = min(dy + _to_long(height), self._ysize) - dy
        src_w = source._xsize
        for z in range(min(self._zsize, source._zsize)):
            for row in range(max(region_h, 0)):
                start = source._flat(0, (oy + row) % source._ysize, z)
                line = source._data[start:start + src_w]
                dst = self._flat(dx, dy + row, z)
                for col in range(max(region_w, 0)):
                    self._data[dst + col] = line[(ox + col) % src_w]
        return True

    def dump(self):
        """Serialise: a header of five little-endian uint32 then the cells."""
        size = len(self._data)
        header = _HEADER.pack(self._dim, self._xsize, self._ysize, self._zsize, size)
        return header + struct.pack(f"<{size}{self._code}", *self._data)

    @classmethod
    def load(cls, data):
        """Rebuild a table from :meth:`dump` output."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, got {type(data).__name__}")
        data = bytes(data)
        if len(data) < _HEADER.size:
            raise ValueError("table data is shorter than its header")
        dim, xsize, ysize, zsize, _ = _HEADER.unpack_from(data)
        table = cls(*(xsize, ysize, zsize)[:clamp(dim, 1, 3)])
        size = len(table._data)
        fmt = f"<{size}{cls._code}"
        if len(data) < _HEADER.size + struct.calcsize(fmt):
            raise ValueError("table data is truncated")
        table._data = list(struct.unpack_from(fmt, data, _HEADER.size))
        return table

    def __repr__(self):
        return (
            f"{type(self).__name__}({self._xsize}, {self._ysize}, {self._zsize})"
        )


class Table32(Table):
    """A grid of signed 32-bit values; wider values wrap around."""

    _code = "i"

    @staticmethod
    def _convert(value):
        return ((_to_long(value) + 2**31) % 2**32) - 2**31