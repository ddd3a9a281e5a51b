import copy
import struct

import pytest

from rgsskit.rect import Rect


def test_two_arguments_are_width_and_height():
    rect = Rect(10, 20)
    assert (rect.x, rect.y, rect.width, rect.height) == (0, 0, 10, 20)


def test_three_arguments_are_x_width_height():
    rect = Rect(1, 10, 20)
    assert (rect.x, rect.y, rect.width, rect.height) == (1, 0, 10, 20)


def test_four_arguments():
    rect = Rect(1, 2, 3, 4)
    assert (rect.x, rect.y, rect.width, rect.height) == (1, 2, 3, 4)


@pytest.mark.parametrize("args", [(), (1,), (1, 2, 3, 4, 5)])
def test_wrong_argument_count(args):
    with pytest.raises(TypeError):
        Rect(*args)


def test_non_numeric_argument_rejected():
    with pytest.raises(TypeError):
        Rect("a", 2)


def test_float_arguments_are_truncated():
    rect = Rect(1.9, 2.5)
    assert rect == [0, 0, 1, 2]


def test_set_skips_none_fields():
    rect = Rect(1, 2, 3, 4)
    returned = rect.set(5, None, 7)
    assert returned is rect
    assert rect == (5, 2, 7, 4)


def test_property_setters():
    rect = Rect(1, 2, 3, 4)
    rect.x = 9
    rect.height = 8
    assert rect == [9, 2, 3, 8]


def test_empty_resets_all_fields():
    rect = Rect(1, 2, 3, 4)
    assert rect.empty() is rect
    assert rect == [0, 0, 0, 0]


def test_dump_layout():
    data = Rect(1, 2, 3, 4).dump()
    assert len(data) == 16
    assert struct.unpack("<4i", data) == (1, 2, 3, 4)


def test_dump_load_round_trip():
    original = Rect(-5, 12, 640, 480)
    assert Rect.load(original.dump()) == original


def test_load_short_data_gives_unit_rect():
    assert Rect.load(b"\x00" * 4) == [0, 0, 1, 1]


def test_load_rejects_non_bytes():
    with pytest.raises(TypeError):
        Rect.load("not bytes")


def test_equality_rules():
    rect = Rect(1, 2, 3, 4)
    assert rect == Rect(1, 2, 3, 4)
    assert not rect == Rect(1, 2, 3, 5)
    assert not rect == [1, 2, 3]
    assert not rect == "(1, 2, 3, 4)"


def test_str_and_repr():
    rect = Rect(1, 2, 3, 4)
    assert str(rect) == "(1, 2, 3, 4)"
    assert repr(rect) == "(1, 2, 3, 4)"


def test_copy_is_independent():
    rect = Rect(1, 2, 3, 4)
    other = copy.copy(rect)
    other.x = 100
    assert rect.x == 1
    assert other == [100, 2, 3, 4]


def test_values_wrap_to_int32():
    rect = Rect(2**31, 0)
    assert rect.width == -(2**31)