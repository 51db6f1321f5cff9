import pytest

from ftpp.data_buffer import DataBuffer


def test_round_trip_preserves_order():
    buf = DataBuffer()
    buf.write("i", 42).write("d", 3.5).write("?", True)
    assert buf.read("i") == 42
    assert buf.read("d") == 3.5
    assert buf.read("?") is True
    assert len(buf) == 0


def test_default_layout_is_little_endian():
    buf = DataBuffer().write("i", 1)
    assert bytes(buf) == b"\x01\x00\x00\x00"


def test_multi_value_format_returns_tuple():
    buf = DataBuffer().write("hh", 7, -7)
    assert buf.read("hh") == (7, -7)


def test_length_tracks_consumption():
    buf = DataBuffer().write("q", 5).write("b", 1)
    before = len(buf)
    buf.read("q")
    assert len(buf) == before - 8


def test_read_from_empty_raises():
    with pytest.raises(ValueError, match="Not enough data"):
        DataBuffer().read("i")


def test_short_read_leaves_buffer_untouched():
    buf = DataBuffer().write("h", 3)
    with pytest.raises(ValueError):
        buf.read("i")
    assert buf.read("h") == 3


def test_construct_from_bytes():
    raw = bytes(DataBuffer().write("I", 123456))
    assert DataBuffer(raw).read("I") == 123456