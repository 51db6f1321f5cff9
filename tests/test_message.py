import pytest

from ftpp.message import HEADER_SIZE, Message, decode_header, encode_frame


def test_write_then_read_round_trip():
    message = Message(4).write("i", -12).write("d", 2.5).write("3s", b"abc")
    assert message.read("i") == -12
    assert message.read("d") == 2.5
    assert message.read("3s") == b"abc"


def test_multi_value_format_returns_tuple():
    message = Message(1).write("hH", -3, 9)
    assert message.read("hH") == (-3, 9)


def test_reading_does_not_shrink_body():
    message = Message(2).write("q", 77)
    before = message.body()
    assert message.read("q") == 77
    assert message.body() == before
    assert message.size() == len(before)


def test_read_past_end_raises():
    message = Message(2).write("h", 5)
    with pytest.raises(ValueError):
        message.read("i")


def test_read_after_consuming_everything_raises():
    message = Message(2).write("b", 1)
    message.read("b")
    with pytest.raises(ValueError):
        message.read("b")


def test_size_matches_body_length():
    message = Message(9).write("iq", 1, 2)
    assert message.size() == len(message.body())
    assert message.type == 9


def test_body_given_to_constructor_is_readable():
    source = Message(3).write("I", 123456)
    copy = Message(3, source.body())
    assert copy.read("I") == 123456


def test_type_out_of_range_rejected():
    with pytest.raises(ValueError):
        Message(2**31)


def test_empty_frame_bytes():
    frame = encode_frame(Message(3))
    assert frame == b"\x03\x00\x00\x00" + b"\x00" * 12
    assert len(frame) == HEADER_SIZE


def test_frame_header_round_trip():
    message = Message(-5).write("i", 8).write("d", 1.0)
    frame = encode_frame(message)
    assert decode_header(frame) == (-5, message.size())
    assert frame[HEADER_SIZE:] == message.body()


def test_decode_header_too_short():
    with pytest.raises(ValueError):
        decode_header(b"\x00\x01")