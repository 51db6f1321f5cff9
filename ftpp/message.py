"""Typed network messages and their wire framing."""

from __future__ import annotations

import struct
from typing import Any

_BYTE_ORDER_CHARS = "@=<>!"
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# Frame header: a 32-bit signed type, 4 bytes of padding, a 64-bit body size.
HEADER = struct.Struct("<i4xQ")
HEADER_SIZE = HEADER.size


def _layout(fmt: str) -> struct.Struct:
    """Build a Struct, defaulting to little-endian standard sizes."""
    if fmt[:1] not in _BYTE_ORDER_CHARS:
        fmt = "<" + fmt
    return struct.Struct(fmt)


class Message:
    """A message type plus a body that values are packed into and read back from.

    Writing appends to the body. Reading walks a cursor through the body
    without removing any bytes, so the body can still be sent afterwards.
    """

    def __init__(self, message_type: int, body: bytes = b"") -> None:
        if not _INT32_MIN <= message_type <= _INT32_MAX:
            raise ValueError("message type must fit in a signed 32-bit integer")
        self._type = message_type
        self._body = bytearray(body)
        self._read_pos = 0

    @property
    def type(self) -> int:
        return self._type

    def write(self, fmt: str, *args: Any) -> Message:
        """Pack ``args`` with ``fmt`` onto the end of the body; returns the message."""
        self._body += _layout(fmt).pack(*args)
        return self

    def read(self, fmt: str) -> Any:
        """Unpack ``fmt`` at the read cursor and advance it.

        A format describing one value returns that value, otherwise a tuple.
        Raises ValueError when too few unread bytes remain.
        """
        layout = _layout(fmt)
        end = self._read_pos + layout.size
        if end > len(self._body):
            raise ValueError("Not enough data in message to deserialize.")
        values = layout.unpack_from(self._body, self._read_pos)
        self._read_pos = end
        return values[0] if len(values) == 1 else values

    def body(self) -> bytes:
        return bytes(self._body)

    def size(self) -> int:
        return len(self._body)

    def __repr__(self) -> str:
        return f"Message({self._type}, {bytes(self._body)!r})"


def encode_frame(message: Message) -> bytes:
    """Return the header followed by the body, as sent on the wire."""
    return HEADER.pack(message.type, message.size()) + message.body()


def decode_header(data: bytes) -> tuple[int, int]:
    """Return ``(message_type, body_size)`` from the start of ``data``."""
    if len(data) < HEADER_SIZE:
        raise ValueError("incomplete message header")
    message_type, body_size = HEADER.unpack_from(data)
    return message_type, body_size