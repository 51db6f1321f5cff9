"""A FIFO byte buffer that packs values with :mod:`struct` formats."""

from __future__ import annotations

import struct
from typing import Any

_BYTE_ORDER_CHARS = "@=<>!"


def _layout(fmt: str) -> struct.Struct:
    """Build a Struct, defaulting to little-endian standard sizes."""
    if fmt[:1] not in _BYTE_ORDER_CHARS:
        fmt = "<" + fmt
    return struct.Struct(fmt)


class DataBuffer:
    """Byte buffer: values are appended at the end and consumed from the front.

    Formats follow :mod:`struct`; without an explicit byte-order character
    little-endian with standard sizes is used.
    """

    def __init__(self, data: bytes = b"") -> None:
        self._buffer = bytearray(data)

    def write(self, fmt: str, *args: Any) -> DataBuffer:
        """Pack ``args`` with ``fmt`` and append them; returns the buffer."""
        self._buffer += _layout(fmt).pack(*args)
        return self

    def read(self, fmt: str) -> Any:
        """Unpack ``fmt`` from the front of the buffer and remove those bytes.

        A format describing one value returns that value, otherwise a tuple.
        Raises ValueError when the buffer holds fewer bytes than ``fmt`` needs.
        """
        layout = _layout(fmt)
        if len(self._buffer) < layout.size:
            raise ValueError("Not enough data to deserialize")
        values = layout.unpack_from(self._buffer)
        del self._buffer[: layout.size]
        return values[0] if len(values) == 1 else values

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __repr__(self) -> str:
        return f"DataBuffer({bytes(self._buffer)!r})"