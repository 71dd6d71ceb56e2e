"""Forward-only little-endian reader over a materialized NBS payload."""

from __future__ import annotations

import struct
from typing import BinaryIO

from .errors import InvalidText, UnexpectedEnd


_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_I16 = struct.Struct("<h")
_U32 = struct.Struct("<I")


class ByteCursor:
    """Sequential reader; every read consumes bytes, nothing seeks back.

    A failed read raises before the position moves, so the offset carried
    by the error points at the field that could not be decoded.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "ByteCursor":
        return cls(stream.read())

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, size: int, what: str) -> int:
        start = self._pos
        if self.remaining < size:
            raise UnexpectedEnd(what, start, size, self.remaining)
        self._pos = start + size
        return start

    def _unpack(self, fmt: struct.Struct, what: str) -> int:
        start = self._take(fmt.size, what)
        return fmt.unpack_from(self._data, start)[0]

    def read_u8(self) -> int:
        return self._unpack(_U8, "u8")

    def read_u16(self) -> int:
        return self._unpack(_U16, "u16")

    def read_i16(self) -> int:
        return self._unpack(_I16, "i16")

    def read_u32(self) -> int:
        return self._unpack(_U32, "u32")

    def read_string(self) -> str:
        """Read a u32 byte length followed by that many UTF-8 bytes."""
        length = self.read_u32()
        if length == 0:
            return ""
        start = self._take(length, f"{length}-byte string")
        raw = self._data[start : start + length]
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidText(start, exc.reason) from exc
