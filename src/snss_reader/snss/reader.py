from __future__ import annotations

import struct

from snss_reader.snss.errors import OutOfBoundsError, RecordDecodeError

ALIGNMENT = 4

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I32 = struct.Struct("<i")
_I64 = struct.Struct("<q")


def _padded(size: int) -> int:
    return (size + ALIGNMENT - 1) // ALIGNMENT * ALIGNMENT


class PayloadReader:
    """Bounds-checked little-endian cursor over a byte slice.

    Alignment is relative to the start of the slice, which is how Chromium
    pickles pad their fields. After a failed read the cursor position is
    unspecified and the reader should be abandoned.
    """

    def __init__(self, data: bytes | bytearray | memoryview):
        self._data = memoryview(data)
        self._pos = 0

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def _ensure(self, n: int) -> None:
        if n < 0 or n > self.remaining:
            raise OutOfBoundsError(n, self._pos, self.remaining)

    def take(self, n: int) -> bytes:
        self._ensure(n)
        chunk = self._data[self._pos:self._pos + n].tobytes()
        self._pos += n
        return chunk

    def rest(self) -> bytes:
        return self.take(self.remaining)

    def skip(self, n: int) -> None:
        self._ensure(n)
        self._pos += n

    def align(self) -> None:
        self.skip(_padded(self._pos) - self._pos)

    def _unpack(self, fmt: struct.Struct) -> int:
        self._ensure(fmt.size)
        value = fmt.unpack_from(self._data, self._pos)[0]
        self._pos += fmt.size
        return value

    def u8(self) -> int:
        self._ensure(1)
        value = self._data[self._pos]
        self._pos += 1
        return value

    def u16(self) -> int:
        return self._unpack(_U16)

    def u32(self) -> int:
        return self._unpack(_U32)

    def u64(self) -> int:
        return self._unpack(_U64)

    def i32(self) -> int:
        return self._unpack(_I32)

    def i64(self) -> int:
        return self._unpack(_I64)

    def bool32(self) -> bool:
        return self.i32() != 0

    def _length_prefixed(self, unit_size: int) -> bytes:
        start = self._pos
        length = self.i32()
        if length < 0:
            raise RecordDecodeError(f"negative length prefix {length}", start)
        size = length * unit_size
        # Check the padded size up front so an oversized prefix never consumes anything.
        padded = _padded(self._pos + size) - self._pos
        if padded > self.remaining:
            raise OutOfBoundsError(padded, self._pos, self.remaining)
        raw = self.take(size)
        self.align()
        return raw

    def blob(self) -> bytes:
        return self._length_prefixed(1)

    def string(self) -> str:
        start = self._pos
        raw = self._length_prefixed(1)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise RecordDecodeError(f"invalid UTF-8 string: {ex.reason}", start) from ex

    def string16(self) -> str:
        start = self._pos
        raw = self._length_prefixed(2)
        try:
            return raw.decode("utf-16-le")
        except UnicodeDecodeError as ex:
            raise RecordDecodeError(f"invalid UTF-16 string: {ex.reason}", start) from ex
