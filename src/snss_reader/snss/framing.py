from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from snss_reader.snss.errors import FramingError

LENGTH_FIELD_SIZE = 2


@dataclass(frozen=True)
class RawRecord:
    offset: int
    tag: int
    payload: bytes


def iter_records(buffer: bytes | bytearray | memoryview, start: int) -> Iterator[RawRecord]:
    """Yield every record from ``start`` to the end of ``buffer``.

    A record is a u16 length (covering the tag byte and the payload), the tag,
    then ``length - 1`` payload bytes. There is no way to resynchronise after
    a bad length, so any framing problem raises immediately.
    """
    data = memoryview(buffer)
    end = len(data)
    pos = start
    while pos < end:
        left = end - pos
        if left < LENGTH_FIELD_SIZE:
            raise FramingError(f"truncated record length: {left} byte(s) left", pos)
        length = data[pos] | (data[pos + 1] << 8)
        if length == 0:
            raise FramingError("record declares zero length", pos)
        body = pos + LENGTH_FIELD_SIZE
        if length > end - body:
            raise FramingError(f"record declares {length} bytes, only {end - body} left", pos)
        tag = data[body]
        payload_start = body + 1
        next_pos = body + length
        yield RawRecord(offset=payload_start, tag=tag, payload=data[payload_start:next_pos].tobytes())
        pos = next_pos
