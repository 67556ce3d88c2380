from __future__ import annotations

from snss_reader.snss.errors import FormatUnrecognizedError, OutOfBoundsError, VersionUnsupportedError
from snss_reader.snss.reader import PayloadReader

MAGIC = b"SNSS"
HEADER_SIZE = 8

# 1 is the plain format, 3 adds marker commands. 2 is the encrypted variant.
SUPPORTED_VERSIONS = frozenset({1, 3})


def read_header(buffer: bytes | bytearray | memoryview) -> tuple[int, int]:
    """Validate the file header and return ``(version, commands_offset)``."""
    reader = PayloadReader(buffer)
    try:
        magic = reader.take(len(MAGIC))
    except OutOfBoundsError as ex:
        raise FormatUnrecognizedError("buffer is shorter than the SNSS signature", 0) from ex
    if magic != MAGIC:
        raise FormatUnrecognizedError(f"bad signature {magic!r}, expected {MAGIC!r}", 0)

    try:
        version = reader.i32()
    except OutOfBoundsError as ex:
        raise VersionUnsupportedError("version field is truncated", len(MAGIC)) from ex
    if version not in SUPPORTED_VERSIONS:
        supported = ", ".join(str(v) for v in sorted(SUPPORTED_VERSIONS))
        raise VersionUnsupportedError(
            f"unsupported version {version} (supported: {supported})",
            len(MAGIC),
            version=version,
        )

    return version, HEADER_SIZE
