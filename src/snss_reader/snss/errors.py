from __future__ import annotations


class SnssError(Exception):
    """Base class for everything the decoder raises.

    ``offset`` is the absolute byte offset in the input where the problem was
    detected (or the offset inside a record payload for record-level errors).
    """

    def __init__(self, message: str, offset: int = 0):
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        return f"error at offset {self.offset}: {self.message}"


class FormatUnrecognizedError(SnssError):
    pass


class VersionUnsupportedError(SnssError):
    def __init__(self, message: str, offset: int = 0, version: int | None = None):
        super().__init__(message, offset)
        self.version = version


class FramingError(SnssError):
    pass


class RecordDecodeError(SnssError):
    pass


class OutOfBoundsError(RecordDecodeError):
    def __init__(self, wanted: int, offset: int, available: int):
        super().__init__(f"need {wanted} bytes, only {available} left", offset)
        self.wanted = wanted
        self.available = available
