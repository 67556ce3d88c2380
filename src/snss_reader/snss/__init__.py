from snss_reader.snss.commands import (
    SESSION,
    SESSION_DECODERS,
    TAB_RESTORE_DECODERS,
    TABS,
    decode_command,
    decoders_for,
)
from snss_reader.snss.decoder import decode
from snss_reader.snss.errors import (
    FormatUnrecognizedError,
    FramingError,
    OutOfBoundsError,
    RecordDecodeError,
    SnssError,
    VersionUnsupportedError,
)
from snss_reader.snss.header import SUPPORTED_VERSIONS, read_header
from snss_reader.snss.models import (
    ActiveWindow,
    Command,
    Content,
    Diagnostic,
    LastActiveTime,
    PinnedState,
    SelectedNavigationIndex,
    SelectedTabInIndex,
    Session,
    TabClosed,
    TabIndexInWindow,
    TabNavigation,
    Unknown,
    WindowBounds,
    WindowClosed,
    WindowType,
)
from snss_reader.snss.reader import PayloadReader
from snss_reader.snss.transition import PageTransition, PageTransitionQualifier, PageTransitionType

__all__ = [
    "SESSION",
    "SESSION_DECODERS",
    "SUPPORTED_VERSIONS",
    "TABS",
    "TAB_RESTORE_DECODERS",
    "ActiveWindow",
    "Command",
    "Content",
    "Diagnostic",
    "FormatUnrecognizedError",
    "FramingError",
    "LastActiveTime",
    "OutOfBoundsError",
    "PageTransition",
    "PageTransitionQualifier",
    "PageTransitionType",
    "PayloadReader",
    "PinnedState",
    "RecordDecodeError",
    "SelectedNavigationIndex",
    "SelectedTabInIndex",
    "Session",
    "SnssError",
    "TabClosed",
    "TabIndexInWindow",
    "TabNavigation",
    "Unknown",
    "VersionUnsupportedError",
    "WindowBounds",
    "WindowClosed",
    "WindowType",
    "decode",
    "decode_command",
    "decoders_for",
    "read_header",
]
