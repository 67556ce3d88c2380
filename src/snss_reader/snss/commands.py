from __future__ import annotations

from typing import Callable

from snss_reader.snss.errors import RecordDecodeError
from snss_reader.snss.models import (
    ActiveWindow,
    Content,
    LastActiveTime,
    PinnedState,
    SelectedNavigationIndex,
    SelectedTabInIndex,
    TabClosed,
    TabIndexInWindow,
    TabNavigation,
    WindowBounds,
    WindowClosed,
    WindowType,
)
from snss_reader.snss.reader import PayloadReader
from snss_reader.snss.transition import PageTransition

SESSION = "session"
TABS = "tabs"

# Command ids of "Session_*" files. Tab restore ("Tabs_*") files reuse the
# same numbers for different commands, so each kind has its own table.
TAG_SET_TAB_INDEX_IN_WINDOW = 2
TAG_UPDATE_TAB_NAVIGATION = 6
TAG_SET_SELECTED_NAVIGATION_INDEX = 7
TAG_SET_SELECTED_TAB_IN_INDEX = 8
TAG_SET_WINDOW_TYPE = 9
TAG_SET_PINNED_STATE = 12
TAG_SET_WINDOW_BOUNDS = 14
TAG_TAB_CLOSED = 16
TAG_WINDOW_CLOSED = 17
TAG_SET_ACTIVE_WINDOW = 20
TAG_LAST_ACTIVE_TIME = 21

# The only tab restore command decoded: the navigation update, same pickle
# layout as the session one.
TAG_TAB_RESTORE_NAVIGATION = 1

Decoder = Callable[[PayloadReader], Content]


def _padded_bool(reader: PayloadReader) -> bool:
    # A C++ bool trailing an int32 in a struct: one byte plus three of padding.
    value = reader.u8() != 0
    reader.skip(3)
    return value


def _padded_i64(reader: PayloadReader) -> int:
    # int64 following an int32 is aligned to 8.
    reader.skip(4)
    return reader.i64()


def decode_navigation(reader: PayloadReader) -> TabNavigation:
    start = reader.offset
    pickle_size = reader.u32()
    if pickle_size != reader.remaining:
        raise RecordDecodeError(
            f"pickle header declares {pickle_size} bytes, record holds {reader.remaining}",
            start,
        )
    return TabNavigation(
        tab_id=reader.i32(),
        index=reader.i32(),
        url=reader.string(),
        title=reader.string16(),
        state=reader.blob(),
        transition=PageTransition(reader.u32()),
        has_post_data=reader.bool32(),
        referrer_url=reader.string(),
        referrer_policy=reader.i32(),
        original_request_url=reader.string(),
        is_overriding_user_agent=reader.bool32(),
        extra=reader.rest(),
    )


def decode_window_bounds(reader: PayloadReader) -> WindowBounds:
    return WindowBounds(
        window_id=reader.i32(),
        x=reader.i32(),
        y=reader.i32(),
        width=reader.i32(),
        height=reader.i32(),
        show_state=reader.i32(),
    )


def decode_tab_index_in_window(reader: PayloadReader) -> TabIndexInWindow:
    return TabIndexInWindow(tab_id=reader.i32(), index=reader.i32())


def decode_selected_navigation_index(reader: PayloadReader) -> SelectedNavigationIndex:
    return SelectedNavigationIndex(tab_id=reader.i32(), index=reader.i32())


def decode_selected_tab_in_index(reader: PayloadReader) -> SelectedTabInIndex:
    return SelectedTabInIndex(window_id=reader.i32(), index=reader.i32())


def decode_window_type(reader: PayloadReader) -> WindowType:
    return WindowType(window_id=reader.i32(), window_type=reader.i32())


def decode_pinned_state(reader: PayloadReader) -> PinnedState:
    return PinnedState(tab_id=reader.i32(), pinned=_padded_bool(reader))


def decode_tab_closed(reader: PayloadReader) -> TabClosed:
    return TabClosed(id=reader.i32(), close_time=_padded_i64(reader))


def decode_window_closed(reader: PayloadReader) -> WindowClosed:
    return WindowClosed(id=reader.i32(), close_time=_padded_i64(reader))


def decode_active_window(reader: PayloadReader) -> ActiveWindow:
    return ActiveWindow(window_id=reader.i32())


def decode_last_active_time(reader: PayloadReader) -> LastActiveTime:
    return LastActiveTime(tab_id=reader.i32(), last_active_time=_padded_i64(reader))


SESSION_DECODERS: dict[int, Decoder] = {
    TAG_SET_TAB_INDEX_IN_WINDOW: decode_tab_index_in_window,
    TAG_UPDATE_TAB_NAVIGATION: decode_navigation,
    TAG_SET_SELECTED_NAVIGATION_INDEX: decode_selected_navigation_index,
    TAG_SET_SELECTED_TAB_IN_INDEX: decode_selected_tab_in_index,
    TAG_SET_WINDOW_TYPE: decode_window_type,
    TAG_SET_PINNED_STATE: decode_pinned_state,
    TAG_SET_WINDOW_BOUNDS: decode_window_bounds,
    TAG_TAB_CLOSED: decode_tab_closed,
    TAG_WINDOW_CLOSED: decode_window_closed,
    TAG_SET_ACTIVE_WINDOW: decode_active_window,
    TAG_LAST_ACTIVE_TIME: decode_last_active_time,
}

TAB_RESTORE_DECODERS: dict[int, Decoder] = {
    TAG_TAB_RESTORE_NAVIGATION: decode_navigation,
}

DECODERS_BY_KIND: dict[str, dict[int, Decoder]] = {
    SESSION: SESSION_DECODERS,
    TABS: TAB_RESTORE_DECODERS,
}


def decoders_for(kind: str) -> dict[int, Decoder]:
    table = DECODERS_BY_KIND.get(kind)
    if table is None:
        raise ValueError(f"Unknown file kind: {kind!r}. Supported: {', '.join(map(repr, DECODERS_BY_KIND))}")
    return table


def decode_command(tag: int, payload: bytes, kind: str = SESSION) -> Content | None:
    """Decode ``payload`` with the routine registered for ``tag`` in ``kind`` files.

    Returns None for tags without a routine. Raises ``RecordDecodeError``
    (including ``OutOfBoundsError``) when the payload does not decode to
    exactly its own length.
    """
    decoder = decoders_for(kind).get(tag)
    if decoder is None:
        return None
    reader = PayloadReader(payload)
    content = decoder(reader)
    if not reader.at_end():
        raise RecordDecodeError(f"{reader.remaining} trailing byte(s) after decoding", reader.offset)
    return content
