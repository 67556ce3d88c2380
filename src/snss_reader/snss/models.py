from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from snss_reader.snss.transition import PageTransition


@dataclass(frozen=True)
class TabNavigation:
    """One entry of a tab's back-forward list."""

    tab_id: int
    index: int
    url: str
    title: str
    state: bytes
    transition: PageTransition
    has_post_data: bool
    referrer_url: str
    referrer_policy: int
    original_request_url: str
    is_overriding_user_agent: bool
    # Trailing pickle fields written by newer browsers, kept verbatim.
    extra: bytes = b""


@dataclass(frozen=True)
class WindowBounds:
    window_id: int
    x: int
    y: int
    width: int
    height: int
    show_state: int


@dataclass(frozen=True)
class TabIndexInWindow:
    tab_id: int
    index: int


@dataclass(frozen=True)
class SelectedNavigationIndex:
    tab_id: int
    index: int


@dataclass(frozen=True)
class SelectedTabInIndex:
    window_id: int
    index: int


@dataclass(frozen=True)
class WindowType:
    window_id: int
    window_type: int


@dataclass(frozen=True)
class PinnedState:
    tab_id: int
    pinned: bool


@dataclass(frozen=True)
class TabClosed:
    id: int
    close_time: int


@dataclass(frozen=True)
class WindowClosed:
    id: int
    close_time: int


@dataclass(frozen=True)
class ActiveWindow:
    window_id: int


@dataclass(frozen=True)
class LastActiveTime:
    tab_id: int
    last_active_time: int


@dataclass(frozen=True)
class Unknown:
    """A record kept as raw bytes, either unrecognized or undecodable."""

    tag: int
    payload: bytes


Content = Union[
    TabNavigation,
    WindowBounds,
    TabIndexInWindow,
    SelectedNavigationIndex,
    SelectedTabInIndex,
    WindowType,
    PinnedState,
    TabClosed,
    WindowClosed,
    ActiveWindow,
    LastActiveTime,
    Unknown,
]


@dataclass(frozen=True)
class Command:
    tag: int
    content: Content


@dataclass(frozen=True)
class Diagnostic:
    index: int
    tag: int
    offset: int
    message: str


@dataclass(frozen=True)
class Session:
    """Decoded commands in file order.

    Later commands may amend entities introduced by earlier ones, so the order
    is meaningful and cross-references are left for the caller to resolve.
    """

    version: int
    commands: tuple[Command, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.commands)

    def tabs(self) -> list[TabNavigation]:
        return [c.content for c in self.commands if isinstance(c.content, TabNavigation)]

    def unknown(self) -> list[Unknown]:
        return [c.content for c in self.commands if isinstance(c.content, Unknown)]
