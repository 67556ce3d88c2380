from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

CORE_MASK = 0xFF


class PageTransitionType(IntEnum):
    LINK = 0  # followed a link on another page
    TYPED = 1  # typed into the address bar, or a suggested URL picked there
    AUTO_BOOKMARK = 2  # bookmark or a "most visited" style suggestion
    AUTO_SUBFRAME = 3
    MANUAL_SUBFRAME = 4
    GENERATED = 5  # non-URL suggestion picked in the address bar
    START_PAGE = 6
    FORM_SUBMIT = 7
    RELOAD = 8  # also used when restoring a previous session
    KEYWORD = 9
    KEYWORD_GENERATED = 10


class PageTransitionQualifier(IntFlag):
    FORWARD_BACK = 0x01000000
    FROM_ADDRESS_BAR = 0x02000000
    HOME_PAGE = 0x04000000
    FROM_API = 0x08000000
    CHAIN_START = 0x10000000
    CHAIN_END = 0x20000000
    CLIENT_REDIRECT = 0x40000000
    SERVER_REDIRECT = 0x80000000


_QUALIFIER_BITS = 0xFF000000


@dataclass(frozen=True)
class PageTransition:
    """How the user arrived at a navigation entry.

    The low byte is the core type, the high byte holds qualifier flags.
    """

    value: int

    @property
    def core_value(self) -> int:
        return self.value & CORE_MASK

    @property
    def core(self) -> PageTransitionType | None:
        try:
            return PageTransitionType(self.core_value)
        except ValueError:
            return None

    @property
    def qualifiers(self) -> PageTransitionQualifier:
        return PageTransitionQualifier(self.value & _QUALIFIER_BITS)

    def has(self, qualifier: PageTransitionQualifier) -> bool:
        return bool(self.value & qualifier)

    def __str__(self) -> str:
        core = self.core.name if self.core is not None else f"CORE_{self.core_value}"
        names = [flag.name for flag in PageTransitionQualifier if self.has(flag)]
        return "|".join([core, *names])
