from __future__ import annotations

from pathlib import Path

from loguru import logger

from snss_reader.snss import SESSION, TABS, Diagnostic, RecordDecodeError, Session, decode


def kind_for_path(path: str | Path) -> str:
    """Guess the file kind from its name: ``Tabs_*``, ``Current Tabs`` and
    ``Last Tabs`` are tab restore files, anything else is a session file."""
    name = Path(path).name
    if name.startswith("Tabs_") or name in ("Current Tabs", "Last Tabs"):
        return TABS
    return SESSION


def load_file(
    path: str | Path,
    *,
    kind: str | None = None,
    strict: bool = False,
) -> tuple[Session, list[Diagnostic]]:
    """Read an SNSS file from disk and decode it.

    ``kind`` defaults to what the file name suggests. With ``strict`` the first
    record diagnostic is raised as a ``RecordDecodeError`` instead of being
    returned.
    """
    file_path = Path(path)
    file_kind = kind or kind_for_path(file_path)
    data = file_path.read_bytes()
    logger.debug(f"Read {len(data):,} bytes from {file_path} as a {file_kind} file")

    session, diagnostics = decode(data, file_kind)
    if strict and diagnostics:
        first = diagnostics[0]
        raise RecordDecodeError(f"record #{first.index} (tag {first.tag}): {first.message}", first.offset)
    return session, diagnostics
