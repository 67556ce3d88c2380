from __future__ import annotations

from loguru import logger

from snss_reader.snss.commands import SESSION, decode_command, decoders_for
from snss_reader.snss.errors import RecordDecodeError
from snss_reader.snss.framing import iter_records
from snss_reader.snss.header import read_header
from snss_reader.snss.models import Command, Diagnostic, Session, Unknown


def decode(buffer: bytes | bytearray | memoryview, kind: str = SESSION) -> tuple[Session, list[Diagnostic]]:
    """Decode a complete SNSS buffer.

    Header and framing problems raise (``FormatUnrecognizedError``,
    ``VersionUnsupportedError``, ``FramingError``) and no session is produced.
    A known record that fails to decode is kept as ``Unknown`` and reported in
    the returned diagnostics instead.

    ``kind`` selects the command table: ``"session"`` for Session_* files,
    ``"tabs"`` for tab restore (Tabs_*) files.
    """
    decoders_for(kind)
    version, start = read_header(buffer)

    commands: list[Command] = []
    diagnostics: list[Diagnostic] = []
    for record in iter_records(buffer, start):
        try:
            content = decode_command(record.tag, record.payload, kind)
        except RecordDecodeError as ex:
            diagnostic = Diagnostic(
                index=len(commands),
                tag=record.tag,
                offset=record.offset + ex.offset,
                message=ex.message,
            )
            logger.warning(
                f"Record #{diagnostic.index} (tag {record.tag}) kept as unknown: "
                f"{ex.message} at offset {diagnostic.offset}"
            )
            diagnostics.append(diagnostic)
            content = None
        if content is None:
            content = Unknown(tag=record.tag, payload=record.payload)
        commands.append(Command(tag=record.tag, content=content))

    logger.debug(
        f"Decoded SNSS v{version} ({kind}): {len(commands)} command(s), {len(diagnostics)} diagnostic(s)"
    )
    return Session(version=version, commands=tuple(commands)), diagnostics
