import argparse
import sys

from dotenv import load_dotenv
from loguru import logger

from snss_reader.app_config import load_json_config, parse_app_config
from snss_reader.loader import load_file
from snss_reader.logging_config import setup_logging
from snss_reader.snss import (
    SESSION,
    TABS,
    ActiveWindow,
    Command,
    LastActiveTime,
    PinnedState,
    SelectedNavigationIndex,
    SelectedTabInIndex,
    SnssError,
    TabClosed,
    TabIndexInWindow,
    TabNavigation,
    Unknown,
    WindowBounds,
    WindowClosed,
    WindowType,
)


def describe_command(command: Command) -> str:
    content = command.content
    if isinstance(content, TabNavigation):
        return f"Tab #{content.tab_id} [{content.index}]: {content.title} <{content.url}> ({content.transition})"
    if isinstance(content, WindowBounds):
        return (
            f"Window #{content.window_id}: {content.width}x{content.height}"
            f" at ({content.x}, {content.y}), show state {content.show_state}"
        )
    if isinstance(content, TabIndexInWindow):
        return f"Tab #{content.tab_id} at index {content.index}"
    if isinstance(content, SelectedNavigationIndex):
        return f"Tab #{content.tab_id} selected navigation {content.index}"
    if isinstance(content, SelectedTabInIndex):
        return f"Window #{content.window_id} selected tab index {content.index}"
    if isinstance(content, WindowType):
        return f"Window #{content.window_id} type {content.window_type}"
    if isinstance(content, PinnedState):
        return f"Tab #{content.tab_id} {'pinned' if content.pinned else 'unpinned'}"
    if isinstance(content, TabClosed):
        return f"Tab #{content.id} closed at {content.close_time}"
    if isinstance(content, WindowClosed):
        return f"Window #{content.id} closed at {content.close_time}"
    if isinstance(content, ActiveWindow):
        return f"Active window #{content.window_id}"
    if isinstance(content, LastActiveTime):
        return f"Tab #{content.tab_id} last active at {content.last_active_time}"
    if isinstance(content, Unknown):
        return f"Unknown command {content.tag} ({len(content.payload)} bytes)"
    return repr(content)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snss_reader",
        description="Decode a browser SNSS session or tabs file.",
    )
    parser.add_argument("path", help="Session_* or Tabs_* file to decode")
    parser.add_argument(
        "--kind",
        choices=[SESSION, TABS],
        default=None,
        help="file kind; guessed from the file name when omitted",
    )
    parser.add_argument("--strict", action="store_true", help="fail on any record that does not decode")
    parser.add_argument("--show-unknown", action="store_true", help="also print commands kept as raw bytes")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    args = _parse_args(argv)
    config = parse_app_config(load_json_config())
    setup_logging(config)

    kind = args.kind or config.kind
    strict = args.strict or config.strict
    show_unknown = args.show_unknown or config.show_unknown

    try:
        session, diagnostics = load_file(args.path, kind=kind, strict=strict)
    except SnssError as ex:
        logger.error(f"Cannot decode {args.path}: {ex}")
        return 1
    except FileNotFoundError:
        logger.error(f"File not found: {args.path}")
        return 1
    except OSError as ex:
        logger.error(f"Cannot read {args.path}: {ex}")
        return 1
    except ValueError as ex:
        logger.error(str(ex))
        return 1

    print(f"SNSS version {session.version}, {len(session)} command(s)")
    for command in session.commands:
        if isinstance(command.content, Unknown) and not show_unknown:
            continue
        print(f"  {describe_command(command)}")
    for diagnostic in diagnostics:
        print(f"  ! record #{diagnostic.index} (tag {diagnostic.tag}) at offset {diagnostic.offset}: {diagnostic.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
