from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Optional, Sequence

from .commands import compare as cmd_compare
from .commands import listing as cmd_listing
from .commands import sort as cmd_sort
from .config import Settings, load_settings, parse_log_level
from .errors import CorekitError
from .plugins import load_comparers, resolve_comparer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str, stream=None) -> None:
    stream = stream or sys.stderr
    log_level = logging.getLevelName(parse_log_level(level_name))
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    handler = logging.StreamHandler(stream)
    if getattr(stream, "isatty", lambda: False)():
        handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def _log_level_arg(value: str) -> str:
    try:
        return parse_log_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="corekit", description="Natural-order sorting and comparer catalogue")
    parser.add_argument("--config", type=Path, help="Path to corekit.yaml")
    parser.add_argument("--log-level", type=_log_level_arg, default=None, help="Python logging level (overrides config)")

    subparsers = parser.add_subparsers(dest="command", required=True)
    sort_parser = subparsers.add_parser("sort", help="Sort lines from files or stdin")
    sort_parser.add_argument("files", nargs="*", type=Path, help="Input files (default: stdin)")
    sort_parser.add_argument("--comparer", default=None, help="Comparer name (default from config)")
    sort_parser.add_argument("--reverse", action="store_true", default=None, help="Sort descending")
    sort_parser.add_argument(
        "--unique",
        action="store_true",
        default=None,
        help="Drop lines that compare equal to the previous line",
    )

    compare_parser = subparsers.add_parser("compare", help="Three-way compare two strings")
    compare_parser.add_argument("a")
    compare_parser.add_argument("b")
    compare_parser.add_argument("--comparer", default=None, help="Comparer name (default from config)")

    subparsers.add_parser("comparers", help="List available comparers")
    return parser


def _pick(flag: Optional[bool], configured: bool) -> bool:
    return configured if flag is None else flag


def run(args: argparse.Namespace, settings: Settings) -> int:
    registry = load_comparers(settings.comparers.disabled)

    if args.command == "comparers":
        for line in cmd_listing.run(registry, settings.comparers.default):
            print(line)
        return 0

    comparer = resolve_comparer(registry, args.comparer or settings.comparers.default)

    if args.command == "compare":
        _, line = cmd_compare.run(args.a, args.b, comparer)
        print(line)
        return 0

    if args.command == "sort":
        with ExitStack() as stack:
            if args.files:
                streams = [stack.enter_context(path.open("r", encoding="utf-8")) for path in args.files]
            else:
                streams = [sys.stdin]
            lines = cmd_sort.read_lines(streams)
        report = cmd_sort.run(
            lines,
            comparer,
            reverse=_pick(args.reverse, settings.sort.reverse),
            unique=_pick(args.unique, settings.sort.unique),
        )
        sys.stdout.write("".join(f"{line}\n" for line in report.lines))
        return 0

    raise AssertionError(f"unhandled command {args.command!r}")  # pragma: no cover


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or "INFO")
    try:
        settings = load_settings(args.config)
        if not args.log_level:
            configure_logging(settings.logging.level)
        return run(args, settings)
    except CorekitError as exc:
        logger.error("%s", exc)
        return 2
    except OSError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
