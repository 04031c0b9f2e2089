from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Iterable, TextIO

from ..errors import InputError
from ..plugins import StringComparer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SortReport:
    lines: list[str]
    read: int
    dropped: int = 0


def read_lines(streams: Iterable[TextIO]) -> list[str]:
    lines: list[str] = []
    for stream in streams:
        try:
            lines.extend(line.rstrip("\r\n") for line in stream)
        except UnicodeDecodeError as exc:
            source = getattr(stream, "name", "<input>")
            raise InputError(f"Cannot decode {source} as UTF-8: {exc}") from exc
    return lines


def run(lines: list[str], comparer: StringComparer, *, reverse: bool = False, unique: bool = False) -> SortReport:
    ordered = sorted(lines, key=functools.cmp_to_key(comparer.compare), reverse=reverse)
    report = SortReport(lines=ordered, read=len(lines))
    if unique:
        kept: list[str] = []
        for line in ordered:
            if kept and comparer.compare(kept[-1], line) == 0:
                continue
            kept.append(line)
        report.dropped = len(ordered) - len(kept)
        report.lines = kept
    logger.debug("Sorted %d line(s) with %s, dropped %d", report.read, comparer.name, report.dropped)
    return report
