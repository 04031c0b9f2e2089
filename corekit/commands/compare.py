from __future__ import annotations

from ..plugins import StringComparer


def _relation(result: int) -> str:
    if result < 0:
        return "<"
    if result > 0:
        return ">"
    return "=="


def run(a: str, b: str, comparer: StringComparer) -> tuple[int, str]:
    result = comparer.compare(a, b)
    return result, f"{a!r} {_relation(result)} {b!r} ({comparer.name}: {result})"
