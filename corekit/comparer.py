from __future__ import annotations

import functools
import unicodedata
from typing import Any, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

# int() refuses longer digit strings on recent interpreters.
_MAX_INT_DIGITS = 4000


def _ordinal(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _numeric_diff(a: str, b: str) -> int:
    if len(a) <= _MAX_INT_DIGITS and len(b) <= _MAX_INT_DIGITS:
        return int(a) - int(b)
    a = "".join(str(unicodedata.decimal(ch)) for ch in a).lstrip("0")
    b = "".join(str(unicodedata.decimal(ch)) for ch in b).lstrip("0")
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return _ordinal(a, b)


def _run_end(value: str, start: int, digits: bool) -> int:
    end = start
    while end < len(value) and value[end].isdecimal() == digits:
        end += 1
    return end


def compare_semi_numeric(a: Optional[str], b: Optional[str]) -> int:
    """
    Three-way compare two strings so embedded numbers order by value.

    ``"A2"`` sorts before ``"A10"``. ``None`` sorts before any string. Only the
    sign of the result is meaningful; when two digit runs differ the result is
    the difference of their values.
    """
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1

    i = j = 0
    while i < len(a) and j < len(b):
        a_digits = a[i].isdecimal()
        if a_digits != b[j].isdecimal():
            return _ordinal(a[i:], b[j:])
        end_a = _run_end(a, i, a_digits)
        end_b = _run_end(b, j, a_digits)
        if a_digits:
            diff = _numeric_diff(a[i:end_a], b[j:end_b])
            if diff:
                return diff
        else:
            result = _ordinal(a[i:end_a], b[j:end_b])
            if result:
                return result
        i, j = end_a, end_b

    remaining = (len(a) - i) - (len(b) - j)
    return (remaining > 0) - (remaining < 0)


def compare_ordinal(a: Optional[str], b: Optional[str]) -> int:
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1
    return _ordinal(a, b)


class SemiNumericComparer:
    """Named comparer object wrapping :func:`compare_semi_numeric`."""

    description = "Natural order: digit runs compare by numeric value"

    def __init__(self, name: str = "natural") -> None:
        self.name = name

    def compare(self, a: Optional[str], b: Optional[str]) -> int:
        return compare_semi_numeric(a, b)

    __call__ = compare

    def sort_key(self) -> Callable[[Optional[str]], Any]:
        return functools.cmp_to_key(self.compare)


class OrdinalComparer(SemiNumericComparer):
    description = "Plain code point order"

    def __init__(self, name: str = "ordinal") -> None:
        super().__init__(name)

    def compare(self, a: Optional[str], b: Optional[str]) -> int:
        return compare_ordinal(a, b)

    __call__ = compare


natural_sort_key = functools.cmp_to_key(compare_semi_numeric)


def natural_sorted(
    values: Iterable[T],
    *,
    key: Optional[Callable[[T], Optional[str]]] = None,
    reverse: bool = False,
) -> list[T]:
    if key is None:
        return sorted(values, key=natural_sort_key, reverse=reverse)  # type: ignore[arg-type]
    return sorted(values, key=lambda item: natural_sort_key(key(item)), reverse=reverse)
