from __future__ import annotations

from typing import Any, ClassVar


class ReferenceEqualityComparer:
    """
    Equality and hashing by object identity.

    Useful for keying caches on objects whose ``__eq__``/``__hash__`` compare by
    value: two equal-valued objects remain two distinct keys.
    """

    default: ClassVar["ReferenceEqualityComparer"]

    def equals(self, a: Any, b: Any) -> bool:
        return a is b

    def hash(self, obj: Any) -> int:
        return id(obj)

    def __call__(self, a: Any, b: Any) -> bool:
        return self.equals(a, b)


ReferenceEqualityComparer.default = ReferenceEqualityComparer()
