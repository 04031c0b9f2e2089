from __future__ import annotations

from ..comparer import natural_sorted
from ..plugins import StringComparer
from ..registry import NamedInstanceRegistry


def run(registry: NamedInstanceRegistry[StringComparer], default: str) -> list[str]:
    lines = []
    for name in natural_sorted(registry.names()):
        comparer = registry[name]
        marker = "*" if name == default else " "
        description = getattr(comparer, "description", "") or comparer.__class__.__name__
        lines.append(f"{marker} {name}: {description}")
    return lines
