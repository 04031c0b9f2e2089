from __future__ import annotations

import logging
from importlib import metadata
from typing import Any, Iterable, Optional, Protocol

from .comparer import OrdinalComparer, SemiNumericComparer
from .registry import NamedInstanceRegistry

logger = logging.getLogger(__name__)

COMPARER_GROUP = "corekit.comparers"


class StringComparer(Protocol):
    name: str

    def compare(self, a: Optional[str], b: Optional[str]) -> int: ...


def builtin_comparers() -> list[StringComparer]:
    return [SemiNumericComparer(), OrdinalComparer()]


def _is_comparer(obj: Any) -> bool:
    return not isinstance(obj, type) and callable(getattr(obj, "compare", None))


def _select_entry_points(group: str) -> Iterable[metadata.EntryPoint]:
    try:
        return metadata.entry_points(group=group)
    except Exception:  # pragma: no cover - depends on runtime packaging
        return []


def _load_plugins(group: str) -> list[Any]:
    plugins: list[Any] = []
    for ep in _select_entry_points(group):
        try:
            loaded = ep.load()
            plugin = loaded if _is_comparer(loaded) else loaded()
        except Exception as exc:
            logger.warning("Failed to load plugin %s from %s: %s", getattr(ep, "name", ep), group, exc)
            continue
        if plugin is None:
            continue
        if not _is_comparer(plugin):
            logger.warning("Ignoring plugin %s from %s: no compare() method", getattr(ep, "name", ep), group)
            continue
        plugins.append(plugin)
    return plugins


def load_comparers(disabled: Optional[Iterable[str]] = None) -> NamedInstanceRegistry[StringComparer]:
    """
    Build the comparer catalogue.

    Builtins come first, then comparers published under the
    ``corekit.comparers`` entry point group. A plugin reusing a builtin name is
    indexed under a suffixed name (``natural1``) rather than replacing it.
    """
    skip = {name.strip() for name in (disabled or ()) if name and name.strip()}
    candidates: list[StringComparer] = builtin_comparers() + _load_plugins(COMPARER_GROUP)
    enabled = []
    for comparer in candidates:
        name = getattr(comparer, "name", "") or comparer.__class__.__name__
        if name in skip:
            logger.debug("Comparer %s disabled by configuration", name)
            continue
        enabled.append(comparer)
    registry: NamedInstanceRegistry[StringComparer] = NamedInstanceRegistry(enabled)
    logger.debug("Loaded comparers: %s", ", ".join(registry.names()))
    return registry


def resolve_comparer(registry: NamedInstanceRegistry[StringComparer], name: str) -> StringComparer:
    return registry.lookup(name)
