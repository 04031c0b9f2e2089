"Named-instance registry and natural-order string comparison."

from importlib import metadata

from .comparer import OrdinalComparer, SemiNumericComparer, compare_semi_numeric, natural_sort_key, natural_sorted
from .errors import ConfigError, CorekitError, InstanceNotFoundError
from .reference import ReferenceEqualityComparer
from .registry import NamedInstance, NamedInstanceRegistry

__all__ = [
    "ConfigError",
    "CorekitError",
    "InstanceNotFoundError",
    "NamedInstance",
    "NamedInstanceRegistry",
    "OrdinalComparer",
    "ReferenceEqualityComparer",
    "SemiNumericComparer",
    "__version__",
    "compare_semi_numeric",
    "natural_sort_key",
    "natural_sorted",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("corekit")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
