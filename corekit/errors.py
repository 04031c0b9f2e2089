from __future__ import annotations

from typing import Optional


class CorekitError(Exception):
    """Base class for errors raised by corekit."""


class InstanceNotFoundError(CorekitError, KeyError, ValueError):
    """
    Raised when a registry lookup names an instance that is not indexed.

    It is a ``ValueError`` because an unknown name is an invalid argument, and a
    ``KeyError`` so the registry behaves like any other read-only mapping
    (``in``, ``get``).
    """

    def __init__(self, name: Optional[str]) -> None:
        self.name = name
        if name:
            message = f"No instance registered under the name {name!r}"
        else:
            message = "Instance name must be a non-empty string"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class ConfigError(CorekitError):
    """Raised when a configuration file cannot be read or validated."""


class InputError(CorekitError):
    """Raised when input text cannot be read or decoded."""
