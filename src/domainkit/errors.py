"""Exception hierarchy for domainkit.

Only misuse of the library raises. Expected validation failures travel as
``Failure`` values and never appear here.
"""

from __future__ import annotations


class DomainKitError(Exception):
    """Base exception for all domainkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class MissingPayloadError(DomainKitError):
    """A ``Success`` or ``Failure`` was constructed with a ``None`` payload."""


class UnwrapError(DomainKitError):
    """An unsafe accessor was called on the wrong case of a ``Result``."""


class CastError(DomainKitError):
    """A strict cast found a payload that is not an instance of the target."""


class ConstructionError(DomainKitError):
    """A smart-constructed value was built without going through its factory."""


class ConfigurationError(DomainKitError):
    """Settings validation or resolution failed."""
