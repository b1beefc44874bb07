"""domainkit: small domain primitives for validating data without raising.

Public API:
    - Result: ``Success`` / ``Failure`` with functor, monad and
      error-accumulating applicative combinators
    - Maybe: ``Just`` / ``Nothing`` optional values
    - PositiveInt, NonEmptyString, NonEmptySeq: smart-constructed values
    - Untrusted: boundary wrapper forcing validation before use
    - read_once: a value handed to exactly one reader
"""

from __future__ import annotations

import logging

from domainkit.config import (
    FrozenSettings,
    Settings,
    current_settings,
    resolve_settings,
    settings_scope,
)
from domainkit.errors import (
    CastError,
    ConfigurationError,
    ConstructionError,
    DomainKitError,
    MissingPayloadError,
    UnwrapError,
)
from domainkit.maybe import Just, Maybe, Nothing, maybe_of
from domainkit.read_once import ReadOnce, read_once
from domainkit.result import (
    Errors,
    Failure,
    Result,
    Success,
    apply,
    apply_all,
    collect,
    flatten,
    flatten_error,
    lift,
    try_call,
)
from domainkit.untrusted import Untrusted
from domainkit.values import NonEmptySeq, NonEmptyString, PositiveInt

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("domainkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("domainkit").addHandler(logging.NullHandler())

__all__ = [
    "CastError",
    "ConfigurationError",
    "ConstructionError",
    "DomainKitError",
    "Errors",
    "Failure",
    "FrozenSettings",
    "Just",
    "Maybe",
    "MissingPayloadError",
    "NonEmptySeq",
    "NonEmptyString",
    "Nothing",
    "PositiveInt",
    "ReadOnce",
    "Result",
    "Settings",
    "Success",
    "UnwrapError",
    "Untrusted",
    "apply",
    "apply_all",
    "collect",
    "current_settings",
    "flatten",
    "flatten_error",
    "lift",
    "maybe_of",
    "read_once",
    "resolve_settings",
    "settings_scope",
    "try_call",
]
