"""Untrusted: raw external data that must be validated before use."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import typing

T = typing.TypeVar("T")
R = typing.TypeVar("R")


@dataclass(frozen=True, slots=True, match_args=False)
class Untrusted[T]:
    """A raw value whose trustworthiness is not yet established.

    The raw value is never exposed directly: the only way to read it is
    ``unwrap``, which hands it to a validation function and returns whatever
    that function decides (a ``Maybe`` or a ``Result``).

    Example:
        age = Untrusted.wrap(payload["age"]).unwrap(
            lambda raw: PositiveInt.result(raw, "age")
        )
    """

    _value: T

    @classmethod
    def wrap(cls, value: T) -> Untrusted[T]:
        return cls(value)

    def unwrap(self, validate: Callable[[T], R]) -> R:
        """Run *validate* on the raw value and return its verdict."""
        return validate(self._value)

    def __repr__(self) -> str:
        return f"Untrusted[{type(self._value).__name__}](...)"
