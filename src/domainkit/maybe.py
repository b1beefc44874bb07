"""Optional values: ``Just`` a value, or ``Nothing``."""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import typing

T = typing.TypeVar("T")
U = typing.TypeVar("U")
V = typing.TypeVar("V")


class _MaybeMethods:
    """Combinators shared by both cases; dispatch is a ``match`` on the case."""

    __slots__ = ()

    @property
    def is_just(self) -> bool:
        return isinstance(self, Just)

    @property
    def is_nothing(self) -> bool:
        return isinstance(self, Nothing)

    def map(self, f: Callable[[typing.Any], U]) -> Maybe[U]:
        match self:
            case Just(value):
                return Just(f(value))
            case _:
                return Nothing()

    def bind(self, f: Callable[[typing.Any], Maybe[U]]) -> Maybe[U]:
        match self:
            case Just(value):
                return f(value)
            case _:
                return Nothing()

    def zip(
        self, other: Maybe[U], f: Callable[[typing.Any, U], V]
    ) -> Maybe[V]:
        """Combine two present values with *f*; Nothing if either is absent."""
        match self, other:
            case Just(x), Just(y):
                return Just(f(x, y))
            case _:
                return Nothing()

    def get_or_else(self, f: Callable[[], typing.Any]) -> typing.Any:
        """Return the value, or call *f* for a fallback."""
        match self:
            case Just(value):
                return value
            case _:
                return f()


@dataclasses.dataclass(frozen=True, slots=True)
class Just[T](_MaybeMethods):
    """A present value."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Nothing(_MaybeMethods):
    """No value. All instances are equal."""


Maybe = Just[T] | Nothing


def maybe_of(value: T | None) -> Maybe[T]:
    """Lift an optional Python value: ``None`` becomes ``Nothing()``."""
    return Nothing() if value is None else Just(value)
