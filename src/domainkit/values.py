"""Smart-constructed domain values.

Each type can only be obtained through its two factories, which share one
invariant check:

- ``maybe(raw)`` returns ``Just(instance)`` or ``Nothing()``
- ``result(raw, name="")`` returns ``Success(instance)`` or a ``Failure``
  with a message naming the field, the offending input and the violated
  invariant

Calling the class directly raises ``ConstructionError``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import InitVar, dataclass
import typing

from domainkit._validation import FACTORY_TOKEN, _require_factory, preview
from domainkit.config import current_settings
from domainkit.maybe import Just, Maybe, Nothing
from domainkit.result import Failure, Result, Success

T = typing.TypeVar("T")


def _subject(kind: str, name: str) -> str:
    return f"The '{name}' {kind}" if name else f"The {kind}"


def _show(raw: object) -> str:
    return preview(raw, current_settings().preview_chars)


@dataclass(frozen=True, slots=True)
class PositiveInt:
    """An integer greater than or equal to zero."""

    value: int
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        _require_factory(_token, type(self))

    @staticmethod
    def _violation(raw: object, name: str) -> str | None:
        subject = _subject("value", name)
        if isinstance(raw, bool) or not isinstance(raw, int):
            return f"{subject} {_show(raw)} is not an integer! Needs a whole number."
        if raw < 0:
            return (
                f"{subject} {_show(raw)} is less than zero! "
                "Needs a value greater than or equal to zero."
            )
        return None

    @classmethod
    def maybe(cls, raw: object) -> Maybe[PositiveInt]:
        if cls._violation(raw, "") is not None:
            return Nothing()
        return Just(cls(typing.cast("int", raw), FACTORY_TOKEN))

    @classmethod
    def result(cls, raw: object, name: str = "") -> Result[PositiveInt, str]:
        """Validate *raw*; *name* labels the field in the error message."""
        message = cls._violation(raw, name)
        if message is not None:
            return Failure(message)
        return Success(cls(typing.cast("int", raw), FACTORY_TOKEN))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class NonEmptyString:
    """A string with at least one character.

    Emptiness is judged by length, so whitespace-only text is accepted.
    """

    text: str
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        _require_factory(_token, type(self))

    @staticmethod
    def _violation(raw: object, name: str) -> str | None:
        subject = _subject("string", name)
        hint = "Please provide a non-empty string."
        if raw is None:
            return f"{subject} None is null! {hint}"
        if not isinstance(raw, str):
            return f"{subject} {_show(raw)} is not a string! {hint}"
        if not raw:
            return f"{subject} {_show(raw)} is empty! {hint}"
        return None

    @classmethod
    def maybe(cls, raw: object) -> Maybe[NonEmptyString]:
        if cls._violation(raw, "") is not None:
            return Nothing()
        return Just(cls(typing.cast("str", raw), FACTORY_TOKEN))

    @classmethod
    def result(cls, raw: object, name: str = "") -> Result[NonEmptyString, str]:
        """Validate *raw*; *name* labels the field in the error message."""
        message = cls._violation(raw, name)
        if message is not None:
            return Failure(message)
        return Success(cls(typing.cast("str", raw), FACTORY_TOKEN))

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class NonEmptySeq[T](Sequence[T]):
    """An ordered, immutable sequence with at least one element.

    The source iterable is materialized into a tuple at construction, so the
    invariant holds for the lifetime of the value even when the source was a
    generator or a list that is mutated later.
    """

    items: tuple[T, ...]
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        _require_factory(_token, type(self))

    @staticmethod
    def _snapshot(raw: object) -> tuple[typing.Any, ...] | None:
        if raw is None or isinstance(raw, (str, bytes)):
            return None
        if not isinstance(raw, Iterable):
            return None
        return tuple(raw)

    @classmethod
    def maybe(cls, raw: Iterable[T]) -> Maybe[NonEmptySeq[T]]:
        items = cls._snapshot(raw)
        if not items:
            return Nothing()
        return Just(cls(items, FACTORY_TOKEN))

    @classmethod
    def result(cls, raw: Iterable[T], name: str = "") -> Result[NonEmptySeq[T], str]:
        """Validate *raw*; *name* labels the field in the error message.

        The message shows the materialized input, so generators are reported
        by their (empty) contents rather than their repr.
        """
        subject = _subject("sequence", name)
        hint = "Please provide a non-empty sequence."
        items = cls._snapshot(raw)
        if items is None:
            return Failure(f"{subject} {_show(raw)} is not a sequence! {hint}")
        if not items:
            return Failure(f"{subject} {_show(list(items))} is empty! {hint}")
        return Success(cls(items, FACTORY_TOKEN))

    @property
    def head(self) -> T:
        """The first element, always present."""
        return self.items[0]

    def __len__(self) -> int:
        return len(self.items)

    @typing.overload
    def __getitem__(self, index: int) -> T: ...

    @typing.overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self.items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __str__(self) -> str:
        return f"NonEmptySeq[{', '.join(map(str, self.items))}]"
