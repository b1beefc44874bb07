"""Result: a success value or a typed failure, never both.

``Success`` and ``Failure`` are the two cases of ``Result``. Expected failures
travel as values through the combinators below instead of being raised, so
validation outcomes stay a predictable part of the data flow.

Two styles of composition are offered:

- ``bind`` / ``zip`` / ``join`` short-circuit: the first failure wins.
- ``apply`` accumulates: when independent validations fail, every error is
  kept, in left-to-right order, inside an ``Errors`` sequence.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import dataclasses
from functools import reduce
import logging
import typing

from domainkit._validation import _require, positional_arity
from domainkit.config import current_settings
from domainkit.errors import (
    CastError,
    DomainKitError,
    MissingPayloadError,
    UnwrapError,
)
from domainkit.maybe import Just, Maybe, Nothing

log = logging.getLogger(__name__)

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure")
U = typing.TypeVar("U")
K = typing.TypeVar("K")
R = typing.TypeVar("R")
X = typing.TypeVar("X", bound=BaseException)


class Errors(tuple):
    """Accumulated failure payload produced by ``apply``.

    A plain tuple subclass, so it compares equal to a tuple holding the same
    errors in the same order.
    """

    __slots__ = ()

    @classmethod
    def of(cls, error: object) -> Errors:
        """Normalize a failure payload into an ``Errors`` sequence."""
        if isinstance(error, Errors):
            return error
        return cls((error,))

    def __repr__(self) -> str:
        return f"Errors({list(self)!r})"


class _ResultMethods:
    """Combinators shared by ``Success`` and ``Failure``.

    Every method dispatches with ``match`` over the two cases.
    """

    __slots__ = ()

    @property
    def is_ok(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_error(self) -> bool:
        return isinstance(self, Failure)

    # --- Functor ---

    def map(self, f: Callable[[typing.Any], U]) -> Result[U, typing.Any]:
        """Map the success payload; failures pass through unchanged."""
        match self:
            case Success(value):
                return Success(f(value))
            case _:
                return typing.cast("Failure[typing.Any]", self)

    def map_error(self, f: Callable[[typing.Any], U]) -> Result[typing.Any, U]:
        """Map the failure payload; successes pass through unchanged."""
        match self:
            case Failure(error):
                return Failure(f(error))
            case _:
                return typing.cast("Success[typing.Any]", self)

    # --- Monad ---

    def bind(
        self, f: Callable[[typing.Any], Result[U, typing.Any]]
    ) -> Result[U, typing.Any]:
        """Replace a success with ``f(value)``; propagate a failure untouched."""
        match self:
            case Success(value):
                return f(value)
            case _:
                return typing.cast("Failure[typing.Any]", self)

    def bind_error(
        self, f: Callable[[typing.Any], Result[typing.Any, U]]
    ) -> Result[typing.Any, U]:
        """Replace a failure with ``f(error)``; propagate a success untouched."""
        match self:
            case Failure(error):
                return f(error)
            case _:
                return typing.cast("Success[typing.Any]", self)

    # --- Applicative ---

    def apply(
        self, arg: Result[typing.Any, typing.Any]
    ) -> Result[typing.Any, Errors]:
        """Apply the wrapped one-argument function to *arg*, accumulating errors.

        The receiver holds a function (typically curried via ``lift``). Both
        failure payloads are normalized to ``Errors`` first. If both sides
        failed, the result carries the receiver's errors followed by
        *arg*'s errors.
        """
        fn = self.map_error(Errors.of)
        x = arg.map_error(Errors.of)
        match fn, x:
            case Success(f), Success(value):
                return Success(f(value))
            case Failure(left), Failure(right):
                return Failure(Errors((*left, *right)))
            case Failure(), _:
                return fn
            case _:
                return x

    # --- Zip / Join (short-circuit) ---

    def zip(
        self,
        other: Result[typing.Any, typing.Any],
        f: Callable[[typing.Any, typing.Any], U],
    ) -> Result[U, typing.Any]:
        """Combine two success payloads with *f*, or propagate the first failure."""
        match self, other:
            case Success(x), Success(y):
                return Success(f(x, y))
            case Failure(), _:
                return typing.cast("Failure[typing.Any]", self)
            case _:
                return typing.cast("Failure[typing.Any]", other)

    def zip_error(
        self,
        other: Result[typing.Any, typing.Any],
        f: Callable[[typing.Any, typing.Any], U],
    ) -> Result[typing.Any, U]:
        """Combine two failure payloads with *f*, or propagate the first success."""
        match self, other:
            case Failure(x), Failure(y):
                return Failure(f(x, y))
            case Success(), _:
                return typing.cast("Success[typing.Any]", self)
            case _:
                return typing.cast("Success[typing.Any]", other)

    def join(
        self,
        other: Result[typing.Any, typing.Any],
        key: Callable[[typing.Any], K],
        other_key: Callable[[typing.Any], K],
        combine: Callable[[typing.Any, typing.Any], U],
        *,
        mismatch: Callable[[typing.Any, typing.Any], typing.Any],
    ) -> Result[U, typing.Any]:
        """Combine two successes whose projected keys are equal.

        A failure on either side propagates (the receiver's first). When both
        succeed but the keys differ, ``mismatch(left, right)`` supplies the
        failure payload.
        """
        match self, other:
            case Success(x), Success(y):
                if key(x) == other_key(y):
                    return Success(combine(x, y))
                return Failure(mismatch(x, y))
            case Failure(), _:
                return typing.cast("Failure[typing.Any]", self)
            case _:
                return typing.cast("Failure[typing.Any]", other)

    def join_error(
        self,
        other: Result[typing.Any, typing.Any],
        key: Callable[[typing.Any], K],
        other_key: Callable[[typing.Any], K],
        combine: Callable[[typing.Any, typing.Any], U],
        *,
        mismatch: Callable[[typing.Any, typing.Any], typing.Any],
    ) -> Result[typing.Any, U]:
        """Mirror of ``join`` on the failure side."""
        match self, other:
            case Failure(x), Failure(y):
                if key(x) == other_key(y):
                    return Failure(combine(x, y))
                return Success(mismatch(x, y))
            case Success(), _:
                return typing.cast("Success[typing.Any]", self)
            case _:
                return typing.cast("Success[typing.Any]", other)

    # --- Cast ---

    def cast(self, target: type[U]) -> Result[U, typing.Any]:
        """Narrow the success payload to *target*.

        A typing-level assertion; the payload is only checked when the
        ``strict_casts`` setting is enabled.
        """
        match self:
            case Success(value) if current_settings().strict_casts:
                _check_cast(value, target, "success")
        return typing.cast("Result[U, typing.Any]", self)

    def cast_error(self, target: type[U]) -> Result[typing.Any, U]:
        """Narrow the failure payload to *target*; see ``cast``."""
        match self:
            case Failure(error) if current_settings().strict_casts:
                _check_cast(error, target, "failure")
        return typing.cast("Result[typing.Any, U]", self)

    # --- Taps ---

    def tap(self, f: Callable[[typing.Any], object]) -> typing.Self:
        """Run *f* on the success payload for its side effect."""
        match self:
            case Success(value):
                f(value)
        return self

    def tap_error(self, f: Callable[[typing.Any], object]) -> typing.Self:
        """Run *f* on the failure payload for its side effect."""
        match self:
            case Failure(error):
                f(error)
        return self

    # --- Folds ---

    def aggregate(self, seed: R, f: Callable[[R, typing.Any], R]) -> R:
        match self:
            case Success(value):
                return f(seed, value)
            case _:
                return seed

    def aggregate_error(self, seed: R, f: Callable[[R, typing.Any], R]) -> R:
        match self:
            case Failure(error):
                return f(seed, error)
            case _:
                return seed

    # --- Extraction ---

    def unsafe_get_ok(self) -> typing.Any:
        """Return the success payload or raise ``UnwrapError``.

        Meant for call sites that already branched on ``is_ok``.
        """
        match self:
            case Success(value):
                return value
            case Failure(error):
                raise UnwrapError(
                    f"The Result is a Failure with error: {error!r}",
                    hint="Check is_ok before calling unsafe_get_ok().",
                )
        raise AssertionError("unreachable")

    def unsafe_get_error(self) -> typing.Any:
        """Return the failure payload or raise ``UnwrapError``."""
        match self:
            case Failure(error):
                return error
            case Success(value):
                raise UnwrapError(
                    f"The Result is a Success with value: {value!r}",
                    hint="Check is_error before calling unsafe_get_error().",
                )
        raise AssertionError("unreachable")

    def get_ok(self) -> Maybe[typing.Any]:
        match self:
            case Success(value):
                return Just(value)
            case _:
                return Nothing()

    def get_error(self) -> Maybe[typing.Any]:
        match self:
            case Failure(error):
                return Just(error)
            case _:
                return Nothing()

    def get_ok_or_else(self, f: Callable[[], typing.Any]) -> typing.Any:
        """Return the success payload, or call *f* for a fallback."""
        match self:
            case Success(value):
                return value
            case _:
                return f()

    def get_error_or_else(self, f: Callable[[], typing.Any]) -> typing.Any:
        """Return the failure payload, or call *f* for a fallback."""
        match self:
            case Failure(error):
                return error
            case _:
                return f()

    def get_ok_or_error(
        self,
        on_ok: Callable[[typing.Any], R],
        on_error: Callable[[typing.Any], R],
    ) -> R:
        """Fold both cases into one value."""
        match self:
            case Success(value):
                return on_ok(value)
            case Failure(error):
                return on_error(error)
        raise AssertionError("unreachable")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess](_ResultMethods):
    """A successful result."""

    value: TSuccess

    def __post_init__(self) -> None:
        _require(
            condition=self.value is not None,
            message="Success requires a value, got None",
            exc=MissingPayloadError,
            hint="Use Maybe for values that may be absent.",
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure](_ResultMethods):
    """A failed result, containing the error."""

    error: TFailure

    def __post_init__(self) -> None:
        _require(
            condition=self.error is not None,
            message="Failure requires an error, got None",
            exc=MissingPayloadError,
        )


Result = Success[TSuccess] | Failure[TFailure]


def _check_cast(payload: object, target: type, side: str) -> None:
    _require(
        condition=isinstance(payload, target),
        message=(
            f"Cannot cast {side} payload {payload!r} "
            f"({type(payload).__name__}) to {target.__name__}"
        ),
        exc=CastError,
    )


# --- Module-level combinators ---


def apply(
    fn_result: Result[Callable[[typing.Any], U], typing.Any],
    arg: Result[typing.Any, typing.Any],
) -> Result[U, Errors]:
    """Function form of ``Result.apply``."""
    return fn_result.apply(arg)


def lift(
    fn: Callable[..., U], arity: int | None = None
) -> Success[Callable[[typing.Any], typing.Any]]:
    """Wrap *fn* as a ``Success`` of its curried form, ready for ``apply``.

    Example:
        lift(Person).apply(name).apply(age).apply(addresses)
    """
    n = positional_arity(fn) if arity is None else arity
    _require(
        condition=n is not None and n >= 1,
        message=f"Cannot curry {fn!r}: needs a fixed arity of at least 1",
        exc=DomainKitError,
        hint="Pass arity=... explicitly for variadic callables.",
    )
    return Success(_curry(fn, typing.cast("int", n), ()))


def _curry(
    fn: Callable[..., U], arity: int, bound: tuple[typing.Any, ...]
) -> Callable[[typing.Any], typing.Any]:
    def step(x: typing.Any) -> typing.Any:
        args = (*bound, x)
        if len(args) == arity:
            return fn(*args)
        return _curry(fn, arity, args)

    return step


def apply_all(
    fn: Callable[..., U], *results: Result[typing.Any, typing.Any]
) -> Result[U, Errors]:
    """Apply *fn* to every success payload, or collect every error.

    Equivalent to ``lift(fn, len(results))`` applied to each result in turn.
    """
    head: Result[typing.Any, typing.Any] = lift(fn, len(results))
    return reduce(apply, results, head)


def flatten(
    result: Result[Result[TSuccess, TFailure], TFailure],
) -> Result[TSuccess, TFailure]:
    """Collapse a success that holds another result."""
    match result:
        case Success(inner):
            return inner
        case _:
            return typing.cast("Failure[TFailure]", result)


def flatten_error(
    result: Result[TSuccess, Result[TSuccess, TFailure]],
) -> Result[TSuccess, TFailure]:
    """Collapse a failure that holds another result."""
    match result:
        case Failure(inner):
            return inner
        case _:
            return typing.cast("Success[TSuccess]", result)


def try_call(
    fn: Callable[[typing.Any], TSuccess],
    value: typing.Any,
    *,
    catch: type[X] | tuple[type[X], ...],
) -> Result[TSuccess, X]:
    """Call ``fn(value)``, converting only exceptions of type *catch*.

    Any other exception propagates to the caller unchanged, and so does the
    ``MissingPayloadError`` raised when *fn* returns None.

    Example:
        try_call(int, "42", catch=ValueError)   # Success(42)
        try_call(int, "x", catch=ValueError)    # Failure(ValueError(...))
    """
    try:
        out = fn(value)
    except catch as e:
        log.debug("try_call converted %s into a Failure", type(e).__name__)
        return Failure(e)
    return Success(out)


def collect(
    results: Iterable[Result[typing.Any, typing.Any]],
) -> Result[list[typing.Any], Errors]:
    """Gather all success payloads into a list, or every error into ``Errors``.

    Errors are normalized and concatenated in order, as ``apply`` does.
    """
    values: list[typing.Any] = []
    errors: list[typing.Any] | None = None
    for r in results:
        match r:
            case Success(value):
                values.append(value)
            case Failure(error):
                errors = [] if errors is None else errors
                errors.extend(Errors.of(error))
    if errors is not None:
        return Failure(Errors(errors))
    return Success(values)
