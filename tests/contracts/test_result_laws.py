"""Algebraic laws for Result.

Functor and monad identities are checked as hypothesis properties on both
the success and the failure side; applicative accumulation is checked for
every combination of cases.
"""

from __future__ import annotations

from collections.abc import Callable

from hypothesis import given
from hypothesis import strategies as st
import pytest

from domainkit.result import Errors, Failure, Result, Success

pytestmark = [pytest.mark.unit, pytest.mark.contract]

results = st.one_of(st.integers().map(Success), st.text().map(Failure))
int_fns = st.functions(like=lambda x: 0, returns=st.integers(), pure=True)
str_fns = st.functions(like=lambda e: "", returns=st.text(), pure=True)

_KLEISLI: list[Callable[[int], Result[int, str]]] = [
    lambda x: Success(x + 1),
    lambda x: Success(x * 2),
    lambda x: Failure(f"odd {x}") if x % 2 else Success(x // 2),
    lambda x: Failure("always"),
]
kleisli = st.sampled_from(_KLEISLI)


def _identity(x: object) -> object:
    return x


# --- Functor ---


@given(r=results)
def test_map_identity(r: Result[int, str]) -> None:
    assert r.map(_identity) == r


@given(r=results, f=int_fns, g=int_fns)
def test_map_composition(r: Result[int, str], f, g) -> None:  # noqa: ANN001
    assert r.map(f).map(g) == r.map(lambda x: g(f(x)))


@given(r=results)
def test_map_error_identity(r: Result[int, str]) -> None:
    assert r.map_error(_identity) == r


@given(r=results, f=str_fns, g=str_fns)
def test_map_error_composition(r: Result[int, str], f, g) -> None:  # noqa: ANN001
    assert r.map_error(f).map_error(g) == r.map_error(lambda e: g(f(e)))


# --- Monad ---


@given(x=st.integers(), f=kleisli)
def test_bind_left_identity(x: int, f) -> None:  # noqa: ANN001
    assert Success(x).bind(f) == f(x)


@given(r=results)
def test_bind_right_identity(r: Result[int, str]) -> None:
    assert r.bind(Success) == r


@given(r=results, f=kleisli, g=kleisli)
def test_bind_associativity(r: Result[int, str], f, g) -> None:  # noqa: ANN001
    assert r.bind(f).bind(g) == r.bind(lambda x: f(x).bind(g))


@given(e=st.text())
def test_bind_error_left_identity(e: str) -> None:
    def recover(err: str) -> Result[int, str]:
        return Success(len(err)) if err else Failure("empty")

    assert Failure(e).bind_error(recover) == recover(e)


@given(r=results)
def test_bind_error_right_identity(r: Result[int, str]) -> None:
    assert r.bind_error(Failure) == r


# --- Applicative accumulation ---


@given(e1=st.text(), e2=st.text())
def test_apply_two_failures_keeps_both_in_order(e1: str, e2: str) -> None:
    result = Failure(e1).apply(Failure(e2))
    assert result == Failure(Errors((e1, e2)))
    assert list(result.unsafe_get_error()) == [e1, e2]


@given(x=st.integers(), e=st.text())
def test_apply_single_failure_propagates(x: int, e: str) -> None:
    add = Success(lambda y: y + 1)
    assert add.apply(Failure(e)) == Failure(Errors((e,)))
    assert Failure(e).apply(Success(x)) == Failure(Errors((e,)))


@given(x=st.integers(), y=st.integers())
def test_apply_two_successes(x: int, y: int) -> None:
    curried = Success(lambda a: lambda b: a * 10 + b)
    assert curried.apply(Success(x)).apply(Success(y)) == Success(x * 10 + y)


@given(r=results)
def test_apply_identity(r: Result[int, str]) -> None:
    """Applying the wrapped identity leaves successes unchanged."""
    expected = r.map_error(Errors.of)
    assert Success(_identity).apply(r) == expected
