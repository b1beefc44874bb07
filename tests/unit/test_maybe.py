from __future__ import annotations

import pytest

from domainkit.maybe import Just, Nothing, maybe_of

pytestmark = pytest.mark.unit


def test_nothing_instances_are_equal() -> None:
    assert Nothing() == Nothing()
    assert hash(Nothing()) == hash(Nothing())
    assert Just(None) != Nothing()


def test_flags() -> None:
    assert Just(1).is_just and not Just(1).is_nothing
    assert Nothing().is_nothing and not Nothing().is_just


def test_map_and_bind() -> None:
    assert Just(2).map(lambda x: x + 1) == Just(3)
    assert Nothing().map(lambda x: x + 1) == Nothing()
    assert Just(2).bind(lambda x: Nothing()) == Nothing()
    assert Just(2).bind(lambda x: Just(x * 5)) == Just(10)


def test_zip_requires_both_values() -> None:
    assert Just(2).zip(Just(3), lambda a, b: a + b) == Just(5)
    assert Just(2).zip(Nothing(), lambda a, b: a + b) == Nothing()
    assert Nothing().zip(Just(3), lambda a, b: a + b) == Nothing()


def test_get_or_else_is_lazy() -> None:
    assert Just("v").get_or_else(lambda: pytest.fail("must not run")) == "v"
    assert Nothing().get_or_else(lambda: "fallback") == "fallback"


def test_maybe_of() -> None:
    assert maybe_of(None) == Nothing()
    assert maybe_of(0) == Just(0)
