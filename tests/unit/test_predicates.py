from __future__ import annotations

import pytest

from domainkit.predicates import (
    all_of,
    and_,
    exclusive_between,
    inclusive_between,
    is_false,
    is_true,
    matches,
    not_none,
    or_,
)

pytestmark = pytest.mark.unit


def _explode() -> bool:
    raise AssertionError("right-hand side must not be evaluated")


def test_truthiness_helpers() -> None:
    assert is_true(True) and not is_true(False)
    assert is_false(False) and not is_false(True)
    assert not_none(0) and not not_none(None)


@pytest.mark.parametrize(
    "x,expected",
    [(0, True), (5, True), (10, True), (-1, False), (11, False)],
)
def test_inclusive_between(x: int, expected: bool) -> None:
    assert inclusive_between(x, 0, 10) is expected


@pytest.mark.parametrize(
    "x,expected",
    [(1, True), (9, True), (0, False), (10, False)],
)
def test_exclusive_between(x: int, expected: bool) -> None:
    assert exclusive_between(x, 0, 10) is expected


def test_matches_searches_anywhere_unless_anchored() -> None:
    assert matches("hello world", "wor")
    assert not matches("hello world", "^wor")
    assert matches("Mr. Smith", r"^[a-zA-Z\. ]+$")
    assert not matches("R2D2", r"^[a-zA-Z\. ]+$")


def test_and_or_eager() -> None:
    assert and_(True, True)
    assert not and_(True, False)
    assert or_(False, True)
    assert not or_(False, False)


def test_and_or_lazy_right_hand_side() -> None:
    assert not and_(False, _explode)
    assert or_(True, _explode)
    assert and_(True, lambda: True)
    assert not or_(False, lambda: False)


def test_all_of_stops_at_first_false() -> None:
    assert all_of(True, lambda: True)
    assert not all_of(True, False, _explode)
    assert all_of()
