"""Boolean helpers for phrasing validity rules.

Pure functions with no state. ``and_`` and ``or_`` accept either a ``bool``
or a zero-argument callable as their right-hand side; a callable is only
evaluated when the left-hand side does not already decide the outcome.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cache
import re

__all__ = [
    "all_of",
    "and_",
    "exclusive_between",
    "inclusive_between",
    "is_false",
    "is_true",
    "matches",
    "not_none",
    "or_",
]

Rhs = bool | Callable[[], bool]


def is_true(x: bool) -> bool:
    return x


def is_false(x: bool) -> bool:
    return not x


def not_none(x: object) -> bool:
    return x is not None


@cache
def _compiled(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def matches(text: str, pattern: str) -> bool:
    """True when *pattern* is found anywhere in *text* (``re.search``).

    Anchor the pattern with ``^...$`` to require a full match.
    """
    return _compiled(pattern).search(text) is not None


def inclusive_between(x: int, lo: int, hi: int) -> bool:
    """``lo <= x <= hi``."""
    return lo <= x <= hi


def exclusive_between(x: int, lo: int, hi: int) -> bool:
    """``lo < x < hi``."""
    return lo < x < hi


def _force(y: Rhs) -> bool:
    return y() if callable(y) else y


def and_(x: bool, y: Rhs) -> bool:
    return x and _force(y)


def or_(x: bool, y: Rhs) -> bool:
    return x or _force(y)


def all_of(*checks: Rhs) -> bool:
    """Left-to-right ``and_`` over *checks*, stopping at the first False."""
    return all(_force(c) for c in checks)
