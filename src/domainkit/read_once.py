"""Single-read cell: a value handed to exactly one reader, ever.

The slot is a one-element ``collections.deque``. ``popleft`` on a deque is
documented as thread-safe, so taking the value is a single atomic exchange
of the slot to empty: of any number of racing readers exactly one receives
the value and every other reader finds the slot empty. No lock is taken.
"""

from __future__ import annotations

from collections import deque
import logging
import typing

from domainkit.config import current_settings
from domainkit.maybe import Just, Maybe, Nothing

log = logging.getLogger(__name__)

T = typing.TypeVar("T")


class ReadOnce[T]:
    """Zero-argument callable yielding ``Just(value)`` once, then ``Nothing()``.

    The ``trace_reads`` setting is captured when the cell is created.
    """

    __slots__ = ("_slot", "_trace")

    def __init__(self, value: T) -> None:
        self._slot: deque[T] = deque((value,), maxlen=1)
        self._trace = current_settings().trace_reads

    def __call__(self) -> Maybe[T]:
        slot = self._slot
        if not slot:
            # Fast path: already taken.
            return self._miss()
        try:
            value = slot.popleft()
        except IndexError:
            # Another reader emptied the slot after the check above.
            return self._miss()
        if self._trace:
            log.debug("ReadOnce %#x: value taken", id(self))
        return Just(value)

    def _miss(self) -> Maybe[T]:
        if self._trace:
            log.debug("ReadOnce %#x: already consumed", id(self))
        return Nothing()

    @property
    def consumed(self) -> bool:
        """True once the value has been handed out."""
        return not self._slot

    def __repr__(self) -> str:
        state = "consumed" if self.consumed else "unread"
        return f"ReadOnce({state})"


def read_once(value: T) -> ReadOnce[T]:
    """Wrap *value* so that only the first of any number of reads receives it.

    Example:
        token = read_once(secret)
        token()  # Just(secret)
        token()  # Nothing()
    """
    return ReadOnce(value)
