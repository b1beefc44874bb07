"""Internal validation helpers used across domainkit modules.

These helpers centralize misuse guards and the rendering of offending
inputs so error messages stay consistent between value types.
"""

from __future__ import annotations

import inspect
import typing

from domainkit.errors import ConstructionError, DomainKitError

# Handed to smart-constructed values by their factories only.
FACTORY_TOKEN: typing.Final = object()


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[DomainKitError] = DomainKitError,
    hint: str | None = None,
) -> None:
    """Raise *exc* with *message* and *hint* unless *condition* holds."""
    if not condition:
        raise exc(message, hint=hint)


def _require_factory(token: object, cls: type) -> None:
    """Reject instances that were not built by *cls*'s own factories."""
    name = cls.__name__
    _require(
        condition=token is FACTORY_TOKEN,
        message=f"{name} cannot be constructed directly",
        exc=ConstructionError,
        hint=f"Use {name}.maybe(...) or {name}.result(...).",
    )


def preview(value: object, limit: int) -> str:
    """Return ``repr(value)`` cut to *limit* characters."""
    text = repr(value)
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."


def positional_arity(func: typing.Callable[..., typing.Any]) -> int | None:
    """Count the required positional parameters of *func*.

    Returns None when the signature is not introspectable or the callable
    takes ``*args``, since neither has a fixed arity.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    count = 0
    for p in sig.parameters.values():
        if p.kind is p.VAR_POSITIONAL:
            return None
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and (
            p.default is p.empty
        ):
            count += 1
    return count
