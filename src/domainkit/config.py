"""Settings schema and resolution for domainkit.

The layout follows a small two-part design:
- ``Settings`` is the pydantic schema wall (fields, defaults, constraints)
- ``FrozenSettings`` is the immutable payload library code reads

Settings never come from the process environment. Library code reads the
settings installed with ``settings_scope``, or the defaults when no scope is
active.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from domainkit.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


class Settings(BaseModel):
    """Pydantic schema for domainkit settings."""

    #: Check payload types in ``Result.cast`` / ``Result.cast_error``.
    strict_casts: bool = Field(default=False)
    #: Log every read of a single-read cell at DEBUG level.
    trace_reads: bool = Field(default=False)
    #: Maximum characters of an offending input shown in error messages.
    preview_chars: int = Field(default=80, ge=8)

    model_config = {"extra": "forbid"}

    @field_validator("strict_casts", "trace_reads", mode="before")
    @classmethod
    def normalize_flag(cls, v: Any) -> Any:
        """Accept the usual string spellings for booleans."""
        if isinstance(v, str):
            s = v.strip().lower()
            if s in _TRUTHY:
                return True
            if s in _FALSY:
                return False
        return v  # Let pydantic raise with a precise error message


@dataclass(frozen=True)
class FrozenSettings:
    """Immutable, validated settings."""

    strict_casts: bool = False
    trace_reads: bool = False
    preview_chars: int = 80


_DEFAULTS = FrozenSettings()

_AMBIENT: contextvars.ContextVar[FrozenSettings | None] = contextvars.ContextVar(
    "domainkit_settings", default=None
)


def resolve_settings(overrides: Mapping[str, Any] | None = None) -> FrozenSettings:
    """Validate *overrides* on top of the defaults.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    try:
        settings = Settings.model_validate(dict(overrides or {}))
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "settings"
        msg = err.get("msg", "invalid value")
        raise ConfigurationError(
            f"Settings validation failed for {field!r}: {msg}",
            hint=f"Check the {field!r} override.",
        ) from e

    frozen = FrozenSettings(**settings.model_dump())
    log.debug("Resolved settings: %s", frozen)
    return frozen


def current_settings() -> FrozenSettings:
    """Return the settings of the innermost active scope, or the defaults."""
    ambient = _AMBIENT.get()
    return _DEFAULTS if ambient is None else ambient


@contextmanager
def settings_scope(
    settings_or_overrides: FrozenSettings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Generator[FrozenSettings]:
    """Install settings for the duration of a ``with`` block.

    Thread-safe and async-safe; the previous ambient settings are restored on
    exit. Invalid overrides raise ``ConfigurationError`` on entry, before any
    validation code runs under the scope.

    Example:
        with settings_scope(strict_casts=True):
            result.cast(int)
    """
    if isinstance(settings_or_overrides, FrozenSettings):
        cfg = settings_or_overrides
    else:
        cfg = resolve_settings({**(settings_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
