from __future__ import annotations

import pytest

from domainkit._validation import _require
from domainkit.errors import (
    CastError,
    ConfigurationError,
    ConstructionError,
    DomainKitError,
    MissingPayloadError,
    UnwrapError,
)

pytestmark = pytest.mark.unit


def test_hint_is_optional() -> None:
    err = DomainKitError("boom", hint="do this")
    assert str(err) == "boom"
    assert err.hint == "do this"
    assert DomainKitError("fail").hint is None


@pytest.mark.parametrize(
    "exc_type",
    [CastError, ConfigurationError, ConstructionError, MissingPayloadError, UnwrapError],
)
def test_subclass_hierarchy(exc_type: type[DomainKitError]) -> None:
    """Every misuse error is catchable as DomainKitError."""
    err = exc_type("x", hint="h")
    assert isinstance(err, DomainKitError)
    assert err.hint == "h"


def test_require_raises_requested_type_with_message_and_hint() -> None:
    with pytest.raises(CastError) as exc:
        _require(condition=False, message="bad payload", exc=CastError, hint="fix it")
    assert str(exc.value) == "bad payload"
    assert exc.value.hint == "fix it"
    _require(condition=True, message="unused")
