from __future__ import annotations

import pytest

import pluck
from pluck.errors import (
    ArityError,
    ConfigurationError,
    DecodeError,
    DecoderDefinitionError,
    PluckError,
    UnwrapError,
)

pytestmark = pytest.mark.unit


def test_pluck_error_keeps_message_and_hint_separate() -> None:
    err = PluckError("boom", hint="do this")

    assert str(err) == "boom"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    assert DecodeError("fail").hint is None


def test_arity_error_structured_metadata() -> None:
    err = ArityError("mismatch", expected=2, received=1)

    assert err.expected == 2
    assert err.received == 1


def test_subclass_hierarchy() -> None:
    """Every library error is a PluckError; definition errors are also TypeErrors."""
    for exc_type in (
        ArityError,
        ConfigurationError,
        DecodeError,
        DecoderDefinitionError,
        UnwrapError,
    ):
        assert issubclass(exc_type, PluckError)

    assert issubclass(ArityError, DecoderDefinitionError)
    assert issubclass(DecoderDefinitionError, TypeError)
    assert not issubclass(DecodeError, DecoderDefinitionError)


def test_decode_error_message_matches_err_payload() -> None:
    decoder = pluck.from_key("a", pluck.str_to_int())
    value = {"b": "1"}

    with pytest.raises(DecodeError) as exc:
        decoder.run_or_raise(value)

    assert str(exc.value) == decoder.run(value).unwrap_error()
