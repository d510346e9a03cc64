"""Exception hierarchy for pluck.

Decode failures travel through ``Err`` values; the exceptions here are raised
only by ``Decoder.run_or_raise`` or for programmer errors in decoder
construction and result handling.
"""

from __future__ import annotations


class PluckError(Exception):
    """Base exception for all pluck errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class DecodeError(PluckError):
    """Input could not be decoded.

    ``str(err)`` is the decoder's failure message, unchanged.
    """


class UnwrapError(PluckError):
    """A value or error was extracted from the wrong ``Result`` variant."""


class DecoderDefinitionError(PluckError, TypeError):
    """A decoder was built from invalid parts (a bug, not bad input)."""


class ArityError(DecoderDefinitionError):
    """``map_n`` received a decoder count its combine function can't accept."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        expected: int | None = None,
        received: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.expected = expected
        self.received = received


class ConfigurationError(PluckError):
    """Configuration validation or resolution failed."""
