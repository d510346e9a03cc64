"""The Decoder type and its structural combinators.

A ``Decoder`` wraps a pure function from raw input to ``Result``. Building
decoders never runs anything; ``run`` walks the composed closures against a
concrete input and always returns ``Ok`` or ``Err``.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import logging
from typing import Any

from pluck._validation import _require_callable, _require_decoder
from pluck.errors import DecodeError
from pluck.result import Err, Result

__all__ = ["Decoder", "decoder"]

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Decoder[I, O]:
    """An immutable, reusable input-to-``Result`` transform.

    Decoders hold no state between runs, so one value may be shared freely
    across threads and reentrant calls.

    Example:
        age = pluck.from_key("age", pluck.str_to_int())
        age.run({"age": "42"})  # Ok(42)
        age.run({"age": "x"})   # Err("`'x'` can't be converted to an Integer")
    """

    fn: Callable[[I], Result[O, str]]

    def __post_init__(self) -> None:
        _require_callable(self.fn, "Decoder.fn")

    def run(self, value: I) -> Result[O, str]:
        """Decode ``value``; failures are returned as ``Err``."""
        return self.fn(value)

    def run_or_raise(self, value: I) -> O:
        """Decode ``value`` and return the result, raising on failure.

        Raises:
            DecodeError: With the failure message unchanged.
        """
        result = self.run(value)
        if isinstance(result, Err):
            logger.debug("Decode failed: %s", result.error)
            raise DecodeError(result.error)
        return result.value

    def map[O2](self, f: Callable[[O], O2]) -> Decoder[I, O2]:
        """Transform the decoded value; failures pass through and ``f`` isn't called."""
        _require_callable(f, "map")

        def run(value: I) -> Result[O2, str]:
            return self.run(value).map(f)

        return Decoder(run)

    def bind[O2](self, f: Callable[[O], Decoder[I, O2]]) -> Decoder[I, O2]:
        """Choose the next decoder from the decoded value.

        The chosen decoder runs against the *original* input, not the decoded
        value. This is what makes discriminated decoding work:

            shape = pluck.from_key("kind", pluck.string()).bind(
                lambda kind: circle if kind == "circle" else square
            )

        reads ``"kind"`` and then decodes the whole mapping with ``circle`` or
        ``square``.
        """
        _require_callable(f, "bind")

        def run(value: I) -> Result[O2, str]:
            def next_step(decoded: O) -> Result[O2, str]:
                chosen = f(decoded)
                _require_decoder(chosen, "bind result")
                return chosen.run(value)

            return self.run(value).and_then(next_step)

        return Decoder(run)

    def or_else(self, other: Decoder[I, O]) -> Decoder[I, O]:
        """Try ``self``, then ``other`` on the same input if ``self`` fails.

        Left-biased: ``other`` never runs when ``self`` succeeds. When both
        fail, ``other``'s error is returned.
        """
        _require_decoder(other, "or_else")

        def run(value: I) -> Result[O, str]:
            result = self.run(value)
            if isinstance(result, Err):
                return other.run(value)
            return result

        return Decoder(run)

    def replace_with[O2](self, value: O2) -> Decoder[I, O2]:
        """Succeed with ``value`` whenever ``self`` succeeds."""
        return self.map(lambda _: value)

    def __or__(self, other: Any) -> Decoder[I, O]:
        if not isinstance(other, Decoder):
            return NotImplemented
        return self.or_else(other)


def decoder[I, O](fn: Callable[[I], Result[O, str]]) -> Decoder[I, O]:
    """Wrap ``fn`` as a ``Decoder``; usable as a decorator."""
    return Decoder(fn)


