"""Leaf decoders: scalar type guards, constants and text conversions.

Factories resolve the active configuration once, when the decoder is built;
running a decoder never reads the environment.
"""

from __future__ import annotations

import math
from typing import Any

from pluck._preview import describe
from pluck.config import current_config
from pluck.decoder import Decoder
from pluck.result import Err, Ok, Result

__all__ = [
    "boolean",
    "fail",
    "float_",
    "integer",
    "match",
    "nil",
    "raw",
    "str_to_bool",
    "str_to_float",
    "str_to_int",
    "string",
    "succeed",
]

_TRUE_STRINGS = frozenset({"true", "1"})
_FALSE_STRINGS = frozenset({"false", "0"})


def _repr_limit() -> int:
    return current_config().repr_limit


def _not_a_string(value: Any, limit: int) -> Err[str]:
    return Err(f"{describe(value, limit)} is not a String")


def string() -> Decoder[Any, str]:
    """Accept only ``str`` input."""
    limit = _repr_limit()

    def run(value: Any) -> Result[str, str]:
        if not isinstance(value, str):
            return _not_a_string(value, limit)
        return Ok(value)

    return Decoder(run)


def integer() -> Decoder[Any, int]:
    """Accept ``int`` input; ``bool`` is rejected even though it subclasses ``int``."""
    limit = _repr_limit()

    def run(value: Any) -> Result[int, str]:
        if isinstance(value, bool) or not isinstance(value, int):
            return Err(f"{describe(value, limit)} is not an Integer")
        return Ok(value)

    return Decoder(run)


def float_() -> Decoder[Any, float]:
    """Accept ``float`` or ``int`` input, always producing a ``float``."""
    limit = _repr_limit()

    def run(value: Any) -> Result[float, str]:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return Err(f"{describe(value, limit)} is not a Float")
        try:
            return Ok(float(value))
        except OverflowError:
            return Err(f"{describe(value, limit)} is too large for a Float")

    return Decoder(run)


def boolean() -> Decoder[Any, bool]:
    limit = _repr_limit()

    def run(value: Any) -> Result[bool, str]:
        if not isinstance(value, bool):
            return Err(f"{describe(value, limit)} is not a Boolean")
        return Ok(value)

    return Decoder(run)


def nil() -> Decoder[Any, None]:
    limit = _repr_limit()

    def run(value: Any) -> Result[None, str]:
        if value is not None:
            return Err(f"{describe(value, limit)} isn't nil")
        return Ok(None)

    return Decoder(run)


def raw() -> Decoder[Any, Any]:
    """Accept anything and return it unchanged."""
    return Decoder(Ok)


def match[T](constant: T) -> Decoder[Any, T]:
    """Accept input equal (``==``) to ``constant``; no type check is made.

    Example:
        pluck.match(42).run(42)  # Ok(42)
        pluck.match(42).run(41)  # Err("`41` doesn't match `42`")
    """
    limit = _repr_limit()
    expected = describe(constant, limit)

    def run(value: Any) -> Result[T, str]:
        if value == constant:
            return Ok(value)
        return Err(f"{describe(value, limit)} doesn't match {expected}")

    return Decoder(run)


def succeed[T](value: T) -> Decoder[Any, T]:
    """Ignore the input and succeed with ``value``."""
    return Decoder(lambda _: Ok(value))


def fail(message: str) -> Decoder[Any, Any]:
    """Ignore the input and fail with ``message``."""
    return Decoder(lambda _: Err(message))


# --- Text conversions ---
# Only ASCII text is parsed; int()/float() would otherwise accept other
# scripts' digits. Surrounding whitespace and digit underscores are accepted.


def str_to_int() -> Decoder[Any, int]:
    """Parse ASCII text with ``int()``, e.g. ``"42"``, ``"-3"`` or ``" 1_000 "``."""
    limit = _repr_limit()

    def run(value: Any) -> Result[int, str]:
        if not isinstance(value, str):
            return _not_a_string(value, limit)
        if value.isascii():
            try:
                return Ok(int(value))
            except ValueError:
                pass
        return Err(f"{describe(value, limit)} can't be converted to an Integer")

    return Decoder(run)


def str_to_float() -> Decoder[Any, float]:
    """Parse ASCII text with ``float()``; ``nan`` and infinities are rejected."""
    limit = _repr_limit()

    def run(value: Any) -> Result[float, str]:
        if not isinstance(value, str):
            return _not_a_string(value, limit)
        try:
            parsed = float(value) if value.isascii() else math.nan
        except ValueError:
            parsed = math.nan
        if not math.isfinite(parsed):
            return Err(f"{describe(value, limit)} can't be converted to a Float")
        return Ok(parsed)

    return Decoder(run)


def str_to_bool() -> Decoder[Any, bool]:
    """Map ``"true"``/``"1"`` to True and ``"false"``/``"0"`` to False."""
    limit = _repr_limit()

    def run(value: Any) -> Result[bool, str]:
        if not isinstance(value, str):
            return _not_a_string(value, limit)
        if value in _TRUE_STRINGS:
            return Ok(True)
        if value in _FALSE_STRINGS:
            return Ok(False)
        return Err(f"{describe(value, limit)} can't be converted to a Boolean")

    return Decoder(run)
