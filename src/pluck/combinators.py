"""Combinators over structured input: keys, indices, arrays, aggregation, recursion."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any

from pluck._preview import describe
from pluck._validation import (
    _check_arity,
    _require,
    _require_callable,
    _require_decoder,
    _require_decoders,
    _require_zero_arg_callable,
)
from pluck.config import current_config
from pluck.decoder import Decoder
from pluck.result import Err, Ok, Result

__all__ = ["array", "at_index", "from_key", "lazy", "map_n"]

# Text types are sequences to Python but scalars to a decoder.
_NOT_SEQUENCES = (str, bytes, bytearray)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _NOT_SEQUENCES)


def from_key[K, V, O](key: K, inner: Decoder[V, O]) -> Decoder[Mapping[K, V], O]:
    """Decode the value stored under ``key`` of a mapping with ``inner``."""
    _require(
        condition=isinstance(key, Hashable),
        message=f"key must be hashable, got {type(key).__name__}",
        field_name="from_key",
    )
    _require_decoder(inner, "from_key")
    limit = current_config().repr_limit

    def run(value: Mapping[K, V]) -> Result[O, str]:
        if not isinstance(value, Mapping):
            return Err(f"{describe(value, limit)} is not a mapping")
        if key not in value:
            return Err(f"{describe(value, limit)} doesn't contain key {key!r}")
        return inner.run(value[key])

    return Decoder(run)


def at_index[V, O](index: int, inner: Decoder[V, O]) -> Decoder[Sequence[V], O]:
    """Decode the element at ``index`` of a sequence with ``inner``.

    Negative indices never count from the end; they fail as out of range.
    """
    _require(
        condition=isinstance(index, int) and not isinstance(index, bool),
        message=f"index must be an int, got {type(index).__name__}",
        field_name="at_index",
    )
    _require_decoder(inner, "at_index")
    limit = current_config().repr_limit

    def run(value: Sequence[V]) -> Result[O, str]:
        if not _is_sequence(value):
            return Err(f"{describe(value, limit)} is not a sequence")
        if index < 0 or index >= len(value):
            return Err(f"index {index} out of range for {describe(value, limit)}")
        return inner.run(value[index])

    return Decoder(run)


def array[V, O](inner: Decoder[V, O]) -> Decoder[Sequence[V], list[O]]:
    """Decode every element of a sequence with ``inner``, in order.

    Stops at the first failing element and returns its error as-is.
    """
    _require_decoder(inner, "array")
    limit = current_config().repr_limit

    def run(value: Sequence[V]) -> Result[list[O], str]:
        if not _is_sequence(value):
            return Err(f"{describe(value, limit)} is not a sequence")
        decoded: list[O] = []
        for item in value:
            result = inner.run(item)
            if isinstance(result, Err):
                return result
            decoded.append(result.value)
        return Ok(decoded)

    return Decoder(run)


def map_n[I, R](
    *decoders: Decoder[I, Any],
    combine: Callable[..., R],
    arity: int | None = None,
) -> Decoder[I, R]:
    """Run several decoders on the same input and combine their values.

    All decoders run, in order, even after one fails; the first failure in
    argument order is returned. ``combine`` receives the values positionally
    in the same order.

    Args:
        *decoders: Decoders applied to the whole input.
        combine: Called with one value per decoder.
        arity: Declared parameter count of ``combine``. Needed only when its
            signature can't be inspected and ``strict_arity`` is enabled.

    Raises:
        ArityError: If the decoder count doesn't fit ``combine``.

    Example:
        point = pluck.map_n(
            pluck.from_key("x", pluck.integer()),
            pluck.from_key("y", pluck.integer()),
            combine=lambda x, y: (x, y),
        )
    """
    _require_decoders(decoders)
    _require_callable(combine, "map_n combine")
    _check_arity(
        combine, len(decoders), arity=arity, strict=current_config().strict_arity
    )

    def run(value: I) -> Result[R, str]:
        results = [d.run(value) for d in decoders]
        for result in results:
            if isinstance(result, Err):
                return result
        return Ok(combine(*(r.value for r in results)))

    return Decoder(run)


def lazy[I, O](thunk: Callable[[], Decoder[I, O]]) -> Decoder[I, O]:
    """Defer building a decoder until it runs, for self-referential decoders.

    ``thunk`` is called on every run; its result is not cached.

    Example:
        node = pluck.map_n(
            pluck.from_key("name", pluck.string()),
            pluck.from_key("parent", pluck.nil() | pluck.lazy(lambda: node)),
            combine=Node,
        )
    """
    _require_zero_arg_callable(thunk, "lazy")

    def run(value: I) -> Result[O, str]:
        inner = thunk()
        _require_decoder(inner, "lazy thunk result")
        return inner.run(value)

    return Decoder(run)
