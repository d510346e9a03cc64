"""Construction-time checks shared by decoder and combinator modules.

Failures here are programmer errors: they raise immediately instead of being
folded into a ``Result``.
"""

from __future__ import annotations

import inspect
import logging
import typing

from pluck.errors import ArityError, DecoderDefinitionError

if typing.TYPE_CHECKING:
    from pluck.decoder import Decoder

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = DecoderDefinitionError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_callable(func: typing.Any, field_name: str) -> None:
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=field_name,
    )


def _require_decoder(value: typing.Any, field_name: str) -> None:
    from pluck.decoder import Decoder

    _require(
        condition=isinstance(value, Decoder),
        message=f"must be a Decoder, got {type(value).__name__}",
        field_name=field_name,
    )


def _require_decoders(values: tuple[Decoder[typing.Any, typing.Any], ...]) -> None:
    for i, value in enumerate(values):
        _require_decoder(value, f"decoders[{i}]")


def _require_zero_arg_callable(func: typing.Any, field_name: str) -> None:
    """Validate callable takes no arguments so it can be invoked on every run."""
    _require_callable(func, field_name)

    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        # Builtins without introspectable signatures are accepted as-is
        return
    has_required_params = any(
        p.default is p.empty
        and p.kind in (*_POSITIONAL, inspect.Parameter.KEYWORD_ONLY)
        for p in sig.parameters.values()
    )
    _require(
        condition=not has_required_params,
        message="must be a zero-argument callable",
        field_name=field_name,
    )


def _positional_bounds(func: typing.Any) -> tuple[int, int | None] | None:
    """Return (required, maximum) positional parameter counts.

    ``maximum`` is None when ``func`` takes ``*args``; the whole result is None
    when the signature can't be inspected.
    """
    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        return None
    required = 0
    maximum: int | None = 0
    for p in sig.parameters.values():
        if p.kind in _POSITIONAL:
            maximum = None if maximum is None else maximum + 1
            if p.default is p.empty:
                required += 1
        elif p.kind is inspect.Parameter.VAR_POSITIONAL:
            maximum = None
    return required, maximum


def _check_arity(
    func: typing.Any, count: int, *, arity: int | None, strict: bool
) -> None:
    """Ensure ``func`` accepts exactly ``count`` positional arguments."""
    if arity is not None:
        _require(
            condition=arity == count,
            message=(
                f"decoder count ({count}) must match the declared arity ({arity})"
            ),
            exc=ArityError,
        )
        return

    bounds = _positional_bounds(func)
    if bounds is None:
        if strict:
            raise ArityError(
                f"can't inspect the signature of {func!r}",
                hint="Pass arity=... to map_n or disable strict_arity.",
                received=count,
            )
        logger.debug("Skipping arity check for uninspectable %r", func)
        return

    required, maximum = bounds
    if count < required or (maximum is not None and count > maximum):
        expected = required if maximum == required else None
        raise ArityError(
            f"decoder count ({count}) must match the argument count of "
            f"{getattr(func, '__name__', func)!r} ({_format_bounds(required, maximum)})",
            hint="Pass one decoder per positional parameter of the combine function.",
            expected=expected,
            received=count,
        )


def _format_bounds(required: int, maximum: int | None) -> str:
    if maximum is None:
        return f"at least {required}"
    if maximum == required:
        return str(required)
    return f"{required} to {maximum}"
