"""pluck: composable decoders for untyped, dynamically-shaped input.

Public API:
    - Decoder: run(), run_or_raise(), map(), bind(), or_else(), replace_with()
    - decoder: decorator form of Decoder(fn), for defining custom leaf
      decoders with ``def`` instead of wrapping a lambda
    - Ok / Err: the Result returned by every run
    - Structural combinators: from_key(), at_index(), array(), map_n(), lazy()
    - Primitives: string(), integer(), float_(), boolean(), nil(), raw(),
      match(), succeed(), fail(), str_to_int(), str_to_float(), str_to_bool()
"""

from __future__ import annotations

import logging

from pluck.combinators import array, at_index, from_key, lazy, map_n
from pluck.config import FrozenConfig, config_scope, current_config, resolve_config
from pluck.decoder import Decoder, decoder
from pluck.errors import (
    ArityError,
    ConfigurationError,
    DecodeError,
    DecoderDefinitionError,
    PluckError,
    UnwrapError,
)
from pluck.primitives import (
    boolean,
    fail,
    float_,
    integer,
    match,
    nil,
    raw,
    str_to_bool,
    str_to_float,
    str_to_int,
    string,
    succeed,
)
from pluck.result import Err, Ok, Result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pluck-decoders")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("pluck").addHandler(logging.NullHandler())

__all__ = [
    "ArityError",
    "ConfigurationError",
    "DecodeError",
    "Decoder",
    "DecoderDefinitionError",
    "Err",
    "FrozenConfig",
    "Ok",
    "PluckError",
    "Result",
    "UnwrapError",
    "array",
    "at_index",
    "boolean",
    "config_scope",
    "current_config",
    "decoder",
    "fail",
    "float_",
    "from_key",
    "integer",
    "lazy",
    "map_n",
    "match",
    "nil",
    "raw",
    "resolve_config",
    "str_to_bool",
    "str_to_float",
    "str_to_int",
    "string",
    "succeed",
]
