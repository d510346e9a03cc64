"""Configuration: pydantic schema, frozen runtime payload and ambient scope.

Resolution precedence is ``defaults < PLUCK_* environment < overrides``.
Decoder factories read the active configuration once, when the decoder is
built, so a ``config_scope`` affects decoders constructed inside it and
running a decoder never touches the environment or ``.env``.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from pluck.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

__all__ = [
    "ENV_PREFIX",
    "FrozenConfig",
    "Settings",
    "config_scope",
    "current_config",
    "resolve_config",
]

logger = logging.getLogger(__name__)

ENV_PREFIX = "PLUCK_"

# --- Schema (pydantic wall) ---


class Settings(BaseModel):
    """Schema for configuration fields, defaults and validation rules."""

    #: Maximum length of an input rendered into a failure message; 0 disables truncation.
    repr_limit: int = Field(default=120, ge=0)
    #: Reject ``map_n`` combine functions whose signature can't be inspected.
    strict_arity: bool = Field(default=False)

    model_config = {"extra": "forbid"}


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Validated configuration consumed by decoders."""

    repr_limit: int = 120
    strict_arity: bool = False


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "pluck_ambient_config", default=None
)

_DOTENV_LOADED: bool = False


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    load_dotenv()
    _DOTENV_LOADED = True


def load_env() -> dict[str, Any]:
    """Read ``PLUCK_*`` variables for known fields; pydantic coerces the strings."""
    values: dict[str, Any] = {}
    for name in Settings.model_fields:
        key = f"{ENV_PREFIX}{name.upper()}"
        if key in os.environ:
            values[name] = os.environ[key].strip()
    return values


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Resolve configuration from defaults, environment and overrides.

    Raises:
        ConfigurationError: If a value fails validation or an override names
            an unknown field.
    """
    _load_dotenv_once()
    merged = {**load_env(), **(overrides or {})}
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err.get("loc", ())) or "config"
        msg = err.get("msg", "invalid value")
        raise ConfigurationError(
            f"Configuration validation failed: {field}: {msg}",
            hint=f"Check {ENV_PREFIX}{field.upper()} or the override passed for {field!r}.",
        ) from e
    cfg = FrozenConfig(
        repr_limit=settings.repr_limit, strict_arity=settings.strict_arity
    )
    logger.debug("Resolved %s", cfg)
    return cfg


@cache
def _default_config() -> FrozenConfig:
    return resolve_config()


def current_config() -> FrozenConfig:
    """Return the ambient config, falling back to the resolved defaults."""
    cfg = _AMBIENT.get()
    return cfg if cfg is not None else _default_config()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: Any,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    Thread- and async-safe: the scope is held in a ``ContextVar``.

    Example:
        with config_scope(repr_limit=20):
            pluck.string().run(very_long_list)  # message shows a short repr
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})
    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
