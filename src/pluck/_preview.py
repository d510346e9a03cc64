"""Compact renderings of input values for failure messages."""

from __future__ import annotations

from typing import Any

__all__ = ["describe"]


def _truncate(s: str, limit: int) -> str:
    return s if limit <= 0 or len(s) <= limit else s[:limit] + "..."


def describe(value: Any, limit: int) -> str:
    """Return ``repr(value)`` in backticks, truncated to ``limit`` characters (0 = no limit)."""
    return f"`{_truncate(repr(value), limit)}`"
