"""Test helpers (small, reusable doubles)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CountingThunk:
    """Zero-argument callable that records how often it was invoked."""

    target: Any
    calls: int = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.target
