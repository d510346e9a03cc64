"""Pytest configuration and fixtures.

Provides environment isolation for configuration resolution. All fixtures
here are autouse.
"""

from __future__ import annotations

import os

import pytest

from pluck import config as pluck_config

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_pluck_env(request, monkeypatch):
    """Ensure each test resolves configuration from a clean environment.

    Clears PLUCK_* env vars, disables .env loading and drops the cached
    default config. Opt-out: @pytest.mark.allow_env_pollution
    """
    monkeypatch.setattr(pluck_config, "_DOTENV_LOADED", True)
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith(pluck_config.ENV_PREFIX):
                monkeypatch.delenv(key, raising=False)
    pluck_config._default_config.cache_clear()
    yield
    pluck_config._default_config.cache_clear()
