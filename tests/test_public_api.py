"""Smoke tests for the top-level package surface."""

from __future__ import annotations

import logging

import pytest

import pluck

pytestmark = [pytest.mark.unit, pytest.mark.smoke]


def test_all_exports_resolve() -> None:
    for name in pluck.__all__:
        assert hasattr(pluck, name), name


def test_version_is_a_string() -> None:
    assert isinstance(pluck.__version__, str)


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("pluck").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_end_to_end_record_decoding() -> None:
    user = pluck.map_n(
        pluck.from_key("name", pluck.string()),
        pluck.from_key("age", pluck.integer() | pluck.str_to_int()),
        pluck.from_key("tags", pluck.array(pluck.string())),
        pluck.from_key("admin", pluck.boolean() | pluck.nil().replace_with(False)),
        combine=lambda name, age, tags, admin: {
            "name": name,
            "age": age,
            "tags": tags,
            "admin": admin,
        },
    )

    decoded = user.run_or_raise(
        {"name": "ada", "age": "36", "tags": ["math"], "admin": None}
    )

    assert decoded == {"name": "ada", "age": 36, "tags": ["math"], "admin": False}
