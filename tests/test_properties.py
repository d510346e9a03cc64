"""Property tests for decoder laws: left bias, failure propagation, ordering."""

from __future__ import annotations

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

import pluck
from pluck import Decoder, Err, Ok
from pluck.errors import DecodeError

pytestmark = pytest.mark.unit

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats(allow_nan=False) | st.text(),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=5), children, max_size=4),
    max_leaves=12,
)

decoders = st.sampled_from(
    [
        pluck.string(),
        pluck.integer(),
        pluck.float_(),
        pluck.boolean(),
        pluck.nil(),
        pluck.raw(),
        pluck.str_to_int(),
        pluck.array(pluck.integer()),
        pluck.from_key("a", pluck.raw()),
        pluck.at_index(0, pluck.string()),
    ]
)

_PROPERTY_SETTINGS = settings(max_examples=50, deadline=None, derandomize=True)


def _never_run() -> Decoder[Any, Any]:
    def run(_: Any) -> Any:
        raise AssertionError("right-hand decoder was run")

    return Decoder(run)


@given(d=decoders, value=json_values)
@_PROPERTY_SETTINGS
def test_run_yields_exactly_one_variant(d: Decoder[Any, Any], value: Any) -> None:
    """Property: run() returns Ok xor Err, and run_or_raise raises iff Err."""
    result = d.run(value)

    assert isinstance(result, Ok) != isinstance(result, Err)
    if result.is_error():
        with pytest.raises(DecodeError):
            d.run_or_raise(value)
    else:
        assert d.run_or_raise(value) == result.unwrap()


@given(a=json_values, value=json_values)
@_PROPERTY_SETTINGS
def test_or_else_is_left_biased(a: Any, value: Any) -> None:
    assert pluck.succeed(a).or_else(_never_run()).run(value) == Ok(a)


@given(d=decoders, value=json_values)
@_PROPERTY_SETTINGS
def test_map_preserves_failure(d: Decoder[Any, Any], value: Any) -> None:
    result = d.run(value)
    mapped = d.map(lambda _: pytest.fail("f must not run on failure"))

    if result.is_error():
        assert mapped.run(value) == result


@given(values=st.lists(st.integers()))
@_PROPERTY_SETTINGS
def test_array_preserves_length_and_order(values: list[int]) -> None:
    encoded = [str(v) for v in values]
    assert pluck.array(pluck.str_to_int()).run(encoded) == Ok(values)


@given(a=st.integers(), b=st.integers())
@_PROPERTY_SETTINGS
def test_map_n_argument_order(a: int, b: int) -> None:
    d = pluck.map_n(
        pluck.from_key("a", pluck.str_to_int()),
        pluck.from_key("b", pluck.str_to_int()),
        combine=lambda x, y: [x, y],
    )
    assert d.run({"a": str(a), "b": str(b)}) == Ok([a, b])


@given(index=st.integers(min_value=-5, max_value=10), values=st.lists(st.integers(), max_size=5))
@_PROPERTY_SETTINGS
def test_at_index_bounds(index: int, values: list[int]) -> None:
    result = pluck.at_index(index, pluck.integer()).run(values)

    if 0 <= index < len(values):
        assert result == Ok(values[index])
    else:
        assert result.is_error()
