# topmark:header:start
#
#   project      : FrontMeta
#   file         : test_normalize.py
#   file_relpath : tests/metadecoders/test_normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for recursive mapping-key normalization."""

from __future__ import annotations

import datetime
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from frontmeta.metadecoders import stringify_map_keys
from frontmeta.metadecoders.normalize import RecursiveValueError
from tests.conftest import mark_property, parametrize


def test_string_keyed_mapping_is_kept() -> None:
    """All-string mappings are updated in place and reported unchanged."""
    value: dict[str, Any] = {"a": {"b": 1}}
    result, changed = stringify_map_keys(value)
    assert result is value
    assert changed is False


def test_non_string_keys_rebuild_the_mapping() -> None:
    """A mapping with a non-string key is replaced by a new one."""
    value: dict[Any, Any] = {1: "one", True: "yes", None: "none", 1.5: "x"}
    result, changed = stringify_map_keys(value)
    assert changed is True
    assert result is not value
    assert result == {"1": "yes", "": "none", "1.5": "x"}


def test_nested_replacement_is_written_back() -> None:
    """Rebuilt children replace the originals inside kept containers."""
    inner: dict[Any, Any] = {2: "two"}
    value: dict[str, Any] = {"list": [inner, "s"], "map": {"k": {3: "three"}}}
    result, changed = stringify_map_keys(value)
    assert changed is False
    assert result is value
    assert value == {"list": [{"2": "two"}, "s"], "map": {"k": {"3": "three"}}}


def test_collision_keeps_later_entry() -> None:
    """When two keys convert to the same string the later one wins."""
    value: dict[Any, Any] = {"1": "string", 1: "int"}
    result, _ = stringify_map_keys(value)
    assert result == {"1": "int"}


def test_key_without_scalar_spelling_uses_str() -> None:
    """Dates and tuples fall back to `str(key)`."""
    value: dict[Any, Any] = {datetime.date(2024, 1, 2): "d", (1, 2): "t"}
    result, _ = stringify_map_keys(value)
    assert result == {"2024-01-02": "d", "(1, 2)": "t"}


def test_tuple_items_are_normalized() -> None:
    """Tuples are rebuilt when one of their items had non-string keys."""
    value: list[Any] = [("x", {True: "y"}), ("z", "plain")]
    plain: tuple[str, str] = value[1]
    result, changed = stringify_map_keys(value)
    assert changed is False
    assert result == [("x", {"true": "y"}), ("z", "plain")]
    assert result[1] is plain


def test_shared_node_is_normalized_once() -> None:
    """A node reached twice is replaced by the same normalized object."""
    shared: dict[Any, Any] = {1: "one"}
    value: dict[str, Any] = {"a": shared, "b": [shared, shared]}
    result, _ = stringify_map_keys(value)
    assert result["a"] == {"1": "one"}
    assert result["b"][0] is result["a"]
    assert result["b"][1] is result["a"]


def test_wide_sharing_stays_linear() -> None:
    """Nested layers that each repeat the previous one are walked once per node."""
    layer: list[Any] = [{1: "x"}]
    for _ in range(60):
        layer = [layer] * 10
    result, _ = stringify_map_keys({"top": layer})
    node: Any = result["top"]
    for _ in range(60):
        node = node[9]
    assert node == [{"1": "x"}]


@parametrize("build", ["list", "dict", "tuple_in_list"])
def test_self_containing_value_is_rejected(build: str) -> None:
    """A container that contains itself raises `RecursiveValueError`."""
    value: Any
    if build == "list":
        value = []
        value.append(value)
    elif build == "dict":
        value = {}
        value[1] = value
    else:
        value = []
        value.append(("k", value))
    with pytest.raises(RecursiveValueError, match="recursive alias"):
        stringify_map_keys(value)


s_key = st.one_of(
    st.text(max_size=4),
    st.integers(min_value=-100, max_value=100),
    st.booleans(),
    st.none(),
    st.floats(allow_nan=False, allow_infinity=False, width=16),
)
s_tree = st.recursive(
    st.one_of(st.integers(), st.text(max_size=4), st.booleans(), st.none()),
    lambda children: st.lists(children, max_size=3)
    | st.lists(children, max_size=3).map(tuple)
    | st.dictionaries(s_key, children, max_size=3),
    max_leaves=12,
)


def _all_keys_are_strings(value: Any) -> bool:
    if isinstance(value, dict):
        return all(isinstance(k, str) and _all_keys_are_strings(v) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return all(_all_keys_are_strings(v) for v in value)
    return True


@mark_property
@given(tree=s_tree)
def test_no_non_string_keys_remain(tree: Any) -> None:
    """After normalization no mapping anywhere has a non-string key."""
    result, _ = stringify_map_keys(tree)
    assert _all_keys_are_strings(result)


@mark_property
@given(tree=s_tree)
def test_normalization_is_idempotent(tree: Any) -> None:
    """Normalizing an already normalized tree changes nothing."""
    once, _ = stringify_map_keys(tree)
    twice, changed = stringify_map_keys(once)
    assert changed is False
    assert twice is once
