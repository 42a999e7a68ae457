"""Tests for the variable store."""

import pytest

from smartcalc_pkg.store import VariableStore


def test_starts_empty():
    store = VariableStore()
    assert len(store) == 0
    assert "x" not in store


def test_assign_and_read():
    store = VariableStore()
    store.assign("x", 5)
    assert "x" in store
    assert store["x"] == 5
    assert list(store) == ["x"]


def test_overwrite_keeps_single_entry():
    store = VariableStore()
    store.assign("x", 5)
    store.assign("x", -7)
    assert store.as_dict() == {"x": -7}


def test_missing_key():
    with pytest.raises(KeyError):
        VariableStore()["nope"]


def test_initial_values_are_copied():
    initial = {"a": 1}
    store = VariableStore(initial)
    store.assign("b", 2)
    assert initial == {"a": 1}
    assert store.as_dict() == {"a": 1, "b": 2}


def test_as_dict_is_a_copy():
    store = VariableStore({"a": 1})
    store.as_dict()["a"] = 99
    assert store["a"] == 1
