from __future__ import annotations

from docsctx.core.utils.merge import deep_merge, merge_arrays


def test_deep_merge_recurses_without_mutating():
    base = {"rules": {"universal": ["a"], "byType": {"bug": ["fix"]}}}
    override = {"rules": {"byType": {"deploy": ["ci"]}}}

    merged = deep_merge(base, override)

    assert merged == {"rules": {"universal": ["a"], "byType": {"bug": ["fix"], "deploy": ["ci"]}}}
    assert base == {"rules": {"universal": ["a"], "byType": {"bug": ["fix"]}}}


def test_merge_arrays_modes():
    assert merge_arrays(["a"], ["b"]) == ["b"]
    assert merge_arrays(["a"], ["+", "b"]) == ["a", "b"]
    assert merge_arrays(["a"], ["=", "b"]) == ["b"]
    assert merge_arrays(["a"], []) == ["a"]


def test_scalar_replaces_container():
    assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}
