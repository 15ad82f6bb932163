"""Canonical deep merge utilities.

Features:
- Recursive dictionary merging
- Array merging with override semantics:
  - Default: replace array entirely
  - First element "+": append remaining items to the existing array
  - First element "=": explicit replace (same as default)
"""
from __future__ import annotations

from typing import Any, Dict, List


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if key in result:
            if isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            elif isinstance(result[key], list) and isinstance(value, list):
                result[key] = merge_arrays(result[key], value)
            else:
                result[key] = value
        else:
            result[key] = value
    return result


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Merge arrays with override semantics.

    Example:
        >>> merge_arrays([1, 2], [3, 4])
        [3, 4]
        >>> merge_arrays([1, 2], ["+", 3, 4])
        [1, 2, 3, 4]
        >>> merge_arrays([1, 2], ["=", 3, 4])
        [3, 4]
    """
    if not override:
        return list(base)
    first = override[0]
    if first == "+":
        return [*base, *override[1:]]
    if first == "=":
        return list(override[1:])
    return list(override)


__all__ = ["deep_merge", "merge_arrays"]
