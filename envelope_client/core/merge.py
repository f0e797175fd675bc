"""Deep Merge: recursive mapping merge used by configuration and request options.

Invariants:
    - Inputs are never mutated; the result shares no nested dicts with them
    - Nested mappings merge key by key, every other value is replaced
"""

from typing import Any, Mapping


def deep_merge(base: Mapping[str, Any], partial: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {
        k: dict(v) if isinstance(v, Mapping) else v for k, v in base.items()
    }
    for key, value in partial.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            merged[key] = deep_merge({}, value)
        else:
            merged[key] = value
    return merged
