"""Deep merge of configuration trees."""

from typing import Any


def deep_merge(target: dict[str, Any], *sources: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge sources into target; later sources win.

    Dicts on both sides merge key by key. Any other incoming value (scalar,
    list, or a dict over a non-dict) replaces the target value; lists are
    never merged element-wise. Keys are never removed. Only target is
    mutated: incoming dicts and lists are copied so sources stay untouched.

    Args:
        target: Tree to merge into (mutated and returned).
        sources: Trees applied in order of ascending precedence.

    Returns:
        target.
    """
    for source in sources:
        for key, value in source.items():
            if isinstance(value, dict):
                existing = target.get(key)
                if not isinstance(existing, dict):
                    existing = target[key] = {}
                deep_merge(existing, value)
            elif isinstance(value, list):
                target[key] = list(value)
            else:
                target[key] = value
    return target
