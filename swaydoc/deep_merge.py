"""Logic for deep merging configuration dictionaries."""

from collections.abc import Collection
from typing import Any

ADDITIVE_KEYS = frozenset({"keywords"})


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive_keys: Collection[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``.

    Nested mappings merge key by key. Lists under ``additive_keys`` are
    unioned and sorted; any other value in ``update`` wins outright.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value, additive_keys)
        elif (
            key in additive_keys
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            result[key] = sorted({*current, *value})
        else:
            result[key] = value
    return result
