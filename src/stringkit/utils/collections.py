"""Emptiness checks for sized collections."""

from collections.abc import Sized


def is_empty(collection: Sized | None) -> bool:
    """Return True when *collection* is None or has no elements.

    Args:
        collection: Any sized collection (list, tuple, dict, set, ...), or None.

    Returns:
        bool: True if `collection` is None or ``len(collection) == 0``.
    """
    return collection is None or len(collection) == 0


def has_values(collection: Sized | None) -> bool:
    """Return True when *collection* holds at least one element."""
    return not is_empty(collection)
