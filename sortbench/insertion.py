"""Insertion sort in ascending and descending order."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Callable, TypeVar

S = TypeVar("S", bound=MutableSequence)


def _check(values: MutableSequence) -> None:
    if values is None:
        raise ValueError("Array cannot be null!")
    if len(values) == 0:
        raise ValueError("Size must be positive!")


def _insert(values: S, out_of_order: Callable[[Any, Any], bool]) -> S:
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and out_of_order(values[j], key):
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values


def insertion_sort(values: S) -> S:
    """Sort ``values`` ascending in place and return it."""
    _check(values)
    return _insert(values, lambda left, key: left > key)


def insertion_sort_descending(values: S) -> S:
    """Sort ``values`` descending in place and return it."""
    _check(values)
    return _insert(values, lambda left, key: left < key)