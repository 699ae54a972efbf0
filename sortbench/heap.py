"""Heap sort, including a "drunk" variant that sometimes heapifies the wrong node."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import TypeVar

S = TypeVar("S", bound=MutableSequence)


def _check(values: MutableSequence) -> None:
    if values is None:
        raise ValueError("Array cannot be null!")
    if len(values) == 0:
        raise ValueError("Size must be positive!")


def _heapify(values: MutableSequence, n: int, i: int) -> None:
    """Sift the element at ``i`` down within the first ``n`` items."""
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2
        if left < n and values[left] > values[largest]:
            largest = left
        if right < n and values[right] > values[largest]:
            largest = right
        if largest == i:
            return
        values[i], values[largest] = values[largest], values[i]
        i = largest


def _build_and_sort(values: MutableSequence) -> None:
    size = len(values)
    for i in range(size // 2 - 1, -1, -1):
        _heapify(values, size, i)
    for i in range(size - 1, 0, -1):
        values[0], values[i] = values[i], values[0]
        _heapify(values, i, 0)


def heap_sort(values: S) -> S:
    """Sort ``values`` ascending in place and return it."""
    _check(values)
    if len(values) > 1:
        _build_and_sort(values)
    return values


def drunk_heap_sort(
    values: S, drunk_percent: int, rng: random.Random | None = None
) -> S:
    """Heap sort that misplaces heapify calls with the given chance, then repairs.

    With probability ``drunk_percent``/100 per extraction step the sift starts at
    a random node instead of the root; a final full heap sort guarantees order.
    """
    _check(values)
    if not 0 <= drunk_percent <= 100:
        raise ValueError("Drunk percent must be 0-100%!")
    rng = rng or random.Random()

    size = len(values)
    for i in range(size // 2 - 1, -1, -1):
        _heapify(values, size, i)

    for i in range(size - 1, 0, -1):
        values[0], values[i] = values[i], values[0]
        if rng.randrange(100) < drunk_percent:
            _heapify(values, i, rng.randrange(i))
        else:
            _heapify(values, i, 0)

    _build_and_sort(values)
    return values