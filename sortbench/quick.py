"""Quick sort with a choice of pivot strategy."""

from __future__ import annotations

import enum
import random
from collections.abc import MutableSequence
from typing import TypeVar

S = TypeVar("S", bound=MutableSequence)


class PivotStrategy(enum.IntEnum):
    """Where the pivot is taken from in each partition."""

    RIGHT = 0
    LEFT = 1
    MIDDLE = 2
    RANDOM = 3


def _select_pivot(left: int, right: int, strategy: PivotStrategy, rng: random.Random) -> int:
    if strategy is PivotStrategy.LEFT:
        return left
    if strategy is PivotStrategy.MIDDLE:
        return (left + right) // 2
    if strategy is PivotStrategy.RANDOM:
        return left + rng.randrange(right - left + 1)
    return right


def _partition(
    values: MutableSequence, left: int, right: int, strategy: PivotStrategy, rng: random.Random
) -> int:
    pivot_index = _select_pivot(left, right, strategy, rng)
    pivot = values[pivot_index]
    values[pivot_index], values[right] = values[right], values[pivot_index]

    store = left
    for i in range(left, right):
        if values[i] <= pivot:
            values[i], values[store] = values[store], values[i]
            store += 1

    values[store], values[right] = values[right], values[store]
    return store


def quick_sort(
    values: S,
    strategy: PivotStrategy | int = PivotStrategy.RIGHT,
    rng: random.Random | None = None,
) -> S:
    """Sort ``values`` ascending in place and return it."""
    if values is None:
        raise ValueError("Array cannot be null!")
    if len(values) == 0:
        raise ValueError("Size must be positive!")
    try:
        strategy = PivotStrategy(strategy)
    except ValueError:
        raise ValueError("Invalid pivot chosen!") from None
    rng = rng or random.Random()

    # Explicit stack keeps degenerate inputs clear of the recursion limit.
    pending = [(0, len(values) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        split = _partition(values, left, right, strategy, rng)
        pending.append((split + 1, right))
        pending.append((left, split - 1))
    return values