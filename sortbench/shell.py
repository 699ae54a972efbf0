"""Shell sort with the classic halving gaps or Frank Lazarus' gaps."""

from __future__ import annotations

import enum
from collections.abc import MutableSequence
from typing import TypeVar

S = TypeVar("S", bound=MutableSequence)


class GapSequence(enum.IntEnum):
    """Which gap sequence shell sort uses."""

    SHELL = 0
    LAZARUS = 1


def shell_gaps(size: int, sequence: GapSequence | int = GapSequence.SHELL) -> list[int]:
    """Return the gaps used to sort ``size`` items, largest first."""
    try:
        sequence = GapSequence(sequence)
    except ValueError:
        raise ValueError("Invalid gap sequence!") from None
    if size <= 1:
        return []

    gaps: list[int] = []
    if sequence is GapSequence.SHELL:
        gap = size // 2
        while gap > 0:
            gaps.append(gap)
            gap //= 2
    else:
        x = 1
        while True:
            gap = ((2 * size) >> x) + 1
            gaps.append(gap)
            x += 1
            if gap <= 1:
                break
    return gaps


def shell_sort(values: S, sequence: GapSequence | int = GapSequence.SHELL) -> S:
    """Sort ``values`` ascending in place and return it."""
    if values is None:
        raise ValueError("Array cannot be null!")
    size = len(values)
    if size == 0:
        raise ValueError("Size must be positive!")

    for gap in shell_gaps(size, sequence):
        for i in range(gap, size):
            temp = values[i]
            j = i
            while j >= gap and values[j - gap] > temp:
                values[j] = values[j - gap]
                j -= gap
            values[j] = temp
    return values