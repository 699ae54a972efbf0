"""Random test arrays in several initial orderings."""

from __future__ import annotations

import enum
import random
import sys

from sortbench.fileio import Number, ValueKind

_FLOAT32_MIN = 1.1754943508222875e-38
_FLOAT32_MAX = 3.4028234663852886e38
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class ArrayLayout(enum.IntEnum):
    """Initial ordering of a generated array."""

    RANDOM = 0
    DESCENDING = 1
    PARTIAL_33 = 2
    PARTIAL_66 = 3
    SORTED = 4


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError("Size must be positive!")


def random_values(
    size: int, kind: ValueKind | int = ValueKind.INT, rng: random.Random | None = None
) -> list[Number]:
    """Return ``size`` values drawn uniformly over the full range of ``kind``."""
    _check_size(size)
    kind = ValueKind(kind)
    rng = rng or random.Random()
    if kind is ValueKind.INT:
        return [rng.randint(_INT32_MIN, _INT32_MAX) for _ in range(size)]
    if kind is ValueKind.FLOAT:
        low, high = _FLOAT32_MIN, _FLOAT32_MAX
    else:
        low, high = sys.float_info.min, sys.float_info.max
    return [rng.uniform(low, high) for _ in range(size)]


def sorted_values(
    size: int, kind: ValueKind | int = ValueKind.INT, rng: random.Random | None = None
) -> list[Number]:
    """Return random values sorted ascending."""
    values = random_values(size, kind, rng)
    values.sort()
    return values


def descending_values(
    size: int, kind: ValueKind | int = ValueKind.INT, rng: random.Random | None = None
) -> list[Number]:
    """Return random values sorted descending."""
    values = random_values(size, kind, rng)
    values.sort(reverse=True)
    return values


def _sorted_prefix(values: list[Number], count: int) -> list[Number]:
    values[:count] = sorted(values[:count])
    return values


def sorted_33_values(
    size: int, kind: ValueKind | int = ValueKind.INT, rng: random.Random | None = None
) -> list[Number]:
    """Return random values whose first third is sorted ascending."""
    _check_size(size)
    return _sorted_prefix(random_values(size, kind, rng), size // 3)


def sorted_66_values(
    size: int, kind: ValueKind | int = ValueKind.INT, rng: random.Random | None = None
) -> list[Number]:
    """Return random values whose first two thirds are sorted ascending."""
    _check_size(size)
    return _sorted_prefix(random_values(size, kind, rng), 2 * (size // 3))


_GENERATORS = {
    ArrayLayout.RANDOM: random_values,
    ArrayLayout.DESCENDING: descending_values,
    ArrayLayout.PARTIAL_33: sorted_33_values,
    ArrayLayout.PARTIAL_66: sorted_66_values,
    ArrayLayout.SORTED: sorted_values,
}


def generate(
    layout: ArrayLayout | int,
    size: int,
    kind: ValueKind | int = ValueKind.INT,
    rng: random.Random | None = None,
) -> list[Number]:
    """Return an array of ``size`` values in the requested layout."""
    _check_size(size)
    try:
        layout = ArrayLayout(layout)
    except ValueError:
        raise ValueError("Invalid array type!") from None
    return _GENERATORS[layout](size, kind, rng)