"""Running a sorting algorithm, timing it and saving its result."""

from __future__ import annotations

import enum
import os
import random
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from itertools import pairwise

from sortbench.fileio import Number, ValueKind, load_values, save_values
from sortbench.generate import generate
from sortbench.heap import drunk_heap_sort, heap_sort
from sortbench.insertion import insertion_sort
from sortbench.quick import PivotStrategy, quick_sort
from sortbench.shell import GapSequence, shell_sort
from sortbench.timer import Timer


class Algorithm(enum.IntEnum):
    """Sorting algorithms that can be measured."""

    INSERTION = 0
    HEAP = 1
    SHELL = 2
    QUICK = 3


@dataclass
class SortSettings:
    """Per-algorithm options.

    ``drunk_level`` of ``None`` selects the standard heap sort; any other
    value selects the drunk variant with that percentage.
    """

    drunk_level: int | None = None
    pivot: int = PivotStrategy.RIGHT
    shell_method: int = GapSequence.SHELL


def is_sorted(values: Sequence[Number]) -> bool:
    """Return whether ``values`` is in ascending order."""
    return not any(left > right for left, right in pairwise(values))


def _algorithm(algorithm: Algorithm | int) -> Algorithm:
    try:
        return Algorithm(algorithm)
    except ValueError:
        raise ValueError("Invalid algorithm!") from None


def _kind(kind: ValueKind | int) -> ValueKind:
    try:
        return ValueKind(kind)
    except ValueError:
        raise ValueError("Invalid data type!") from None


def run_algorithm(
    algorithm: Algorithm | int,
    values: MutableSequence[Number],
    settings: SortSettings | None = None,
    rng: random.Random | None = None,
) -> MutableSequence[Number]:
    """Sort ``values`` in place with the chosen algorithm and return it."""
    settings = settings or SortSettings()
    algorithm = _algorithm(algorithm)
    if algorithm is Algorithm.INSERTION:
        return insertion_sort(values)
    if algorithm is Algorithm.HEAP:
        if settings.drunk_level is not None:
            return drunk_heap_sort(values, settings.drunk_level, rng)
        return heap_sort(values)
    if algorithm is Algorithm.SHELL:
        return shell_sort(values, settings.shell_method)
    return quick_sort(values, settings.pivot, rng)


def measure_and_save(
    algorithm: Algorithm | int,
    values: MutableSequence[Number],
    settings: SortSettings | None = None,
    output: str | os.PathLike | None = None,
    rng: random.Random | None = None,
) -> int:
    """Sort ``values`` in place, save them to ``output`` if given, return milliseconds taken."""
    timer = Timer()
    timer.reset()
    timer.start()
    run_algorithm(algorithm, values, settings, rng)
    timer.stop()
    elapsed = timer.result()
    if output is not None:
        save_values(output, values)
    return elapsed


def run_file_mode(
    algorithm: Algorithm | int,
    kind: ValueKind | int,
    input_path: str | os.PathLike,
    output_path: str | os.PathLike | None = None,
    settings: SortSettings | None = None,
    rng: random.Random | None = None,
) -> int:
    """Sort the values of ``input_path`` and return the milliseconds taken."""
    values = load_values(input_path, _kind(kind))
    return measure_and_save(algorithm, values, settings, output_path, rng)


def run_benchmark_once(
    algorithm: Algorithm | int,
    kind: ValueKind | int,
    layout: int,
    size: int,
    settings: SortSettings | None = None,
    output_path: str | os.PathLike | None = None,
    rng: random.Random | None = None,
) -> int:
    """Generate one array, sort it and return the milliseconds taken."""
    if size <= 0:
        raise ValueError("Size must be positive!")
    kind = _kind(kind)
    values = generate(layout, size, kind, rng)
    return measure_and_save(algorithm, values, settings, output_path, rng)