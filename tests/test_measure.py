import random

import pytest

from sortbench.fileio import ValueKind, load_values, save_values
from sortbench.measure import (
    Algorithm,
    SortSettings,
    is_sorted,
    measure_and_save,
    run_algorithm,
    run_benchmark_once,
    run_file_mode,
)


def _sample(seed=7, size=60):
    rng = random.Random(seed)
    return [rng.randint(-1000, 1000) for _ in range(size)]


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 3], True), ([2, 1], False), ([], True), ([5], True), ([1, 3, 2], False)],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


@pytest.mark.parametrize(
    "algorithm, settings",
    [
        (Algorithm.INSERTION, SortSettings()),
        (Algorithm.HEAP, SortSettings()),
        (Algorithm.HEAP, SortSettings(drunk_level=50)),
        (Algorithm.SHELL, SortSettings(shell_method=0)),
        (Algorithm.SHELL, SortSettings(shell_method=1)),
        (Algorithm.QUICK, SortSettings(pivot=0)),
        (Algorithm.QUICK, SortSettings(pivot=1)),
        (Algorithm.QUICK, SortSettings(pivot=2)),
        (Algorithm.QUICK, SortSettings(pivot=3)),
    ],
)
def test_run_algorithm_sorts(algorithm, settings):
    values = _sample()
    expected = sorted(values)
    result = run_algorithm(algorithm, values, settings, random.Random(1))
    assert result == expected
    assert values == expected


def test_run_algorithm_accepts_plain_int():
    values = _sample(seed=3)
    assert run_algorithm(0, values) == sorted(values)


def test_run_algorithm_invalid_algorithm():
    with pytest.raises(ValueError, match="Invalid algorithm!"):
        run_algorithm(7, [3, 1, 2])


def test_run_algorithm_invalid_pivot():
    with pytest.raises(ValueError, match="Invalid pivot chosen!"):
        run_algorithm(Algorithm.QUICK, [3, 1, 2], SortSettings(pivot=9))


def test_run_algorithm_invalid_drunk_level():
    with pytest.raises(ValueError, match="Drunk percent"):
        run_algorithm(Algorithm.HEAP, [3, 1, 2], SortSettings(drunk_level=150))


def test_measure_and_save_writes_sorted_file(tmp_path):
    out = tmp_path / "out.txt"
    values = _sample(seed=11)
    elapsed = measure_and_save(Algorithm.SHELL, values, SortSettings(), out)
    assert elapsed >= 0
    assert load_values(out) == sorted(values)


def test_measure_and_save_without_output_sorts_in_place(tmp_path):
    values = _sample(seed=12)
    measure_and_save(Algorithm.HEAP, values, None, None)
    assert is_sorted(values)
    assert list(tmp_path.iterdir()) == []


def test_run_file_mode_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    out = tmp_path / "out.txt"
    values = _sample(seed=5, size=25)
    save_values(source, values)
    run_file_mode(Algorithm.QUICK, ValueKind.INT, source, out, SortSettings(pivot=2))
    assert load_values(out) == sorted(values)


def test_run_file_mode_floats(tmp_path):
    source = tmp_path / "in.txt"
    out = tmp_path / "out.txt"
    source.write_text("3\n2.5\n-1.5\n0.25\n", encoding="utf-8")
    run_file_mode(Algorithm.INSERTION, ValueKind.DOUBLE, source, out)
    assert load_values(out, ValueKind.DOUBLE) == [-1.5, 0.25, 2.5]


def test_run_file_mode_invalid_kind(tmp_path):
    source = tmp_path / "in.txt"
    save_values(source, [1, 2])
    with pytest.raises(ValueError, match="Invalid data type!"):
        run_file_mode(Algorithm.INSERTION, 5, source)


def test_run_file_mode_missing_input(tmp_path):
    with pytest.raises(OSError):
        run_file_mode(Algorithm.INSERTION, ValueKind.INT, tmp_path / "missing.txt")


@pytest.mark.parametrize("layout", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("kind", [ValueKind.INT, ValueKind.FLOAT, ValueKind.DOUBLE])
def test_run_benchmark_once_writes_sorted_output(tmp_path, layout, kind):
    out = tmp_path / "bench.txt"
    run_benchmark_once(
        Algorithm.QUICK, kind, layout, 40, SortSettings(pivot=3), out, random.Random(2)
    )
    saved = load_values(out, kind)
    assert len(saved) == 40
    assert is_sorted(saved)


def test_run_benchmark_once_rejects_non_positive_size():
    with pytest.raises(ValueError, match="Size must be positive!"):
        run_benchmark_once(Algorithm.INSERTION, ValueKind.INT, 0, 0)


def test_run_benchmark_once_rejects_bad_layout():
    with pytest.raises(ValueError, match="Invalid array type!"):
        run_benchmark_once(Algorithm.INSERTION, ValueKind.INT, 9, 10)


def test_run_benchmark_once_rejects_bad_kind():
    with pytest.raises(ValueError, match="Invalid data type!"):
        run_benchmark_once(Algorithm.INSERTION, 4, 0, 10)