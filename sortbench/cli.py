"""Command line: sort a file or benchmark generated arrays."""

from __future__ import annotations

import random
import re
import sys
from typing import Callable

from sortbench.measure import (
    Algorithm,
    SortSettings,
    run_benchmark_once,
    run_file_mode,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def help_text() -> str:
    """Return the usage message."""
    return (
        "Usage:\n"
        "FILE TEST MODE:\n"
        "sortbench --file <algorithm> <type> <inputFile> [outputFile]\n"
        "<algorithm> 0-Insertion sort, 1-Heapsort, 2-Shell sort, 3-Quick sort\n"
        "<type> 0-int, 1-float, 2-double\n"
        "<inputFile> Input file with data\n"
        "[outputFile] Optional output file\n"
        "\n"
        "BENCHMARK MODE:\n"
        "sortbench --test <algorithm> <type> <arrayType> <size> <iterations> <outputFile>\n"
        "<algorithm> 0-Insertion sort, 1-Heapsort, 2-Shell sort, 3-Quick sort\n"
        "<type> 0-int, 1-float, 2-double\n"
        "<arrayType> 0-Random, 1-Descending, 2-Partial (33%), 3-Partial (66%), 4-Sorted\n"
        "<size> Number of elements to generate and sort\n"
        "<iterations> Number of iterations\n"
        "<outputFile> File for benchmark results\n"
        "\n"
        "HELP MODE:\n"
        "sortbench --help\n"
        "Displays this message\n"
        "\n"
        "EXAMPLE CALLS:\n"
        "sortbench --file 1 0 input.txt output.txt\n"
        "sortbench --test 0 1 2 1000 100 results.txt\n"
    )


def _atoi(text: str) -> int:
    """Parse a leading integer, yielding 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_int(read: Callable[[], str]) -> int:
    token = read().strip()
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Invalid number: {token!r}") from None


def prompt_settings(
    algorithm: Algorithm | int,
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _write,
) -> SortSettings:
    """Ask for the options the chosen algorithm needs."""
    settings = SortSettings()
    if algorithm == Algorithm.HEAP:
        write("Select version: 0-Standard, 1-Drunk\n")
        level = _read_int(read)
        if level == 1:
            write("Enter drunk level (0-100%): ")
            level = _read_int(read)
        settings.drunk_level = level if level >= 0 else None
    elif algorithm == Algorithm.SHELL:
        write("Select method: 0-Shell, 1-Lazarus\n")
        settings.shell_method = _read_int(read)
    elif algorithm == Algorithm.QUICK:
        write("Select pivot: 0-Right, 1-Left, 2-Middle, 3-Random\n")
        settings.pivot = _read_int(read)
    return settings


def _usage_error(message: str) -> int:
    print(message, file=sys.stderr)
    print(help_text())
    return 1


def _file_mode(args: list[str]) -> int:
    if len(args) > 5:
        return _usage_error("Error: Wrong number of arguments for file mode")
    algorithm = _atoi(args[1])
    kind = _atoi(args[2])
    input_path = args[3]
    output_path = args[4] if len(args) == 5 else None

    if kind not in (0, 1, 2):
        print("Invalid data type!", file=sys.stderr)
        return 1
    # Shell sort in file mode always uses the classic gaps.
    settings = SortSettings() if algorithm == Algorithm.SHELL else prompt_settings(algorithm)
    print(run_file_mode(algorithm, kind, input_path, output_path, settings))
    return 0


def _test_mode(args: list[str]) -> int:
    if len(args) < 7:
        return _usage_error("Error: Wrong number of arguments for test mode")
    algorithm = _atoi(args[1])
    kind = _atoi(args[2])
    layout = _atoi(args[3])
    size = _atoi(args[4])
    iterations = _atoi(args[5])
    output_path = args[6]

    settings = prompt_settings(algorithm)
    rng = random.Random()
    for _ in range(iterations):
        print(run_benchmark_once(algorithm, kind, layout, size, settings, output_path, rng))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args or args == ["--help"]:
        print(help_text())
        return 0

    try:
        if len(args) >= 4 and args[0] == "--file":
            return _file_mode(args)
        if len(args) >= 5 and args[0] == "--test":
            return _test_mode(args)
    except (ValueError, OSError, RuntimeError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return _usage_error("Error: Invalid arguments")


if __name__ == "__main__":
    sys.exit(main())