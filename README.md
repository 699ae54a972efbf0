# sortbench

Time classic sorting algorithms on arrays read from a file or generated at
random, and write the sorted result to a file.

| Number | Algorithm      | Setting asked for on standard input                     |
|--------|----------------|---------------------------------------------------------|
| 0      | Insertion sort | none                                                    |
| 1      | Heap sort      | `0` standard, or `1` followed by a drunk level 0–100     |
| 2      | Shell sort     | gaps: `0` Shell (n/2, n/4, …), `1` Frank–Lazarus        |
| 3      | Quick sort     | pivot: `0` right, `1` left, `2` middle, `3` random      |

Value types: `0` int (32-bit range), `1` float, `2` double.

The "drunk" heap sort starts each sift-down at a random node instead of the
root with the given percentage chance, then runs a full heap sort at the end,
so the result is always sorted.

## Install

```
pip install .
```

## Sorting a file

```
sortbench --file <algorithm> <type> <inputFile> [outputFile]
```

The input file gives the number of values on its first line, then one value
per line:

```
4
7
-2
15
3
```

Example, sorting with heap sort:

```
sortbench --file 1 0 input.txt output.txt
```

Heap sort and quick sort ask for their setting on standard input; Shell sort
in this mode always uses the Shell gaps. The command prints the sort time in
whole milliseconds and, when an output file is given, writes the sorted values
to it in the same format as the input. Floating-point values are written with
six significant digits.

## Benchmarking

```
sortbench --test <algorithm> <type> <arrayType> <size> <iterations> <outputFile>
```

`arrayType` sets how each generated array starts out:

- `0` random
- `1` descending
- `2` first third sorted
- `3` first two thirds sorted
- `4` fully sorted

Example:

```
sortbench --test 0 1 2 1000 100 results.txt
```

Heap, Shell and quick sort ask for their setting once. Each iteration
generates a new array, sorts it, prints the time in milliseconds and writes the
sorted array to the output file, replacing what the previous iteration wrote.

## Help

```
sortbench --help
```

Running `sortbench` with no arguments prints the same message. Wrong arguments
or bad input print an error and exit with status 1.

## Use from Python

```python
import random

from sortbench.measure import Algorithm, SortSettings, is_sorted, run_algorithm
from sortbench.quick import PivotStrategy, quick_sort
from sortbench.shell import GapSequence, shell_sort

data = [5, 3, 9, 1]
quick_sort(data, PivotStrategy.MIDDLE, random.Random())
assert is_sorted(data)

more = [4.5, 0.5, 2.0]
shell_sort(more, GapSequence.LAZARUS)
assert is_sorted(more)

values = [3, 1, 2]
run_algorithm(Algorithm.HEAP, values, SortSettings(drunk_level=30))
assert values == [1, 2, 3]
```

Modules:

- `sortbench.insertion`, `sortbench.heap`, `sortbench.quick`,
  `sortbench.shell`: the sorts; each sorts a list in place and returns it.
- `sortbench.generate`: `generate(layout, size, kind, rng)` and the functions
  for each `ArrayLayout`.
- `sortbench.fileio`: `load_values`, `save_values` and `format_values`.
- `sortbench.timer`: `Timer`, a stopwatch reporting whole milliseconds.
- `sortbench.measure`: `run_algorithm`, `measure_and_save`, `run_file_mode`
  and `run_benchmark_once`.

## What it does not do

The benchmark mode does not collect or summarise timings: times are only
printed, and the output file holds just the last sorted array.