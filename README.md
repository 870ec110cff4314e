# sortbench

sortbench times three classic comparison sorts, heapsort, mergesort and
quicksort, on large amounts of random data. The data is either integers or
lowercase words.

One benchmark run does four things in a working directory:

1. It generates random data and writes it to a file, one value per line.
2. It reads the file back.
3. It sorts the values with the chosen algorithm and measures how long the sort takes.
4. It writes the sorted values to a second file.

The file names depend on the data:

| Data | Input file | Output file |
|---|---|---|
| numbers | `number.txt` | `sortnumber.txt` |
| words | `words.txt` | `sortwords.txt` |

The random generator is always seeded with the same fixed value. Repeated runs
with the same count therefore sort the same data.

## Installation

```
pip install .
```

The `test` extra installs pytest and hypothesis for the test suite:

```
pip install ".[test]"
```

## Command line

```
sortbench [--algorithm {heap,merge,quick}] [--words] [--count N] [--directory DIR]
```

- `--algorithm` picks the sort. The default is `quick`.
- `--words` sorts random 100-letter words instead of integers.
- `--count` sets the number of values. The default is 1,000,000. A negative count is rejected.
- `--directory` is where the files are written. The default is the current directory.

For integer runs the command prints the sort time in microseconds, for example
`the time is 812345`. Word runs write their files but print nothing.

If a file cannot be opened, the command writes `Fail To Open File <name>!!` to
standard error and exits with status 1.

## Library use

The sorting functions sort Python lists in place. The elements only need to
support ordering, so the same functions sort integers and strings.

```python
from sortbench.heapsort import heapsort
from sortbench.mergesort import mergesort
from sortbench.quicksort import quicksort

numbers = [5, 3, 9, 1, 7]
heapsort(numbers)
# numbers == [1, 3, 5, 7, 9]

words = ["pear", "apple", "fig"]
mergesort(words)
# words == ["apple", "fig", "pear"]

values = [4, 2, 8, 6, 0]
quicksort(values, 1, 3)
# values == [4, 2, 6, 8, 0]
```

`mergesort(items, left, right)` and `quicksort(items, left, right)` take
inclusive bounds. `left` defaults to the start of the list and `right` to its
end. `heapsort(items)` always sorts the whole list.

About the individual algorithms:

- Mergesort is stable.
- Quicksort uses Lomuto partitioning with the last element as pivot. It works
  from an explicit stack rather than by recursion.

The building blocks are public as well:

| Function | Module | What it does |
|---|---|---|
| `heapify(items, size, root)` | `sortbench.heapsort` | Sifts `items[root]` down so the subtree is a max-heap within the first `size` items |
| `merge(items, left, mid, right)` | `sortbench.mergesort` | Merges the sorted runs `items[left..mid]` and `items[mid+1..right]` |
| `partition(items, left, right)` | `sortbench.quicksort` | Partitions `items[left..right]` around `items[right]` and returns the pivot's final index |

### Test data

`sortbench.randdata` generates random data and reads and writes data files.

```python
import random
from sortbench.randdata import random_numbers, random_words

rng = random.Random(42)
numbers = random_numbers(1000, rng)    # integers in 0..2**31 - 1
words = random_words(1000, 100, rng)   # 100 lowercase letters each
```

Writing and reading files:

- `write_numbers(path, count, rng)` and `write_words(path, count, length, rng)`
  write the values one per line. They also return the values they wrote.
- `read_numbers(path, count)` and `read_words(path, count)` read
  whitespace-separated values back.

Reading raises `ValueError` in two cases:

- `count` is given and the file holds fewer values than that.
- A word is longer than 100 characters.

### Running a benchmark from Python

`sortbench.cli.run(algorithm, kind, directory, count)` performs one full run
and returns the sort time in microseconds. `algorithm` is one of `"heap"`,
`"merge"` and `"quick"`. `kind` is `"numbers"` or `"words"`.

It raises `ValueError` for an unknown algorithm or kind. It raises `OSError`
if a file cannot be opened.

`sortbench.cli.main(argv)` is the entry point behind the `sortbench` command.
It returns the exit status.

## What it does not do

- sortbench does not keep results between runs, and it does not compare
  algorithms in a single invocation. Each run times one algorithm on one data set.
- The random seed cannot be changed from the command line.