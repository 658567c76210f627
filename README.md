# wordsched

Two small backtracking solvers:

- **Wordle helper**: given a partially known word, with `-` for each
  unknown letter, and a set of "floating" letters that must appear in the
  unknown positions, list every dictionary word that fits.
- **Shift scheduler**: given a day-by-worker availability matrix, the number
  of workers needed each day and the maximum number of shifts any worker may
  take, find a valid schedule if one exists.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

### Wordle helper

```
wordsched-wordle s---ng t
```

The first argument is the pattern. Fixed letters stay in place and each `-`
is a blank to fill with a lower-case letter. The optional second argument
lists letters that must each be used in some blank.

The dictionary is read from `dict-eng.txt` in the current directory. Words
that start with an upper-case letter or contain anything other than letters
are skipped, and the number of words read is reported on standard error.
Matching words are printed one per line in sorted order.

With no arguments the command prints a usage hint and exits with status 1.
If the dictionary file cannot be opened, it prints
`Cannot open dictionary file.` on standard error and exits with status 1.

### Shift scheduler

```
wordsched-schedule [MATRIX] [--daily-need N] [--max-shifts M]
```

- `MATRIX` is an optional text file with one row per day, each row a
  whitespace-separated list of `0`/`1` values, one per worker. Blank lines
  are ignored. Without it, a built-in example is solved: four days, four
  workers, with availability

  ```
  1 1 1 1
  1 0 1 0
  1 1 0 1
  1 0 0 1
  ```

- `--daily-need` is the number of distinct workers needed each day
  (default 2).
- `--max-shifts` is the most days any one worker may work (default 2).

The result is printed as one line per day, listing the worker ids with a
space after each one. For the built-in example:

```
Day 0: 1 2
Day 1: 0 2
Day 2: 1 3
Day 3: 0 3
```

If no schedule exists, it prints `No solution found!`. A matrix file that
cannot be read or holds values that are not integers causes an error message
on standard error and exit status 1.

## Library use

```python
from wordsched.dictionary import read_dict_words
from wordsched.wordle import wordle
from wordsched.schedwork import schedule, format_schedule

words = read_dict_words("dict-eng.txt")
print(sorted(wordle("s---ng", "t", words)))

avail = [
    [True, True, True, True],
    [True, False, True, False],
    [True, True, False, True],
    [True, False, False, True],
]
sched = schedule(avail, 2, 2)
if sched is not None:
    print(format_schedule(sched))
```

- `read_dict_words(filename)` returns a `frozenset` of the accepted words.
  Each file is read only once; later calls with the same file return the
  cached set. A file that cannot be opened raises `OSError`.
- `wordle(pattern, floating, dictionary)` returns a `set` of the matching
  words found in `dictionary`.
- `schedule(avail, daily_need, max_shifts)` returns a list with one list of
  worker ids per day, or `None` when no valid assignment exists or `avail`
  is empty. Any truthy value in `avail` counts as available.
- `format_schedule(sched)` returns the `Day N: ...` text shown above.

## What it does not do

The package ships no word list: the Wordle helper needs a `dict-eng.txt`
file of your own in the directory it is run from.