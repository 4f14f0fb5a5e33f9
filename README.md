# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints each operation it performs, one per
line, so the output is a program that sorts the input.

## Operations

Each operation is a method of `pushswap.stacks.Stacks`. It returns `True`
when it acted and writes its name on its own line. It returns `False` and
writes nothing when it cannot act, for example when it is asked to swap a
stack that holds fewer than two numbers.

| Method  | Effect                                   | Lines written       |
|---------|------------------------------------------|---------------------|
| `sa()`  | swap the top two nodes of `a`            | `sa`                |
| `sb()`  | swap the top two nodes of `b`            | `sb`                |
| `ss()`  | `sa` and `sb`; needs two nodes on each   | `sa`, `sb`, `ss`    |
| `pa()`  | move the top of `b` onto `a`             | `pa`                |
| `pb()`  | move the top of `a` onto `b`             | `pb`                |
| `pp()`  | `pa` then `pb`; needs two nodes on each  | `pa`, `pb`          |
| `ra()`  | rotate `a` up (top goes to the bottom)   | `ra`                |
| `rb()`  | rotate `b` up                            | `rd`                |
| `rr()`  | `ra` and `rb`                            | their lines, `rr`   |
| `rra()` | rotate `a` down (bottom goes to the top) | `rra`               |
| `rrb()` | rotate `b` down                          | `rrb`               |
| `rrr()` | `rra` and `rrb`                          | their lines, `rrr`  |

`pa()` is refused while `a` is empty. If `b` is empty it still writes `pa`,
and nothing moves. `rb()` writes the line `rd`. None of the sorting
strategies use `rb`, `rr`, `rrb`, `rrr`, `sb`, `ss` or `pp`.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments. The first one is the top of stack `a`:

```
push-swap 3 2 1
```

Five numbers or fewer are sorted with fixed move patterns. Larger inputs are
sorted with a binary radix sort on the rank of each number. Input that is
already sorted produces no output. The exit status is 0 on success.

The command exits with status 255 and writes `Error` to standard error when:

- an argument is not an optional `-` followed by digits;
- an argument lies outside the 32-bit signed range;
- two arguments have the same value;
- the first argument is empty.

With no arguments, or with a single non-empty argument, the command exits
with status 255 and prints nothing. Numbers given as one quoted string, such
as `"3 2 1"`, are not split apart, so they are rejected.

## Library use

```python
import io

from pushswap.stacks import Stacks
from pushswap.sorting import sort_stacks

out = io.StringIO()
stacks = Stacks([5, 1, 4, 2, 3], out)
sort_stacks(stacks)

print(stacks.a_values())       # [1, 2, 3, 4, 5]
print(out.getvalue().split())  # the instructions that were used
```

If `out` is left out, the instructions go to standard output.

- `pushswap.stacks`: `Node` (a value and its rank), `Stacks`, and the helpers
  `index_nodes` and `is_sorted`. `Stacks` also offers `a_sorted()`,
  `a_values()`, `distance_to_min(index)` and `min_index(prev_min)`.
- `pushswap.sorting`: `sort_stacks` chooses a strategy by size.
  `short_sort`, `sort_two_nodes` … `sort_five_nodes` and `radix_sort` can
  also be called directly.
- `pushswap.args`: `check_args(args)` validates the argument strings and
  returns their integer values. It raises `ArgumentError` (a `ValueError`)
  for invalid input. `atol` and `is_number` are also available.

The package also has small text helpers that work on ASCII and stop at a NUL
character:

- `pushswap.charclass`: `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`,
  `tolower`, `toupper`.
- `pushswap.strings_basic`: `strlen`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strdup`, `strlcpy`, `strlcat`. The search functions return a
  position or `None`. `strlcpy` and `strlcat` return the resulting text
  together with the length they tried to produce.
- `pushswap.strings_build`: `atoi` (wraps on 32-bit overflow), `itoa` (clamps
  to the 32-bit range), `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`.

## What it does not do

There is no checker command that reads a list of instructions and verifies
that they sort a given input. The package has no raw-memory helpers and no
helpers that write to file descriptors. Output goes to a text stream only.

## Tests

```
pip install .[test]
pytest
```