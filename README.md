# combivec

Combinatorics on fixed-size vectors of sixteen unsigned bytes. These vectors hold
permutations, transformations and other small combinatorial objects. A vector is a
plain tuple of 16 integers in `range(256)`. Arithmetic on entries wraps modulo 256.

## What it provides

- `combivec.builder`: `VectorBuilder(size=16, elem_bits=8)` builds the standard vectors.
  - `id`, `rev`, `left_cycle`, `right_cycle`
  - `left_dup`, `right_dup`, `popcount`
  - `constant`, `from_list(values, default)`, `from_function(func)`
- `combivec.epu8`: operations on 16-byte vectors. The functions accept any sequence
  of 16 bytes and raise `ValueError` for anything else.
  - Permuting: `permuted(a, b)` returns `a[b[i] & 0xF]` for each `i`.
  - Comparing: `first_diff`, `last_diff`, `less`, `less_partial`.
  - Finding zeros: `first_zero`, `last_zero`, `first_non_zero`, `last_non_zero`.
    Each of these returns 16 when nothing is found.
  - Sorting networks:
    - `network_sort`, `network_sort_perm`
    - `sorted16`, `revsorted16`, `sorted8`, `revsorted8`
    - `sort_perm` and `sort8_perm` return `(sorted vector, permutation)`.
    - `merge(a, b)` returns the low and high sorted halves of two sorted vectors.
  - Horizontal and prefix reductions: `horiz_sum`, `partial_sums`, `horiz_max`,
    `partial_max`, `horiz_min`, `partial_min`.
  - Counting and searching: `eval16`, `popcount16`, `permutation_of`, `remove_dups`,
    `random_epu8`.
  - Predicates: `is_sorted`, `is_transformation`, `is_partial_transformation`,
    `is_permutation`, `is_partial_permutation`.
  - Printing: `format_epu8` gives `{ 0, 1, ...}`.
- `combivec.sorting`: several sorting strategies for 16-entry vectors.
  - `sort_pair`, `sort_odd_even`, `insertion_sort`, `radix_sort`
  - `random_permutation`, `random_permutations(count)`
  - `time_it(func, repeat, reference)` is a timing helper. It prints the elapsed
    time and, when a reference time is given, the speedup against it.
- `combivec.descents`: `descent_statistics(n, workers=None)` counts the permutations
  of the first `n` values of the identity by their number of descents. These counts
  are the Eulerian numbers. Entry `k` of the result is the count for `k` descents.
  The work can be shared among several processes. The module also provides
  `nb_descents`, `transposition` and `permute_ij`.

## Example

```python
from combivec.builder import VectorBuilder
from combivec.epu8 import permuted, sorted16, sort_perm, is_permutation
from combivec.descents import descent_statistics

b = VectorBuilder()
p = b.rev()
assert permuted(p, p) == b.id()
assert sorted16(p) == b.id()
assert is_permutation(p, 16)

values, perm = sort_perm(p)
assert permuted(p, perm) == values == b.id()

assert descent_statistics(3)[:3] == [1, 4, 1]
```

## Commands

The first command times the sorting strategies on random permutations. It also
checks that each strategy sorts them back to the identity:

    combivec-sort-bench [--count N] [--repeat R]

The second command prints the descent statistics for all permutations of the first
`SIZE` values, where `SIZE` is between 0 and 16. The optional `-n` sets the number
of worker processes:

    combivec-descents [-n WORKERS] SIZE

The output is one line of the form `Result: c0 c1 ... c15`.

## Limits

Everything is pure Python. The sorting networks and reductions follow the data
layout of vector registers, but they gain no hardware speed from it. Generic
exponentiation in a monoid is not provided. The descent count visits every
permutation, so sizes above about 10 take a long time.

## Tests

    pip install .[test]
    pytest