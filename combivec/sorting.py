"""Alternative sorting methods for byte vectors and a small benchmark."""

from __future__ import annotations

import argparse
import random
import time
from typing import Callable, List, Optional, Sequence, Tuple

from combivec.builder import VectorBuilder
from combivec.epu8 import SIZE, SORTING_ROUNDS, permuted, sorted16

Epu8 = Tuple[int, ...]

_ID: Epu8 = VectorBuilder().id()
_EVEN: Epu8 = (1, 0, 3, 2, 5, 4, 7, 6, 9, 8, 11, 10, 13, 12, 15, 14)
_ODD: Epu8 = (0, 2, 1, 4, 3, 6, 5, 8, 7, 10, 9, 12, 11, 14, 13, 15)


def _as_vector(a: Sequence[int]) -> Epu8:
    t = tuple(a)
    if len(t) != SIZE:
        raise ValueError(f"expected {SIZE} entries, got {len(t)}")
    for x in t:
        if not isinstance(x, int) or not 0 <= x <= 0xFF:
            raise ValueError(f"entry {x!r} is not an unsigned byte")
    return t


def _signed(x: int) -> int:
    return x - 256 if x >= 128 else x


def _smin(x: int, y: int) -> int:
    return x if _signed(x) <= _signed(y) else y


def _smax(x: int, y: int) -> int:
    return x if _signed(x) >= _signed(y) else y


def sort_pair(a: Sequence[int]) -> Epu8:
    """Sort with the 16-way network, comparing entries as signed bytes."""
    res = _as_vector(a)
    for rnd in SORTING_ROUNDS:
        b = permuted(res, rnd)
        res = tuple(
            _smax(x, y) if r < i else _smin(x, y)
            for i, (r, x, y) in enumerate(zip(rnd, res, b))
        )
    return res


def sort_odd_even(a: Sequence[int]) -> Epu8:
    """Odd-even transposition sort, comparing entries as signed bytes."""
    res = _as_vector(a)
    for _ in range(8):
        b = permuted(res, _EVEN)
        res = tuple(
            _smax(x, y) if i % 2 else _smin(x, y)
            for i, (x, y) in enumerate(zip(res, b))
        )
        b = permuted(res, _ODD)
        res = tuple(
            _smin(x, y) if i % 2 else _smax(x, y)
            for i, (x, y) in enumerate(zip(res, b))
        )
    return res


def insertion_sort(a: Sequence[int]) -> Epu8:
    """Sort increasingly by straight insertion."""
    items: List[int] = []
    for x in _as_vector(a):
        pos = len(items)
        while pos > 0 and x < items[pos - 1]:
            pos -= 1
        items.insert(pos, x)
    return tuple(items)


def radix_sort(a: Sequence[int]) -> Epu8:
    """Counting sort; every entry must be below 16."""
    values = _as_vector(a)
    if any(x >= SIZE for x in values):
        raise ValueError("radix sort needs entries below 16")
    counts = [0] * SIZE
    for x in values:
        counts[x] += 1
    return tuple(i for i, c in enumerate(counts) for _ in range(c))


def random_permutation() -> Epu8:
    """Return a uniformly random permutation of ``range(16)``."""
    items = list(_ID)
    random.shuffle(items)
    return tuple(items)


def random_permutations(count: int) -> List[Epu8]:
    """Return ``count`` random permutations of ``range(16)``."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return [random_permutation() for _ in range(count)]


def time_it(
    func: Callable[[], object], repeat: int = 1, reference: float = 0.0
) -> float:
    """Call ``func`` ``repeat`` times, print and return the elapsed seconds.

    When ``reference`` is non-zero the speedup relative to it is printed too.
    """
    start = time.perf_counter()
    for _ in range(repeat):
        func()
    elapsed = time.perf_counter() - start
    line = f"time = {elapsed:.6f}s"
    if reference != 0:
        speedup = reference / elapsed if elapsed > 0 else float("inf")
        line += f", speedup = {speedup:.3f}"
    print(line)
    return elapsed


def _checker(
    name: str, sorter: Callable[[Epu8], Sequence[int]], sample: List[Epu8]
) -> Callable[[], None]:
    def run() -> None:
        for v in sample:
            if tuple(sorter(v)) != _ID:
                print(f"Check failed: {name}")

    return run


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Benchmark the sorting methods on random permutations."""
    parser = argparse.ArgumentParser(
        prog="sorting", description="Compare sorting methods on byte vectors."
    )
    parser.add_argument("--count", type=int, default=1000,
                        help="number of random permutations")
    parser.add_argument("--repeat", type=int, default=10000,
                        help="number of passes over the sample")
    args = parser.parse_args(argv)
    if args.count < 0 or args.repeat < 0:
        parser.error("count and repeat must be non-negative")

    sample = random_permutations(args.count)
    methods = [
        ("Std lib: ", "sorted", lambda v: sorted(v)),
        ("OddEv : ", "sort_odd_even", sort_odd_even),
        ("Insert : ", "insertion_sort", insertion_sort),
        ("Radix16: ", "radix_sort", radix_sort),
        ("Pair  : ", "sort_pair", sort_pair),
        ("Funct  : ", "sorted16", sorted16),
    ]
    reference = 0.0
    for label, name, sorter in methods:
        print(label, end="")
        elapsed = time_it(_checker(name, sorter, sample), args.repeat, reference)
        if reference == 0.0:
            reference = elapsed
    return 0