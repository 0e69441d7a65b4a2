"""Distribution of the number of descents over permutations."""

from __future__ import annotations

import sys
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from itertools import permutations
from typing import Iterable, List, Optional, Sequence, Tuple

from combivec.builder import VectorBuilder
from combivec.epu8 import SIZE, permuted

Epu8 = Tuple[int, ...]

_ID: Epu8 = VectorBuilder().id()


def transposition(i: int, j: int) -> Epu8:
    """Return the identity of size 16 with positions ``i`` and ``j`` swapped."""
    if not (0 <= i < SIZE and 0 <= j < SIZE):
        raise ValueError("transposition indices must be in range(16)")
    items = list(_ID)
    items[i], items[j] = items[j], items[i]
    return tuple(items)


def _descents(p: Sequence[int]) -> int:
    return sum(1 for x, y in zip(p, p[1:]) if x > y)


def nb_descents(p: Sequence[int]) -> int:
    """Return the number of indices ``i`` with ``p[i] > p[i + 1]``."""
    return _descents(permuted(p, _ID))


def permute_ij(p: Sequence[int], i: int, j: int) -> Epu8:
    """Return ``p`` with the entries at ``i`` and ``j`` exchanged."""
    return permuted(p, transposition(i, j))


def _count_with_first(n: int, first: int) -> List[int]:
    rest = [x for x in range(n) if x != first]
    tail = tuple(range(n, SIZE))
    counts: Counter = Counter()
    for perm in permutations(rest):
        counts[_descents((first,) + perm + tail)] += 1
    return [counts[k] for k in range(SIZE)]


def _add(parts: Iterable[List[int]]) -> List[int]:
    total = [0] * SIZE
    for part in parts:
        total = [a + b for a, b in zip(total, part)]
    return total


def descent_statistics(n: int, workers: Optional[int] = None) -> List[int]:
    """Count permutations of the first ``n`` values by number of descents.

    Entry ``k`` of the result is the number of permutations of
    ``range(n)`` (extended by the identity up to 16) with ``k`` descents.
    With ``workers`` above 1 the work is shared among that many processes.
    """
    if not 0 <= n <= SIZE:
        raise ValueError("n must be between 0 and 16")
    if workers is not None and workers < 1:
        raise ValueError("workers must be positive")
    if n == 0:
        counts = [0] * SIZE
        counts[_descents(_ID)] += 1
        return counts
    job = partial(_count_with_first, n)
    if workers is None or workers == 1 or n == 1:
        return _add(map(job, range(n)))
    with ProcessPoolExecutor(max_workers=workers) as pool:
        return _add(pool.map(job, range(n)))


def _usage(name: str) -> None:
    print(f"Usage: {name} [-n <proc_number>] size ", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the descent statistics for the size given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    name = "descents"
    if len(args) not in (1, 3):
        _usage(name)
        return 1
    workers: Optional[int] = None
    if len(args) == 3:
        if args[0] != "-n":
            _usage(name)
            return 1
        try:
            workers = int(args[1])
            if workers < 1:
                raise ValueError(workers)
        except ValueError:
            print("Failed to set the number of workers", file=sys.stderr)
            workers = None
    try:
        n = int(args[-1])
        counts = descent_statistics(n, workers)
    except ValueError:
        _usage(name)
        return 1
    print("Result: " + "".join(f"{c} " for c in counts))
    return 0