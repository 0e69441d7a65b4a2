"""Operations on vectors of 16 unsigned bytes.

A vector is a tuple of 16 integers in ``range(256)``. Arithmetic wraps
modulo 256 like the byte type it models. Functions accept any sequence of
16 such integers and return tuples.
"""

from __future__ import annotations

import random
from typing import Sequence, Tuple

from combivec.builder import VectorBuilder

Epu8 = Tuple[int, ...]

SIZE = 16
_BUILDER = VectorBuilder(size=SIZE, elem_bits=8)
_ID: Epu8 = _BUILDER.id()
_REV: Epu8 = _BUILDER.rev()
_POPCOUNT: Epu8 = _BUILDER.popcount()

#: 16-way sorting network (Knuth, AoCP vol. 3, fig. 51, p. 229).
SORTING_ROUNDS: Tuple[Epu8, ...] = (
    (1, 0, 3, 2, 5, 4, 7, 6, 9, 8, 11, 10, 13, 12, 15, 14),
    (2, 3, 0, 1, 6, 7, 4, 5, 10, 11, 8, 9, 14, 15, 12, 13),
    (4, 5, 6, 7, 0, 1, 2, 3, 12, 13, 14, 15, 8, 9, 10, 11),
    (8, 9, 10, 11, 12, 13, 14, 15, 0, 1, 2, 3, 4, 5, 6, 7),
    (0, 2, 1, 12, 8, 10, 9, 11, 4, 6, 5, 7, 3, 14, 13, 15),
    (0, 4, 8, 10, 1, 9, 12, 13, 2, 5, 3, 14, 6, 7, 11, 15),
    (0, 1, 4, 5, 2, 3, 8, 9, 6, 7, 12, 13, 10, 11, 14, 15),
    (0, 1, 2, 6, 4, 8, 3, 10, 5, 12, 7, 11, 9, 13, 14, 15),
    (0, 1, 2, 4, 3, 6, 5, 8, 7, 10, 9, 12, 11, 13, 14, 15),
)

#: Duplicated 8-way Batcher odd-even mergesort network.
SORTING_ROUNDS8: Tuple[Epu8, ...] = (
    (1, 0, 3, 2, 5, 4, 7, 6, 9, 8, 11, 10, 13, 12, 15, 14),
    (2, 3, 0, 1, 6, 7, 4, 5, 10, 11, 8, 9, 14, 15, 12, 13),
    (0, 2, 1, 3, 4, 6, 5, 7, 8, 10, 9, 11, 12, 14, 13, 15),
    (4, 5, 6, 7, 0, 1, 2, 3, 12, 13, 14, 15, 8, 9, 10, 11),
    (0, 1, 4, 5, 2, 3, 6, 7, 8, 9, 12, 13, 10, 11, 14, 15),
    (0, 2, 1, 4, 3, 6, 5, 7, 8, 10, 9, 12, 11, 14, 13, 15),
)

_ZERO: Epu8 = (0,) * SIZE

#: Bitonic merge network; the two trailing all-zero rounds leave sorted
#: vectors unchanged.
MERGE_ROUNDS: Tuple[Epu8, ...] = (
    (8, 9, 10, 11, 12, 13, 14, 15, 0, 1, 2, 3, 4, 5, 6, 7),
    (4, 5, 6, 7, 0, 1, 2, 3, 12, 13, 14, 15, 8, 9, 10, 11),
    (2, 3, 0, 1, 6, 7, 4, 5, 10, 11, 8, 9, 14, 15, 12, 13),
    (1, 0, 3, 2, 5, 4, 7, 6, 9, 8, 11, 10, 13, 12, 15, 14),
    _ZERO,
    _ZERO,
)


def _check(v: Sequence[int]) -> Epu8:
    t = tuple(v)
    if len(t) != SIZE:
        raise ValueError(f"expected {SIZE} entries, got {len(t)}")
    for x in t:
        if not isinstance(x, int) or not 0 <= x <= 0xFF:
            raise ValueError(f"entry {x!r} is not an unsigned byte")
    return t


def _signed(x: int) -> int:
    return x - 256 if x >= 128 else x


def _first_mask(mask: Sequence[bool], bound: int) -> int:
    limit = max(0, min(bound, SIZE))
    return next((i for i in range(limit) if mask[i]), SIZE)


def _last_mask(mask: Sequence[bool], bound: int) -> int:
    limit = max(0, min(bound, SIZE))
    return next((i for i in reversed(range(limit)) if mask[i]), SIZE)


def permuted(a: Sequence[int], b: Sequence[int]) -> Epu8:
    """Return ``a`` permuted by ``b``: entry ``i`` is ``a[b[i] & 0xF]``."""
    a, b = _check(a), _check(b)
    return tuple(a[x & 0xF] for x in b)


def first_diff(a: Sequence[int], b: Sequence[int], bound: int = SIZE) -> int:
    """Return the first index below ``bound`` where ``a`` and ``b`` differ, or 16."""
    a, b = _check(a), _check(b)
    return _first_mask([x != y for x, y in zip(a, b)], bound)


def last_diff(a: Sequence[int], b: Sequence[int], bound: int = SIZE) -> int:
    """Return the last index below ``bound`` where ``a`` and ``b`` differ, or 16."""
    a, b = _check(a), _check(b)
    return _last_mask([x != y for x, y in zip(a, b)], bound)


def less(a: Sequence[int], b: Sequence[int]) -> bool:
    """Lexicographic comparison ``a < b``."""
    a, b = _check(a), _check(b)
    diff = first_diff(a, b)
    return diff < SIZE and a[diff] < b[diff]


def less_partial(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Compare the first ``k`` entries; negative, zero or positive like ``cmp``.

    The result is the signed-byte difference at the first differing index.
    """
    a, b = _check(a), _check(b)
    diff = first_diff(a, b, k)
    if diff == SIZE:
        return 0
    d = _signed(a[diff]) - _signed(b[diff])
    return _signed(d & 0xFF)


def first_zero(v: Sequence[int], bound: int = SIZE) -> int:
    """Return the index of the first zero entry below ``bound``, or 16."""
    return _first_mask([x == 0 for x in _check(v)], bound)


def last_zero(v: Sequence[int], bound: int = SIZE) -> int:
    """Return the index of the last zero entry below ``bound``, or 16."""
    return _last_mask([x == 0 for x in _check(v)], bound)


def first_non_zero(v: Sequence[int], bound: int = SIZE) -> int:
    """Return the index of the first non-zero entry below ``bound``, or 16."""
    return _first_mask([x != 0 for x in _check(v)], bound)


def last_non_zero(v: Sequence[int], bound: int = SIZE) -> int:
    """Return the index of the last non-zero entry below ``bound``, or 16."""
    return _last_mask([x != 0 for x in _check(v)], bound)


def _upper(r: int, i: int, increasing: bool) -> bool:
    return r < i if increasing else i < r


def network_sort(
    v: Sequence[int], rounds: Sequence[Sequence[int]], increasing: bool = True
) -> Epu8:
    """Apply the sorting network ``rounds`` to ``v``."""
    res = _check(v)
    for rnd in rounds:
        rnd = _check(rnd)
        b = permuted(res, rnd)
        res = tuple(
            max(x, y) if _upper(r, i, increasing) else min(x, y)
            for i, (r, x, y) in enumerate(zip(rnd, res, b))
        )
    return res


def network_sort_perm(
    v: Sequence[int], rounds: Sequence[Sequence[int]], increasing: bool = True
) -> Tuple[Epu8, Epu8]:
    """Apply a sorting network; return the sorted vector and the permutation.

    The permutation ``p`` satisfies ``permuted(v, p) == sorted_v``.
    """
    vec = _check(v)
    perm = _ID
    for rnd in rounds:
        rnd = _check(rnd)
        b = permuted(vec, rnd)
        pb = permuted(perm, rnd)
        new_vec, new_perm = [], []
        for i, (r, x, y, p, q) in enumerate(zip(rnd, vec, b, perm, pb)):
            take = x < y if _upper(r, i, increasing) else y < x
            new_vec.append(y if take else x)
            new_perm.append(q if take else p)
        vec, perm = tuple(new_vec), tuple(new_perm)
    return vec, perm


def is_sorted(a: Sequence[int]) -> bool:
    """Return whether ``a`` is non-decreasing."""
    a = _check(a)
    return all(x <= y for x, y in zip(a, a[1:]))


def sorted16(a: Sequence[int]) -> Epu8:
    """Return ``a`` sorted increasingly."""
    return network_sort(a, SORTING_ROUNDS, True)


def sorted8(a: Sequence[int]) -> Epu8:
    """Return ``a`` with each half of 8 entries sorted increasingly."""
    return network_sort(a, SORTING_ROUNDS8, True)


def revsorted16(a: Sequence[int]) -> Epu8:
    """Return ``a`` sorted decreasingly."""
    return network_sort(a, SORTING_ROUNDS, False)


def revsorted8(a: Sequence[int]) -> Epu8:
    """Return ``a`` with each half of 8 entries sorted decreasingly."""
    return network_sort(a, SORTING_ROUNDS8, False)


def sort_perm(a: Sequence[int]) -> Tuple[Epu8, Epu8]:
    """Return ``(sorted a, permutation)`` such that ``permuted(a, perm)`` is sorted."""
    return network_sort_perm(a, SORTING_ROUNDS, True)


def sort8_perm(a: Sequence[int]) -> Tuple[Epu8, Epu8]:
    """Like :func:`sort_perm` but sorting each half of 8 entries."""
    return network_sort_perm(a, SORTING_ROUNDS8, True)


def merge(a: Sequence[int], b: Sequence[int]) -> Tuple[Epu8, Epu8]:
    """Merge two sorted vectors.

    Returns ``(low, high)``: the 16 smallest and the 16 largest of the 32
    entries, each sorted increasingly.
    """
    a = permuted(a, _REV)
    b = _check(b)
    low = tuple(min(x, y) for x, y in zip(a, b))
    high = tuple(max(x, y) for x, y in zip(a, b))
    return (
        network_sort(low, MERGE_ROUNDS, True),
        network_sort(high, MERGE_ROUNDS, True),
    )


def random_epu8(bound: int) -> Epu8:
    """Return a vector of entries drawn uniformly from ``range(bound)``."""
    if not 1 <= bound <= 0xFFFF:
        raise ValueError("bound must be between 1 and 65535")
    return tuple(random.randrange(bound) & 0xFF for _ in range(SIZE))


def remove_dups(v: Sequence[int], repl: int = 0) -> Epu8:
    """Replace every entry equal to its left neighbour by ``repl``.

    The first entry is compared with 0.
    """
    v = _check(v)
    prev = (0,) + v[:-1]
    return tuple(x if x != p else repl & 0xFF for x, p in zip(v, prev))


def permutation_of(a: Sequence[int], b: Sequence[int]) -> Epu8:
    """Entry ``i`` is the index of ``b[i]`` in ``a``, or 16 if absent."""
    a, b = _check(a), _check(b)
    return tuple(a.index(x) if x in a else SIZE for x in b)


def horiz_sum(v: Sequence[int]) -> int:
    """Return the sum of the entries modulo 256."""
    return sum(_check(v)) & 0xFF


def partial_sums(v: Sequence[int]) -> Epu8:
    """Return the prefix sums modulo 256."""
    res = []
    total = 0
    for x in _check(v):
        total = (total + x) & 0xFF
        res.append(total)
    return tuple(res)


def horiz_max(v: Sequence[int]) -> int:
    """Return the largest entry."""
    return max(_check(v))


def partial_max(v: Sequence[int]) -> Epu8:
    """Return the prefix maxima."""
    res = []
    cur = 0
    for x in _check(v):
        cur = max(cur, x)
        res.append(cur)
    return tuple(res)


def horiz_min(v: Sequence[int]) -> int:
    """Return the smallest entry."""
    return min(_check(v))


def partial_min(v: Sequence[int]) -> Epu8:
    """Return the prefix minima."""
    res = []
    cur = 0xFF
    for x in _check(v):
        cur = min(cur, x)
        res.append(cur)
    return tuple(res)


def eval16(v: Sequence[int]) -> Epu8:
    """Entry ``i`` is the number of occurrences of ``i`` in ``v`` (``i < 16``)."""
    counts = [0] * SIZE
    for x in _check(v):
        if x < SIZE:
            counts[x] += 1
    return tuple(counts)


def popcount16(v: Sequence[int]) -> Epu8:
    """Return the number of bits set in each entry."""
    v = _check(v)
    return tuple(_POPCOUNT[x & 0x0F] + _POPCOUNT[x >> 4] for x in v)


def _fixed_beyond(v: Epu8, k: int) -> bool:
    diff = last_diff(v, _ID, SIZE)
    return diff == SIZE or diff < k


def is_partial_transformation(v: Sequence[int], k: int = SIZE) -> bool:
    """Return whether ``v`` is a partial transformation of ``range(k)``.

    Entries are below 16 or 0xFF (undefined); entries from ``k`` on are fixed.
    """
    v = _check(v)
    return all(x < SIZE or x == 0xFF for x in v) and _fixed_beyond(v, k)


def is_transformation(v: Sequence[int], k: int = SIZE) -> bool:
    """Return whether ``v`` is a transformation of ``range(k)``."""
    v = _check(v)
    return all(x < SIZE for x in v) and _fixed_beyond(v, k)


def is_partial_permutation(v: Sequence[int], k: int = SIZE) -> bool:
    """Return whether ``v`` is a partial permutation of ``range(k)``."""
    v = _check(v)
    return (
        all(x < SIZE or x == 0xFF for x in v)
        and all(c <= 1 for c in eval16(v))
        and _fixed_beyond(v, k)
    )


def is_permutation(v: Sequence[int], k: int = SIZE) -> bool:
    """Return whether ``v`` is a permutation of ``range(k)``."""
    v = _check(v)
    return sorted16(v) == _ID and _fixed_beyond(v, k)


def format_epu8(a: Sequence[int]) -> str:
    """Format as ``{ 0, 1, ...}`` with each entry right-aligned in width 2."""
    return "{" + ",".join(f"{x:2d}" for x in _check(a)) + "}"