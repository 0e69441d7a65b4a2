"""Factory for fixed-width vectors of small unsigned integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

Vector = Tuple[int, ...]


@dataclass(frozen=True)
class VectorBuilder:
    """Builds vectors of ``size`` unsigned integers of ``elem_bits`` bits.

    Vectors are plain tuples; every entry is reduced modulo ``2**elem_bits``
    like the fixed-width element type it models.
    """

    size: int = 16
    elem_bits: int = 8

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("size must be positive")
        if self.elem_bits <= 0:
            raise ValueError("elem_bits must be positive")

    @property
    def _mask(self) -> int:
        return (1 << self.elem_bits) - 1

    def from_list(self, values: Iterable[int], default: int) -> Vector:
        """Build a vector from ``values``, padding with ``default``."""
        items = list(values)
        if len(items) > self.size:
            raise ValueError(
                f"at most {self.size} values allowed, got {len(items)}"
            )
        items.extend([default] * (self.size - len(items)))
        return tuple(v & self._mask for v in items)

    def from_function(self, func: Callable[[int], int]) -> Vector:
        """Build a vector whose ``i``-th entry is ``func(i)``."""
        return tuple(func(i) & self._mask for i in range(self.size))

    def constant(self, c: int) -> Vector:
        """Build a vector with every entry equal to ``c``."""
        return self.from_function(lambda _: c)

    def id(self) -> Vector:
        """Return the identity vector ``(0, 1, ..., size - 1)``."""
        return self.from_function(lambda i: i)

    def rev(self) -> Vector:
        """Return the reversed identity vector."""
        return self.from_function(lambda i: self.size - 1 - i)

    def left_cycle(self) -> Vector:
        """Return the left cycle permutation."""
        return self.from_function(lambda i: (i + self.size - 1) % self.size)

    def right_cycle(self) -> Vector:
        """Return the right cycle permutation."""
        return self.from_function(lambda i: (i + 1) % self.size)

    def left_dup(self) -> Vector:
        """Return the left shift, duplicating the rightmost entry."""
        last = self.size - 1
        return self.from_function(lambda i: last if i == last else i + 1)

    def right_dup(self) -> Vector:
        """Return the right shift, duplicating the leftmost entry."""
        return self.from_function(lambda i: 0 if i == 0 else i - 1)

    def popcount(self) -> Vector:
        """Return the vector whose ``i``-th entry is the bit count of ``i``."""
        return self.from_function(lambda i: bin(i & 0xFF).count("1"))