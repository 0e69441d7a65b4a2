"""Combinatorics on 16-entry byte vectors: builders, sorting networks, reductions and descent statistics."""

__version__ = "0.1.0"
__all__ = ["builder", "epu8", "sorting", "descents"]