"""
Helpers to manipulate sequences.

The extraseq package contains functions which operate over any iterable
(lists, tuples, generators...), reading it only once so that single-pass
sources such as generators and file objects can be used too.

- :func:`element_at` picks one item with configurable handling of out of
  range indices (see :class:`IndexingPolicy`).
- :func:`repeat` lazily replays a sequence several times.
"""

from .errors import IndexOutOfRangeError, InvalidArgumentError
from .indexing import IndexingPolicy, clamp_index, cyclic_index, element_at
from .repetition import repeat

__all__ = [
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "IndexingPolicy",
    "clamp_index",
    "cyclic_index",
    "element_at",
    "repeat",
]
