"""
``oddseq``
==========

Provides a lazy sequence adapter which keeps only the elements found at
odd 1-based positions of the wrapped iterable, for Pythonic composition
with the rest of the iterator ecosystem.
"""
from ._version import __version__
from . import base
from . import sequence
from .sequence import OddPositionIterator, OddSequence, take_odd_positions


__all__ = [
    "__version__",
    "base",
    "sequence",
    "OddPositionIterator",
    "OddSequence",
    "take_odd_positions",
]
