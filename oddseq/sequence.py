"""
``oddseq.sequence``
===================

The oddseq sequence module provides a lazy filter over any Python
iterable, keeping the elements at odd 1-based positions, ie. the first,
third, fifth, and so on.

Elements are produced on demand using Python iterator objects, so the
filter composes with ``map``, ``filter``, ``itertools``, and infinite
sources alike.
"""
import operator as op
import typing as ty

from rich.console import Console
from rich.markup import escape

from oddseq import base

__all__ = ["OddPositionIterator", "OddSequence", "take_odd_positions"]


T = ty.TypeVar("T")


class OddPositionIterator(base.SequenceAdapter[T]):
    """Iterator over the elements of ``source`` found at odd 1-based
    positions, in their original order.

    Parameters
    ----------
    source : iterable
        Iterable of elements to filter. Only its iterator is taken
        during initialisation; no element is consumed until the first
        call to ``next()``.

    Attributes
    ----------
    position : int
        The 1-based position of the element most recently pulled from
        ``source``. Zero before the first pull.

    Raises
    ------
    TypeError
        If ``source`` is not iterable.

    Notes
    -----
    Every output element costs at most two pulls from ``source``: one
    to skip the preceding even position, and one to read the element.
    Exceptions raised by ``source`` propagate unchanged.

    The iterator is single use. To traverse a replayable source again,
    wrap it in a new instance, or use ``OddSequence``.
    """

    def __init__(self, source: ty.Iterable[T]) -> None:
        self._source = iter(source)
        self.position = 0

    def _is_eligible(self) -> bool:
        return self.position % 2 != 0

    def advance(self) -> base.Step[T]:
        for element in self._source:
            self.position = self.position + 1
            if self._is_eligible():
                return base.Step.of(element)
        return base.DONE

    def __length_hint__(self) -> int:
        if self.exhausted:
            return 0
        remaining = op.length_hint(self._source)
        if self.position % 2 == 0:  # next pull lands on an odd position
            return (remaining + 1) // 2
        return remaining // 2


class OddSequence(ty.Iterable[T]):
    """Lazy view of the elements at odd 1-based positions of
    ``source``.

    Each call to ``iter()`` starts a new ``OddPositionIterator`` over
    ``source``. If ``source`` is replayable, eg. a ``list`` or
    ``range``, every traversal begins from its first element. If it is
    a one-shot iterator, traversals share its cursor.

    Parameters
    ----------
    source : iterable
        Iterable of elements to filter.

    Examples
    --------
    >>> list(OddSequence(range(1, 6)))
    [1, 3, 5]
    """

    def __init__(self, source: ty.Iterable[T]) -> None:
        self._source = source

    def __iter__(self) -> OddPositionIterator[T]:
        return OddPositionIterator(self._source)

    def __rich__(self) -> str:
        name = self.__class__.__name__
        source = escape(repr(self._source))
        return f"{name}(source=[yellow]{source}[default])"

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self, end="", soft_wrap=True)
        return capture.get()


def take_odd_positions(source: ty.Iterable[T]) -> OddSequence[T]:
    """Lazily selects the elements of ``source`` at odd 1-based
    positions.

    Parameters
    ----------
    source : iterable
        Finite or infinite iterable of elements.

    Returns
    -------
    odd_elements : OddSequence
        Re-iterable lazy view over the first, third, fifth, etc.
        elements of ``source``.

    Examples
    --------
    >>> list(take_odd_positions([10, 20, 30, 40]))
    [10, 30]
    >>> import itertools as it
    >>> list(it.islice(take_odd_positions(it.count(1)), 3))
    [1, 3, 5]
    """
    return OddSequence(source)
