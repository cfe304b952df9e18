from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar, Generic, Any
from collections.abc import Iterator


__all__ = [
    "Step",
    "DONE",
    "SequenceAdapter",
]


T = TypeVar("T")


@dataclass(frozen=True)
class Step(Generic[T]):
    """Outcome of a single advance of a ``SequenceAdapter``. Holds
    either the next value, or flags that the sequence is exhausted.

    Parameters
    ----------
    value : T, optional
        The produced element. Meaningless when ``done`` is ``True``.
    done : bool
        Whether the adapter has no further elements. Default is
        ``False``.
    """

    value: Any = None
    done: bool = False

    @classmethod
    def of(cls, value: T) -> "Step[T]":
        return cls(value=value)


DONE: Step[Any] = Step(done=True)


class SequenceAdapter(ABC, Iterator, Generic[T]):
    """Adapter pattern interface for lazy, forward-only views over an
    underlying iterable.

    Subclasses implement ``advance()``, which performs all the pulling
    for a single element. This base class turns the returned ``Step``
    into the iterator protocol, and latches exhaustion, so ``advance()``
    is never called again once it has returned ``DONE``.
    """

    _exhausted: bool = False

    @abstractmethod
    def advance(self) -> Step[T]:
        """Pulls from the source until the next element is found, or
        the source runs out.

        Returns
        -------
        step : Step
            The next element wrapped in a ``Step``, or ``DONE``.
        """

    @property
    def exhausted(self) -> bool:
        """Whether the adapter has reached its terminal state."""
        return self._exhausted

    def __iter__(self) -> "SequenceAdapter[T]":
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        step = self.advance()
        if step.done:
            self._exhausted = True
            raise StopIteration
        return step.value
