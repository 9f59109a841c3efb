"""Scorer protocol and the minimum score sentinel.

A scorer is any callable mapping an element to a totally ordered score.
Plain functions and lambdas satisfy the protocol; there is nothing to
subclass.
"""
from typing import Any, Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Scorer(Protocol[T_contra]):
    """Protocol for element scoring functions.

    Implementations must be deterministic and side-effect free: the same
    element always yields the same score.
    """

    def __call__(self, element: T_contra) -> Any:
        """Return the score of a single element."""
        ...


class _MinimumScore:
    """Score lower than every other value, equal only to itself."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __lt__(self, other):
        return other is not self

    def __le__(self, other):
        return True

    def __gt__(self, other):
        return False

    def __ge__(self, other):
        return other is self

    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return id(self)

    def __repr__(self) -> str:
        return "MIN_SCORE"

    def __reduce__(self):
        return (_MinimumScore, ())


MIN_SCORE = _MinimumScore()
