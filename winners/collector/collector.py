"""Reduction operation bundling for the winners accumulator."""
from dataclasses import dataclass, field
from enum import Flag, auto
from functools import reduce
from typing import Callable, Generic, Iterable, Optional, TypeVar

from winners.collector.accumulator import RateAccumulator
from winners.collector.scorer_protocol import Scorer

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


class Characteristics(Flag):
    """Hints a reduction operation gives to the driver running it."""

    NONE = 0
    # Result content does not depend on encounter or combine order
    UNORDERED = auto()
    # The finisher returns the accumulator unchanged
    IDENTITY_FINISH = auto()


@dataclass(frozen=True)
class ReductionOperation(Generic[T, A, R]):
    """Supplier, accumulator, combiner and finisher of a mutable reduction."""

    supplier: Callable[[], A]
    accumulator: Callable[[A, T], A]
    combiner: Callable[[A, A], A]
    finisher: Callable[[A], R]
    characteristics: Characteristics = field(default=Characteristics.NONE)

    @property
    def unordered(self) -> bool:
        return Characteristics.UNORDERED in self.characteristics

    def fold(self, elements: Iterable[T], state: Optional[A] = None) -> A:
        """Accumulate elements into a state (a fresh one by default)."""
        if state is None:
            state = self.supplier()
        return reduce(self.accumulator, elements, state)

    def __call__(self, elements: Iterable[T]) -> R:
        """Sequentially reduce elements to the finished result."""
        return self.finisher(self.fold(elements))


def build_winners_collector(
    scorer: Scorer[T],
) -> ReductionOperation[T, RateAccumulator[T], list[T]]:
    """
    Build a reduction collecting every element with the maximal score.

    Args:
        scorer: Pure function giving the score of each element

    Returns:
        ReductionOperation advertising UNORDERED
    """
    return ReductionOperation(
        supplier=lambda: RateAccumulator(scorer),
        accumulator=RateAccumulator.accumulate,
        combiner=RateAccumulator.combine,
        finisher=RateAccumulator.finish,
        characteristics=Characteristics.UNORDERED,
    )


class MaxRatedWinnersCollector:
    """Namespace for building the max-rated winners reduction."""

    def __init__(self):
        raise TypeError("MaxRatedWinnersCollector is not instantiable; use of()")

    @staticmethod
    def of(scorer: Scorer[T]) -> ReductionOperation[T, RateAccumulator[T], list[T]]:
        """Construct the reduction using the given scorer."""
        return build_winners_collector(scorer)
