"""Max-rated winners accumulation."""
import logging
from typing import Any, Generic, TypeVar

from winners.collector.scorer_protocol import MIN_SCORE, Scorer
from winners.exceptions import StateConsumedError, StateFinishedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateAccumulator(Generic[T]):
    """Running maximum score and every element that reached it.

    ``winners`` always holds the elements seen so far whose score equals
    ``max_rate``, in encounter order.
    """

    def __init__(self, scorer: Scorer[T]):
        """
        Initialize an empty accumulator.

        Args:
            scorer: Pure function giving the score of each element
        """
        self.scorer = scorer
        self.max_rate: Any = MIN_SCORE
        self.winners: list[T] = []
        self._consumed = False
        self._finished = False

    def accumulate(self, element: T) -> "RateAccumulator[T]":
        """
        Incorporate one element.

        - rate > max_rate: the element becomes the only champion
        - rate == max_rate: the element joins the champions
        - rate < max_rate: the element is dropped

        Scorer exceptions propagate unchanged and leave the state untouched.

        Args:
            element: Next element of the input

        Returns:
            This accumulator
        """
        self._check_open("accumulate")
        rate = self.scorer(element)

        if rate > self.max_rate:
            self.max_rate = rate
            self.winners = [element]
        elif rate == self.max_rate:
            self.winners.append(element)

        return self

    def combine(self, other: "RateAccumulator[T]") -> "RateAccumulator[T]":
        """
        Merge another accumulator into this one.

        - other's max_rate greater: other's winners replace ours
        - equal: other's winners are appended after ours
        - lower: other is dropped

        ``other`` is consumed: its winners list may now be owned by this
        accumulator, so it rejects any further accumulate or combine.

        Args:
            other: Independently accumulated state

        Returns:
            This accumulator
        """
        self._check_open("combine")
        if other is self:
            raise StateConsumedError("combine an accumulator with itself")
        other._check_open("combine")

        if other.max_rate > self.max_rate:
            self.max_rate = other.max_rate
            self.winners = other.winners
        elif other.max_rate == self.max_rate:
            self.winners.extend(other.winners)

        other._consumed = True
        logger.debug(
            "Combined accumulators: max_rate=%r, %d winners",
            self.max_rate,
            len(self.winners),
        )
        return self

    def finish(self) -> list[T]:
        """
        Get the collected winners.

        May be called repeatedly; every call returns a fresh list with the
        same content. The accumulator is closed to further updates.

        Returns:
            Elements having the maximal score
        """
        if self._consumed:
            raise StateConsumedError("finish")
        self._finished = True
        return list(self.winners)

    @property
    def is_empty(self) -> bool:
        """True when no element has been accumulated."""
        return self.max_rate is MIN_SCORE

    def _check_open(self, operation: str) -> None:
        if self._consumed:
            raise StateConsumedError(operation)
        if self._finished:
            raise StateFinishedError(operation)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} max_rate={self.max_rate!r} "
            f"winners={len(self.winners)}>"
        )
