"""Sequential drivers: fold and combine on the calling thread."""
import logging
from typing import Iterable, Literal, Sequence, TypeVar

from winners.collector.collector import ReductionOperation

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")

CombineStrategy = Literal["tree", "pairwise"]


def collect(elements: Iterable[T], operation: ReductionOperation[T, A, R]) -> R:
    """Feed elements one by one into a single accumulator and finish it."""
    return operation(elements)


def reduce_states(
    states: Sequence[A],
    operation: ReductionOperation[T, A, R],
    strategy: CombineStrategy = "tree",
) -> A:
    """
    Merge partial accumulators into one.

    Args:
        states: Partial accumulators, in the order they should be combined
        operation: Reduction providing the combiner
        strategy: "pairwise" folds left to right; "tree" combines adjacent
            pairs round by round

    Returns:
        The merged accumulator (a fresh one when states is empty)
    """
    if not states:
        return operation.supplier()

    if strategy == "pairwise":
        merged = states[0]
        for state in states[1:]:
            merged = operation.combiner(merged, state)
        return merged

    if strategy != "tree":
        raise ValueError(f"Unknown combine strategy: {strategy}")

    level = list(states)
    rounds = 0
    while len(level) > 1:
        paired = [
            operation.combiner(level[i], level[i + 1])
            for i in range(0, len(level) - 1, 2)
        ]
        if len(level) % 2:
            paired.append(level[-1])
        level = paired
        rounds += 1

    logger.debug("Tree combine of %d states took %d rounds", len(states), rounds)
    return level[0]
