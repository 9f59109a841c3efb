"""Rate Winners: collect every element sharing the maximal score."""
from .collector import (
    MIN_SCORE,
    Characteristics,
    MaxRatedWinnersCollector,
    RateAccumulator,
    ReductionOperation,
    Scorer,
    build_winners_collector,
)
from .exceptions import (
    InvalidPartitionError,
    StateConsumedError,
    StateFinishedError,
    WinnersError,
)
from .reduction import async_collect, collect, parallel_collect, partition, reduce_states

__all__ = [
    "Characteristics",
    "InvalidPartitionError",
    "MIN_SCORE",
    "MaxRatedWinnersCollector",
    "RateAccumulator",
    "ReductionOperation",
    "Scorer",
    "StateConsumedError",
    "StateFinishedError",
    "WinnersError",
    "async_collect",
    "build_winners_collector",
    "collect",
    "parallel_collect",
    "partition",
    "reduce_states",
]
