"""Max-rated winners collection."""
from .accumulator import RateAccumulator
from .collector import (
    Characteristics,
    MaxRatedWinnersCollector,
    ReductionOperation,
    build_winners_collector,
)
from .scorer_protocol import MIN_SCORE, Scorer

__all__ = [
    "Characteristics",
    "MIN_SCORE",
    "MaxRatedWinnersCollector",
    "RateAccumulator",
    "ReductionOperation",
    "Scorer",
    "build_winners_collector",
]
