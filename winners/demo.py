"""Demonstration: find the top-rated names in a ratings table."""
import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from winners.collector.collector import build_winners_collector
from winners.reduction.parallel import parallel_collect
from winners.reduction.sequential import CombineStrategy

logger = logging.getLogger(__name__)


def load_ratings(path: Union[str, Path]) -> dict[str, int]:
    """
    Load a name -> rating mapping from YAML.

    Args:
        path: Path to ratings.yaml

    Returns:
        Ratings keyed by name

    Raises:
        ValueError: If the file is not a mapping or a rating is not an integer
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping with a 'ratings' key")

    ratings = data.get("ratings", {})
    if not isinstance(ratings, dict):
        raise ValueError(f"'ratings' in {path} must be a mapping of name to rating")

    for name, rating in ratings.items():
        # bool is an int subclass; YAML true/false is not a rating
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValueError(f"Rating for {name!r} in {path} must be an integer, got {rating!r}")

    logger.debug("Loaded %d ratings from %s", len(ratings), path)
    return {str(name): rating for name, rating in ratings.items()}


def find_winners(
    ratings: dict[str, int],
    chunk_size: Optional[int] = None,
    strategy: Optional[CombineStrategy] = None,
) -> list[tuple[str, int]]:
    """
    Collect every (name, rating) entry sharing the highest rating.

    Args:
        ratings: Ratings keyed by name
        chunk_size: Partition size for the parallel reduction
        strategy: Combine strategy for the parallel reduction

    Returns:
        Winning entries; order depends on scheduling
    """
    collector = build_winners_collector(lambda entry: entry[1])
    return parallel_collect(
        ratings.items(),
        collector,
        chunk_size=chunk_size,
        strategy=strategy,
    )
