#!/usr/bin/env python3
"""Print the top-rated entries of a ratings table.

Usage:
    python scripts/run_demo.py                          # config/ratings.yaml
    python scripts/run_demo.py --ratings other.yaml --chunk-size 3

Environment variables:
    WINNERS_CHUNK_SIZE: Default partition size (optional)
    WINNERS_COMBINE_STRATEGY: tree or pairwise (optional)
    WINNERS_LOG_LEVEL: Log level (optional)
"""
import argparse
import logging
import sys
from pathlib import Path

# Bootstrap imports
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from winners.demo import find_winners, load_ratings
from winners.logging_config import setup_logging
from winners.settings import settings

logger = logging.getLogger(__name__)


def main():
    """Load ratings and print the winners."""
    parser = argparse.ArgumentParser(description="Print the top-rated entries of a ratings table.")
    parser.add_argument(
        "--ratings",
        default=str(settings.ratings_path),
        help="Path to a ratings YAML file.",
    )
    parser.add_argument("--chunk-size", type=int, default=None, help="Partition size.")
    parser.add_argument(
        "--strategy",
        choices=["tree", "pairwise"],
        default=None,
        help="How partial results are combined.",
    )
    args = parser.parse_args()

    setup_logging()

    ratings = load_ratings(args.ratings)
    logger.info("Loaded %d ratings from %s", len(ratings), args.ratings)

    for name, rating in find_winners(ratings, chunk_size=args.chunk_size, strategy=args.strategy):
        print(f"{name}={rating}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        sys.exit(1)
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)
