"""Pytest fixtures for Rate Winners tests."""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from winners.collector.collector import build_winners_collector


# =============================================================================
# RATINGS FIXTURES
# =============================================================================


@pytest.fixture
def ratings():
    """The sample ratings table with two names tied at the top."""
    return {
        "Ivanov": 5,
        "Petrov": 5,
        "Sidorov": 3,
        "Golubev": 7,
        "Spiridonov": 1,
        "Kukushkin": 7,
        "Antonov": 3,
    }


@pytest.fixture
def entries(ratings):
    """Ratings as (name, rating) tuples in insertion order."""
    return list(ratings.items())


@pytest.fixture
def by_rating():
    """Scorer reading the rating out of a (name, rating) tuple."""
    return lambda entry: entry[1]


@pytest.fixture
def winners_collector(by_rating):
    """Winners reduction over (name, rating) tuples."""
    return build_winners_collector(by_rating)


@pytest.fixture
def expected_winners():
    """Winning entries of the sample ratings table."""
    return {("Golubev", 7), ("Kukushkin", 7)}
