"""Pytest configuration and fixtures."""

import io
import random

import pytest
from rich.console import Console

from equilab.game.cards import FULL_DECK, Hand
from equilab.game.equity import EquityCalculator


@pytest.fixture
def calculator():
    """Seeded calculator small enough for fast tests."""
    return EquityCalculator(samples=5000, seed=42)


@pytest.fixture
def random_hands():
    """Factory for reproducible random hands of a given size."""
    rng = random.Random(1234)

    def _random_hands(count, size=7):
        return [Hand(tuple(rng.sample(FULL_DECK, size))) for _ in range(count)]

    return _random_hands


@pytest.fixture
def console():
    """Recording console that writes nowhere."""
    return Console(file=io.StringIO(), width=120, record=True)
