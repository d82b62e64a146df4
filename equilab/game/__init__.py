"""Card model, hand evaluation, deck and equity simulation."""

from .cards import (
    Card, Hand, Rank, Suit, FULL_DECK,
    parse_hand, parse_hand_bounded, ensure_disjoint,
)
from .evaluator import Category, evaluate, category_of, describe, rank_hand
from .deck import Deck
from .equity import EquityCalculator, EquityResult, calculate_equity

__all__ = [
    "Card",
    "Hand",
    "Rank",
    "Suit",
    "FULL_DECK",
    "parse_hand",
    "parse_hand_bounded",
    "ensure_disjoint",
    "Category",
    "evaluate",
    "category_of",
    "describe",
    "rank_hand",
    "Deck",
    "EquityCalculator",
    "EquityResult",
    "calculate_equity",
]
