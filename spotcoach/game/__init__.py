"""Card handling and hand strength module."""

from .cards import (
    Card, Hand, Deck, Rank, Suit,
    parse_card, parse_cards, normalize_card, normalize_board, normalize_hand,
)
from .evaluator import evaluate_hand, calculate_strength, check_straight
from .equity import EquityCalculator, calculate_equity

__all__ = [
    "Card",
    "Hand",
    "Deck",
    "Rank",
    "Suit",
    "parse_card",
    "parse_cards",
    "normalize_card",
    "normalize_board",
    "normalize_hand",
    "evaluate_hand",
    "calculate_strength",
    "check_straight",
    "EquityCalculator",
    "calculate_equity",
]
