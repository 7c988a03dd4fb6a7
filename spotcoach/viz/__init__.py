"""Visualization module."""

from .strategy import StrategyDisplay, card_markup, strategy_table

__all__ = [
    "StrategyDisplay",
    "card_markup",
    "strategy_table",
]
