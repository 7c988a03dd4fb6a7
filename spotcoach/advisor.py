"""Street-by-street advice for a hero hand on a solved tree."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from spotcoach.game.cards import normalize_board, split_cards
from spotcoach.game.evaluator import evaluate_hand
from spotcoach.solver.strategy import StreetStrategies
from spotcoach.solver.tree import (
    load_tree,
    hero_strategy_flop_both,
    hero_strategy_turn_both,
    hero_strategy_river_both,
)

logger = logging.getLogger(__name__)


class Street(Enum):
    """Postflop streets."""
    FLOP = 1
    TURN = 2
    RIVER = 3

    def __str__(self) -> str:
        return self.name


@dataclass
class StreetReport:
    """What the solver says about one street."""
    street: Street
    board: list[str]             # All board cards up to this street
    strategies: StreetStrategies
    strength: str                # Evaluator description

    @property
    def board_str(self) -> str:
        return ",".join(self.board)


def split_board(raw: str) -> tuple[str, Optional[str], Optional[str]]:
    """
    Split a 3-5 card board into flop, turn and river.

    Args:
        raw: Board as typed, e.g. 'QsJh2h' or 'Qs,Jh,2h,Ac'

    Returns:
        (flop, turn, river) with the flop comma-separated

    Raises:
        ValueError: If the board does not have 3, 4 or 5 cards
    """
    normalized = normalize_board(raw)
    cards = split_cards(normalized)
    if len(cards) not in (3, 4, 5):
        raise ValueError(
            f"Input '{normalized}' is invalid (need 3, 4, or 5 cards)"
        )

    flop = ",".join(cards[:3])
    turn = cards[3] if len(cards) > 3 else None
    river = cards[4] if len(cards) > 4 else None
    return flop, turn, river


def first_card(raw: Optional[str]) -> str:
    """First normalized card of a fragment, or '' if there is none."""
    if not raw:
        return ""
    cards = split_cards(normalize_board(raw))
    return cards[0] if cards else ""


class SpotAdvisor:
    """
    Walks a solved tree for one hero hand, street by street.

    The tree must come from a solve of the same flop; turn and river
    strategies exist only on check-check lines.
    """

    def __init__(self, tree: dict):
        self.tree = tree

    @classmethod
    def from_file(cls, json_path: Union[str, Path]) -> "SpotAdvisor":
        return cls(load_tree(json_path))

    def flop(self, hero_hand: str, flop: str) -> StreetReport:
        cards = split_cards(flop)
        return StreetReport(
            street=Street.FLOP,
            board=cards,
            strategies=hero_strategy_flop_both(self.tree, hero_hand),
            strength=evaluate_hand(hero_hand, flop),
        )

    def turn(self, hero_hand: str, flop: str, turn: str) -> StreetReport:
        cards = split_cards(flop) + [turn]
        strategies = hero_strategy_turn_both(self.tree, hero_hand, turn)
        return StreetReport(
            street=Street.TURN,
            board=cards,
            strategies=strategies or StreetStrategies(),
            strength=evaluate_hand(hero_hand, ",".join(cards)),
        )

    def river(self, hero_hand: str, flop: str, turn: str, river: str) -> StreetReport:
        cards = split_cards(flop) + [turn, river]
        strategies = hero_strategy_river_both(self.tree, hero_hand, turn, river)
        return StreetReport(
            street=Street.RIVER,
            board=cards,
            strategies=strategies or StreetStrategies(),
            strength=evaluate_hand(hero_hand, ",".join(cards)),
        )

    def analyze(
        self,
        hero_hand: str,
        flop: str,
        turn: Optional[str] = None,
        river: Optional[str] = None,
    ) -> list[StreetReport]:
        """
        Reports for the flop and, when given, the turn and river.

        A river without a turn cannot be located in the tree and is
        skipped.
        """
        reports = [self.flop(hero_hand, flop)]

        if turn:
            reports.append(self.turn(hero_hand, flop, turn))

        if river:
            if not turn:
                logger.warning(
                    "River '%s' given without a turn card, skipping river", river
                )
            else:
                reports.append(self.river(hero_hand, flop, turn, river))

        return reports
