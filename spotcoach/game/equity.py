"""Equity calculation utilities."""

import numpy as np
from treys import Evaluator

from .cards import Card, Hand, Deck


class EquityCalculator:
    """
    Monte Carlo equity estimates using the treys evaluator.

    Complements the heuristic strength score with an actual
    win-probability estimate against unknown holdings.
    """

    def __init__(self, seed: int = None):
        self.evaluator = Evaluator()
        self.rng = np.random.default_rng(seed)

    def hand_vs_hand(
        self,
        hand1: Hand,
        hand2: Hand,
        board: list[Card],
        num_simulations: int = 10000,
    ) -> tuple[float, float, float]:
        """
        Calculate equity of hand1 vs hand2 on a board.

        Args:
            hand1: First hand
            hand2: Second hand
            board: Board cards (0-5)
            num_simulations: Number of Monte Carlo simulations

        Returns:
            Tuple of (hand1_equity, hand2_equity, tie_equity)
        """
        h1_treys = hand1.to_treys()
        h2_treys = hand2.to_treys()
        board_treys = _board_to_treys(board)

        all_cards = set(h1_treys + h2_treys + board_treys)
        if len(all_cards) != len(h1_treys) + len(h2_treys) + len(board_treys):
            raise ValueError("Duplicate cards detected")

        remaining = 5 - len(board_treys)

        if remaining == 0:
            r1 = self.evaluator.evaluate(h1_treys, board_treys)
            r2 = self.evaluator.evaluate(h2_treys, board_treys)
            if r1 < r2:
                return (1.0, 0.0, 0.0)
            elif r1 > r2:
                return (0.0, 1.0, 0.0)
            else:
                return (0.5, 0.5, 0.0)

        available = [c.to_treys() for c in Deck().cards if c.to_treys() not in all_cards]

        wins1 = wins2 = ties = 0
        for _ in range(num_simulations):
            self.rng.shuffle(available)
            full_board = board_treys + available[:remaining]

            r1 = self.evaluator.evaluate(h1_treys, full_board)
            r2 = self.evaluator.evaluate(h2_treys, full_board)

            if r1 < r2:
                wins1 += 1
            elif r1 > r2:
                wins2 += 1
            else:
                ties += 1

        total = num_simulations
        return (wins1 / total, wins2 / total, ties / total)

    def hand_vs_random(
        self,
        hand: Hand,
        board: list[Card],
        num_opponents: int = 1,
        num_simulations: int = 2000,
    ) -> float:
        """
        Calculate hand equity against random opponent holdings.

        Args:
            hand: Hero's hand
            board: Board cards (0-5)
            num_opponents: Number of opponents
            num_simulations: Number of simulations

        Returns:
            Equity (0-1), ties counted as half
        """
        hand_treys = hand.to_treys()
        board_treys = _board_to_treys(board)

        used = set(hand_treys + board_treys)
        if len(used) != len(hand_treys) + len(board_treys):
            raise ValueError("Duplicate cards detected")

        available = [c.to_treys() for c in Deck().cards if c.to_treys() not in used]
        remaining_board = 5 - len(board_treys)

        wins = ties = 0.0
        for _ in range(num_simulations):
            self.rng.shuffle(available)

            full_board = board_treys + available[:remaining_board]

            idx = remaining_board
            opp_ranks = []
            for _ in range(num_opponents):
                opp_hand = available[idx:idx + 2]
                opp_ranks.append(self.evaluator.evaluate(opp_hand, full_board))
                idx += 2

            hero_rank = self.evaluator.evaluate(hand_treys, full_board)
            best_opp = min(opp_ranks)

            if hero_rank < best_opp:
                wins += 1
            elif hero_rank == best_opp:
                ties += 0.5

        return (wins + ties) / num_simulations


def calculate_equity(
    hand: Hand,
    board: list[Card],
    num_opponents: int = 1,
    num_simulations: int = 2000,
    seed: int = None,
) -> float:
    """Equity of a hand against random opponent(s)."""
    calculator = EquityCalculator(seed=seed)
    return calculator.hand_vs_random(
        hand, board,
        num_opponents=num_opponents,
        num_simulations=num_simulations,
    )


def _board_to_treys(board: list[Card]) -> list[int]:
    if len(board) > 5:
        raise ValueError("Board cannot have more than 5 cards")
    return [c.to_treys() for c in board]
