"""
Heuristic hand strength classification.

Classifies every supplied card (hole cards plus 0-5 board cards) into a
poker hand category and a 0-100 score. The score is an ordering signal
for display, not an equity estimate: it only looks at the single card
that decides the category and it is not monotonic across categories.
"""

from typing import Optional

from .cards import Card, RANK_NAMES, SUIT_NAMES, parse_cards

UNKNOWN = "Unknown"


def evaluate_hand(hero_hand: str, board: str) -> str:
    """
    Describe the strength of a hero hand on a board.

    Args:
        hero_hand: Hole cards like 'AhKh'
        board: Board cards like 'Qh,Jh,2h' or 'QhJh2h'

    Returns:
        A string like 'Flush (Hearts) (Strength: 79/100)', or 'Unknown'
        when no card could be parsed
    """
    cards = parse_cards(f"{hero_hand}{board}")
    if not cards:
        return UNKNOWN

    desc, score = calculate_strength(cards)
    return f"{desc} (Strength: {score}/100)"


def calculate_strength(cards: list[Card]) -> tuple[str, int]:
    """Classify cards into a category description and a 0-100 score."""
    # Flush
    suit_counts = [0] * 4
    for card in cards:
        suit_counts[card.suit] += 1

    flush_suit = next((s for s, n in enumerate(suit_counts) if n >= 5), None)
    if flush_suit is not None:
        flush_ranks = sorted(
            (c.rank for c in cards if c.suit == flush_suit), reverse=True
        )
        high = flush_ranks[0]
        if check_straight(flush_ranks) is not None:
            return "Straight Flush", 95 + high * 5 // 13
        return f"Flush ({SUIT_NAMES[flush_suit]})", 75 + high * 5 // 13

    # Straight
    ranks = sorted({c.rank for c in cards}, reverse=True)
    high = check_straight(ranks)
    if high is not None:
        return "Straight", 70 + high * 5 // 13

    # Pairs, trips, quads
    rank_counts = [0] * 13
    for card in cards:
        rank_counts[card.rank] += 1

    pairs = sorted((r for r, n in enumerate(rank_counts) if n == 2), reverse=True)
    trips = sorted((r for r, n in enumerate(rank_counts) if n == 3), reverse=True)
    quads = sorted((r for r, n in enumerate(rank_counts) if n == 4), reverse=True)

    if quads:
        return "Four of a Kind", 90 + quads[0] * 5 // 13

    if trips and (pairs or len(trips) > 1):
        return "Full House", 80 + trips[0] * 10 // 13

    if trips:
        return "Three of a Kind", 60 + trips[0] * 10 // 13

    if len(pairs) >= 2:
        return "Two Pair", 40 + pairs[0] * 20 // 13

    if pairs:
        p = pairs[0]
        return f"Pair of {RANK_NAMES[p]}s", 20 + p * 20 // 13

    top = ranks[0] if ranks else 0
    return f"High Card ({RANK_NAMES[top]})", top * 20 // 13


def check_straight(ranks: list[int]) -> Optional[int]:
    """
    Find a straight in unique ranks sorted high to low.

    Returns:
        Rank of the straight's top card (3 for the wheel), or None
    """
    if len(ranks) < 5:
        return None

    consecutive = 1
    for i in range(len(ranks) - 1):
        if ranks[i] == ranks[i + 1] + 1:
            consecutive += 1
            if consecutive >= 5:
                return ranks[i - (consecutive - 2)]
        else:
            consecutive = 1

    # Wheel: A-2-3-4-5 with the ace playing low
    if all(r in ranks for r in (12, 0, 1, 2, 3)):
        return 3

    return None
