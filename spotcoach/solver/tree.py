"""
Lookups into a solved game tree dumped by the console solver.

The dump is a nested JSON document. Decision nodes carry an ``actions``
list, a ``strategy.strategy`` table mapping hand keys ('AhKd') to
probability vectors aligned with ``actions``, and a ``childrens`` map keyed
by action name. Chance nodes carry a ``dealcards`` map keyed by the card
dealt.

Only one route between streets is modeled: OOP checks, IP checks, then the
next card is dealt. Trees reached any other way (a bet that gets called)
are not followed, so turn and river lookups simply come back empty for
them.

Nothing here raises on unexpected document shapes. A missing key, a wrong
type or an unknown hand all end up as ``None``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from .strategy import HeroStrategy, StreetStrategies

logger = logging.getLogger(__name__)

CHECK = "CHECK"
BET = "BET"


def load_tree(json_path: Union[str, Path]) -> dict:
    """
    Load a solver dump from disk.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    json_path = Path(json_path)
    logger.debug("Loading solved tree from %s", json_path)
    with open(json_path, "r", encoding="utf-8") as f:
        return json.load(f)


def find_hero_strategy(
    json_path: Union[str, Path],
    hero_hand: str,
) -> Optional[HeroStrategy]:
    """Strategy of the first node anywhere in the dump that lists the hand."""
    root = load_tree(json_path)
    node = find_node_with_hero_strategy(root, hero_hand)
    if node is None:
        return None
    return hero_strategy_from_node(node, hero_hand)


def find_hero_strategy_vector(
    json_path: Union[str, Path],
    hero_hand: str,
) -> Optional[list[float]]:
    strategy = find_hero_strategy(json_path, hero_hand)
    return list(strategy.probs) if strategy is not None else None


def find_node_with_hero_strategy(node: Any, hero_hand: str) -> Optional[dict]:
    """
    Depth-first search for the first node whose table holds the hand key.

    Starts with ``node`` itself and descends through ``childrens`` in
    sorted key order. Uses an explicit stack so arbitrarily deep trees are
    fine.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if not isinstance(current, dict):
            continue

        table = _strategy_table(current)
        if table is not None and hero_hand in table:
            return current

        children = current.get("childrens")
        if isinstance(children, dict):
            # Reversed so the first child in key order is visited first
            for key in sorted(children, reverse=True):
                stack.append(children[key])

    return None


def extract_actions(node: Any) -> list[str]:
    """Action labels of a node, ignoring non-string entries."""
    if not isinstance(node, dict):
        return []
    actions = node.get("actions")
    if not isinstance(actions, list):
        return []
    return [a for a in actions if isinstance(a, str)]


def extract_strategy_vector(node: Any, hero_hand: str) -> Optional[list[float]]:
    """
    Probability vector stored for a hand at this node.

    The exact key is tried first, then the same two cards in swapped order
    ('KdAh' for 'AhKd'), since the solver does not always store hole cards
    in the order a user types them. Non-numeric entries are dropped.
    """
    table = _strategy_table(node)
    if table is None:
        return None

    key = resolve_hand_key(table, hero_hand)
    if key is None:
        return None

    entry = table[key]
    if not isinstance(entry, list):
        return None

    # bool is an int subclass but never a probability
    return [
        float(v) for v in entry
        if isinstance(v, (int, float)) and not isinstance(v, bool)
    ]


def resolve_hand_key(table: dict, hero_hand: str) -> Optional[str]:
    """Return the key under which the table stores this hand, if any."""
    if hero_hand in table:
        return hero_hand
    if len(hero_hand) == 4:
        swapped = hero_hand[2:] + hero_hand[:2]
        if swapped in table:
            return swapped
    return None


def hero_strategy_from_node(node: Any, hero_hand: str) -> Optional[HeroStrategy]:
    """
    Hero's strategy at a node.

    A node without any strategy table is treated as a subtree root: the
    first descendant that lists the hand is used instead.
    """
    if isinstance(node, dict) and _strategy_table(node) is None:
        node = find_node_with_hero_strategy(node, hero_hand)
        if node is None:
            return None

    probs = extract_strategy_vector(node, hero_hand)
    if probs is None:
        return None
    return HeroStrategy.from_vectors(extract_actions(node), probs)


def extract_street_strategies(start_node: Any, hero_hand: str) -> StreetStrategies:
    """
    Hero's three decision points on a street.

    - OOP opening the street (the street's first node)
    - IP after OOP checks (the CHECK child)
    - OOP facing a bet after checking (a BET child of the CHECK child)
    """
    oop_open = hero_strategy_from_node(start_node, hero_hand)

    check_node = _child(start_node, CHECK)
    ip_vs_check = None
    oop_vs_bet = None
    if check_node is not None:
        ip_vs_check = hero_strategy_from_node(check_node, hero_hand)

        children = check_node.get("childrens")
        if isinstance(children, dict):
            bet_key = next((k for k in sorted(children) if BET in k), None)
            if bet_key is not None:
                oop_vs_bet = hero_strategy_from_node(children[bet_key], hero_hand)

    return StreetStrategies(oop_open, ip_vs_check, oop_vs_bet)


def hero_strategy_flop_both(root: Any, hero_hand: str) -> StreetStrategies:
    """All three flop decision points; the root is the flop's OOP node."""
    return extract_street_strategies(root, hero_hand)


def hero_strategy_flop(root: Any, hero_hand: str) -> Optional[HeroStrategy]:
    return hero_strategy_flop_both(root, hero_hand).preferred


def hero_strategy_turn_both(
    root: Any,
    hero_hand: str,
    turn_card: str,
) -> Optional[StreetStrategies]:
    """
    All three turn decision points after a checked-through flop.

    Returns:
        None if the tree has no check-check path to this turn card
    """
    turn_node = _next_street(root, turn_card)
    if turn_node is None:
        logger.debug("No check-check path to turn %s", turn_card)
        return None
    return extract_street_strategies(turn_node, hero_hand)


def hero_strategy_turn_check(
    root: Any,
    hero_hand: str,
    turn_card: str,
) -> Optional[HeroStrategy]:
    strategies = hero_strategy_turn_both(root, hero_hand, turn_card)
    return strategies.preferred if strategies is not None else None


def hero_strategy_river_both(
    root: Any,
    hero_hand: str,
    turn_card: str,
    river_card: str,
) -> Optional[StreetStrategies]:
    """
    All three river decision points after checked-through flop and turn.

    Returns:
        None if the tree has no check-check path to this runout
    """
    turn_node = _next_street(root, turn_card)
    river_node = _next_street(turn_node, river_card) if turn_node is not None else None
    if river_node is None:
        logger.debug("No check-check path to river %s,%s", turn_card, river_card)
        return None
    return extract_street_strategies(river_node, hero_hand)


def hero_strategy_river_check(
    root: Any,
    hero_hand: str,
    turn_card: str,
    river_card: str,
) -> Optional[HeroStrategy]:
    strategies = hero_strategy_river_both(root, hero_hand, turn_card, river_card)
    return strategies.preferred if strategies is not None else None


def _strategy_table(node: Any) -> Optional[dict]:
    """The node's ``strategy.strategy`` mapping, if it has one."""
    if not isinstance(node, dict):
        return None
    outer = node.get("strategy")
    if not isinstance(outer, dict):
        return None
    inner = outer.get("strategy")
    return inner if isinstance(inner, dict) else None


def _child(node: Any, action: str) -> Optional[dict]:
    if not isinstance(node, dict):
        return None
    children = node.get("childrens")
    if not isinstance(children, dict):
        return None
    child = children.get(action)
    return child if isinstance(child, dict) else None


def _next_street(street_node: Any, card: str) -> Optional[dict]:
    """Follow OOP check, IP check, then deal ``card``."""
    chance = _child(_child(street_node, CHECK), CHECK)
    if chance is None:
        return None
    dealcards = chance.get("dealcards")
    if not isinstance(dealcards, dict):
        return None
    dealt = dealcards.get(card)
    return dealt if isinstance(dealt, dict) else None
