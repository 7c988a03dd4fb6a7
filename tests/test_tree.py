"""Tests for solved-tree strategy lookups."""

import json

import pytest

from spotcoach.solver.strategy import HeroStrategy, StreetStrategies
from spotcoach.solver.tree import (
    load_tree,
    find_hero_strategy,
    find_hero_strategy_vector,
    find_node_with_hero_strategy,
    extract_actions,
    extract_strategy_vector,
    hero_strategy_from_node,
    extract_street_strategies,
    hero_strategy_flop_both,
    hero_strategy_flop,
    hero_strategy_turn_both,
    hero_strategy_turn_check,
    hero_strategy_river_both,
    hero_strategy_river_check,
)


def node(table, actions=None, **extra):
    n = {"strategy": {"strategy": table}}
    if actions is not None:
        n["actions"] = actions
    n.update(extra)
    return n


class TestHeroStrategy:
    def test_truncates_to_actions(self):
        s = HeroStrategy.from_vectors(["CHECK", "BET"], [0.3, 0.7, 0.0])
        assert s.pairs() == [("CHECK", 0.3), ("BET", 0.7)]

    def test_truncates_to_probs(self):
        s = HeroStrategy.from_vectors(["CHECK", "BET", "ALLIN"], [0.3, 0.7])
        assert s.actions == ("CHECK", "BET")

    def test_placeholder_labels(self):
        s = HeroStrategy.from_vectors([], [0.4, 0.6])
        assert s.actions == ("action #0", "action #1")
        assert s.probs == (0.4, 0.6)

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            HeroStrategy(("CHECK",), (0.5, 0.5))

    def test_get_action_probability(self):
        s = HeroStrategy(("CHECK", "BET"), (0.3, 0.7))
        assert s.get_action_probability("BET") == 0.7
        assert s.get_action_probability("FOLD") == 0.0

    def test_best_action(self):
        assert HeroStrategy(("CHECK", "BET"), (0.3, 0.7)).best_action() == "BET"
        assert HeroStrategy((), ()).best_action() is None


class TestStreetStrategies:
    def test_preferred_is_ip(self):
        ip = HeroStrategy(("CHECK",), (1.0,))
        oop = HeroStrategy(("BET",), (1.0,))
        assert StreetStrategies(oop, ip).preferred is ip

    def test_preferred_falls_back_to_oop(self):
        oop = HeroStrategy(("BET",), (1.0,))
        assert StreetStrategies(oop, None).preferred is oop

    def test_empty(self):
        assert StreetStrategies().is_empty
        assert StreetStrategies().preferred is None


class TestStrategyVector:
    def test_exact_match_keeps_order(self):
        n = node({"AhKd": [0.1, 0.2, 0.7]})
        assert extract_strategy_vector(n, "AhKd") == [0.1, 0.2, 0.7]

    def test_swapped_key(self):
        n = node({"QsQh": [0.25, 0.75]})
        assert extract_strategy_vector(n, "QhQs") == [0.25, 0.75]

    def test_exact_match_preferred_over_swapped(self):
        n = node({"KdAh": [1.0, 0.0], "AhKd": [0.0, 1.0]})
        assert extract_strategy_vector(n, "AhKd") == [0.0, 1.0]

    def test_no_swap_for_non_four_char_keys(self):
        n = node({"AKo": [1.0]})
        assert extract_strategy_vector(n, "oAK") is None

    def test_missing_hand(self):
        assert extract_strategy_vector(node({"AhKd": [1.0]}), "2c2d") is None

    def test_integers_coerced_and_junk_dropped(self):
        n = node({"AhKd": [1, "x", None, 0.5, True, {"a": 1}]})
        assert extract_strategy_vector(n, "AhKd") == [1.0, 0.5]

    def test_non_list_entry(self):
        assert extract_strategy_vector(node({"AhKd": 0.5}), "AhKd") is None

    def test_no_table(self):
        assert extract_strategy_vector({"actions": ["CHECK"]}, "AhKd") is None
        assert extract_strategy_vector({"strategy": []}, "AhKd") is None
        assert extract_strategy_vector([], "AhKd") is None

    def test_extract_actions_skips_non_strings(self):
        assert extract_actions({"actions": ["CHECK", 3, "BET"]}) == ["CHECK", "BET"]
        assert extract_actions({"actions": "CHECK"}) == []
        assert extract_actions(None) == []


class TestHeroStrategyFromNode:
    def test_pairs_with_actions(self):
        n = node({"AhKd": [0.3, 0.7, 0.0]}, actions=["CHECK", "BET"])
        s = hero_strategy_from_node(n, "AhKd")
        assert s.pairs() == [("CHECK", 0.3), ("BET", 0.7)]

    def test_no_actions(self):
        s = hero_strategy_from_node(node({"AhKd": [0.4, 0.6]}), "AhKd")
        assert s.actions == ("action #0", "action #1")

    def test_hand_not_in_table(self):
        assert hero_strategy_from_node(node({"AhKd": [1.0]}), "2c2d") is None

    def test_descendant_used_when_node_has_no_table(self):
        deep = node({"AhKd": [0.2, 0.8]}, actions=["CALL", "FOLD"])
        root = {"childrens": {"CHECK": {"childrens": {"BET 10": deep}}}}
        s = hero_strategy_from_node(root, "AhKd")
        assert s.pairs() == [("CALL", 0.2), ("FOLD", 0.8)]

    def test_no_descendant_holds_hand(self):
        root = {"childrens": {"CHECK": node({"QsQh": [1.0]})}}
        assert hero_strategy_from_node(root, "AhKd") is None


class TestFindNode:
    def test_root_itself(self):
        root = node({"AhKd": [1.0]})
        assert find_node_with_hero_strategy(root, "AhKd") is root

    def test_first_child_in_key_order(self):
        a = node({"AhKd": [0.1]})
        b = node({"AhKd": [0.9]})
        root = {"childrens": {"CHECK": b, "BET 50": a}}
        assert find_node_with_hero_strategy(root, "AhKd") is a

    def test_depth_first(self):
        deep = node({"AhKd": [0.1]})
        shallow = node({"AhKd": [0.9]})
        root = {"childrens": {
            "A": {"childrens": {"X": deep}},
            "B": shallow,
        }}
        assert find_node_with_hero_strategy(root, "AhKd") is deep

    def test_exact_key_only(self):
        root = node({"KdAh": [1.0]})
        assert find_node_with_hero_strategy(root, "AhKd") is None

    def test_very_deep_tree(self):
        leaf = node({"AhKd": [1.0]})
        current = leaf
        for _ in range(5000):
            current = {"childrens": {"CHECK": current}}
        assert find_node_with_hero_strategy(current, "AhKd") is leaf

    def test_ignores_non_dict(self):
        assert find_node_with_hero_strategy(["x"], "AhKd") is None
        assert find_node_with_hero_strategy({"childrens": [1, 2]}, "AhKd") is None


class TestFlop:
    def test_three_decision_points(self, sample_tree):
        oop, ip, vs_bet = hero_strategy_flop_both(sample_tree, "AhKd")
        assert oop.pairs() == [("CHECK", 0.6), ("BET 25.000000", 0.4)]
        assert ip.pairs() == [("CHECK", 0.3), ("BET 25.000000", 0.7)]
        assert vs_bet.actions == ("CALL", "FOLD", "RAISE 75.000000")
        assert vs_bet.probs == (0.5, 0.1, 0.4)

    def test_pair_stored_swapped(self, sample_tree):
        strategies = hero_strategy_flop_both(sample_tree, "QhQs")
        assert strategies.oop.probs == (0.1, 0.9)
        assert strategies.ip.probs == (0.05, 0.95)
        assert strategies.oop_vs_bet is None

    def test_flop_prefers_ip(self, sample_tree):
        assert hero_strategy_flop(sample_tree, "AhKd").probs == (0.3, 0.7)

    def test_root_without_check_child(self):
        root = node({"AhKd": [1.0]}, actions=["BET"])
        strategies = extract_street_strategies(root, "AhKd")
        assert strategies.oop.pairs() == [("BET", 1.0)]
        assert strategies.ip is None
        assert strategies.oop_vs_bet is None

    def test_bet_child_chosen_in_key_order(self):
        check = node({"AhKd": [1.0]}, childrens={
            "BET 75": node({"AhKd": [0.9]}),
            "BET 33": node({"AhKd": [0.1]}),
        })
        root = node({"AhKd": [1.0]}, childrens={"CHECK": check})
        assert extract_street_strategies(root, "AhKd").oop_vs_bet.probs == (0.1,)

    def test_unknown_hand(self, sample_tree):
        assert hero_strategy_flop_both(sample_tree, "7c2d").is_empty


class TestTurnAndRiver:
    def test_turn(self, sample_tree):
        strategies = hero_strategy_turn_both(sample_tree, "AhKd", "9d")
        assert strategies.oop.probs == (0.8, 0.2)
        assert strategies.ip.probs == (0.4, 0.6)
        assert strategies.oop_vs_bet.probs == (0.7, 0.3, 0.0)

    def test_turn_check(self, sample_tree):
        assert hero_strategy_turn_check(sample_tree, "AhKd", "9d").probs == (0.4, 0.6)

    def test_turn_card_not_dealt(self, sample_tree):
        assert hero_strategy_turn_both(sample_tree, "AhKd", "Ac") is None
        assert hero_strategy_turn_check(sample_tree, "AhKd", "Ac") is None

    def test_river(self, sample_tree):
        strategies = hero_strategy_river_both(sample_tree, "AhKd", "9d", "3c")
        assert strategies.oop.probs == (0.9, 0.1)
        assert strategies.ip.probs == (0.25, 0.75)

    def test_river_check(self, sample_tree):
        assert hero_strategy_river_check(sample_tree, "AhKd", "9d", "3c").probs == (0.25, 0.75)

    def test_river_wrong_turn(self, sample_tree):
        assert hero_strategy_river_both(sample_tree, "AhKd", "Ac", "3c") is None

    def test_river_card_not_dealt(self, sample_tree):
        assert hero_strategy_river_both(sample_tree, "AhKd", "9d", "4c") is None
        assert hero_strategy_river_check(sample_tree, "AhKd", "9d", "4c") is None

    def test_missing_first_check(self, sample_tree):
        del sample_tree["childrens"]["CHECK"]
        assert hero_strategy_turn_both(sample_tree, "AhKd", "9d") is None
        assert hero_strategy_river_both(sample_tree, "AhKd", "9d", "3c") is None

    def test_missing_second_check(self, sample_tree):
        del sample_tree["childrens"]["CHECK"]["childrens"]["CHECK"]
        assert hero_strategy_turn_both(sample_tree, "AhKd", "9d") is None

    def test_missing_turn_check(self, sample_tree):
        turn = sample_tree["childrens"]["CHECK"]["childrens"]["CHECK"]["dealcards"]["9d"]
        del turn["childrens"]["CHECK"]
        assert hero_strategy_turn_both(sample_tree, "AhKd", "9d") is not None
        assert hero_strategy_river_both(sample_tree, "AhKd", "9d", "3c") is None

    def test_missing_dealcards(self, sample_tree):
        del sample_tree["childrens"]["CHECK"]["childrens"]["CHECK"]["dealcards"]
        assert hero_strategy_turn_both(sample_tree, "AhKd", "9d") is None

    def test_malformed_shapes(self):
        assert hero_strategy_turn_both({"childrens": []}, "AhKd", "9d") is None
        assert hero_strategy_turn_both([], "AhKd", "9d") is None
        bad = {"childrens": {"CHECK": {"childrens": {"CHECK": {"dealcards": {"9d": 5}}}}}}
        assert hero_strategy_turn_both(bad, "AhKd", "9d") is None

    def test_read_only(self, sample_tree):
        before = json.dumps(sample_tree, sort_keys=True)
        hero_strategy_river_both(sample_tree, "AhKd", "9d", "3c")
        hero_strategy_flop_both(sample_tree, "QhQs")
        assert json.dumps(sample_tree, sort_keys=True) == before


class TestLoading:
    def test_load_tree(self, tree_file, sample_tree):
        assert load_tree(tree_file) == sample_tree

    def test_find_hero_strategy(self, tree_file):
        s = find_hero_strategy(tree_file, "AhKd")
        assert s.probs == (0.6, 0.4)
        assert find_hero_strategy_vector(tree_file, "AhKd") == [0.6, 0.4]

    def test_find_hero_strategy_missing_hand(self, tree_file):
        assert find_hero_strategy(tree_file, "7c2d") is None
        assert find_hero_strategy_vector(tree_file, "7c2d") is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_tree(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_tree(path)
