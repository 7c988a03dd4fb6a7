"""Pytest configuration and fixtures."""

import json

import pytest


def _decision(actions, table, childrens=None):
    node = {
        "node_type": "action_node",
        "actions": actions,
        "player": 1,
        "strategy": {"actions": actions, "strategy": table},
    }
    if childrens is not None:
        node["childrens"] = childrens
    return node


def _street(oop_table, ip_table, vs_bet_table, dealcards=None):
    """A street with OOP open, IP after a check and OOP facing a bet."""
    check_check = {"node_type": "chance_node", "dealcards": dealcards or {}}
    ip_node = _decision(
        ["CHECK", "BET 25.000000"],
        ip_table,
        {
            "BET 25.000000": _decision(
                ["CALL", "FOLD", "RAISE 75.000000"], vs_bet_table
            ),
            "CHECK": check_check,
        },
    )
    return _decision(
        ["CHECK", "BET 25.000000"],
        oop_table,
        {"CHECK": ip_node},
    )


@pytest.fixture
def sample_tree():
    """Flop Qs,Jh,2h with a checked-through turn 9d and river 3c."""
    river = _street(
        {"AhKd": [0.9, 0.1]},
        {"AhKd": [0.25, 0.75]},
        {"AhKd": [0.2, 0.8, 0.0]},
    )
    turn = _street(
        {"AhKd": [0.8, 0.2]},
        {"AhKd": [0.4, 0.6]},
        {"AhKd": [0.7, 0.3, 0.0]},
        dealcards={"3c": river},
    )
    return _street(
        {"AhKd": [0.6, 0.4], "QsQh": [0.1, 0.9]},
        {"AhKd": [0.3, 0.7], "QsQh": [0.05, 0.95]},
        {"AhKd": [0.5, 0.1, 0.4]},
        dealcards={"9d": turn},
    )


@pytest.fixture
def tree_file(tmp_path, sample_tree):
    """The sample tree written to disk as a solver dump."""
    path = tmp_path / "strategy_dump.json"
    path.write_text(json.dumps(sample_tree), encoding="utf-8")
    return path
