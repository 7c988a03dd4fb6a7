"""Solved-tree lookups and solver invocation module."""

from .strategy import HeroStrategy, StreetStrategies
from .tree import (
    load_tree,
    find_hero_strategy,
    hero_strategy_flop_both,
    hero_strategy_flop,
    hero_strategy_turn_both,
    hero_strategy_turn_check,
    hero_strategy_river_both,
    hero_strategy_river_check,
)
from .job import SolverConfig, build_job_content
from .runner import SolverRunner, SolverError

__all__ = [
    "HeroStrategy",
    "StreetStrategies",
    "load_tree",
    "find_hero_strategy",
    "hero_strategy_flop_both",
    "hero_strategy_flop",
    "hero_strategy_turn_both",
    "hero_strategy_turn_check",
    "hero_strategy_river_both",
    "hero_strategy_river_check",
    "SolverConfig",
    "build_job_content",
    "SolverRunner",
    "SolverError",
]
