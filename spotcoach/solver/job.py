"""
Job files for the external console solver.

The solver is driven by a plain-text command script. The spot solved is a
BTN open vs BB call at 100bb, postflop with a single 50% bet size for the
in-position player and no donk bets, which keeps the tree small enough to
solve in a few seconds on a laptop.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from spotcoach.game.cards import generic_hand, split_cards

# Preflop ranges from the solver's bundled presets (100bb, 2.5x open).
# IP is the BTN opening range.
RANGE_IP = (
    "AA:1.0,A2s:1.0,A2o:0.0,A3s:1.0,A3o:0.016,A4s:1.0,A4o:1.0,A5s:1.0,"
    "A5o:1.0,A6s:1.0,A6o:1.0,A7s:1.0,A7o:1.0,A8s:1.0,A8o:1.0,A9s:1.0,"
    "A9o:1.0,ATs:1.0,ATo:1.0,AJs:1.0,AJo:1.0,AQs:1.0,AQo:1.0,AKs:1.0,"
    "AKo:1.0,22:1.0,32s:0.0,32o:0.0,42s:0.0,42o:0.0,52s:0.0,52o:0.0,"
    "62s:0.0,62o:0.0,72s:0.0,72o:0.0,82s:0.0,82o:0.0,92s:0.0,92o:0.0,"
    "T2s:0.0,T2o:0.0,J2s:0.0,J2o:0.0,Q2s:0.066,Q2o:0.0,K2s:1.0,"
    "K2o:0.0,33:1.0,43s:0.0,43o:0.0,53s:0.0,53o:0.0,63s:0.0,63o:0.0,"
    "73s:0.0,73o:0.0,83s:0.0,83o:0.0,93s:0.0,93o:0.0,T3s:0.0,T3o:0.0,"
    "J3s:0.0,J3o:0.0,Q3s:1.0,Q3o:0.0,K3s:1.0,K3o:0.0,44:1.0,54s:1.0,"
    "54o:0.0,64s:0.0,64o:0.0,74s:0.0,74o:0.0,84s:0.0,84o:0.0,94s:0.0,"
    "94o:0.0,T4s:0.0,T4o:0.0,J4s:0.256,J4o:0.0,Q4s:1.0,Q4o:0.0,"
    "K4s:1.0,K4o:0.0,55:1.0,65s:1.0,65o:0.0,75s:1.0,75o:0.0,85s:0.09,"
    "85o:0.0,95s:0.0,95o:0.0,T5s:0.0,T5o:0.0,J5s:1.0,J5o:0.0,Q5s:1.0,"
    "Q5o:0.0,K5s:1.0,K5o:0.0,66:1.0,76s:1.0,76o:0.0,86s:1.0,86o:0.0,"
    "96s:1.0,96o:0.0,T6s:1.0,T6o:0.0,J6s:1.0,J6o:0.0,Q6s:1.0,Q6o:0.0,"
    "K6s:1.0,K6o:0.0,77:1.0,87s:1.0,87o:0.0,97s:1.0,97o:0.0,T7s:1.0,"
    "T7o:0.0,J7s:1.0,J7o:0.0,Q7s:1.0,Q7o:0.0,K7s:1.0,K7o:0.0,88:1.0,"
    "98s:1.0,98o:0.486,T8s:1.0,T8o:0.558,J8s:1.0,J8o:0.43,Q8s:1.0,"
    "Q8o:0.082,K8s:1.0,K8o:0.7,99:1.0,T9s:1.0,T9o:1.0,J9s:1.0,J9o:1.0,"
    "Q9s:1.0,Q9o:1.0,K9s:1.0,K9o:1.0,TT:1.0,JTs:1.0,JTo:1.0,QTs:1.0,"
    "QTo:1.0,KTs:1.0,KTo:1.0,JJ:1.0,QJs:1.0,QJo:1.0,KJs:1.0,KJo:1.0,"
    "QQ:1.0,KQs:1.0,KQo:1.0,KK:1.0"
)

# OOP is the BB calling range against that open.
RANGE_OOP = (
    "AA:0.0,A2s:1.0,A2o:0.0,A3s:0.822,A3o:0.0,A4s:0.282,A4o:0.48,"
    "A5s:0.0,A5o:0.93,A6s:0.766,A6o:0.432,A7s:0.412,A7o:0.976,"
    "A8s:0.616,A8o:0.928,A9s:0.818,A9o:0.876,ATs:0.13,ATo:0.918,"
    "AJs:0.0,AJo:0.526,AQs:0.0,AQo:0.03,AKs:0.0,AKo:0.0,22:1.0,"
    "32s:0.278,32o:0.0,42s:0.796,42o:0.0,52s:1.0,52o:0.0,62s:0.0,"
    "62o:0.0,72s:0.0,72o:0.0,82s:0.0,82o:0.0,92s:0.0,92o:0.0,T2s:0.0,"
    "T2o:0.0,J2s:0.782,J2o:0.0,Q2s:1.0,Q2o:0.0,K2s:1.0,K2o:0.0,33:1.0,"
    "43s:1.0,43o:0.0,53s:0.904,53o:0.0,63s:1.0,63o:0.0,73s:0.032,"
    "73o:0.0,83s:0.0,83o:0.0,93s:0.0,93o:0.0,T3s:0.23,T3o:0.0,J3s:1.0,"
    "J3o:0.0,Q3s:1.0,Q3o:0.0,K3s:1.0,K3o:0.0,44:1.0,54s:0.396,54o:0.0,"
    "64s:0.904,64o:0.0,74s:1.0,74o:0.0,84s:0.136,84o:0.0,94s:0.0,"
    "94o:0.0,T4s:0.252,T4o:0.0,J4s:0.996,J4o:0.0,Q4s:1.0,Q4o:0.0,"
    "K4s:1.0,K4o:0.0,55:0.972,65s:0.456,65o:0.0,75s:0.82,75o:0.0,"
    "85s:1.0,85o:0.0,95s:0.22,95o:0.0,T5s:0.622,T5o:0.0,J5s:0.802,"
    "J5o:0.0,Q5s:0.98,Q5o:0.0,K5s:0.898,K5o:0.0,66:0.832,76s:0.346,"
    "76o:0.224,86s:0.824,86o:0.0,96s:0.924,96o:0.0,T6s:0.758,T6o:0.0,"
    "J6s:0.84,J6o:0.0,Q6s:0.932,Q6o:0.0,K6s:0.736,K6o:0.0,77:0.704,"
    "87s:0.212,87o:0.382,97s:0.818,97o:0.0,T7s:0.726,T7o:0.0,J7s:0.55,"
    "J7o:0.0,Q7s:0.992,Q7o:0.0,K7s:0.856,K7o:0.0,88:0.486,98s:0.338,"
    "98o:0.372,T8s:0.248,T8o:0.42,J8s:0.606,J8o:0.038,Q8s:0.766,"
    "Q8o:0.0,K8s:0.64,K8o:0.442,99:0.084,T9s:0.0,T9o:0.876,J9s:0.0,"
    "J9o:0.89,Q9s:0.068,Q9o:1.0,K9s:0.306,K9o:0.91,TT:0.0,JTs:0.0,"
    "JTo:0.776,QTs:0.122,QTo:0.796,KTs:0.026,KTo:0.802,JJ:0.0,"
    "QJs:0.06,QJo:0.904,KJs:0.0,KJo:0.696,QQ:0.0,KQs:0.0,KQo:0.474,"
    "KK:0.0"
)

# Default layout relative to the installation directory
JOB_FILE_REL_PATH = "resources/text/job_config.txt"
OUTPUT_JSON_REL_PATH = "strategy_dump.json"
RESOURCE_DIR_REL_PATH = "resources"
CONSOLE_SOLVER_REL_PATH = "TexasSolver/console_solver"


@dataclass
class SolverConfig:
    """Configuration for a console solver run."""
    solver_path: Path
    resource_dir: Path
    job_path: Path
    output_path: Path

    pot: float = 50
    effective_stack: float = 200
    # IP bet sizes in % of pot, per street
    ip_bet_sizes: dict[str, list[float]] = field(
        default_factory=lambda: {"flop": [50], "turn": [50]}
    )
    allin_threshold: float = 0.8
    thread_num: int = 8
    accuracy: float = 5.0          # Target exploitability, % of pot
    max_iteration: int = 10
    print_interval: int = 10
    use_isomorphism: bool = True

    @classmethod
    def from_base_dir(cls, base_dir: Union[str, Path], **kwargs) -> "SolverConfig":
        """Config with the default file layout under ``base_dir``."""
        base_dir = Path(base_dir)
        paths = {
            "solver_path": base_dir / CONSOLE_SOLVER_REL_PATH,
            "resource_dir": base_dir / RESOURCE_DIR_REL_PATH,
            "job_path": base_dir / JOB_FILE_REL_PATH,
            "output_path": base_dir / OUTPUT_JSON_REL_PATH,
        }
        paths.update(kwargs)
        return cls(**paths)


def activate_hand_in_range(range_str: str, target_generic: str) -> str:
    """
    Prepare a preflop range for a hero-focused solve.

    The hero's own generic hand is always kept, with its weight raised to
    1.0 if it is below 0.01, so the solver reports a strategy for it.
    Every other hand with zero weight is dropped to shrink the tree.
    Tokens without a single ':' separator are passed through untouched.
    """
    kept = []
    for token in range_str.split(","):
        parts = token.split(":")
        if len(parts) != 2:
            kept.append(token)
            continue

        hand, weight_str = parts
        try:
            weight = float(weight_str)
        except ValueError:
            weight = 0.0

        if hand == target_generic:
            kept.append(f"{hand}:1.0" if weight < 0.01 else token)
        elif weight > 0.0:
            kept.append(token)

    return ",".join(kept)


def dump_rounds_for_board(board: str) -> int:
    """Streets to dump: flop only for a flop, up to the river otherwise."""
    card_count = len(split_cards(board))
    if card_count == 3:
        return 1
    if card_count == 4:
        return 2
    return 3


def build_job_content(
    board: str,
    hero_hand: str,
    config: SolverConfig,
) -> str:
    """
    Build the solver's command script.

    Args:
        board: Comma-separated board like 'Qs,Jh,2h'
        hero_hand: Hero hand key like 'AhKd'
        config: Solve parameters and output location

    Returns:
        Newline-terminated command script
    """
    generic = generic_hand(hero_hand)

    lines = [
        f"set_pot {_fmt(config.pot)}",
        f"set_effective_stack {_fmt(config.effective_stack)}",
        f"set_board {board}",
        f"set_range_ip {activate_hand_in_range(RANGE_IP, generic)}",
        f"set_range_oop {activate_hand_in_range(RANGE_OOP, generic)}",
    ]
    for street, sizes in config.ip_bet_sizes.items():
        if sizes:
            lines.append(f"set_bet_sizes ip,{street},bet,{','.join(_fmt(s) for s in sizes)}")
    lines += [
        f"set_allin_threshold {_fmt(config.allin_threshold)}",
        f"set_thread_num {config.thread_num}",
        f"set_accuracy {_fmt(config.accuracy)}",
        f"set_max_iteration {config.max_iteration}",
        f"set_print_interval {config.print_interval}",
        f"set_use_isomorphism {int(config.use_isomorphism)}",
        "build_tree",
        "start_solve",
        f"set_dump_rounds {dump_rounds_for_board(board)}",
        f"dump_result {config.output_path}",
    ]
    return "\n".join(lines) + "\n"


def _fmt(value: float) -> str:
    """Format a number without a trailing '.0' for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
