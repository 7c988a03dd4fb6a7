"""Plain-text log of advisor runs."""

from pathlib import Path
from typing import Optional, Union

from spotcoach.solver.strategy import HeroStrategy

RUN_HEADER = "=== TUI RUN ==="


def format_summary(
    hero_hand: str,
    flop_board: str,
    turn_card: Optional[str] = None,
    river_card: Optional[str] = None,
    flop: Optional[HeroStrategy] = None,
    turn: Optional[HeroStrategy] = None,
    river: Optional[HeroStrategy] = None,
) -> str:
    """Render one run as a summary block ending with a blank line."""
    lines = [
        RUN_HEADER,
        f"Hero: {hero_hand}",
        f"Flop: {flop_board}",
    ]
    if turn_card:
        lines.append(f"Turn: {turn_card}")
    if river_card:
        lines.append(f"River: {river_card}")

    for label, strategy in (("Flop", flop), ("Turn", turn), ("River", river)):
        if strategy is None:
            continue
        lines.append(f"{label} strategy:")
        lines.extend(f"  {action}: {p:.4f}" for action, p in strategy.pairs())

    return "\n".join(lines) + "\n\n"


def append_summary(
    summary_path: Union[str, Path],
    hero_hand: str,
    flop_board: str,
    turn_card: Optional[str] = None,
    river_card: Optional[str] = None,
    flop: Optional[HeroStrategy] = None,
    turn: Optional[HeroStrategy] = None,
    river: Optional[HeroStrategy] = None,
) -> Path:
    """
    Append a run summary to a text file.

    Raises:
        OSError: If the file cannot be written
    """
    summary_path = Path(summary_path)
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    with open(summary_path, "a", encoding="utf-8") as f:
        f.write(format_summary(
            hero_hand, flop_board, turn_card, river_card, flop, turn, river
        ))
    return summary_path
