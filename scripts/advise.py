#!/usr/bin/env python3
"""Get solver advice for a hero hand on a flop, turn and river.

Batch mode:        advise.py AhKd QsJh2h [turn] [river]
Interactive mode:  advise.py   (prompts for hand and board)
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from spotcoach.advisor import SpotAdvisor, split_board, first_card
from spotcoach.game.cards import Hand, normalize_board, normalize_hand, parse_cards, split_cards
from spotcoach.game.equity import calculate_equity
from spotcoach.session import append_summary
from spotcoach.solver import SolverConfig, SolverRunner, SolverError
from spotcoach.viz import StrategyDisplay, card_markup

DEFAULT_SUMMARY = "resources/outputs/tui_summary.txt"


def main():
    parser = argparse.ArgumentParser(
        description="Show solver strategies for a hero hand street by street"
    )
    parser.add_argument("hero", nargs="?", help="Hero hand (e.g., 'AhKd')")
    parser.add_argument("flop", nargs="?", help="Flop cards (e.g., 'QsJh2h' or 'Qs,Jh,2h')")
    parser.add_argument("turn", nargs="?", help="Turn card (e.g., '9d')")
    parser.add_argument("river", nargs="?", help="River card (e.g., '3c')")
    parser.add_argument(
        "--base-dir",
        default=str(Path(__file__).parent.parent),
        help="Directory holding the solver, its resources and outputs",
    )
    parser.add_argument(
        "--solver",
        help="Console solver executable (default: <base-dir>/TexasSolver/console_solver)",
    )
    parser.add_argument(
        "--resources",
        help="Solver resource directory (default: <base-dir>/resources)",
    )
    parser.add_argument(
        "--tree",
        help="Read an existing strategy dump instead of running the solver",
    )
    parser.add_argument(
        "--summary",
        help=f"Run summary file (default: <base-dir>/{DEFAULT_SUMMARY})",
    )
    parser.add_argument(
        "--equity",
        action="store_true",
        help="Also estimate equity vs a random hand",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    console.print("[bold cyan]SpotCoach - postflop solver advice[/]")

    interactive = not args.hero or not args.flop
    if interactive:
        hero_raw = args.hero or Prompt.ask("Enter hero hand (e.g. AhKd)", console=console)
    else:
        hero_raw = args.hero

    hero_hand = normalize_hand(hero_raw)
    if len(hero_hand) != 4:
        console.print(
            f"[red]Warning: hero hand '{hero_raw.strip()}' does not look like "
            f"a 4-char hand string (e.g. AhKd)[/]"
        )

    # Flop, plus turn/river typed along with it in interactive mode
    if interactive:
        board_raw = Prompt.ask(
            "Enter flop cards (e.g. QsJh2h). You can also enter Turn/River (e.g. QsJh2hAcTh)",
            console=console,
        )
        try:
            flop_board, turn_card, river_card = split_board(board_raw)
        except ValueError as e:
            console.print(f"[red]{e}. Aborting.[/]")
            return 1
    else:
        flop_board = normalize_board(args.flop)
        if len(split_cards(flop_board)) != 3:
            console.print(
                f"[red]Flop '{flop_board}' is invalid (need exactly 3 cards "
                f"like 'Qs,Jh,2h'). Aborting.[/]"
            )
            return 1
        turn_card = first_card(args.turn)
        river_card = first_card(args.river)

    base_dir = Path(args.base_dir)

    # Solve, or load an existing dump
    if args.tree:
        tree_path = Path(args.tree)
    else:
        overrides = {}
        if args.solver:
            overrides["solver_path"] = Path(args.solver)
        if args.resources:
            overrides["resource_dir"] = Path(args.resources)
        config = SolverConfig.from_base_dir(base_dir, **overrides)

        console.print(
            f"[dim]Running solver for flop {flop_board}... This may take some time.[/]"
        )
        try:
            tree_path = SolverRunner(config).run(flop_board, hero_hand)
        except SolverError as e:
            console.print(f"[red]Solver error: {e}[/]")
            return 1

    try:
        advisor = SpotAdvisor.from_file(tree_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Could not read strategy dump {tree_path}: {e}[/]")
        return 1

    display = StrategyDisplay(console)

    flop_report = advisor.flop(hero_hand, flop_board)
    display.display_report(flop_report, hero_hand)
    _display_equity(console, args.equity, hero_hand, flop_board)

    if interactive:
        if turn_card:
            console.print(f"\nTurn card pre-filled: {card_markup(turn_card)}")
        else:
            turn_card = first_card(Prompt.ask(
                "\nEnter turn card (e.g. 9d). Leave empty to skip",
                default="", show_default=False, console=console,
            ))

    turn_report = None
    if turn_card:
        turn_report = advisor.turn(hero_hand, flop_board, turn_card)
        display.display_report(turn_report, hero_hand)
        _display_equity(console, args.equity, hero_hand, turn_report.board_str)

    if interactive:
        if river_card:
            console.print(f"\nRiver card pre-filled: {card_markup(river_card)}")
        else:
            river_card = first_card(Prompt.ask(
                "\nEnter river card (e.g. 3c). Leave empty to skip",
                default="", show_default=False, console=console,
            ))

    river_report = None
    if river_card:
        if not turn_card:
            console.print(
                f"[red]River '{river_card}' given without a turn card. "
                f"Please provide a turn to see river strategy.[/]"
            )
            river_card = ""
        else:
            river_report = advisor.river(hero_hand, flop_board, turn_card, river_card)
            display.display_report(river_report, hero_hand)
            _display_equity(console, args.equity, hero_hand, river_report.board_str)

    summary_path = Path(args.summary) if args.summary else base_dir / DEFAULT_SUMMARY
    try:
        append_summary(
            summary_path,
            hero_hand,
            flop_board,
            turn_card or None,
            river_card or None,
            flop_report.strategies.preferred,
            turn_report.strategies.preferred if turn_report else None,
            river_report.strategies.preferred if river_report else None,
        )
    except OSError as e:
        console.print(f"[yellow]Warning: failed to write summary file: {e}[/]")

    return 0


def _display_equity(console: Console, enabled: bool, hero_hand: str, board: str) -> None:
    """Print a Monte Carlo equity estimate vs one random hand."""
    if not enabled:
        return
    try:
        hand = Hand.from_string(hero_hand)
        equity = calculate_equity(hand, parse_cards(board))
    except ValueError as e:
        console.print(f"[yellow]Equity unavailable: {e}[/]")
        return
    console.print(f"[bold]Equity vs random hand:[/] {equity:.1%}")


if __name__ == "__main__":
    sys.exit(main())
