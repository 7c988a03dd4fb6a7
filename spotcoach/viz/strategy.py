"""Terminal display of street reports."""

from typing import Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from spotcoach.advisor import StreetReport
from spotcoach.solver.strategy import HeroStrategy

# Actions below this frequency are not shown
MIN_DISPLAY_PCT = 0.1
# Percentage points per bar block
BAR_SCALE = 2.5

ACTION_COLORS = [
    ("CHECK", "green"),
    ("BET", "red"),
    ("FOLD", "blue"),
    ("CALL", "yellow"),
]


def card_markup(card: str) -> str:
    """Rich markup for a card: red hearts/diamonds, cyan spades/clubs."""
    if len(card) < 2:
        return card
    if card[1] in "hd":
        return f"[bold red]{card}[/]"
    if card[1] in "sc":
        return f"[bold cyan]{card}[/]"
    return card


def board_markup(cards: list[str]) -> str:
    return " ".join(card_markup(c) for c in cards)


def action_style(action: str) -> str:
    for keyword, color in ACTION_COLORS:
        if keyword in action:
            return color
    return ""


def strategy_table(strategy: HeroStrategy) -> Table:
    """Action, frequency and bar for each action played at least sometimes."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Action", no_wrap=True)
    table.add_column("Freq", justify="right")
    table.add_column("Bar", style="grey78")

    for action, prob in strategy.pairs():
        pct = prob * 100.0
        if pct < MIN_DISPLAY_PCT:
            continue
        table.add_row(
            Text(action, style=action_style(action)),
            f"{pct:5.1f}%",
            "█" * int(pct / BAR_SCALE),
        )
    return table


class StrategyDisplay:
    """
    Renders advisor output with rich.

    Each street gets a header with the board, the hero hand with its
    strength, then one panel per seat the hero could be sitting in.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display_report(self, report: StreetReport, hero_hand: str) -> None:
        """Print one street."""
        self.console.print()
        self.console.rule(
            f"[bold]{report.street}[/] ({board_markup(report.board)})"
        )

        hero_cards = [hero_hand[:2], hero_hand[2:4]]
        self.console.print(
            f"Hero Hand: {board_markup(hero_cards)}  "
            f"([italic yellow]{report.strength}[/])"
        )

        strategies = report.strategies
        self.console.print(self._position_panel(
            "OUT OF POSITION (Big Blind)",
            "The Defender",
            "They raised, you called. Check to the raiser?",
            strategies.oop,
            is_oop=True,
            response=strategies.oop_vs_bet,
        ))
        # No donk bets in the tree, so IP never faces a bet first
        self.console.print(self._position_panel(
            "IN POSITION (Button)",
            "The Aggressor",
            "You raised, they called. They checked to you.",
            strategies.ip,
            is_oop=False,
        ))

    def display_reports(self, reports: list[StreetReport], hero_hand: str) -> None:
        for report in reports:
            self.display_report(report, hero_hand)

    def _position_panel(
        self,
        position_title: str,
        role: str,
        context: str,
        strategy: Optional[HeroStrategy],
        is_oop: bool,
        response: Optional[HeroStrategy] = None,
    ) -> Panel:
        parts = [Text(context, style="yellow")]

        if strategy is not None:
            parts.append(strategy_table(strategy))
        else:
            parts.append(Text("(No strategy found for this range)", style="dim"))

        if response is not None:
            parts.append(Text("If they BET, your response:", style="yellow"))
            parts.append(strategy_table(response))

        dot = "[red]●[/]" if is_oop else "[green]●[/]"
        return Panel(
            Group(*parts),
            title=f"{dot} [bold]{position_title}[/] [dim italic](Role: {role})[/]",
            title_align="left",
            box=box.ROUNDED,
            width=72,
        )
