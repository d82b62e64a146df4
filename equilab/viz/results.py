"""Rich tables for equity results and hand rankings."""

from typing import Optional, Sequence

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from equilab.game.cards import Hand, parse_hand
from equilab.game.equity import EquityResult
from equilab.game.evaluator import describe, rank_hand


def _pretty(hand: Hand) -> str:
    return " ".join(c.pretty for c in hand) if len(hand) else "-"


def _equity_style(equity: float) -> Style:
    if equity >= 0.6:
        return Style(color="green", bold=True)
    if equity >= 0.4:
        return Style(color="yellow", bold=True)
    return Style(color="red", bold=True)


class ResultDisplay:
    """Display equity results and hand rankings in the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def result_table(
        self,
        result: EquityResult,
        player: str,
        opponents: Sequence[str] = (),
        board: str = "",
    ) -> Table:
        """Build a summary table for one equity calculation."""
        table = Table(title="Equity", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Player", _pretty(parse_hand(player)))
        if opponents:
            for i, opponent in enumerate(opponents, start=1):
                table.add_row(f"Opponent {i}", _pretty(parse_hand(opponent)))
        else:
            table.add_row("Opponents", "none")
        table.add_row("Board", _pretty(parse_hand(board)))
        table.add_row(
            "Equity",
            Text(f"{result.equity * 100:.2f}%", style=_equity_style(result.equity)),
        )
        table.add_row("Samples", f"{result.samples:,}")
        table.add_row("Time", f"{result.time_ms} ms")
        table.add_row("Throughput", f"{result.samples_per_ms:.2f} samples/ms")
        table.add_row("Seed", str(result.seed))
        return table

    def show_result(
        self,
        result: EquityResult,
        player: str,
        opponents: Sequence[str] = (),
        board: str = "",
    ) -> None:
        self.console.print(self.result_table(result, player, opponents, board))

    def ranking_table(self, hands: Sequence[str]) -> Table:
        """Build a table of hands sorted strongest first."""
        ranked = sorted(
            ((rank_hand(h), h) for h in hands),
            reverse=True,
        )

        table = Table(title="Hand Ranking", show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Hand")
        table.add_column("Category", style="cyan")
        table.add_column("Ordinal", justify="right")

        place = 0
        previous = None
        for i, (value, hand) in enumerate(ranked, start=1):
            # Tied hands share a place
            if value != previous:
                place = i
                previous = value
            table.add_row(str(place), _pretty(parse_hand(hand)), describe(value), str(value))
        return table

    def show_ranking(self, hands: Sequence[str]) -> None:
        self.console.print(self.ranking_table(hands))
