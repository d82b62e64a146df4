#!/usr/bin/env python3
"""Estimate a hand's equity against one or more opponents."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from equilab.errors import PokerError
from equilab.game.equity import DEFAULT_SAMPLES, EquityCalculator
from equilab.viz import ResultDisplay


def main():
    parser = argparse.ArgumentParser(
        description="Estimate hold'em equity by Monte Carlo simulation"
    )
    parser.add_argument(
        "player",
        help="Hero's hole cards (e.g., 'AhAd'); fewer than 2 are dealt at random",
    )
    parser.add_argument(
        "-o", "--opponent",
        action="append",
        default=None,
        help="Villain hole cards, repeatable; '' for a random hand (default: one random hand)",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Board cards (e.g., 'AsKhTd' or 'As Kh Td')",
    )
    parser.add_argument(
        "-n", "--samples",
        type=int,
        default=DEFAULT_SAMPLES,
        help=f"Number of run-outs to simulate (default: {DEFAULT_SAMPLES})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed, 0 for a fresh one (default: 0)",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Worker processes to spread samples over (default: 1)",
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
        handlers=[RichHandler(console=console)],
    )

    opponents = args.opponent if args.opponent is not None else [""]

    try:
        calculator = EquityCalculator(
            samples=args.samples,
            seed=args.seed,
            workers=args.workers,
        )
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Simulating {args.samples:,} run-outs...")
            result = calculator.calculate(args.player, opponents, args.board)
    except (PokerError, ValueError) as e:
        console.print(f"[red]{e}[/]")
        return 1

    ResultDisplay(console).show_result(result, args.player, opponents, args.board)
    console.print(str(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
