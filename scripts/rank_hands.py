#!/usr/bin/env python3
"""Rank 5-7 card hands against each other."""

import argparse
import sys
from pathlib import Path

from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from equilab.errors import PokerError
from equilab.viz import ResultDisplay


def main():
    parser = argparse.ArgumentParser(
        description="Rank poker hands from strongest to weakest"
    )
    parser.add_argument(
        "hands",
        nargs="+",
        help="Hands of 5-7 cards each (e.g., 'AsKsQsJsTs' '2h2d2c2s3h')",
    )

    args = parser.parse_args()
    console = Console()

    try:
        ResultDisplay(console).show_ranking(args.hands)
    except PokerError as e:
        console.print(f"[red]{e}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
