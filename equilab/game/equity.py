"""
Monte Carlo equity calculation.

Each run-out completes the board and any missing hole cards from a deck
that excludes every known card, evaluates the player against the best
opponent hand, and credits the player with 1, 0.5 or 0 of the pot.
Equity is the average pot share over all runs.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Sequence

from equilab.errors import TooManyCards
from .cards import Hand, ensure_disjoint, parse_hand_bounded
from .deck import Deck, fresh_seed
from .evaluator import evaluate, rank_hand

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 100_000
HOLE_CARDS = 2
BOARD_CARDS = 5


@dataclass(frozen=True)
class EquityResult:
    """Outcome of one equity calculation."""
    equity: float   # Player's average pot share, 0-1
    samples: int    # Run-outs simulated
    time_ms: int    # Wall-clock time spent simulating
    seed: int = 0   # Seed actually used, for reproducing the run

    @property
    def samples_per_ms(self) -> float:
        """Throughput, treating sub-millisecond runs as 1 ms."""
        return self.samples / max(self.time_ms, 1)

    def to_dict(self) -> dict:
        return {
            "equity": self.equity,
            "samples": self.samples,
            "time_ms": self.time_ms,
        }

    def __str__(self) -> str:
        return (
            f"{self.equity * 100:.2f}% equity "
            f"[{self.samples} samples, {self.samples_per_ms:.2f} samples per ms]"
        )


def _simulate(
    player: Hand,
    opponents: Sequence[Hand],
    board: Hand,
    samples: int,
    seed: int,
) -> float:
    """
    Run `samples` run-outs and return the player's summed pot share.

    Cards are dealt board first, then the player's missing hole cards,
    then each opponent's in order.
    """
    known = ensure_disjoint([player, *opponents, board])
    deck = Deck(known, seed, redraw=True)

    board_missing = BOARD_CARDS - len(board)
    player_missing = HOLE_CARDS - len(player)
    opponent_missing = [HOLE_CARDS - len(o) for o in opponents]

    pots_won = 0.0
    for _ in range(samples):
        deck.reset()
        complete_board = board.cards + tuple(deck.deal(board_missing))

        player_rank = evaluate(player.cards + tuple(deck.deal(player_missing)) + complete_board)

        opponent_rank = -1
        for opponent, missing in zip(opponents, opponent_missing):
            rank = evaluate(opponent.cards + tuple(deck.deal(missing)) + complete_board)
            if rank > opponent_rank:
                opponent_rank = rank

        if player_rank > opponent_rank:
            pots_won += 1.0
        elif player_rank == opponent_rank:
            pots_won += 0.5

    return pots_won


def _simulate_chunk(args: tuple) -> float:
    return _simulate(*args)


def _split(samples: int, workers: int) -> list[int]:
    """Spread samples over workers as evenly as possible."""
    base, extra = divmod(samples, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


@dataclass
class EquityCalculator:
    """
    Estimates a hand's equity by Monte Carlo simulation.

    With a non-zero seed the result is reproducible: the same inputs,
    sample count, seed and worker count always give the same equity.
    A zero seed draws a fresh one on every call.
    """
    samples: int = DEFAULT_SAMPLES
    seed: int = 0
    workers: int = 1  # >1 spreads samples across processes

    rank_hand = staticmethod(rank_hand)

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        if self.samples < 1:
            raise ValueError(f"Samples must be positive, got {self.samples}")
        if self.seed < 0:
            raise ValueError(f"Seed must be non-negative, got {self.seed}")
        if self.workers < 1:
            raise ValueError(f"Workers must be positive, got {self.workers}")

    def calculate(
        self,
        player: str,
        opponents: Sequence[str] = (),
        board: str = "",
    ) -> EquityResult:
        """
        Calculate equity of the player's hand.

        Args:
            player: Hero's hole cards, 0-2 cards in poker notation
            opponents: Villain hole cards, 0-2 cards each; missing cards
                are dealt at random on every run
            board: Community cards, 0-5 cards

        Returns:
            EquityResult with the player's average pot share

        Raises:
            ParseError, TooManyCards, DuplicateCard: on bad input, before
                any simulation runs
        """
        self._validate()

        player_hand = parse_hand_bounded(player, HOLE_CARDS)
        opponent_hands = [parse_hand_bounded(o, HOLE_CARDS) for o in opponents]
        board_hand = parse_hand_bounded(board, BOARD_CARDS)

        known = ensure_disjoint([player_hand, *opponent_hands, board_hand])
        needed = (
            BOARD_CARDS - len(board_hand)
            + HOLE_CARDS - len(player_hand)
            + sum(HOLE_CARDS - len(o) for o in opponent_hands)
        )
        if needed > 52 - len(known):
            raise TooManyCards(
                f"Each run needs {needed} cards but only {52 - len(known)} are left in the deck"
            )

        seed = self.seed or fresh_seed()
        logger.debug(
            "Simulating %d run-outs of %s vs %s on [%s] (seed=%d, workers=%d)",
            self.samples, player_hand, [str(o) for o in opponent_hands],
            board_hand, seed, self.workers,
        )

        start = time.perf_counter()
        if self.workers == 1:
            pots_won = _simulate(player_hand, opponent_hands, board_hand, self.samples, seed)
        else:
            chunks = [
                (player_hand, opponent_hands, board_hand, n, seed + i)
                for i, n in enumerate(_split(self.samples, self.workers))
                if n
            ]
            with ProcessPoolExecutor(max_workers=len(chunks)) as executor:
                pots_won = sum(executor.map(_simulate_chunk, chunks))
        time_ms = int((time.perf_counter() - start) * 1000)

        result = EquityResult(
            equity=pots_won / self.samples,
            samples=self.samples,
            time_ms=time_ms,
            seed=seed,
        )
        logger.debug("Finished: %s", result)
        return result


def calculate_equity(
    player: str,
    opponents: Sequence[str] = (),
    board: str = "",
    samples: int = DEFAULT_SAMPLES,
    seed: int = 0,
) -> EquityResult:
    """Calculate equity with a one-off calculator."""
    return EquityCalculator(samples=samples, seed=seed).calculate(player, opponents, board)
