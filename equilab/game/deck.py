"""Seeded deck with a rewindable deal cursor."""

import logging
from typing import Iterable, Optional

import numpy as np

from equilab.errors import InsufficientDeck
from .cards import Card, FULL_DECK

logger = logging.getLogger(__name__)


def fresh_seed() -> int:
    """Draw a seed from OS entropy, for runs that need not be reproducible."""
    return int(np.random.SeedSequence().entropy)


class Deck:
    """
    The 52-card deck minus any excluded cards, shuffled once by a seed.

    Dealing moves a cursor forward; dealt cards stay in place and come
    back into play on reset(), which rewinds the cursor without
    reshuffling. The same seed always gives the same order.

    With redraw=True each deal instead picks its cards at random from the
    undealt tail (an incremental Fisher-Yates shuffle driven by the
    deck's generator). Reset still just rewinds, but the generator keeps
    running, so every pass over the deck sees a fresh random run-out.
    The sequence of run-outs is still fixed by the seed.
    """

    def __init__(
        self,
        excluded: Iterable[Card] = (),
        seed: int = 0,
        *,
        redraw: bool = False,
    ):
        """
        Build and shuffle a deck.

        Args:
            excluded: Cards already dealt elsewhere
            seed: Generator seed; 0 draws a fresh one
            redraw: Draw a new random run-out after every reset
        """
        if seed < 0:
            raise ValueError(f"Seed must be non-negative, got {seed}")
        self.seed = seed or fresh_seed()
        self.redraw = redraw
        self._rng = np.random.default_rng(self.seed)

        excluded = set(excluded)
        available = [c for c in FULL_DECK if c not in excluded]
        self.cards: list[Card] = [available[i] for i in self._rng.permutation(len(available))]
        self._cursor = 0

        logger.debug(
            "Deck of %d cards (seed=%d, redraw=%s)", len(self.cards), self.seed, redraw
        )

    @classmethod
    def from_seed(cls, seed: int) -> "Deck":
        """Full 52-card deck with a specific seed."""
        return cls(seed=seed)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the cursor and advance past them."""
        start = self._cursor
        end = start + n
        if n > len(self):
            raise InsufficientDeck(f"Cannot deal {n} cards, only {len(self)} remaining")

        if self.redraw and n:
            cards = self.cards
            picks = self._rng.integers(np.arange(start, end), len(cards)).tolist()
            for i, j in zip(range(start, end), picks):
                cards[i], cards[j] = cards[j], cards[i]

        self._cursor = end
        return self.cards[start:end]

    def deal_one(self) -> Optional[Card]:
        """Deal a single card, or None once the deck is exhausted."""
        if self.is_empty():
            return None
        return self.deal(1)[0]

    def reset(self) -> None:
        """Rewind the cursor so every card is undealt again."""
        self._cursor = 0

    def is_empty(self) -> bool:
        return self._cursor >= len(self.cards)

    def count(self) -> int:
        """Number of cards left to deal."""
        return len(self)

    def __len__(self) -> int:
        return len(self.cards) - self._cursor
