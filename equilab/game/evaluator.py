"""
Hand strength evaluation for 5 to 7 card hands.

Every hand maps to a single integer, higher is better, so hands are
compared with plain integer comparison. The layout is

    category << 20 | k1 << 16 | k2 << 12 | k3 << 8 | k4 << 4 | k5

where k1..k5 are card ranks (2-14) in descending significance: grouped
ranks first (quads, trips, pairs), then kickers. Unused slots are zero.
Straights and straight flushes only carry their top card, which is 5
for the wheel (A-2-3-4-5).

Instead of scoring all 21 five-card subsets of a 7-card hand, the
evaluator builds a rank bitmask per suit plus a count per rank and reads
the best five cards straight off those.
"""

from enum import IntEnum
from typing import Iterable, Sequence

from equilab.errors import NotEnoughCards
from .cards import Card, parse_hand


class Category(IntEnum):
    """Hand categories (higher is better)."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    def __str__(self) -> str:
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    Category.HIGH_CARD: "High Card",
    Category.ONE_PAIR: "One Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
}

CATEGORY_SHIFT = 20
MIN_CARDS = 5
MAX_CARDS = 7

# Five-bit windows for every straight, best first. Bit 1 stands in for a
# low ace so the wheel is the last window.
_STRAIGHTS = [(high, 0b11111 << (high - 4)) for high in range(14, 4, -1)]
_ACE_BIT = 1 << 14
_LOW_ACE_BIT = 1 << 1


def _encode(category: int, ranks: Sequence[int]) -> int:
    value = category
    for i in range(5):
        value = (value << 4) | (ranks[i] if i < len(ranks) else 0)
    return value


def _straight_high(mask: int) -> int:
    """Top card of the best straight in a rank bitmask, or 0."""
    if mask & _ACE_BIT:
        mask |= _LOW_ACE_BIT
    for high, window in _STRAIGHTS:
        if mask & window == window:
            return high
    return 0


def _top_ranks(mask: int, n: int) -> list[int]:
    ranks = []
    for rank in range(14, 1, -1):
        if mask & (1 << rank):
            ranks.append(rank)
            if len(ranks) == n:
                break
    return ranks


def evaluate(cards: Iterable[Card]) -> int:
    """
    Score the best 5-card hand among 5, 6 or 7 cards.

    The caller guarantees the cards are distinct and that there are
    between 5 and 7 of them.
    """
    suit_masks = [0, 0, 0, 0]
    counts = [0] * 15
    for card in cards:
        suit_masks[card.suit] |= 1 << card.rank
        counts[card.rank] += 1

    flush_mask = 0
    for mask in suit_masks:
        if bin(mask).count("1") >= 5:
            flush_mask = mask
            break

    if flush_mask:
        high = _straight_high(flush_mask)
        if high:
            return _encode(Category.STRAIGHT_FLUSH, (high,))

    # (count, rank) for every rank present, biggest group first, ties by rank
    groups = sorted(
        ((counts[r], r) for r in range(14, 1, -1) if counts[r]),
        reverse=True,
    )
    top_count, top_rank = groups[0]

    if top_count == 4:
        kicker = max(r for _, r in groups[1:])
        return _encode(Category.FOUR_OF_A_KIND, (top_rank, kicker))

    if top_count == 3 and groups[1][0] >= 2:
        # A second triple plays as the pair
        return _encode(Category.FULL_HOUSE, (top_rank, groups[1][1]))

    if flush_mask:
        return _encode(Category.FLUSH, _top_ranks(flush_mask, 5))

    rank_mask = suit_masks[0] | suit_masks[1] | suit_masks[2] | suit_masks[3]
    high = _straight_high(rank_mask)
    if high:
        return _encode(Category.STRAIGHT, (high,))

    if top_count == 3:
        kickers = sorted((r for _, r in groups[1:]), reverse=True)[:2]
        return _encode(Category.THREE_OF_A_KIND, [top_rank] + kickers)

    if top_count == 2 and groups[1][0] == 2:
        second = groups[1][1]
        # A third pair can still supply the kicker
        kicker = max(r for _, r in groups[2:])
        return _encode(Category.TWO_PAIR, (top_rank, second, kicker))

    if top_count == 2:
        kickers = sorted((r for _, r in groups[1:]), reverse=True)[:3]
        return _encode(Category.ONE_PAIR, [top_rank] + kickers)

    return _encode(Category.HIGH_CARD, [r for _, r in groups[:5]])


def category_of(value: int) -> Category:
    """Category encoded in an evaluator score."""
    return Category(value >> CATEGORY_SHIFT)


def describe(value: int) -> str:
    """Human-readable category, e.g. 'Full House'."""
    return str(category_of(value))


def rank_hand(text: str) -> int:
    """
    Parse a 5-7 card hand in poker notation and score it.

    Useful for comparing hands directly without running a simulation.
    """
    hand = parse_hand(text)
    if len(hand) < MIN_CARDS:
        raise NotEnoughCards(
            f"Need at least {MIN_CARDS} cards to rank a hand, got {len(hand)} in {text!r}"
        )
    return evaluate(hand)
