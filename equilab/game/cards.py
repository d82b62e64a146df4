"""Card and hand representation utilities."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

from equilab.errors import DuplicateCard, ParseError, TooManyCards


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

SUIT_SYMBOLS = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}

MAX_HAND_CARDS = 7


@dataclass(frozen=True, order=True)
class Card:
    """A playing card. Orders by rank, then suit."""
    rank: int  # 2-14
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def index(self) -> int:
        """Dense id in 0-51: (rank - 2) * 4 + suit."""
        return (self.rank - 2) * 4 + self.suit

    @property
    def pretty(self) -> str:
        """Card with a suit symbol, e.g. 'A♥'."""
        return f"{RANK_STR[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @classmethod
    def from_index(cls, index: int) -> "Card":
        return FULL_DECK[index]

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'."""
        if len(s) != 2:
            raise ParseError(f"Invalid card string: {s!r}")
        rank_char, suit_char = s[0], s[1]

        if rank_char not in STR_RANK:
            raise ParseError(f"Invalid rank {rank_char!r} in {s!r}")
        if suit_char not in STR_SUIT:
            raise ParseError(f"Invalid suit {suit_char!r} in {s!r}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])


FULL_DECK: tuple[Card, ...] = tuple(
    Card(rank, suit)
    for rank in range(2, 15)
    for suit in range(4)
)


@dataclass(frozen=True, eq=False)
class Hand:
    """
    An unordered collection of up to 7 distinct cards.

    Used for hole cards, boards and the combined hands handed to the
    evaluator. Cards keep the order they were given in for display, but
    two hands holding the same cards compare equal.
    """
    cards: tuple[Card, ...] = ()

    def __post_init__(self):
        if len(self.cards) > MAX_HAND_CARDS:
            raise TooManyCards(
                f"A hand holds at most {MAX_HAND_CARDS} cards, got {len(self.cards)}"
            )
        seen = set()
        for card in self.cards:
            if card in seen:
                raise DuplicateCard(f"Duplicate card: {card}")
            seen.add(card)

    @property
    def mask(self) -> int:
        """52-bit set of the cards, one bit per Card.index."""
        mask = 0
        for card in self.cards:
            mask |= 1 << card.index
        return mask

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __or__(self, other: "Hand") -> "Hand":
        if not isinstance(other, Hand):
            return NotImplemented
        return Hand(self.cards + other.cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.mask == other.mask

    def __hash__(self) -> int:
        return hash(self.mask)

    def __str__(self) -> str:
        return "".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(c) for c in self.cards)})"

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse hand from notation like 'AhKd' or 'Ah Kd Qs'."""
        return parse_hand(s)


def parse_hand(text: str) -> Hand:
    """
    Parse poker notation into a Hand.

    Tokens are two characters (rank then suit) and may be concatenated
    or separated by whitespace: 'AhKd', 'Ah Kd' and 'Ah\\tKd' are the
    same hand. Empty text gives the empty hand.
    """
    cards = []
    for chunk in text.split():
        if len(chunk) % 2:
            raise ParseError(f"Incomplete card {chunk[-1]!r} at end of {chunk!r}")
        for i in range(0, len(chunk), 2):
            cards.append(Card.from_string(chunk[i:i + 2]))

    if len(cards) > MAX_HAND_CARDS:
        raise TooManyCards(f"Maximum {MAX_HAND_CARDS} cards allowed in {text!r}")
    return Hand(tuple(cards))


def parse_hand_bounded(text: str, max_cards: int) -> Hand:
    """Parse a hand and reject it if it holds more than max_cards cards."""
    hand = parse_hand(text)
    if len(hand) > max_cards:
        raise TooManyCards(f"Maximum {max_cards} cards allowed, got {text!r}")
    return hand


def ensure_disjoint(hands: Iterable[Hand]) -> frozenset[Card]:
    """
    Check that no card appears in more than one hand.

    Returns every card seen, so callers can build a deck without them.
    """
    seen: dict[Card, Hand] = {}
    for hand in hands:
        for card in hand:
            if card in seen:
                raise DuplicateCard(
                    f"Card {card} appears in both {seen[card]} and {hand}"
                )
            seen[card] = hand
    return frozenset(seen)
