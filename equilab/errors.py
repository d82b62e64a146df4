"""Exception types raised while parsing hands and running simulations."""


class PokerError(Exception):
    """Base class for all equilab errors."""


class ParseError(PokerError, ValueError):
    """Notation that does not map to valid cards."""


class TooManyCards(PokerError, ValueError):
    """A hand holds more cards than its role allows."""


class NotEnoughCards(PokerError, ValueError):
    """A hand holds fewer cards than the operation needs."""


class DuplicateCard(PokerError, ValueError):
    """The same card appears twice within or across hands."""


class InsufficientDeck(PokerError, RuntimeError):
    """
    A deal asked for more cards than remain undealt.

    Input validation should make this unreachable, so seeing it means
    the dealing bookkeeping is broken.
    """
