"""Tests for the seeded deck."""

import pytest

from equilab.errors import InsufficientDeck
from equilab.game.cards import FULL_DECK, parse_hand
from equilab.game.deck import Deck


@pytest.fixture
def known_cards():
    # Ten cards: hero, two villains and a flop
    return list(parse_hand("AhAd KsKc QhJh 2c7d9s Tc"))


class TestDeck:
    def test_full_deck(self):
        deck = Deck(seed=1)
        assert len(deck) == 52
        assert sorted(deck.cards) == sorted(FULL_DECK)

    def test_excluded_cards(self, known_cards):
        deck = Deck(known_cards, seed=1)
        assert len(deck) == 42
        assert not set(known_cards) & set(deck.cards)

    def test_deal_and_reset(self, known_cards):
        deck = Deck(known_cards, seed=1)
        cards = deck.deal(5)
        assert len(cards) == 5
        assert len(deck) == 37

        deck.reset()
        assert len(deck) == 42

    def test_reset_replays_same_order(self):
        deck = Deck(seed=99)
        first = deck.deal(10)
        deck.reset()
        assert deck.deal(10) == first

    def test_deal_consumes_in_order(self):
        deck = Deck(seed=5)
        order = list(deck.cards)
        assert deck.deal(3) + deck.deal(2) == order[:5]

    def test_same_seed_same_permutation(self):
        assert Deck(seed=7).cards == Deck(seed=7).cards

    def test_different_seeds_differ(self):
        assert Deck(seed=7).cards != Deck(seed=8).cards

    def test_deal_too_many(self, known_cards):
        deck = Deck(known_cards, seed=1)
        deck.deal(40)
        with pytest.raises(InsufficientDeck):
            deck.deal(3)
        # Failed deal leaves the cursor alone
        assert len(deck) == 2

    def test_insufficient_deck_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            Deck(seed=1).deal(53)

    def test_deal_zero(self):
        deck = Deck(seed=1)
        assert deck.deal(0) == []
        assert len(deck) == 52

    def test_deal_one_until_empty(self):
        deck = Deck.from_seed(11)
        dealt = [deck.deal_one() for _ in range(52)]
        assert len(set(dealt)) == 52
        assert deck.is_empty()
        assert deck.count() == 0
        assert deck.deal_one() is None

        deck.reset()
        assert deck.count() == 52
        assert deck.deal_one() == dealt[0]

    def test_fresh_seed_when_zero(self):
        deck = Deck()
        assert deck.seed > 0
        assert len(deck) == 52

    def test_negative_seed(self):
        with pytest.raises(ValueError):
            Deck(seed=-1)


class TestRedraw:
    def test_reset_draws_new_cards(self):
        deck = Deck(seed=3, redraw=True)
        runs = []
        for _ in range(20):
            deck.reset()
            runs.append(tuple(deck.deal(5)))
        assert len(set(runs)) > 1

    def test_reproducible_by_seed(self, known_cards):
        def run(seed):
            deck = Deck(known_cards, seed, redraw=True)
            out = []
            for _ in range(50):
                deck.reset()
                out.append(tuple(deck.deal(7)))
            return out

        assert run(21) == run(21)
        assert run(21) != run(22)

    def test_never_deals_excluded_or_repeats(self, known_cards):
        deck = Deck(known_cards, seed=4, redraw=True)
        excluded = set(known_cards)
        for _ in range(200):
            deck.reset()
            cards = deck.deal(9)
            assert len(set(cards)) == 9
            assert not excluded & set(cards)

    def test_keeps_card_set(self, known_cards):
        deck = Deck(known_cards, seed=4, redraw=True)
        before = sorted(deck.cards)
        for _ in range(10):
            deck.reset()
            deck.deal(9)
        assert sorted(deck.cards) == before
        deck.reset()
        assert len(deck) == 42
