import logging
from collections import Counter
from random import Random

import pytest

from spider.cards import RANK_ORDER, Suit
from spider.deck import DECK_SIZE, build_deck, deal_initial, normalize_suit_count, shuffle
from spider.game import SpiderGame


class FirstIndexRandom:
    """Always picks index 0, so every step swaps with the front."""

    def randint(self, low, high):
        return low


def layout_signature(game: SpiderGame):
    piles = [[(c.suit, c.rank, c.face_up) for c in pile] for pile in game.piles]
    stock = [(c.suit, c.rank) for c in game.stock]
    return piles, stock


@pytest.mark.parametrize("suit_count, copies", [(1, 8), (2, 4), (4, 2)])
def test_build_deck_keeps_104_cards_per_suit_count(suit_count, copies):
    deck = build_deck(suit_count)

    assert len(deck) == DECK_SIZE
    assert all(not card.face_up for card in deck)
    counts = Counter((card.suit, card.rank) for card in deck)
    assert len({card.suit for card in deck}) == suit_count
    assert set(counts.values()) == {copies}
    assert len(counts) == suit_count * len(RANK_ORDER)


@pytest.mark.parametrize("requested", [0, 3, 5, -2])
def test_invalid_suit_counts_normalize_to_one(requested):
    assert normalize_suit_count(requested) == 1
    deck = build_deck(requested)
    assert {card.suit for card in deck} == {Suit.SPADES}


def test_two_suit_deck_uses_the_first_two_suits():
    assert {card.suit for card in build_deck(2)} == {Suit.SPADES, Suit.HEARTS}


def test_shuffle_is_fisher_yates_from_the_back():
    items = [0, 1, 2, 3]
    shuffle(items, FirstIndexRandom())
    assert items == [1, 2, 3, 0]


def test_shuffle_is_a_seeded_permutation():
    deck_a = build_deck(4)
    original_ids = {id(card) for card in deck_a}
    deck_b = list(deck_a)
    shuffle(deck_a, Random(11))
    shuffle(deck_b, Random(11))

    assert deck_a == deck_b
    assert {id(card) for card in deck_a} == original_ids


def test_deal_initial_layout():
    deck = build_deck(1)
    piles, stock = deal_initial(deck)

    assert [len(pile) for pile in piles] == [6, 6, 6, 6, 5, 5, 5, 5, 5, 5]
    assert len(stock) == 50
    assert piles[0].cards == tuple(deck[:6])
    assert stock == deck[54:]
    for pile in piles:
        assert pile.top_card.face_up
        assert all(not card.face_up for card in pile.cards[:-1])


def test_deal_initial_rejects_short_decks():
    with pytest.raises(ValueError):
        deal_initial(build_deck(1)[:40])


def test_new_game_with_one_suit():
    game = SpiderGame(suit_count=1, rng=Random(5))

    assert game.suit_count == 1
    assert game.stock_count == 50
    assert game.remaining_deals == 5
    assert game.completed_runs == 0
    assert game.card_count() == DECK_SIZE
    assert {card.suit for pile in game.piles for card in pile} == {Suit.SPADES}
    for index, pile in enumerate(game.piles):
        assert len(pile) == (6 if index < 4 else 5)
        assert pile.top_card.face_up
        assert all(not card.face_up for card in pile.cards[:-1])
    assert all(not card.face_up for card in game.stock)


def test_seeded_games_are_identical():
    first = SpiderGame(suit_count=4, rng=Random(20260210))
    second = SpiderGame(suit_count=4, rng=Random(20260210))
    assert layout_signature(first) == layout_signature(second)


def test_preset_deck_is_dealt_without_shuffling():
    deck = build_deck(2)
    game = SpiderGame(suit_count=2, deck=deck)

    assert game.piles[0].cards == tuple(deck[:6])
    assert game.piles[9].cards == tuple(deck[49:54])
    assert game.stock == deck[54:]

    game.deal_from_stock()
    assert game.piles[0].top_card is deck[-1]
    assert game.piles[1].top_card is deck[-2]
    assert game.piles[9].top_card is deck[-10]


def test_new_game_resets_and_keeps_or_changes_suit_count():
    game = SpiderGame.from_layout([[] for _ in range(10)], completed_runs=3, suit_count=2, rng=Random(1))

    game.new_game()
    assert game.suit_count == 2
    assert game.completed_runs == 0
    assert game.stock_count == 50

    game.new_game(99)
    assert game.suit_count == 1
    assert {card.suit for card in game.stock} == {Suit.SPADES}


@pytest.mark.parametrize("size", [54, 60, 103, 105])
def test_preset_deck_must_hold_every_card(size):
    deck = (build_deck(2) * 2)[:size]

    with pytest.raises(ValueError):
        SpiderGame(suit_count=2, deck=deck)

    game = SpiderGame(suit_count=2, rng=Random(4))
    with pytest.raises(ValueError):
        game.new_game(4, deck=deck)
    assert game.suit_count == 2
    assert game.card_count() == DECK_SIZE
    assert game.stock_count == 50


def test_layout_does_not_consume_randomness_or_deal(caplog):
    caplog.set_level(logging.INFO, logger="spider.game")
    game = SpiderGame.from_layout([[] for _ in range(10)], rng=Random(1))

    assert not caplog.records
    assert game.stock_count == 0

    game.new_game()
    assert layout_signature(game) == layout_signature(SpiderGame(rng=Random(1)))


def test_completed_runs_is_read_only():
    game = SpiderGame.from_layout([[] for _ in range(10)], completed_runs=2)

    assert game.completed_runs == 2
    with pytest.raises(AttributeError):
        game.completed_runs = 5
    assert game.completed_runs == 2


def test_games_compare_by_identity():
    first = SpiderGame(rng=Random(9))
    second = SpiderGame(rng=Random(9))

    assert first != second
    assert first == first
