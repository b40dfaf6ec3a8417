"""Deck creation, shuffling and the opening deal for Spider."""

from __future__ import annotations

from random import Random
from typing import List, MutableSequence, Sequence, Tuple, TypeVar

from .cards import Card, RANK_ORDER, SUIT_ORDER
from .pile import Pile

T = TypeVar("T")

DECK_COUNT = 2
DECK_SIZE = 104
PILE_COUNT = 10
VALID_SUIT_COUNTS = (1, 2, 4)

# Piles 0-3 take six cards, piles 4-9 take five.
INITIAL_PILE_SIZES: Tuple[int, ...] = (6, 6, 6, 6, 5, 5, 5, 5, 5, 5)
INITIAL_DEAL_SIZE = sum(INITIAL_PILE_SIZES)


def normalize_suit_count(suit_count: int) -> int:
    """Return ``suit_count`` if it is 1, 2 or 4, otherwise 1."""
    return suit_count if suit_count in VALID_SUIT_COUNTS else 1


def build_deck(suit_count: int = 1) -> List[Card]:
    """Return the ordered 104-card deck for the given suit count, all face down."""
    suit_count = normalize_suit_count(suit_count)
    copies_per_suit = 4 // suit_count
    suits = SUIT_ORDER[:suit_count]
    return [
        Card(suit, rank)
        for _ in range(DECK_COUNT)
        for suit in suits
        for rank in RANK_ORDER
        for _ in range(copies_per_suit)
    ]


def shuffle(cards: MutableSequence[T], rng: Random) -> None:
    """Fisher-Yates shuffle in place using ``rng``."""
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


def deal_initial(deck: Sequence[Card]) -> Tuple[List[Pile], List[Card]]:
    """Deal the opening tableau from the front of ``deck``.

    Returns the ten piles and the remaining cards, which become the stock.
    The last card placed on each pile is turned face up.
    """
    if len(deck) < INITIAL_DEAL_SIZE:
        raise ValueError(f"Deck must contain at least {INITIAL_DEAL_SIZE} cards.")

    piles: List[Pile] = []
    position = 0
    for size in INITIAL_PILE_SIZES:
        pile = Pile()
        for offset in range(size):
            card = deck[position]
            position += 1
            card.face_up = offset == size - 1
            pile.add_card(card)
        piles.append(pile)

    stock = list(deck[position:])
    for card in stock:
        card.face_up = False
    return piles, stock
