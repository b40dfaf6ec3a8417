"""Card-related data structures and helpers for Spider."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping


class Suit(Enum):
    SPADES = auto()
    HEARTS = auto()
    CLUBS = auto()
    DIAMONDS = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Rank(Enum):
    ACE = auto()
    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Suits in play order; a variant with n suits uses the first n.
SUIT_ORDER: list[Suit] = list(Suit)

# Rank order from lowest (Ace) to highest (King).
RANK_ORDER: list[Rank] = list(Rank)

RANKS_PER_SUIT = len(RANK_ORDER)


@dataclass(eq=False)
class Card:
    """A playing card; suit and rank are fixed, the face can be turned.

    Two decks are in play, so equal (suit, rank) pairs coexist. Cards compare
    by identity.
    """

    suit: Suit
    rank: Rank
    face_up: bool = False

    def __setattr__(self, name: str, value) -> None:
        if name in ("suit", "rank") and name in self.__dict__:
            raise AttributeError(f"Card.{name} is read-only")
        super().__setattr__(name, value)

    def flip_up(self) -> bool:
        """Turn the card face up; return True if it was face down."""
        if self.face_up:
            return False
        self.face_up = True
        return True


def rank_value(card: Card) -> int:
    """Return the ordinal of the card's rank (Ace is 1, King is 13)."""
    return card.rank.value


def is_one_rank_below(lower: Card, upper: Card) -> bool:
    return rank_value(upper) - rank_value(lower) == 1


def card_label(card: Card) -> str:
    return f"{card.rank.name.title()} of {card.suit.name.title()}"


def serialize_card(card: Card) -> dict[str, object]:
    return {"rank": card.rank.name.lower(), "suit": card.suit.name.lower(), "face_up": card.face_up}


def deserialize_card(payload: Mapping[str, object]) -> Card:
    rank_name = str(payload["rank"]).upper()
    suit_name = str(payload["suit"]).upper()
    return Card(Suit[suit_name], Rank[rank_name], face_up=bool(payload.get("face_up", False)))
