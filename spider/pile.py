"""Tableau pile container."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from .cards import Card


class Pile:
    """Ordered cards of one tableau column; index 0 is the bottom."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: List[Card] = list(cards) if cards is not None else []

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def top_card(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def cards_from(self, index: int) -> Tuple[Card, ...]:
        """Return the cards from ``index`` to the top."""
        return tuple(self._cards[index:])

    def take_range(self, index: int, count: int) -> List[Card]:
        """Remove and return ``count`` cards starting at ``index``, keeping their order."""
        if index < 0 or count < 0 or index + count > len(self._cards):
            raise IndexError(f"Range [{index}, {index + count}) outside pile of {len(self._cards)} cards.")
        taken = self._cards[index : index + count]
        del self._cards[index : index + count]
        return taken

    def flip_top(self) -> bool:
        """Turn the top card face up if it is face down."""
        top = self.top_card
        return top is not None and top.flip_up()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __repr__(self) -> str:
        return f"Pile({len(self._cards)} cards)"
