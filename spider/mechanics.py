"""Move legality and run detection for Spider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .cards import Card, Rank, RANKS_PER_SUIT, is_one_rank_below
from .pile import Pile


@dataclass(frozen=True)
class Move:
    from_pile: int
    from_index: int
    to_pile: int
    length: int


def is_descending_sequence(cards: Sequence[Card]) -> bool:
    """Return True if every adjacent pair is same-suit and steps down by one rank."""
    if not cards:
        return False
    for current, following in zip(cards, cards[1:]):
        if current.suit is not following.suit:
            return False
        if not is_one_rank_below(following, current):
            return False
    return True


def is_complete_run(cards: Sequence[Card]) -> bool:
    """Return True for thirteen face-up cards of one suit from King down to Ace."""
    if len(cards) != RANKS_PER_SUIT:
        return False
    if cards[0].rank is not Rank.KING or cards[-1].rank is not Rank.ACE:
        return False
    if not all(card.face_up for card in cards):
        return False
    return is_descending_sequence(cards)


def can_place_on(moving: Card, destination: Pile) -> bool:
    """An empty pile takes anything; otherwise the top must be face up and one rank higher."""
    top = destination.top_card
    if top is None:
        return True
    return top.face_up and is_one_rank_below(moving, top)


def movable_sequence_end(cards: Sequence[Card], start: int) -> int:
    """Return the last index of the movable block beginning at ``start``.

    ``start`` comes back unchanged when it is out of range or face down.
    """
    if start < 0 or start >= len(cards):
        return start
    if not cards[start].face_up:
        return start

    end = start
    while end < len(cards) - 1:
        current = cards[end]
        following = cards[end + 1]
        if not following.face_up:
            break
        if not is_one_rank_below(following, current):
            break
        if current.suit is not following.suit:
            break
        end += 1
    return end


def movable_block_start(cards: Sequence[Card], index: int) -> Optional[int]:
    """Return ``index`` if a block starting there is legal to lift, else None."""
    if index < 0 or index >= len(cards) or not cards[index].face_up:
        return None
    last = len(cards) - 1
    if index != last and movable_sequence_end(cards, index) != last:
        return None
    return index


def legal_moves(piles: Sequence[Pile], *, min_length: int = 1) -> Iterator[Move]:
    """Yield every legal move whose moving block has at least ``min_length`` cards."""
    for from_pile, source in enumerate(piles):
        cards = source.cards
        last = len(cards) - 1
        for index in range(len(cards)):
            if movable_block_start(cards, index) is None:
                continue
            length = last - index + 1
            if length < min_length:
                continue
            leading = cards[index]
            for to_pile, destination in enumerate(piles):
                if to_pile == from_pile:
                    continue
                if can_place_on(leading, destination):
                    yield Move(from_pile, index, to_pile, length)
