"""Baseline greedy bot."""

from __future__ import annotations

from typing import Optional, Sequence

from spider.cards import Card, is_one_rank_below
from spider.game import SpiderGame
from spider.mechanics import Move

from .base import SpiderBot

REVEAL_BONUS = 100
EMPTY_PILE_BONUS = 50
SAME_SUIT_BONUS = 20


def _rests_on_parent(cards: Sequence[Card], index: int) -> Optional[Card]:
    """Return the card under ``index`` if the block already sits legally on it."""
    if index == 0:
        return None
    below = cards[index - 1]
    if below.face_up and is_one_rank_below(cards[index], below):
        return below
    return None


def score_move(game: SpiderGame, move: Move) -> Optional[int]:
    """Score a move, or return None when it makes no progress."""
    source = game.pile(move.from_pile)
    destination = game.pile(move.to_pile)
    leading = source[move.from_index]
    same_suit = bool(destination) and destination[-1].suit is leading.suit

    parent = _rests_on_parent(source, move.from_index)
    if parent is not None and (parent.suit is leading.suit or not same_suit):
        return None

    reveals = move.from_index > 0 and not source[move.from_index - 1].face_up
    if not destination and not reveals:
        return None

    score = move.length
    if reveals:
        score += REVEAL_BONUS
    if move.from_index == 0 and destination:
        score += EMPTY_PILE_BONUS
    if same_suit:
        score += SAME_SUIT_BONUS
    return score


class GreedyBot(SpiderBot):
    name = "Greedy"

    def choose_move(self, game: SpiderGame) -> Optional[Move]:
        best: Optional[Move] = None
        best_score = -1
        for move in game.legal_moves():
            score = score_move(game, move)
            if score is not None and score > best_score:
                best, best_score = move, score
        return best
