"""Convenience service layer for UI and agents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import Card, card_label, serialize_card
from .game import SpiderGame
from .rules_schema import GameConfig


@dataclass(frozen=True)
class CardView:
    face_up: bool
    card: Optional[dict]
    label: Optional[str]


@dataclass(frozen=True)
class PileView:
    index: int
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class MoveView:
    from_pile: int
    from_index: int
    to_pile: int
    length: int


@dataclass(frozen=True)
class GameView:
    phase: str
    suit_count: int
    piles: tuple[PileView, ...]
    stock_count: int
    remaining_deals: int
    completed_runs: int
    can_deal: bool
    won: bool
    lost: bool
    legal_moves: tuple[MoveView, ...]


class GameService:
    """Facade around SpiderGame for UI consumers."""

    def __init__(self, game: Optional[SpiderGame] = None, *, config: Optional[GameConfig] = None) -> None:
        if game is None:
            game = SpiderGame.from_config(config or GameConfig())
        self.game = game

    # Actions -----------------------------------------------------------

    def new_game(self, suit_count: Optional[int] = None) -> GameView:
        self.game.new_game(suit_count)
        return self.get_view()

    def move(self, from_pile: int, from_index: int, to_pile: int) -> tuple[bool, GameView]:
        moved = self.game.try_move_sequence(from_pile, from_index, to_pile)
        return moved, self.get_view()

    def deal(self) -> tuple[bool, GameView]:
        dealt = self.game.deal_from_stock()
        return dealt, self.get_view()

    # Views -------------------------------------------------------------

    def get_view(self) -> GameView:
        game = self.game
        phase = game.phase
        return GameView(
            phase=phase.name.lower(),
            suit_count=game.suit_count,
            piles=tuple(
                PileView(index=index, cards=tuple(self._card_view(card) for card in pile))
                for index, pile in enumerate(game.piles)
            ),
            stock_count=game.stock_count,
            remaining_deals=game.remaining_deals,
            completed_runs=game.completed_runs,
            can_deal=game.can_deal_from_stock(),
            won=game.is_game_won(),
            lost=game.is_game_lost(),
            legal_moves=tuple(
                MoveView(
                    from_pile=move.from_pile,
                    from_index=move.from_index,
                    to_pile=move.to_pile,
                    length=move.length,
                )
                for move in game.legal_moves()
            ),
        )

    # Helpers -----------------------------------------------------------

    @staticmethod
    def _card_view(card: Card) -> CardView:
        if not card.face_up:
            return CardView(face_up=False, card=None, label=None)
        return CardView(face_up=True, card=serialize_card(card), label=card_label(card))
