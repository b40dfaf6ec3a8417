"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Optional

from spider.game import SpiderGame
from spider.mechanics import Move


class SpiderBot:
    """Base class for bot policies."""

    name: str = "BaseBot"

    def on_game_start(self, game: SpiderGame) -> None:
        """Optional hook invoked before the first move of a game."""
        return None

    def choose_move(self, game: SpiderGame) -> Optional[Move]:
        """Return the move to play, or None to pass the turn to ``wants_deal``."""
        moves = game.legal_moves()
        return moves[0] if moves else None

    def wants_deal(self, game: SpiderGame) -> bool:
        """Return True to deal from the stock when no move was chosen."""
        return game.can_deal_from_stock()
