"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional

from spider.game import SpiderGame
from spider.mechanics import Move

from .base import SpiderBot


class RandomBot(SpiderBot):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, *, deal_chance: float = 0.1) -> None:
        self._rng = random.Random(seed)
        self.deal_chance = deal_chance

    def choose_move(self, game: SpiderGame) -> Optional[Move]:
        moves = game.legal_moves()
        if not moves:
            return None
        if game.can_deal_from_stock() and self._rng.random() < self.deal_chance:
            return None
        return self._rng.choice(moves)
