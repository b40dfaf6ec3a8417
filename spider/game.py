"""Spider Solitaire rules engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Iterable, List, Optional, Sequence, Tuple

from .cards import Card, RANKS_PER_SUIT
from .deck import DECK_SIZE, PILE_COUNT, build_deck, deal_initial, normalize_suit_count, shuffle
from .mechanics import Move, can_place_on, is_complete_run, legal_moves, movable_sequence_end
from .pile import Pile
from .rules_schema import GameConfig

logger = logging.getLogger(__name__)

RUNS_TO_WIN = 8


class InvalidLayout(ValueError):
    """Raised when a position cannot be built from the given piles."""


class GamePhase(Enum):
    DEALING = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(eq=False)
class SpiderGame:
    """Own the tableau and stock of one Spider game and enforce its rules.

    Rule violations never raise: commands report failure with ``False`` and
    leave every pile untouched.
    """

    suit_count: int = 1
    rng: Optional[Random] = None
    deck: Optional[Sequence[Card]] = None

    piles: List[Pile] = field(init=False)
    stock: List[Card] = field(init=False)
    _completed_runs: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = Random()
        self.new_game(self.suit_count, deck=self.deck)
        self.deck = None

    @classmethod
    def from_config(cls, config: GameConfig) -> "SpiderGame":
        return cls(suit_count=config.suit_count, rng=config.rng())

    @classmethod
    def from_layout(
        cls,
        piles: Sequence[Iterable[Card]],
        stock: Iterable[Card] = (),
        *,
        completed_runs: int = 0,
        suit_count: int = 1,
        rng: Optional[Random] = None,
    ) -> "SpiderGame":
        """Build a game from an explicit position instead of a fresh deal."""
        if len(piles) != PILE_COUNT:
            raise InvalidLayout(f"Spider needs exactly {PILE_COUNT} piles, got {len(piles)}.")
        if completed_runs < 0:
            raise InvalidLayout("Completed runs cannot be negative.")
        game = cls.__new__(cls)
        game.suit_count = normalize_suit_count(suit_count)
        game.rng = rng if rng is not None else Random()
        game.deck = None
        game.piles = [Pile(cards) for cards in piles]
        game.stock = list(stock)
        game._completed_runs = completed_runs
        return game

    # Lifecycle ---------------------------------------------------------

    def new_game(self, suit_count: Optional[int] = None, *, deck: Optional[Sequence[Card]] = None) -> None:
        """Build, shuffle and deal a fresh game.

        A preset ``deck`` is dealt as given, without shuffling.
        """
        suit_count = normalize_suit_count(suit_count if suit_count is not None else self.suit_count)
        if deck is not None:
            cards = list(deck)
            if len(cards) != DECK_SIZE:
                raise ValueError(f"A preset deck must hold exactly {DECK_SIZE} cards, got {len(cards)}.")
        self.suit_count = suit_count
        if deck is None:
            cards = build_deck(self.suit_count)
            assert self.rng is not None
            shuffle(cards, self.rng)
        self.piles, self.stock = deal_initial(cards)
        self._completed_runs = 0
        logger.info("New game: %d suit(s), %d cards in stock", self.suit_count, len(self.stock))

    # Queries -----------------------------------------------------------

    @property
    def completed_runs(self) -> int:
        return self._completed_runs

    @property
    def remaining_deals(self) -> int:
        return len(self.stock) // PILE_COUNT

    @property
    def stock_count(self) -> int:
        return len(self.stock)

    def pile(self, index: int) -> Tuple[Card, ...]:
        if index < 0 or index >= len(self.piles):
            raise IndexError(f"Pile index {index} out of range.")
        return self.piles[index].cards

    def card_count(self) -> int:
        """Cards on the tableau, in the stock and in removed runs."""
        on_table = sum(len(pile) for pile in self.piles)
        return on_table + len(self.stock) + RANKS_PER_SUIT * self.completed_runs

    def movable_sequence_end(self, pile_index: int, start_index: int) -> int:
        return movable_sequence_end(self.pile(pile_index), start_index)

    def legal_moves(self, min_length: int = 1) -> List[Move]:
        return list(legal_moves(self.piles, min_length=min_length))

    def has_any_tableau_move(self) -> bool:
        return next(legal_moves(self.piles), None) is not None

    def has_any_sequence_move(self) -> bool:
        return next(legal_moves(self.piles, min_length=2), None) is not None

    @property
    def phase(self) -> GamePhase:
        if self.completed_runs >= RUNS_TO_WIN:
            return GamePhase.WON
        if self.can_deal_from_stock():
            return GamePhase.DEALING
        # Single-card moves alone do not keep the game alive.
        if self.has_any_sequence_move():
            return GamePhase.PLAYING
        return GamePhase.LOST

    def is_game_won(self) -> bool:
        return self.phase is GamePhase.WON

    def is_game_lost(self) -> bool:
        return self.phase is GamePhase.LOST

    # Commands ----------------------------------------------------------

    def can_deal_from_stock(self) -> bool:
        return len(self.stock) >= PILE_COUNT

    def deal_from_stock(self) -> bool:
        """Deal one face-up card onto every pile; no-op without ten cards in stock."""
        if not self.can_deal_from_stock():
            logger.debug("Deal refused: %d cards in stock", len(self.stock))
            return False

        dealt = [self.stock.pop() for _ in self.piles]
        for pile, card in zip(self.piles, dealt):
            card.face_up = True
            pile.add_card(card)
        logger.debug("Dealt from stock, %d deal(s) left", self.remaining_deals)

        for index in range(len(self.piles)):
            self._remove_completed_runs(index)
        return True

    def try_move_sequence(self, from_pile: int, from_index: int, to_pile: int) -> bool:
        """Move the block starting at ``from_index`` onto ``to_pile`` if legal."""
        if from_pile == to_pile:
            return self._reject("source and destination are the same pile")
        if not 0 <= from_pile < len(self.piles) or not 0 <= to_pile < len(self.piles):
            return self._reject("pile index out of range")

        source = self.piles[from_pile]
        destination = self.piles[to_pile]
        if not 0 <= from_index < len(source):
            return self._reject("card index out of range")

        leading = source[from_index]
        if not leading.face_up:
            return self._reject("card is face down")

        end_index = movable_sequence_end(source.cards, from_index)
        last_index = len(source) - 1
        if end_index != last_index and from_index != last_index:
            return self._reject("block does not reach the top of the pile")

        if not can_place_on(leading, destination):
            return self._reject("destination does not accept the block")

        moving = source.take_range(from_index, end_index - from_index + 1)
        destination.add_cards(moving)
        source.flip_top()
        logger.debug("Moved %d card(s) from pile %d to pile %d", len(moving), from_pile, to_pile)

        self._remove_completed_runs(to_pile)
        return True

    # Helpers -----------------------------------------------------------

    def _remove_completed_runs(self, pile_index: int) -> int:
        pile = self.piles[pile_index]
        removed = 0
        while len(pile) >= RANKS_PER_SUIT:
            start = len(pile) - RANKS_PER_SUIT
            if not is_complete_run(pile.cards_from(start)):
                break
            pile.take_range(start, RANKS_PER_SUIT)
            self._completed_runs += 1
            removed += 1
            pile.flip_top()
            logger.info("Completed run on pile %d (%d total)", pile_index, self.completed_runs)
        return removed

    @staticmethod
    def _reject(reason: str) -> bool:
        logger.debug("Move rejected: %s", reason)
        return False
