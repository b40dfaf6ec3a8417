"""Simple bot arena for Spider."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from random import Random
from typing import Dict, Iterable

from spider.game import GamePhase, SpiderGame

from .base import SpiderBot
from .baseline_greedy import GreedyBot
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[SpiderBot]] = {
    "greedy": GreedyBot,
    "random": RandomBot,
}


@dataclass(frozen=True)
class GameResult:
    outcome: str
    steps: int
    moves: int
    deals: int
    completed_runs: int


def play_game(game: SpiderGame, bot: SpiderBot, *, max_steps: int = 2000) -> GameResult:
    """Let ``bot`` play until the game is won, lost, stuck or out of steps.

    When the bot picks no move it is asked whether to deal; declining, or an
    empty stock, ends the game as stalled.
    """
    bot.on_game_start(game)
    moves = deals = steps = 0
    outcome = "stalled"
    while steps < max_steps:
        phase = game.phase
        if phase is GamePhase.WON:
            outcome = "won"
            break
        if phase is GamePhase.LOST:
            outcome = "lost"
            break

        move = bot.choose_move(game)
        if move is not None:
            if not game.try_move_sequence(move.from_pile, move.from_index, move.to_pile):
                raise RuntimeError(f"{bot.name} chose an illegal move: {move}")
            moves += 1
        elif bot.wants_deal(game) and game.deal_from_stock():
            deals += 1
        else:
            break
        steps += 1

    logger.debug("%s finished a game: %s after %d steps", bot.name, outcome, steps)
    return GameResult(
        outcome=outcome,
        steps=steps,
        moves=moves,
        deals=deals,
        completed_runs=game.completed_runs,
    )


def run_games(
    bot: SpiderBot,
    *,
    n_games: int = 10,
    suit_count: int = 1,
    seed: int | None = None,
    max_steps: int = 2000,
) -> dict:
    rng = Random(seed)
    history = []
    for _ in range(n_games):
        game = SpiderGame(suit_count=suit_count, rng=Random(rng.getrandbits(32)))
        history.append(play_game(game, bot, max_steps=max_steps))

    outcomes = {"won": 0, "lost": 0, "stalled": 0}
    for result in history:
        outcomes[result.outcome] += 1
    return {"outcomes": outcomes, "history": history}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s", handlers=[logging.StreamHandler(sys.stdout)])


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot over several Spider deals.")
    parser.add_argument("--bot", default="greedy", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--suits", type=int, default=1, help="Suit count: 1, 2 or 4.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--max-steps", type=int, default=2000)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    bot = BOT_REGISTRY[args.bot]()
    results = run_games(bot, n_games=args.n, suit_count=args.suits, seed=args.seed, max_steps=args.max_steps)

    outcomes = results["outcomes"]
    runs = sum(result.completed_runs for result in results["history"])
    print(f"{bot.name} over {args.n} games: {outcomes['won']} won, {outcomes['lost']} lost, {outcomes['stalled']} stalled")
    print(f"Completed runs: {runs}")


if __name__ == "__main__":
    main()
