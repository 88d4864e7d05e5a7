# -*- coding: utf-8 -*-
"""
Play one game of 2048 with a strategy, printing every position and move.
"""
import logging
from argparse import ArgumentParser, Namespace

from monte_carlo import MonteCarloAgent, RandomStrategy, SimpleRandomStrategy, Strategy
from monte_carlo.config import DEFAULT_C_PARAM, DEFAULT_TRIES
from twentyfortyeight.core.gamestate import GameState
from twentyfortyeight.utils import render_board

logger = logging.getLogger(__name__)


def build_strategy(args: Namespace) -> Strategy:
    """
    Build the strategy selected on the command line.

    Parameters
    ----------
    args : Namespace
        Parsed arguments with ``strategy``, ``tries``, ``c_param``, ``depth`` and ``seed``.

    Returns
    -------
    Strategy
        The strategy to play with.
    """
    if args.strategy == "mcts":
        return MonteCarloAgent(tries=args.tries, c_param=args.c_param, policy=RandomStrategy(seed=args.seed))
    if args.strategy == "baseline":
        return SimpleRandomStrategy(depth=args.depth, policy=RandomStrategy(seed=args.seed))
    return RandomStrategy(seed=args.seed)


def play(strategy: Strategy, seed: int | None = None, verbose: bool = True) -> GameState:
    """
    Play a game until no move is possible.

    Parameters
    ----------
    strategy : Strategy
        The strategy choosing every move.
    seed : int, optional
        Seed of the game's tile generator.
    verbose : bool, optional
        Whether to print every position and move (default is True).

    Returns
    -------
    GameState
        The final state.
    """
    game = GameState.new(seed=seed)
    while not game.is_game_over():
        direction = strategy.next_move(game)
        if verbose:
            print(render_board(game))
            print(f"{direction!s}\n")
        game.move_tiles(direction)
    return game


def build_parser() -> ArgumentParser:
    """Command line options shared by the play and evaluation scripts."""
    parser = ArgumentParser(description="Play 2048 with Monte Carlo Tree Search")
    parser.add_argument("--strategy", choices=["mcts", "random", "baseline"], default="mcts")
    parser.add_argument("--tries", type=int, default=DEFAULT_TRIES, help="MCTS iterations per move")
    parser.add_argument("--c-param", type=float, default=DEFAULT_C_PARAM, help="MCTS exploration constant")
    parser.add_argument("--depth", type=int, default=100, help="Baseline rollouts per direction")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    parser.add_argument("--verbose", action="store_true", help="Log search statistics")
    return parser


def main():
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )

    strategy = build_strategy(args)
    logger.info("Playing with %s", type(strategy).__name__)

    game = play(strategy, seed=args.seed)
    print(render_board(game))
    print(f"Game over! Final score: {game.score}")


if __name__ == "__main__":
    main()
