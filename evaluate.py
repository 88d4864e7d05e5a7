# -*- coding: utf-8 -*-
"""
Evaluate a strategy over several games of 2048.
"""
import logging
from collections import Counter
from statistics import mean
from typing import Dict

from tqdm import trange

from monte_carlo import Strategy
from play import build_parser, build_strategy, play

logger = logging.getLogger(__name__)


def evaluate(strategy: Strategy, length: int = 10, seed: int | None = None) -> Dict[str, object]:
    """
    Evaluate a strategy.

    Parameters
    ----------
    strategy : Strategy
        The strategy to evaluate.
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of the first game; the following games use the next seeds.

    Returns
    -------
    Dict[str, object]
        The frequency of each maximum tile under ``max_tiles`` and the mean final score under
        ``mean_score``.
    """
    tiles, scores = [], []

    with trange(length) as period:
        for num in period:
            game = play(strategy, seed=None if seed is None else seed + num, verbose=False)
            tiles.append(game.max_tile)
            scores.append(game.score)

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=game.score, max=game.max_tile)
            logger.debug("Game %d: score %d, max tile %d", num + 1, game.score, game.max_tile)

    return {"max_tiles": dict(Counter(tiles)), "mean_score": mean(scores)}


if __name__ == "__main__":
    parser = build_parser()
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    result = evaluate(build_strategy(args), length=args.games, seed=args.seed)
    logger.info("Evaluation of %s: %s", args.strategy, result)
