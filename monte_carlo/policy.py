"""
Move strategies for the 2048 game.

A strategy maps a game state to the next direction to play. The uniform random strategy
finishes games during rollouts; the simple random strategy is a baseline that averages
rollouts for each first move without building a tree.
"""

from abc import ABC, abstractmethod

from numpy.random import PCG64DXSM, Generator, default_rng

from twentyfortyeight.core.gamemove import DIRECTIONS, Direction
from twentyfortyeight.core.gamestate import GameState

GENERATOR = default_rng(PCG64DXSM())


class Strategy(ABC):
    """Choose the next move of a game."""

    @abstractmethod
    def next_move(self, state: GameState) -> Direction:
        """Return the direction to play from ``state``."""


class RandomStrategy(Strategy):
    """
    Uniformly random move, regardless of the board.

    Parameters
    ----------
    seed : int, optional
        Seed of a dedicated random generator, for reproducible rollouts.
    """

    def __init__(self, seed: int | None = None):
        self._generator: Generator = GENERATOR if seed is None else default_rng(seed)

    def next_move(self, state: GameState) -> Direction:
        return DIRECTIONS[self._generator.integers(len(DIRECTIONS))]


def rollout(state: GameState, policy: Strategy) -> GameState:
    """
    Play ``state`` until the game is over, following ``policy``.

    Parameters
    ----------
    state : GameState
        The state to play. **Modified in-place.**
    policy : Strategy
        The strategy choosing every move.

    Returns
    -------
    GameState
        The same state, now terminal.
    """
    while not state.is_game_over():
        state.move_tiles(policy.next_move(state))
    return state


class SimpleRandomStrategy(Strategy):
    """
    Baseline strategy averaging random games for each first move.

    For every direction, ``depth`` games starting with that direction are played to the end with
    uniformly random moves. The direction with the highest total final score is returned.

    Parameters
    ----------
    depth : int
        Number of games played per direction.
    policy : Strategy, optional
        The rollout strategy, uniformly random by default.

    Raises
    ------
    ValueError
        If ``depth`` is lower than 1.
    """

    def __init__(self, depth: int, policy: Strategy | None = None):
        if depth < 1:
            raise ValueError(f'depth must be >= 1, got {depth}')
        self.depth = depth
        self._policy = policy if policy is not None else RandomStrategy()

    def next_move(self, state: GameState) -> Direction:
        scores = []
        for direction in DIRECTIONS:
            total = 0
            for _ in range(self.depth):
                scratch = state.clone()
                scratch.move_tiles(direction)
                total += rollout(scratch, self._policy).score
            scores.append(total)

        # ##>: First direction wins ties.
        best = max(range(len(DIRECTIONS)), key=lambda i: scores[i])
        return DIRECTIONS[best]
