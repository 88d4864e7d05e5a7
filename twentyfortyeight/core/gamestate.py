"""Mutable 2048 game state: a 4x4 board and the accumulated score."""

from __future__ import annotations

from dataclasses import dataclass, field

from numpy import int64, ndarray, zeros
from numpy.random import Generator, default_rng

from twentyfortyeight.core.gameboard import add_random_tile, is_done, next_state
from twentyfortyeight.core.gamemove import Direction

BOARD_SIZE = 4


@dataclass(eq=False)
class GameState:
    """
    State of a 2048 game.

    A move either changes the board, adds its merge score and drops exactly one new tile, or
    leaves board and score untouched. Copies made with ``clone`` are independent from the
    original, which makes them suitable for exploring hypothetical continuations.

    Attributes
    ----------
    grid : ndarray
        The 4x4 board, 0 for an empty cell and a power of two otherwise.
    score : int
        Sum of the values of every tile created by merging so far.
    generator : Generator
        Random generator used for tile insertion, the module generator when None. Shared
        between a state and its clones.
    """

    grid: ndarray = field(default_factory=lambda: zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64))
    score: int = 0
    generator: Generator | None = field(default=None, repr=False, compare=False)

    @classmethod
    def new(cls, seed: int | None = None) -> GameState:
        """
        Start a game: empty board, score 0 and two random tiles.

        Parameters
        ----------
        seed : int, optional
            Seed of a dedicated random generator, for reproducible games.

        Returns
        -------
        GameState
            The initial state.
        """
        state = cls() if seed is None else cls(generator=default_rng(seed))
        state.add_random_tile()
        state.add_random_tile()
        return state

    @property
    def max_tile(self) -> int:
        """Highest tile on the board."""
        return int(self.grid.max())

    def clone(self) -> GameState:
        """Deep copy of the board and score; the generator is shared."""
        return GameState(grid=self.grid.copy(), score=self.score, generator=self.generator)

    def add_random_tile(self) -> None:
        """Put a 2 (90%) or a 4 (10%) on a random empty cell; no-op on a full board."""
        add_random_tile(self.grid, generator=self.generator)

    def move_tiles(self, direction: Direction) -> bool:
        """
        Slide and merge every tile in the given direction.

        Parameters
        ----------
        direction : Direction
            The move to apply.

        Returns
        -------
        bool
            True if the board changed (and a new tile was added), False otherwise.
        """
        board, reward = next_state(self.grid, direction, generator=self.generator)
        if board is self.grid:
            return False
        self.grid = board
        self.score += reward
        return True

    def is_game_over(self) -> bool:
        """Check whether the board is full with no two adjacent equal tiles."""
        return is_done(self.grid)
