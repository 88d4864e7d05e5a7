"""
Game move utilities for the 2048 game, providing the four move directions and the check that
tells whether a move changes the board.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    The four moves of the game.

    The value of each member is the number of counter-clockwise quarter turns that map the
    direction onto a slide to the left.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    def __str__(self) -> str:
        return self.name.capitalize()


# ##>: Order in which a search node tries directions (popped from the end).
DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


def can_move(board: ndarray) -> bool:
    """
    Check if any tile can move left on the given board.

    Parameters
    ----------
    board : ndarray
        The game board to check.

    Returns
    -------
    bool
        True if a left move is possible, False otherwise.

    Notes
    -----
    - This function only checks for left movement.
    - For other directions, rotate the board before calling this function.
    - A move is possible if there's an empty cell to the left of a non-empty cell,
      or if two adjacent cells have the same non-zero value.
    """
    left_cols = board[:, :-1]
    right_cols = board[:, 1:]

    # ##>: Empty cell left of a non-empty cell (can slide).
    can_slide = (left_cols == 0) & (right_cols != 0)
    if can_slide.any():
        return True

    # ##>: Two adjacent equal non-zero values (can merge).
    can_merge = (left_cols != 0) & (left_cols == right_cols)
    return bool(can_merge.any())
