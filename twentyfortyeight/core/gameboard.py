"""
Core functionality for simulating the 2048 game, including board manipulation and game logic.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, ndarray, rot90, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from twentyfortyeight.core.gamemove import Direction, can_move

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


def merge_row(row: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a row towards its start and compute the score.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one row of the game board.

    Returns
    -------
    score : int
        The total value of the tiles created by merging.
    merged_row : ndarray
        The non-empty tiles after merging, without padding.

    Notes
    -----
    - Zeros (empty cells) are ignored.
    - The first unmerged tile is held as pending; the next tile merges with it if equal,
      otherwise the pending tile is flushed and replaced.
    - Each tile can only be merged once per call.
    """
    result = []
    score = 0
    pending = None

    for tile in row[row != 0]:
        tile = int(tile)
        if pending is None:
            pending = tile
        elif pending == tile:
            result.append(tile * 2)
            score += tile * 2
            pending = None
        else:
            result.append(pending)
            pending = tile

    if pending is not None:
        result.append(pending)

    return score, array(result, dtype=row.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    - Empty cells (zeros) are added to the right side of each row after merging.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_row(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def rotate_board(board: ndarray, k: int = 1) -> ndarray:
    """Rotate the board by ``k`` counter-clockwise quarter turns."""
    return rot90(board, k=k)


def add_random_tile(state: ndarray, generator: Generator | None = None) -> ndarray:
    """
    Put a new tile (2 or 4) on one empty cell chosen uniformly.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    generator : Generator, optional
        Random generator to draw from, defaults to the module generator.

    Returns
    -------
    ndarray
        The same array reference with the new tile added.

    Notes
    -----
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - A full board is left untouched.
    """
    rng = generator if generator is not None else _GENERATOR

    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state

    cell = available_cells[rng.integers(len(available_cells))]
    state[tuple(cell)] = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    return state


def next_state(state: ndarray, direction: Direction, generator: Generator | None = None) -> tuple[ndarray, int]:
    """
    Compute the next state and reward after applying a move.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    direction : Direction
        The move to apply.
    generator : Generator, optional
        Random generator used for the new tile.

    Returns
    -------
    new_state : ndarray
        The new state of the game board after the move and adding a new tile.
    reward : int
        The score obtained from this move.

    Notes
    -----
    - If the move results in no change, the same board is returned with a reward of 0 and
      no new tile is added.
    - A new tile (2 or 4) is added to a random empty cell after a valid move.
    """
    rotated = rotate_board(state, k=direction)
    if can_move(rotated):
        reward, updated_board = slide_and_merge(rotated)
        board = rotate_board(updated_board, k=-direction).copy()
        return add_random_tile(board, generator=generator), reward
    return state, 0


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
