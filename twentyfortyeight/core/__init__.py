# -*- coding: utf-8 -*-
"""
This module provides the game model of 2048: the four move directions, the pure board
functions (sliding, merging, rotation, tile insertion, end of game) and the mutable
game state built on top of them.
"""

from .gameboard import add_random_tile, is_done, merge_row, next_state, rotate_board, slide_and_merge
from .gamemove import DIRECTIONS, Direction, can_move
from .gamestate import GameState

__all__ = [
    "DIRECTIONS",
    "Direction",
    "GameState",
    "add_random_tile",
    "can_move",
    "is_done",
    "merge_row",
    "next_state",
    "rotate_board",
    "slide_and_merge",
]
