# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.
"""

from .core import Direction, GameState

__all__ = ["Direction", "GameState"]
