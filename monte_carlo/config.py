# -*- coding: utf-8 -*-
"""
Configuration of the Monte Carlo Tree Search.
"""
from dataclasses import dataclass

DEFAULT_TRIES = 1000
DEFAULT_C_PARAM = 1.4


@dataclass(frozen=True)
class SearchConfiguration:
    """
    Budget and exploration settings of a search.

    Attributes
    ----------
    tries : int
        Number of selection, expansion, simulation and backpropagation cycles per move.
    c_param : float
        Exploration constant, scaled by the best score observed below the parent node.

    Raises
    ------
    ValueError
        If ``tries`` is lower than 1 or ``c_param`` is negative.
    """

    tries: int = DEFAULT_TRIES
    c_param: float = DEFAULT_C_PARAM

    def __post_init__(self):
        if self.tries < 1:
            raise ValueError(f'tries must be >= 1, got {self.tries}')
        if self.c_param < 0:
            raise ValueError(f'c_param must be >= 0, got {self.c_param}')
