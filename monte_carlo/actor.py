# -*- coding: utf-8 -*-
"""
Monte Carlo Tree Search agent for 2048.
"""
import logging

from twentyfortyeight.core.gamemove import Direction
from twentyfortyeight.core.gamestate import GameState

from .config import DEFAULT_C_PARAM, DEFAULT_TRIES, SearchConfiguration
from .node import ROOT, SearchTree
from .policy import Strategy
from .search import monte_carlo_search

logger = logging.getLogger(__name__)


class MonteCarloAgent(Strategy):
    """
    An agent that uses Monte Carlo Tree Search to play 2048.

    A fresh tree is built for every move and discarded once the move is chosen.

    Attributes
    ----------
    config : SearchConfiguration
        Number of iterations and exploration constant of each search.

    Methods
    -------
    next_move(state: GameState)
        Choose the best move for the given game state using MCTS.
    """

    def __init__(self, tries: int = DEFAULT_TRIES, c_param: float = DEFAULT_C_PARAM, policy: Strategy | None = None):
        """
        Initialize the Monte Carlo agent.

        Parameters
        ----------
        tries : int, optional
            The number of iterations for each search (default is 1000).
        c_param : float, optional
            The exploration constant (default is 1.4).
        policy : Strategy, optional
            The rollout strategy, uniformly random by default.

        Raises
        ------
        ValueError
            If ``tries`` is lower than 1 or ``c_param`` is negative.
        """
        self.config = SearchConfiguration(tries=tries, c_param=c_param)
        self._policy = policy

    @classmethod
    def _best_action(cls, tree: SearchTree) -> Direction:
        """
        Choose the root child with the highest mean score, without exploration bonus.

        Parameters
        ----------
        tree : SearchTree
            The search tree.

        Returns
        -------
        Direction
            The move leading to the best child.
        """
        return tree.node(tree.best_child(ROOT, 0.0)).action

    def next_move(self, state: GameState) -> Direction:
        """
        Choose the best move using Monte Carlo Tree Search.

        Parameters
        ----------
        state : GameState
            The current game state. Left untouched.

        Returns
        -------
        Direction
            The chosen move.
        """
        tree = monte_carlo_search(state, tries=self.config.tries, c_param=self.config.c_param, policy=self._policy)

        for child in tree.children(ROOT):
            logger.debug('%s\t%d\t%.1f', child.action, child.visits, child.mean)

        return self._best_action(tree)
