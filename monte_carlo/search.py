"""
Monte Carlo Tree Search (MCTS) implementation for the 2048 game.

This module provides a collection of functions that implement the core components of the Monte Carlo
Tree Search algorithm: tree traversal, node expansion, rollout simulation and backpropagation.

Every iteration replays the moves of the tree on a copy of the real game, so the tree stores statistics
only. Tile spawns are drawn again on each replay and the statistics average over them.
"""

from twentyfortyeight.core.gamestate import GameState

from .config import SearchConfiguration
from .node import ROOT, SearchTree
from .policy import RandomStrategy, Strategy, rollout


def select(tree: SearchTree, state: GameState, c_param: float) -> int:
    """
    Descend the tree through fully expanded nodes, playing each selected move on ``state``.

    Parameters
    ----------
    tree : SearchTree
        The search tree.
    state : GameState
        Scratch copy of the game. **Modified in-place.**
    c_param : float
        The exploration constant.

    Returns
    -------
    int
        Index of the first node that still has untried moves.
    """
    current = ROOT
    while tree.is_fully_expanded(current):
        current = tree.best_child(current, c_param)
        state.move_tiles(tree.node(current).action)
    return current


def expand(tree: SearchTree, index: int, state: GameState) -> int:
    """
    Add one child to a node and play its move on ``state``.

    Returns
    -------
    int
        Index of the new child.
    """
    child = tree.expand(index)
    state.move_tiles(tree.node(child).action)
    return child


def simulate(state: GameState, policy: Strategy) -> float:
    """
    Play ``state`` to the end with ``policy`` and return the final score.

    There is no early cutoff: the score at game over is the outcome of the rollout.
    """
    return float(rollout(state, policy).score)


def backpropagate(tree: SearchTree, index: int, value: float) -> None:
    """Update the statistics of a node and of all its ancestors."""
    tree.update(index, value)


def monte_carlo_search(
    state: GameState, tries: int, c_param: float = 1.4, policy: Strategy | None = None
) -> SearchTree:
    """
    Perform Monte Carlo Tree Search on the given game state.

    Parameters
    ----------
    state : GameState
        The current game state. Left untouched.
    tries : int
        The number of iterations to perform.
    c_param : float, optional
        The exploration constant, by default 1.4.
    policy : Strategy, optional
        The rollout strategy, uniformly random by default.

    Returns
    -------
    SearchTree
        The search tree, with statistics on every expanded node.

    Raises
    ------
    ValueError
        If ``tries`` is lower than 1 or ``c_param`` is negative.

    Notes
    -----
    The search process consists of four main steps:
    1. Selection: Traverse the tree through fully expanded nodes.
    2. Expansion: Add exactly one child to the selected node.
    3. Simulation: Play randomly until the game is over.
    4. Backpropagation: Add the final score to every node on the path.
    """
    config = SearchConfiguration(tries=tries, c_param=c_param)
    policy = policy if policy is not None else RandomStrategy()
    tree = SearchTree()

    for _ in range(config.tries):
        scratch = state.clone()

        # ##>: Select a node and expand.
        node = select(tree, scratch, config.c_param)
        node = expand(tree, node, scratch)

        # ##>: Simulate and back-propagate.
        value = simulate(scratch, policy)
        backpropagate(tree, node, value)

    return tree
