# -*- coding: utf-8 -*-
"""
Search tree of the Monte Carlo Tree Search.

Nodes are stored in an arena owned by the tree: a node refers to its parent and children
through their index in the arena, so the whole tree is released at once when the search
that built it ends.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from math import log, sqrt

from twentyfortyeight.core.gamemove import DIRECTIONS, Direction

ROOT = 0


@dataclass(kw_only=True)
class Node:
    """
    Statistics of one position of the search tree.

    Attributes
    ----------
    action : Direction | None
        The move that leads from the parent to this node, None for the root.
    parent : int | None
        Index of the parent node, None for the root.
    visits : int
        Number of rollouts that went through this node.
    values : float
        Sum of the final scores of these rollouts.
    best : float
        Highest final score of these rollouts.
    children : list[int]
        Indexes of the child nodes, in expansion order.
    untried_actions : list[Direction]
        Moves without a child yet, consumed from the end.
    """

    action: Direction | None = None
    parent: int | None = None
    visits: int = 0
    values: float = 0.0
    best: float = 0.0
    children: list[int] = field(default_factory=list)
    untried_actions: list[Direction] = field(default_factory=lambda: list(DIRECTIONS))

    @property
    def mean(self) -> float:
        """Mean final score of the rollouts through this node."""
        return self.values / self.visits

    def fully_expanded(self) -> bool:
        """Check if every move has a child."""
        return not self.untried_actions

    def update(self, value: float) -> None:
        """
        Record one rollout outcome.

        Visits, cumulative value and best value change together in this single call.

        Parameters
        ----------
        value : float
            Final score of the rollout.
        """
        self.visits += 1
        self.values += value
        if value > self.best:
            self.best = value


class SearchTree:
    """
    Arena of search nodes, rooted at index 0.

    Methods
    -------
    expand(index)
        Create the child of the next untried move.
    best_child(index, c_param)
        Select the child with the highest upper-confidence score.
    update(index, value)
        Record a rollout outcome on a node and all of its ancestors.
    """

    def __init__(self):
        self.nodes: list[Node] = [Node()]

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> Node:
        return self.nodes[ROOT]

    def node(self, index: int) -> Node:
        return self.nodes[index]

    def children(self, index: int) -> list[Node]:
        return [self.nodes[child] for child in self.nodes[index].children]

    def is_fully_expanded(self, index: int) -> bool:
        return self.nodes[index].fully_expanded()

    def expand(self, index: int) -> int:
        """
        Create the child of the last untried move of a node.

        Parameters
        ----------
        index : int
            The node to expand.

        Returns
        -------
        int
            Index of the new child.

        Raises
        ------
        ValueError
            If all moves have been tried. Node should be fully expanded.
        """
        node = self.nodes[index]
        if not node.untried_actions:
            raise ValueError('All actions have been tried. Node should be fully expanded.')

        action = node.untried_actions.pop()
        self.nodes.append(Node(action=action, parent=index))
        child = len(self.nodes) - 1
        node.children.append(child)
        return child

    def best_child(self, index: int, c_param: float) -> int:
        """
        Select the child with the highest upper-confidence score.

        Parameters
        ----------
        index : int
            The parent node.
        c_param : float
            The exploration constant. 0 selects the child with the highest mean.

        Returns
        -------
        int
            Index of the selected child. Ties go to the first expanded child.

        Raises
        ------
        ValueError
            If the node has no child, or if the node or one of its children was never visited.

        Notes
        -----
        The score is ``mean + c_param * best * sqrt(2 * ln(N) / n)`` where ``best`` and ``N`` are
        the best value and visit count of the parent and ``n`` the visit count of the child.
        Scaling by ``best`` keeps exploration proportional to the range of game scores.
        """
        node = self.nodes[index]
        if not node.children:
            raise ValueError('Cannot select a child of a node without children.')
        if node.visits == 0:
            raise ValueError('Cannot select a child of an unvisited node.')
        if any(self.nodes[child].visits == 0 for child in node.children):
            raise ValueError('Cannot select among unvisited children. Expand and visit them first.')

        log_visits = log(node.visits)

        def uct_score(child: int) -> float:
            current = self.nodes[child]
            return current.mean + c_param * node.best * sqrt(2 * log_visits / current.visits)

        return max(node.children, key=uct_score)

    def update(self, index: int, value: float) -> None:
        """
        Record a rollout outcome on a node and every ancestor up to the root.

        Parameters
        ----------
        index : int
            The node where the rollout started.
        value : float
            Final score of the rollout.
        """
        current: int | None = index
        while current is not None:
            node = self.nodes[current]
            node.update(value)
            current = node.parent
