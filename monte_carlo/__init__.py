# -*- coding: utf-8 -*-
"""
Module containing the Monte Carlo Tree Search for Game 2048.
"""
from .actor import MonteCarloAgent
from .config import SearchConfiguration
from .node import Node, SearchTree
from .policy import RandomStrategy, SimpleRandomStrategy, Strategy
from .search import monte_carlo_search

__all__ = [
    "MonteCarloAgent",
    "Node",
    "RandomStrategy",
    "SearchConfiguration",
    "SearchTree",
    "SimpleRandomStrategy",
    "Strategy",
    "monte_carlo_search",
]
