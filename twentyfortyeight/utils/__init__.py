# -*- coding: utf-8 -*-
"""
This module provides utilities for displaying game boards.
"""

from .display import render_board

__all__ = ["render_board"]
