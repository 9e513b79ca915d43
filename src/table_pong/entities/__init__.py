"""
Entities package for Table Pong.
This package contains the table, paddle and ball state.
"""

from __future__ import annotations

from .ball import Ball, BallBounds
from .paddle import SIDES, Paddle, Side, other_side
from .table import Table

__all__ = [
    "Ball",
    "BallBounds",
    "Paddle",
    "SIDES",
    "Side",
    "Table",
    "other_side",
]
