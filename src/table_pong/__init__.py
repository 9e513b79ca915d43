"""
Table Pong: a two-paddle ball-bounce game core with a mini-arcade-core host.
"""

from __future__ import annotations

from .driver import FrameDriver, TableWorld
from .entities import Ball, Paddle, Table
from .session import GameSession, ScoreState, SessionState

__all__ = [
    "Ball",
    "FrameDriver",
    "GameSession",
    "Paddle",
    "ScoreState",
    "SessionState",
    "Table",
    "TableWorld",
]
