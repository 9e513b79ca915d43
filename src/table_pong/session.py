"""
Game session state for Table Pong: start/stop transitions and score.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mini_arcade_core.utils import logger

from table_pong.constants import BALL_SPEED, MAX_OPPONENT_SPEED
from table_pong.entities import Ball, Side, Table, other_side


class SessionState(Enum):
    """Whether the ball is in play."""

    STOPPED = "stopped"
    RUNNING = "running"


@dataclass
class ScoreState:
    """
    Score state for a game.

    :ivar left (int): Score for the left (pointer) player.
    :ivar right (int): Score for the right (CPU) player.
    """

    left: int = 0
    right: int = 0

    def of(self, side: Side) -> int:
        """Score of ``side``."""
        return self.left if side == "LEFT" else self.right

    def award(self, side: Side) -> int:
        """
        Give ``side`` one point.

        :return: The new score of ``side``.
        :rtype: int
        """
        if side == "LEFT":
            self.left += 1
        else:
            self.right += 1
        return self.of(side)


@dataclass
class GameSession:
    """
    One game: running flag, speeds and score.

    A session starts STOPPED. Starting re-centers the ball and clears its
    angle so it is served on the next frame. Stopping only freezes play;
    the ball stays where it is until the next start.

    :ivar ball_speed (float): Ball distance per frame.
    :ivar max_opponent_speed (float): CPU paddle distance limit per frame.
    :ivar score (ScoreState): Points per side.
    :ivar running (bool): Whether frames advance the game.
    """

    ball_speed: float = BALL_SPEED
    max_opponent_speed: float = MAX_OPPONENT_SPEED
    score: ScoreState = field(default_factory=ScoreState)
    running: bool = False

    @property
    def state(self) -> SessionState:
        """Current state."""
        return SessionState.RUNNING if self.running else SessionState.STOPPED

    @property
    def button_label(self) -> str:
        """Label for the start/stop control."""
        return "Stop" if self.running else "Play"

    def start(self, ball: Ball, table: Table):
        """
        Begin a new rally.

        :param ball: Ball to re-center.
        :type ball: Ball

        :param table: Table the ball is centered on.
        :type table: Table
        """
        ball.reset(table)
        # flag last, once the ball is ready
        self.running = True
        logger.info("Session started")

    def stop(self):
        """Freeze play, keeping the ball where it is."""
        self.running = False
        logger.info("Session stopped")

    def toggle(self, ball: Ball, table: Table) -> SessionState:
        """
        Start when stopped, stop when running.

        :return: The state after the transition.
        :rtype: SessionState
        """
        if self.running:
            self.stop()
        else:
            self.start(ball, table)
        return self.state

    def record_loss(self, losing_side: Side) -> Side:
        """
        Credit the side that did not miss.

        :param losing_side: Side whose paddle missed the ball.
        :type losing_side: Side

        :return: The side that scored.
        :rtype: Side
        """
        scorer = other_side(losing_side)
        self.score.award(scorer)
        logger.info(
            f"{losing_side} missed, {scorer} scores "
            f"({self.score.left}-{self.score.right})"
        )
        return scorer
