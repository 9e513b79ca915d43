"""
Minimal CPU paddle controller for Table Pong.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from table_pong.constants import MAX_OPPONENT_SPEED
from table_pong.entities import Ball, Paddle


@dataclass
class CpuConfig:
    """
    CPU paddle settings.

    - max_speed: how far the CPU paddle can move in one frame (px/frame)
    """

    max_speed: float = MAX_OPPONENT_SPEED


class CpuPaddleController:
    """
    Very simple CPU:
    - Looks at the ball's center Y.
    - Moves the paddle towards it, at most max_speed per frame.

    It does not predict anything, so a ball moving vertically faster than
    max_speed can outrun it.
    """

    def __init__(
        self,
        paddle: Paddle,
        ball: Ball,
        *,
        config: CpuConfig | None = None,
    ):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball

        :param config: The CPU configuration settings.
        :type config: CpuConfig, optional
        """
        self.paddle = paddle
        self.ball = ball
        self.config = config or CpuConfig()

    def compute_step(self) -> float:
        """
        Signed vertical move for this frame.

        Positive is down, negative is up. The magnitude never exceeds
        ``config.max_speed``.
        """
        diff = self.ball.y - self.paddle.y
        return math.copysign(min(abs(diff), self.config.max_speed), diff)

    def update(self) -> float:
        """
        Move the paddle one frame towards the ball.

        :return: Distance actually moved.
        :rtype: float
        """
        before = self.paddle.y
        self.paddle.move_to(before + self.compute_step())
        return self.paddle.y - before
