"""
Ball physics for Table Pong: serving, integration and collisions.

Collision handling is discrete: positions are clamped to the legal area
and a ball sitting on a bound counts as touching it. A fast ball can skip
over a thin obstacle between two frames.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D

from table_pong.entities import Ball, Paddle, Side, Table
from table_pong.geometry import (
    clamp,
    normalize_angle,
    random_launch_angle,
    reflect_horizontal,
    reflect_vertical,
)


@dataclass(frozen=True)
class Contact:
    """
    Ball reaching a horizontal edge.

    :ivar side (Side): Edge the ball reached.
    :ivar offset (float): Ball center distance from the paddle center,
        scaled so that ``abs(offset) <= 1`` means the paddle was touched.
    """

    side: Side
    offset: float

    @property
    def is_miss(self) -> bool:
        """Whether the ball passed the paddle."""
        return abs(self.offset) > 1


def launch_deviation(table: Table) -> float:
    """Widest serve deviation that still heads for a table corner."""
    return math.atan2(table.height, table.width)


def ensure_launch(
    ball: Ball, table: Table, rng: random.Random | None = None
) -> bool:
    """
    Serve the ball if it has no direction yet.

    :return: Whether a new angle was assigned.
    :rtype: bool
    """
    if not ball.needs_launch:
        return False
    ball.angle = normalize_angle(
        random_launch_angle(launch_deviation(table), rng)
    )
    return True


def integrate(ball: Ball, speed: float):
    """
    Advance the ball one frame along its angle, clamped to its bounds.

    :param ball: Ball to move. Must already have an angle.
    :type ball: Ball

    :param speed: Distance travelled per frame.
    :type speed: float
    """
    bounds = ball.bounds
    x = clamp(
        ball.x + speed * math.cos(ball.angle), bounds.min_x, bounds.max_x
    )
    y = clamp(
        ball.y + speed * math.sin(ball.angle), bounds.min_y, bounds.max_y
    )
    ball.position = Position2D(x, y)


def bounce_at_table_edge(ball: Ball) -> bool:
    """
    Reflect the ball off the top or bottom edge if it touches one.

    :return: Whether the ball bounced.
    :rtype: bool
    """
    if ball.y <= ball.bounds.min_y or ball.y >= ball.bounds.max_y:
        ball.angle = reflect_vertical(ball.angle)
        return True
    return False


def touch_offset(ball: Ball, paddle: Paddle) -> float:
    """
    Normalized vertical distance between ball and paddle centers.

    0 when centered, -1 when the ball's bottom edge meets the paddle's top
    edge, 1 when the ball's top edge meets the paddle's bottom edge.
    """
    diff = ball.y - paddle.y
    reach = paddle.height / 2 + ball.radius
    if reach <= 0:
        # zero-size contact band: only a dead-center hit counts
        return math.copysign(math.inf, diff) if diff else 0.0
    return diff / reach


def paddle_contact(ball: Ball, left: Paddle, right: Paddle) -> Contact | None:
    """
    Check whether the ball is at a horizontal edge.

    :param ball: The ball.
    :type ball: Ball

    :param left: Paddle guarding the left edge.
    :type left: Paddle

    :param right: Paddle guarding the right edge.
    :type right: Paddle

    :return: The contact, or ``None`` when the ball is between the edges.
    :rtype: Contact | None
    """
    if ball.x <= ball.bounds.min_x:
        return Contact(side="LEFT", offset=touch_offset(ball, left))
    if ball.x >= ball.bounds.max_x:
        return Contact(side="RIGHT", offset=touch_offset(ball, right))
    return None


def bounce_at_paddle(ball: Ball, offset: float):
    """Reflect the ball off a paddle, tilted by the contact offset."""
    ball.angle = reflect_horizontal(ball.angle, offset)
