from __future__ import annotations

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D

from table_pong.entities import Paddle

PADDLE_W = 10
PADDLE_H = 60
RADIUS = 5.0


def make_paddle(table, side, y=None):
    paddle = Paddle(side=side, size=Size2D(PADDLE_W, PADDLE_H))
    paddle.fit_to(table)
    paddle.move_to(table.height / 2 if y is None else y)
    return paddle


def place(ball, x, y, angle):
    ball.position = Position2D(x, y)
    ball.angle = angle
