from __future__ import annotations

import random

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Size2D

from table_pong.driver import FrameDriver
from table_pong.entities import Ball, BallBounds, Table

from .helpers import PADDLE_H, PADDLE_W, RADIUS, make_paddle


@pytest.fixture
def table():
    return Table(width=400, height=300)


@pytest.fixture
def ball(table):
    return Ball(
        position=table.center,
        radius=RADIUS,
        bounds=BallBounds.for_table(table, PADDLE_W, RADIUS),
    )


@pytest.fixture
def left(table):
    return make_paddle(table, "LEFT")


@pytest.fixture
def right(table):
    return make_paddle(table, "RIGHT")


@pytest.fixture
def driver(table):
    return FrameDriver(
        table=table,
        paddle_size=Size2D(PADDLE_W, PADDLE_H),
        ball_radius=RADIUS,
        rng=random.Random(1234),
    )
