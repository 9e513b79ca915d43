from __future__ import annotations

import math
import random

import pytest
from mini_arcade_core.spaces.d2.geometry2d import Size2D

from table_pong.geometry import (
    PI,
    TWO_PI,
    reflect_horizontal,
    reflect_vertical,
)
from table_pong.physics import (
    Contact,
    bounce_at_paddle,
    bounce_at_table_edge,
    ensure_launch,
    integrate,
    launch_deviation,
    paddle_contact,
    touch_offset,
)

from .helpers import make_paddle, place


def test_launch_deviation_follows_table_aspect(table):
    assert launch_deviation(table) == pytest.approx(math.atan(300 / 400))


def test_ensure_launch_assigns_normalized_angle_once(ball, table):
    assert ensure_launch(ball, table, random.Random(3))
    angle = ball.angle
    assert 0 <= angle < TWO_PI
    assert not ensure_launch(ball, table, random.Random(4))
    assert ball.angle == angle


@pytest.mark.parametrize("seed", range(20))
def test_launch_angle_heads_left_or_right(ball, table, seed):
    ensure_launch(ball, table, random.Random(seed))
    d = launch_deviation(table)
    angle = ball.angle
    assert (
        angle <= d
        or angle >= TWO_PI - d
        or PI - d <= angle <= PI + d
    )


@pytest.mark.parametrize("angle", [0.0, 0.3, PI / 2, 2.0, PI, 4.0, 5.5])
@pytest.mark.parametrize(
    "start", [(200, 150), (15, 5), (385, 295), (380, 10), (20, 290)]
)
def test_integrate_keeps_ball_in_bounds(ball, angle, start):
    place(ball, *start, angle)
    for speed in (1.0, 10.0, 1000.0):
        integrate(ball, speed)
        bounds = ball.bounds
        assert bounds.min_x <= ball.x <= bounds.max_x
        assert bounds.min_y <= ball.y <= bounds.max_y


def test_integrate_moves_along_angle(ball):
    place(ball, 200, 150, PI / 4)
    integrate(ball, 10)
    assert ball.x == pytest.approx(200 + 10 * math.cos(PI / 4))
    assert ball.y == pytest.approx(150 + 10 * math.sin(PI / 4))


def test_integrate_clamps_each_axis(ball):
    place(ball, 380, 150, 0.0)
    integrate(ball, 10)
    assert ball.x == 385
    assert ball.y == pytest.approx(150)


@pytest.mark.parametrize("y", [5, 295])
def test_bounce_at_table_edge_fires_on_bound(ball, y):
    place(ball, 200, y, 7 * PI / 4)
    assert bounce_at_table_edge(ball)
    assert ball.angle == pytest.approx(reflect_vertical(7 * PI / 4))


def test_no_edge_bounce_in_the_middle(ball):
    place(ball, 200, 150, 1.0)
    assert not bounce_at_table_edge(ball)
    assert ball.angle == 1.0


def test_no_paddle_contact_between_edges(ball, left, right):
    place(ball, 200, 150, 0.0)
    assert paddle_contact(ball, left, right) is None


def test_paddle_contact_right_centered(ball, left, right):
    place(ball, 385, 150, 0.0)
    contact = paddle_contact(ball, left, right)
    assert contact == Contact(side="RIGHT", offset=0.0)
    assert not contact.is_miss


def test_paddle_contact_left_uses_left_paddle(ball, table, right):
    left = make_paddle(table, "LEFT", y=100)
    place(ball, 15, 152.5, PI)
    contact = paddle_contact(ball, left, right)
    assert contact.side == "LEFT"
    assert contact.offset == pytest.approx(1.5)
    assert contact.is_miss


@pytest.mark.parametrize(
    "ball_y, expected", [(150, 0.0), (115, -1.0), (185, 1.0), (220, 2.0)]
)
def test_touch_offset_scale(ball, right, ball_y, expected):
    place(ball, 385, ball_y, 0.0)
    assert touch_offset(ball, right) == pytest.approx(expected)


def test_touch_offset_edge_of_paddle_is_a_hit(ball, right):
    place(ball, 385, 185, 0.0)
    assert not Contact("RIGHT", touch_offset(ball, right)).is_miss


def test_touch_offset_zero_size_band(table, ball):
    paddle = make_paddle(table, "RIGHT")
    paddle.size = Size2D(0, 0)
    ball.radius = 0
    place(ball, 385, paddle.y, 0.0)
    assert touch_offset(ball, paddle) == 0.0
    place(ball, 385, paddle.y + 1, 0.0)
    assert touch_offset(ball, paddle) == math.inf


def test_bounce_at_paddle_uses_horizontal_reflection(ball):
    place(ball, 385, 150, 0.2)
    bounce_at_paddle(ball, 0.4)
    assert ball.angle == pytest.approx(reflect_horizontal(0.2, 0.4))


def test_corner_applies_both_reflections(ball, left, right):
    place(ball, 385, 5, 7 * PI / 4)
    assert bounce_at_table_edge(ball)
    contact = paddle_contact(ball, left, right)
    assert contact is not None and contact.side == "RIGHT"
