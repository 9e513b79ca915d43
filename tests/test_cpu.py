from __future__ import annotations

import pytest

from table_pong.constants import MAX_OPPONENT_SPEED
from table_pong.controllers import (
    CpuConfig,
    CpuPaddleController,
    PointerPaddleController,
    PointerState,
)

from .helpers import make_paddle, place


def test_default_max_speed():
    assert CpuConfig().max_speed == MAX_OPPONENT_SPEED


@pytest.mark.parametrize("ball_y", [5, 60, 140, 148, 150, 152, 200, 295])
def test_step_never_exceeds_max_speed(ball, right, ball_y):
    place(ball, 300, ball_y, 0.0)
    cpu = CpuPaddleController(right, ball, config=CpuConfig(max_speed=4.5))
    before = right.y
    moved = cpu.update()
    assert abs(moved) <= 4.5
    assert right.y - before == pytest.approx(moved)


def test_step_moves_towards_ball(ball, right):
    cpu = CpuPaddleController(right, ball, config=CpuConfig(max_speed=4))
    place(ball, 300, 250, 0.0)
    assert cpu.compute_step() == 4
    place(ball, 300, 20, 0.0)
    assert cpu.compute_step() == -4


def test_step_stops_on_the_ball(ball, right):
    cpu = CpuPaddleController(right, ball, config=CpuConfig(max_speed=4))
    place(ball, 300, 152, 0.0)
    cpu.update()
    assert right.y == 152
    assert cpu.compute_step() == 0


def test_paddle_stays_in_bounds(ball, right):
    cpu = CpuPaddleController(right, ball, config=CpuConfig(max_speed=50))
    place(ball, 300, 5, 0.0)
    for _ in range(10):
        cpu.update()
    assert right.y == right.min_y


def test_pointer_controller_applies_offset(table):
    paddle = make_paddle(table, "LEFT")
    paddle.fit_to(table, offset_y=40)
    pointer = PointerState(y=140)
    PointerPaddleController(paddle, pointer).update()
    assert paddle.y == 100


def test_pointer_controller_clamps(table):
    paddle = make_paddle(table, "LEFT")
    pointer = PointerState(y=-500)
    controller = PointerPaddleController(paddle, pointer)
    controller.update()
    assert paddle.y == paddle.min_y
    pointer.y = 5000
    controller.update()
    assert paddle.y == paddle.max_y
