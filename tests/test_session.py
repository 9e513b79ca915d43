from __future__ import annotations

from mini_arcade_core.spaces.d2.geometry2d import Position2D

from table_pong.constants import BALL_SPEED, MAX_OPPONENT_SPEED
from table_pong.session import GameSession, ScoreState, SessionState


def test_new_session_is_stopped():
    session = GameSession()
    assert session.state is SessionState.STOPPED
    assert not session.running
    assert session.score == ScoreState(0, 0)
    assert session.ball_speed == BALL_SPEED
    assert session.max_opponent_speed == MAX_OPPONENT_SPEED
    assert session.button_label == "Play"


def test_start_centers_ball_and_clears_angle(ball, table):
    ball.position = Position2D(17, 290)
    ball.angle = 2.0
    session = GameSession()
    session.start(ball, table)
    assert session.state is SessionState.RUNNING
    assert (ball.x, ball.y) == (table.width / 2, table.height / 2)
    assert ball.angle is None
    assert session.button_label == "Stop"


def test_stop_keeps_ball_where_it_is(ball, table):
    session = GameSession()
    session.start(ball, table)
    ball.position = Position2D(17, 290)
    ball.angle = 2.0
    session.stop()
    assert session.state is SessionState.STOPPED
    assert (ball.x, ball.y) == (17, 290)
    assert ball.angle == 2.0


def test_toggle_alternates(ball, table):
    session = GameSession()
    assert session.toggle(ball, table) is SessionState.RUNNING
    assert session.toggle(ball, table) is SessionState.STOPPED
    assert session.toggle(ball, table) is SessionState.RUNNING


def test_record_loss_credits_other_side():
    session = GameSession()
    assert session.record_loss("LEFT") == "RIGHT"
    assert session.score == ScoreState(left=0, right=1)
    assert session.record_loss("RIGHT") == "LEFT"
    assert session.record_loss("LEFT") == "RIGHT"
    assert session.score == ScoreState(left=1, right=2)


def test_score_of():
    score = ScoreState(left=3, right=5)
    assert score.of("LEFT") == 3
    assert score.of("RIGHT") == 5
    assert score.award("LEFT") == 4
