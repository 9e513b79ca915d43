"""
Per-frame orchestration for Table Pong.

``FrameDriver`` owns every piece of mutable game state. The host calls
``update()`` once per display refresh and forwards pointer, resize and
start/stop events between frames; everything the host has to show or play
comes back as intents.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.spaces.d2.geometry2d import Size2D
from mini_arcade_core.utils import logger

from table_pong.controllers import (
    CpuConfig,
    CpuPaddleController,
    PointerPaddleController,
    PointerState,
)
from table_pong.entities import Ball, BallBounds, Paddle, Table
from table_pong.intents import (
    Intent,
    MoveSprite,
    PlaySound,
    SetButtonLabel,
    ShowScore,
    Sound,
)
from table_pong.physics import (
    bounce_at_paddle,
    bounce_at_table_edge,
    ensure_launch,
    integrate,
    paddle_contact,
)
from table_pong.session import GameSession


@dataclass
class TableWorld:
    """
    All game state.

    :ivar table (Table): Playing surface.
    :ivar left_paddle (Paddle): Pointer-controlled paddle.
    :ivar right_paddle (Paddle): CPU-controlled paddle.
    :ivar ball (Ball): Ball entity.
    :ivar session (GameSession): Running flag, speeds and score.
    :ivar pointer (PointerState): Last pointer position.
    """

    table: Table
    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball
    session: GameSession
    pointer: PointerState = field(default_factory=PointerState)


@dataclass
class FrameContext:
    """
    Context for one frame.

    :ivar world (TableWorld): Game state.
    :ivar rng (random.Random | None): Random source for serves.
    :ivar intents (list[Intent]): Intents emitted so far this frame.
    """

    world: TableWorld
    rng: random.Random | None = None
    intents: list[Intent] = field(default_factory=list)


@dataclass
class LaunchSystem:
    """Serve the ball when it has no direction."""

    name: str = "table_launch"
    order: int = 10

    def step(self, ctx: FrameContext):
        """Assign a launch angle if needed."""
        ensure_launch(ctx.world.ball, ctx.world.table, ctx.rng)


@dataclass
class BallMovementSystem:
    """
    Move the ball along its angle.
    """

    name: str = "table_ball_move"
    order: int = 20

    def step(self, ctx: FrameContext):
        """Advance and clamp the ball."""
        integrate(ctx.world.ball, ctx.world.session.ball_speed)


@dataclass
class EdgeBounceSystem:
    """Bounce the ball off the top and bottom edges."""

    name: str = "table_edge_bounce"
    order: int = 30

    def step(self, ctx: FrameContext):
        """Reflect vertically on edge contact."""
        if bounce_at_table_edge(ctx.world.ball):
            ctx.intents.append(PlaySound(Sound.BOUNCE))


@dataclass
class PlayerPaddleSystem:
    """Move the left paddle under the pointer."""

    controller: PointerPaddleController
    name: str = "table_player_paddle"
    order: int = 40

    def step(self, _ctx: FrameContext):
        """Follow the pointer."""
        self.controller.update()


@dataclass
class CpuPaddleSystem:
    """
    Move the right paddle towards the ball.
    """

    controller: CpuPaddleController
    name: str = "table_cpu_paddle"
    order: int = 50

    def step(self, _ctx: FrameContext):
        """Track the ball at bounded speed."""
        self.controller.update()


@dataclass
class SpritePositionSystem:
    """Report where the ball and paddles are now."""

    name: str = "table_sprites"
    order: int = 55

    def step(self, ctx: FrameContext):
        """Emit sprite moves."""
        ctx.intents.extend(sprite_positions(ctx.world))


@dataclass
class PaddleContactSystem:
    """
    Handle the ball reaching a paddle edge: bounce or score.
    """

    name: str = "table_paddle_contact"
    order: int = 60

    def step(self, ctx: FrameContext):
        """Bounce off the paddle, or stop the session and score."""
        world = ctx.world
        contact = paddle_contact(
            world.ball, world.left_paddle, world.right_paddle
        )
        if contact is None:
            return

        if contact.is_miss:
            world.session.stop()
            ctx.intents.append(SetButtonLabel(world.session.button_label))
            scorer = world.session.record_loss(contact.side)
            ctx.intents.append(
                ShowScore(scorer, world.session.score.of(scorer))
            )
            ctx.intents.append(PlaySound(Sound.FALL))
            return

        bounce_at_paddle(world.ball, contact.offset)
        ctx.intents.append(PlaySound(Sound.BOUNCE))


def sprite_positions(world: TableWorld) -> list[Intent]:
    """Current sprite centers as intents."""
    table = world.table
    return [
        MoveSprite("ball", world.ball.x, world.ball.y),
        MoveSprite(
            "left_paddle",
            world.left_paddle.center_x(table),
            world.left_paddle.y,
        ),
        MoveSprite(
            "right_paddle",
            world.right_paddle.center_x(table),
            world.right_paddle.y,
        ),
    ]


class FrameDriver:
    """
    Runs Table Pong one frame at a time.

    The driver builds the world from the table and element sizes, then
    steps an ordered system pipeline on every ``update()``.
    """

    # Justification: entity sizes come from separate host queries
    # pylint: disable=too-many-arguments
    def __init__(
        self,
        table: Table,
        paddle_size: Size2D,
        ball_radius: float,
        *,
        paddle_inset: float = 0.0,
        session: GameSession | None = None,
        rng: random.Random | None = None,
    ):
        """
        :param table: Playing surface.
        :type table: Table

        :param paddle_size: Size of each paddle.
        :type paddle_size: Size2D

        :param ball_radius: Ball radius.
        :type ball_radius: float

        :param paddle_inset: Distance between each paddle and its edge.
        :type paddle_inset: float

        :param session: Session with custom speeds, defaults to a new one.
        :type session: GameSession, optional

        :param rng: Random source for serves.
        :type rng: random.Random, optional
        """
        session = session or GameSession()
        self.rng = rng
        self.world = TableWorld(
            table=table,
            left_paddle=Paddle(
                side="LEFT",
                size=paddle_size,
                y=table.height / 2,
                inset=paddle_inset,
            ),
            right_paddle=Paddle(
                side="RIGHT",
                size=paddle_size,
                y=table.height / 2,
                inset=paddle_inset,
            ),
            ball=Ball(
                position=table.center,
                radius=ball_radius,
                bounds=BallBounds.for_table(
                    table, paddle_inset + paddle_size.width, ball_radius
                ),
            ),
            session=session,
        )
        self.on_resize(table.height)

        self.systems = SystemPipeline[FrameContext]()
        self.systems.extend(
            [
                LaunchSystem(),
                BallMovementSystem(),
                EdgeBounceSystem(),
                PlayerPaddleSystem(
                    controller=PointerPaddleController(
                        self.world.left_paddle, self.world.pointer
                    )
                ),
                CpuPaddleSystem(
                    controller=CpuPaddleController(
                        self.world.right_paddle,
                        self.world.ball,
                        config=CpuConfig(
                            max_speed=session.max_opponent_speed
                        ),
                    )
                ),
                SpritePositionSystem(),
                PaddleContactSystem(),
            ]
        )

    # pylint: enable=too-many-arguments

    @property
    def running(self) -> bool:
        """Whether frames advance the game."""
        return self.world.session.running

    def update(self) -> list[Intent]:
        """
        Run one frame.

        :return: Intents for the host, empty while stopped.
        :rtype: list[Intent]
        """
        if not self.running:
            return []
        ctx = FrameContext(world=self.world, rng=self.rng)
        self.systems.step(ctx)
        return ctx.intents

    def start(self) -> list[Intent]:
        """Start a rally from the table center."""
        self.world.session.start(self.world.ball, self.world.table)
        return [SetButtonLabel(self.world.session.button_label)]

    def stop(self) -> list[Intent]:
        """Freeze play."""
        self.world.session.stop()
        return [SetButtonLabel(self.world.session.button_label)]

    def toggle(self) -> list[Intent]:
        """Start when stopped, stop when running."""
        if self.running:
            return self.stop()
        return self.start()

    def on_pointer_move(self, y: float):
        """
        Record the pointer position. It is applied on the next frame.

        :param y: Pointer Y in surface coordinates.
        :type y: float
        """
        self.world.pointer.y = y

    def on_resize(self, surface_height: float):
        """
        Recompute paddle bounds after the surface changed size.

        The table keeps its size and stays vertically centered on the
        surface; pointer coordinates are shifted by the margin above it.

        :param surface_height: New surface height.
        :type surface_height: float
        """
        table = self.world.table
        offset_y = (surface_height - table.height) / 2
        for paddle in (self.world.left_paddle, self.world.right_paddle):
            paddle.fit_to(table, offset_y)
        logger.debug(
            f"Resized to height {surface_height}, pointer offset {offset_y}"
        )

    def snapshot(self) -> list[Intent]:
        """
        Describe the whole current state, for the host's first paint.

        :return: Sprite moves, both scores and the button label.
        :rtype: list[Intent]
        """
        score = self.world.session.score
        return [
            *sprite_positions(self.world),
            ShowScore("LEFT", score.left),
            ShowScore("RIGHT", score.right),
            SetButtonLabel(self.world.session.button_label),
        ]
