"""
Table Pong scene using mini-arcade-core.

The scene is a thin host: it feeds pointer and button input into the
frame driver, executes the intents it returns and draws the result.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.runtime.services import RuntimeServices
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)
from mini_arcade_core.spaces.d2.geometry2d import Size2D

from table_pong.constants import (
    BALL_RADIUS,
    DIM,
    PADDLE_SIZE,
    TABLE_COLOR,
    TABLE_SIZE,
    WHITE,
)
from table_pong.driver import FrameDriver
from table_pong.entities import Table
from table_pong.scenes.commands import ToggleGameCommand
from table_pong.scenes.table.models import (
    TableIntent,
    TableSceneWorld,
    TableTickContext,
)


@dataclass
class TableInputSystem(InputIntentSystem):
    """
    Read the pointer and the start/stop key.
    """

    name: str = "table_input"

    def build_intent(self, ctx: TableTickContext):
        """Process input and update intent."""
        pressed = ctx.input_frame.keys_pressed
        _, pointer_y = ctx.input_frame.mouse_pos

        return TableIntent(
            pointer_y=pointer_y,
            toggle=Key.ENTER in pressed,
        )


@dataclass
class HostEventSystem:
    """Forward pointer moves and start/stop presses to the driver."""

    name: str = "table_host_events"
    order: int = 15  # after input, before the frame

    def step(self, ctx: TableTickContext):
        """Forward input events."""
        if ctx.intent is None:
            return

        if ctx.intent.pointer_y is not None:
            ctx.world.driver.on_pointer_move(ctx.intent.pointer_y)

        if ctx.intent.toggle:
            ctx.commands.push(ToggleGameCommand())


@dataclass
class FrameDriverSystem:
    """
    Run one game frame and apply its intents.
    """

    name: str = "table_frame"
    order: int = 30

    def step(self, ctx: TableTickContext):
        """Advance the game one frame."""
        ctx.world.apply(ctx.world.driver.update())


@dataclass
class SoundSystem:
    """Play the sounds requested this tick."""

    services: RuntimeServices
    name: str = "table_sound"
    order: int = 40

    def step(self, ctx: TableTickContext):
        """Play and clear pending sounds."""
        for sound in ctx.world.pending_sounds:
            self.services.audio.play(sound.value)
        ctx.world.pending_sounds.clear()


class DrawTable(Drawable[TableTickContext]):
    """
    Drawable to render the table and its dashed center line.
    """

    def draw(self, backend: Backend, ctx: TableTickContext):
        table = ctx.world.driver.world.table
        top = ctx.world.surface_offset_y
        backend.render.draw_rect(
            0,
            int(top),
            int(table.width),
            int(table.height),
            color=TABLE_COLOR,
        )

        x = int(table.width / 2) - 2  # center line X (2px thickness)
        dash_w = 4
        dash_h = 16
        gap = 12

        y = 0
        while y < table.height:
            backend.render.draw_rect(
                x, int(top + y), dash_w, dash_h, color=DIM
            )
            y += dash_h + gap


class DrawPaddles(Drawable[TableTickContext]):
    """
    Drawable to render both paddles.
    """

    def draw(self, backend: Backend, ctx: TableTickContext):
        pad_w, pad_h = PADDLE_SIZE
        top = ctx.world.surface_offset_y
        for name in ("left_paddle", "right_paddle"):
            if name not in ctx.world.sprites:
                continue
            cx, cy = ctx.world.sprites[name]
            backend.render.draw_rect(
                int(cx - pad_w / 2),
                int(top + cy - pad_h / 2),
                pad_w,
                pad_h,
                color=WHITE,
            )


class DrawBall(Drawable[TableTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: TableTickContext):
        if "ball" not in ctx.world.sprites:
            return
        cx, cy = ctx.world.sprites["ball"]
        top = ctx.world.surface_offset_y
        size = int(BALL_RADIUS * 2)
        backend.render.draw_rect(
            int(cx - BALL_RADIUS),
            int(top + cy - BALL_RADIUS),
            size,
            size,
            color=WHITE,
        )


class DrawHud(Drawable[TableTickContext]):
    """
    Drawable to render the scores and the start/stop label.
    """

    def draw(self, backend: Backend, ctx: TableTickContext):
        table = ctx.world.driver.world.table
        vw = table.width

        left_text = str(ctx.world.scores["LEFT"])
        right_text = str(ctx.world.scores["RIGHT"])

        # measure pixel width of each score
        left_w, _ = backend.text.measure(left_text)

        center_x = vw // 2
        gap = 40  # distance from center line to each score

        backend.text.draw(
            (center_x - gap) - left_w, 10, left_text, color=DIM
        )
        backend.text.draw(center_x + gap, 10, right_text, color=DIM)

        label = f"[ENTER] {ctx.world.button_label}"
        label_w, _ = backend.text.measure(label)
        bottom = ctx.world.surface_offset_y * 2 + table.height
        backend.text.draw(
            center_x - label_w // 2, int(bottom) - 40, label, color=WHITE
        )


@dataclass
class TableRenderSystem(BaseRenderSystem):
    """
    Render the Table world.
    """

    name: str = "table_render"
    order: int = 100

    def step(self, ctx: TableTickContext):
        """Render the Table world."""

        ctx.draw_ops = [
            DrawCall(drawable=DrawTable(), ctx=ctx),
            DrawCall(drawable=DrawPaddles(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
            DrawCall(drawable=DrawHud(), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("table")
class TableScene(SimScene[TableTickContext, TableSceneWorld]):
    """
    Table Pong: pointer paddle on the left, CPU paddle on the right.
    """

    tick_context_type = TableTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        _, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return
        table_w, table_h = TABLE_SIZE
        pad_w, pad_h = PADDLE_SIZE

        driver = FrameDriver(
            table=Table(width=table_w, height=table_h),
            paddle_size=Size2D(pad_w, pad_h),
            ball_radius=BALL_RADIUS,
        )
        driver.on_resize(vh)

        self.world = TableSceneWorld(
            driver=driver,
            surface_offset_y=(vh - table_h) / 2,
        )
        self.world.apply(driver.snapshot())

        self.systems.extend(
            [
                TableInputSystem(),
                HostEventSystem(),
                FrameDriverSystem(),
                SoundSystem(self.context.services),
                TableRenderSystem(),
            ]
        )
