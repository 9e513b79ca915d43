"""
Table scene Model
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from table_pong.driver import FrameDriver
from table_pong.entities import Side
from table_pong.intents import (
    Intent,
    MoveSprite,
    PlaySound,
    SetButtonLabel,
    ShowScore,
    Sound,
    Sprite,
)


@dataclass
class TableSceneWorld(BaseWorld):
    """
    What the host shows, fed by the frame driver's intents.

    :ivar driver (FrameDriver): The game core.
    :ivar surface_offset_y (float): Table top edge in window coordinates.
    :ivar sprites (dict[Sprite, tuple[float, float]]): Sprite centers.
    :ivar scores (dict[Side, int]): Displayed scores.
    :ivar button_label (str): Start/stop label.
    :ivar pending_sounds (list[Sound]): Sounds to play this tick.
    """

    driver: FrameDriver
    surface_offset_y: float = 0.0
    sprites: dict[Sprite, tuple[float, float]] = field(default_factory=dict)
    scores: dict[Side, int] = field(
        default_factory=lambda: {"LEFT": 0, "RIGHT": 0}
    )
    button_label: str = "Play"
    pending_sounds: list[Sound] = field(default_factory=list)

    def apply(self, intents: list[Intent]):
        """
        Carry out driver intents.

        :param intents: Intents in emission order.
        :type intents: list[Intent]
        """
        for intent in intents:
            if isinstance(intent, MoveSprite):
                self.sprites[intent.sprite] = (intent.x, intent.y)
            elif isinstance(intent, ShowScore):
                self.scores[intent.side] = intent.value
            elif isinstance(intent, SetButtonLabel):
                self.button_label = intent.text
            elif isinstance(intent, PlaySound):
                self.pending_sounds.append(intent.name)


@dataclass(frozen=True)
class TableIntent(BaseIntent):
    """
    Player intent for the Table scene.

    :ivar pointer_y (float | None): Pointer Y in window coordinates.
    :ivar toggle (bool): Whether to start or stop the game.
    """

    pointer_y: float | None = None
    toggle: bool = False


@dataclass
class TableTickContext(BaseTickContext[TableSceneWorld, TableIntent]):
    """
    Context for a Table scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (TableSceneWorld): Host-side world.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[TableIntent]): Player intent for this tick.
    """
