"""
Host-facing intents emitted by the frame driver.

The core never draws or plays audio itself. Each frame it returns a list
of these, and the host carries them out in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from table_pong.entities import Side

Sprite = Literal["ball", "left_paddle", "right_paddle"]


class Sound(str, Enum):
    """Named sound effects the host knows how to play."""

    BOUNCE = "bounce"
    FALL = "fall"


@dataclass(frozen=True)
class PlaySound:
    """
    Play a sound effect from the start, restarting it if already playing.

    :ivar name (Sound): Effect to play.
    """

    name: Sound


@dataclass(frozen=True)
class MoveSprite:
    """
    Place a sprite's center at (x, y) in table coordinates.

    :ivar sprite (Sprite): Which sprite to move.
    :ivar x (float): Horizontal center.
    :ivar y (float): Vertical center.
    """

    sprite: Sprite
    x: float
    y: float


@dataclass(frozen=True)
class ShowScore:
    """
    Update a player's score display.

    :ivar side (Side): Whose score changed.
    :ivar value (int): New score.
    """

    side: Side
    value: int


@dataclass(frozen=True)
class SetButtonLabel:
    """
    Update the start/stop control label.

    :ivar text (str): "Play" or "Stop".
    """

    text: str


Intent = Union[PlaySound, MoveSprite, ShowScore, SetButtonLabel]
