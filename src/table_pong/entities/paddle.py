"""
Paddle entity for Table Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mini_arcade_core.spaces.d2.geometry2d import Size2D

from table_pong.entities.table import Table
from table_pong.geometry import clamp

Side = Literal["LEFT", "RIGHT"]
SIDES: tuple[Side, Side] = ("LEFT", "RIGHT")


def other_side(side: Side) -> Side:
    """Return the opposite side."""
    return "RIGHT" if side == "LEFT" else "LEFT"


# Justification: paddle bounds and pointer offset are part of its state
# pylint: disable=too-many-instance-attributes
@dataclass
class Paddle:
    """
    Paddle entity. ``y`` is the paddle's vertical center in table
    coordinates.

    :ivar side (Side): Which table edge the paddle guards.
    :ivar size (Size2D): Paddle size.
    :ivar y (float): Vertical center, kept within [min_y, max_y].
    :ivar inset (float): Horizontal distance from its table edge.
    :ivar offset_y (float): Surface-to-table vertical offset, used to map
        pointer coordinates onto the table.
    :ivar min_y (float): Lowest legal ``y``.
    :ivar max_y (float): Highest legal ``y``.
    """

    side: Side
    size: Size2D
    y: float = 0.0
    inset: float = 0.0
    offset_y: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    def __post_init__(self):
        if self.side not in SIDES:
            raise ValueError(f"Unknown paddle side: {self.side!r}")

    @property
    def width(self) -> float:
        """Paddle width."""
        return self.size.width

    @property
    def height(self) -> float:
        """Paddle height."""
        return self.size.height

    def fit_to(self, table: Table, offset_y: float = 0.0):
        """
        Recompute movement bounds for ``table``.

        :param table: Table the paddle plays on.
        :type table: Table

        :param offset_y: Surface-to-table vertical offset.
        :type offset_y: float
        """
        self.offset_y = offset_y
        self.min_y = self.height / 2
        self.max_y = table.height - self.height / 2
        self.y = clamp(self.y, self.min_y, self.max_y)

    def move_to(self, y: float):
        """Move the paddle center to ``y``, clamped to its bounds."""
        self.y = clamp(y, self.min_y, self.max_y)

    def center_x(self, table: Table) -> float:
        """Horizontal center of the paddle on ``table``."""
        if self.side == "LEFT":
            return self.inset + self.width / 2
        return table.width - self.inset - self.width / 2


# pylint: enable=too-many-instance-attributes
