"""
Table entity for Table Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D, Size2D


@dataclass(frozen=True)
class Table:
    """
    Playing surface. Fixed once created.

    :ivar width (float): Table width in pixels.
    :ivar height (float): Table height in pixels.
    """

    width: float
    height: float

    @classmethod
    def from_size(cls, size: Size2D) -> Table:
        """Build a table from a surface size."""
        return cls(width=size.width, height=size.height)

    @property
    def center(self) -> Position2D:
        """Exact center of the table."""
        return Position2D(self.width / 2, self.height / 2)
