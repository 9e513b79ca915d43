"""
Ball entity for Table Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.geometry2d import Position2D

from table_pong.entities.table import Table


@dataclass(frozen=True)
class BallBounds:
    """
    Legal area for the ball center. The ball can overlap neither a paddle
    nor a table edge.
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def for_table(
        cls, table: Table, paddle_width: float, radius: float
    ) -> BallBounds:
        """
        Derive bounds from the table, paddle width and ball radius.

        :param table: Table the ball moves on.
        :type table: Table

        :param paddle_width: Width of the paddles at either edge.
        :type paddle_width: float

        :param radius: Ball radius.
        :type radius: float

        :return: Bounds for the ball center.
        :rtype: BallBounds
        """
        return cls(
            min_x=paddle_width + radius,
            max_x=table.width - paddle_width - radius,
            min_y=radius,
            max_y=table.height - radius,
        )


@dataclass
class Ball:
    """
    Ball entity.

    :ivar position (Position2D): Center of the ball in table coordinates.
    :ivar radius (float): Ball radius.
    :ivar bounds (BallBounds): Legal area for ``position``.
    :ivar angle (float | None): Direction of travel; ``None`` until served.
    """

    position: Position2D
    radius: float
    bounds: BallBounds
    angle: float | None = None

    @property
    def x(self) -> float:
        """Horizontal center."""
        return self.position.x

    @property
    def y(self) -> float:
        """Vertical center."""
        return self.position.y

    @property
    def needs_launch(self) -> bool:
        """Whether the ball has no direction yet."""
        return self.angle is None

    def reset(self, table: Table):
        """Put the ball back at the table center, waiting to be served."""
        self.position = table.center
        self.angle = None
