"""
Pointer-driven paddle controller for Table Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from table_pong.entities import Paddle


@dataclass
class PointerState:
    """
    Last known pointer position.

    :ivar y (float): Pointer Y in surface coordinates.
    """

    y: float = 0.0


class PointerPaddleController:
    """Keeps a paddle under the pointer."""

    def __init__(self, paddle: Paddle, pointer: PointerState):
        self.paddle = paddle
        self.pointer = pointer

    def update(self):
        """Move the paddle to the pointer, converted to table coordinates."""
        self.paddle.move_to(self.pointer.y - self.paddle.offset_y)
