"""
Paddle controllers for Table Pong.
"""

from __future__ import annotations

from .cpu import CpuConfig, CpuPaddleController
from .pointer import PointerPaddleController, PointerState

__all__ = [
    "CpuConfig",
    "CpuPaddleController",
    "PointerPaddleController",
    "PointerState",
]
