"""
Constants for Table Pong.
"""

from __future__ import annotations

from pathlib import Path

ASSETS_ROOT = Path(__file__).resolve().parent / "assets"

FPS = 60
WINDOW_SIZE = (800, 600)

# Table area inside the window, centered vertically.
TABLE_SIZE = (800, 500)

PADDLE_SIZE = (12, 90)
BALL_RADIUS = 8.0

# px per frame
BALL_SPEED = 10.0
# A ball served at BALL_SPEED from the table center towards a corner can
# still be reached from the center of the right edge at this speed.
MAX_OPPONENT_SPEED = 4.723

SOUNDS = ("bounce", "fall")

BACKGROUND = (30, 30, 30)
TABLE_COLOR = (20, 70, 40)
WHITE = (255, 255, 255)
DIM = (200, 200, 200)
