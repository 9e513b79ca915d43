"""
Angle and clamping helpers for Table Pong.

Angles are in radians, measured counter-clockwise from the positive x axis
in table coordinates.
"""

from __future__ import annotations

import math
import random

PI = math.pi
TWO_PI = 2 * math.pi


def normalize_angle(radian: float) -> float:
    """
    Map an angle into [0, 2π).

    :param radian: Any angle, however negative.
    :type radian: float

    :return: The equivalent angle in [0, 2π).
    :rtype: float
    """
    radian = radian % TWO_PI
    # tiny negative inputs round up to exactly 2π
    if radian >= TWO_PI:
        return 0.0
    return radian


def reflect_horizontal(radian: float, amplifier: float) -> float:
    """
    Bounce off a vertical paddle surface.

    The base reflection is π - a. The amplifier (signed, normalized contact
    offset from the paddle center) tilts the exit angle by up to π/4.
    This is an empirical approximation, not a physical reflection.

    :param radian: Incoming angle.
    :type radian: float

    :param amplifier: Normalized off-center distance, usually in [-1, 1].
    :type amplifier: float

    :return: Normalized outgoing angle.
    :rtype: float
    """
    return normalize_angle(PI - radian + PI / 4 * amplifier)


def reflect_vertical(radian: float) -> float:
    """Bounce off the top or bottom table edge."""
    return normalize_angle(TWO_PI - radian)


def random_launch_angle(
    max_deviation: float, rng: random.Random | None = None
) -> float:
    """
    Pick a serve angle heading roughly left or right.

    The result is uniform in [-d, d] or [π - d, π + d], each band picked
    with equal probability. It is *not* normalized.

    :param max_deviation: Largest vertical deviation ``d`` from horizontal.
    :type max_deviation: float

    :param rng: Random source, defaults to the ``random`` module.
    :type rng: random.Random, optional

    :return: Launch angle in radians.
    :rtype: float
    """
    rng = rng or random
    band = PI if rng.random() < 0.5 else 0.0
    return band + rng.uniform(-max_deviation, max_deviation)


def clamp(val: float, low: float, high: float) -> float:
    """Clamp ``val`` into [low, high]; ``low <= high`` is not checked."""
    return min(max(low, val), high)
