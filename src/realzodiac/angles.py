"""Angle normalization helpers shared by every position model."""

import math


def wrap_degrees(angle: float) -> float:
    """Wrap an angle into (-180, 180].

    Values already in range are returned unchanged, so the function is idempotent.
    Non-finite input is returned as-is.
    """
    if not math.isfinite(angle):
        return angle
    angle = math.fmod(angle, 360.0)
    while angle > 180.0:
        angle -= 360.0
    while angle <= -180.0:
        angle += 360.0
    return angle


def normalize_degrees(angle: float) -> float:
    """Map an angle into [0, 360)."""
    angle = angle % 360.0
    # -1e-17 % 360 rounds up to 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle
