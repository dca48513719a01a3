"""Projectile flight time and aiming angles under gravity."""

from __future__ import annotations

import math
from dataclasses import dataclass

GRAVITY = 9.8
_ITERATIONS = 5


@dataclass(frozen=True)
class FlyDelay:
    """Flight time of a shot together with the yaw and pitch to aim with."""

    time: float
    yaw: float
    pitch: float


def get_fly_delay(speed, target_x, target_y, target_z):
    """Solve the aiming angles and flight time to hit a target.

    The pitch is refined by fixed-point iteration; where no real solution
    exists at some step the pitch falls back to zero.
    """
    if not speed > 0:
        raise ValueError("projectile speed must be positive")
    yaw = math.atan2(target_y, target_x)
    height = target_z
    distance = math.hypot(target_x, target_y)
    flight = math.hypot(distance, height) / speed
    pitch = 0.0
    for _ in range(_ITERATIONS):
        denominator = speed * flight
        ratio = (height + 0.5 * GRAVITY * flight * flight) / denominator if denominator else math.nan
        pitch = math.asin(ratio) if -1.0 <= ratio <= 1.0 else 0.0
        flight = distance / (speed * math.cos(pitch))
    return FlyDelay(time=flight, yaw=yaw, pitch=pitch)


def get_rotate_delay(current_yaw, target_yaw):
    """Return the gimbal rotation delay for turning between two yaw angles.

    Rotation time is not modelled, so every valid pair of angles gives 0.0.
    Angles that are not finite numbers are rejected.
    """
    angles = (float(current_yaw), float(target_yaw))
    if not all(math.isfinite(angle) for angle in angles):
        raise ValueError("yaw angles must be finite")
    return 0.0