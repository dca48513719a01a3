"""Motion models for the rotating energy rune.

State layouts:

* small rune ``[x, y, z, theta, angle, spd]`` observed as
  ``[x, y, z, theta, angle]``
* big rune ``[x, y, z, theta, angle, p, a, w]`` observed as
  ``[x, y, z, theta, angle]``
* rune speed ``[angle, spd]`` observed as ``[angle]``

In the predicted state ``x, y, z`` is the centre of the rune; in the
observation it is the centre of the active target. ``theta`` is the facing
of the rune, ``angle`` the angle of the active blade, ``spd`` the spin rate.
The big rune spins at ``b + a * sin(p)`` with ``b = 2.090 - a``, its phase
``p`` advancing at ``w``.

Transitions and observations of the extended filter take a state sequence
(numbers or jets) and return a list; those of the linear filter take the
matrix shape and return the matrix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from openrm.jet import cos, sin

A_MIN = 0.780
A_MAX = 1.045
W_MIN = 1.884
W_MAX = 2.000
B_BASE = 2.090
SMALL_RUNE_SPD = math.pi / 3
RUNE_R = 0.69852

SMALL_RUNE_DIM_X = 6
BIG_RUNE_DIM_X = 8
RUNE_DIM_Y = 5
RUNE_SPEED_DIM_X = 2
RUNE_SPEED_DIM_Y = 1


def _require_shape(shape, min_rows: int, min_cols: int) -> tuple[int, int]:
    rows, cols = (int(n) for n in shape)
    if rows < min_rows or cols < min_cols:
        raise ValueError(
            f"matrix shape {(rows, cols)} is smaller than the required {(min_rows, min_cols)}"
        )
    return rows, cols


def _require_state(x, size: int):
    if len(x) < size:
        raise ValueError(f"state needs {size} components, got {len(x)}")
    return x


@dataclass
class SmallRuneTransition:
    """Fixed rune centre; the blade turns at a constant rate."""

    dt: float = 0.0

    def __call__(self, x):
        x = _require_state(x, SMALL_RUNE_DIM_X)
        return [
            x[0],
            x[1],
            x[2],
            x[3],
            x[4] + self.dt * x[5],
            x[5],
        ]


@dataclass
class BigRuneTransition:
    """Fixed rune centre; the blade turns at a sinusoidally varying rate.

    ``sign`` is the direction of rotation: +1, -1, or 0 while unknown.
    """

    dt: float = 0.0
    sign: float = 0.0

    def __call__(self, x):
        x = _require_state(x, BIG_RUNE_DIM_X)
        dt = self.dt
        return [
            x[0],
            x[1],
            x[2],
            x[3],
            x[4] + self.sign * dt * (B_BASE - x[6]) + self.sign * x[6] * sin(x[5]) * dt,
            x[5] + x[7] * dt,
            x[6],
            x[7],
        ]


@dataclass
class RuneObservation:
    """Active target on the rune circle, from the centre, facing and blade angle."""

    def __call__(self, x):
        x = _require_state(x, RUNE_DIM_Y)
        blade_cos = cos(x[4])
        return [
            x[0] + RUNE_R * blade_cos * sin(x[3]),
            x[1] - RUNE_R * blade_cos * cos(x[3]),
            x[2] + RUNE_R * sin(x[4]),
            x[3],
            x[4],
        ]


@dataclass
class RuneSpeedTransition:
    """Transition matrix of the blade angle at constant spin rate."""

    dt: float = 0.0

    def __call__(self, shape=(RUNE_SPEED_DIM_X, RUNE_SPEED_DIM_X)):
        rows, cols = _require_shape(shape, 1, 2)
        matrix = np.eye(rows, cols)
        matrix[0, 1] = self.dt
        return matrix


@dataclass
class RuneSpeedObservation:
    """Observation matrix selecting the blade angle."""

    def __call__(self, shape=(RUNE_SPEED_DIM_Y, RUNE_SPEED_DIM_X)):
        rows, cols = _require_shape(shape, 1, 1)
        matrix = np.zeros((rows, cols))
        matrix[0, 0] = 1.0
        return matrix