"""Motion models for spinning armored targets and the outpost.

State layouts:

* spinning target ``[x, y, z, theta, vx, vy, vz, omega, r]`` observed as
  ``[x, y, z, theta]``
* spinning target centre ``[x, y, vx, vy]`` observed as ``[x, y]``
* spinning target heading ``[theta, omega, beta]`` observed as ``[theta]``
* outpost ``[x, y, z, theta, omega]`` observed as ``[x, y, z, theta]``
* outpost, moving variant ``[x, y, z, theta, vx, vy, vz, omega]`` observed as
  ``[x, y, z, theta]``
* outpost heading ``[theta, omega]`` observed as ``[theta]``

Transitions and observations of the extended filter take a state sequence
(numbers or jets) and return a list; those of the linear filter take the
matrix shape and return the matrix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from openrm.jet import cos, sin

OUTPOST_OMEGA = 0.8 * math.pi
OUTPOST_R = 0.2765

ANTITOP_DIM_X = 9
ANTITOP_DIM_Y = 4
ANTITOP_CENTER_DIM_X = 4
ANTITOP_CENTER_DIM_Y = 2
ANTITOP_OMEGA_DIM_X = 3
ANTITOP_OMEGA_DIM_Y = 1
OUTPOST_DIM_X = 5
OUTPOST_V2_DIM_X = 8
OUTPOST_DIM_Y = 4
OUTPOST_OMEGA_DIM_X = 2
OUTPOST_OMEGA_DIM_Y = 1


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
class AntitopTransition:
    """Constant velocity of the centre and constant spin of a rotating target."""

    dt: float = 0.0

    def __call__(self, x):
        x = _require_state(x, ANTITOP_DIM_X)
        dt = self.dt
        return [
            x[0] + dt * x[4],
            x[1] + dt * x[5],
            x[2] + dt * x[6],
            x[3] + dt * x[7],
            x[4],
            x[5],
            x[6],
            x[7],
            x[8],
        ]


@dataclass
class AntitopObservation:
    """Armor plate at radius ``r`` from the centre, facing ``theta``."""

    def __call__(self, x):
        x = _require_state(x, ANTITOP_DIM_X)
        return [
            x[0] - x[8] * cos(x[3]),
            x[1] - x[8] * sin(x[3]),
            x[2],
            x[3],
        ]


@dataclass
class AntitopCenterTransition:
    """Transition matrix of the centre moving at constant planar velocity."""

    dt: float = 0.0

    def __call__(self, shape=(ANTITOP_CENTER_DIM_X, ANTITOP_CENTER_DIM_X)):
        rows, cols = _require_shape(shape, 2, 4)
        matrix = np.eye(rows, cols)
        matrix[0, 2] = self.dt
        matrix[1, 3] = self.dt
        return matrix


@dataclass
class AntitopCenterObservation:
    """Observation matrix selecting the centre position."""

    def __call__(self, shape=(ANTITOP_CENTER_DIM_Y, ANTITOP_CENTER_DIM_X)):
        rows, cols = _require_shape(shape, 2, 2)
        matrix = np.zeros((rows, cols))
        matrix[0, 0] = 1.0
        matrix[1, 1] = 1.0
        return matrix


@dataclass
class AntitopOmegaTransition:
    """Transition matrix of the heading with spin rate and its drift."""

    dt: float = 0.0

    def __call__(self, shape=(ANTITOP_OMEGA_DIM_X, ANTITOP_OMEGA_DIM_X)):
        rows, cols = _require_shape(shape, 2, 3)
        matrix = np.eye(rows, cols)
        matrix[0, 1] = self.dt
        matrix[1, 2] = self.dt
        matrix[0, 2] = self.dt * self.dt
        return matrix


@dataclass
class AntitopOmegaObservation:
    """Observation matrix selecting the heading."""

    def __call__(self, shape=(ANTITOP_OMEGA_DIM_Y, ANTITOP_OMEGA_DIM_X)):
        rows, cols = _require_shape(shape, 1, 1)
        matrix = np.zeros((rows, cols))
        matrix[0, 0] = 1.0
        return matrix


@dataclass
class OutpostTransition:
    """Fixed outpost centre with constant spin."""

    dt: float = 0.0

    def __call__(self, x):
        x = _require_state(x, OUTPOST_DIM_X)
        return [
            x[0],
            x[1],
            x[2],
            x[3] + self.dt * x[4],
            x[4],
        ]


@dataclass
class OutpostObservation:
    """Outpost armor plate at the fixed outpost radius."""

    def __call__(self, x):
        x = _require_state(x, OUTPOST_DIM_X - 1)
        return [
            x[0] - OUTPOST_R * cos(x[3]),
            x[1] - OUTPOST_R * sin(x[3]),
            x[2],
            x[3],
        ]


@dataclass
class OutpostV2Transition:
    """Outpost centre moving at constant velocity with constant spin."""

    dt: float = 0.0

    def __call__(self, x):
        x = _require_state(x, OUTPOST_V2_DIM_X)
        dt = self.dt
        return [
            x[0] + dt * x[4],
            x[1] + dt * x[5],
            x[2] + dt * x[6],
            x[3] + dt * x[7],
            x[4],
            x[5],
            x[6],
            x[7],
        ]


@dataclass
class OutpostV2Observation:
    """Outpost armor plate at the fixed outpost radius, moving-centre state."""

    def __call__(self, x):
        x = _require_state(x, OUTPOST_DIM_Y)
        return [
            x[0] - OUTPOST_R * cos(x[3]),
            x[1] - OUTPOST_R * sin(x[3]),
            x[2],
            x[3],
        ]


@dataclass
class OutpostOmegaTransition:
    """Transition matrix of the outpost heading at constant spin."""

    dt: float = 0.0

    def __call__(self, shape=(OUTPOST_OMEGA_DIM_X, OUTPOST_OMEGA_DIM_X)):
        rows, cols = _require_shape(shape, 1, 2)
        matrix = np.eye(rows, cols)
        matrix[0, 1] = self.dt
        return matrix


@dataclass
class OutpostOmegaObservation:
    """Observation matrix selecting the outpost heading."""

    def __call__(self, shape=(OUTPOST_OMEGA_DIM_Y, OUTPOST_OMEGA_DIM_X)):
        rows, cols = _require_shape(shape, 1, 1)
        matrix = np.zeros((rows, cols))
        matrix[0, 0] = 1.0
        return matrix