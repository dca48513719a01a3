"""Generic motion models for the Kalman filters.

State layouts:

* centre model ``[x, y, z, theta, vx, vy, vz, omega, r]`` observed as ``[x, y, z, theta]``
* single model ``[x, y, z, theta, vx, vy, vz, ax, ay]`` observed as ``[x, y, z, theta]``
* linear single model ``[x, y, z, theta, vx, vy]`` observed as ``[x, y, z, theta]``
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from openrm.jet import cos, sin

CENTER_DIM_X = 9
CENTER_DIM_Y = 4
SINGLE_DIM_X = 9
SINGLE_DIM_Y = 4
KF_SINGLE_DIM_X = 6
KF_SINGLE_DIM_Y = 4


@dataclass
class CenterModelTransition:
    """Constant velocity and spin of a rotating target's centre."""

    dt: float = 0.0

    def __call__(self, x):
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
class CenterModelObservation:
    """Armor position at radius ``r`` from the centre, facing ``theta``."""

    def __call__(self, x):
        return [
            x[0] - x[8] * cos(x[3]),
            x[1] - x[8] * sin(x[3]),
            x[2],
            x[3],
        ]


@dataclass
class SingleModelTransition:
    """Constant acceleration in the plane, constant vertical velocity."""

    dt: float = 0.0

    def __call__(self, x):
        dt = self.dt
        return [
            x[0] + dt * x[4] + 0.5 * x[7] * dt * dt,
            x[1] + dt * x[5] + 0.5 * x[8] * dt * dt,
            x[2] + dt * x[6],
            x[3],
            x[4] + x[7] * dt,
            x[5] + x[8] * dt,
            x[6],
            x[7],
            x[8],
        ]


@dataclass
class SingleModelObservation:
    """Observes position and heading directly."""

    def __call__(self, x):
        return [x[0], x[1], x[2], x[3]]


@dataclass
class KFSingleTransition:
    """Transition matrix of planar constant velocity."""

    dt: float = 0.0

    def __call__(self, shape=(KF_SINGLE_DIM_X, KF_SINGLE_DIM_X)):
        rows, cols = shape
        matrix = np.eye(rows, cols)
        matrix[0, 4] = self.dt
        matrix[1, 5] = self.dt
        return matrix


@dataclass
class KFSingleObservation:
    """Observation matrix selecting position and heading."""

    def __call__(self, shape=(KF_SINGLE_DIM_Y, KF_SINGLE_DIM_X)):
        rows, cols = shape
        matrix = np.zeros((rows, cols))
        for index in range(min(4, rows, cols)):
            matrix[index, index] = 1.0
        return matrix