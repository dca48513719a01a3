"""Motion models for tracking single armor plates and projectile trajectories.

State layouts:

* linear track ``[x, y, z, theta, vx, vy]`` observed as ``[x, y, z, theta]``
* track ``[x, y, z, theta, vx, vy, vz, omega, ax, ay, b]`` observed as
  ``[x, y, z, theta]``
* heading track ``[x, y, z, v, vz, angle, w, a]`` observed as ``[x, y, z]``
* trajectory ``[x, y, z, vx, vy, vz, ax, ay, az]`` observed as ``[x, y, z]``

Transitions and observations of the extended filter take a state sequence
(numbers or jets) and return a list; those of the linear filter take the
matrix shape and return the matrix.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from openrm.filters import EKF
from openrm.jet import cos, sin
from openrm.timer import get_time

TRACK_V1_DIM_X = 6
TRACK_V1_DIM_Y = 4
TRACK_DIM_X = 11
TRACK_DIM_Y = 4
TRACK_V4_DIM_X = 8
TRACK_V4_DIM_Y = 3
TRAJECTORY_DIM_X = 9
TRAJECTORY_DIM_Y = 3

TRACK_KEEP = 5


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
class TrackQueueV1Transition:
    """Transition matrix of planar constant velocity."""

    dt: float = 0.0

    def __call__(self, shape=(TRACK_V1_DIM_X, TRACK_V1_DIM_X)):
        rows, cols = _require_shape(shape, 2, 6)
        matrix = np.eye(rows, cols)
        matrix[0, 4] = self.dt
        matrix[1, 5] = self.dt
        return matrix


@dataclass
class TrackQueueV1Observation:
    """Observation matrix selecting position and heading."""

    def __call__(self, shape=(TRACK_V1_DIM_Y, TRACK_V1_DIM_X)):
        rows, cols = _require_shape(shape, 4, 4)
        matrix = np.zeros((rows, cols))
        for index in range(4):
            matrix[index, index] = 1.0
        return matrix


@dataclass
class TrackQueueTransition:
    """Constant planar acceleration and angular acceleration of a tracked plate.

    The angular acceleration ``b`` is not carried over: it comes out as zero.
    """

    dt: float = 0.0

    def __call__(self, x):
        x = _require_state(x, TRACK_DIM_X)
        dt = self.dt
        return [
            x[0] + dt * x[4] + 0.5 * x[8] * dt * dt,
            x[1] + dt * x[5] + 0.5 * x[9] * dt * dt,
            x[2] + dt * x[6],
            x[3] + dt * x[7] + 0.5 * x[10] * dt * dt,
            x[4] + dt * x[8],
            x[5] + dt * x[9],
            x[6],
            x[7] + dt * x[10],
            x[8],
            x[9],
            0.0,
        ]


@dataclass
class TrackQueueObservation:
    """Observes position and heading directly."""

    def __call__(self, x):
        x = _require_state(x, TRACK_DIM_Y)
        return [x[0], x[1], x[2], x[3]]


@dataclass
class TrackQueueV4Transition:
    """Motion along a heading with speed, acceleration and turn rate."""

    dt: float = 0.0

    def __call__(self, x):
        x = _require_state(x, TRACK_V4_DIM_X)
        dt = self.dt
        heading_cos = cos(x[5])
        heading_sin = sin(x[5])
        return [
            x[0] + dt * x[3] * heading_cos + 0.5 * dt * dt * x[7] * heading_cos,
            x[1] + dt * x[3] * heading_sin + 0.5 * dt * dt * x[7] * heading_sin,
            x[2] + dt * x[4],
            x[3] + dt * x[7],
            x[4],
            x[5] + dt * x[6],
            x[6],
            x[7],
        ]


@dataclass
class TrackQueueV4Observation:
    """Observes the position."""

    def __call__(self, x):
        x = _require_state(x, TRACK_V4_DIM_Y)
        return [x[0], x[1], x[2]]


def _default_model() -> EKF:
    return EKF(TRACK_DIM_X, TRACK_DIM_Y)


@dataclass
class TrackState:
    """One tracked target: its model, last observation and update counters."""

    model: EKF = field(default_factory=_default_model)
    last_t: int = field(default_factory=get_time)
    last_pose: np.ndarray = field(default_factory=lambda: np.zeros(4))
    count: int = 0
    keep: int = TRACK_KEEP
    available: bool = False

    def refresh(self, pose, t):
        """Record a new observation of this target at time point ``t``."""
        array = np.asarray(pose, dtype=float).reshape(-1)
        if array.shape != (4,):
            raise ValueError(f"expected a pose of 4 components, got shape {array.shape}")
        self.last_t = t
        self.last_pose = array.copy()
        self.count += 1
        self.keep = TRACK_KEEP
        self.available = True


@dataclass
class TrajectoryTransition:
    """Constant acceleration in three dimensions."""

    dt: float = 0.0

    def __call__(self, x):
        x = _require_state(x, TRAJECTORY_DIM_X)
        dt = self.dt
        return [
            x[0] + dt * x[3] + 0.5 * x[6] * dt * dt,
            x[1] + dt * x[4] + 0.5 * x[7] * dt * dt,
            x[2] + dt * x[5] + 0.5 * x[8] * dt * dt,
            x[3] + dt * x[6],
            x[4] + dt * x[7],
            x[5] + dt * x[8],
            x[6],
            x[7],
            x[8],
        ]


@dataclass
class TrajectoryObservation:
    """Observes the position."""

    def __call__(self, x):
        x = _require_state(x, TRAJECTORY_DIM_Y)
        return [x[0], x[1], x[2]]