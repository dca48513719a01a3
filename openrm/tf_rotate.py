"""Rotation matrices between the PnP, camera, head and world frames."""

from __future__ import annotations

import math

import numpy as np

_FLIP = np.array(
    [
        [0.0, 0.0, 1.0],
        [-1.0, 0.0, 0.0],
        [0.0, -1.0, 0.0],
    ]
)

_ARMOR_PITCH = -math.pi / 12.0


def _yaw(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _pitch(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]])


def _roll(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _as_rotation(matrix) -> np.ndarray:
    array = np.asarray(matrix, dtype=float)
    if array.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {array.shape}")
    return array


def pnp2cam_rotation():
    """Return the axis flip from the PnP frame to the camera frame."""
    return _FLIP.copy()


def rotate_pnp2cam(rotate_pnp):
    """Express a PnP-frame rotation in the camera frame."""
    return _FLIP @ _as_rotation(rotate_pnp)


def pnp2head_rotation(cam_yaw, cam_pitch, cam_roll):
    """Return the rotation from the PnP frame to the head frame."""
    return cam2head_rotation(cam_yaw, cam_pitch, cam_roll) @ _FLIP


def rotate_pnp2head(rotate_pnp, cam_yaw, cam_pitch, cam_roll):
    """Express a PnP-frame rotation in the head frame."""
    return pnp2head_rotation(cam_yaw, cam_pitch, cam_roll) @ _as_rotation(rotate_pnp)


def cam2head_rotation(cam_yaw, cam_pitch, cam_roll):
    """Return the rotation from the camera frame to the head frame."""
    return _yaw(cam_yaw) @ _pitch(cam_pitch) @ _roll(cam_roll)


def rotate_cam2head(rotate_cam, cam_yaw, cam_pitch, cam_roll):
    """Express a camera-frame rotation in the head frame."""
    return cam2head_rotation(cam_yaw, cam_pitch, cam_roll) @ _as_rotation(rotate_cam)


def head2world_rotation(yaw, pitch, roll=0.0):
    """Return the rotation from the head frame to the world frame."""
    return _roll(roll) @ _yaw(yaw) @ _pitch(pitch)


def rotate_head2world(rotate_head, yaw, pitch, roll=0.0):
    """Express a head-frame rotation in the world frame."""
    return head2world_rotation(yaw, pitch, roll) @ _as_rotation(rotate_head)


def yaw_to_matrix(armor_yaw):
    """Return the rotation of an armor plate with the given yaw and fixed tilt."""
    return _pitch(_ARMOR_PITCH) @ _yaw(armor_yaw)


def rotation_to_armor_yaw(rotate):
    """Return the yaw of the rotated z axis."""
    x, y, _ = _as_rotation(rotate)[:, 2]
    return math.atan2(y, x)


def rotation_to_armor_pitch(rotate):
    """Return the pitch of the rotated z axis."""
    x, y, z = _as_rotation(rotate)[:, 2]
    return math.atan2(-z, math.hypot(x, y))


def rotation_to_rune_roll(rotate):
    """Return the roll of a rune from the rotated x axis."""
    x, y, _ = _as_rotation(rotate)[:, 0]
    return -math.atan2(y, x)


def rotation_to_car_yaw(rotate):
    """Return the yaw of the rotated x axis."""
    x, y, _ = _as_rotation(rotate)[:, 0]
    return math.atan2(y, x)