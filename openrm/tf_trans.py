"""Homogeneous transforms between the PnP, camera, head, barrel and world frames.

Poses are 4-vectors ``[x, y, z, w]``. The first three components are a
position and the fourth is passed through unchanged by the pose transforms.
"""

from __future__ import annotations

import math

import numpy as np

_PNP2CAM = np.array(
    [
        [0.0, 0.0, 0.001, 0.0],
        [-0.001, 0.0, 0.0, 0.0],
        [0.0, -0.001, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]
)


def _yaw(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _pitch(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _roll(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _translation(dx: float, dy: float, dz: float) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = (dx, dy, dz)
    return matrix


def _as_pose(pose) -> np.ndarray:
    array = np.asarray(pose, dtype=float).reshape(-1)
    if array.shape != (4,):
        raise ValueError(f"expected a pose of 4 components, got shape {array.shape}")
    return array


def _apply(matrix: np.ndarray, pose) -> np.ndarray:
    """Transform the position of ``pose`` and keep its fourth component."""
    source = _as_pose(pose)
    point = np.append(source[:3], 1.0)
    moved = matrix @ point
    return np.array([moved[0], moved[1], moved[2], source[3]])


def pnp2cam_transform():
    """Return the transform from PnP millimetres to camera-frame metres."""
    return _PNP2CAM.copy()


def trans_pnp2cam(pose_pnp):
    """Move a PnP-frame pose into the camera frame."""
    return _apply(_PNP2CAM, pose_pnp)


def cam2head_transform(cam_dx, cam_dy, cam_dz, cam_yaw, cam_pitch, cam_roll):
    """Return the transform from the camera frame to the head frame."""
    return (
        _translation(cam_dx, cam_dy, cam_dz)
        @ _yaw(cam_yaw)
        @ _pitch(cam_pitch)
        @ _roll(cam_roll)
    )


def trans_cam2head(pose_cam, cam_dx, cam_dy, cam_dz, cam_yaw, cam_pitch, cam_roll):
    """Move a camera-frame pose into the head frame."""
    matrix = cam2head_transform(cam_dx, cam_dy, cam_dz, cam_yaw, cam_pitch, cam_roll)
    return _apply(matrix, pose_cam)


def pnp2head_transform(cam_dx, cam_dy, cam_dz, cam_yaw, cam_pitch, cam_roll):
    """Return the transform from the PnP frame to the head frame."""
    return cam2head_transform(cam_dx, cam_dy, cam_dz, cam_yaw, cam_pitch, cam_roll) @ _PNP2CAM


def trans_pnp2head(pose_pnp, cam_dx, cam_dy, cam_dz, cam_yaw, cam_pitch, cam_roll):
    """Move a PnP-frame pose into the head frame."""
    matrix = pnp2head_transform(cam_dx, cam_dy, cam_dz, cam_yaw, cam_pitch, cam_roll)
    return _apply(matrix, pose_pnp)


def barrel2head_pose(barrel_dx, barrel_dy, barrel_dz, barrel_yaw=0.0, barrel_pitch=0.0):
    """Return the barrel muzzle position in the head frame as a homogeneous 4-vector."""
    point = np.array([barrel_dx, barrel_dy, barrel_dz, 1.0])
    return _yaw(barrel_yaw) @ _pitch(barrel_pitch) @ point


def barrel2axis_pose(
    pitch,
    barrel_dx=0.0,
    barrel_dy=0.0,
    barrel_dz=0.0,
    barrel_yaw=0.0,
    barrel_pitch=0.0,
    head_dx=0.0,
    head_dy=0.0,
    head_dz=0.0,
):
    """Return the barrel muzzle position relative to the yaw axis for a gimbal pitch."""
    point = np.array([barrel_dx, barrel_dy, barrel_dz, 1.0])
    return (
        _translation(head_dx, head_dy, head_dz)
        @ _pitch(pitch)
        @ _yaw(barrel_yaw)
        @ _pitch(barrel_pitch)
        @ point
    )


def barrel2world_pose(
    yaw,
    pitch,
    barrel_dx=0.0,
    barrel_dy=0.0,
    barrel_dz=0.0,
    barrel_yaw=0.0,
    barrel_pitch=0.0,
    head_dx=0.0,
    head_dy=0.0,
    head_dz=0.0,
):
    """Return the barrel muzzle position in the world frame for a gimbal yaw and pitch."""
    point = np.array([barrel_dx, barrel_dy, barrel_dz, 1.0])
    return (
        _yaw(yaw)
        @ _translation(head_dx, head_dy, head_dz)
        @ _pitch(pitch)
        @ _yaw(barrel_yaw)
        @ _pitch(barrel_pitch)
        @ point
    )


def head2world_transform(yaw, pitch, roll=0.0, head_dx=0.0, head_dy=0.0, head_dz=0.0):
    """Return the transform from the head frame to the world frame.

    The pitch axis sits at offset ``(head_dx, head_dy, head_dz)`` from the yaw
    axis; the roll is applied last, about the world x axis.
    """
    return (
        _roll(roll)
        @ _yaw(yaw)
        @ _translation(head_dx, head_dy, head_dz)
        @ _pitch(pitch)
    )


def trans_head2world(pose_head, yaw, pitch, roll=0.0, head_dx=0.0, head_dy=0.0, head_dz=0.0):
    """Move a head-frame pose into the world frame."""
    matrix = head2world_transform(yaw, pitch, roll, head_dx, head_dy, head_dz)
    return _apply(matrix, pose_head)


def single_yaw_transform(yaw, dx, dy, dz):
    """Return a transform made of a rotation about z followed by a translation."""
    matrix = _yaw(yaw)
    matrix[:3, 3] = (dx, dy, dz)
    return matrix