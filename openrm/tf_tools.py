"""Conversions between plain arrays, poses, transforms and quaternions."""

from __future__ import annotations

import numpy as np


def _vector(data, length: int, name: str) -> np.ndarray:
    array = np.asarray(data, dtype=float).reshape(-1)
    if array.size < length:
        raise ValueError(f"{name} needs at least {length} components, got {array.size}")
    return array[:length]


def as_matrix3(input_mat):
    """Return the top-left 3x3 block of a matrix as a float64 array."""
    array = np.asarray(input_mat, dtype=float)
    if array.ndim != 2 or array.shape[0] < 3 or array.shape[1] < 3:
        raise ValueError(f"expected a matrix of at least 3x3, got shape {array.shape}")
    return array[:3, :3].copy()


def as_vec4(input_mat):
    """Return the first three entries of a column as a homogeneous 4-vector."""
    array = np.asarray(input_mat, dtype=float)
    if array.ndim == 2:
        if array.shape[0] < 3 or array.shape[1] < 1:
            raise ValueError(f"expected a column of at least 3 rows, got shape {array.shape}")
        column = array[:3, 0]
    elif array.ndim == 1:
        column = _vector(array, 3, "vector")
    else:
        raise ValueError(f"expected a vector or column matrix, got shape {array.shape}")
    return np.append(column, 1.0)


def vec3_to_vec4(input_vec3):
    """Extend a 3-vector to a homogeneous 4-vector."""
    return np.append(_vector(input_vec3, 3, "vector"), 1.0)


def pose_to_transform(input_pose):
    """Return the pure translation that moves the origin to the pose position."""
    position = _vector(input_pose, 3, "pose")
    matrix = np.eye(4)
    matrix[:3, 3] = position
    return matrix


def rt_to_transform(input_pose, input_rotate):
    """Combine a rotation and the position of a pose into one 4x4 transform."""
    matrix = np.eye(4)
    matrix[:3, :3] = as_matrix3(input_rotate)
    matrix[:3, 3] = _vector(input_pose, 3, "pose")
    return matrix


def gen_mat(data, rows, cols):
    """Build a single-precision ``rows`` x ``cols`` matrix from flat row-major data."""
    values = np.asarray(list(data), dtype=np.float32)
    if rows <= 0 or cols <= 0 or values.size != rows * cols:
        raise ValueError(f"cannot shape {values.size} values into {rows}x{cols}")
    return values.reshape(rows, cols).copy()


def quaternion_to_rotation(qx, qy, qz, qw):
    """Return the rotation matrix of a unit quaternion."""
    return np.array(
        [
            [1 - 2 * qy * qy - 2 * qz * qz, 2 * qx * qy - 2 * qz * qw, 2 * qx * qz + 2 * qy * qw],
            [2 * qx * qy + 2 * qz * qw, 1 - 2 * qx * qx - 2 * qz * qz, 2 * qy * qz - 2 * qx * qw],
            [2 * qx * qz - 2 * qy * qw, 2 * qy * qz + 2 * qx * qw, 1 - 2 * qx * qx - 2 * qy * qy],
        ]
    )


def quaternion_to_transform(qx, qy, qz, qw):
    """Return the 4x4 transform of a unit quaternion with no translation."""
    matrix = np.eye(4)
    matrix[:3, :3] = quaternion_to_rotation(qx, qy, qz, qw)
    return matrix