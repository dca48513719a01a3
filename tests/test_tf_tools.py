import math

import numpy as np
import pytest

from openrm import tf_tools
from openrm.tf_rotate import cam2head_rotation


def test_as_matrix3_takes_top_left_block():
    source = np.arange(16, dtype=np.float32).reshape(4, 4)
    result = tf_tools.as_matrix3(source)
    assert result.dtype == np.float64
    assert np.array_equal(result, source[:3, :3])


def test_as_matrix3_rejects_small_input():
    with pytest.raises(ValueError):
        tf_tools.as_matrix3([[1.0, 2.0], [3.0, 4.0]])


def test_as_vec4_from_column():
    result = tf_tools.as_vec4([[1.5], [2.5], [3.5]])
    assert np.allclose(result, [1.5, 2.5, 3.5, 1.0])


def test_as_vec4_from_flat_vector():
    result = tf_tools.as_vec4(np.array([4.0, 5.0, 6.0], dtype=np.float32))
    assert np.allclose(result, [4.0, 5.0, 6.0, 1.0])


def test_vec3_to_vec4():
    assert np.allclose(tf_tools.vec3_to_vec4([7.0, 8.0, 9.0]), [7.0, 8.0, 9.0, 1.0])


def test_vec3_to_vec4_rejects_short_vector():
    with pytest.raises(ValueError):
        tf_tools.vec3_to_vec4([1.0, 2.0])


def test_pose_to_transform_moves_origin_to_pose():
    matrix = tf_tools.pose_to_transform([1.0, 2.0, 3.0, 1.0])
    assert np.allclose(matrix @ [0.0, 0.0, 0.0, 1.0], [1.0, 2.0, 3.0, 1.0])
    assert np.allclose(matrix[:3, :3], np.eye(3))


def test_rt_to_transform_blocks():
    rotation = cam2head_rotation(0.3, -0.2, 0.1)
    matrix = tf_tools.rt_to_transform([1.0, -1.0, 0.5, 1.0], rotation)
    assert np.allclose(matrix[:3, :3], rotation)
    assert np.allclose(matrix[:3, 3], [1.0, -1.0, 0.5])
    assert np.allclose(matrix[3], [0.0, 0.0, 0.0, 1.0])


def test_gen_mat_row_major_float32():
    result = tf_tools.gen_mat([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], 2, 3)
    assert result.dtype == np.float32
    assert result.shape == (2, 3)
    assert np.array_equal(result[1], np.array([4.0, 5.0, 6.0], dtype=np.float32))


def test_gen_mat_rejects_size_mismatch():
    with pytest.raises(ValueError):
        tf_tools.gen_mat([1.0, 2.0, 3.0], 2, 2)


def test_identity_quaternion():
    assert np.allclose(tf_tools.quaternion_to_rotation(0.0, 0.0, 0.0, 1.0), np.eye(3))


def test_quaternion_about_z_matches_yaw_rotation():
    angle = 0.9
    q = (0.0, 0.0, math.sin(angle / 2), math.cos(angle / 2))
    assert np.allclose(tf_tools.quaternion_to_rotation(*q), cam2head_rotation(angle, 0.0, 0.0))


def test_quaternion_rotation_is_orthonormal():
    q = np.array([0.1, -0.4, 0.3, 0.8])
    q /= np.linalg.norm(q)
    rotation = tf_tools.quaternion_to_rotation(*q)
    assert np.allclose(rotation @ rotation.T, np.eye(3))
    assert math.isclose(np.linalg.det(rotation), 1.0)


def test_quaternion_to_transform_embeds_rotation():
    q = np.array([0.2, 0.1, -0.3, 0.9])
    q /= np.linalg.norm(q)
    matrix = tf_tools.quaternion_to_transform(*q)
    assert np.allclose(matrix[:3, :3], tf_tools.quaternion_to_rotation(*q))
    assert np.allclose(matrix[:3, 3], 0.0)
    assert np.allclose(matrix[3], [0.0, 0.0, 0.0, 1.0])