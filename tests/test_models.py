import math

import numpy as np
import pytest

from openrm.filters import EKF, KF
from openrm.models import (
    CenterModelObservation,
    CenterModelTransition,
    KFSingleObservation,
    KFSingleTransition,
    SingleModelObservation,
    SingleModelTransition,
)

STATE9 = [1.0, -2.0, 0.3, 0.4, 0.5, -0.6, 0.07, 1.2, 0.25]


def test_center_transition_jacobian():
    dt = 0.02
    ekf = EKF(9, 4)
    ekf.estimate_x = np.array(STATE9)
    ekf.predict(CenterModelTransition(dt))
    expected = np.eye(9)
    for i in range(4):
        expected[i, i + 4] = dt
    assert np.allclose(ekf.jacobi_f, expected)


def test_center_transition_composes():
    one = CenterModelTransition(0.1)(STATE9)
    two = CenterModelTransition(0.05)(CenterModelTransition(0.05)(STATE9))
    assert np.allclose(one, two)


def test_center_observation_at_zero_heading():
    x = list(STATE9)
    x[3] = 0.0
    y = CenterModelObservation()(x)
    assert y[0] == pytest.approx(x[0] - x[8])
    assert y[1] == pytest.approx(x[1])
    assert y[2:] == [x[2], x[3]]


def test_center_observation_jacobian_wrt_radius():
    ekf = EKF(9, 4)
    ekf.predict_x = np.array(STATE9)
    ekf.update(CenterModelObservation(), [0.0, 0.0, 0.0, 0.0])
    theta = STATE9[3]
    assert ekf.jacobi_h[0, 8] == pytest.approx(-math.cos(theta))
    assert ekf.jacobi_h[1, 8] == pytest.approx(-math.sin(theta))
    assert ekf.jacobi_h[0, 3] == pytest.approx(STATE9[8] * math.sin(theta))


def test_single_transition_composes_exactly():
    one = SingleModelTransition(0.2)(STATE9)
    two = SingleModelTransition(0.1)(SingleModelTransition(0.1)(STATE9))
    assert np.allclose(one, two)


def test_single_transition_keeps_heading_and_rest_state():
    at_rest = [1.0, 2.0, 3.0, 0.7, 0.0, 0.0, 0.0, 0.0, 0.0]
    out = SingleModelTransition(0.5)(at_rest)
    assert out == at_rest


def test_single_observation_selects_pose():
    assert SingleModelObservation()(STATE9) == STATE9[:4]


def test_kf_single_transition_matrix():
    a = KFSingleTransition(0.1)()
    assert a.shape == (6, 6)
    rest = a.copy()
    rest[0, 4] = 0.0
    rest[1, 5] = 0.0
    assert np.array_equal(rest, np.eye(6))
    assert a[0, 4] == 0.1 and a[1, 5] == 0.1


def test_kf_single_transition_composes():
    combined = KFSingleTransition(0.1)() @ KFSingleTransition(0.2)()
    assert np.allclose(combined, KFSingleTransition(0.1 + 0.2)())


def test_kf_single_observation_selects_pose():
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    assert np.array_equal(KFSingleObservation()() @ x, x[:4])


def test_kf_single_models_drive_filter():
    kf = KF(6, 4)
    kf.predict(KFSingleTransition(0.01))
    est = kf.update(KFSingleObservation(), [1.0, 1.0, 1.0, 1.0])
    assert np.all(est[:4] > 0.0)
    assert np.allclose(kf.p, kf.p.T)