"""Linear and extended Kalman filters.

The extended filter linearises its transition and observation functions with
:class:`~openrm.jet.Jet` dual numbers; the linear filter takes functions that
build the transition and observation matrices directly.
"""

from __future__ import annotations

import numpy as np

from openrm.jet import Jet, make_variables


def _as_matrix(value, shape, name: str) -> np.ndarray:
    matrix = np.asarray(value, dtype=float)
    if matrix.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {matrix.shape}")
    return matrix.copy()


def _as_vector(value, size: int, name: str) -> np.ndarray:
    vector = np.asarray(value, dtype=float).reshape(-1)
    if vector.size != size:
        raise ValueError(f"{name} must have {size} components, got {vector.size}")
    return vector


def _check_dims(dim_x: int, dim_y: int) -> None:
    if dim_x < 1 or dim_y < 1:
        raise ValueError("state and observation dimensions must be positive")


def _linearise(func, point: np.ndarray, out_dim: int):
    """Evaluate ``func`` at ``point``; return its values and Jacobian.

    Outputs that ``func`` leaves out are zero with a zero gradient.
    """
    outputs = list(func(make_variables(point)))
    if len(outputs) > out_dim:
        raise ValueError(f"function returned {len(outputs)} values, expected {out_dim}")
    values = np.zeros(out_dim)
    jacobian = np.zeros((out_dim, point.size))
    for row, output in enumerate(outputs):
        if isinstance(output, Jet):
            values[row] = output.value
            if output.gradient.size:
                jacobian[row] = output.gradient
        else:
            values[row] = float(output)
    return values, jacobian


class EKF:
    """Extended Kalman filter with automatic Jacobians."""

    def __init__(self, dim_x, dim_y, q=None, r=None):
        _check_dims(dim_x, dim_y)
        self.dim_x = dim_x
        self.dim_y = dim_y
        self.q = np.eye(dim_x) if q is None else _as_matrix(q, (dim_x, dim_x), "Q")
        self.r = np.eye(dim_y) if r is None else _as_matrix(r, (dim_y, dim_y), "R")
        self.estimate_x = np.zeros(dim_x)
        self.p = np.eye(dim_x)
        self.predict_x = np.zeros(dim_x)
        self.predict_y = np.zeros(dim_y)
        self.jacobi_f = np.zeros((dim_x, dim_x))
        self.jacobi_h = np.zeros((dim_y, dim_x))
        self.k = np.zeros((dim_x, dim_y))

    def restart(self):
        """Reset the estimate to zero and the covariance to identity."""
        self.estimate_x = np.zeros(self.dim_x)
        self.p = np.eye(self.dim_x)

    def predict(self, func):
        """Propagate the estimate through ``func`` and return the predicted state."""
        values, jacobian = _linearise(func, self.estimate_x, self.dim_x)
        self.predict_x = values
        self.jacobi_f = jacobian
        self.p = jacobian @ self.p @ jacobian.T + self.q
        return self.predict_x.copy()

    def update(self, func, y):
        """Correct the prediction with observation ``y`` and return the estimate."""
        observed = _as_vector(y, self.dim_y, "observation")
        values, jacobian = _linearise(func, self.predict_x, self.dim_y)
        self.predict_y = values
        self.jacobi_h = jacobian
        innovation_cov = jacobian @ self.p @ jacobian.T + self.r
        self.k = self.p @ jacobian.T @ np.linalg.inv(innovation_cov)
        self.estimate_x = self.predict_x + self.k @ (observed - values)
        self.p = (np.eye(self.dim_x) - self.k @ jacobian) @ self.p
        return self.estimate_x.copy()


class KF:
    """Linear Kalman filter whose matrices come from caller-supplied builders."""

    def __init__(self, dim_x, dim_y, q=None, r=None):
        _check_dims(dim_x, dim_y)
        self.dim_x = dim_x
        self.dim_y = dim_y
        self.q = np.eye(dim_x) if q is None else _as_matrix(q, (dim_x, dim_x), "Q")
        self.r = np.eye(dim_y) if r is None else _as_matrix(r, (dim_y, dim_y), "R")
        self.estimate_x = np.zeros(dim_x)
        self.p = np.eye(dim_x)
        self.predict_x = np.zeros(dim_x)
        self.a = np.eye(dim_x)
        self.h = np.zeros((dim_y, dim_x))
        self.k = np.zeros((dim_x, dim_y))

    def restart(self):
        """Reset the estimate to zero and the covariance to identity."""
        self.estimate_x = np.zeros(self.dim_x)
        self.p = np.eye(self.dim_x)

    def predict(self, func):
        """Predict with the transition matrix ``func(shape)`` and return the state."""
        shape = (self.dim_x, self.dim_x)
        self.a = _as_matrix(func(shape), shape, "transition matrix")
        self.predict_x = self.a @ self.estimate_x
        self.p = self.a @ self.p @ self.a.T + self.q
        return self.predict_x.copy()

    def update(self, func, y):
        """Correct with observation ``y`` using the matrix ``func(shape)``."""
        observed = _as_vector(y, self.dim_y, "observation")
        shape = (self.dim_y, self.dim_x)
        self.h = _as_matrix(func(shape), shape, "observation matrix")
        innovation_cov = self.h @ self.p @ self.h.T + self.r
        self.k = self.p @ self.h.T @ np.linalg.inv(innovation_cov)
        self.estimate_x = self.predict_x + self.k @ (observed - self.h @ self.predict_x)
        self.p = (np.eye(self.dim_x) - self.k @ self.h) @ self.p
        return self.estimate_x.copy()