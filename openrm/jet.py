"""Dual numbers for forward-mode automatic differentiation.

A :class:`Jet` carries a value together with its gradient with respect to
a fixed set of variables. It is what the extended Kalman filter uses to
linearise transition and observation functions.
"""

from __future__ import annotations

import math
from numbers import Real

import numpy as np


class Jet:
    """A value and its gradient, propagated through arithmetic."""

    __slots__ = ("value", "gradient")

    def __init__(self, value, gradient=()):
        self.value = float(value)
        self.gradient = np.array(gradient, dtype=float).reshape(-1)

    def __repr__(self) -> str:
        return f"Jet({self.value!r}, {self.gradient.tolist()!r})"

    def __float__(self) -> float:
        return self.value

    def _pair(self, other):
        """Return ``(value, gradient)`` of ``other`` matched to this jet's size."""
        if isinstance(other, Jet):
            mine, theirs = self.gradient.size, other.gradient.size
            if mine == theirs:
                return other.value, other.gradient
            if theirs == 0:
                return other.value, np.zeros(mine)
            if mine == 0:
                return other.value, other.gradient
            raise ValueError(f"gradient sizes differ: {mine} and {theirs}")
        if isinstance(other, (Real, np.floating, np.integer)):
            return float(other), np.zeros(self.gradient.size)
        return None

    def _own_gradient(self, size: int) -> np.ndarray:
        if self.gradient.size == size:
            return self.gradient
        return np.zeros(size)

    def __neg__(self) -> Jet:
        return Jet(-self.value, -self.gradient)

    def __pos__(self) -> Jet:
        return Jet(self.value, self.gradient)

    def __add__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        value, grad = pair
        return Jet(self.value + value, self._own_gradient(grad.size) + grad)

    __radd__ = __add__

    def __sub__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        value, grad = pair
        return Jet(self.value - value, self._own_gradient(grad.size) - grad)

    def __rsub__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        value, grad = pair
        return Jet(value - self.value, grad - self._own_gradient(grad.size))

    def __mul__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        value, grad = pair
        own = self._own_gradient(grad.size)
        return Jet(self.value * value, self.value * grad + value * own)

    __rmul__ = __mul__

    def __truediv__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        value, grad = pair
        quotient = self.value / value
        own = self._own_gradient(grad.size)
        return Jet(quotient, (own - quotient * grad) / value)

    def __rtruediv__(self, other):
        pair = self._pair(other)
        if pair is None:
            return NotImplemented
        value, grad = pair
        quotient = value / self.value
        own = self._own_gradient(grad.size)
        return Jet(quotient, (grad - quotient * own) / self.value)

    def __pow__(self, exponent):
        if not isinstance(exponent, (Real, np.floating, np.integer)):
            return NotImplemented
        power = float(exponent)
        if power == 0.0:
            return Jet(1.0, np.zeros(self.gradient.size))
        return Jet(self.value ** power, power * self.value ** (power - 1.0) * self.gradient)


def make_variables(values):
    """Return one jet per value, each with a unit gradient along its own axis."""
    point = np.asarray(values, dtype=float).reshape(-1)
    basis = np.eye(point.size)
    return [Jet(value, row) for value, row in zip(point, basis)]


def sin(x):
    """Sine of a number or a jet."""
    if isinstance(x, Jet):
        return Jet(math.sin(x.value), math.cos(x.value) * x.gradient)
    return math.sin(float(x))


def cos(x):
    """Cosine of a number or a jet."""
    if isinstance(x, Jet):
        return Jet(math.cos(x.value), -math.sin(x.value) * x.gradient)
    return math.cos(float(x))