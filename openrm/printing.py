"""Print labelled numeric values on one line with fixed-point formatting."""

from __future__ import annotations

from collections.abc import Sequence


def _emit(values: Sequence[float], labels: Sequence[str], precision: int,
          widths: Sequence[int]) -> None:
    fields = (
        f"{label}:{value:{width}.{precision}f}"
        for value, label, width in zip(values, labels, widths)
    )
    print("  ".join(fields))


def print1d(x, s1):
    """Print one value with four decimals."""
    _emit((x,), (s1,), 4, (8,))


def print2d(x, y, s1, s2):
    """Print two values with three decimals."""
    _emit((x, y), (s1, s2), 3, (8, 6))


def print3d(x, y, z, s1, s2, s3):
    """Print three values with two decimals."""
    _emit((x, y, z), (s1, s2, s3), 2, (6,) * 3)


def print4d(x, y, z, w, s1, s2, s3, s4):
    """Print four values with two decimals."""
    _emit((x, y, z, w), (s1, s2, s3, s4), 2, (6,) * 4)


def print5d(x, y, z, u, v, s1, s2, s3, s4, s5):
    """Print five values with two decimals."""
    _emit((x, y, z, u, v), (s1, s2, s3, s4, s5), 2, (6,) * 5)


def print6d(x, y, z, u, v, w, s1, s2, s3, s4, s5, s6):
    """Print six values with two decimals."""
    _emit((x, y, z, u, v, w), (s1, s2, s3, s4, s5, s6), 2, (6,) * 6)


def print8d(x, y, z, u, v, w, a, b, s1, s2, s3, s4, s5, s6, s7, s8):
    """Print eight values with two decimals."""
    _emit(
        (x, y, z, u, v, w, a, b),
        (s1, s2, s3, s4, s5, s6, s7, s8),
        2,
        (6,) * 8,
    )