"""Frame transforms, ballistics, Kalman filters, motion models and serial utilities for robot aiming."""

__version__ = "1.0.0"