from __future__ import annotations

import numpy as np

DEGREE_FACTOR = 180.0 / np.pi
RADIAN_FACTOR = 1.0 / DEGREE_FACTOR

# Degree unit: `90 * DEGREE == radian(90)`.
DEGREE = RADIAN_FACTOR

TAU = 2.0 * np.pi


def degree(value: float) -> float:
    """The value taken as radians, converted to degrees."""
    return float(value) * DEGREE_FACTOR


def radian(value: float) -> float:
    """The value taken as degrees, converted to radians."""
    return float(value) * RADIAN_FACTOR


def sin(value: float) -> float:
    return float(np.sin(float(value)))


def asin(value: float) -> float:
    return float(np.arcsin(float(value)))


def cos(value: float) -> float:
    return float(np.cos(float(value)))


def acos(value: float) -> float:
    return float(np.arccos(float(value)))


def tan(value: float) -> float:
    return float(np.tan(float(value)))


def atan(value: float) -> float:
    return float(np.arctan(float(value)))


def normalized(angle: float) -> float:
    """Constrain an angle in radians to [0, 2pi), negative inputs included."""
    return float(np.fmod(TAU + np.fmod(float(angle), TAU), TAU))
