"""Nutation in longitude/obliquity and the obliquity of the ecliptic."""

from __future__ import annotations

import numpy as np

from sunspa.astro.angles import third_order_polynomial
from sunspa.astro.tables import MEAN_OBLIQUITY_COEFFS, PE_TERMS, Y_TERMS


def mean_elongation_moon_sun(jce: float) -> float:
    """X0, degrees."""
    return third_order_polynomial(1.0 / 189474.0, -0.0019142, 445267.11148, 297.85036, jce)


def mean_anomaly_sun(jce: float) -> float:
    """X1, degrees."""
    return third_order_polynomial(-1.0 / 300000.0, -0.0001603, 35999.05034, 357.52772, jce)


def mean_anomaly_moon(jce: float) -> float:
    """X2, degrees."""
    return third_order_polynomial(1.0 / 56250.0, 0.0086972, 477198.867398, 134.96298, jce)


def argument_latitude_moon(jce: float) -> float:
    """X3, degrees."""
    return third_order_polynomial(1.0 / 327270.0, -0.0036825, 483202.017538, 93.27191, jce)


def ascending_longitude_moon(jce: float) -> float:
    """X4, degrees."""
    return third_order_polynomial(1.0 / 450000.0, 0.0020708, -1934.136261, 125.04452, jce)


def fundamental_arguments(jce: float) -> tuple[float, float, float, float, float]:
    """Return (X0, X1, X2, X3, X4) for a Julian ephemeris century."""
    return (
        mean_elongation_moon_sun(jce),
        mean_anomaly_sun(jce),
        mean_anomaly_moon(jce),
        argument_latitude_moon(jce),
        ascending_longitude_moon(jce),
    )


def nutation_longitude_and_obliquity(
    jce: float, x: tuple[float, float, float, float, float]
) -> tuple[float, float]:
    """Return (delta_psi, delta_epsilon) in degrees from the 63-term series."""
    arguments = np.radians(Y_TERMS @ np.asarray(x, dtype=np.float64))
    sum_psi = np.sum((PE_TERMS[:, 0] + jce * PE_TERMS[:, 1]) * np.sin(arguments))
    sum_epsilon = np.sum((PE_TERMS[:, 2] + jce * PE_TERMS[:, 3]) * np.cos(arguments))
    return float(sum_psi) / 36000000.0, float(sum_epsilon) / 36000000.0


def ecliptic_mean_obliquity(jme: float) -> float:
    """Mean obliquity ε0 in arc seconds, a degree-10 polynomial in JME / 10."""
    u = jme / 10.0
    total = 0.0
    for coeff in reversed(MEAN_OBLIQUITY_COEFFS):
        total = total * u + coeff
    return total


def ecliptic_true_obliquity(delta_epsilon: float, epsilon0: float) -> float:
    """True obliquity ε in degrees."""
    return delta_epsilon + epsilon0 / 3600.0
