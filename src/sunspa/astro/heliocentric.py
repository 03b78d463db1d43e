"""Earth heliocentric position and its geocentric counterpart."""

from __future__ import annotations

from collections.abc import Sequence
from math import degrees

import numpy as np

from sunspa.astro.angles import limit_degrees
from sunspa.astro.tables import B_TERMS, L_TERMS, R_TERMS


def earth_periodic_term_summation(terms: np.ndarray, jme: float) -> float:
    """Sum ``A * cos(B + C * JME)`` over one subset of periodic terms."""
    return float(np.sum(terms[:, 0] * np.cos(terms[:, 1] + terms[:, 2] * jme)))


def earth_values(term_sums: Sequence[float], jme: float) -> float:
    """Combine subset sums as a polynomial in JME scaled by 1e-8."""
    total = 0.0
    for power, term_sum in enumerate(term_sums):
        total += term_sum * jme**power
    return total / 1.0e8


def _subset_sums(table: tuple[np.ndarray, ...], jme: float) -> list[float]:
    return [earth_periodic_term_summation(terms, jme) for terms in table]


def earth_heliocentric_longitude(jme: float) -> float:
    """Heliocentric longitude L in degrees, [0, 360)."""
    return limit_degrees(degrees(earth_values(_subset_sums(L_TERMS, jme), jme)))


def earth_heliocentric_latitude(jme: float) -> float:
    """Heliocentric latitude B in degrees."""
    return degrees(earth_values(_subset_sums(B_TERMS, jme), jme))


def earth_radius_vector(jme: float) -> float:
    """Earth-sun distance R in astronomical units."""
    return earth_values(_subset_sums(R_TERMS, jme), jme)


def geocentric_longitude(l_deg: float) -> float:
    theta = l_deg + 180.0
    if theta >= 360.0:
        theta -= 360.0
    return theta


def geocentric_latitude(b_deg: float) -> float:
    return -b_deg
