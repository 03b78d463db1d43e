"""Equation of time and the sunrise/transit/sunset solver.

Rise and set times come from three geocentric samples of the sun at UT
midnight of the previous, current and next day. Right ascension and
declination are interpolated between them for the approximate transit, rise
and set day fractions, and the rise/set fractions are then corrected by the
altitude error at each instant.

When the sun never crosses the rise/set altitude (polar day or night) every
rise/transit/set output is the ``SENTINEL`` value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import acos, cos, degrees, radians, sin

from sunspa.astro.angles import (
    dayfrac_to_local_hour,
    limit_degrees,
    limit_degrees_180,
    limit_degrees_180pm,
    limit_minutes,
    limit_zero_to_one,
)
from sunspa.astro.horizon import topocentric_elevation_angle
from sunspa.astro.tables import SUN_RADIUS_DEG
from sunspa.astro.topocentric import geocentric_sun
from sunspa.time.julian import julian_day

logger = logging.getLogger(__name__)

SENTINEL = -99999.0

# Sidereal degrees per solar day.
_SIDEREAL_RATE = 360.985647


def sun_mean_longitude(jme: float) -> float:
    """Sun mean longitude M in degrees, [0, 360)."""
    return limit_degrees(
        280.4664567
        + jme
        * (
            360007.6982779
            + jme * (0.03032028 + jme * (1 / 49931.0 + jme * (-1 / 15300.0 + jme * (-1 / 2000000.0))))
        )
    )


def equation_of_time(m: float, alpha: float, del_psi: float, epsilon: float) -> float:
    """Equation of time in minutes, near [-20, 20]."""
    return limit_minutes(4.0 * (m - 0.0057183 - alpha + del_psi * cos(radians(epsilon))))


def approx_sun_transit_time(alpha_zero: float, longitude: float, nu: float) -> float:
    """Approximate transit day fraction (unwrapped)."""
    return (alpha_zero - longitude - nu) / 360.0


def sun_hour_angle_at_rise_set(latitude: float, delta_zero: float, h0_prime: float) -> float | None:
    """Hour angle H0 at the rise/set altitude ``h0_prime``, or ``None`` if the sun never crosses it."""
    latitude_rad = radians(latitude)
    delta_zero_rad = radians(delta_zero)
    argument = (sin(radians(h0_prime)) - sin(latitude_rad) * sin(delta_zero_rad)) / (
        cos(latitude_rad) * cos(delta_zero_rad)
    )
    if abs(argument) > 1.0:
        return None
    return limit_degrees_180(degrees(acos(argument)))


def approx_sun_rise_and_set(m_transit: float, h0: float) -> tuple[float, float, float]:
    """Return wrapped (transit, rise, set) day fractions."""
    h0_dfrac = h0 / 360.0
    return (
        limit_zero_to_one(m_transit),
        limit_zero_to_one(m_transit - h0_dfrac),
        limit_zero_to_one(m_transit + h0_dfrac),
    )


def rts_alpha_delta_prime(ad: tuple[float, float, float], n: float) -> float:
    """Interpolate a (previous, current, next) day sample at day fraction ``n``."""
    a = ad[1] - ad[0]
    b = ad[2] - ad[1]

    # Right ascension jumps by 360 degrees across 0h.
    if abs(a) >= 2.0:
        a = limit_zero_to_one(a)
    if abs(b) >= 2.0:
        b = limit_zero_to_one(b)

    return ad[1] + n * (a + b + (b - a) * n) / 2.0


def sun_rise_and_set(
    m: float,
    h: float,
    delta_prime: float,
    latitude: float,
    h_prime: float,
    h0_prime: float,
) -> float:
    """Correct an approximate rise or set day fraction by its altitude error."""
    denominator = 360.0 * cos(radians(delta_prime)) * cos(radians(latitude)) * sin(radians(h_prime))
    if denominator == 0.0:
        return m
    return m + (h - h0_prime) / denominator


@dataclass(frozen=True, slots=True)
class RiseTransitSet:
    """Rise/transit/set outputs; local times are fractional hours."""

    srha: float
    ssha: float
    sta: float
    suntransit: float
    sunrise: float
    sunset: float

    @property
    def is_polar(self) -> bool:
        return self.sunrise == SENTINEL

    @classmethod
    def polar(cls) -> RiseTransitSet:
        return cls(SENTINEL, SENTINEL, SENTINEL, SENTINEL, SENTINEL, SENTINEL)


def geocentric_samples(
    jd_midnight: float,
) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
    """Geocentric (alpha, delta) triples for the day before, of and after ``jd_midnight`` with ΔT = 0."""
    samples = [geocentric_sun(jd_midnight + offset, 0.0) for offset in (-1.0, 0.0, 1.0)]
    alpha = (samples[0].alpha, samples[1].alpha, samples[2].alpha)
    delta = (samples[0].delta, samples[1].delta, samples[2].delta)
    return alpha, delta


def rise_transit_set(
    year: int,
    month: int,
    day: int,
    longitude: float,
    latitude: float,
    timezone_hours: float,
    delta_t: float,
    atmos_refract: float,
) -> RiseTransitSet:
    """Solve sunrise, transit and sunset for the calendar day of an observation."""
    h0_prime = -(SUN_RADIUS_DEG + atmos_refract)

    jd_midnight = julian_day(year, month, day, 0, 0, 0.0, 0.0, 0.0)
    nu = geocentric_sun(jd_midnight, delta_t).nu
    alpha, delta = geocentric_samples(jd_midnight)

    m_transit = approx_sun_transit_time(alpha[1], longitude, nu)
    h0 = sun_hour_angle_at_rise_set(latitude, delta[1], h0_prime)
    if h0 is None:
        logger.debug(
            "No sunrise/sunset on %04d-%02d-%02d at latitude %.4f; returning sentinels.",
            year,
            month,
            day,
            latitude,
        )
        return RiseTransitSet.polar()

    m_rts = approx_sun_rise_and_set(m_transit, h0)
    h_prime_rts: list[float] = []
    h_rts: list[float] = []
    delta_prime_rts: list[float] = []
    for m in m_rts:
        nu_i = nu + _SIDEREAL_RATE * m
        n = m + delta_t / 86400.0
        alpha_prime = rts_alpha_delta_prime(alpha, n)
        delta_prime = rts_alpha_delta_prime(delta, n)
        h_prime = limit_degrees_180pm(nu_i + longitude - alpha_prime)
        h_prime_rts.append(h_prime)
        delta_prime_rts.append(delta_prime)
        h_rts.append(topocentric_elevation_angle(latitude, delta_prime, h_prime))

    sunrise_dayfrac = sun_rise_and_set(
        m_rts[1], h_rts[1], delta_prime_rts[1], latitude, h_prime_rts[1], h0_prime
    )
    sunset_dayfrac = sun_rise_and_set(
        m_rts[2], h_rts[2], delta_prime_rts[2], latitude, h_prime_rts[2], h0_prime
    )

    return RiseTransitSet(
        srha=h_prime_rts[1],
        ssha=h_prime_rts[2],
        sta=h_rts[0],
        suntransit=dayfrac_to_local_hour(m_rts[0] - h_prime_rts[0] / 360.0, timezone_hours),
        sunrise=dayfrac_to_local_hour(sunrise_dayfrac, timezone_hours),
        sunset=dayfrac_to_local_hour(sunset_dayfrac, timezone_hours),
    )
