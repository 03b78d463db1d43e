"""Apparent geocentric sun position and the topocentric parallax correction."""

from __future__ import annotations

from dataclasses import dataclass
from math import asin, atan, atan2, cos, degrees, radians, sin, tan

from sunspa.astro.angles import limit_degrees
from sunspa.astro.heliocentric import (
    earth_heliocentric_latitude,
    earth_heliocentric_longitude,
    earth_radius_vector,
    geocentric_latitude,
    geocentric_longitude,
)
from sunspa.astro.nutation import (
    ecliptic_mean_obliquity,
    ecliptic_true_obliquity,
    fundamental_arguments,
    nutation_longitude_and_obliquity,
)
from sunspa.time.julian import (
    julian_century,
    julian_ephemeris_century,
    julian_ephemeris_day,
    julian_ephemeris_millennium,
)

_EARTH_FLATTENING = 0.99664719
_EARTH_RADIUS_M = 6378140.0


def aberration_correction(r_au: float) -> float:
    """Aberration correction Δτ in degrees."""
    return -20.4898 / (3600.0 * r_au)


def apparent_sun_longitude(theta: float, delta_psi: float, delta_tau: float) -> float:
    return theta + delta_psi + delta_tau


def greenwich_mean_sidereal_time(jd: float, jc: float) -> float:
    """Mean sidereal time ν0 at Greenwich in degrees, [0, 360)."""
    return limit_degrees(
        280.46061837 + 360.98564736629 * (jd - 2451545.0) + jc * jc * (0.000387933 - jc / 38710000.0)
    )


def greenwich_sidereal_time(nu0: float, delta_psi: float, epsilon: float) -> float:
    """Apparent sidereal time ν at Greenwich in degrees."""
    return nu0 + delta_psi * cos(radians(epsilon))


def geocentric_right_ascension(lamda: float, epsilon: float, beta: float) -> float:
    """Geocentric right ascension α in degrees, [0, 360)."""
    lamda_rad = radians(lamda)
    epsilon_rad = radians(epsilon)
    return limit_degrees(
        degrees(
            atan2(
                sin(lamda_rad) * cos(epsilon_rad) - tan(radians(beta)) * sin(epsilon_rad),
                cos(lamda_rad),
            )
        )
    )


def geocentric_declination(beta: float, epsilon: float, lamda: float) -> float:
    """Geocentric declination δ in degrees."""
    beta_rad = radians(beta)
    epsilon_rad = radians(epsilon)
    return degrees(
        asin(sin(beta_rad) * cos(epsilon_rad) + cos(beta_rad) * sin(epsilon_rad) * sin(radians(lamda)))
    )


def observer_hour_angle(nu: float, longitude: float, alpha: float) -> float:
    """Observer local hour angle H in degrees, [0, 360)."""
    return limit_degrees(nu + longitude - alpha)


def sun_equatorial_horizontal_parallax(r_au: float) -> float:
    return 8.794 / (3600.0 * r_au)


def right_ascension_parallax_and_topocentric_dec(
    latitude: float,
    elevation: float,
    xi: float,
    h: float,
    delta: float,
) -> tuple[float, float]:
    """Return (Δα, δ') in degrees for an observer at ``latitude``/``elevation`` metres."""
    lat_rad = radians(latitude)
    xi_rad = radians(xi)
    h_rad = radians(h)
    delta_rad = radians(delta)

    u = atan(_EARTH_FLATTENING * tan(lat_rad))
    y = _EARTH_FLATTENING * sin(u) + elevation * sin(lat_rad) / _EARTH_RADIUS_M
    x = cos(u) + elevation * cos(lat_rad) / _EARTH_RADIUS_M

    denominator = cos(delta_rad) - x * sin(xi_rad) * cos(h_rad)
    delta_alpha_rad = atan2(-x * sin(xi_rad) * sin(h_rad), denominator)
    delta_prime = degrees(atan2((sin(delta_rad) - y * sin(xi_rad)) * cos(delta_alpha_rad), denominator))

    return degrees(delta_alpha_rad), delta_prime


def topocentric_right_ascension(alpha: float, delta_alpha: float) -> float:
    return alpha + delta_alpha


def topocentric_local_hour_angle(h: float, delta_alpha: float) -> float:
    return h - delta_alpha


@dataclass(frozen=True, slots=True)
class GeocentricSun:
    """Every quantity from the Julian century to the geocentric declination for one instant."""

    jd: float
    jc: float
    jde: float
    jce: float
    jme: float
    l: float
    b: float
    r: float
    theta: float
    beta: float
    x0: float
    x1: float
    x2: float
    x3: float
    x4: float
    del_psi: float
    del_epsilon: float
    epsilon0: float
    epsilon: float
    del_tau: float
    lamda: float
    nu0: float
    nu: float
    alpha: float
    delta: float


def geocentric_sun(jd: float, delta_t: float) -> GeocentricSun:
    """Run the time scale, heliocentric, nutation and apparent stages for one Julian day."""
    jc = julian_century(jd)
    jde = julian_ephemeris_day(jd, delta_t)
    jce = julian_ephemeris_century(jde)
    jme = julian_ephemeris_millennium(jce)

    l_deg = earth_heliocentric_longitude(jme)
    b_deg = earth_heliocentric_latitude(jme)
    r_au = earth_radius_vector(jme)
    theta = geocentric_longitude(l_deg)
    beta = geocentric_latitude(b_deg)

    x = fundamental_arguments(jce)
    del_psi, del_epsilon = nutation_longitude_and_obliquity(jce, x)
    epsilon0 = ecliptic_mean_obliquity(jme)
    epsilon = ecliptic_true_obliquity(del_epsilon, epsilon0)

    del_tau = aberration_correction(r_au)
    lamda = apparent_sun_longitude(theta, del_psi, del_tau)
    nu0 = greenwich_mean_sidereal_time(jd, jc)
    nu = greenwich_sidereal_time(nu0, del_psi, epsilon)

    return GeocentricSun(
        jd=jd,
        jc=jc,
        jde=jde,
        jce=jce,
        jme=jme,
        l=l_deg,
        b=b_deg,
        r=r_au,
        theta=theta,
        beta=beta,
        x0=x[0],
        x1=x[1],
        x2=x[2],
        x3=x[3],
        x4=x[4],
        del_psi=del_psi,
        del_epsilon=del_epsilon,
        epsilon0=epsilon0,
        epsilon=epsilon,
        del_tau=del_tau,
        lamda=lamda,
        nu0=nu0,
        nu=nu,
        alpha=geocentric_right_ascension(lamda, epsilon, beta),
        delta=geocentric_declination(beta, epsilon, lamda),
    )
