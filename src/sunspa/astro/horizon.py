"""Topocentric elevation, zenith, azimuth and surface incidence angles."""

from __future__ import annotations

from math import acos, asin, atan2, cos, degrees, radians, sin, tan

from sunspa.astro.angles import limit_degrees
from sunspa.astro.tables import SUN_RADIUS_DEG


def _clamp_unit(value: float) -> float:
    """Clamp rounding overshoot before asin/acos."""
    return max(-1.0, min(1.0, value))


def topocentric_elevation_angle(latitude: float, delta_prime: float, h_prime: float) -> float:
    """Elevation e0 without refraction, degrees."""
    lat_rad = radians(latitude)
    delta_prime_rad = radians(delta_prime)
    sin_e0 = sin(lat_rad) * sin(delta_prime_rad) + cos(lat_rad) * cos(delta_prime_rad) * cos(radians(h_prime))
    return degrees(asin(_clamp_unit(sin_e0)))


def atmospheric_refraction_correction(
    pressure: float,
    temperature: float,
    atmos_refract: float,
    e0: float,
) -> float:
    """Refraction correction Δe in degrees; zero once the sun is fully below the horizon."""
    if e0 < -(SUN_RADIUS_DEG + atmos_refract):
        return 0.0
    return (
        (pressure / 1010.0)
        * (283.0 / (273.0 + temperature))
        * 1.02
        / (60.0 * tan(radians(e0 + 10.3 / (e0 + 5.11))))
    )


def topocentric_elevation_angle_corrected(e0: float, delta_e: float) -> float:
    return e0 + delta_e


def topocentric_zenith_angle(e: float) -> float:
    return 90.0 - e


def topocentric_azimuth_angle_astro(h_prime: float, latitude: float, delta_prime: float) -> float:
    """Azimuth measured westward from south, [0, 360)."""
    h_prime_rad = radians(h_prime)
    lat_rad = radians(latitude)
    return limit_degrees(
        degrees(
            atan2(
                sin(h_prime_rad),
                cos(h_prime_rad) * sin(lat_rad) - tan(radians(delta_prime)) * cos(lat_rad),
            )
        )
    )


def topocentric_azimuth_angle(azimuth_astro: float) -> float:
    """Azimuth measured eastward from north, [0, 360)."""
    return limit_degrees(azimuth_astro + 180.0)


def surface_incidence_angle(
    zenith: float,
    azimuth_astro: float,
    azm_rotation: float,
    slope: float,
) -> float:
    """Angle between the sun direction and the normal of a tilted surface, degrees."""
    zenith_rad = radians(zenith)
    slope_rad = radians(slope)
    cos_incidence = cos(zenith_rad) * cos(slope_rad) + sin(slope_rad) * sin(zenith_rad) * cos(
        radians(azimuth_astro - azm_rotation)
    )
    return degrees(acos(_clamp_unit(cos_incidence)))
