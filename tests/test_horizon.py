"""Tests for elevation, refraction, azimuth and incidence angles."""

from __future__ import annotations

import pytest

from sunspa.astro.horizon import (
    atmospheric_refraction_correction,
    surface_incidence_angle,
    topocentric_azimuth_angle,
    topocentric_azimuth_angle_astro,
    topocentric_elevation_angle,
    topocentric_zenith_angle,
)
from sunspa.astro.tables import SUN_RADIUS_DEG


def test_elevation_at_meridian() -> None:
    """On the meridian the elevation is 90 - |latitude - declination|."""
    assert topocentric_elevation_angle(40.0, 10.0, 0.0) == pytest.approx(60.0)
    assert topocentric_elevation_angle(0.0, 0.0, 0.0) == pytest.approx(90.0)


def test_refraction_suppressed_below_horizon() -> None:
    """Refraction is zero once the sun is below the rise/set altitude."""
    threshold = -(SUN_RADIUS_DEG + 0.5667)

    assert atmospheric_refraction_correction(1010.0, 10.0, 0.5667, threshold - 1e-6) == 0.0
    assert atmospheric_refraction_correction(1010.0, 10.0, 0.5667, threshold) > 0.0
    assert atmospheric_refraction_correction(1010.0, 10.0, 0.5667, -30.0) == 0.0


def test_refraction_reference_value() -> None:
    """Refraction correction at the reference elevation."""
    assert atmospheric_refraction_correction(820.0, 11.0, 0.5667, 39.872046) == pytest.approx(
        0.016332, abs=1e-6
    )


def test_refraction_scales_with_pressure() -> None:
    """No atmosphere, no refraction."""
    assert atmospheric_refraction_correction(0.0, 10.0, 0.5667, 20.0) == 0.0


def test_zenith_and_azimuth_conventions() -> None:
    """Zenith complements elevation; navigational azimuth is astronomical plus 180."""
    assert topocentric_zenith_angle(39.888378) == pytest.approx(50.111622)
    assert topocentric_azimuth_angle(14.340241) == pytest.approx(194.340241)
    assert topocentric_azimuth_angle(270.0) == pytest.approx(90.0)


def test_azimuth_astro_morning_and_afternoon() -> None:
    """Negative hour angles are east of the meridian, positive are west."""
    morning = topocentric_azimuth_angle_astro(-45.0, 40.0, 0.0)
    afternoon = topocentric_azimuth_angle_astro(45.0, 40.0, 0.0)

    assert 180.0 < morning < 360.0
    assert 0.0 < afternoon < 180.0
    assert morning + afternoon == pytest.approx(360.0)


def test_surface_incidence() -> None:
    """A horizontal surface sees the zenith angle; a surface facing the sun sees zero."""
    assert surface_incidence_angle(50.0, 14.0, -10.0, 0.0) == pytest.approx(50.0)
    assert surface_incidence_angle(50.0, 14.0, 14.0, 50.0) == pytest.approx(0.0, abs=1e-5)
    assert surface_incidence_angle(50.111622, 14.340241, -10.0, 30.0) == pytest.approx(25.187, abs=1e-3)
