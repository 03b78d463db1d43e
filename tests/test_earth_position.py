"""Tests for heliocentric, nutation and topocentric stages."""

from __future__ import annotations

import pytest

from sunspa.astro.heliocentric import (
    earth_heliocentric_latitude,
    earth_heliocentric_longitude,
    earth_radius_vector,
    earth_values,
    geocentric_latitude,
    geocentric_longitude,
)
from sunspa.astro.nutation import (
    ecliptic_mean_obliquity,
    fundamental_arguments,
    nutation_longitude_and_obliquity,
)
from sunspa.astro.topocentric import geocentric_sun, right_ascension_parallax_and_topocentric_dec
from sunspa.time.julian import (
    julian_day,
    julian_ephemeris_century,
    julian_ephemeris_day,
    julian_ephemeris_millennium,
)

_JD = julian_day(2003, 10, 17, 12, 30, 30.0, 0.0, -7.0)
_JCE = julian_ephemeris_century(julian_ephemeris_day(_JD, 67.0))
_JME = julian_ephemeris_millennium(_JCE)


def test_earth_values_scales_polynomial() -> None:
    """Subset sums combine as a JME power series divided by 1e8."""
    assert earth_values([1.0e8, 2.0e8], 0.5) == pytest.approx(2.0)


def test_heliocentric_position() -> None:
    """Earth heliocentric longitude, latitude and radius for the reference instant."""
    assert earth_heliocentric_longitude(_JME) == pytest.approx(24.0182616917, abs=1e-6)
    assert earth_heliocentric_latitude(_JME) == pytest.approx(-0.0001011219, abs=1e-9)
    assert earth_radius_vector(_JME) == pytest.approx(0.9965422974, abs=1e-6)


def test_geocentric_conversion() -> None:
    """Geocentric longitude is opposite the heliocentric one; latitude flips sign."""
    assert geocentric_longitude(24.0) == 204.0
    assert geocentric_longitude(200.0) == 20.0
    assert geocentric_latitude(-0.0001) == 0.0001


def test_fundamental_arguments() -> None:
    """Moon and sun mean arguments for the reference instant.

    The published arguments carry six decimals, and their rates of several
    hundred thousand degrees per century amplify the last digit of JCE.
    """
    x = fundamental_arguments(_JCE)
    expected = (17185.861179, 1722.893218, 18234.075703, 18420.071012, 51.686951)
    for value, reference in zip(x, expected):
        assert value == pytest.approx(reference, abs=1e-5)


def test_nutation_and_obliquity() -> None:
    """Nutation in longitude/obliquity and mean obliquity for the reference instant."""
    del_psi, del_epsilon = nutation_longitude_and_obliquity(_JCE, fundamental_arguments(_JCE))

    assert del_psi == pytest.approx(-0.003998404, abs=1e-9)
    assert del_epsilon == pytest.approx(0.001666568, abs=1e-9)
    assert ecliptic_mean_obliquity(_JME) == pytest.approx(84379.672625, abs=1e-5)


def test_geocentric_sun_reference() -> None:
    """Apparent geocentric quantities for the reference instant."""
    geo = geocentric_sun(_JD, 67.0)

    assert geo.lamda == pytest.approx(204.0085519281, abs=1e-6)
    assert geo.nu0 == pytest.approx(318.515579, abs=1e-5)
    assert geo.alpha == pytest.approx(202.227408, abs=1e-5)
    assert geo.delta == pytest.approx(-9.31434, abs=1e-5)
    assert geo.del_tau == pytest.approx(-0.005711, abs=1e-6)


def test_parallax_at_sea_level_equator_meridian() -> None:
    """On the meridian the right ascension parallax vanishes and the sun appears farther from the zenith."""
    del_alpha, delta_prime = right_ascension_parallax_and_topocentric_dec(0.0, 0.0, 0.00245, 0.0, 10.0)

    assert del_alpha == pytest.approx(0.0, abs=1e-12)
    assert delta_prime > 10.0
