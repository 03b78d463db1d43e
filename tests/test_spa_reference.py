"""Reference vector checks for the full solar position pipeline."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from sunspa.contracts import ObservationRequest, SpaFunction
from sunspa.spa import compute_solar_position


def _reference_request(**overrides: object) -> ObservationRequest:
    fields: dict[str, object] = {
        "year": 2003,
        "month": 10,
        "day": 17,
        "hour": 12,
        "minute": 30,
        "second": 30.0,
        "timezone_hours": -7.0,
        "delta_ut1_s": 0.0,
        "delta_t_s": 67.0,
        "longitude_deg": -105.1786,
        "latitude_deg": 39.742476,
        "elevation_m": 1830.14,
        "pressure_mbar": 820.0,
        "temperature_c": 11.0,
        "slope_deg": 30.0,
        "azm_rotation_deg": -10.0,
        "atmos_refract_deg": 0.5667,
        "function": SpaFunction.ALL,
    }
    fields.update(overrides)
    return ObservationRequest(**fields)  # type: ignore[arg-type]


def test_reference_intermediate_values() -> None:
    """Julian day, Earth position and nutation match the published test vector."""
    result = compute_solar_position(_reference_request())

    assert result.jd == pytest.approx(2452930.312847, abs=1e-6)
    assert result.l == pytest.approx(24.018261, abs=1e-6)
    assert result.b == pytest.approx(-0.0001011219, abs=1e-9)
    assert result.r == pytest.approx(0.996542, abs=1e-6)
    assert result.h == pytest.approx(11.105902, abs=1e-6)
    assert result.del_psi == pytest.approx(-0.003998404, abs=1e-9)
    assert result.del_epsilon == pytest.approx(0.001666568, abs=1e-9)
    assert result.epsilon == pytest.approx(23.440465, abs=1e-6)


def test_reference_final_angles() -> None:
    """Zenith, azimuth and incidence match the published test vector."""
    result = compute_solar_position(_reference_request())

    assert result.zenith == pytest.approx(50.111622, abs=1e-6)
    assert result.azimuth == pytest.approx(194.340241, abs=1e-6)
    assert result.azimuth_astro == pytest.approx(14.340241, abs=1e-6)
    assert result.incidence == pytest.approx(25.187000, abs=1e-6)


def test_reference_sunrise_and_sunset_local_hours() -> None:
    """Sunrise 06:12:43 and sunset 17:20:19 local time within 30 seconds."""
    result = compute_solar_position(_reference_request())
    tolerance_hours = 30.0 / 3600.0

    assert result.sunrise == pytest.approx(6 + 12 / 60 + 43 / 3600, abs=tolerance_hours)
    assert result.sunset == pytest.approx(17 + 20 / 60 + 19 / 3600, abs=tolerance_hours)
    assert result.sunrise < result.suntransit < result.sunset
    assert not result.is_polar


def test_reference_sunrise_and_sunset_timestamps() -> None:
    """Absolute rise/set timestamps re-attach the request date and offset."""
    result = compute_solar_position(_reference_request())
    tz = timezone(timedelta(hours=-7))

    assert result.sunrise_local is not None
    assert result.sunset_local is not None
    assert result.sunrise_local.utcoffset() == timedelta(hours=-7)
    assert abs(result.sunrise_local - datetime(2003, 10, 17, 6, 12, 43, tzinfo=tz)) <= timedelta(seconds=30)
    assert abs(result.sunset_local - datetime(2003, 10, 17, 17, 20, 19, tzinfo=tz)) <= timedelta(seconds=30)


def test_equation_of_time_and_transit_are_consistent() -> None:
    """Mid-October the equation of time is near +15 minutes and solar noon falls before 12:00 local."""
    result = compute_solar_position(_reference_request())

    assert result.eot is not None
    assert 13.0 < result.eot < 16.0
    assert result.suntransit == pytest.approx(11.77, abs=0.05)
    assert 40.0 < result.sta < 45.0
    assert result.srha < 0.0 < result.ssha


def test_function_selector_limits_outputs() -> None:
    """Only the requested output subsets are populated."""
    za = compute_solar_position(_reference_request(function=SpaFunction.ZA))
    za_inc = compute_solar_position(_reference_request(function=SpaFunction.ZA_INC))
    za_rts = compute_solar_position(_reference_request(function=SpaFunction.ZA_RTS))

    assert za.incidence is None and za.sunrise is None and za.eot is None
    assert za_inc.incidence == pytest.approx(25.187000, abs=1e-6)
    assert za_inc.sunrise is None
    assert za_rts.incidence is None
    assert za_rts.sunrise is not None
    assert za.zenith == za_inc.zenith == za_rts.zenith


def test_computation_is_idempotent() -> None:
    """Identical requests produce identical results."""
    request = _reference_request()

    assert compute_solar_position(request) == compute_solar_position(request)


def test_from_datetime_matches_field_request() -> None:
    """A request built from an aware datetime reproduces the field-based request."""
    dt = datetime(2003, 10, 17, 12, 30, 30, tzinfo=timezone(timedelta(hours=-7)))
    request = ObservationRequest.from_datetime(
        dt,
        latitude_deg=39.742476,
        longitude_deg=-105.1786,
        elevation_m=1830.14,
        pressure_mbar=820.0,
        temperature_c=11.0,
        delta_t_s=67.0,
        delta_ut1_s=0.0,
        slope_deg=30.0,
        azm_rotation_deg=-10.0,
        atmos_refract_deg=0.5667,
    )

    assert request == _reference_request()
    assert compute_solar_position(request).zenith == pytest.approx(50.111622, abs=1e-6)


def test_result_to_dict_is_json_compatible() -> None:
    """to_dict exposes every field including the originating request."""
    payload = compute_solar_position(_reference_request()).to_dict()

    decoded = json.loads(json.dumps(payload))
    assert decoded["request"]["function"] == "all"
    assert decoded["zenith"] == pytest.approx(50.111622, abs=1e-6)
    assert "nu0" in decoded and "del_alpha" in decoded
