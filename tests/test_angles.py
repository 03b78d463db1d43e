"""Tests for angle and day-fraction wrapping helpers."""

from __future__ import annotations

import pytest

from sunspa.astro.angles import (
    dayfrac_to_local_hour,
    limit_degrees,
    limit_degrees_180,
    limit_degrees_180pm,
    limit_minutes,
    limit_zero_to_one,
    third_order_polynomial,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, 0.0), (360.0, 0.0), (720.0, 0.0), (-30.0, 330.0), (370.5, 10.5), (-725.0, 355.0)],
)
def test_limit_degrees(value: float, expected: float) -> None:
    """Angles reduce to [0, 360)."""
    limited = limit_degrees(value)
    assert 0.0 <= limited < 360.0
    assert limited == pytest.approx(expected, abs=1e-9)


def test_limit_degrees_180pm() -> None:
    """Angles reduce to the signed half-turn range."""
    assert limit_degrees_180pm(190.0) == pytest.approx(-170.0)
    assert limit_degrees_180pm(-190.0) == pytest.approx(170.0)
    assert limit_degrees_180pm(45.0) == pytest.approx(45.0)
    assert limit_degrees_180pm(-45.0) == pytest.approx(-45.0)


def test_limit_degrees_180() -> None:
    """Angles reduce to [0, 180)."""
    assert limit_degrees_180(190.0) == pytest.approx(10.0)
    assert limit_degrees_180(-10.0) == pytest.approx(170.0)
    assert limit_degrees_180(90.0) == pytest.approx(90.0)


def test_limit_zero_to_one() -> None:
    """Day fractions reduce to [0, 1)."""
    assert limit_zero_to_one(-0.25) == pytest.approx(0.75)
    assert limit_zero_to_one(1.25) == pytest.approx(0.25)
    assert limit_zero_to_one(0.0) == 0.0


def test_limit_minutes_applies_one_correction_only() -> None:
    """Equation-of-time minutes shift by a single day at most."""
    assert limit_minutes(1435.0) == pytest.approx(-5.0)
    assert limit_minutes(-1435.0) == pytest.approx(5.0)
    assert limit_minutes(12.5) == 12.5
    assert limit_minutes(3000.0) == pytest.approx(1560.0)


def test_dayfrac_to_local_hour() -> None:
    """UT day fractions convert to local clock hours."""
    assert dayfrac_to_local_hour(0.5, -7.0) == pytest.approx(5.0)
    assert dayfrac_to_local_hour(0.9, 5.0) == pytest.approx(2.6)
    assert dayfrac_to_local_hour(0.0, 0.0) == 0.0


def test_third_order_polynomial() -> None:
    """Horner evaluation of a cubic."""
    assert third_order_polynomial(1.0, 2.0, 3.0, 4.0, 2.0) == 26.0
    assert third_order_polynomial(0.0, 0.0, 0.0, 7.0, 123.0) == 7.0
