"""Julian day and ephemeris time scale conversions."""

from __future__ import annotations

_J2000 = 2451545.0
_GREGORIAN_START_JD = 2299160.0


def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: float,
    delta_ut1: float,
    timezone_hours: float,
) -> float:
    """Return the Julian day of a local civil time.

    The local time is shifted to UT with ``timezone_hours`` and corrected to
    UT1 with ``delta_ut1`` seconds. Months before March count as months 13
    and 14 of the previous year. Both calendar terms are truncated toward
    zero, and the Gregorian correction only applies after 1582-10-15.
    """
    day_decimal = day + (hour - timezone_hours + (minute + (second + delta_ut1) / 60.0) / 60.0) / 24.0

    if month < 3:
        month += 12
        year -= 1

    jd = float(int(365.25 * (year + 4716.0))) + float(int(30.6001 * (month + 1))) + day_decimal - 1524.5

    if jd > _GREGORIAN_START_JD:
        a = float(int(year / 100))
        jd += 2.0 - a + float(int(a / 4.0))

    return jd


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - _J2000) / 36525.0


def julian_ephemeris_day(jd: float, delta_t: float) -> float:
    """Julian ephemeris day for a ΔT given in seconds."""
    return jd + delta_t / 86400.0


def julian_ephemeris_century(jde: float) -> float:
    return (jde - _J2000) / 36525.0


def julian_ephemeris_millennium(jce: float) -> float:
    return jce / 10.0
