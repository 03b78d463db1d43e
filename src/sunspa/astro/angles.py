"""Angle and day-fraction wrapping helpers shared by every SPA stage."""

from __future__ import annotations

from math import floor


def limit_degrees(degrees: float) -> float:
    """Reduce an angle to [0, 360)."""
    turns = degrees / 360.0
    limited = 360.0 * (turns - floor(turns))
    if limited < 0.0:
        limited += 360.0
    return limited


def limit_degrees_180pm(degrees: float) -> float:
    """Reduce an angle to the signed range [-180, 180]."""
    turns = degrees / 360.0
    limited = 360.0 * (turns - floor(turns))
    if limited < -180.0:
        limited += 360.0
    elif limited > 180.0:
        limited -= 360.0
    return limited


def limit_degrees_180(degrees: float) -> float:
    """Reduce an angle to [0, 180)."""
    half_turns = degrees / 180.0
    limited = 180.0 * (half_turns - floor(half_turns))
    if limited < 0.0:
        limited += 180.0
    return limited


def limit_zero_to_one(value: float) -> float:
    """Reduce a day fraction to [0, 1)."""
    limited = value - floor(value)
    if limited < 0.0:
        limited += 1.0
    return limited


def limit_minutes(minutes: float) -> float:
    """Bring an equation-of-time value near [-20, 20] with a single 1440 minute shift."""
    if minutes < -20.0:
        return minutes + 1440.0
    if minutes > 20.0:
        return minutes - 1440.0
    return minutes


def dayfrac_to_local_hour(dayfrac: float, timezone_hours: float) -> float:
    """Convert a UT day fraction to fractional local clock hours in [0, 24)."""
    return 24.0 * limit_zero_to_one(dayfrac + timezone_hours / 24.0)


def third_order_polynomial(a: float, b: float, c: float, d: float, x: float) -> float:
    """Evaluate ``a*x**3 + b*x**2 + c*x + d`` in Horner form."""
    return ((a * x + b) * x + c) * x + d
