"""Input range checks run before any solar position computation."""

from __future__ import annotations

from collections.abc import Callable
from math import isfinite
from typing import Any

from sunspa.contracts import ObservationRequest, SpaFunction


class ValidationError(ValueError):
    """Raised for the first out-of-range field of an observation request."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason


_CORE_FIELDS = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "pressure_mbar",
    "temperature_c",
    "delta_ut1_s",
    "delta_t_s",
    "timezone_hours",
    "longitude_deg",
    "latitude_deg",
    "atmos_refract_deg",
    "elevation_m",
)
_SURFACE_FIELDS = ("slope_deg", "azm_rotation_deg")


def required_fields(function: SpaFunction) -> tuple[str, ...]:
    """Input fields checked for a function, in check order."""
    if function.wants_incidence:
        return _CORE_FIELDS + _SURFACE_FIELDS
    return _CORE_FIELDS


# (field, predicate on the value, reason) in the order they are checked.
_RANGE_CHECKS: tuple[tuple[str, Callable[[Any], bool], str], ...] = (
    ("year", lambda v: -2000 <= v <= 6000, "must be within [-2000, 6000]"),
    ("month", lambda v: 1 <= v <= 12, "must be within [1, 12]"),
    ("day", lambda v: 1 <= v <= 31, "must be within [1, 31]"),
    ("hour", lambda v: 0 <= v <= 24, "must be within [0, 24]"),
    ("minute", lambda v: 0 <= v <= 59, "must be within [0, 59]"),
    ("second", lambda v: 0 <= v < 60, "must be within [0, 60)"),
    ("pressure_mbar", lambda v: 0 <= v <= 5000, "must be within [0, 5000]"),
    ("temperature_c", lambda v: -273 < v <= 6000, "must be within (-273, 6000]"),
    ("delta_ut1_s", lambda v: -1 < v < 1, "must be within (-1, 1)"),
)

_ABS_CHECKS: tuple[tuple[str, float], ...] = (
    ("delta_t_s", 8000.0),
    ("timezone_hours", 18.0),
    ("longitude_deg", 180.0),
    ("latitude_deg", 90.0),
    ("atmos_refract_deg", 5.0),
)

_SURFACE_ABS_CHECKS: tuple[tuple[str, float], ...] = (
    ("slope_deg", 360.0),
    ("azm_rotation_deg", 360.0),
)


def _check_finite(request: ObservationRequest, fields: tuple[str, ...]) -> None:
    for name in fields:
        value = getattr(request, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(name, value, "must be a real number")
        if not isfinite(value):
            raise ValidationError(name, value, "must be finite")


def validate_request(request: ObservationRequest) -> None:
    """Raise ``ValidationError`` naming the first field outside its valid range."""
    if not isinstance(request.function, SpaFunction):
        raise ValidationError("function", request.function, "must be a SpaFunction")

    _check_finite(request, required_fields(request.function))

    for name, predicate, reason in _RANGE_CHECKS:
        value = getattr(request, name)
        if not predicate(value):
            raise ValidationError(name, value, reason)

    if request.hour == 24 and request.minute > 0:
        raise ValidationError("minute", request.minute, "must be 0 when hour is 24")
    if request.hour == 24 and request.second > 0:
        raise ValidationError("second", request.second, "must be 0 when hour is 24")

    for name, bound in _ABS_CHECKS:
        value = getattr(request, name)
        if abs(value) > bound:
            raise ValidationError(name, value, f"absolute value must not exceed {bound:g}")

    if request.elevation_m < -6_500_000:
        raise ValidationError("elevation_m", request.elevation_m, "must be at least -6500000")

    if request.function.wants_incidence:
        for name, bound in _SURFACE_ABS_CHECKS:
            value = getattr(request, name)
            if abs(value) > bound:
                raise ValidationError(name, value, f"absolute value must not exceed {bound:g}")
