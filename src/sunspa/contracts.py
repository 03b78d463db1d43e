"""Core data contracts for solar position requests and results."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from sunspa.astro.rts import SENTINEL
from sunspa.config import SpaDefaults, load_defaults
from sunspa.time.clock import local_hour_to_datetime, timezone_hours


class SpaFunction(StrEnum):
    """Output subsets a caller can request."""

    ZA = "za"
    ZA_INC = "za_inc"
    ZA_RTS = "za_rts"
    ALL = "all"

    @property
    def wants_incidence(self) -> bool:
        """True when the surface incidence angle is computed."""
        return self in (SpaFunction.ZA_INC, SpaFunction.ALL)

    @property
    def wants_rts(self) -> bool:
        """True when equation of time and rise/transit/set are computed."""
        return self in (SpaFunction.ZA_RTS, SpaFunction.ALL)


@dataclass(frozen=True, slots=True)
class ObservationRequest:
    """Observer, instant and atmosphere for one solar position computation.

    Calendar fields are local clock time in the zone ``timezone_hours`` east of
    UTC. Longitude is positive east, latitude positive north. Surface slope and
    azimuth rotation (from south, negative east) are only read for functions
    that compute the incidence angle.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float
    timezone_hours: float
    longitude_deg: float
    latitude_deg: float
    elevation_m: float = 0.0
    pressure_mbar: float = 1013.25
    temperature_c: float = 12.0
    delta_ut1_s: float = 0.0
    delta_t_s: float = 0.0
    slope_deg: float = 0.0
    azm_rotation_deg: float = 0.0
    atmos_refract_deg: float = 0.5667
    function: SpaFunction = SpaFunction.ALL

    @classmethod
    def from_datetime(
        cls,
        dt: datetime,
        latitude_deg: float,
        longitude_deg: float,
        *,
        defaults: SpaDefaults | None = None,
        **overrides: Any,
    ) -> ObservationRequest:
        """Build a request from an aware datetime; remaining fields come from ``defaults``.

        The timezone offset is taken from ``dt`` itself. Without explicit
        ``defaults`` the environment-driven values from ``load_defaults`` apply.
        """
        if dt.tzinfo is None:
            raise ValueError("dt must be timezone-aware.")
        resolved = defaults if defaults is not None else load_defaults()
        fields: dict[str, Any] = {
            "year": dt.year,
            "month": dt.month,
            "day": dt.day,
            "hour": dt.hour,
            "minute": dt.minute,
            "second": dt.second + dt.microsecond / 1_000_000.0,
            "timezone_hours": timezone_hours(dt),
            "longitude_deg": longitude_deg,
            "latitude_deg": latitude_deg,
            "elevation_m": resolved.elevation_m,
            "pressure_mbar": resolved.pressure_mbar,
            "temperature_c": resolved.temperature_c,
            "delta_ut1_s": resolved.delta_ut1_s,
            "delta_t_s": resolved.delta_t_s,
            "atmos_refract_deg": resolved.atmos_refract_deg,
        }
        fields.update(overrides)
        return cls(**fields)


@dataclass(frozen=True, slots=True)
class SpaResult:
    """Every intermediate and final quantity of one computation.

    Angles are degrees unless noted. ``incidence`` is ``None`` unless the
    function requested it; ``eot`` and the rise/transit/set fields are ``None``
    unless rise/transit/set was requested. In polar day or night the
    rise/transit/set fields hold ``SENTINEL``.
    """

    request: ObservationRequest
    jd: float
    jc: float
    jde: float
    jce: float
    jme: float
    l: float
    b: float
    r: float  # AU
    theta: float
    beta: float
    x0: float
    x1: float
    x2: float
    x3: float
    x4: float
    del_psi: float
    del_epsilon: float
    epsilon0: float  # arc seconds
    epsilon: float
    del_tau: float
    lamda: float
    nu0: float
    nu: float
    alpha: float
    delta: float
    h: float
    xi: float
    del_alpha: float
    delta_prime: float
    alpha_prime: float
    h_prime: float
    e0: float
    del_e: float
    e: float
    zenith: float
    azimuth_astro: float
    azimuth: float
    incidence: float | None = None
    eot: float | None = None  # minutes
    srha: float | None = None
    ssha: float | None = None
    sta: float | None = None
    suntransit: float | None = None  # fractional local hours
    sunrise: float | None = None
    sunset: float | None = None

    @property
    def is_polar(self) -> bool:
        """True when rise/transit/set was requested and the sun does not rise or set."""
        return self.sunrise == SENTINEL

    def _local_datetime(self, hours: float | None) -> datetime | None:
        if hours is None or hours == SENTINEL:
            return None
        req = self.request
        return local_hour_to_datetime(req.year, req.month, req.day, hours, req.timezone_hours)

    @property
    def sunrise_local(self) -> datetime | None:
        """Sunrise on the request date in the request's fixed-offset zone."""
        return self._local_datetime(self.sunrise)

    @property
    def sunset_local(self) -> datetime | None:
        """Sunset on the request date in the request's fixed-offset zone."""
        return self._local_datetime(self.sunset)

    @property
    def suntransit_local(self) -> datetime | None:
        """Solar noon on the request date in the request's fixed-offset zone."""
        return self._local_datetime(self.suntransit)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the result to a JSON-compatible dictionary."""
        payload = asdict(self)
        payload["request"]["function"] = str(self.request.function)
        return payload
