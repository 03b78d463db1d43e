"""Solar position helpers.

Thin convenience wrapper over ``sunspa.spa.compute_solar_position`` for
callers that only need zenith, azimuth and elevation for a datetime.
"""

from __future__ import annotations

from datetime import datetime

from sunspa.config import SpaDefaults
from sunspa.contracts import ObservationRequest, SpaFunction
from sunspa.spa import compute_solar_position


def solar_position(
    dt: datetime,
    lat_deg: float,
    lon_deg: float,
    defaults: SpaDefaults | None = None,
) -> tuple[float, float, float]:
    """Compute solar zenith/azimuth/elevation for an aware datetime and WGS84 coordinates.

    Args:
        dt: Time as a timezone-aware datetime.
        lat_deg: Latitude in degrees.
        lon_deg: Longitude in degrees (east positive).
        defaults: Site and time-correction values; read from the environment when omitted.

    Returns:
        Tuple of `(sza_deg, saz_deg, sun_elev_deg)` where:
        - `sza_deg`: topocentric solar zenith angle, refraction corrected
        - `saz_deg`: solar azimuth eastward from north, normalized to [0, 360)
        - `sun_elev_deg`: solar elevation angle
    """
    request = ObservationRequest.from_datetime(
        dt,
        latitude_deg=lat_deg,
        longitude_deg=lon_deg,
        defaults=defaults,
        function=SpaFunction.ZA,
    )
    result = compute_solar_position(request)
    return (result.zenith, result.azimuth, result.e)
