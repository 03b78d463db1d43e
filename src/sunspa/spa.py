"""Solar Position Algorithm pipeline.

``compute_solar_position`` validates an ``ObservationRequest`` and runs the
NREL SPA stages in order: time scales, Earth heliocentric position, nutation
and obliquity, apparent geocentric position, topocentric parallax,
elevation/azimuth and, depending on the requested function, the surface
incidence angle and the sunrise/transit/sunset solver.

The function is pure. Each call builds its own intermediate values and
returns a frozen ``SpaResult``, so concurrent callers need no locking.
"""

from __future__ import annotations

import logging

from sunspa.astro.horizon import (
    atmospheric_refraction_correction,
    surface_incidence_angle,
    topocentric_azimuth_angle,
    topocentric_azimuth_angle_astro,
    topocentric_elevation_angle,
    topocentric_elevation_angle_corrected,
    topocentric_zenith_angle,
)
from sunspa.astro.rts import equation_of_time, rise_transit_set, sun_mean_longitude
from sunspa.astro.topocentric import (
    geocentric_sun,
    observer_hour_angle,
    right_ascension_parallax_and_topocentric_dec,
    sun_equatorial_horizontal_parallax,
    topocentric_local_hour_angle,
    topocentric_right_ascension,
)
from sunspa.contracts import ObservationRequest, SpaResult
from sunspa.time.julian import julian_day
from sunspa.validation import validate_request

logger = logging.getLogger(__name__)


def compute_solar_position(request: ObservationRequest) -> SpaResult:
    """Compute the sun position for ``request``.

    Raises:
        ValidationError: if any input required by ``request.function`` is out of range.
    """
    validate_request(request)
    logger.debug(
        "Computing solar position function=%s date=%04d-%02d-%02d lat=%.6f lon=%.6f",
        request.function,
        request.year,
        request.month,
        request.day,
        request.latitude_deg,
        request.longitude_deg,
    )

    jd = julian_day(
        request.year,
        request.month,
        request.day,
        request.hour,
        request.minute,
        request.second,
        request.delta_ut1_s,
        request.timezone_hours,
    )
    geo = geocentric_sun(jd, request.delta_t_s)

    h = observer_hour_angle(geo.nu, request.longitude_deg, geo.alpha)
    xi = sun_equatorial_horizontal_parallax(geo.r)
    del_alpha, delta_prime = right_ascension_parallax_and_topocentric_dec(
        request.latitude_deg, request.elevation_m, xi, h, geo.delta
    )
    alpha_prime = topocentric_right_ascension(geo.alpha, del_alpha)
    h_prime = topocentric_local_hour_angle(h, del_alpha)

    e0 = topocentric_elevation_angle(request.latitude_deg, delta_prime, h_prime)
    del_e = atmospheric_refraction_correction(
        request.pressure_mbar, request.temperature_c, request.atmos_refract_deg, e0
    )
    e = topocentric_elevation_angle_corrected(e0, del_e)

    zenith = topocentric_zenith_angle(e)
    azimuth_astro = topocentric_azimuth_angle_astro(h_prime, request.latitude_deg, delta_prime)
    azimuth = topocentric_azimuth_angle(azimuth_astro)

    extra: dict[str, float] = {}
    if request.function.wants_incidence:
        extra["incidence"] = surface_incidence_angle(
            zenith, azimuth_astro, request.azm_rotation_deg, request.slope_deg
        )
    if request.function.wants_rts:
        m = sun_mean_longitude(geo.jme)
        extra["eot"] = equation_of_time(m, geo.alpha, geo.del_psi, geo.epsilon)
        rts = rise_transit_set(
            request.year,
            request.month,
            request.day,
            request.longitude_deg,
            request.latitude_deg,
            request.timezone_hours,
            request.delta_t_s,
            request.atmos_refract_deg,
        )
        extra.update(
            srha=rts.srha,
            ssha=rts.ssha,
            sta=rts.sta,
            suntransit=rts.suntransit,
            sunrise=rts.sunrise,
            sunset=rts.sunset,
        )

    return SpaResult(
        request=request,
        jd=geo.jd,
        jc=geo.jc,
        jde=geo.jde,
        jce=geo.jce,
        jme=geo.jme,
        l=geo.l,
        b=geo.b,
        r=geo.r,
        theta=geo.theta,
        beta=geo.beta,
        x0=geo.x0,
        x1=geo.x1,
        x2=geo.x2,
        x3=geo.x3,
        x4=geo.x4,
        del_psi=geo.del_psi,
        del_epsilon=geo.del_epsilon,
        epsilon0=geo.epsilon0,
        epsilon=geo.epsilon,
        del_tau=geo.del_tau,
        lamda=geo.lamda,
        nu0=geo.nu0,
        nu=geo.nu,
        alpha=geo.alpha,
        delta=geo.delta,
        h=h,
        xi=xi,
        del_alpha=del_alpha,
        delta_prime=delta_prime,
        alpha_prime=alpha_prime,
        h_prime=h_prime,
        e0=e0,
        del_e=del_e,
        e=e,
        zenith=zenith,
        azimuth_astro=azimuth_astro,
        azimuth=azimuth,
        **extra,
    )
