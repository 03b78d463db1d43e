"""Environment-driven defaults for building observation requests."""

from __future__ import annotations

import os
from dataclasses import dataclass

_ENV_PREFIX = "SUNSPA_"


@dataclass(frozen=True, slots=True)
class SpaDefaults:
    """Fallback site and time-correction values used by request builders."""

    pressure_mbar: float = 1013.25
    temperature_c: float = 12.0
    atmos_refract_deg: float = 0.5667
    delta_t_s: float = 0.0
    delta_ut1_s: float = 0.0
    elevation_m: float = 0.0


def _env_float(name: str, default: float) -> float:
    """Read a float from ``SUNSPA_<NAME>`` or return the default."""
    key = f"{_ENV_PREFIX}{name}"
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc


def load_defaults() -> SpaDefaults:
    """Resolve defaults from the environment, falling back to built-in values."""
    base = SpaDefaults()
    return SpaDefaults(
        pressure_mbar=_env_float("PRESSURE_MBAR", base.pressure_mbar),
        temperature_c=_env_float("TEMPERATURE_C", base.temperature_c),
        atmos_refract_deg=_env_float("ATMOS_REFRACT_DEG", base.atmos_refract_deg),
        delta_t_s=_env_float("DELTA_T_S", base.delta_t_s),
        delta_ut1_s=_env_float("DELTA_UT1_S", base.delta_ut1_s),
        elevation_m=_env_float("ELEVATION_M", base.elevation_m),
    )
