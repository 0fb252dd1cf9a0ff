"""
Catalog of the weather parameters published for a Cloudwatcher.

The five always-on parameters are registered for every device. Optional
parameters are registered only when the first snapshot reports their reading.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterDefinition:
    name: str
    label: str
    attr: str
    minimum: float
    maximum: float
    step: float
    optional: bool = False
    critical: bool = False


WEATHER_PARAMETERS: tuple[ParameterDefinition, ...] = (
    ParameterDefinition("WEATHER_SAFE", "Safe", "safe", 1, 1, 0, critical=True),
    ParameterDefinition("WEATHER_SWITCH", "Switch", "switch", 1, 1, 0),
    ParameterDefinition("WEATHER_SKYTEMP", "Sky Temperature [°C]", "clouds", -100, -20, 10, critical=True),
    ParameterDefinition("WEATHER_TEMP", "Temperature [°C]", "temperature", -30, 50, 10),
    ParameterDefinition("WEATHER_SKY_QUALITY", "Sky Brightness [mag/arcsec^2]", "sky_quality", 15, 23, 10),
    ParameterDefinition("WEATHER_WIND", "Wind [km/h]", "wind", 0, 40, 10, optional=True, critical=True),
    ParameterDefinition("WEATHER_GUST", "Gust [km/h]", "gust", 0, 40, 10, optional=True, critical=True),
    ParameterDefinition("WEATHER_RAIN", "Rain [a.u.]", "rain", 2900, 3200, 10, optional=True, critical=True),
    ParameterDefinition("WEATHER_HUMIDITY", "Humidity [%]", "humidity", 0, 100, 0, optional=True),
    ParameterDefinition("WEATHER_DEWPOINT", "Dewpoint [°C]", "dew_point", -30, 50, 0, optional=True),
    ParameterDefinition("WEATHER_ABSPRESS", "Absolute Pressure [mbar]", "abs_pressure", 500, 1500, 0, optional=True),
    ParameterDefinition("WEATHER_RELPRESS", "Relative Pressure [mbar]", "rel_pressure", 500, 1500, 0, optional=True),
)

PARAMETERS_BY_NAME: dict[str, ParameterDefinition] = {p.name: p for p in WEATHER_PARAMETERS}
