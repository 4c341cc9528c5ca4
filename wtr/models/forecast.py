"""Forecast data models: a Forecast owns its days, each day owns its hours.

Numeric fields are ``None`` when the source document omitted them or
carried a value that could not be read as the expected type.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum


class Weather(IntEnum):
    UNDEFINED = 0
    CLEAR = 1
    SCATTERED_CLOUDS = 2
    CLOUDY = 3
    OVERCAST = 4
    SCATTERED_CLOUDS_LIGHT_RAIN = 5
    CLOUDY_LIGHT_RAIN = 6
    OVERCAST_LIGHT_RAIN = 7
    SCATTERED_CLOUDS_MODERATE_RAIN = 8
    CLOUDY_MODERATE_RAIN = 9
    OVERCAST_MODERATE_RAIN = 10
    SCATTERED_CLOUDS_THUNDERSTORM = 11
    CLOUDY_THUNDERSTORM = 12
    OVERCAST_THUNDERSTORM = 13
    SCATTERED_CLOUDS_THUNDERSTORM_HAIL = 14
    CLOUDY_THUNDERSTORM_HAIL = 15
    OVERCAST_THUNDERSTORM_HAIL = 16
    SCATTERED_CLOUDS_SNOW = 17
    CLOUDY_SNOW = 18
    OVERCAST_SNOW = 19
    SCATTERED_CLOUDS_SLEET = 20
    CLOUDY_SLEET = 21
    OVERCAST_SLEET = 22


_DESCRIPTIONS: dict[Weather, str] = {
    Weather.CLEAR: "Clear",
    Weather.SCATTERED_CLOUDS: "Scattered clouds",
    Weather.CLOUDY: "Cloudy",
    Weather.OVERCAST: "Overcast",
    Weather.SCATTERED_CLOUDS_LIGHT_RAIN: "Scattered clouds with light rain",
    Weather.CLOUDY_LIGHT_RAIN: "Cloudy with light rain",
    Weather.OVERCAST_LIGHT_RAIN: "Overcast with light rain",
    Weather.SCATTERED_CLOUDS_MODERATE_RAIN: "Scattered clouds with moderate rain",
    Weather.CLOUDY_MODERATE_RAIN: "Cloudy with moderate rain",
    Weather.OVERCAST_MODERATE_RAIN: "Overcast with moderate rain",
    Weather.SCATTERED_CLOUDS_THUNDERSTORM: "Scattered clouds with thunderstorms",
    Weather.CLOUDY_THUNDERSTORM: "Cloudy with thunderstorms",
    Weather.OVERCAST_THUNDERSTORM: "Overcast with thunderstorms",
    Weather.SCATTERED_CLOUDS_THUNDERSTORM_HAIL: "Scattered clouds with thunderstorms and hailstorms",
    Weather.CLOUDY_THUNDERSTORM_HAIL: "Cloudy with thunderstorms and hailstorms",
    Weather.OVERCAST_THUNDERSTORM_HAIL: "Overcast with thunderstorms and hailstorms",
    Weather.SCATTERED_CLOUDS_SNOW: "Scattered clouds with snow",
    Weather.CLOUDY_SNOW: "Cloudy with snow",
    Weather.OVERCAST_SNOW: "Overcast with snow",
    Weather.SCATTERED_CLOUDS_SLEET: "Scattered clouds with sleet",
    Weather.CLOUDY_SLEET: "Cloudy with sleet",
    Weather.OVERCAST_SLEET: "Overcast with sleet",
}


def weather_description(code: int | None) -> str:
    """Human readable description for a weather code; "Unknown" otherwise."""
    if code is None:
        return "Unknown"
    try:
        return _DESCRIPTIONS.get(Weather(code), "Unknown")
    except ValueError:
        return "Unknown"


@dataclass(frozen=True)
class ForecastHour:
    # Beyond the first two days an "hour" covers a 3 hour slot.
    timestamp: datetime | None
    weather: int | None
    temp: int | None  # Celsius
    wind_speed: int | None  # km/h
    wind_dir: str | None  # N, E, S, O or two-point combinations
    rain: float | None  # mm
    humidity: int | None  # percent
    pressure: int | None  # mb


@dataclass(frozen=True)
class ForecastDay:
    date: date | None
    weather: int | None
    temp_min: int | None
    temp_max: int | None
    wind_speed: int | None
    rain: float | None
    humidity: int | None
    pressure: int | None
    hours: tuple[ForecastHour, ...] = ()


@dataclass(frozen=True)
class Forecast:
    days: tuple[ForecastDay, ...] = ()
