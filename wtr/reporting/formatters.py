"""Output formatters for locations and forecasts."""

import json
from datetime import date

from wtr.models.forecast import Forecast, weather_description
from wtr.models.location import Location

MISSING = "-"


def format_location_text(loc: Location) -> str:
    return "\n".join([
        f"Location   : {loc.name} ({loc.province})",
        f"Coordinates: {loc.latitude:f}, {loc.longitude:f}",
        f"Code       : {loc.code}",
    ])


def format_forecast_text(forecast: Forecast, details: bool = False) -> str:
    """Daily summary table, followed by per-day hourly tables if ``details``."""
    lines = [
        "Date   Min (°) Max (°) Humidity (%) Wind(km/h) Weather",
        "----   ------- ------- ------------ ---------- -------",
    ]
    for day in forecast.days:
        lines.append(
            f"{_short_date(day.date)} {_v(day.temp_min):>7} {_v(day.temp_max):>7} "
            f"{_v(day.humidity):>12} {_v(day.wind_speed):>10} "
            f"{weather_description(day.weather)}"
        )

    if details:
        for day in forecast.days:
            long_date = f"{day.date:%A}, {day.date.day} {day.date:%B}" if day.date else MISSING
            lines += ["", "", long_date, ""]
            lines.append("Time  Temp (°) Weather")
            lines.append("----  -------- -------")
            for hour in day.hours:
                hhmm = f"{hour.timestamp:%H:%M}" if hour.timestamp else MISSING.ljust(5)
                lines.append(
                    f"{hhmm} {_v(hour.temp):>8} {weather_description(hour.weather)}"
                )
    return "\n".join(lines)


def format_forecast_json(forecast: Forecast) -> str:
    """JSON rendering for programmatic consumption; missing values are null."""
    days = []
    for day in forecast.days:
        days.append({
            "date": day.date.isoformat() if day.date else None,
            "weather": day.weather,
            "weather_description": weather_description(day.weather),
            "temp_min": day.temp_min,
            "temp_max": day.temp_max,
            "wind_speed": day.wind_speed,
            "rain": day.rain,
            "humidity": day.humidity,
            "pressure": day.pressure,
            "hours": [
                {
                    "timestamp": h.timestamp.isoformat() if h.timestamp else None,
                    "weather": h.weather,
                    "weather_description": weather_description(h.weather),
                    "temp": h.temp,
                    "wind_speed": h.wind_speed,
                    "wind_dir": h.wind_dir,
                    "rain": h.rain,
                    "humidity": h.humidity,
                    "pressure": h.pressure,
                }
                for h in day.hours
            ],
        })
    return json.dumps({"days": days}, indent=2)


def _short_date(d: date | None) -> str:
    # "Thu  8", like strftime's "%a %e"
    if d is None:
        return MISSING.ljust(6)
    return f"{d:%a} {d.day:>2}"


def _v(value) -> str:
    return MISSING if value is None else str(value)
