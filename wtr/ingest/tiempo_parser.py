"""Tiempo XML forecast parser.

Document layout::

    <report>
      <location city="...">
        <interesting>...</interesting>
        <day value="20180308" name="...">
          <symbol value="3" .../>
          <tempmin value="5"/> <tempmax value="12"/>
          <wind value="9" dir="SO" .../>
          <rain value="0.4"/> <humidity value="80"/> <pressure value="1012"/>
          <hour value="00:00">
            <symbol value="3"/> <temp value="6"/> <wind value="8" dir="S"/>
            ...
          </hour>
        </day>
      </location>
    </report>

``value`` holds the date on <day>, the time of day on <hour> and the
measurement on every other element.
"""

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable
from datetime import date, datetime, time

from wtr.errors import StructureError, XmlSyntaxError
from wtr.models.forecast import Forecast, ForecastDay, ForecastHour

logger = logging.getLogger(__name__)

REPORT_TAG = "report"
LOCATION_TAG = "location"
DAY_TAG = "day"
HOUR_TAG = "hour"

DAY_FORMAT = "%Y%m%d"
HOUR_FORMAT = "%H:%M"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_xml(data: bytes) -> ET.Element:
    """Default XML capability: build an ElementTree from raw bytes."""
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise XmlSyntaxError(f"Failed to parse document: {e}") from e


class TiempoParser:
    def __init__(self, xml_parse: Callable[[bytes], ET.Element] = parse_xml):
        self.xml_parse = xml_parse

    def parse(self, data: bytes) -> Forecast:
        """Convert a Tiempo XML document into a Forecast.

        Raises XmlSyntaxError for malformed XML and StructureError when the
        report/location skeleton is missing. Individual measurements that are
        missing or unreadable become None without failing the document.
        """
        report = self.xml_parse(data)
        if report.tag != REPORT_TAG:
            raise StructureError("missing report root")
        location = next(iter(report), None)
        if location is None or location.tag != LOCATION_TAG:
            raise StructureError("missing location")

        # location also holds non-forecast elements such as <interesting>
        days = tuple(_parse_day(el) for el in location if el.tag == DAY_TAG)
        logger.debug("Parsed forecast with %d days", len(days))
        return Forecast(days=days)


def parse_forecast(data: bytes) -> Forecast:
    return TiempoParser().parse(data)


def _parse_day(el: ET.Element) -> ForecastDay:
    day_date = _parse_date(el.get("value"))
    fields: dict = {}
    hours: list[ForecastHour] = []
    for child in el:
        if child.tag == "symbol":
            fields["weather"] = attr_int(child, "value")
        elif child.tag == "tempmin":
            fields["temp_min"] = attr_int(child, "value")
        elif child.tag == "tempmax":
            fields["temp_max"] = attr_int(child, "value")
        elif child.tag == "wind":
            fields["wind_speed"] = attr_int(child, "value")
        elif child.tag == "rain":
            fields["rain"] = attr_float(child, "value")
        elif child.tag == "humidity":
            fields["humidity"] = attr_int(child, "value")
        elif child.tag == "pressure":
            fields["pressure"] = attr_int(child, "value")
        elif child.tag == HOUR_TAG:
            hours.append(_parse_hour(child, day_date))
    return ForecastDay(
        date=day_date,
        weather=fields.get("weather"),
        temp_min=fields.get("temp_min"),
        temp_max=fields.get("temp_max"),
        wind_speed=fields.get("wind_speed"),
        rain=fields.get("rain"),
        humidity=fields.get("humidity"),
        pressure=fields.get("pressure"),
        hours=tuple(hours),
    )


def _parse_hour(el: ET.Element, day_date: date | None) -> ForecastHour:
    fields: dict = {}
    for child in el:
        if child.tag == "symbol":
            fields["weather"] = attr_int(child, "value")
        elif child.tag == "temp":
            fields["temp"] = attr_int(child, "value")
        elif child.tag == "wind":
            fields["wind_speed"] = attr_int(child, "value")
            fields["wind_dir"] = child.get("dir")
        elif child.tag == "rain":
            fields["rain"] = attr_float(child, "value")
        elif child.tag == "humidity":
            fields["humidity"] = attr_int(child, "value")
        elif child.tag == "pressure":
            fields["pressure"] = attr_int(child, "value")

    hour_time = _parse_time(el.get("value"))
    timestamp = None
    if day_date is not None and hour_time is not None:
        timestamp = datetime.combine(day_date, hour_time)
    return ForecastHour(
        timestamp=timestamp,
        weather=fields.get("weather"),
        temp=fields.get("temp"),
        wind_speed=fields.get("wind_speed"),
        wind_dir=fields.get("wind_dir"),
        rain=fields.get("rain"),
        humidity=fields.get("humidity"),
        pressure=fields.get("pressure"),
    )


def attr_int(el: ET.Element, name: str) -> int | None:
    """Integer attribute, or None if absent or not a plain decimal integer."""
    raw = el.get(name)
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def attr_float(el: ET.Element, name: str) -> float | None:
    """Float attribute, or None if absent or not a plain decimal number."""
    raw = el.get(name)
    if raw is None or not _FLOAT_RE.fullmatch(raw):
        return None
    return float(raw)


def _parse_date(raw: str | None) -> date | None:
    if raw is None:
        return None
    try:
        return datetime.strptime(raw, DAY_FORMAT).date()
    except ValueError:
        logger.warning("Unreadable day date %r", raw)
        return None


def _parse_time(raw: str | None) -> time | None:
    if raw is None:
        return None
    try:
        return datetime.strptime(raw, HOUR_FORMAT).time()
    except ValueError:
        logger.warning("Unreadable hour time %r", raw)
        return None
