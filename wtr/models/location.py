"""Location model and search modes."""

from dataclasses import dataclass
from enum import StrEnum


class SearchMode(StrEnum):
    PARTIAL_NAME = "partial_name"
    EXACT_NAME = "exact_name"
    EXACT_CODE = "exact_code"


@dataclass(frozen=True)
class Location:
    name: str  # upper case, accents included
    province: str  # 2-letter code
    latitude: float  # WGS84
    longitude: float  # WGS84
    code: str  # Tiempo location code
