"""Common types and helpers shared across models."""

from datetime import date
from typing import TypeAlias

SourceId: TypeAlias = str
LocationCode: TypeAlias = str

DAY_PARTITION_FORMAT = "%Y%m%d"


def day_partition(day: date) -> str:
    """Cache partition name for a calendar day, e.g. 20180308."""
    return day.strftime(DAY_PARTITION_FORMAT)
