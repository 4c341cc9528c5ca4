"""Forecast cache partitioned by calendar day.

Entries are keyed by (source id, location code) inside the partition for the
current local date. Nothing expires explicitly: once the date rolls over an
entry is simply no longer addressed. Old partitions are never reaped here.
"""

import logging
from collections.abc import Callable
from datetime import date

from wtr.models.common import LocationCode, SourceId, day_partition
from wtr.storage.blob_store import BlobStore

logger = logging.getLogger(__name__)


class DayPartitionedCache:
    def __init__(self, store: BlobStore, today: Callable[[], date] = date.today):
        self.store = store
        self.today = today

    def key(self, source_id: SourceId, location_code: LocationCode) -> str:
        # e.g. 20180308/tiempo-30625
        return f"{day_partition(self.today())}/{source_id}-{location_code}"

    def get(self, source_id: SourceId, location_code: LocationCode) -> bytes | None:
        key = self.key(source_id, location_code)
        data = self.store.get(key)
        if data is None:
            logger.debug("Cache miss for %s", key)
        else:
            logger.debug("Cache hit for %s (%d bytes)", key, len(data))
        return data

    def set(self, source_id: SourceId, location_code: LocationCode, data: bytes) -> None:
        key = self.key(source_id, location_code)
        self.store.set(key, data)
        logger.debug("Cached %d bytes under %s", len(data), key)
