"""Shared test fixtures."""

from datetime import date
from pathlib import Path

import pytest
import yaml

from wtr.config.schema import WtrConfig
from wtr.storage.blob_store import MemoryBlobStore
from wtr.storage.day_cache import DayPartitionedCache

TODAY = date(2018, 10, 18)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def orvieto_xml(fixtures_dir: Path) -> bytes:
    """Five-day Tiempo document; the first two days carry 8 hours each."""
    return (fixtures_dir / "tiempo_orvieto.xml").read_bytes()


@pytest.fixture
def memory_store() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def cache(memory_store: MemoryBlobStore) -> DayPartitionedCache:
    """Cache over an in-memory store, pinned to TODAY."""
    return DayPartitionedCache(memory_store, today=lambda: TODAY)


@pytest.fixture
def default_config() -> WtrConfig:
    return WtrConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a config YAML with the cache inside tmp_path and return its path."""
    data = {
        "tiempo": {"affiliate_id": "testaffiliate", "timeout_seconds": 5},
        "cache": {"enabled": True, "directory": str(tmp_path / "cache")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
