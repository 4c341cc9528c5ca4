"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from wtr.ingest.tiempo_client import DEFAULT_AFFILIATE_ID, TIEMPO_BASE_URL


class TiempoConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = TIEMPO_BASE_URL
    affiliate_id: str = Field(default=DEFAULT_AFFILIATE_ID, min_length=1)
    lang: str = Field(default="it", min_length=2, max_length=5)
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    directory: str | None = None  # None: <system temp dir>/libweather


class WtrConfig(BaseModel):
    model_config = {"extra": "forbid"}

    tiempo: TiempoConfig = TiempoConfig()
    cache: CacheConfig = CacheConfig()
