"""YAML config loader and dotted-key access."""

from pathlib import Path
from typing import Any

import yaml

from wtr.config.schema import WtrConfig


def load_config(path: str | Path | None = None) -> WtrConfig:
    """Load and validate config from a YAML file. No path means defaults."""
    if path is None:
        return WtrConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return WtrConfig(**raw)


def get_config_value(config: WtrConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'tiempo.lang'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
