"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml

from meteo.config.schema import MeteoConfig


def load_config(path: str | Path | None = None) -> MeteoConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file gives the defaults.
    """
    if path is None:
        return MeteoConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return MeteoConfig(**raw)


def get_config_value(config: MeteoConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'archive.max_retries'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
