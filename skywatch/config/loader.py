"""YAML config loader with dotted-key access."""

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml

from skywatch.config.schema import SkywatchConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> SkywatchConfig:
    """Load and validate config from a YAML file.

    With no path, or a path that does not exist, the defaults are returned.
    """
    if path is None:
        return SkywatchConfig()
    path = Path(path)
    if not path.exists():
        logger.info("Config %s not found, using defaults", path)
        return SkywatchConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return SkywatchConfig(**raw)


def config_hash(config: SkywatchConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: SkywatchConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'recommendation.alert_color'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
