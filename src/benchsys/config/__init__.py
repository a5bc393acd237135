"""Configuration loading for benchsys."""

from .loader import ConfigError, load_config, load_snapshot_config, load_yaml
from .models import MemoryFormatConfig, SnapshotConfig

__all__ = [
    "ConfigError",
    "MemoryFormatConfig",
    "SnapshotConfig",
    "load_config",
    "load_snapshot_config",
    "load_yaml",
]
