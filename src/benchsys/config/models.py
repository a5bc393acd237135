"""Pydantic models for benchsys configuration."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from benchsys.system.os_family import OsFamily


class MemoryFormatConfig(BaseModel):
    """How memory sizes are rendered."""

    precision: int = Field(default=2, ge=0, le=6)


class SnapshotConfig(BaseModel):
    """Configuration for system snapshot collection."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    memory: MemoryFormatConfig = Field(default_factory=MemoryFormatConfig)
    os_family: Optional[OsFamily] = None  # None = detect from the running system
    platform_version_file: Optional[Path] = None  # None = installed patchlevel.h
