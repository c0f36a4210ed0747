"""
Configuration for farm parsing and loading.

The farm directory defaults to the IOTCS_FARM_DIR environment variable.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_farm_dir() -> Path:
    return Path(os.environ.get("IOTCS_FARM_DIR", "farms"))


@dataclass(frozen=True)
class FarmConfig:
    """Configuration for reading farms."""
    wall_slots: int = 24  # Barrier and template wall cells a farm must contain
    farm_dir: Path = field(default_factory=_default_farm_dir)
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> FarmConfig:
        """Build a config, re-reading the environment."""
        return cls(farm_dir=_default_farm_dir())
