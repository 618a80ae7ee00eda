"""Configuration management for pin maps."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


def _split_paths(value: Optional[str]) -> list[Path]:
    if not value:
        return []
    return [Path(p) for p in value.split(os.pathsep) if p.strip()]


class AppConfig(BaseModel):
    """Application-level configuration."""

    # Asset overrides
    map_path: Optional[Path] = Field(
        default=None,
        description="World map image (Mercator) replacing the built-in map",
    )
    pin_paths: list[Path] = Field(
        default_factory=list,
        description="Pin part images replacing the built-in pin, bottom layer first",
    )

    # Rendering defaults
    projection: str = Field(default="mercator", description="Default projection name")
    default_map_size: tuple[int, int] = Field(
        default=(1920, 1629),
        description="Size of the built-in world map",
    )
    standard_crop_bound: int = Field(default=100, ge=0, description="Standard crop margin")

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from environment and defaults."""
        map_path = os.environ.get("PINMAP_MAP_PATH")
        return cls(
            map_path=Path(map_path) if map_path else None,
            pin_paths=_split_paths(os.environ.get("PINMAP_PIN_PATHS")),
            projection=os.environ.get("PINMAP_PROJECTION", cls.model_fields["projection"].default),
        )


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next call reloads it."""
    global _config
    _config = None
