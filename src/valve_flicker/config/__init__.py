"""Configuration schema and loading."""

from .schema import (
    FlickerConfig,
    HueConfig,
    LightConfig,
    StyleConfig,
)
from .loader import apply_config, load_config, parse_config, save_config

__all__ = [
    "FlickerConfig",
    "HueConfig",
    "LightConfig",
    "StyleConfig",
    "apply_config",
    "load_config",
    "parse_config",
    "save_config",
]
