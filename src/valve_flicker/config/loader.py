"""Configuration file loading and saving."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any
import yaml

from .schema import FlickerConfig, HueConfig, LightConfig, StyleConfig

if TYPE_CHECKING:
    from ..engine import FlickerEngine

logger = logging.getLogger(__name__)


def _require(data: dict, key: str, section: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing '{key}' in {section} config")
    return data[key]


def load_config(config_path: Path) -> FlickerConfig:
    """Load configuration from YAML file."""
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    return parse_config(data)


def parse_config(data: dict) -> FlickerConfig:
    """Build a FlickerConfig from already-parsed YAML data."""
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")

    hue = None
    if data.get("hue"):
        hue_data = data["hue"]
        hue = HueConfig(
            bridge_ip=_require(hue_data, "bridge_ip", "hue"),
            username=_require(hue_data, "username", "hue"),
            clientkey=_require(hue_data, "clientkey", "hue"),
            entertainment_area_id=_require(hue_data, "entertainment_area_id", "hue"),
            fps=hue_data.get("fps", 25),
        )

    styles = []
    for style_data in data.get("styles", []):
        styles.append(StyleConfig(
            style_id=_require(style_data, "id", "style"),
            sequence=_require(style_data, "sequence", "style"),
            transition_time=style_data.get("transition_time"),
            name=style_data.get("name", ""),
        ))

    lights = []
    for light_data in data.get("lights", []):
        lights.append(LightConfig(
            channel=_require(light_data, "channel", "light"),
            style=_require(light_data, "style", "light"),
            brightness=light_data.get("brightness", 1.0),
            debug=light_data.get("debug", False),
            start_index=light_data.get("start_index"),
        ))

    return FlickerConfig(
        fps=data.get("fps", 60),
        default_transition_time=data.get("default_transition_time", 0.1),
        register_defaults=data.get("register_defaults", True),
        debug_overlay=data.get("debug_overlay", False),
        mock_lights=data.get("mock_lights", 6),
        hue=hue,
        styles=styles,
        lights=lights,
    )


def save_config(config: FlickerConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    data: dict[str, Any] = {
        "fps": config.fps,
        "default_transition_time": config.default_transition_time,
        "register_defaults": config.register_defaults,
        "debug_overlay": config.debug_overlay,
        "mock_lights": config.mock_lights,
        "styles": [
            {
                "id": s.style_id,
                "sequence": s.sequence,
                "transition_time": s.transition_time,
                "name": s.name,
            }
            for s in config.styles
        ],
        "lights": [
            {
                "channel": l.channel,
                "style": l.style,
                "brightness": l.brightness,
                "debug": l.debug,
                "start_index": l.start_index,
            }
            for l in config.lights
        ],
    }

    if config.hue:
        data["hue"] = {
            "bridge_ip": config.hue.bridge_ip,
            "username": config.hue.username,
            "clientkey": config.hue.clientkey,
            "entertainment_area_id": config.hue.entertainment_area_id,
            "fps": config.hue.fps,
        }

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def apply_config(engine: "FlickerEngine", config: FlickerConfig) -> list:
    """
    Register the configured custom styles on an engine.

    A custom style replaces a built-in style with the same id.

    Returns:
        Ids of the registered styles.
    """
    registered = []
    for style in config.styles:
        if style.style_id in engine.styles:
            logger.info("Custom style %r replaces an existing style", style.style_id)
            engine.remove_style(style.style_id)
        engine.create_custom_style(
            style.style_id,
            style.sequence,
            style.transition_time,
            name=style.name,
        )
        registered.append(style.style_id)
    return registered
