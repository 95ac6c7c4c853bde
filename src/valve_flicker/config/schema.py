"""Configuration dataclasses."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StyleConfig:
    """A custom flicker style."""
    style_id: int | str
    sequence: str
    transition_time: Optional[float] = None  # None = engine default
    name: str = ""


@dataclass
class LightConfig:
    """A streamer channel and the style it flickers with."""
    channel: int
    style: int | str
    brightness: float = 1.0  # 0.0-1.0, also the flicker ceiling
    debug: bool = False
    start_index: Optional[int] = None


@dataclass
class HueConfig:
    """Philips Hue bridge configuration."""
    bridge_ip: str
    username: str
    clientkey: str
    entertainment_area_id: str
    fps: int = 25


@dataclass
class FlickerConfig:
    """Main application configuration."""
    fps: int = 60
    default_transition_time: float = 0.1
    register_defaults: bool = True
    debug_overlay: bool = False
    mock_lights: int = 6
    hue: Optional[HueConfig] = None
    styles: list[StyleConfig] = field(default_factory=list)
    lights: list[LightConfig] = field(default_factory=list)

    def light_for_channel(self, channel: int) -> Optional[LightConfig]:
        for light in self.lights:
            if light.channel == channel:
                return light
        return None

    @classmethod
    def with_defaults(cls, num_lights: int = 6) -> "FlickerConfig":
        """One light per mock channel, cycling through the first built-in styles."""
        return cls(
            mock_lights=num_lights,
            lights=[LightConfig(channel=i, style=i % 12) for i in range(num_lights)],
        )
