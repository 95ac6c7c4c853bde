"""Light implementations the flicker engine can drive."""

from .base import Light, SimpleLight
from .streaming import ChannelLevel, ChannelLight, HueStreamer, MockStreamer

__all__ = [
    "Light",
    "SimpleLight",
    "ChannelLevel",
    "ChannelLight",
    "HueStreamer",
    "MockStreamer",
]
