"""
Classic letter-coded light flicker for many lights at once.

Styles are strings like "mmamammmmammamamaaamammma" ('a' dark, 'z' full).
Every light attached to a style eases through its letters, and a single
per-frame tick drives all of them.
"""

from .clock import FrameClock
from .engine import (
    FlickerEngine,
    create_custom_style,
    get_default_engine,
    remove_style,
    reset_default_engine,
    start_flicker,
    stop_flicker,
)
from .errors import (
    DuplicateStyleId,
    EmptySequence,
    FlickerError,
    InvalidArgumentType,
    InvalidSymbol,
    InvalidTransitionTime,
    UnknownStyle,
)
from .lights import Light, SimpleLight
from .scheduler import TickScheduler
from .styles import DEFAULT_STYLES, EntityState, Style, StyleRegistry, decode

__all__ = [
    "FrameClock",
    "FlickerEngine",
    "create_custom_style",
    "get_default_engine",
    "remove_style",
    "reset_default_engine",
    "start_flicker",
    "stop_flicker",
    "DuplicateStyleId",
    "EmptySequence",
    "FlickerError",
    "InvalidArgumentType",
    "InvalidSymbol",
    "InvalidTransitionTime",
    "UnknownStyle",
    "Light",
    "SimpleLight",
    "TickScheduler",
    "DEFAULT_STYLES",
    "EntityState",
    "Style",
    "StyleRegistry",
    "decode",
]
