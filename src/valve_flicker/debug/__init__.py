"""Debug visualization collaborators."""

from .overlay import (
    DEFAULT_BAR_LENGTH,
    ConsoleOverlay,
    DebugLabel,
    DebugOverlay,
    NullOverlay,
    RecordingOverlay,
    brightness_bar,
    format_debug_text,
)

__all__ = [
    "DEFAULT_BAR_LENGTH",
    "ConsoleOverlay",
    "DebugLabel",
    "DebugOverlay",
    "NullOverlay",
    "RecordingOverlay",
    "brightness_bar",
    "format_debug_text",
]
