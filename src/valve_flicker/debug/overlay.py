"""
Optional debug labels for flickering lights.

The engine works the same with no overlay at all; an overlay only gets
acquire/update/release calls for lights started with debug=True.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..lights.base import Light
    from ..styles.registry import Style
    from ..styles.state import EntityState

DEFAULT_BAR_LENGTH = 20
FILLED = "█"
EMPTY = "░"


class DebugOverlay(Protocol):
    """External owner of debug visualizations."""

    def acquire(self, entity: "Light") -> Any:
        """Create a label for the light. May return None if it can't."""
        ...

    def update(self, handle: Any, text: str) -> None:
        ...

    def release(self, handle: Any) -> None:
        ...


def brightness_bar(current: float, maximum: float, length: int = DEFAULT_BAR_LENGTH) -> str:
    """Fixed-width bar of filled/empty cells proportional to current/maximum."""
    if maximum <= 0:
        filled = 0
    else:
        filled = math.floor(current / maximum * length)
    filled = max(0, min(length, filled))
    return FILLED * filled + EMPTY * (length - filled)


def format_debug_text(style: "Style", state: "EntityState") -> str:
    """Label text for one light under one style."""
    index = state.current_index
    return "Style {}\nPattern Char: '{}' ({}/{})\nBrightness: {:.2f}/{:.2f}\n{}".format(
        style.style_id,
        style.sequence[index - 1],
        index,
        len(style.sequence),
        state.current_brightness,
        state.max_brightness,
        brightness_bar(state.current_brightness, state.max_brightness),
    )


class NullOverlay:
    """Overlay that shows nothing."""

    def acquire(self, entity: "Light") -> None:
        return None

    def update(self, handle: Any, text: str) -> None:
        pass

    def release(self, handle: Any) -> None:
        pass


@dataclass(eq=False)
class DebugLabel:
    """A text label attached to a light."""
    entity: Any
    text: str = "Initializing Flicker..."
    released: bool = False


@dataclass
class RecordingOverlay:
    """Keeps every label in memory. Handy for tests and headless inspection."""
    labels: list[DebugLabel] = field(default_factory=list)
    released: list[DebugLabel] = field(default_factory=list)

    def acquire(self, entity: "Light") -> DebugLabel:
        label = DebugLabel(entity)
        self.labels.append(label)
        return label

    def update(self, handle: DebugLabel, text: str) -> None:
        handle.text = text

    def release(self, handle: DebugLabel) -> None:
        handle.released = True
        self.released.append(handle)

    @property
    def active(self) -> list[DebugLabel]:
        return [label for label in self.labels if not label.released]


class ConsoleOverlay(RecordingOverlay):
    """Prints every label once per `render()` call."""

    def render(self) -> str:
        blocks = []
        for label in self.active:
            blocks.append(f"{label.entity!r}\n{label.text}")
        return "\n\n".join(blocks)

    def show(self) -> None:
        text = self.render()
        if text:
            print(text)
            print()
