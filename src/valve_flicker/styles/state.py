"""
Per-light interpolation state.

Each attached light walks through its style's sequence one letter at a time.
Every tick the running brightness is pulled a fraction `alpha` of the way
toward the current letter's target, where alpha is the share of the
transition time elapsed so far. Because the running value is overwritten each
tick while alpha keeps growing, the result eases into the target instead of
ramping linearly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .decoder import decode

if TYPE_CHECKING:
    from .registry import Style

MIN_BRIGHTNESS = 0.0


@dataclass(eq=False)
class EntityState:
    """Interpolation progress of one light through one style."""
    current_index: int  # 1-based position in the sequence
    max_brightness: float  # Light's brightness when first attached
    current_brightness: float
    target_brightness: float = 0.0
    target_assigned: bool = False
    elapsed: float = 0.0  # Seconds since the current target was set
    debug_handle: Any = None

    @classmethod
    def create(cls, brightness: float, start_index: int = 1) -> "EntityState":
        return cls(
            current_index=start_index,
            max_brightness=brightness,
            current_brightness=brightness,
        )

    @property
    def fraction(self) -> float:
        """Current brightness as a share of max (0 when the light was off)."""
        if self.max_brightness <= 0:
            return 0.0
        return self.current_brightness / self.max_brightness


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_start_index(start_index: float, length: int) -> int:
    """Floor a requested start position and clamp it into [1, length]."""
    return int(clamp(math.floor(start_index), 1, length))


def symbol_at(style: "Style", index: int) -> str:
    """Letter at a 1-based sequence position."""
    return style.sequence[index - 1]


def target_for(style: "Style", state: EntityState) -> float:
    """Target brightness for the state's current letter."""
    return decode(symbol_at(style, state.current_index)) * state.max_brightness


def assign_target(style: "Style", state: EntityState) -> None:
    state.target_brightness = target_for(style, state)
    state.target_assigned = True


def next_index(index: int, length: int) -> int:
    index += 1
    if index > length:
        index = 1  # Loop back to the start of the sequence
    return index


def interpolate(state: EntityState, style: "Style", delta_time: float) -> float:
    """
    Accumulate delta_time and ease the running brightness toward the target.

    Returns:
        alpha, the completed share of the current transition (0-1).
    """
    state.elapsed += delta_time
    alpha = min(state.elapsed / style.transition_time, 1.0)

    state.current_brightness = clamp(
        lerp(state.current_brightness, state.target_brightness, alpha),
        MIN_BRIGHTNESS,
        state.max_brightness,
    )
    return alpha


def step_forward(state: EntityState, style: "Style") -> None:
    """Start the transition to the next letter."""
    state.elapsed = 0.0
    state.current_index = next_index(state.current_index, len(style.sequence))
    assign_target(style, state)


def advance(state: EntityState, style: "Style", delta_time: float) -> bool:
    """
    Move one light forward by delta_time seconds.

    Returns:
        True if the transition completed and the state moved to the next letter.
    """
    if interpolate(state, style, delta_time) >= 1.0:
        step_forward(state, style)
        return True
    return False
