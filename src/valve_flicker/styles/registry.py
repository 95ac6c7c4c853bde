"""
Style registry.

A style is a flicker sequence plus the lights it is currently animating.
The registry owns every style; each style owns the per-light interpolation
state for the lights attached to it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from collections.abc import Hashable, Iterator
from typing import TYPE_CHECKING

from ..errors import DuplicateStyleId, InvalidArgumentType, InvalidTransitionTime, UnknownStyle
from .decoder import validate_sequence

if TYPE_CHECKING:
    from ..lights.base import Light
    from .state import EntityState

logger = logging.getLogger(__name__)

# Seconds per step of a sequence (10 Hz, the classic light style rate)
DEFAULT_TRANSITION_TIME = 1 / 10


@dataclass(eq=False)
class Style:
    """A flicker pattern and the lights currently using it."""
    style_id: Hashable
    sequence: str
    transition_time: float = DEFAULT_TRANSITION_TIME
    name: str = ""
    entities: dict["Light", "EntityState"] = field(default_factory=dict)
    tick_active: bool = False  # Subscribed to the scheduler

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def is_idle(self) -> bool:
        """True when no lights are attached."""
        return not self.entities


def _check_transition_time(transition_time) -> float:
    if isinstance(transition_time, bool) or not isinstance(transition_time, (int, float)):
        raise InvalidArgumentType(
            f"Transition time must be a number, got {type(transition_time).__name__}."
        )
    if not math.isfinite(transition_time) or transition_time <= 0:
        raise InvalidTransitionTime(transition_time)
    return float(transition_time)


class StyleRegistry:
    """
    Keyed collection of live styles.

    Usage:
        registry = StyleRegistry()
        registry.create_style(20, "mmnmmommommnonmmonqnmmo")
        style = registry.lookup(20)
    """

    def __init__(self, default_transition_time: float = DEFAULT_TRANSITION_TIME):
        self.default_transition_time = _check_transition_time(default_transition_time)
        self._styles: dict[Hashable, Style] = {}

    def create_style(
        self,
        style_id: Hashable,
        sequence: str,
        transition_time: float | None = None,
        name: str = "",
    ) -> Style:
        """
        Register a new style.

        Args:
            style_id: Unique key for the style
            sequence: Letters 'a'..'z', at least one
            transition_time: Seconds per step (default 0.1)
            name: Optional human-readable label

        Raises:
            DuplicateStyleId, EmptySequence, InvalidSymbol,
            InvalidArgumentType, InvalidTransitionTime
        """
        try:
            hash(style_id)
        except TypeError:
            raise InvalidArgumentType(
                f"Style id must be hashable, got {type(style_id).__name__}."
            ) from None
        if style_id in self._styles:
            raise DuplicateStyleId(style_id)

        validate_sequence(sequence)
        if transition_time is None:
            transition_time = self.default_transition_time
        else:
            transition_time = _check_transition_time(transition_time)

        style = Style(
            style_id=style_id,
            sequence=sequence,
            transition_time=transition_time,
            name=name,
        )
        self._styles[style_id] = style
        logger.debug("Created style %r (%d steps, %.3fs)", style_id, len(sequence), transition_time)
        return style

    def lookup(self, style_id: Hashable) -> Style | None:
        """Get a style, or None if it isn't registered."""
        try:
            return self._styles.get(style_id)
        except TypeError:
            return None

    def get(self, style_id: Hashable) -> Style:
        """Get a style, raising UnknownStyle if it isn't registered."""
        style = self.lookup(style_id)
        if style is None:
            raise UnknownStyle(style_id)
        return style

    def discard(self, style_id: Hashable) -> Style | None:
        """
        Drop a style record without touching its lights.

        Callers are responsible for detaching lights first; see
        FlickerEngine.remove_style.
        """
        return self._styles.pop(style_id, None)

    @property
    def style_ids(self) -> list[Hashable]:
        return list(self._styles)

    def __contains__(self, style_id: Hashable) -> bool:
        return self.lookup(style_id) is not None

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[Style]:
        # Snapshot so callers can remove styles while iterating
        return iter(list(self._styles.values()))
