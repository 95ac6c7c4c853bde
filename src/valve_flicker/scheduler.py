"""
Tick scheduler.

One clock subscription drives every active style. The subscription exists
only while at least one style is active, so an idle engine costs nothing per
frame.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING

from .debug.overlay import NullOverlay, format_debug_text
from .styles.state import interpolate, step_forward

if TYPE_CHECKING:
    from .clock import Connection, FrameClock
    from .debug.overlay import DebugOverlay
    from .lights.base import Light
    from .styles.registry import Style

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Advances every light of every active style once per frame.

    Per light and frame: liveness check, ease toward the target, write the
    brightness, refresh the debug label, and move to the next letter once the
    transition completes.
    """

    def __init__(
        self,
        clock: "FrameClock",
        overlay: "DebugOverlay | None" = None,
        on_entity_dead: Callable[["Light", Hashable], None] | None = None,
        after_pass: Callable[[], None] | None = None,
    ):
        self.clock = clock
        self.overlay = overlay or NullOverlay()
        self.on_entity_dead = on_entity_dead
        self.after_pass = after_pass

        # Insertion ordered: styles tick in the order they were activated
        self._active: dict[Hashable, "Style"] = {}
        self._connection: "Connection | None" = None

    @property
    def is_subscribed(self) -> bool:
        return self._connection is not None

    @property
    def active_style_ids(self) -> list[Hashable]:
        return list(self._active)

    def is_active(self, style_id: Hashable) -> bool:
        return style_id in self._active

    def activate(self, style: "Style") -> None:
        """Start ticking a style. No-op if it is already active."""
        if style.tick_active and style.style_id in self._active:
            return
        style.tick_active = True
        self._active[style.style_id] = style
        logger.debug("Style %r active (%d active)", style.style_id, len(self._active))
        if self._connection is None:
            self._connection = self.clock.connect(self._on_tick)

    def deactivate(self, style: "Style") -> None:
        """Stop ticking a style. No-op if it isn't active."""
        style.tick_active = False
        if self._active.get(style.style_id) is style:
            del self._active[style.style_id]
            logger.debug("Style %r inactive (%d active)", style.style_id, len(self._active))
        if not self._active:
            self._disconnect()

    def deactivate_all(self) -> None:
        for style in list(self._active.values()):
            style.tick_active = False
        self._active.clear()
        self._disconnect()

    def _disconnect(self) -> None:
        if self._connection is not None:
            self._connection.disconnect()
            self._connection = None

    def _on_tick(self, delta_time: float) -> None:
        for style in list(self._active.values()):
            # An earlier style's cleanup may have deactivated this one
            if style.tick_active:
                self.update_style(style, delta_time)
        if self.after_pass is not None:
            self.after_pass()

    def update_style(self, style: "Style", delta_time: float) -> None:
        """Advance every light attached to one style."""
        for entity, state in list(style.entities.items()):
            if style.entities.get(entity) is not state:
                continue  # Detached earlier in this pass

            if not entity.is_live():
                logger.debug("Light %r is gone, stopping style %r", entity, style.style_id)
                if self.on_entity_dead is not None:
                    self.on_entity_dead(entity, style.style_id)
                else:
                    del style.entities[entity]
                continue

            alpha = interpolate(state, style, delta_time)
            entity.set_brightness(state.current_brightness)

            if state.debug_handle is not None:
                self.overlay.update(state.debug_handle, format_debug_text(style, state))

            if alpha >= 1.0:
                step_forward(state, style)
