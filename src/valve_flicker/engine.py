"""
Flicker engine - the public entry point.

The FlickerEngine combines:
- Style registry (which flicker patterns exist)
- Tick scheduler (one clock subscription for every active style)
- Debug overlay (optional labels)

and owns the lifecycle rules tying them together: a style ticks only while
lights are attached to it, and a style left without lights is deleted after
every detach and every scheduler pass.

Usage:
    engine = FlickerEngine(clock)
    engine.startup()  # registers the built-in styles

    engine.start_flicker(light, 1)  # fluorescent flicker
    ...
    clock.tick(dt)  # every frame
    ...
    engine.stop_flicker(light, 1)
    engine.shutdown()
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable

from .clock import FrameClock
from .debug.overlay import DebugOverlay, NullOverlay
from .errors import InvalidArgumentType, UnknownStyle
from .lights.base import Light
from .scheduler import TickScheduler
from .styles.defaults import register_default_styles
from .styles.registry import DEFAULT_TRANSITION_TIME, Style, StyleRegistry
from .styles.state import EntityState, assign_target, clamp_start_index

logger = logging.getLogger(__name__)


def _check_light(entity) -> None:
    if not isinstance(entity, Light):
        raise InvalidArgumentType(
            f"Expected a light with get_brightness/set_brightness/is_live, "
            f"got {type(entity).__name__}."
        )


def _check_start_index(start_index) -> None:
    if isinstance(start_index, bool) or not isinstance(start_index, (int, float)):
        raise InvalidArgumentType(
            f"Start index must be a number, got {type(start_index).__name__}."
        )
    if not math.isfinite(start_index):
        raise InvalidArgumentType(f"Start index must be finite, got {start_index!r}.")


class FlickerEngine:
    """Registry, scheduler and lifecycle rules behind one object."""

    def __init__(
        self,
        clock: FrameClock | None = None,
        overlay: DebugOverlay | None = None,
        default_transition_time: float = DEFAULT_TRANSITION_TIME,
        register_defaults: bool = True,
    ):
        self.clock = clock or FrameClock()
        self.overlay = overlay or NullOverlay()
        self.styles = StyleRegistry(default_transition_time)
        self.scheduler = TickScheduler(
            self.clock,
            self.overlay,
            on_entity_dead=self.stop_flicker,
            after_pass=self.cleanup_unused,
        )
        self.register_defaults = register_defaults
        self._running = False

    # --- Lifecycle ---

    def startup(self) -> "FlickerEngine":
        """Register the built-in styles (if enabled) and mark the engine running."""
        if self.register_defaults:
            created = register_default_styles(self.styles)
            logger.debug("Registered %d default styles", len(created))
        self._running = True
        return self

    def shutdown(self) -> None:
        """
        Stop ticking every style and release every debug label.

        Light brightness is left where it is.
        """
        for style in self.styles:
            for state in style.entities.values():
                self._release_debug(state)
        self.scheduler.deactivate_all()
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def __enter__(self) -> "FlickerEngine":
        return self.startup()

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    # --- Styles ---

    def create_custom_style(
        self,
        style_id: Hashable,
        sequence: str,
        transition_time: float | None = None,
        name: str = "",
    ) -> Style:
        """
        Register a new flicker style.

        Args:
            style_id: Unique key for the style
            sequence: Letters 'a' (dark) to 'z' (full), e.g. "mmamammmmammamamaaamammma"
            transition_time: Seconds per letter (default 0.1)
            name: Optional label
        """
        return self.styles.create_style(style_id, sequence, transition_time, name=name)

    def remove_style(self, style_id: Hashable) -> None:
        """
        Delete a style, stopping every light that uses it.

        Lights get their original brightness back. No-op for unknown ids.
        """
        style = self.styles.lookup(style_id)
        if style is None:
            return

        for entity, state in list(style.entities.items()):
            del style.entities[entity]
            self._restore(entity, state)

        self.scheduler.deactivate(style)
        self.styles.discard(style_id)
        logger.debug("Removed style %r", style_id)

    def register_default_styles(self) -> list[int]:
        """Bring back any built-in styles that have collapsed."""
        return register_default_styles(self.styles)

    # --- Lights ---

    def start_flicker(
        self,
        entity: Light,
        style_id: Hashable,
        debug: bool = False,
        start_index: float | None = None,
    ) -> None:
        """
        Start flickering a light with a style.

        Calling this again for the same light and style keeps the running
        state. Starting a light on a different style first stops it on the
        style it was using.

        Args:
            entity: The light
            style_id: Registered style id
            debug: Attach a debug label to the light
            start_index: 1-based starting letter (floored, clamped to the sequence)
        """
        _check_light(entity)
        if start_index is not None:
            _check_start_index(start_index)

        style = self.styles.lookup(style_id)
        if style is None:
            logger.warning("%s", UnknownStyle(style_id))
            return

        if start_index is not None:
            start_index = clamp_start_index(start_index, len(style.sequence))

        state = style.entities.get(entity)
        if state is None:
            released = self._release_other_styles(entity, style_id)
            state = EntityState.create(entity.get_brightness(), start_index or 1)
            style.entities[entity] = state
            if released:
                self.cleanup_unused()

        if not state.target_assigned:
            assign_target(style, state)

        if debug and state.debug_handle is None:
            state.debug_handle = self.overlay.acquire(entity)

        self.scheduler.activate(style)

    def stop_flicker(self, entity: Light, style_id: Hashable) -> None:
        """
        Stop flickering a light and restore its original brightness.

        No-op if the light isn't flickering with that style. Otherwise every
        style left without lights is deleted afterwards.
        """
        style = self.styles.lookup(style_id)
        if style is None:
            return
        if self._detach(entity, style):
            self.cleanup_unused()

    def is_flickering(self, entity: Light, style_id: Hashable | None = None) -> bool:
        """True if the light is attached to the style (or to any style)."""
        if style_id is not None:
            return self.get_state(entity, style_id) is not None
        return any(entity in style.entities for style in self.styles)

    def get_state(self, entity: Light, style_id: Hashable) -> EntityState | None:
        style = self.styles.lookup(style_id)
        if style is None:
            return None
        return style.entities.get(entity)

    # --- Cleanup ---

    def cleanup_unused(self) -> list[Hashable]:
        """
        Delete every style that has no lights attached.

        Runs after each detach and after each scheduler pass, so styles that
        were registered but never used are swept as well.

        Returns:
            Ids of the deleted styles.
        """
        removed = []
        for style in self.styles:
            if not style.is_idle:
                continue
            self.scheduler.deactivate(style)
            self.styles.discard(style.style_id)
            removed.append(style.style_id)
        if removed:
            logger.debug("Deleted styles without lights: %r", removed)
        return removed

    def _detach(self, entity: Light, style: Style) -> bool:
        state = style.entities.pop(entity, None)
        if state is None:
            return False
        self._restore(entity, state)
        return True

    def _release_other_styles(self, entity: Light, style_id: Hashable) -> bool:
        released = False
        for other in self.styles:
            if other.style_id != style_id and entity in other.entities:
                logger.info(
                    "Light %r moves from style %r to %r", entity, other.style_id, style_id
                )
                released = self._detach(entity, other) or released
        return released

    def _restore(self, entity: Light, state: EntityState) -> None:
        if entity.is_live():
            entity.set_brightness(state.max_brightness)
        self._release_debug(state)

    def _release_debug(self, state: EntityState) -> None:
        if state.debug_handle is not None:
            self.overlay.release(state.debug_handle)
            state.debug_handle = None


# =============================================================================
# MODULE-LEVEL API
# =============================================================================

_default_engine: FlickerEngine | None = None


def get_default_engine() -> FlickerEngine:
    """Shared engine for scripts that don't manage their own (created on first use)."""
    global _default_engine
    if _default_engine is None:
        _default_engine = FlickerEngine().startup()
    return _default_engine


def reset_default_engine() -> None:
    """Shut down and forget the shared engine."""
    global _default_engine
    if _default_engine is not None:
        _default_engine.shutdown()
    _default_engine = None


def start_flicker(entity: Light, style_id: Hashable, debug: bool = False, start_index: float | None = None) -> None:
    get_default_engine().start_flicker(entity, style_id, debug, start_index)


def stop_flicker(entity: Light, style_id: Hashable) -> None:
    get_default_engine().stop_flicker(entity, style_id)


def create_custom_style(style_id: Hashable, sequence: str, transition_time: float | None = None) -> Style:
    return get_default_engine().create_custom_style(style_id, sequence, transition_time)


def remove_style(style_id: Hashable) -> None:
    get_default_engine().remove_style(style_id)
