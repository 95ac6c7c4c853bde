"""
Shared test fixtures for the valve-flicker test suite.

Everything runs on a manually ticked FrameClock, so tests control time exactly.
"""

import pytest

from valve_flicker.clock import FrameClock
from valve_flicker.debug import RecordingOverlay
from valve_flicker.engine import FlickerEngine
from valve_flicker.lights import SimpleLight


@pytest.fixture
def clock():
    return FrameClock()


@pytest.fixture
def overlay():
    return RecordingOverlay()


@pytest.fixture
def engine(clock, overlay):
    """Engine with the built-in styles registered."""
    return FlickerEngine(clock=clock, overlay=overlay).startup()


@pytest.fixture
def bare_engine(clock, overlay):
    """Engine with no styles at all."""
    return FlickerEngine(clock=clock, overlay=overlay, register_defaults=False).startup()


@pytest.fixture
def light():
    return SimpleLight(brightness=10.0, name="test")
