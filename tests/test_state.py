"""Tests for the per-light interpolation state machine."""

import pytest

from valve_flicker.styles.registry import Style
from valve_flicker.styles.state import (
    EntityState,
    advance,
    assign_target,
    clamp_start_index,
    next_index,
)


def make_state(style, brightness=10.0, start_index=1):
    state = EntityState.create(brightness, start_index)
    assign_target(style, state)
    return state


class TestAdvance:

    def test_ab_scenario(self):
        style = Style(style_id="ab", sequence="ab", transition_time=1.0)
        state = make_state(style)
        assert state.target_brightness == 0.0

        assert advance(state, style, 0.5) is False
        assert state.current_brightness == pytest.approx(5.0)
        assert state.elapsed == pytest.approx(0.5)

        assert advance(state, style, 0.5) is True
        assert state.current_brightness == pytest.approx(0.0)
        assert state.current_index == 2
        assert state.target_brightness == pytest.approx(0.4)
        assert state.elapsed == 0.0

    def test_eases_rather_than_ramps(self):
        # Each tick pulls alpha of the *remaining* distance, alpha growing with time
        style = Style(style_id=1, sequence="a", transition_time=1.0)
        state = make_state(style, brightness=100.0)
        advance(state, style, 0.25)
        assert state.current_brightness == pytest.approx(75.0)
        advance(state, style, 0.25)
        # alpha = 0.5 of the remaining 75
        assert state.current_brightness == pytest.approx(37.5)
        advance(state, style, 0.25)
        assert state.current_brightness == pytest.approx(37.5 * 0.25)

    def test_overshooting_delta_completes_step(self):
        style = Style(style_id=1, sequence="zm", transition_time=0.1)
        state = make_state(style)
        assert advance(state, style, 5.0) is True
        assert state.current_brightness == pytest.approx(10.0)
        assert state.current_index == 2
        # Excess time is dropped, not carried over
        assert state.elapsed == 0.0

    def test_zero_delta_changes_nothing(self):
        style = Style(style_id=1, sequence="am", transition_time=0.1)
        state = make_state(style)
        advance(state, style, 0.0)
        assert state.current_brightness == 10.0
        assert state.current_index == 1

    def test_wraps_to_first_letter(self):
        style = Style(style_id=1, sequence="abc", transition_time=0.1)
        state = make_state(style, start_index=3)
        advance(state, style, 0.1)
        assert state.current_index == 1
        assert state.target_brightness == 0.0

    @pytest.mark.parametrize("start", [1, 2, 3, 4, 5])
    def test_full_cycle_returns_to_start(self, start):
        style = Style(style_id=1, sequence="mazmb", transition_time=0.1)
        state = make_state(style, start_index=start)
        for _ in range(len(style.sequence)):
            advance(state, style, 0.1)
            assert 1 <= state.current_index <= len(style.sequence)
        assert state.current_index == start

    def test_brightness_stays_within_bounds(self):
        style = Style(style_id=1, sequence="azazmz", transition_time=0.05)
        state = make_state(style, brightness=3.0)
        for _ in range(200):
            advance(state, style, 0.016)
            assert 0.0 <= state.current_brightness <= 3.0
            assert 0.0 <= state.target_brightness <= 3.0


class TestHelpers:

    @pytest.mark.parametrize("value,expected", [
        (1, 1), (2.9, 2), (0, 1), (-5, 1), (99, 4), (4.5, 4),
    ])
    def test_clamp_start_index(self, value, expected):
        assert clamp_start_index(value, 4) == expected

    def test_next_index(self):
        assert next_index(1, 3) == 2
        assert next_index(3, 3) == 1

    def test_fraction(self):
        state = EntityState.create(4.0)
        state.current_brightness = 1.0
        assert state.fraction == 0.25
        assert EntityState.create(0.0).fraction == 0.0
