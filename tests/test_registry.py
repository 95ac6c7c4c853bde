"""Tests for the style registry and built-in style table."""

import math

import pytest

from valve_flicker.errors import (
    DuplicateStyleId,
    EmptySequence,
    InvalidArgumentType,
    InvalidSymbol,
    InvalidTransitionTime,
    UnknownStyle,
)
from valve_flicker.styles import DEFAULT_STYLES, StyleRegistry, register_default_styles
from valve_flicker.styles.registry import DEFAULT_TRANSITION_TIME


@pytest.fixture
def registry():
    return StyleRegistry()


class TestCreateStyle:

    def test_new_style_is_idle(self, registry):
        style = registry.create_style("torch", "mmnmmo")
        assert style.sequence == "mmnmmo"
        assert style.entities == {}
        assert style.tick_active is False
        assert registry.lookup("torch") is style

    def test_default_transition_time(self, registry):
        style = registry.create_style(1, "ab")
        assert style.transition_time == pytest.approx(0.1)
        assert DEFAULT_TRANSITION_TIME == pytest.approx(0.1)

    def test_custom_transition_time(self, registry):
        assert registry.create_style(1, "ab", 0.5).transition_time == 0.5

    def test_registry_default_transition_time(self):
        registry = StyleRegistry(default_transition_time=0.25)
        assert registry.create_style(1, "ab").transition_time == 0.25

    def test_duplicate_id(self, registry):
        registry.create_style(1, "ab")
        with pytest.raises(DuplicateStyleId):
            registry.create_style(1, "cd")
        assert registry.lookup(1).sequence == "ab"

    def test_invalid_symbol_leaves_no_style(self, registry):
        with pytest.raises(InvalidSymbol):
            registry.create_style(1, "abC")
        assert 1 not in registry

    def test_empty_sequence(self, registry):
        with pytest.raises(EmptySequence):
            registry.create_style(1, "")
        assert len(registry) == 0

    @pytest.mark.parametrize("value", [0, -0.1, math.inf, math.nan])
    def test_bad_transition_time(self, registry, value):
        with pytest.raises(InvalidTransitionTime):
            registry.create_style(1, "ab", value)
        assert 1 not in registry

    @pytest.mark.parametrize("value", ["0.1", True])
    def test_transition_time_wrong_type(self, registry, value):
        with pytest.raises(InvalidArgumentType):
            registry.create_style(1, "ab", value)

    def test_unhashable_id(self, registry):
        with pytest.raises(InvalidArgumentType):
            registry.create_style(["x"], "ab")


class TestLookup:

    def test_missing_returns_none(self, registry):
        assert registry.lookup("nope") is None

    def test_get_missing_raises(self, registry):
        with pytest.raises(UnknownStyle):
            registry.get("nope")

    def test_discard(self, registry):
        registry.create_style(1, "ab")
        registry.discard(1)
        assert 1 not in registry
        assert registry.discard(1) is None

    def test_iteration_snapshot(self, registry):
        registry.create_style(1, "ab")
        registry.create_style(2, "cd")
        for style in registry:
            registry.discard(style.style_id)
        assert len(registry) == 0


class TestDefaultStyles:

    def test_registers_table(self, registry):
        created = register_default_styles(registry)
        assert sorted(created) == sorted(DEFAULT_STYLES)
        assert registry.lookup(63).sequence == "a"
        assert registry.lookup(1).name == "Fluorescent flicker"

    def test_table_ids(self):
        assert set(DEFAULT_STYLES) == set(range(12)) | {63}

    def test_reregister_only_missing(self, registry):
        register_default_styles(registry)
        registry.discard(4)
        assert register_default_styles(registry) == [4]
