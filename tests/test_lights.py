"""Tests for light implementations and streamers."""

from unittest.mock import MagicMock

import pytest

from valve_flicker.lights import ChannelLight, HueStreamer, Light, MockStreamer, SimpleLight


class TestSimpleLight:

    def test_satisfies_light_protocol(self):
        assert isinstance(SimpleLight(), Light)

    def test_remove(self):
        light = SimpleLight(0.5)
        assert light.is_live()
        light.remove()
        assert not light.is_live()


class TestMockStreamer:

    def test_levels_clamped(self):
        streamer = MockStreamer(num_lights=2, echo=False)
        streamer.set_level(0, 1.5)
        streamer.set_level(1, -1.0)
        assert streamer.levels == {0: 1.0, 1: 0.0}

    def test_render_bars(self):
        streamer = MockStreamer(num_lights=2, bar_length=4, echo=False)
        streamer.set_level(0, 0.5)
        assert streamer.render() == "L0:██░░ L1:░░░░"


class TestChannelLight:

    def test_writes_through_to_streamer(self):
        streamer = MockStreamer(num_lights=3, echo=False)
        streamer.start()
        light = ChannelLight(streamer, 1, brightness=0.7)
        assert streamer.levels[1] == 0.7
        light.set_brightness(0.2)
        assert light.get_brightness() == 0.2
        assert streamer.levels[1] == 0.2
        assert isinstance(light, Light)

    def test_live_only_while_streaming(self):
        streamer = MockStreamer(num_lights=2, echo=False)
        light = ChannelLight(streamer, 0)
        assert not light.is_live()
        streamer.start()
        assert light.is_live()
        assert not ChannelLight(streamer, 5).is_live()
        streamer.stop()
        assert not light.is_live()

    def test_flickers_on_engine(self, engine, clock):
        streamer = MockStreamer(num_lights=1, echo=False)
        streamer.start()
        light = ChannelLight(streamer, 0, brightness=1.0)
        engine.start_flicker(light, 9)  # slow strobe, starts on 'a'
        clock.tick(0.1)
        assert streamer.levels[0] == 0.0
        engine.stop_flicker(light, 9)
        assert streamer.levels[0] == 1.0


class TestHueStreamer:

    def test_flush_without_connection_is_noop(self):
        streamer = HueStreamer("10.0.0.2", "u", "k", "area")
        streamer.set_level(0, 0.5)
        streamer.flush()
        assert not streamer.is_running
        assert streamer.light_count == 0

    def test_flush_sends_white_levels(self):
        streamer = HueStreamer("10.0.0.2", "u", "k", "area")
        streamer._streaming = MagicMock()
        streamer._running = True
        streamer.set_level(2, 0.5)
        streamer.flush()
        streamer._streaming.set_input.assert_called_once_with((0.5, 0.5, 0.5, 2))

    def test_stop(self):
        streamer = HueStreamer("10.0.0.2", "u", "k", "area")
        stream = MagicMock()
        streamer._streaming = stream
        streamer._running = True
        streamer.stop()
        stream.stop_stream.assert_called_once()
        assert not streamer.is_running

    def test_start_requires_library(self, monkeypatch):
        import builtins

        real_import = builtins.__import__

        def fake_import(name, *args, **kwargs):
            if name == "hue_entertainment_pykit":
                raise ImportError(name)
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(builtins, "__import__", fake_import)
        with pytest.raises(ImportError, match="hue-entertainment-pykit"):
            HueStreamer("10.0.0.2", "u", "k", "area").start()
