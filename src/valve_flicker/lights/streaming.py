"""Stream flicker levels to physical lights (Hue Entertainment API) or a terminal mock."""

from dataclasses import dataclass
import logging
import threading

logger = logging.getLogger(__name__)


@dataclass
class ChannelLevel:
    """Pending brightness for a channel."""
    channel_id: int
    level: float  # 0.0-1.0
    r: int = 255  # Tint, 0-255
    g: int = 255
    b: int = 255


def _clamp_level(level: float) -> float:
    return max(0.0, min(1.0, level))


class HueStreamer:
    """
    Stream brightness updates to Hue lights via the Entertainment API.

    Uses hue-entertainment-pykit for DTLS connection handling.
    """

    def __init__(
        self,
        bridge_ip: str,
        username: str,
        clientkey: str,
        entertainment_area_id: str,
        fps: int = 25,
    ):
        self.bridge_ip = bridge_ip
        self.username = username
        self.clientkey = clientkey
        self.entertainment_area_id = entertainment_area_id
        self.fps = fps

        self._streaming = None
        self._bridge = None
        self._running = False
        self._lock = threading.Lock()
        self._pending: dict[int, ChannelLevel] = {}
        self._channel_count = 0

    def start(self) -> None:
        """Start the streaming connection."""
        try:
            from hue_entertainment_pykit import Bridge, Entertainment, Streaming
        except ImportError:
            raise ImportError(
                "hue-entertainment-pykit is required. "
                "Install with: pip install 'valve-flicker[hue]'"
            )

        # hue_app_id is required for DTLS PSK identity (use username)
        self._bridge = Bridge(
            ip_address=self.bridge_ip,
            username=self.username,
            clientkey=self.clientkey,
            hue_app_id=self.username,
        )

        entertainment = Entertainment(self._bridge)
        ent_configs = entertainment.get_entertainment_configs()
        ent_conf_repo = entertainment.get_ent_conf_repo()

        target_config = None
        for config_id, config in ent_configs.items():
            if config_id == self.entertainment_area_id or config.id == self.entertainment_area_id:
                target_config = config
                break

        if target_config is None:
            raise ValueError(
                f"Entertainment area '{self.entertainment_area_id}' not found. "
                f"Available: {list(ent_configs.keys())}"
            )

        self._channel_count = len(target_config.channels)
        self._streaming = Streaming(self._bridge, target_config, ent_conf_repo)
        self._streaming.set_color_space("rgb")
        self._streaming.start_stream()
        self._running = True

        logger.info("Streaming started to %d channels", self._channel_count)

    def set_level(self, channel_id: int, level: float) -> None:
        """Queue a brightness (0.0-1.0) for a channel."""
        with self._lock:
            self._pending[channel_id] = ChannelLevel(channel_id, _clamp_level(level))

    def flush(self) -> None:
        """Send all pending updates."""
        if not self._streaming or not self._running:
            return

        with self._lock:
            for channel_id, pending in self._pending.items():
                r = pending.r / 255.0 * pending.level
                g = pending.g / 255.0 * pending.level
                b = pending.b / 255.0 * pending.level
                try:
                    self._streaming.set_input((r, g, b, channel_id))
                except Exception as e:
                    logger.warning("Error setting channel %d: %s", channel_id, e)
            self._pending.clear()

    def stop(self) -> None:
        """Stop the streaming connection."""
        self._running = False

        if self._streaming:
            try:
                self._streaming.stop_stream()
            except Exception as e:
                logger.warning("Error stopping stream: %s", e)
            self._streaming = None

        self._bridge = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def light_count(self) -> int:
        return self._channel_count

    def get_channel_ids(self) -> list[int]:
        return list(range(self._channel_count))


class MockStreamer:
    """Mock streamer for running without a Hue bridge."""

    def __init__(self, num_lights: int = 6, bar_length: int = 10, echo: bool = True):
        self.num_lights = num_lights
        self.bar_length = bar_length
        self.echo = echo
        self._running = False
        self.levels: dict[int, float] = {}

    def start(self) -> None:
        self._running = True
        logger.info("Mock streaming started with %d lights", self.num_lights)

    def set_level(self, channel_id: int, level: float) -> None:
        self.levels[channel_id] = _clamp_level(level)

    def render(self) -> str:
        """One-line brightness bars for every channel."""
        bars = []
        for i in range(self.num_lights):
            filled = int(self.levels.get(i, 0.0) * self.bar_length)
            bars.append(f"L{i}:{'█' * filled}{'░' * (self.bar_length - filled)}")
        return " ".join(bars)

    def flush(self) -> None:
        """Print current levels."""
        if self.echo and self.levels:
            print(self.render(), end="\r")

    def stop(self) -> None:
        self._running = False
        if self.echo:
            print()
        logger.info("Mock streaming stopped")

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def light_count(self) -> int:
        return self.num_lights

    def get_channel_ids(self) -> list[int]:
        return list(range(self.num_lights))


class ChannelLight:
    """
    A streamer channel exposed as a flicker-able light.

    Brightness is stored locally and pushed to the streamer on every write;
    the frame loop flushes the streamer once per frame.
    """

    def __init__(self, streamer: HueStreamer | MockStreamer, channel_id: int, brightness: float = 1.0):
        self.streamer = streamer
        self.channel_id = channel_id
        self._brightness = brightness
        streamer.set_level(channel_id, brightness)

    def get_brightness(self) -> float:
        return self._brightness

    def set_brightness(self, value: float) -> None:
        self._brightness = value
        self.streamer.set_level(self.channel_id, value)

    def is_live(self) -> bool:
        return self.streamer.is_running and self.channel_id < self.streamer.light_count

    def __repr__(self) -> str:
        return f"<ChannelLight {self.channel_id} brightness={self._brightness:.2f}>"
