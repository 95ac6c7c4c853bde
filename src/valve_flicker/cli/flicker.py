"""Flicker lights with classic light styles.

Drives a Hue entertainment area (or a terminal mock) from a YAML config:
every channel gets a style, and one frame clock animates them all.
"""

import argparse
import logging
import signal
from pathlib import Path

from valve_flicker.clock import FrameClock
from valve_flicker.config import FlickerConfig, apply_config, load_config
from valve_flicker.debug import ConsoleOverlay, NullOverlay
from valve_flicker.engine import FlickerEngine
from valve_flicker.lights import ChannelLight, HueStreamer, MockStreamer
from valve_flicker.styles import list_default_styles

DEFAULT_CONFIG = Path("config.yaml")


def parse_style_id(value: str):
    """Numeric style ids become ints, anything else stays a string key."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valve-flicker",
        description="Animate lights with letter-coded flicker styles.",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--mock", action="store_true", help="Use terminal lights instead of Hue")
    parser.add_argument("--fps", type=int, default=None, help="Frame rate (overrides config)")
    parser.add_argument("--style", type=parse_style_id, default=None, help="Use one style for every light")
    parser.add_argument("--debug", action="store_true", help="Print debug labels once per second")
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--list-styles", action="store_true", help="List built-in styles and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def print_styles() -> None:
    print("=" * 60)
    print("  Built-in light styles")
    print("=" * 60)
    for style_id, name, sequence in list_default_styles():
        print(f"  {style_id:>3}  {name:<30} {sequence}")


def resolve_config(path: Path | None) -> FlickerConfig:
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        return load_config(path)
    if DEFAULT_CONFIG.exists():
        return load_config(DEFAULT_CONFIG)
    return FlickerConfig.with_defaults()


def main(argv: list[str] | None = None) -> int:
    """Main flicker loop."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_styles:
        print_styles()
        return 0

    try:
        config = resolve_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    fps = args.fps if args.fps is not None else config.fps
    if not isinstance(fps, int) or isinstance(fps, bool) or fps <= 0:
        print(f"Error: fps must be a positive whole number, got {fps!r}")
        return 1

    if args.mock or config.hue is None:
        streamer = MockStreamer(num_lights=config.mock_lights)
    else:
        streamer = HueStreamer(
            bridge_ip=config.hue.bridge_ip,
            username=config.hue.username,
            clientkey=config.hue.clientkey,
            entertainment_area_id=config.hue.entertainment_area_id,
            fps=config.hue.fps,
        )

    show_debug = args.debug or config.debug_overlay
    overlay = ConsoleOverlay() if show_debug else NullOverlay()
    clock = FrameClock()
    engine = FlickerEngine(
        clock=clock,
        overlay=overlay,
        default_transition_time=config.default_transition_time,
        register_defaults=config.register_defaults,
    ).startup()

    try:
        apply_config(engine, config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    streamer.start()
    print(f"[FLICKER] {streamer.light_count} lights @ {fps} fps")

    lights: list[tuple[ChannelLight, object]] = []
    for channel in streamer.get_channel_ids():
        light_config = config.light_for_channel(channel)
        style_id = args.style
        if style_id is None:
            if light_config is None:
                continue
            style_id = light_config.style

        brightness = light_config.brightness if light_config else 1.0
        light = ChannelLight(streamer, channel, brightness)
        engine.start_flicker(
            light,
            style_id,
            debug=show_debug or bool(light_config and light_config.debug),
            start_index=light_config.start_index if light_config else None,
        )
        if engine.is_flickering(light, style_id):
            lights.append((light, style_id))
            print(f"[FLICKER] Channel {channel}: style {style_id}")

    def signal_handler(sig, frame):
        clock.stop()
        print("\n[SHUTDOWN] Stopping...")

    previous_handlers = {
        sig: signal.signal(sig, signal_handler) for sig in (signal.SIGINT, signal.SIGTERM)
    }

    def on_frame():
        streamer.flush()
        if show_debug and clock.frame_count % fps == 0:
            overlay.show()

    try:
        clock.run(fps=fps, on_frame=on_frame, max_frames=args.frames)
    finally:
        # Put every light back to its configured brightness
        for light, style_id in lights:
            engine.stop_flicker(light, style_id)
        engine.shutdown()
        streamer.flush()
        streamer.stop()
        for sig, handler in previous_handlers.items():
            signal.signal(sig, handler)

    print("[FLICKER] Stopped")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
