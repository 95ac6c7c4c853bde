#!/usr/bin/env python3
"""
Print a flicker style's brightness curve, one frame per line.

Usage: uv run python scripts/preview_style.py STYLE [--sequence LETTERS] [--frames N] [--fps N]

Examples:
    preview_style.py 1                      # built-in fluorescent flicker
    preview_style.py glow --sequence mnopqrstsrqpon --transition 0.2
"""

import argparse

from valve_flicker.cli.flicker import parse_style_id
from valve_flicker.clock import FrameClock
from valve_flicker.debug import brightness_bar
from valve_flicker.engine import FlickerEngine
from valve_flicker.lights import SimpleLight


def main() -> int:
    parser = argparse.ArgumentParser(description="Preview a flicker style")
    parser.add_argument("style", type=parse_style_id)
    parser.add_argument("--sequence", help="Create a custom style with these letters")
    parser.add_argument("--transition", type=float, default=None, help="Seconds per letter")
    parser.add_argument("--frames", type=int, default=60)
    parser.add_argument("--fps", type=int, default=30)
    args = parser.parse_args()
    if args.fps <= 0:
        parser.error("--fps must be positive")

    clock = FrameClock()
    engine = FlickerEngine(clock).startup()
    if args.sequence:
        if args.style in engine.styles:
            engine.remove_style(args.style)
        engine.create_custom_style(args.style, args.sequence, args.transition)

    light = SimpleLight(brightness=1.0, name="preview")
    engine.start_flicker(light, args.style)
    state = engine.get_state(light, args.style)
    if state is None:
        print(f"Unknown style: {args.style}")
        return 1

    style = engine.styles.get(args.style)
    for frame in range(args.frames):
        clock.tick(1.0 / args.fps)
        symbol = style.sequence[state.current_index - 1]
        print(f"{frame:4d}  {symbol}  {light.brightness:5.2f}  {brightness_bar(light.brightness, 1.0)}")

    engine.stop_flicker(light, args.style)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
