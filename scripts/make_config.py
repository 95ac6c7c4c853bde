#!/usr/bin/env python3
"""
Write a starter config.yaml.

Usage: uv run python scripts/make_config.py [PATH] [--lights N]

Every light gets one of the built-in styles; two custom styles are included
as examples of the `styles:` section.
"""

import argparse
from pathlib import Path

from valve_flicker.config import FlickerConfig, StyleConfig, save_config


def main() -> int:
    parser = argparse.ArgumentParser(description="Write a starter config")
    parser.add_argument("path", type=Path, nargs="?", default=Path("config.yaml"))
    parser.add_argument("--lights", type=int, default=6)
    parser.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = parser.parse_args()

    if args.path.exists() and not args.force:
        print(f"{args.path} already exists (use --force to overwrite)")
        return 1

    config = FlickerConfig.with_defaults(args.lights)
    config.styles = [
        StyleConfig(style_id=20, sequence="mmnmmommommnonmmonqnmmo", name="Torch"),
        StyleConfig(style_id="alarm", sequence="az", transition_time=0.5, name="Alarm"),
    ]

    save_config(config, args.path)
    print(f"Wrote {args.path} ({len(config.lights)} lights, {len(config.styles)} custom styles)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
