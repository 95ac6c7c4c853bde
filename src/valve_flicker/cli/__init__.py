"""
CLI entry points for valve-flicker.

- flicker_main: drive Hue (or mock) lights with flicker styles
"""

from .flicker import main as flicker_main

__all__ = [
    "flicker_main",
]
