"""
Built-in light styles.

The classic Quake / Half-Life light style table, keyed by style number.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .registry import StyleRegistry


# style id -> (name, sequence)
DEFAULT_STYLES: dict[int, tuple[str, str]] = {
    0: ("Normal", "m"),
    1: ("Fluorescent flicker", "mmamammmmammamamaaamammma"),
    2: ("Slow strong pulse", "abcdefghijklmnopqrstuvwxyzyxwvutsrqponmlkjihgfedcba"),
    3: ("Candle", "mmmmmaaaaammmmmaaaaaabcdefgabcdefg"),
    4: ("Fast strobe", "mamamamamama"),
    5: ("Gentle pulse", "jklqrstuvwxyzyxwvutsrqponmlkj"),
    6: ("Flicker", "nmonqnmomnmomomno"),
    7: ("Candle 2", "mmmaaaabcdefgmmmmaaaammmaamm"),
    8: ("Candle 3", "mmmaaammmaaammmabcdefaaaammmmabcdefmmmaaaa"),
    9: ("Slow strobe", "aaaaaaaazzzzzzzz"),
    10: ("Fluorescent flicker 2", "mmamammmmammamamaaamammma"),
    11: ("Slow pulse not fade to black", "abcdefghijklmnopqrrqponmlkjihgfedcba"),
    63: ("Constant light", "a"),
}


def register_default_styles(registry: "StyleRegistry") -> list[int]:
    """
    Register every built-in style that isn't already present.

    Styles without lights are swept from the registry, so this is safe to
    call again to bring collapsed defaults back.

    Returns:
        Ids of the styles that were (re)created.
    """
    created = []
    for style_id, (name, sequence) in DEFAULT_STYLES.items():
        if style_id in registry:
            continue
        registry.create_style(style_id, sequence, name=name)
        created.append(style_id)
    return created


def list_default_styles() -> list[tuple[int, str, str]]:
    """(id, name, sequence) for every built-in style."""
    return [(style_id, name, seq) for style_id, (name, seq) in DEFAULT_STYLES.items()]
