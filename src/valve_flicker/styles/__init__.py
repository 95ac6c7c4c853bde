"""Light style definitions, decoding and per-light interpolation state."""

from .decoder import LETTER_VALUES, decode, validate_sequence
from .defaults import DEFAULT_STYLES, list_default_styles, register_default_styles
from .registry import DEFAULT_TRANSITION_TIME, Style, StyleRegistry
from .state import EntityState, advance, clamp_start_index

__all__ = [
    "LETTER_VALUES",
    "decode",
    "validate_sequence",
    "DEFAULT_STYLES",
    "list_default_styles",
    "register_default_styles",
    "DEFAULT_TRANSITION_TIME",
    "Style",
    "StyleRegistry",
    "EntityState",
    "advance",
    "clamp_start_index",
]
