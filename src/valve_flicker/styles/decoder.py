"""
Letter pattern decoding.

Flicker sequences are strings of lowercase letters where 'a' is fully dark
and 'z' is full brightness, the classic Quake/Half-Life light style notation:

    "mmamammmmammamamaaamammma"   fluorescent flicker
    "abcdefghijklmnopqrstuvwxyz"  fade in

Each letter maps to a fraction of the light's own brightness.
"""

from ..errors import EmptySequence, InvalidArgumentType, InvalidSymbol

FIRST_SYMBOL = "a"
LAST_SYMBOL = "z"

_START = ord(FIRST_SYMBOL)
_SPAN = ord(LAST_SYMBOL) - ord(FIRST_SYMBOL)

# a -> 0.0, b -> 0.04, ..., z -> 1.0
LETTER_VALUES: dict[str, float] = {
    chr(code): (code - _START) / _SPAN
    for code in range(_START, ord(LAST_SYMBOL) + 1)
}


def decode(symbol: str) -> float:
    """Map a pattern symbol to a brightness fraction in [0, 1]."""
    try:
        return LETTER_VALUES[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbol(str(symbol)) from None


def is_valid_symbol(symbol: str) -> bool:
    return symbol in LETTER_VALUES


def validate_sequence(sequence: str) -> str:
    """
    Check a whole flicker sequence once, up front.

    Per-tick decoding relies on this having run, so it never has to handle
    bad characters itself.

    Returns:
        The sequence unchanged.

    Raises:
        InvalidArgumentType: sequence is not a string
        EmptySequence: sequence has no characters
        InvalidSymbol: first character outside 'a'..'z' (1-based position)
    """
    if not isinstance(sequence, str):
        raise InvalidArgumentType(
            f"Sequence must be a string, got {type(sequence).__name__}."
        )
    if not sequence:
        raise EmptySequence()

    for position, symbol in enumerate(sequence, start=1):
        if symbol not in LETTER_VALUES:
            raise InvalidSymbol(symbol, position)

    return sequence
