"""Exceptions raised by the flicker engine."""


class FlickerError(Exception):
    """Base class for all flicker errors."""


class DuplicateStyleId(FlickerError, ValueError):
    """A style with this id is already registered."""

    def __init__(self, style_id):
        self.style_id = style_id
        super().__init__(f"A light style with id {style_id!r} already exists.")


class InvalidSymbol(FlickerError, ValueError):
    """A sequence character outside 'a'..'z'."""

    def __init__(self, symbol: str, position: int | None = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid character {symbol!r}{where} in flicker sequence.")


class EmptySequence(FlickerError, ValueError):
    """A flicker sequence with no characters."""

    def __init__(self):
        super().__init__("Flicker sequence must contain at least one character.")


class InvalidTransitionTime(FlickerError, ValueError):
    """Transition time that is not a positive, finite number of seconds."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Transition time must be a positive number of seconds, got {value!r}.")


class InvalidArgumentType(FlickerError, TypeError):
    """An argument of the wrong type was passed to a public operation."""


class UnknownStyle(FlickerError, KeyError):
    """No style is registered under this id."""

    def __init__(self, style_id):
        self.style_id = style_id
        super().__init__(style_id)

    def __str__(self) -> str:
        return f"Light style with id {self.style_id!r} does not exist."
