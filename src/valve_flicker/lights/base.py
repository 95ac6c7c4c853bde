"""Light capability used by the flicker engine."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Light(Protocol):
    """
    Anything with a brightness the engine can animate.

    The engine never depends on a concrete light type, only on these
    three methods.
    """

    def get_brightness(self) -> float:
        """Current brightness."""
        ...

    def set_brightness(self, value: float) -> None:
        """Apply a new brightness."""
        ...

    def is_live(self) -> bool:
        """False once the light is gone (removed, disconnected, ...)."""
        ...


class SimpleLight:
    """In-memory light, for scripts and tests."""

    def __init__(self, brightness: float = 1.0, name: str = ""):
        self.brightness = brightness
        self.name = name
        self.live = True

    def get_brightness(self) -> float:
        return self.brightness

    def set_brightness(self, value: float) -> None:
        self.brightness = value

    def is_live(self) -> bool:
        return self.live

    def remove(self) -> None:
        """Take the light out of the scene."""
        self.live = False

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<SimpleLight{label} brightness={self.brightness:.2f}>"
