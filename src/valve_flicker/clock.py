"""
Per-frame clock.

Delivers one delta_time (seconds since the previous frame) per frame to every
connected callback. Drive it by hand with tick() or let run() pace frames in
real time.
"""

from __future__ import annotations

import time
from collections.abc import Callable

TickCallback = Callable[[float], None]

DEFAULT_FPS = 60


class Connection:
    """Handle returned by FrameClock.connect()."""

    def __init__(self, clock: "FrameClock", callback: TickCallback):
        self._clock = clock
        self.callback = callback
        self.connected = True

    def disconnect(self) -> None:
        if self.connected:
            self.connected = False
            self._clock._remove(self)


class FrameClock:
    """
    Frame clock the scheduler subscribes to.

    Usage:
        clock = FrameClock()
        conn = clock.connect(lambda dt: print(dt))
        clock.tick(1 / 60)
        conn.disconnect()
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._time_source = time_source
        self._connections: list[Connection] = []
        self.frame_count = 0
        self.running = False

    def connect(self, callback: TickCallback) -> Connection:
        connection = Connection(self, callback)
        self._connections.append(connection)
        return connection

    def _remove(self, connection: Connection) -> None:
        if connection in self._connections:
            self._connections.remove(connection)

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def tick(self, delta_time: float) -> None:
        """Deliver one frame to every connected callback."""
        self.frame_count += 1
        # Snapshot: callbacks may disconnect themselves mid-frame
        for connection in list(self._connections):
            if connection.connected:
                connection.callback(delta_time)

    def run(
        self,
        fps: float = DEFAULT_FPS,
        should_continue: Callable[[], bool] | None = None,
        on_frame: Callable[[], None] | None = None,
        max_frames: int | None = None,
    ) -> None:
        """
        Tick in real time until stopped.

        Args:
            fps: Target frame rate
            should_continue: Polled once per frame; loop ends when it returns False
            on_frame: Called after every tick (e.g. to flush a streamer)
            max_frames: Stop after this many frames
        """
        interval = 1.0 / fps
        self.running = True
        last = self._time_source()
        frames = 0

        while self.running:
            if should_continue is not None and not should_continue():
                break
            if max_frames is not None and frames >= max_frames:
                break

            frame_start = self._time_source()
            delta_time = max(0.0, frame_start - last)
            last = frame_start

            self.tick(delta_time)
            if on_frame is not None:
                on_frame()
            frames += 1

            elapsed = self._time_source() - frame_start
            sleep_time = interval - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self.running = False

    def stop(self) -> None:
        """Make run() return after the current frame."""
        self.running = False
