"""Cancellable repeating timer driven by elapsed milliseconds."""

from __future__ import annotations

from typing import Callable


class IntervalTimer:
    """Fires ``on_tick`` once per elapsed interval until cancelled.

    The owner feeds wall-clock progress through ``advance``; nothing here
    schedules itself. ``cancel`` is idempotent and runs ``on_complete`` only
    for the cancel that actually stops a running timer.
    """

    def __init__(self) -> None:
        self._interval = 0.0
        self._remaining = 0.0
        self._on_tick: Callable[[], None] | None = None
        self._on_complete: Callable[[], None] | None = None
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def interval(self) -> float:
        return self._interval

    def start(
        self,
        interval: float,
        on_tick: Callable[[], None],
        on_complete: Callable[[], None] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        if self._active:
            raise RuntimeError("Timer already running")
        self._interval = interval
        self._remaining = interval
        self._on_tick = on_tick
        self._on_complete = on_complete
        self._active = True

    def advance(self, elapsed: float) -> int:
        """Feed ``elapsed`` time; returns how many ticks fired."""
        if not self._active:
            return 0

        fired = 0
        self._remaining -= elapsed
        while self._active and self._remaining <= 0:
            self._remaining += self._interval
            fired += 1
            self._on_tick()
        return fired

    def cancel(self) -> bool:
        if not self._active:
            return False
        self._active = False
        on_complete = self._on_complete
        self._on_tick = None
        self._on_complete = None
        if on_complete is not None:
            on_complete()
        return True
