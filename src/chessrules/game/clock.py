"""Chess clock: a plain countdown per side.

The clock never ends a game on its own; callers poll
:meth:`Clock.is_flag_fallen` and report it to the session.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from chessrules.core.enums import Color
from chessrules.game.interfaces import IClock, TimeControl


class Clock(IClock):
    """Two countdowns, at most one of them running.

    Args:
        time_control: Starting budget and per-move increment.
        now: Monotonic time source in seconds; injectable for tests.
    """

    __slots__ = ("_time_control", "_budget", "_active", "_started_at", "_now")

    def __init__(
        self,
        time_control: TimeControl,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        self._time_control = time_control
        self._budget: dict[Color, float] = dict.fromkeys(
            Color, time_control.initial_seconds
        )
        self._active: Color | None = None
        self._started_at: float | None = None
        self._now = now

    def start(self, color: Color) -> None:
        self._bank()
        self._active = color
        self._started_at = self._now()

    def stop(self) -> None:
        self._bank()
        self._started_at = None

    def switch(self) -> None:
        """Hand the running countdown to the other side."""
        if self._active is None:
            return
        running = self.is_running
        self._bank()
        self._active = self._active.opposite
        if running:
            self._started_at = self._now()

    def remaining(self, color: Color) -> float:
        left = self._budget[color]
        if self._started_at is not None and color == self._active:
            left -= self._now() - self._started_at
        return max(0.0, left)

    def is_flag_fallen(self, color: Color) -> bool:
        return self.remaining(color) <= 0.0

    def add_increment(self, color: Color) -> None:
        self._budget[color] += self._time_control.increment_seconds

    @property
    def is_unlimited(self) -> bool:
        return self._time_control.initial_seconds == float("inf")

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def active_color(self) -> Color | None:
        return self._active

    def _bank(self) -> None:
        # Fold the running stretch into the active side's budget.
        if self._started_at is None or self._active is None:
            return
        now = self._now()
        self._budget[self._active] = max(
            0.0, self._budget[self._active] - (now - self._started_at)
        )
        self._started_at = now
