"""Abstract interfaces and small value types for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

from chessrules.core.enums import Color


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class TimeControl:
    """Immutable time-control definition.

    Args:
        initial_seconds: Starting time per player.
        increment_seconds: Per-move increment (Fischer).
    """

    __slots__ = ("initial_seconds", "increment_seconds")

    def __init__(self, initial_seconds: float, increment_seconds: float = 0.0) -> None:
        self.initial_seconds = initial_seconds
        self.increment_seconds = increment_seconds

    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(300, 0)

    @classmethod
    def rapid_10m(cls) -> TimeControl:
        return cls(600, 0)

    @classmethod
    def unlimited(cls) -> TimeControl:
        """No time limit."""
        return cls(float("inf"), 0)

    def __repr__(self) -> str:
        mins = self.initial_seconds / 60
        if self.increment_seconds:
            return f"TimeControl({mins:.0f}m+{self.increment_seconds:.0f}s)"
        return f"TimeControl({mins:.0f}m)"


class IClock(ABC):
    """Countdown clock consumed by the presentation layer."""

    @abstractmethod
    def start(self, color: Color) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @abstractmethod
    def switch(self) -> None: ...

    @abstractmethod
    def remaining(self, color: Color) -> float: ...

    @abstractmethod
    def is_flag_fallen(self, color: Color) -> bool: ...

    @abstractmethod
    def add_increment(self, color: Color) -> None: ...
