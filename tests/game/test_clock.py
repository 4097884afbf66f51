"""Tests for Clock."""

from chessrules.core.enums import Color
from chessrules.game.clock import Clock
from chessrules.game.interfaces import TimeControl


class FakeTime:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestClockBasics:
    def test_initial_remaining(self) -> None:
        clock = Clock(TimeControl(300, 0))
        assert clock.remaining(Color.WHITE) == 300.0
        assert clock.remaining(Color.BLACK) == 300.0
        assert not clock.is_running
        assert clock.active_color is None

    def test_start_runs_one_side(self) -> None:
        fake = FakeTime()
        clock = Clock(TimeControl(300, 0), now=fake)
        clock.start(Color.WHITE)
        fake.advance(12.5)
        assert clock.is_running
        assert clock.active_color == Color.WHITE
        assert clock.remaining(Color.WHITE) == 287.5
        assert clock.remaining(Color.BLACK) == 300.0

    def test_stop_pauses(self) -> None:
        fake = FakeTime()
        clock = Clock(TimeControl(300, 0), now=fake)
        clock.start(Color.WHITE)
        fake.advance(10)
        clock.stop()
        fake.advance(50)
        assert not clock.is_running
        assert clock.remaining(Color.WHITE) == 290.0

    def test_switch(self) -> None:
        fake = FakeTime()
        clock = Clock(TimeControl(300, 0), now=fake)
        clock.start(Color.WHITE)
        fake.advance(20)
        clock.switch()
        fake.advance(5)
        assert clock.active_color == Color.BLACK
        assert clock.remaining(Color.WHITE) == 280.0
        assert clock.remaining(Color.BLACK) == 295.0

    def test_switch_before_start_is_ignored(self) -> None:
        clock = Clock(TimeControl(300, 0))
        clock.switch()
        assert clock.active_color is None


class TestClockFlag:
    def test_flag_falls_at_zero(self) -> None:
        fake = FakeTime()
        clock = Clock(TimeControl.blitz_5m(), now=fake)
        clock.start(Color.BLACK)
        fake.advance(299)
        assert not clock.is_flag_fallen(Color.BLACK)
        fake.advance(5)
        assert clock.is_flag_fallen(Color.BLACK)
        assert clock.remaining(Color.BLACK) == 0.0

    def test_unlimited_never_falls(self) -> None:
        fake = FakeTime()
        clock = Clock(TimeControl.unlimited(), now=fake)
        clock.start(Color.WHITE)
        fake.advance(1e9)
        assert clock.is_unlimited
        assert not clock.is_flag_fallen(Color.WHITE)


class TestClockIncrement:
    def test_fischer_increment(self) -> None:
        fake = FakeTime()
        clock = Clock(TimeControl(300, 5), now=fake)
        clock.start(Color.WHITE)
        fake.advance(3)
        clock.switch()
        clock.add_increment(Color.WHITE)
        assert clock.remaining(Color.WHITE) == 302.0


class TestTimeControl:
    def test_presets(self) -> None:
        assert TimeControl.rapid_10m().initial_seconds == 600
        assert repr(TimeControl(180, 2)) == "TimeControl(3m+2s)"
        assert repr(TimeControl.blitz_5m()) == "TimeControl(5m)"
