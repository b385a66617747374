import pytest

from blockfall.timing import FrameTimer


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


def test_sections_accumulate_per_name():
    clock = FakeClock()
    timer = FrameTimer(clock=clock)
    for delta in (0.1, 0.3):
        with timer.section("update"):
            clock.advance(delta)
    with timer.section("render"):
        clock.advance(0.05)

    rows = {row["name"]: row for row in timer.summary()}
    assert rows["update"]["count"] == 2
    assert rows["update"]["total"] == pytest.approx(0.4)
    assert rows["update"]["average"] == pytest.approx(0.2)
    assert rows["update"]["max"] == pytest.approx(0.3)
    assert [row["name"] for row in timer.summary()] == ["update", "render"]


def test_disabled_timer_records_nothing():
    clock = FakeClock()
    timer = FrameTimer(clock=clock, enabled=False)
    with timer.section("events"):
        clock.advance(1.0)
    assert timer.summary() == []
    assert timer.format_summary() == "No timings recorded."


def test_reset_and_format():
    clock = FakeClock()
    timer = FrameTimer(clock=clock)
    with timer.section("render"):
        clock.advance(0.002)
    assert "render: total=2.000ms" in timer.format_summary()
    timer.reset()
    assert timer.summary() == []
