"""
FrameTimer 的測試
"""

import pytest

from gamewindow.core import FrameTimer


class FakeClock:
    """可手動推進的時鐘"""

    def __init__(self, now: float = 100.0):
        self.now = now
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestFrameTimer:
    def test_waits_remaining_frame_time(self, clock):
        timer = FrameTimer(25, clock=clock, sleep=clock.sleep)
        timer.start_frame()
        clock.now += 0.010
        timer.wait_frame()
        assert clock.sleeps == [pytest.approx(0.015)]
        assert clock.now == pytest.approx(100.025)

    def test_resets_start_after_wait(self, clock):
        timer = FrameTimer(25, clock=clock, sleep=clock.sleep)
        timer.start_frame()
        timer.wait_frame()
        assert timer.start_time == pytest.approx(100.025)
        # 下一幀從上一幀結束時開始計時
        clock.now += 0.005
        timer.wait_frame()
        assert clock.sleeps[-1] == pytest.approx(0.020)

    def test_no_sleep_when_frame_overran(self, clock):
        timer = FrameTimer(25, clock=clock, sleep=clock.sleep)
        timer.start_frame()
        clock.now += 0.040
        timer.wait_frame()
        assert clock.sleeps == []
        assert timer.start_time == pytest.approx(100.040)

    def test_set_frame_time(self, clock):
        timer = FrameTimer(25, clock=clock, sleep=clock.sleep)
        timer.set_frame_time(50)
        assert timer.get_frame_time() == 50
        timer.start_frame()
        assert timer.remaining() == pytest.approx(0.050)

    def test_zero_frame_time(self, clock):
        timer = FrameTimer(0, clock=clock, sleep=clock.sleep)
        timer.start_frame()
        timer.wait_frame()
        assert clock.sleeps == []

    def test_negative_frame_time_rejected(self, clock):
        with pytest.raises(ValueError):
            FrameTimer(-1, clock=clock, sleep=clock.sleep)
        timer = FrameTimer(10, clock=clock, sleep=clock.sleep)
        with pytest.raises(ValueError):
            timer.set_frame_time(-5)
        assert timer.get_frame_time() == 10
