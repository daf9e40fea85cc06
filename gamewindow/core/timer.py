"""
幀率計時器
"""

import time
from typing import Callable


class FrameTimer:
    """
    固定時間間隔的幀計時器

    每幀開始呼叫 start_frame()，處理完所有物件後呼叫 wait_frame()；
    wait_frame() 會阻塞到本幀時間結束，然後重設起始時間。
    """

    def __init__(self, frame_time_ms: int,
                 clock: Callable[[], float] = time.perf_counter,
                 sleep: Callable[[float], None] = time.sleep):
        self._clock = clock
        self._sleep = sleep
        self.frame_time_ms = 0
        self.set_frame_time(frame_time_ms)
        self.start_time = self._clock()

    def set_frame_time(self, frame_time_ms: int):
        """設定每幀時間（毫秒）"""
        if frame_time_ms < 0:
            raise ValueError(f"每幀時間不能為負數: {frame_time_ms}")
        self.frame_time_ms = frame_time_ms

    def get_frame_time(self) -> int:
        return self.frame_time_ms

    def start_frame(self):
        """標記本幀開始"""
        self.start_time = self._clock()

    def remaining(self) -> float:
        """本幀剩餘秒數"""
        deadline = self.start_time + self.frame_time_ms / 1000.0
        return max(0.0, deadline - self._clock())

    def wait_frame(self):
        """等待本幀結束，並開始下一幀"""
        remaining = self.remaining()
        if remaining > 0:
            self._sleep(remaining)
        self.start_time = self._clock()
