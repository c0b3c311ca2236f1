"""
Frame timer - turns monotonic timestamps into per-frame delta time
"""

import time


class FrameTimer:
    """
    Measures the time between consecutive ticks

    No cap by default, so a stalled frame produces a large dt. Pass
    max_dt to clamp it.
    """
    def __init__(self, time_source=time.perf_counter, max_dt=None):
        """
        Args:
            time_source: Callable returning monotonic time in seconds
            max_dt: Optional upper bound on a single dt, in seconds
        """
        self.time_source = time_source
        self.max_dt = max_dt
        self.last_time = None
        self.elapsed = 0.0
        self.frames = 0

    def start(self):
        """Reset the reference timestamp"""
        self.last_time = self.time_source()

    def tick(self):
        """
        Seconds since the previous tick (0 on the very first tick)
        """
        now = self.time_source()
        if self.last_time is None:
            self.last_time = now
        dt = max(0.0, now - self.last_time)
        self.last_time = now

        if self.max_dt is not None:
            dt = min(dt, self.max_dt)

        self.elapsed += dt
        self.frames += 1
        return dt

    def __repr__(self):
        return f"FrameTimer(frames={self.frames}, elapsed={self.elapsed:.2f}s, max_dt={self.max_dt})"
