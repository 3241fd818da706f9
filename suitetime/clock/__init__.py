from .clocks import Clock, ManualClock, MonotonicClock, WallClock

__all__ = ["Clock", "MonotonicClock", "WallClock", "ManualClock"]
