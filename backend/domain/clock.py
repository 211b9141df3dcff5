"""
Tick cadence helper.
"""

import time
from typing import Callable, Optional


class TickTimer:
    """
    Decides when the next tick is due.

    `due(interval)` is true once at least `interval` seconds have passed
    since the last tick it reported, and restarts the countdown when it is.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.last_tick = clock()

    def due(self, interval: float, now: Optional[float] = None) -> bool:
        if now is None:
            now = self.clock()
        if now - self.last_tick >= interval:
            self.last_tick = now
            return True
        return False

    def reset(self, now: Optional[float] = None):
        self.last_tick = self.clock() if now is None else now
