"""Time-derived ID generator for orders and ratings.

IDs are the millisecond timestamp as a decimal string. Two requests in
the same millisecond would collide, so the generator never hands out a
value lower than or equal to the previous one.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimeIdGenerator:

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._last = -1

    @property
    def clock(self) -> Clock:
        return self._clock

    def next_id(self) -> str:
        ms = int(self._clock().timestamp() * 1000)
        if ms <= self._last:
            ms = self._last + 1
        self._last = ms
        return str(ms)
