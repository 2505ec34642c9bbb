from __future__ import annotations
from numbers import Real

from gridclock.constants import QUARTER_SECONDS
from gridclock.records import QuarterRecord
from gridclock.time.types import QuarterType


class Quarter:
    """A single period of play with a countdown clamped to [0, max_duration].

    Numeric writes to ``time_remaining`` never fail: anything at or past the
    period length is stored as the full length, anything at or below zero as
    0, fractions are truncated. Non-numbers (strings included) raise
    ``TypeError``. ``quarter_type`` is a free label and is not checked
    against the quarter's position in the game.
    """

    def __init__(self, quarter_type: QuarterType, duration_seconds: int = QUARTER_SECONDS):
        duration_seconds = int(duration_seconds)
        if not 0 < duration_seconds <= QUARTER_SECONDS:
            raise ValueError(
                f"Quarter duration must be in (0, {QUARTER_SECONDS}], got {duration_seconds}"
            )
        self.quarter_type = quarter_type
        self._max_duration = duration_seconds
        self._time_remaining = 0
        self.time_remaining = duration_seconds

    @property
    def max_duration(self) -> int:
        return self._max_duration

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @time_remaining.setter
    def time_remaining(self, value: int) -> None:
        if not isinstance(value, Real):
            raise TypeError(f"time_remaining must be a number, got {type(value).__name__}")
        value = int(value)
        if value >= self._max_duration:
            self._time_remaining = self._max_duration
        elif value <= 0:
            self._time_remaining = 0
        else:
            self._time_remaining = value

    @property
    def is_expired(self) -> bool:
        return self._time_remaining == 0

    def to_record(self) -> QuarterRecord:
        return QuarterRecord(quarter_type=self.quarter_type, time_remaining=self._time_remaining)

    def __repr__(self) -> str:
        return f"Quarter({self.quarter_type.name}, time_remaining={self._time_remaining})"
