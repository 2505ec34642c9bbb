from __future__ import annotations

from gridclock.records import HalfRecord
from gridclock.time.quarter import Quarter
from gridclock.time.types import HalfType, QuarterType


class Half:
    """Two quarters and their combined remaining time.

    The quarters are built once from the half type: FIRST gets quarters one
    and two, every other type gets three and four. Changing ``half_type``
    later relabels the half only; the quarters stay as built.
    """

    def __init__(self, half_type: HalfType):
        self.half_type = half_type
        if half_type == HalfType.FIRST:
            first, second = QuarterType.FIRST, QuarterType.SECOND
        else:
            first, second = QuarterType.THIRD, QuarterType.FOURTH
        self._quarters = (Quarter(first), Quarter(second))

    @property
    def quarters(self) -> tuple[Quarter, Quarter]:
        return self._quarters

    @property
    def time_remaining(self) -> int:
        # recomputed on every read; callers mutate the quarters in place
        return self._quarters[0].time_remaining + self._quarters[1].time_remaining

    def to_record(self) -> HalfRecord:
        return HalfRecord(
            half_type=self.half_type,
            quarters=[q.to_record() for q in self._quarters],
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.half_type.name}, time_remaining={self.time_remaining})"


class FirstHalf(Half):
    def __init__(self):
        super().__init__(HalfType.FIRST)


class SecondHalf(Half):
    def __init__(self):
        super().__init__(HalfType.SECOND)
