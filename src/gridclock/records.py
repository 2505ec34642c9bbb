from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field, computed_field

from gridclock.constants import QUARTER_SECONDS
from gridclock.time.types import HalfType, QuarterType


class QuarterRecord(BaseModel):
    """Validated view of a quarter.

    The range on ``time_remaining`` mirrors the clamp in ``Quarter``; records
    exported from a live quarter always pass, hand-built ones may not.
    """
    quarter_type: QuarterType
    time_remaining: int = Field(ge=0, le=QUARTER_SECONDS)


class HalfRecord(BaseModel):
    half_type: HalfType
    quarters: List[QuarterRecord] = Field(min_length=2, max_length=2)

    @computed_field
    @property
    def time_remaining(self) -> int:
        return sum(q.time_remaining for q in self.quarters)
