from __future__ import annotations
from enum import Enum


class QuarterType(Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    OVERTIME = "overtime"
    GAME_OVER = "game_over"


class HalfType(Enum):
    FIRST = "first"
    SECOND = "second"
    GAME_OVER = "game_over"
