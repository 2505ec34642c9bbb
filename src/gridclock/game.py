from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Set, Tuple

import numpy as np

from gridclock.constants import CLOCK_BIN_SECONDS, MAX_CLOCK_BIN
from gridclock.state import ClockState
from gridclock.time.half import FirstHalf, Half, SecondHalf
from gridclock.time.quarter import Quarter, QuarterType

QUARTER_NUMBER = {
    QuarterType.FIRST: 1,
    QuarterType.SECOND: 2,
    QuarterType.THIRD: 3,
    QuarterType.FOURTH: 4,
    QuarterType.OVERTIME: 5,
    QuarterType.GAME_OVER: 0,
}


@dataclass(eq=False)
class Game:
    """Two teams and the game clock tree they play on.

    Teams are opaque to the clock. The game owns both halves and any
    overtime periods; ``current_half`` and ``current_quarter`` point into
    that tree and are moved by the clock driver.
    """
    home_team: Any
    away_team: Any
    overtime: List[Quarter] = field(default_factory=list, init=False)
    two_minute_warnings: Set[QuarterType] = field(default_factory=set, init=False)
    halves: Tuple[Half, Half] = field(init=False)
    current_half: Half = field(init=False)
    current_quarter: Quarter = field(init=False)

    def __post_init__(self):
        self.halves = (FirstHalf(), SecondHalf())
        self.current_half = self.halves[0]
        self.current_quarter = self.halves[0].quarters[0]

    @property
    def time_remaining(self) -> int:
        regulation = self.halves[0].time_remaining + self.halves[1].time_remaining
        return regulation + sum(q.time_remaining for q in self.overtime)

    @property
    def is_over(self) -> bool:
        return self.current_quarter.quarter_type == QuarterType.GAME_OVER

    @property
    def in_overtime(self) -> bool:
        return any(q is self.current_quarter for q in self.overtime)

    def clock_state(self) -> ClockState:
        q = self.current_quarter
        half_seconds = q.time_remaining if self.in_overtime else self.current_half.time_remaining
        return ClockState(
            quarter=QUARTER_NUMBER[q.quarter_type],
            quarter_seconds=q.time_remaining,
            clock_bin=int(np.clip(q.time_remaining // CLOCK_BIN_SECONDS, 0, MAX_CLOCK_BIN)),
            half_seconds=half_seconds,
            game_seconds=self.time_remaining,
        )


def new_game(home_team: Any, away_team: Any) -> Game:
    return Game(home_team=home_team, away_team=away_team)
