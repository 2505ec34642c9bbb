from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class ClockState:
    quarter: int            # 1..5 (OT=5), 0 once the game is over
    quarter_seconds: int    # 0..900 left in the current quarter
    clock_bin: int          # 0..179 (5s bins within quarter, counting down)
    half_seconds: int       # 0..1800 left in the current half (OT: the period)
    game_seconds: int       # regulation plus overtime left
