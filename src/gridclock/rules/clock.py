from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from gridclock.config import ClockCfg
from gridclock.game import Game
from gridclock.time.half import HalfType
from gridclock.time.quarter import Quarter, QuarterType

logger = logging.getLogger(__name__)

WARNING_QUARTERS = (QuarterType.SECOND, QuarterType.FOURTH)

@dataclass(frozen=True, slots=True)
class ClockEvents:
    elapsed: int                 # seconds actually taken off the clock
    quarter_expired: bool = False
    half_expired: bool = False
    game_over: bool = False
    two_minute_warning: bool = False

class ClockFSM:
    """Runs time off a game's current quarter and advances the period labels.

    Plays are not simulated here: the caller decides how many seconds a snap
    took and whether the game is tied when regulation ends.
    """

    def __init__(self, cfg: Optional[ClockCfg] = None):
        self.cfg = cfg or ClockCfg()

    def run_clock(self, game: Game, seconds: int) -> ClockEvents:
        if seconds < 0:
            raise ValueError(f"Runoff cannot be negative: {seconds}")
        if game.is_over:
            raise ValueError("Game is over; start overtime before running the clock")
        q = game.current_quarter
        before = q.time_remaining
        q.time_remaining = before - seconds
        elapsed = before - q.time_remaining
        logger.debug("%s quarter: ran %ds, %ds left", q.quarter_type.value, elapsed, q.time_remaining)

        warning = self._two_minute_warning(game, q.quarter_type, before, q.time_remaining)
        if not q.is_expired:
            return ClockEvents(elapsed=elapsed, two_minute_warning=warning)

        half_expired, game_over = self._advance(game)
        return ClockEvents(
            elapsed=elapsed,
            quarter_expired=True,
            half_expired=half_expired,
            game_over=game_over,
            two_minute_warning=warning,
        )

    def can_start_overtime(self, game: Game) -> bool:
        cap = self.cfg.max_overtime_periods
        return game.is_over and (cap is None or len(game.overtime) < cap)

    def start_overtime(self, game: Game) -> Quarter:
        if not game.is_over:
            raise ValueError("Overtime can only start after the game clock has expired")
        cap = self.cfg.max_overtime_periods
        if cap is not None and len(game.overtime) >= cap:
            raise ValueError(f"Overtime limit reached ({cap} period(s)); the game ends tied")
        period = Quarter(QuarterType.OVERTIME, self.cfg.overtime_seconds)
        game.overtime.append(period)
        game.current_quarter = period
        logger.info("overtime period %d (%ds)", len(game.overtime), period.max_duration)
        return period

    def _two_minute_warning(self, game: Game, qt: QuarterType, before: int, after: int) -> bool:
        if not self.cfg.two_minute_warning or qt not in WARNING_QUARTERS:
            return False
        if qt in game.two_minute_warnings:
            return False
        threshold = self.cfg.two_minute_warning_s
        if before > threshold >= after:
            game.two_minute_warnings.add(qt)
            logger.info("two-minute warning, %s quarter", qt.value)
            return True
        return False

    def _advance(self, game: Game) -> Tuple[bool, bool]:
        """Move past an expired quarter. Returns (half_expired, game_over)."""
        q = game.current_quarter
        qt = q.quarter_type
        first, second = game.halves
        logger.info("last play of the %s quarter", qt.value)

        if qt == QuarterType.FIRST:
            game.current_quarter = first.quarters[1]
            return False, False
        if qt == QuarterType.SECOND:
            logger.info("last play of the %s half", game.current_half.half_type.value)
            game.current_half = second
            game.current_quarter = second.quarters[0]
            return True, False
        if qt == QuarterType.THIRD:
            game.current_quarter = second.quarters[1]
            return False, False
        if qt == QuarterType.FOURTH:
            logger.info("last play of the %s half", game.current_half.half_type.value)
            q.quarter_type = QuarterType.GAME_OVER
            game.current_half.half_type = HalfType.GAME_OVER
            logger.info("end of regulation")
            return True, True

        # overtime
        q.quarter_type = QuarterType.GAME_OVER
        logger.info("end of overtime period %d", len(game.overtime))
        return False, True
