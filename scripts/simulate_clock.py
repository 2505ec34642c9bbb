from __future__ import annotations

import argparse
import logging
import sys

import numpy as np
import pandas as pd

from gridclock.config import FullConfig, load_config, setup_logging
from gridclock.constants import PASS_PLAY_SECONDS, RUN_PLAY_SECONDS
from gridclock.game import QUARTER_NUMBER, new_game
from gridclock.rules.clock import ClockFSM

logger = logging.getLogger("simulate_clock")


def play_seconds(rng: np.random.Generator) -> int:
    base = RUN_PLAY_SECONDS if rng.random() < 0.45 else PASS_PLAY_SECONDS
    return int(max(1, rng.normal(base, 8.0)))


def drain_game(fsm: ClockFSM, rng: np.random.Generator, game_id: int, tie_rate: float) -> list[dict]:
    game = new_game(f"home{game_id}", f"away{game_id}")
    rows = []
    while True:
        number = QUARTER_NUMBER[game.current_quarter.quarter_type]
        ev = fsm.run_clock(game, play_seconds(rng))
        rows.append(dict(
            game=game_id, quarter=number, elapsed=ev.elapsed,
            two_minute_warning=ev.two_minute_warning, quarter_expired=ev.quarter_expired,
        ))
        if ev.game_over:
            if fsm.can_start_overtime(game) and rng.random() < tie_rate:
                fsm.start_overtime(game)
                continue
            return rows


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default="")
    ap.add_argument("--games", type=int, default=100)
    ap.add_argument("--tie-rate", type=float, default=0.05)
    args = ap.parse_args()

    cfg = load_config(args.config) if args.config else FullConfig()
    setup_logging(cfg)
    rng = np.random.default_rng(cfg.seed)
    fsm = ClockFSM(cfg.clock)

    rows = []
    for g in range(args.games):
        rows.extend(drain_game(fsm, rng, g, args.tie_rate))
    df = pd.DataFrame(rows)

    summary = df.groupby("quarter").agg(
        plays=("elapsed", "size"),
        seconds=("elapsed", "sum"),
        warnings=("two_minute_warning", "sum"),
    )
    summary["plays_per_game"] = summary["plays"] / args.games
    print(f"\n== Clock sim ==\ngames: {args.games}  seed: {cfg.seed}\n")
    print(summary.to_string())
    sys.stdout.flush()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.exception("simulate_clock error: %s", e)
        sys.exit(1)
