from __future__ import annotations

# Period lengths (seconds)
QUARTER_SECONDS = 900
HALF_SECONDS = 2 * QUARTER_SECONDS
REGULATION_SECONDS = 2 * HALF_SECONDS
OVERTIME_SECONDS = 600

# Clock events
TWO_MINUTE_WARNING_S = 120
CLOCK_BIN_SECONDS = 5
MAX_CLOCK_BIN = QUARTER_SECONDS // CLOCK_BIN_SECONDS - 1

# Nominal runoff per snap (prototype; callers own real play timing)
RUN_PLAY_SECONDS = 38
PASS_PLAY_SECONDS = 28
