from __future__ import annotations
import logging
from typing import Optional

from pydantic import BaseModel, Field
import yaml

from gridclock.constants import OVERTIME_SECONDS, QUARTER_SECONDS, TWO_MINUTE_WARNING_S

class ClockCfg(BaseModel):
    overtime_seconds: int = Field(OVERTIME_SECONDS, gt=0, le=QUARTER_SECONDS)
    two_minute_warning: bool = True
    two_minute_warning_s: int = Field(TWO_MINUTE_WARNING_S, gt=0, lt=QUARTER_SECONDS)
    max_overtime_periods: Optional[int] = Field(None, ge=1)  # None: no cap (playoffs)

class LoggingCfg(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class FullConfig(BaseModel):
    seed: int = 42
    clock: ClockCfg = ClockCfg()
    logging: LoggingCfg = LoggingCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)

def setup_logging(cfg: FullConfig) -> None:
    logging.basicConfig(format=cfg.logging.format)
    # basicConfig is a no-op once handlers exist; the level still applies
    logging.getLogger().setLevel(cfg.logging.level.upper())
