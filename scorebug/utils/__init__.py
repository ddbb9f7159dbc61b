"""
Utilities package for the indoor hockey scoreboard overlay.

This package contains constants, time formatting helpers and the
scheduler abstraction used throughout the application.
"""
from .time_utils import fmt_mmss, fmt_countdown, now_ts
from .constants import (
    APP_TITLE, TICK_INTERVAL_SECONDS, HALF_LENGTH_MIN,
    GOAL_REVEAL_DELAY_SECONDS, GOAL_SEQUENCE_DURATION_SECONDS,
    HOME_TEAM_ID, AWAY_TEAM_ID
)
from .scheduler import Scheduler, ScheduledCall, ThreadingScheduler, ManualScheduler

__all__ = [
    "fmt_mmss", "fmt_countdown", "now_ts", "APP_TITLE",
    "TICK_INTERVAL_SECONDS", "HALF_LENGTH_MIN",
    "GOAL_REVEAL_DELAY_SECONDS", "GOAL_SEQUENCE_DURATION_SECONDS",
    "HOME_TEAM_ID", "AWAY_TEAM_ID",
    "Scheduler", "ScheduledCall", "ThreadingScheduler", "ManualScheduler"
]
