"""
Indoor Hockey Score Bug

Match-state engine for a live broadcast scoreboard overlay: scores,
match clock, periods, timed penalty cards and the goal reveal sequence.

This package provides the engine and a Flask JSON API through which an
operator panel drives the match and a renderer reads it.
"""
from .models import Card, CardType, Team, MatchTime, Period, MatchState
from .services import MatchEngine, PersistenceService
from .ui import create_app, run_web_app
from .utils import fmt_mmss, now_ts, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "Card", "CardType", "Team", "MatchTime", "Period", "MatchState",
    "MatchEngine", "PersistenceService", "create_app", "run_web_app",
    "fmt_mmss", "now_ts", "APP_TITLE"
]
