"""
Models package for the indoor hockey scoreboard overlay.

This package contains the core data models used throughout the application.
"""
from .card import Card, CardType
from .team import Team, UnknownTeamError, default_home_team, default_away_team, require_team
from .match_time import MatchTime, Period
from .goal_sequence import GoalPhase, GoalSequenceState
from .match_state import MatchState

__all__ = [
    "Card", "CardType", "Team", "UnknownTeamError",
    "default_home_team", "default_away_team", "require_team",
    "MatchTime", "Period", "GoalPhase", "GoalSequenceState", "MatchState"
]
