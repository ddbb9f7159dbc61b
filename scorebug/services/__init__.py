"""
Services package for the indoor hockey scoreboard overlay.

This package contains the service classes that hold the match logic:
the clock, the penalty countdowns, goal sequencing, and the engine that
composes them.
"""
from .match_clock import MatchClock
from .penalty_tracker import PenaltyTracker
from .goal_sequencer import GoalSequencer
from .match_engine import MatchEngine
from .persistence_service import PersistenceService

__all__ = [
    "MatchClock", "PenaltyTracker", "GoalSequencer",
    "MatchEngine", "PersistenceService"
]
