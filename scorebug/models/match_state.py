"""
MatchState model for the indoor hockey scoreboard overlay.

This module contains the MatchState dataclass, a snapshot of everything
needed to resume a match: both teams (with scores and cards) and the
clock's run state. It is the serialization boundary of the engine; live
goal-reveal timers are deliberately not part of it.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from .team import Team, default_home_team, default_away_team
from .match_time import Period
from ..utils.constants import HOME_TEAM_ID, AWAY_TEAM_ID


@dataclass
class MatchState:
    """
    Represents the persisted state of a match.

    Attributes:
        teams: Both teams keyed by id
        seconds_elapsed: Clock reading in seconds
        period: Current period
        timer_running: Whether the operator has the clock running
        is_penalty_corner: Whether a penalty-corner stoppage is in force
        saved_at: Epoch seconds when the snapshot was written, if saved
    """
    teams: Dict[str, Team] = field(default_factory=lambda: {
        HOME_TEAM_ID: default_home_team(),
        AWAY_TEAM_ID: default_away_team(),
    })
    seconds_elapsed: int = 0
    period: Period = Period.FIRST_HALF
    timer_running: bool = False
    is_penalty_corner: bool = False
    saved_at: Optional[float] = None

    def to_json(self) -> dict:
        """
        Convert MatchState to JSON-serializable dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "teams": {k: v.to_json() for k, v in self.teams.items()},
            "seconds_elapsed": self.seconds_elapsed,
            "period": self.period.value,
            "timer_running": self.timer_running,
            "is_penalty_corner": self.is_penalty_corner,
            "saved_at": self.saved_at,
        }

    @staticmethod
    def from_json(data: dict) -> "MatchState":
        """
        Create MatchState from JSON dictionary.

        Missing teams fall back to the defaults so a partial save still
        yields a playable match.

        Args:
            data: Dictionary with match state data

        Returns:
            New MatchState instance
        """
        ms = MatchState()
        for team_id, tdata in (data.get("teams") or {}).items():
            team = Team.from_json({**tdata, "id": team_id})
            ms.teams[team_id] = team
        ms.seconds_elapsed = max(0, int(data.get("seconds_elapsed", 0)))
        ms.period = Period.parse(data.get("period", Period.FIRST_HALF.value))
        ms.timer_running = bool(data.get("timer_running", False))
        ms.is_penalty_corner = bool(data.get("is_penalty_corner", False))
        ms.saved_at = data.get("saved_at")
        return ms
