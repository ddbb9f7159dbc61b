"""
Match engine for the indoor hockey scoreboard overlay.

MatchEngine composes the three independent parts of the match state
(MatchClock, PenaltyTracker and GoalSequencer) and is the only command
and query surface used by the operator panel and the renderer.

The engine owns the one-second ticker. Whenever either clock flag is
written the ticker is cancelled and, if the clock can now advance, a new
one is started, so there is never more than one ticker alive. All
commands and timer callbacks run under the scheduler's lock.
"""
import logging
from typing import Dict, Optional, Union

from ..models import (
    CardType, Card, GoalSequenceState, MatchState, MatchTime, Period, Team,
    default_home_team, default_away_team, require_team
)
from ..utils import TICK_INTERVAL_SECONDS
from ..utils.scheduler import Scheduler, ScheduledCall, ThreadingScheduler
from .goal_sequencer import GoalSequencer
from .match_clock import MatchClock
from .penalty_tracker import PenaltyTracker

logger = logging.getLogger(__name__)


class MatchEngine:
    """Aggregate owning a single match."""

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        home: Optional[Team] = None,
        away: Optional[Team] = None,
    ):
        self.scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self._lock = self.scheduler.lock
        home = home if home is not None else default_home_team()
        away = away if away is not None else default_away_team()
        self.teams: Dict[str, Team] = {home.id: home, away.id: away}

        self.clock = MatchClock()
        self.penalties = PenaltyTracker(self.teams)
        self.goals = GoalSequencer(self.teams, self.scheduler)
        self._tick_call: Optional[ScheduledCall] = None

    # ------------------------------------------------------------------
    # Clock commands
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Apply one tick to the clock and the penalty countdowns together.

        Returns:
            True if time advanced, False during a pause or penalty corner
        """
        with self._lock:
            if not self.clock.is_advancing:
                return False
            self.clock.tick()
            self.penalties.tick()
            return True

    def toggle_running(self) -> bool:
        with self._lock:
            running = self.clock.toggle_running()
            self._reschedule_ticker()
            return running

    def toggle_penalty_corner(self) -> bool:
        with self._lock:
            corner = self.clock.toggle_penalty_corner()
            self._reschedule_ticker()
            return corner

    def set_period(self, period: Union[str, Period]) -> Period:
        with self._lock:
            return self.clock.set_period(period)

    def reset_match(self) -> None:
        """
        Zero the clock, scores and cards; keep team names and colours.

        This is a full match reset. Scores go back to 0 as well, unlike a
        timer-only reset that leaves the scoreline in place. Pending ticks
        and goal reveal timers are cancelled.
        """
        with self._lock:
            self._cancel_ticker()
            self.clock.reset()
            self.penalties.clear()
            for team in self.teams.values():
                team.score = 0
            self.goals.reset()
            logger.info("Match reset")

    # ------------------------------------------------------------------
    # Team commands
    # ------------------------------------------------------------------
    def record_score_delta(self, team_id: str, delta: int) -> int:
        with self._lock:
            return self.goals.record_score_delta(team_id, delta)

    def add_card(
        self,
        team_id: str,
        card_type: Union[str, CardType],
        duration_minutes: float,
    ) -> Card:
        with self._lock:
            return self.penalties.add_card(team_id, card_type, duration_minutes)

    def remove_last_card(self, team_id: str) -> Optional[Card]:
        with self._lock:
            return self.penalties.remove_last_card(team_id)

    def remove_card(self, team_id: str, card_id: str) -> Optional[Card]:
        with self._lock:
            return self.penalties.remove_card(team_id, card_id)

    def update_team_field(self, team_id: str, field_name: str, value: str) -> Team:
        """
        Change a team's name, short name, code or colour.

        Values are stored as given; the engine does not validate them.

        Raises:
            UnknownTeamError: If the team does not exist
            ValueError: If the field is not editable
        """
        with self._lock:
            team = require_team(self.teams, team_id)
            attribute = Team.resolve_field(field_name)
            setattr(team, attribute, value)
            return team.copy()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_match_time(self) -> MatchTime:
        with self._lock:
            return self.clock.match_time()

    def get_team(self, team_id: str) -> Team:
        with self._lock:
            return require_team(self.teams, team_id).copy()

    def get_displayed_score(self, team_id: str) -> int:
        with self._lock:
            return self.goals.displayed_score(team_id)

    def get_goal_sequence_state(self) -> GoalSequenceState:
        with self._lock:
            return self.goals.state

    def is_timer_running(self) -> bool:
        return self.clock.timer_running

    def is_penalty_corner(self) -> bool:
        return self.clock.is_penalty_corner

    def has_active_ticker(self) -> bool:
        return self._tick_call is not None and self._tick_call.active

    def to_json(self) -> dict:
        """Full snapshot for the renderer."""
        with self._lock:
            teams = {}
            for team_id, team in self.teams.items():
                data = team.to_json()
                data["displayed_score"] = self.goals.displayed_score(team_id)
                teams[team_id] = data
            return {
                "teams": teams,
                "clock": self.clock.to_json(),
                "goal_sequence": self.goals.state.to_dict(),
            }

    # ------------------------------------------------------------------
    # Serialization boundary
    # ------------------------------------------------------------------
    def capture_state(self) -> MatchState:
        with self._lock:
            return MatchState(
                teams={team_id: team.copy() for team_id, team in self.teams.items()},
                seconds_elapsed=self.clock.seconds_elapsed,
                period=self.clock.period,
                timer_running=self.clock.timer_running,
                is_penalty_corner=self.clock.is_penalty_corner,
            )

    def restore_state(self, state: MatchState) -> None:
        """
        Replace the live match with a saved one.

        Team ids are fixed for the life of the engine, so only teams the
        engine already knows are restored.
        """
        with self._lock:
            self._cancel_ticker()
            for team_id, saved in state.teams.items():
                team = require_team(self.teams, team_id)
                restored = saved.copy()
                team.name = restored.name
                team.short_name = restored.short_name
                team.tri_code = restored.tri_code
                team.primary_color = restored.primary_color
                team.score = max(0, restored.score)
                team.cards[:] = restored.cards
            self.clock.restore(
                seconds_elapsed=state.seconds_elapsed,
                period=state.period,
                timer_running=state.timer_running,
                is_penalty_corner=state.is_penalty_corner,
            )
            self.goals.reset()
            self._reschedule_ticker()
            logger.info("Match restored at %s", self.clock.match_time().display)

    def shutdown(self) -> None:
        """Cancel every pending timer."""
        with self._lock:
            self._cancel_ticker()
            self.goals.reset()

    # ------------------------------------------------------------------
    # Ticker
    # ------------------------------------------------------------------
    def _reschedule_ticker(self) -> None:
        self._cancel_ticker()
        if self.clock.is_advancing:
            self._schedule_tick()

    def _schedule_tick(self) -> None:
        self._tick_call = self.scheduler.call_later(TICK_INTERVAL_SECONDS, self._on_tick)
        logger.debug("Ticker scheduled")

    def _on_tick(self) -> None:
        with self._lock:
            self._tick_call = None
            if self.tick():
                self._schedule_tick()

    def _cancel_ticker(self) -> None:
        if self._tick_call is not None:
            self._tick_call.cancel()
            self._tick_call = None
