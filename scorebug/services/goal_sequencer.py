"""
Goal sequencer for the indoor hockey scoreboard overlay.

A goal does not change the score on screen straight away. The bug first
flashes a goal banner for the scoring team, then flips the number, then
settles back:

    T          banner on, old number still shown
    T + 1.5s   displayed score catches up with the authoritative score
    T + 4.5s   banner off (IDLE)

The authoritative score itself changes immediately and is never blocked
by a running sequence. Only one banner is shown at a time; a new goal
takes it over. Each pending reveal reads the live authoritative score
when it fires, so the display can never show a stale or inflated value.
Corrections (score going down) update the display at once and never
trigger the banner.
"""
import logging
from typing import Dict, Optional

from ..models import GoalSequenceState, Team, require_team
from ..utils import GOAL_REVEAL_DELAY_SECONDS, GOAL_SEQUENCE_DURATION_SECONDS
from ..utils.scheduler import Scheduler, ScheduledCall

logger = logging.getLogger(__name__)


class GoalSequencer:
    """Service separating the authoritative score from the displayed score."""

    def __init__(
        self,
        teams: Dict[str, Team],
        scheduler: Scheduler,
        reveal_delay: float = GOAL_REVEAL_DELAY_SECONDS,
        sequence_duration: float = GOAL_SEQUENCE_DURATION_SECONDS,
    ):
        self.teams = teams
        self.scheduler = scheduler
        self.reveal_delay = reveal_delay
        self.sequence_duration = sequence_duration
        self._state = GoalSequenceState.idle()
        self._displayed: Dict[str, int] = {}
        self._reveal_calls: Dict[str, ScheduledCall] = {}
        self._idle_call: Optional[ScheduledCall] = None
        self.sync_displayed()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def record_score_delta(self, team_id: str, delta: int) -> int:
        """
        Apply a score change and sequence its appearance on screen.

        Args:
            team_id: Team whose score changes
            delta: Goals to add (negative for a correction)

        Returns:
            The new authoritative score (clamped at 0)
        """
        team = require_team(self.teams, team_id)
        previous = team.score
        team.score = max(0, previous + int(delta))

        if team.score > previous:
            logger.info("Goal for %s: %d -> %d", team_id, previous, team.score)
            self._start_sequence(team_id)
        elif team.score < previous:
            logger.info("Score corrected for %s: %d -> %d", team_id, previous, team.score)
            self._displayed[team_id] = team.score
        return team.score

    def reset(self) -> None:
        """Cancel every pending timer and show the authoritative scores."""
        self._cancel_all()
        self._state = GoalSequenceState.idle()
        self.sync_displayed()

    def sync_displayed(self) -> None:
        """Make every displayed score equal its authoritative score."""
        self._displayed = {team_id: team.score for team_id, team in self.teams.items()}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def state(self) -> GoalSequenceState:
        return self._state

    def displayed_score(self, team_id: str) -> int:
        require_team(self.teams, team_id)
        return self._displayed.get(team_id, 0)

    def has_pending(self) -> bool:
        return self._idle_call is not None or bool(self._reveal_calls)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _start_sequence(self, team_id: str) -> None:
        # A reveal already pending for this team is kept: it reads the live
        # score when it fires, so a second goal shows at the first one's time
        if self._idle_call is not None:
            self._idle_call.cancel()

        self._state = GoalSequenceState.revealing(team_id)
        if team_id not in self._reveal_calls:
            self._reveal_calls[team_id] = self.scheduler.call_later(
                self.reveal_delay, lambda: self._reveal(team_id)
            )
        self._idle_call = self.scheduler.call_later(self.sequence_duration, self._finish)

    def _reveal(self, team_id: str) -> None:
        self._reveal_calls.pop(team_id, None)
        self._displayed[team_id] = self.teams[team_id].score
        logger.debug("Displayed score for %s is now %d", team_id, self._displayed[team_id])

    def _finish(self) -> None:
        self._idle_call = None
        self._state = GoalSequenceState.idle()

    def _cancel_all(self) -> None:
        for call in self._reveal_calls.values():
            call.cancel()
        self._reveal_calls.clear()
        if self._idle_call is not None:
            self._idle_call.cancel()
            self._idle_call = None
