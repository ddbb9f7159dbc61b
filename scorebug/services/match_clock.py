"""Match clock for the indoor hockey scoreboard overlay."""
import logging
from typing import Dict, Union

from ..models import MatchTime, Period

logger = logging.getLogger(__name__)


class MatchClock:
    """
    Elapsed match time, period label and the two stoppage flags.

    The clock only advances when the operator has it running and no
    penalty corner is in progress; a penalty corner always wins.
    """

    def __init__(self):
        self.seconds_elapsed = 0
        self.period = Period.FIRST_HALF
        self.timer_running = False
        self.is_penalty_corner = False

    # ------------------------------------------------------------------
    # Run state
    # ------------------------------------------------------------------
    @property
    def is_advancing(self) -> bool:
        """True when a tick would move the clock."""
        return self.timer_running and not self.is_penalty_corner

    def tick(self) -> bool:
        """Advance one second if the clock is advancing. Returns whether it did."""
        if not self.is_advancing:
            return False
        self.seconds_elapsed += 1
        return True

    def toggle_running(self) -> bool:
        """Start or stop the clock. A penalty corner still holds time while running."""
        self.timer_running = not self.timer_running
        logger.info("Clock %s at %s", "started" if self.timer_running else "stopped",
                    self.match_time().display)
        return self.timer_running

    def toggle_penalty_corner(self) -> bool:
        """Enter or leave a penalty-corner stoppage."""
        self.is_penalty_corner = not self.is_penalty_corner
        logger.info("Penalty corner %s", "awarded" if self.is_penalty_corner else "over")
        return self.is_penalty_corner

    def set_period(self, period: Union[str, Period]) -> Period:
        """Set the period label. Any period may follow any other."""
        self.period = Period.parse(period)
        logger.info("Period set to %s", self.period.value)
        return self.period

    def reset(self) -> None:
        """Back to 00:00, first half, stopped."""
        self.seconds_elapsed = 0
        self.timer_running = False
        self.is_penalty_corner = False
        self.period = Period.FIRST_HALF

    def restore(
        self,
        *,
        seconds_elapsed: int,
        period: Union[str, Period],
        timer_running: bool,
        is_penalty_corner: bool,
    ) -> None:
        """Load clock values from a saved match."""
        self.seconds_elapsed = max(0, int(seconds_elapsed))
        self.period = Period.parse(period)
        self.timer_running = bool(timer_running)
        self.is_penalty_corner = bool(is_penalty_corner)

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def match_time(self) -> MatchTime:
        return MatchTime.from_elapsed(self.seconds_elapsed, self.period)

    def to_json(self) -> Dict[str, object]:
        return {
            "match_time": self.match_time().to_dict(),
            "seconds_elapsed": self.seconds_elapsed,
            "timer_running": self.timer_running,
            "is_penalty_corner": self.is_penalty_corner,
        }
