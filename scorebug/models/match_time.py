"""
Match time model for the indoor hockey scoreboard overlay.

MatchTime is a read-only projection of the clock; it is recomputed on
every read and never stored.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..utils.constants import (
    HALF_LENGTH_MIN, PERIOD_FIRST_HALF, PERIOD_HALF_TIME,
    PERIOD_SECOND_HALF, PERIOD_FULL_TIME
)
from ..utils.time_utils import fmt_mmss


class Period(Enum):
    """Match periods as labelled on the bug."""
    FIRST_HALF = PERIOD_FIRST_HALF
    HALF_TIME = PERIOD_HALF_TIME
    SECOND_HALF = PERIOD_SECOND_HALF
    FULL_TIME = PERIOD_FULL_TIME

    @classmethod
    def parse(cls, value: Union[str, "Period"]) -> "Period":
        """
        Accept either a Period or its label ("1MT", "MT", "2MT", "FIN").

        Raises:
            ValueError: If the label is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown period: {value!r}") from None


@dataclass(frozen=True)
class MatchTime:
    """
    Clock reading handed to the renderer.

    Attributes:
        minutes: Whole minutes elapsed
        seconds: Seconds within the current minute
        period: Operator-set period
        extra_time: 0 once the half's nominal length is reached, else None
    """
    minutes: int
    seconds: int
    period: Period
    extra_time: Optional[int] = None

    @classmethod
    def from_elapsed(cls, seconds_elapsed: int, period: Period) -> "MatchTime":
        minutes, seconds = divmod(seconds_elapsed, 60)
        extra_time = None
        # Elapsed time is cumulative, so the second half ends at twice the half length
        if period is Period.FIRST_HALF and minutes >= HALF_LENGTH_MIN:
            extra_time = 0
        elif period is Period.SECOND_HALF and minutes >= 2 * HALF_LENGTH_MIN:
            extra_time = 0
        return cls(minutes=minutes, seconds=seconds, period=period, extra_time=extra_time)

    @property
    def display(self) -> str:
        return fmt_mmss(self.minutes * 60 + self.seconds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minutes": self.minutes,
            "seconds": self.seconds,
            "period": self.period.value,
            "extra_time": self.extra_time,
            "display": self.display,
        }
