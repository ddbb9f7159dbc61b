"""
Penalty card model for the indoor hockey scoreboard overlay.

Green and yellow cards are timed suspensions that count down with the
match clock. Red cards are disqualifications: they never count down and
never expire on their own.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union

from ..utils.time_utils import fmt_countdown


class CardType(Enum):
    """Card colours used in hockey."""
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"

    @classmethod
    def parse(cls, value: Union[str, "CardType"]) -> "CardType":
        """
        Accept either a CardType or its name in any case.

        Raises:
            ValueError: If the value is not a known card colour
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown card type: {value!r}") from None


def generate_card_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class Card:
    """
    A penalty card shown next to a team's score.

    Attributes:
        type: Card colour
        initial_duration: Suspension length in seconds, fixed at creation
        time_left: Seconds remaining (unused for red cards)
        id: Unique identifier of this card instance
    """
    type: CardType
    initial_duration: int = 0
    time_left: int = 0
    id: str = field(default_factory=generate_card_id)

    @classmethod
    def issue(cls, card_type: Union[str, CardType], duration_minutes: float) -> "Card":
        """Create a fresh card with its countdown set from ``duration_minutes``."""
        card_type = CardType.parse(card_type)
        seconds = 0 if card_type is CardType.RED else int(round(duration_minutes * 60))
        return cls(type=card_type, initial_duration=seconds, time_left=seconds)

    @property
    def is_timed(self) -> bool:
        return self.type is not CardType.RED

    @property
    def is_active(self) -> bool:
        """Red cards stay for good; timed cards stay while time is left."""
        return not self.is_timed or self.time_left > 0

    def countdown(self) -> None:
        """Take one second off a timed card."""
        if self.is_timed and self.time_left > 0:
            self.time_left -= 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "type": self.type.value,
            "initial_duration": self.initial_duration,
            "time_left": self.time_left,
            "display": fmt_countdown(self.time_left) if self.is_timed else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        """Create from dictionary for JSON deserialization."""
        return cls(
            type=CardType.parse(data["type"]),
            initial_duration=int(data.get("initial_duration", 0)),
            time_left=int(data.get("time_left", 0)),
            id=data.get("id") or generate_card_id(),
        )
