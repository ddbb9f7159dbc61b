"""Goal reveal state exposed to the renderer."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class GoalPhase(Enum):
    IDLE = "IDLE"
    REVEALING = "REVEALING"


@dataclass(frozen=True)
class GoalSequenceState:
    """Either IDLE, or REVEALING for exactly one team."""
    phase: GoalPhase = GoalPhase.IDLE
    team_id: Optional[str] = None

    @classmethod
    def idle(cls) -> "GoalSequenceState":
        return cls()

    @classmethod
    def revealing(cls, team_id: str) -> "GoalSequenceState":
        return cls(phase=GoalPhase.REVEALING, team_id=team_id)

    @property
    def is_revealing(self) -> bool:
        return self.phase is GoalPhase.REVEALING

    def to_dict(self) -> Dict[str, Any]:
        return {"phase": self.phase.value, "team_id": self.team_id}
