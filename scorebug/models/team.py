"""
Team model for the indoor hockey scoreboard overlay.

This module contains the Team dataclass, which carries a team's identity
and display names together with its authoritative score and its active
penalty cards.
"""
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .card import Card
from ..utils.constants import (
    EDITABLE_TEAM_FIELDS, TEAM_FIELD_ALIASES,
    DEFAULT_HOME_TEAM, DEFAULT_AWAY_TEAM
)


class UnknownTeamError(LookupError):
    """Raised when a team id is not one of the match's two teams."""

    def __init__(self, team_id: str):
        super().__init__(f"Unknown team: {team_id!r}")
        self.team_id = team_id


@dataclass
class Team:
    """
    A team taking part in the match.

    Attributes:
        id: Fixed identifier ("home" or "away")
        name: Full name shown on the intro
        short_name: Abbreviated name shown once the bug settles
        tri_code: Three letter fallback code
        primary_color: Jersey colour indicator (opaque string)
        is_home: Whether this is the home side
        score: Authoritative score, never negative
        cards: Active penalty cards in the order they were issued
    """
    id: str
    name: str = ""
    short_name: str = ""
    tri_code: str = ""
    primary_color: str = ""
    is_home: bool = False
    score: int = 0
    cards: List[Card] = field(default_factory=list)

    @staticmethod
    def resolve_field(field_name: str) -> str:
        """
        Map an editable field name (snake_case or camelCase) to its attribute.

        Raises:
            ValueError: If the field is not operator-editable
        """
        resolved = TEAM_FIELD_ALIASES.get(field_name, field_name)
        if resolved not in EDITABLE_TEAM_FIELDS:
            raise ValueError(f"Team field {field_name!r} cannot be edited")
        return resolved

    def copy(self) -> "Team":
        """Detached copy, safe to hand to a renderer."""
        return copy.deepcopy(self)

    def to_json(self) -> Dict[str, Any]:
        """Convert Team to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "short_name": self.short_name,
            "tri_code": self.tri_code,
            "primary_color": self.primary_color,
            "is_home": self.is_home,
            "score": self.score,
            "cards": [card.to_dict() for card in self.cards],
        }

    @staticmethod
    def from_json(data: Mapping[str, Any]) -> "Team":
        """Create Team from a JSON dictionary."""
        return Team(
            id=data["id"],
            name=data.get("name", ""),
            short_name=data.get("short_name", ""),
            tri_code=data.get("tri_code", ""),
            primary_color=data.get("primary_color", ""),
            is_home=bool(data.get("is_home", False)),
            score=max(0, int(data.get("score", 0))),
            cards=[Card.from_dict(c) for c in data.get("cards", []) or []],
        )


def default_home_team() -> Team:
    return Team.from_json(DEFAULT_HOME_TEAM)


def default_away_team() -> Team:
    return Team.from_json(DEFAULT_AWAY_TEAM)


def require_team(teams: Mapping[str, Team], team_id: str) -> Team:
    """
    Look up a team, failing fast on ids outside the match.

    Raises:
        UnknownTeamError: If ``team_id`` is not a team in this match
    """
    try:
        return teams[team_id]
    except KeyError:
        raise UnknownTeamError(team_id) from None
