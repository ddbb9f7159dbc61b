"""
Penalty tracker for the indoor hockey scoreboard overlay.

Keeps each team's active cards in issue order and counts timed cards
down in step with the match clock.
"""
import logging
from typing import Dict, List, Optional, Union

from ..models import Card, CardType, Team, require_team

logger = logging.getLogger(__name__)


class PenaltyTracker:
    """Service owning the per-team card lists."""

    def __init__(self, teams: Dict[str, Team]):
        self.teams = teams

    def add_card(
        self,
        team_id: str,
        card_type: Union[str, CardType],
        duration_minutes: float,
    ) -> Card:
        """
        Issue a card to a team.

        Args:
            team_id: Team receiving the card
            card_type: GREEN, YELLOW or RED
            duration_minutes: Suspension length; ignored for red cards

        Returns:
            The newly issued card
        """
        team = require_team(self.teams, team_id)
        card = Card.issue(card_type, duration_minutes)
        team.cards.append(card)
        logger.info("%s card (%ss) for %s", card.type.value, card.initial_duration, team_id)
        return card

    def remove_last_card(self, team_id: str) -> Optional[Card]:
        """Undo the most recently issued card. No-op when the team has none."""
        team = require_team(self.teams, team_id)
        if not team.cards:
            return None
        card = team.cards.pop()
        logger.info("Removed %s card %s from %s", card.type.value, card.id, team_id)
        return card

    def remove_card(self, team_id: str, card_id: str) -> Optional[Card]:
        """Remove one specific card, keeping the order of the others."""
        team = require_team(self.teams, team_id)
        for index, card in enumerate(team.cards):
            if card.id == card_id:
                logger.info("Removed %s card %s from %s", card.type.value, card_id, team_id)
                return team.cards.pop(index)
        return None

    def cards(self, team_id: str) -> List[Card]:
        return list(require_team(self.teams, team_id).cards)

    def tick(self) -> None:
        """
        Count every timed card down by one second and drop the expired ones.

        Must only be called for an effective clock tick.
        """
        for team in self.teams.values():
            for card in team.cards:
                card.countdown()
            expired = [card for card in team.cards if not card.is_active]
            if expired:
                team.cards[:] = [card for card in team.cards if card.is_active]
                logger.debug("%d card(s) expired for %s", len(expired), team.id)

    def clear(self) -> None:
        for team in self.teams.values():
            team.cards.clear()
