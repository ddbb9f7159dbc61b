"""
Unit tests for the data models.

Tests parsing and serialization of Card, Team, MatchTime and MatchState.
"""
import unittest

from scorebug.models import (
    Card, CardType, GoalSequenceState, MatchState, MatchTime, Period, Team,
    default_home_team
)


class TestCardModel(unittest.TestCase):
    """Test cases for Card."""

    def test_issue_parses_type_case_insensitively(self) -> None:
        card = Card.issue("yellow", 10)
        self.assertEqual(card.type, CardType.YELLOW)
        self.assertEqual(card.time_left, 600)
        self.assertTrue(card.is_timed)

    def test_issue_rejects_unknown_type(self) -> None:
        with self.assertRaises(ValueError):
            Card.issue("purple", 2)

    def test_fractional_minutes(self) -> None:
        self.assertEqual(Card.issue(CardType.GREEN, 1.5).initial_duration, 90)

    def test_countdown_stops_at_zero(self) -> None:
        card = Card(type=CardType.GREEN, initial_duration=1, time_left=1)
        card.countdown()
        card.countdown()
        self.assertEqual(card.time_left, 0)
        self.assertFalse(card.is_active)

    def test_red_card_always_active(self) -> None:
        red = Card.issue("RED", 0)
        red.countdown()
        self.assertTrue(red.is_active)
        self.assertIsNone(red.to_dict()["display"])

    def test_dict_round_trip_keeps_id(self) -> None:
        card = Card.issue("GREEN", 2)
        data = card.to_dict()
        self.assertEqual(data["display"], "2:00")
        self.assertEqual(Card.from_dict(data), card)


class TestTeamModel(unittest.TestCase):
    """Test cases for Team."""

    def test_default_home_team(self) -> None:
        team = default_home_team()
        self.assertEqual(team.id, "home")
        self.assertEqual(team.tri_code, "LIL")
        self.assertTrue(team.is_home)
        self.assertEqual(team.score, 0)
        self.assertEqual(team.cards, [])

    def test_resolve_field(self) -> None:
        self.assertEqual(Team.resolve_field("shortName"), "short_name")
        self.assertEqual(Team.resolve_field("name"), "name")
        with self.assertRaises(ValueError):
            Team.resolve_field("is_home")

    def test_from_json_clamps_negative_score(self) -> None:
        team = Team.from_json({"id": "away", "score": -4})
        self.assertEqual(team.score, 0)


class TestMatchTime(unittest.TestCase):
    def test_from_elapsed(self) -> None:
        match_time = MatchTime.from_elapsed(61, Period.FIRST_HALF)
        self.assertEqual(match_time.to_dict(), {
            "minutes": 1,
            "seconds": 1,
            "period": "1MT",
            "extra_time": None,
            "display": "01:01",
        })

    def test_period_parse(self) -> None:
        self.assertIs(Period.parse("fin"), Period.FULL_TIME)
        with self.assertRaises(ValueError):
            Period.parse("OT")


class TestMatchState(unittest.TestCase):
    def test_from_json_fills_defaults(self) -> None:
        state = MatchState.from_json({"seconds_elapsed": 30, "period": "2MT"})
        self.assertEqual(set(state.teams), {"home", "away"})
        self.assertEqual(state.period, Period.SECOND_HALF)
        self.assertFalse(state.timer_running)

    def test_json_round_trip(self) -> None:
        state = MatchState(seconds_elapsed=75, timer_running=True)
        state.teams["away"].cards.append(Card.issue("RED", 0))
        state.teams["away"].score = 2

        restored = MatchState.from_json(state.to_json())

        self.assertEqual(restored.seconds_elapsed, 75)
        self.assertTrue(restored.timer_running)
        self.assertEqual(restored.teams["away"].score, 2)
        self.assertEqual(restored.teams["away"].cards[0].type, CardType.RED)

    def test_goal_sequence_state_dict(self) -> None:
        self.assertEqual(GoalSequenceState.idle().to_dict(), {"phase": "IDLE", "team_id": None})


if __name__ == "__main__":
    unittest.main()
