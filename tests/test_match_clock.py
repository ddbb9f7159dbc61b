import unittest

from scorebug.models import Period
from scorebug.services import MatchClock


class MatchClockTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = MatchClock()

    def test_initial_state_is_stopped_first_half(self) -> None:
        self.assertEqual(self.clock.seconds_elapsed, 0)
        self.assertEqual(self.clock.period, Period.FIRST_HALF)
        self.assertFalse(self.clock.timer_running)
        self.assertFalse(self.clock.is_penalty_corner)

    def test_tick_only_advances_while_running(self) -> None:
        self.assertFalse(self.clock.tick())
        self.assertEqual(self.clock.seconds_elapsed, 0)

        self.clock.toggle_running()
        for _ in range(3):
            self.assertTrue(self.clock.tick())
        self.assertEqual(self.clock.seconds_elapsed, 3)

        self.clock.toggle_running()
        self.assertFalse(self.clock.tick())
        self.assertEqual(self.clock.seconds_elapsed, 3)

    def test_penalty_corner_overrides_running_clock(self) -> None:
        self.clock.toggle_running()
        self.clock.toggle_penalty_corner()
        self.assertTrue(self.clock.timer_running)
        self.assertFalse(self.clock.is_advancing)

        for _ in range(5):
            self.clock.tick()
        self.assertEqual(self.clock.seconds_elapsed, 0)

        # Toggling the run flag during the stoppage has no visible effect
        self.clock.toggle_running()
        self.clock.toggle_running()
        self.clock.tick()
        self.assertEqual(self.clock.seconds_elapsed, 0)

        self.clock.toggle_penalty_corner()
        self.assertTrue(self.clock.tick())
        self.assertEqual(self.clock.seconds_elapsed, 1)

    def test_set_period_accepts_any_order(self) -> None:
        self.assertEqual(self.clock.set_period("FIN"), Period.FULL_TIME)
        self.assertEqual(self.clock.set_period(Period.FIRST_HALF), Period.FIRST_HALF)
        self.assertEqual(self.clock.set_period("2mt"), Period.SECOND_HALF)

        with self.assertRaises(ValueError):
            self.clock.set_period("3MT")

    def test_match_time_projection(self) -> None:
        self.clock.seconds_elapsed = 125
        match_time = self.clock.match_time()
        self.assertEqual((match_time.minutes, match_time.seconds), (2, 5))
        self.assertIsNone(match_time.extra_time)
        self.assertEqual(match_time.display, "02:05")

    def test_extra_time_hint_at_end_of_each_half(self) -> None:
        self.clock.seconds_elapsed = 20 * 60 - 1
        self.assertIsNone(self.clock.match_time().extra_time)

        self.clock.seconds_elapsed = 20 * 60
        self.assertEqual(self.clock.match_time().extra_time, 0)

        self.clock.set_period("2MT")
        self.assertIsNone(self.clock.match_time().extra_time)

        self.clock.seconds_elapsed = 40 * 60
        self.assertEqual(self.clock.match_time().extra_time, 0)

        self.clock.set_period("MT")
        self.assertIsNone(self.clock.match_time().extra_time)

    def test_reset(self) -> None:
        self.clock.toggle_running()
        self.clock.tick()
        self.clock.toggle_penalty_corner()
        self.clock.set_period("2MT")

        self.clock.reset()

        self.assertEqual(self.clock.seconds_elapsed, 0)
        self.assertFalse(self.clock.timer_running)
        self.assertFalse(self.clock.is_penalty_corner)
        self.assertEqual(self.clock.period, Period.FIRST_HALF)


if __name__ == "__main__":
    unittest.main()
