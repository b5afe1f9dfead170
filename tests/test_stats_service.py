import os
import sys
import datetime
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import ValidationError
from stats_service import StatisticsService


class StatisticsServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.stats = StatisticsService()

    def test_counts_and_calories_follow_calls(self) -> None:
        calories = [120, 0, 350, 75]
        for c in calories:
            self.stats.record_workout(c, 20, "")
        snap = self.stats.snapshot()
        self.assertEqual(snap.exercise_count, len(calories))
        self.assertEqual(snap.calories_burned, sum(calories))
        self.assertEqual(snap.workout_streak, len(calories))
        self.assertEqual(len(self.stats.log), len(calories))

    def test_hours_truncate_per_workout(self) -> None:
        self.stats.record_workout(100, 90, "")
        snap = self.stats.record_workout(100, 90, "")
        self.assertEqual(snap.total_time_hours, 2)

    def test_short_sessions_add_no_hours(self) -> None:
        for _ in range(3):
            self.stats.record_workout(10, 59, "")
        self.assertEqual(self.stats.snapshot().total_time_hours, 0)

    def test_invalid_workout_leaves_totals(self) -> None:
        with self.assertRaises(ValidationError):
            self.stats.record_workout(-10, 30, "")
        with self.assertRaises(ValidationError):
            self.stats.record_workout("abc", 30, "")
        snap = self.stats.snapshot()
        self.assertEqual(snap.exercise_count, 0)
        self.assertEqual(len(self.stats.log), 0)

    def test_record_returns_snapshot_copy(self) -> None:
        snap = self.stats.record_workout(50, 10, "")
        snap.calories_burned = 9999
        self.assertEqual(self.stats.snapshot().calories_burned, 50)

    def test_remove_does_not_roll_back(self) -> None:
        self.stats.record_workout(200, 60, "")
        self.stats.remove_workout(0)
        snap = self.stats.snapshot()
        self.assertEqual(len(self.stats.log), 0)
        self.assertEqual(snap.exercise_count, 1)
        self.assertEqual(snap.calories_burned, 200)

    def test_bmi(self) -> None:
        snap = self.stats.compute_bmi(70, 175)
        self.assertAlmostEqual(snap.body_mass_index, 22.857, places=3)
        snap = self.stats.compute_bmi("80", " 180 ")
        self.assertAlmostEqual(snap.body_mass_index, 24.69, places=2)

    def test_bmi_rejects_bad_input(self) -> None:
        self.stats.compute_bmi(70, 175)
        for weight, height in [(0, 175), (70, 0), (-70, 175), ("abc", 175), (70, None), ("nan", 175)]:
            with self.assertRaises(ValidationError):
                self.stats.compute_bmi(weight, height)
        self.assertAlmostEqual(self.stats.snapshot().body_mass_index, 22.857, places=3)

    def test_bmi_out_of_range_leaves_previous_value(self) -> None:
        self.stats.compute_bmi(70, 175)
        with self.assertRaises(ValidationError):
            self.stats.compute_bmi(70, "1e-200")
        with self.assertRaises(ValidationError):
            self.stats.compute_bmi("1e300", "1e-10")
        with self.assertRaises(ValidationError):
            self.stats.compute_bmi(10**400, 175)
        self.assertAlmostEqual(self.stats.snapshot().body_mass_index, 22.857, places=3)

    def test_adjust_calories_can_go_negative(self) -> None:
        self.stats.record_workout(100, 30, "")
        self.assertEqual(self.stats.adjust_calories_burned(50).calories_burned, 150)
        self.assertEqual(self.stats.adjust_calories_burned(-400).calories_burned, -250)
        with self.assertRaises(ValidationError):
            self.stats.adjust_calories_burned("lots")

    def test_net_calories(self) -> None:
        self.assertEqual(StatisticsService.net_calories(2000, 500), 1500)
        self.assertEqual(self.stats.net_calories("300", "500"), -200)
        with self.assertRaises(ValidationError):
            self.stats.net_calories(-1, 100)
        with self.assertRaises(ValidationError):
            self.stats.net_calories(100, "x")
        with self.assertRaises(ValidationError):
            self.stats.net_calories(12.5, 1)

    def test_reset_streak_is_manual(self) -> None:
        self.stats.record_workout(10, 10, "")
        self.stats.record_workout(10, 10, "")
        snap = self.stats.reset_streak()
        self.assertEqual(snap.workout_streak, 0)
        self.assertEqual(snap.exercise_count, 2)
        self.assertEqual(self.stats.record_workout(10, 10, "").workout_streak, 1)

    def test_most_active_day(self) -> None:
        self.assertEqual(self.stats.snapshot().most_active_day, "")
        monday = datetime.datetime(2024, 1, 1, 8, 0)
        tuesday = datetime.datetime(2024, 1, 2, 8, 0)
        self.stats.record_workout(10, 10, "", timestamp=tuesday)
        self.stats.record_workout(10, 10, "", timestamp=monday)
        self.assertEqual(self.stats.snapshot().most_active_day, "Tuesday")
        self.stats.record_workout(10, 10, "", timestamp=monday + datetime.timedelta(days=7))
        self.assertEqual(self.stats.snapshot().most_active_day, "Monday")


if __name__ == "__main__":
    unittest.main()
