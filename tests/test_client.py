import os
import sys
import datetime
import unittest

from fastapi.testclient import TestClient

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from client import FitnessClient
from rest_api import FitnessAPI


class ClientTest(unittest.TestCase):
    def setUp(self) -> None:
        self.db_path = "test_client.db"
        self.yaml_path = "test_client.yaml"
        for path in (self.db_path, self.yaml_path):
            if os.path.exists(path):
                os.remove(path)
        self.api = FitnessAPI(db_path=self.db_path, yaml_path=self.yaml_path)
        self.client = FitnessClient(
            base_url="http://testserver", session=TestClient(self.api.app)
        )

    def tearDown(self) -> None:
        for path in (self.db_path, self.yaml_path):
            if os.path.exists(path):
                os.remove(path)

    def test_workouts_and_stats(self) -> None:
        self.client.record_workout(250, 45, "Bike")
        self.assertEqual(self.client.list_workouts()[0]["notes"], "Bike")
        self.assertEqual(self.client.stats()["calories_burned"], 250)
        self.assertEqual(self.client.net_calories(2000, 500), 1500)
        self.assertAlmostEqual(self.client.compute_bmi(70, 175)["body_mass_index"], 22.857, places=3)
        self.client.delete_workout(0)
        self.assertEqual(self.client.list_workouts(), [])

    def test_reminders(self) -> None:
        rec = self.client.create_reminder("Run", datetime.datetime(2025, 5, 8, 6, 0))
        self.assertEqual([r["id"] for r in self.client.list_reminders()], [rec["id"]])
        self.client.delete_reminder(rec["id"])
        self.assertEqual(self.client.list_reminders(), [])

    def test_stats_adjustments(self) -> None:
        self.client.record_workout(250, 45)
        self.client.record_workout(100, 30, "Walk")
        self.assertEqual([w["notes"] for w in self.client.recent_workouts(1)], ["Walk"])
        self.assertEqual(self.client.adjust_calories(-50)["calories_burned"], 300)
        self.assertEqual(self.client.reset_streak()["workout_streak"], 0)

    def test_update_reminder(self) -> None:
        rec = self.client.create_reminder("Run", datetime.datetime(2025, 5, 8, 6, 0))
        updated = self.client.update_reminder(
            rec["id"], "Long run", datetime.datetime(2025, 5, 8, 7, 30)
        )
        self.assertEqual(updated["title"], "Long run")
        self.assertEqual(self.client.list_reminders()[0]["scheduled_time"], "2025-05-08T07:30:00")

    def test_account(self) -> None:
        self.assertEqual(self.client.account(), {"signed_in": False})
        self.client.sign_up("sam", "sam@example.com", "pw")
        self.assertEqual(
            self.client.account(),
            {"signed_in": True, "username": "sam", "email": "sam@example.com"},
        )
        self.assertEqual(self.client.sign_in("sam@example.com", "pw")["username"], "")
        self.client.sign_out()
        self.assertFalse(self.client.account()["signed_in"])


if __name__ == "__main__":
    unittest.main()
