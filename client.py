import datetime

import requests


class FitnessClient:
    """Simple REST client for the tracker API."""

    def __init__(self, base_url: str = "http://localhost:8000", session=None) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _call(self, method: str, path: str, **params):
        resp = self.session.request(method, f"{self.base_url}{path}", params=params)
        resp.raise_for_status()
        return resp.json()

    def record_workout(self, calories: int, duration_minutes: int, notes: str = "") -> dict:
        return self._call(
            "POST",
            "/workouts",
            calories=calories,
            duration_minutes=duration_minutes,
            notes=notes,
        )

    def list_workouts(self) -> list:
        return self._call("GET", "/workouts")

    def recent_workouts(self, limit: int = 5) -> list:
        return self._call("GET", "/workouts/recent", limit=limit)

    def delete_workout(self, index: int) -> dict:
        return self._call("DELETE", f"/workouts/{index}")

    def stats(self) -> dict:
        return self._call("GET", "/stats")

    def compute_bmi(self, weight_kg: float, height_cm: float) -> dict:
        return self._call("POST", "/stats/bmi", weight_kg=weight_kg, height_cm=height_cm)

    def adjust_calories(self, delta: int) -> dict:
        return self._call("POST", "/stats/calories/adjust", delta=delta)

    def reset_streak(self) -> dict:
        return self._call("POST", "/stats/streak/reset")

    def net_calories(self, consumed: int, burned: int) -> int:
        return self._call("GET", "/stats/net_calories", consumed=consumed, burned=burned)[
            "net_calories"
        ]

    def create_reminder(self, title: str, time: datetime.datetime) -> dict:
        return self._call("POST", "/reminders", title=title, time=time.isoformat())

    def list_reminders(self) -> list:
        return self._call("GET", "/reminders")

    def update_reminder(self, reminder_id: str, title: str, time: datetime.datetime) -> dict:
        return self._call(
            "PUT", f"/reminders/{reminder_id}", title=title, time=time.isoformat()
        )

    def delete_reminder(self, reminder_id: str) -> dict:
        return self._call("DELETE", f"/reminders/{reminder_id}")

    def account(self) -> dict:
        return self._call("GET", "/account")

    def sign_up(self, username: str, email: str, password: str) -> dict:
        return self._call(
            "POST", "/account/sign_up", username=username, email=email, password=password
        )

    def sign_in(self, email: str, password: str) -> dict:
        return self._call("POST", "/account/sign_in", email=email, password=password)

    def sign_out(self) -> dict:
        return self._call("POST", "/account/sign_out")
