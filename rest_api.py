import datetime

from fastapi import APIRouter, FastAPI, HTTPException

from account_service import AccountHolder
from config import APP_VERSION, load_settings
from db import NotificationRepository, ReminderRepository
from errors import NotFoundError, PersistenceError, ValidationError
from logging_config import configure_logging
from notification_service import NotificationScheduler
from reminder_service import ReminderRegistry
from stats_service import StatisticsService
from workout_log import WorkoutLogStore


class FitnessAPI:
    """Application state for one user session, exposed over REST.

    Owns the workout log, statistics, reminders and account. Create one
    instance per process and hand it to whichever front end is in use.
    """

    def __init__(
        self,
        db_path: str = "gainz.db",
        yaml_path: str = "settings.yaml",
        *,
        persist_reminders: bool | None = None,
    ) -> None:
        self.db_path = db_path
        self.settings = load_settings(yaml_path)
        if persist_reminders is None:
            persist_reminders = self.settings.persist_reminders
        self.log = WorkoutLogStore()
        self.statistics = StatisticsService(self.log)
        self.account = AccountHolder()
        self.reminder_repo = ReminderRepository(db_path) if persist_reminders else None
        self.notifications = (
            NotificationScheduler(NotificationRepository(db_path))
            if self.settings.schedule_notifications
            else None
        )
        self.reminders = ReminderRegistry(self.reminder_repo, self.notifications)
        self.app = FastAPI(
            title="GainZ API",
            description="Workout log, statistics and reminders",
            version=APP_VERSION,
        )
        self._setup_routes()

    def _setup_routes(self) -> None:
        workouts_router = APIRouter(prefix="/workouts", tags=["Workouts"])
        stats_router = APIRouter(prefix="/stats", tags=["Statistics"])
        reminders_router = APIRouter(prefix="/reminders", tags=["Reminders"])
        account_router = APIRouter(prefix="/account", tags=["Account"])

        @self.app.get("/health")
        def health():
            return {"status": "ok"}

        @workouts_router.post("")
        def record_workout(calories: int, duration_minutes: int, notes: str = ""):
            try:
                return self.statistics.record_workout(
                    calories, duration_minutes, notes
                ).to_dict()
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=str(e))

        @workouts_router.get("")
        def list_workouts():
            return [e.to_dict() for e in self.log.list()]

        @workouts_router.get("/recent")
        def recent_workouts(limit: int = 5):
            return [e.to_dict() for e in self.log.recent(limit)]

        @workouts_router.delete("/{index}")
        def delete_workout(index: int):
            try:
                self.statistics.remove_workout(index)
                return {"status": "deleted"}
            except IndexError as e:
                raise HTTPException(status_code=404, detail=str(e))

        @stats_router.get("")
        def get_stats():
            return self.statistics.snapshot().to_dict()

        @stats_router.post("/bmi")
        def compute_bmi(weight_kg: str, height_cm: str):
            try:
                return self.statistics.compute_bmi(weight_kg, height_cm).to_dict()
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=str(e))

        @stats_router.post("/calories/adjust")
        def adjust_calories(delta: int):
            return self.statistics.adjust_calories_burned(delta).to_dict()

        @stats_router.get("/net_calories")
        def net_calories(consumed: str, burned: str):
            try:
                return {"net_calories": self.statistics.net_calories(consumed, burned)}
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=str(e))

        @stats_router.post("/streak/reset")
        def reset_streak():
            return self.statistics.reset_streak().to_dict()

        @reminders_router.get("")
        def list_reminders():
            return [r.to_dict() for r in self.reminders.list()]

        @reminders_router.post("")
        def create_reminder(title: str, time: datetime.datetime, enabled: bool = True):
            try:
                return self.reminders.create(title, time, enabled).to_dict()
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=str(e))
            except PersistenceError as e:
                raise HTTPException(status_code=500, detail=str(e))

        @reminders_router.put("/{reminder_id}")
        def update_reminder(reminder_id: str, title: str, time: datetime.datetime):
            try:
                return self.reminders.update(reminder_id, title, time).to_dict()
            except NotFoundError as e:
                raise HTTPException(status_code=404, detail=str(e))
            except ValidationError as e:
                raise HTTPException(status_code=400, detail=str(e))
            except PersistenceError as e:
                raise HTTPException(status_code=500, detail=str(e))

        @reminders_router.delete("/{reminder_id}")
        def delete_reminder(reminder_id: str):
            try:
                self.reminders.delete(reminder_id)
                return {"status": "deleted"}
            except NotFoundError as e:
                raise HTTPException(status_code=404, detail=str(e))
            except PersistenceError as e:
                raise HTTPException(status_code=500, detail=str(e))

        @account_router.get("")
        def get_account():
            if self.account.current is None:
                return {"signed_in": False}
            return {"signed_in": True, **self.account.current.to_dict()}

        @account_router.post("/sign_up")
        def sign_up(username: str, email: str, password: str):
            return self.account.sign_up(username, email, password).to_dict()

        @account_router.post("/sign_in")
        def sign_in(email: str, password: str):
            return self.account.sign_in(email, password).to_dict()

        @account_router.post("/sign_out")
        def sign_out():
            self.account.sign_out()
            return {"status": "signed_out"}

        self.app.include_router(workouts_router)
        self.app.include_router(stats_router)
        self.app.include_router(reminders_router)
        self.app.include_router(account_router)


def create_app(db_path: str = "gainz.db", yaml_path: str = "settings.yaml") -> FastAPI:
    """Build a configured app, e.g. ``uvicorn rest_api:create_app --factory``."""
    api = FitnessAPI(db_path=db_path, yaml_path=yaml_path)
    configure_logging(api.settings.log_level)
    return api.app
