from __future__ import annotations
import datetime
import uuid
from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class WorkoutEntry:
    """A single logged workout session."""

    calories_burned: int
    duration_minutes: int
    notes: str = ""
    timestamp: datetime.datetime = field(default_factory=datetime.datetime.now)

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "calories_burned": self.calories_burned,
            "duration_minutes": self.duration_minutes,
            "notes": self.notes,
        }


@dataclass
class SummaryStatistics:
    """Aggregate figures shown on the dashboard."""

    calories_burned: int = 0
    total_time_hours: int = 0
    exercise_count: int = 0
    most_active_day: str = ""
    workout_streak: int = 0
    body_mass_index: float = 0.0

    def copy(self) -> "SummaryStatistics":
        return SummaryStatistics(**asdict(self))

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ReminderRecord:
    title: str
    scheduled_time: datetime.datetime
    enabled: bool = True
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "scheduled_time": self.scheduled_time.isoformat(),
            "enabled": self.enabled,
        }


@dataclass
class UserAccount:
    username: str
    email: str
    password: str

    def to_dict(self) -> dict:
        # password is never echoed back to callers
        return {"username": self.username, "email": self.email}
