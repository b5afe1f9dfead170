from __future__ import annotations
import datetime
from collections import Counter

import structlog

from algorithms import MathTools
from errors import ValidationError
from models import SummaryStatistics, WorkoutEntry
from workout_log import WorkoutLogStore

logger = structlog.get_logger(__name__)


class StatisticsService:
    """Maintain dashboard statistics on top of the workout log.

    Counters are updated incrementally per recorded workout. Removing a
    log entry leaves them untouched, so ``exercise_count`` always equals the
    number of workouts ever recorded.
    """

    def __init__(self, log_store: WorkoutLogStore | None = None) -> None:
        self.log = log_store if log_store is not None else WorkoutLogStore()
        self.summary = SummaryStatistics()

    def snapshot(self) -> SummaryStatistics:
        return self.summary.copy()

    def record_workout(
        self,
        calories: int,
        duration_minutes: int,
        notes: str = "",
        timestamp: datetime.datetime | None = None,
    ) -> SummaryStatistics:
        """Log a workout and fold it into the running totals."""
        try:
            calories = MathTools.parse_non_negative_int(calories, "calories")
            duration_minutes = MathTools.parse_non_negative_int(
                duration_minutes, "duration"
            )
        except ValueError as e:
            raise ValidationError(str(e))
        entry = WorkoutEntry(
            calories_burned=calories,
            duration_minutes=duration_minutes,
            notes=notes or "",
            timestamp=timestamp or datetime.datetime.now(),
        )
        self.log.append(entry)
        self.summary.calories_burned += calories
        # each session is truncated on its own before being added
        self.summary.total_time_hours += MathTools.whole_hours(duration_minutes)
        self.summary.exercise_count += 1
        self.summary.workout_streak += 1
        self.summary.most_active_day = self._most_active_day()
        logger.info(
            "workout_recorded",
            calories=calories,
            duration_minutes=duration_minutes,
            exercise_count=self.summary.exercise_count,
        )
        return self.snapshot()

    def remove_workout(self, index: int) -> WorkoutEntry:
        """Delete a log entry without rolling back the totals."""
        return self.log.remove(index)

    def _most_active_day(self) -> str:
        counts = Counter(e.timestamp.strftime("%A") for e in self.log.list())
        if not counts:
            return ""
        return counts.most_common(1)[0][0]

    def compute_bmi(self, weight_kg: object, height_cm: object) -> SummaryStatistics:
        try:
            weight = MathTools.parse_positive_real(weight_kg, "weight")
            height = MathTools.parse_positive_real(height_cm, "height")
            bmi = MathTools.bmi(weight, height)
        except ValueError as e:
            raise ValidationError(str(e))
        self.summary.body_mass_index = bmi
        logger.debug("bmi_computed", bmi=round(self.summary.body_mass_index, 2))
        return self.snapshot()

    def adjust_calories_burned(self, delta: object) -> SummaryStatistics:
        """Add a manual calorie correction; negative totals are allowed."""
        try:
            amount = MathTools.parse_int(delta, "calories")
        except ValueError as e:
            raise ValidationError(str(e))
        self.summary.calories_burned += amount
        return self.snapshot()

    @staticmethod
    def net_calories(consumed: object, burned: object) -> int:
        try:
            consumed_val = MathTools.parse_non_negative_int(consumed, "consumed")
            burned_val = MathTools.parse_non_negative_int(burned, "burned")
        except ValueError as e:
            raise ValidationError(str(e))
        return MathTools.net_calories(consumed_val, burned_val)

    def reset_streak(self) -> SummaryStatistics:
        self.summary.workout_streak = 0
        logger.info("streak_reset")
        return self.snapshot()
