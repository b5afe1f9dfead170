from __future__ import annotations

import structlog

from db import NotificationRepository
from errors import ValidationError

logger = structlog.get_logger(__name__)


class NotificationScheduler:
    """Record daily local notifications for the device to fire.

    A schedule tied to a reminder id replaces any earlier schedule for that
    reminder, so each reminder fires at most once a day.
    """

    def __init__(self, repo: NotificationRepository) -> None:
        self.repo = repo

    def schedule_daily(
        self, hour: int, minute: int, message: str, reminder_id: str | None = None
    ) -> int:
        if not 0 <= hour <= 23:
            raise ValidationError("hour must be between 0 and 23")
        if not 0 <= minute <= 59:
            raise ValidationError("minute must be between 0 and 59")
        if reminder_id is not None:
            self.repo.delete_for_reminder(reminder_id)
        nid = self.repo.add(hour, minute, message, reminder_id)
        logger.info(
            "notification_scheduled",
            hour=hour,
            minute=minute,
            id=nid,
            reminder_id=reminder_id,
        )
        return nid

    def cancel(self, reminder_id: str) -> None:
        self.repo.delete_for_reminder(reminder_id)
        logger.info("notification_cancelled", reminder_id=reminder_id)

    def list_scheduled(self) -> list[dict[str, object]]:
        return self.repo.fetch_all()

    def cancel_all(self) -> None:
        self.repo.delete_all()
