from __future__ import annotations
import datetime
from typing import Protocol

import structlog

from errors import NotFoundError, ValidationError
from models import ReminderRecord

logger = structlog.get_logger(__name__)


class ReminderStore(Protocol):
    def save(self, record: ReminderRecord) -> None: ...

    def delete(self, record: ReminderRecord) -> None: ...

    def fetch_all(self, sort_by: str = "scheduled_time") -> list[ReminderRecord]: ...


class DailyScheduler(Protocol):
    def schedule_daily(
        self, hour: int, minute: int, message: str, reminder_id: str | None = None
    ) -> object: ...

    def cancel(self, reminder_id: str) -> None: ...


class ReminderRegistry:
    """Manage workout reminders, optionally persisted and scheduled.

    In-memory state is always updated first. When ``store`` is given each
    change is written through synchronously; a failed write surfaces as
    ``PersistenceError`` and the in-memory change is kept.
    """

    def __init__(
        self,
        store: ReminderStore | None = None,
        scheduler: DailyScheduler | None = None,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self._records: dict[str, ReminderRecord] = {}
        if self.store is not None:
            for record in self.store.fetch_all("scheduled_time"):
                record.scheduled_time = self._clean_time(record.scheduled_time)
                self._records[record.id] = record

    def __len__(self) -> int:
        return len(self._records)

    @staticmethod
    def _clean_title(title: str) -> str:
        title = (title or "").strip()
        if not title:
            raise ValidationError("reminder title is required")
        return title

    @staticmethod
    def _clean_time(time: datetime.datetime) -> datetime.datetime:
        """Return ``time`` as naive local time."""
        if not isinstance(time, datetime.datetime):
            raise ValidationError("reminder time must be a datetime")
        if time.tzinfo is not None and time.utcoffset() is not None:
            return time.astimezone().replace(tzinfo=None)
        return time.replace(tzinfo=None)

    def create(
        self, title: str, time: datetime.datetime, enabled: bool = True
    ) -> ReminderRecord:
        record = ReminderRecord(
            title=self._clean_title(title),
            scheduled_time=self._clean_time(time),
            enabled=enabled,
        )
        self._records[record.id] = record
        logger.info("reminder_created", id=record.id, title=record.title)
        if self.store is not None:
            self.store.save(record)
        self._schedule(record)
        return record

    def get(self, reminder_id: str) -> ReminderRecord:
        try:
            return self._records[reminder_id]
        except KeyError:
            raise NotFoundError(f"reminder {reminder_id} not found")

    def update(
        self, reminder_id: str, title: str, time: datetime.datetime
    ) -> ReminderRecord:
        record = self.get(reminder_id)
        title = self._clean_title(title)
        time = self._clean_time(time)
        record.title = title
        record.scheduled_time = time
        logger.info("reminder_updated", id=record.id)
        if self.store is not None:
            self.store.save(record)
        self._schedule(record)
        return record

    def delete(self, reminder_id: str) -> None:
        record = self.get(reminder_id)
        del self._records[reminder_id]
        logger.info("reminder_deleted", id=reminder_id)
        self._cancel(record)
        if self.store is not None:
            self.store.delete(record)

    def list(self) -> list[ReminderRecord]:
        return sorted(self._records.values(), key=lambda r: r.scheduled_time)

    def _schedule(self, record: ReminderRecord) -> None:
        if self.scheduler is None or not record.enabled:
            return
        t = record.scheduled_time
        try:
            self.scheduler.schedule_daily(
                t.hour, t.minute, record.title, reminder_id=record.id
            )
        except Exception:
            # fire-and-forget: the reminder itself is already stored
            logger.exception("notification_schedule_failed", id=record.id)

    def _cancel(self, record: ReminderRecord) -> None:
        if self.scheduler is None:
            return
        try:
            self.scheduler.cancel(record.id)
        except Exception:
            logger.exception("notification_cancel_failed", id=record.id)
