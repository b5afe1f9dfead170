import sqlite3
import datetime
from contextlib import contextmanager
from typing import List, Tuple

import structlog

from errors import PersistenceError
from models import ReminderRecord

logger = structlog.get_logger(__name__)


class Database:
    """Provides SQLite connection management and schema initialization."""

    _TABLE_DEFINITIONS = {
        "reminders": (
            """CREATE TABLE reminders (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    scheduled_time TEXT NOT NULL,
                    enabled INTEGER NOT NULL DEFAULT 1
                );""",
            ["id", "title", "scheduled_time", "enabled"],
        ),
        "scheduled_notifications": (
            """CREATE TABLE scheduled_notifications (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    reminder_id TEXT,
                    hour INTEGER NOT NULL,
                    minute INTEGER NOT NULL,
                    message TEXT NOT NULL,
                    created_at TEXT NOT NULL
                );""",
            ["id", "reminder_id", "hour", "minute", "message", "created_at"],
        ),
    }

    def __init__(self, db_path: str = "gainz.db") -> None:
        self._db_path = db_path
        self._ensure_schema()

    @contextmanager
    def _connection(self):
        try:
            connection = sqlite3.connect(self._db_path)
        except sqlite3.Error as e:
            raise PersistenceError(f"cannot open {self._db_path}: {e}") from e
        try:
            yield connection
            connection.commit()
        finally:
            connection.close()

    def _ensure_schema(self) -> None:
        try:
            with self._connection() as conn:
                for table, (sql, columns) in self._TABLE_DEFINITIONS.items():
                    self._ensure_table(conn, table, sql, columns)
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e

    def _ensure_table(
        self, conn: sqlite3.Connection, table: str, sql: str, columns: List[str]
    ) -> None:
        cur = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?;", (table,)
        )
        if cur.fetchone() is None:
            conn.execute(sql)
            return

        cur = conn.execute(f"PRAGMA table_info({table});")
        existing_cols = [row[1] for row in cur.fetchall()]
        if existing_cols == columns:
            return

        conn.execute(f"ALTER TABLE {table} RENAME TO {table}_old;")
        conn.execute(sql)
        common = [c for c in existing_cols if c in columns]
        if common:
            cols = ", ".join(common)
            conn.execute(f"INSERT INTO {table} ({cols}) SELECT {cols} FROM {table}_old;")
        conn.execute(f"DROP TABLE {table}_old;")
        logger.info("table_migrated", table=table, kept_columns=common)


class BaseRepository(Database):
    """Base repository providing helper methods."""

    def execute(self, query: str, params: Tuple = ()) -> int:
        try:
            with self._connection() as conn:
                cursor = conn.cursor()
                cursor.execute(query, params)
                return cursor.lastrowid
        except sqlite3.Error as e:
            logger.error("db_write_failed", error=str(e))
            raise PersistenceError(str(e)) from e

    def fetch_all(self, query: str, params: Tuple = ()) -> List[Tuple]:
        try:
            with self._connection() as conn:
                cursor = conn.cursor()
                cursor.execute(query, params)
                return cursor.fetchall()
        except sqlite3.Error as e:
            logger.error("db_read_failed", error=str(e))
            raise PersistenceError(str(e)) from e

    def _delete_all(self, table: str) -> None:
        self.execute(f"DELETE FROM {table};")


class ReminderRepository(BaseRepository):
    """Durable storage for reminder records."""

    _SORTABLE = {"scheduled_time", "title", "id"}

    def save(self, record: ReminderRecord) -> None:
        """Insert ``record`` or overwrite the stored row with the same id."""
        self.execute(
            "INSERT INTO reminders (id, title, scheduled_time, enabled) VALUES (?, ?, ?, ?) "
            "ON CONFLICT(id) DO UPDATE SET title=excluded.title, "
            "scheduled_time=excluded.scheduled_time, enabled=excluded.enabled;",
            (
                record.id,
                record.title,
                record.scheduled_time.isoformat(),
                1 if record.enabled else 0,
            ),
        )

    def delete(self, record: ReminderRecord) -> None:
        self.execute("DELETE FROM reminders WHERE id = ?;", (record.id,))

    def fetch_all(
        self, sort_by: str = "scheduled_time", descending: bool = False
    ) -> List[ReminderRecord]:
        if sort_by not in self._SORTABLE:
            sort_by = "scheduled_time"
        order = "DESC" if descending else "ASC"
        rows = super().fetch_all(
            f"SELECT id, title, scheduled_time, enabled FROM reminders ORDER BY {sort_by} {order};"
        )
        return [
            ReminderRecord(
                id=rid,
                title=title,
                scheduled_time=datetime.datetime.fromisoformat(ts),
                enabled=bool(enabled),
            )
            for rid, title, ts, enabled in rows
        ]


class NotificationRepository(BaseRepository):
    """Repository for daily notification schedules."""

    def add(
        self, hour: int, minute: int, message: str, reminder_id: str | None = None
    ) -> int:
        return self.execute(
            "INSERT INTO scheduled_notifications (reminder_id, hour, minute, message, created_at) VALUES (?, ?, ?, ?, ?);",
            (reminder_id, hour, minute, message, datetime.datetime.now().isoformat()),
        )

    def delete_for_reminder(self, reminder_id: str) -> None:
        self.execute(
            "DELETE FROM scheduled_notifications WHERE reminder_id = ?;",
            (reminder_id,),
        )

    def fetch_all(self) -> list[dict[str, object]]:
        rows = super().fetch_all(
            "SELECT id, reminder_id, hour, minute, message FROM scheduled_notifications ORDER BY hour, minute, id;"
        )
        return [
            {
                "id": r[0],
                "reminder_id": r[1],
                "hour": r[2],
                "minute": r[3],
                "message": r[4],
            }
            for r in rows
        ]

    def delete_all(self) -> None:
        self._delete_all("scheduled_notifications")
