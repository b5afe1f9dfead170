from __future__ import annotations
from typing import List

import structlog

from errors import ValidationError
from models import WorkoutEntry

logger = structlog.get_logger(__name__)


class WorkoutLogStore:
    """Ordered in-memory log of workout entries, oldest first."""

    def __init__(self) -> None:
        self._entries: List[WorkoutEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: WorkoutEntry) -> None:
        if entry.calories_burned < 0:
            raise ValidationError("calories burned must be non-negative")
        if entry.duration_minutes < 0:
            raise ValidationError("duration must be non-negative")
        self._entries.append(entry)

    def remove(self, index: int) -> WorkoutEntry:
        """Delete and return the entry at ``index``."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"no workout at index {index}")
        entry = self._entries.pop(index)
        logger.info("workout_removed", index=index, remaining=len(self._entries))
        return entry

    def list(self) -> List[WorkoutEntry]:
        return list(self._entries)

    def recent(self, limit: int = 5) -> List[WorkoutEntry]:
        """Return up to ``limit`` entries, newest first."""
        if limit <= 0:
            return []
        return list(reversed(self._entries[-limit:]))
