"""In-memory progress store.

Records live in a dict keyed by id for the lifetime of the process; a restart
discards them. At most one record exists per (user_id, day_number) because
every access goes through ``get_or_create``. Concurrent updates to the same
day are last-writer-wins per field; the lock keeps id assignment, the
lookup-then-create step and ``modify`` read-modify-writes consistent across
FastAPI's worker threads.
"""
from __future__ import annotations

import logging
from datetime import date
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

from fitplan.domain.Progress import Progress
from fitplan.domain.errors import NotFoundError, ValidationError
from fitplan.utilities.constants import EMPTY_COMPLETIONS
from fitplan.utilities.validators import parse_day_number

logger = logging.getLogger(__name__)


class ProgressRepository:
    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._lock = Lock()
        self._progress: Dict[int, Progress] = {}
        self._index: Dict[tuple, int] = {}
        self._next_id = 1
        self._today = today or date.today

    def _find(self, user_id: int, day_number: int) -> Optional[Progress]:
        progress_id = self._index.get((user_id, day_number))
        return self._progress.get(progress_id) if progress_id is not None else None

    def get_or_create(self, user_id: int, day_number: Any) -> Progress:
        """Return the record for the day, creating an empty one on first access."""
        day_number = parse_day_number(day_number)
        with self._lock:
            progress = self._find(user_id, day_number)
            if progress is not None:
                return progress
            progress = Progress(
                id=self._next_id,
                user_id=user_id,
                day_number=day_number,
                date=self._today().isoformat(),
                meal_completions=EMPTY_COMPLETIONS,
                workout_completed=False,
                exercise_completions=EMPTY_COMPLETIONS,
                notes="",
            )
            self._progress[progress.id] = progress
            self._index[(user_id, day_number)] = progress.id
            self._next_id += 1
        logger.info("Created progress id=%s for user=%s day=%s", progress.id, user_id, day_number)
        return progress

    def update(self, progress_id: int, patch: Dict[str, Any]) -> Progress:
        with self._lock:
            progress = self._progress.get(progress_id)
            if progress is None:
                raise NotFoundError(f"Progress with id {progress_id} not found")
            progress.apply(patch)
        logger.info("Updated progress id=%s fields=%s", progress_id, sorted(patch))
        return progress

    def modify(self, progress_id: int, build_patch: Callable[[Progress], Dict[str, Any]]) -> Progress:
        """Read-modify-write under the lock; ``build_patch`` must not call back into the store."""
        with self._lock:
            progress = self._progress.get(progress_id)
            if progress is None:
                raise NotFoundError(f"Progress with id {progress_id} not found")
            patch = build_patch(progress)
            progress.apply(patch)
        logger.info("Updated progress id=%s fields=%s", progress_id, sorted(patch))
        return progress

    def apply_partial_update(self, user_id: int, day_number: Any, patch: Dict[str, Any]) -> Progress:
        """Overwrite only the fields present in ``patch``; the others keep their values."""
        progress = self.get_or_create(user_id, day_number)
        return self.update(progress.id, patch)

    def set_notes(self, user_id: int, day_number: Any, text: Any) -> Progress:
        if not isinstance(text, str):
            raise ValidationError("Notes must be a string")
        return self.apply_partial_update(user_id, day_number, {"notes": text})

    def for_days(self, user_id: int, day_numbers) -> List[Progress]:
        return [self.get_or_create(user_id, n) for n in day_numbers]

    def __len__(self) -> int:
        return len(self._progress)
