"""Progress domain entity: a user's completion record for one plan day.

Completion sets are stored serialized (a JSON list of ids such as ``"[1, 3]"``)
so a client always replaces the whole field; see ``meal_ids``/``exercise_ids``
for the decoded view.
"""
import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from fitplan.utilities.constants import EMPTY_COMPLETIONS

# API field name -> attribute name
PATCHABLE_FIELDS = {
    "date": "date",
    "mealCompletions": "meal_completions",
    "workoutCompleted": "workout_completed",
    "dailyWalkCompleted": "daily_walk_completed",
    "exerciseCompletions": "exercise_completions",
    "notes": "notes",
}


def decode_ids(raw: Optional[str]) -> List[int]:
    """Decode a serialized completion set; malformed input reads as empty."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, int) and not isinstance(v, bool)]


def encode_ids(ids) -> str:
    return json.dumps(list(ids))


class Progress:
    def __init__(self, id: int, user_id: int, day_number: int, date: str,
                 meal_completions: str = EMPTY_COMPLETIONS, workout_completed: bool = False,
                 daily_walk_completed: bool = False, exercise_completions: str = EMPTY_COMPLETIONS,
                 notes: Optional[str] = "", created_at: Optional[datetime] = None):
        self.id = id
        self.user_id = user_id
        self.day_number = day_number
        self.date = date
        self.meal_completions = meal_completions
        self.workout_completed = workout_completed
        self.daily_walk_completed = daily_walk_completed
        self.exercise_completions = exercise_completions
        self.notes = notes
        self.created_at = created_at or datetime.now()

    def __str__(self) -> str:
        return (f"Progress #{self.id} user={self.user_id} day={self.day_number} "
                f"meals={self.meal_completions} workout={self.workout_completed}")

    __repr__ = __str__

    def meal_ids(self) -> List[int]:
        return decode_ids(self.meal_completions)

    def exercise_ids(self) -> List[int]:
        return decode_ids(self.exercise_completions)

    def apply(self, patch: Dict[str, Any]) -> "Progress":
        '''Overwrite only the fields present in ``patch`` (API field names). Unknown keys are ignored.'''
        for key, value in patch.items():
            attr = PATCHABLE_FIELDS.get(key)
            if attr is not None:
                setattr(self, attr, value)
        return self

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "dayNumber": self.day_number,
            "date": self.date,
            "mealCompletions": self.meal_completions,
            "workoutCompleted": self.workout_completed,
            "dailyWalkCompleted": self.daily_walk_completed,
            "exerciseCompletions": self.exercise_completions,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat(),
        }
