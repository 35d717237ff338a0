"""
Input validation: path parameter parsing and Pydantic schemas for request bodies.
"""
import json
import re
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, field_validator

from fitplan.domain.errors import ValidationError
from fitplan.utilities.constants import ISO_DATE_FORMAT, PLAN_WEEKS

_INTEGER = re.compile(r"-?[0-9]+")


def parse_day_number(raw: Any) -> int:
    """Parse a day number path parameter; anything that is not an integer is rejected."""
    if isinstance(raw, bool):
        raise ValidationError("Invalid day number")
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw):
        raise ValidationError("Invalid day number")
    return int(raw)


def parse_week_number(raw: Any) -> int:
    try:
        week = parse_day_number(raw)
    except ValidationError:
        raise ValidationError("Invalid week number")
    if week < 1 or week > PLAN_WEEKS:
        raise ValidationError("Invalid week number")
    return week


def _check_completion_set(v: Optional[str]) -> str:
    if v is None:
        raise ValueError('must be a JSON encoded list of ids')
    try:
        ids = json.loads(v)
    except ValueError:
        raise ValueError('must be a JSON encoded list of ids')
    if not isinstance(ids, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
        raise ValueError('must be a JSON encoded list of integer ids')
    return v


class ProgressUpdateInput(BaseModel):
    """Schema for a partial progress update; only the keys sent are applied."""
    model_config = ConfigDict(extra='ignore')

    date: Optional[StrictStr] = None
    mealCompletions: Optional[StrictStr] = None
    workoutCompleted: Optional[StrictBool] = None
    dailyWalkCompleted: Optional[StrictBool] = None
    exerciseCompletions: Optional[StrictStr] = None
    notes: Optional[StrictStr] = None

    @field_validator('mealCompletions', 'exerciseCompletions')
    @classmethod
    def validate_completions(cls, v):
        """Completion sets travel as serialized id lists, e.g. "[1, 2]"."""
        return _check_completion_set(v)

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        if v is None:
            raise ValueError('must be an ISO date (YYYY-MM-DD)')
        datetime.strptime(v, ISO_DATE_FORMAT)
        return v

    @field_validator('workoutCompleted', 'dailyWalkCompleted')
    @classmethod
    def reject_null_flags(cls, v):
        if v is None:
            raise ValueError('must be a boolean')
        return v

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
