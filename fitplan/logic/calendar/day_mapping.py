"""Day/week calendar mapping for the fixed-length plan.

Day 1 is the plan epoch and is always a "monday" in the weekday template,
whatever the real calendar weekday of the epoch is. Inputs are clamped to the
plan rather than rejected.
"""
import math
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Union

from fitplan.utilities.config import PLAN_START_DATE
from fitplan.utilities.constants import DAY_NAMES, DAYS_PER_WEEK, PLAN_LENGTH_DAYS, PLAN_WEEKS


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def day_number_to_weekday(day_number: int) -> str:
    return DAY_NAMES[(day_number - 1) % DAYS_PER_WEEK]


def day_number_to_date(day_number: int, epoch: Optional[date] = None) -> date:
    epoch = epoch or PLAN_START_DATE
    return epoch + timedelta(days=day_number - 1)


def day_number_to_week_number(day_number: int) -> int:
    return _clamp(math.ceil(day_number / DAYS_PER_WEEK), 1, PLAN_WEEKS)


def plan_end_date(epoch: Optional[date] = None) -> date:
    return day_number_to_date(PLAN_LENGTH_DAYS, epoch)


def current_day_number(now: Union[date, datetime, None] = None, epoch: Optional[date] = None) -> int:
    """Map ``now`` (defaults to today) onto the plan: 1 before the epoch, 40 after the last day."""
    epoch = epoch or PLAN_START_DATE
    if now is None:
        now = date.today()
    if isinstance(now, datetime):
        now = now.date()
    if now < epoch:
        return 1
    if now > plan_end_date(epoch):
        return PLAN_LENGTH_DAYS
    return _clamp((now - epoch).days + 1, 1, PLAN_LENGTH_DAYS)


def current_week_number(now: Union[date, datetime, None] = None, epoch: Optional[date] = None) -> int:
    return _clamp(day_number_to_week_number(current_day_number(now, epoch)), 1, PLAN_WEEKS)


def week_day_numbers(week_number: int, within_plan: bool = False) -> List[int]:
    """Day numbers of a week: always seven, or only those inside the plan when ``within_plan``."""
    start = (week_number - 1) * DAYS_PER_WEEK + 1
    end = start + DAYS_PER_WEEK - 1
    if within_plan:
        end = min(end, PLAN_LENGTH_DAYS)
    return list(range(start, end + 1))


def day_mapping(day_number: int, epoch: Optional[date] = None) -> Dict[str, object]:
    return {
        "dayNumber": day_number,
        "day": day_number_to_weekday(day_number),
        "date": day_number_to_date(day_number, epoch).isoformat(),
        "weekNumber": day_number_to_week_number(day_number),
    }


def week_days(week_number: int, epoch: Optional[date] = None) -> List[Dict[str, object]]:
    week_number = _clamp(week_number, 1, PLAN_WEEKS)
    return [day_mapping(n, epoch) for n in week_day_numbers(week_number, within_plan=True)]


def _month_day(d: date) -> str:
    return f"{d.strftime('%B')} {d.day}"


def week_date_range(week_number: int, epoch: Optional[date] = None) -> str:
    """Human readable span of a plan week, e.g. ``March 31 – April 6, 2023``."""
    days = week_day_numbers(_clamp(week_number, 1, PLAN_WEEKS), within_plan=True)
    first = day_number_to_date(days[0], epoch)
    last = day_number_to_date(days[-1], epoch)
    return f"{_month_day(first)} – {_month_day(last)}, {last.year}"


__all__ = [
    "day_number_to_weekday", "day_number_to_date", "day_number_to_week_number",
    "current_day_number", "current_week_number", "week_date_range",
    "week_day_numbers", "day_mapping", "week_days", "plan_end_date",
]
