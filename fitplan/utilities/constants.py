from typing import Final

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"
PLAN_LENGTH_DAYS: Final[int] = 40
DAYS_PER_WEEK: Final[int] = 7
PLAN_WEEKS: Final[int] = 6
DAY_NAMES: Final[tuple[str, ...]] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
# Rest days only count toward the workout denominator when actually completed
REST_DAYS: Final[frozenset[str]] = frozenset({"saturday", "sunday"})
EMPTY_COMPLETIONS: Final[str] = "[]"
