"""Completion-rate aggregation over progress records.

All rates are fractions in [0, 1]; rounding belongs to the presentation layer.
Weekly meal and exercise rates are the plain mean of the per-day rates, not
weighted by how many items each day has.
"""
from typing import Dict, Any, Iterable, List

from fitplan.domain.Progress import Progress
from fitplan.infra.Plan_Catalog import PlanCatalog
from fitplan.infra.Progress_Repository import ProgressRepository
from fitplan.logic.calendar.day_mapping import (
    day_number_to_date,
    day_number_to_weekday,
    day_number_to_week_number,
    week_date_range,
    week_day_numbers,
)
from fitplan.utilities.constants import DAYS_PER_WEEK, PLAN_LENGTH_DAYS, PLAN_WEEKS, REST_DAYS


def _rate(done: int, planned: int) -> float:
    if planned <= 0:
        return 0.0
    return min(done / planned, 1.0)


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def meal_completion_rate(progress: Progress, planned_meals: int) -> float:
    return _rate(len(set(progress.meal_ids())), planned_meals)


def exercise_completion_rate(progress: Progress, planned_exercises: int) -> float:
    return _rate(len(set(progress.exercise_ids())), planned_exercises)


def workout_completion_rate(days: Iterable[Progress]) -> float:
    """Completed workouts over workout days.

    Saturday and Sunday are rest days: they join the denominator only when
    the workout was actually marked complete.
    """
    completed = workout_days = 0
    for p in days:
        is_rest_day = day_number_to_weekday(p.day_number) in REST_DAYS
        if not is_rest_day or p.workout_completed:
            workout_days += 1
            if p.workout_completed:
                completed += 1
    return _rate(completed, workout_days)


def daily_walk_completion_rate(days: Iterable[Progress]) -> float:
    """Walks over the full seven days of a week, even for a partial week."""
    walks = sum(1 for p in days if p.daily_walk_completed)
    return _rate(walks, DAYS_PER_WEEK)


def daily_progress_row(progress: Progress, catalog: PlanCatalog) -> Dict[str, Any]:
    planned_meals = len(catalog.meals_for_day_number(progress.day_number))
    planned_exercises = len(catalog.exercises_for_day_number(progress.day_number))
    return {
        'dayNumber': progress.day_number,
        'weekNumber': day_number_to_week_number(progress.day_number),
        'day': day_number_to_weekday(progress.day_number),
        'date': day_number_to_date(progress.day_number).isoformat(),
        'mealsCompleted': len(set(progress.meal_ids())),
        'mealsPlanned': planned_meals,
        'mealCompletionRate': meal_completion_rate(progress, planned_meals),
        'workoutCompleted': progress.workout_completed,
        'dailyWalkCompleted': progress.daily_walk_completed,
        'exercisesCompleted': len(set(progress.exercise_ids())),
        'exercisesPlanned': planned_exercises,
        'exerciseCompletionRate': exercise_completion_rate(progress, planned_exercises),
    }


def compute_week_stats(week_number: int, days: List[Progress], catalog: PlanCatalog) -> Dict[str, Any]:
    """Roll one week's progress records up into completion rates."""
    rows = [daily_progress_row(p, catalog) for p in days]
    return {
        'weekNumber': week_number,
        'dateRange': week_date_range(week_number),
        'days': len(rows),
        'mealCompletionRate': _mean([r['mealCompletionRate'] for r in rows]),
        'workoutCompletionRate': workout_completion_rate(days),
        'dailyWalkCompletionRate': daily_walk_completion_rate(days),
        'exerciseCompletionRate': _mean([r['exerciseCompletionRate'] for r in rows]),
        'workoutsCompleted': sum(1 for p in days if p.workout_completed),
        'walksCompleted': sum(1 for p in days if p.daily_walk_completed),
    }


def week_stats(repo: ProgressRepository, catalog: PlanCatalog, user_id: int, week_number: int) -> Dict[str, Any]:
    days = repo.for_days(user_id, week_day_numbers(week_number))
    return compute_week_stats(week_number, days, catalog)


def compute_progress_stats(repo: ProgressRepository, catalog: PlanCatalog, user_id: int) -> Dict[str, Any]:
    """Per-day rows for the whole plan plus one rollup per week.

    Reading a day creates its (empty) record if it does not exist yet. Each
    weekly rollup covers all seven days of its week, so the last week also
    reads the two days after the plan ends.
    """
    days = repo.for_days(user_id, range(1, PLAN_LENGTH_DAYS + 1))
    weekly = [week_stats(repo, catalog, user_id, week) for week in range(1, PLAN_WEEKS + 1)]
    return {
        'dailyProgress': [daily_progress_row(p, catalog) for p in days],
        'weeklyStats': weekly,
    }


__all__ = [
    "meal_completion_rate", "exercise_completion_rate", "workout_completion_rate",
    "daily_walk_completion_rate", "daily_progress_row", "compute_week_stats",
    "week_stats", "compute_progress_stats",
]
