"""Checkmark helpers for a day's progress.

The store replaces a completion field as a whole, so toggling one id is a
read-modify-write of the full serialized set, done under the store lock.
"""
from typing import List, Optional

from fitplan.domain.Progress import Progress, encode_ids
from fitplan.domain.errors import NotFoundError
from fitplan.infra.Plan_Catalog import PlanCatalog
from fitplan.infra.Progress_Repository import ProgressRepository


def _toggled(ids: List[int], item_id: int, completed: Optional[bool]) -> List[int]:
    present = item_id in ids
    if completed is None:
        completed = not present
    if completed and not present:
        return ids + [item_id]
    if not completed and present:
        return [i for i in ids if i != item_id]
    return ids


def toggle_meal(repo: ProgressRepository, catalog: PlanCatalog, user_id: int, day_number: int,
                meal_id: int, completed: Optional[bool] = None) -> Progress:
    """Mark a meal of the day done/undone; ``completed=None`` flips the current state."""
    if meal_id not in {m.id for m in catalog.meals_for_day_number(day_number)}:
        raise NotFoundError(f"Meal {meal_id} is not planned for day {day_number}")
    progress = repo.get_or_create(user_id, day_number)
    return repo.modify(progress.id, lambda p: {
        "mealCompletions": encode_ids(_toggled(p.meal_ids(), meal_id, completed))})


def toggle_exercise(repo: ProgressRepository, catalog: PlanCatalog, user_id: int, day_number: int,
                    exercise_id: int, completed: Optional[bool] = None) -> Progress:
    if exercise_id not in {e.id for e in catalog.exercises_for_day_number(day_number)}:
        raise NotFoundError(f"Exercise {exercise_id} is not planned for day {day_number}")
    progress = repo.get_or_create(user_id, day_number)
    return repo.modify(progress.id, lambda p: {
        "exerciseCompletions": encode_ids(_toggled(p.exercise_ids(), exercise_id, completed))})


def set_workout_completed(repo: ProgressRepository, user_id: int, day_number: int, completed: bool) -> Progress:
    return repo.apply_partial_update(user_id, day_number, {"workoutCompleted": bool(completed)})


def set_daily_walk_completed(repo: ProgressRepository, user_id: int, day_number: int, completed: bool) -> Progress:
    """The daily 4 km walk is tracked separately from the workout."""
    return repo.apply_partial_update(user_id, day_number, {"dailyWalkCompleted": bool(completed)})
