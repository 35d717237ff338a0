import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from fitplan.domain.Meal import Meal
from fitplan.domain.Workout import Exercise, Workout
from fitplan.infra.paths import CATALOG_FILE
from fitplan.logic.calendar.day_mapping import day_number_to_weekday
from fitplan.utilities.constants import DAY_NAMES

logger = logging.getLogger(__name__)


class PlanCatalog:
    """Read-only meal and workout template, keyed by weekday name.

    Seeded once on construction; ids are assigned sequentially in file order
    so exercise order is the display order. Every occurrence of a weekday in
    the 40-day plan shares the same entries; ``day_number`` on an entry is
    the first occurrence (1..7).
    """

    def __init__(self, catalog_file: Optional[Path] = None):
        self._meals: Dict[str, List[Meal]] = {}
        self._workouts: Dict[str, Workout] = {}
        self._exercises: Dict[int, List[Exercise]] = {}
        self._seed(Path(catalog_file or CATALOG_FILE))

    def _seed(self, catalog_file: Path) -> None:
        try:
            with open(catalog_file, 'r', encoding='utf-8') as f:
                entries = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load plan catalog %s: %s", catalog_file, e)
            raise

        meal_id = workout_id = exercise_id = 1
        for entry in entries:
            day = entry["day"].lower()
            day_number = DAY_NAMES.index(day) + 1
            meals = self._meals.setdefault(day, [])
            for m in entry.get("meals", []):
                meals.append(Meal(meal_id, day, m["time"], m["description"], int(m["calories"]), day_number))
                meal_id += 1
            w = entry.get("workout")
            if not w:
                continue
            workout = Workout(workout_id, day, w["type"], day_number)
            self._workouts[day] = workout
            exercises = self._exercises.setdefault(workout.id, [])
            for ex in w.get("exercises", []):
                exercises.append(Exercise(exercise_id, workout.id, ex["name"], ex["reps_and_weight"]))
                exercise_id += 1
            workout_id += 1
        logger.info("Plan catalog seeded: %d meals, %d workouts, %d exercises",
                    meal_id - 1, workout_id - 1, exercise_id - 1)

    def meals_for_weekday(self, name: str) -> List[Meal]:
        return list(self._meals.get((name or "").lower(), []))

    def workout_for_weekday(self, name: str) -> Optional[Workout]:
        return self._workouts.get((name or "").lower())

    def exercises_for_workout(self, workout_id: int) -> List[Exercise]:
        return list(self._exercises.get(workout_id, []))

    def workout_with_exercises(self, name: str) -> Optional[dict]:
        workout = self.workout_for_weekday(name)
        if workout is None:
            return None
        return workout.to_dict(self.exercises_for_workout(workout.id))

    def meals_for_day_number(self, day_number: int) -> List[Meal]:
        return self.meals_for_weekday(day_number_to_weekday(day_number))

    def workout_for_day_number(self, day_number: int) -> Optional[Workout]:
        return self.workout_for_weekday(day_number_to_weekday(day_number))

    def exercises_for_day_number(self, day_number: int) -> List[Exercise]:
        workout = self.workout_for_day_number(day_number)
        return self.exercises_for_workout(workout.id) if workout else []

    def total_calories(self, name: str) -> int:
        return sum(m.calories for m in self.meals_for_weekday(name))
