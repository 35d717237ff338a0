import threading
import unittest

from fitplan.domain.errors import NotFoundError
from fitplan.infra.Plan_Catalog import PlanCatalog
from fitplan.infra.Progress_Repository import ProgressRepository
from fitplan.logic.progress.toggles import (
    set_daily_walk_completed,
    set_workout_completed,
    toggle_exercise,
    toggle_meal,
)


class TestToggles(unittest.TestCase):
    def setUp(self):
        self.catalog = PlanCatalog()
        self.repo = ProgressRepository()

    def test_toggle_meal_flips(self):
        progress = toggle_meal(self.repo, self.catalog, 1, 1, 2)
        self.assertEqual(progress.meal_ids(), [2])
        progress = toggle_meal(self.repo, self.catalog, 1, 1, 3)
        self.assertEqual(progress.meal_completions, "[2, 3]")
        progress = toggle_meal(self.repo, self.catalog, 1, 1, 2)
        self.assertEqual(progress.meal_ids(), [3])

    def test_explicit_state_is_idempotent(self):
        toggle_meal(self.repo, self.catalog, 1, 8, 1, completed=True)
        progress = toggle_meal(self.repo, self.catalog, 1, 8, 1, completed=True)
        self.assertEqual(progress.meal_ids(), [1])
        progress = toggle_meal(self.repo, self.catalog, 1, 8, 1, completed=False)
        self.assertEqual(progress.meal_completions, "[]")

    def test_meal_from_another_weekday_is_rejected(self):
        with self.assertRaises(NotFoundError):
            toggle_meal(self.repo, self.catalog, 1, 1, 4)

    def test_toggle_exercise(self):
        friday = self.catalog.exercises_for_day_number(5)
        progress = toggle_exercise(self.repo, self.catalog, 1, 5, friday[1].id)
        self.assertEqual(progress.exercise_ids(), [friday[1].id])
        self.assertEqual(progress.meal_completions, "[]")
        with self.assertRaises(NotFoundError):
            toggle_exercise(self.repo, self.catalog, 1, 5, 1)

    def test_concurrent_toggles_of_different_meals_are_all_kept(self):
        days = range(1, 71)
        barrier = threading.Barrier(3)

        def mark(slot):
            barrier.wait()
            for day in days:
                meal = self.catalog.meals_for_day_number(day)[slot]
                toggle_meal(self.repo, self.catalog, 1, day, meal.id, completed=True)

        threads = [threading.Thread(target=mark, args=(slot,)) for slot in range(3)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        for day in days:
            planned = sorted(m.id for m in self.catalog.meals_for_day_number(day))
            self.assertEqual(sorted(self.repo.get_or_create(1, day).meal_ids()), planned, day)

    def test_workout_and_walk_flags_are_independent(self):
        set_workout_completed(self.repo, 1, 6, True)
        progress = set_daily_walk_completed(self.repo, 1, 6, True)
        self.assertTrue(progress.workout_completed)
        self.assertTrue(progress.daily_walk_completed)
        progress = set_workout_completed(self.repo, 1, 6, False)
        self.assertFalse(progress.workout_completed)
        self.assertTrue(progress.daily_walk_completed)


if __name__ == '__main__':
    unittest.main()
