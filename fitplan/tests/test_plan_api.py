import unittest
from fastapi.testclient import TestClient

from fitplan.api.api_run import create_app


class TestPlanAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(create_app())

    def test_meals_for_day(self):
        resp = self.client.get('/api/meals/monday')
        self.assertEqual(resp.status_code, 200)
        meals = resp.json()
        self.assertEqual(len(meals), 3)
        for m in meals:
            for key in ('id', 'day', 'time', 'description', 'calories', 'dayNumber'):
                self.assertIn(key, m)
        self.assertEqual(meals[0]['time'], '12:00 PM')

    def test_meals_day_is_case_insensitive(self):
        self.assertEqual(self.client.get('/api/meals/Tuesday').json(),
                         self.client.get('/api/meals/tuesday').json())

    def test_meals_unknown_day_is_empty(self):
        resp = self.client.get('/api/meals/funday')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_workout_with_exercises(self):
        resp = self.client.get('/api/workouts/wednesday')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['type'], 'Glutes & Hamstrings')
        self.assertEqual(len(data['exercises']), 5)
        self.assertEqual(data['exercises'][1]['name'], 'Deadlifts')

    def test_workout_unknown_day(self):
        resp = self.client.get('/api/workouts/funday')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {'message': 'Workout not found'})

    def test_today(self):
        data = self.client.get('/api/plan/today').json()
        self.assertTrue(1 <= data['dayNumber'] <= 40)
        self.assertTrue(1 <= data['weekNumber'] <= 6)
        self.assertEqual(data['totalDays'], 40)
        self.assertIn('dateRange', data)

    def test_week_days(self):
        resp = self.client.get('/api/plan/weeks/6')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual([d['dayNumber'] for d in data['days']], [36, 37, 38, 39, 40])
        self.assertEqual(self.client.get('/api/plan/weeks/9').status_code, 400)

    def test_health(self):
        self.assertEqual(self.client.get('/health').json()['status'], 'healthy')


if __name__ == '__main__':
    unittest.main()
