import math
import unittest
from datetime import date, datetime

from fitplan.logic.calendar.day_mapping import (
    current_day_number,
    current_week_number,
    day_number_to_date,
    day_number_to_week_number,
    day_number_to_weekday,
    week_date_range,
    week_day_numbers,
    week_days,
)

EPOCH = date(2023, 3, 31)


class TestDayMapping(unittest.TestCase):
    def test_day_one_is_monday_on_epoch(self):
        self.assertEqual(day_number_to_date(1, EPOCH), date(2023, 3, 31))
        self.assertEqual(day_number_to_weekday(1), "monday")
        self.assertEqual(day_number_to_week_number(1), 1)

    def test_last_day(self):
        self.assertEqual(day_number_to_week_number(40), 6)
        self.assertEqual(day_number_to_date(40, EPOCH), date(2023, 5, 9))
        self.assertEqual(day_number_to_weekday(40), "friday")

    def test_weekday_is_periodic(self):
        for n in range(1, 34):
            self.assertEqual(day_number_to_weekday(n), day_number_to_weekday(n + 7))
        self.assertEqual(day_number_to_weekday(7), "sunday")
        self.assertEqual(day_number_to_weekday(8), "monday")

    def test_week_number_is_ceil_and_monotonic(self):
        previous = 0
        for n in range(1, 41):
            week = day_number_to_week_number(n)
            self.assertEqual(week, math.ceil(n / 7))
            self.assertGreaterEqual(week, previous)
            previous = week

    def test_current_day_number_is_clamped(self):
        self.assertEqual(current_day_number(date(2020, 1, 1), EPOCH), 1)
        self.assertEqual(current_day_number(date(2023, 3, 30), EPOCH), 1)
        self.assertEqual(current_day_number(date(2023, 3, 31), EPOCH), 1)
        self.assertEqual(current_day_number(date(2023, 4, 1), EPOCH), 2)
        self.assertEqual(current_day_number(date(2023, 5, 9), EPOCH), 40)
        self.assertEqual(current_day_number(date(2023, 5, 10), EPOCH), 40)
        self.assertEqual(current_day_number(date(2099, 12, 31), EPOCH), 40)

    def test_current_day_number_accepts_datetime(self):
        self.assertEqual(current_day_number(datetime(2023, 4, 2, 23, 59), EPOCH), 3)

    def test_current_week_number_is_clamped(self):
        self.assertEqual(current_week_number(date(2000, 1, 1), EPOCH), 1)
        self.assertEqual(current_week_number(date(2023, 4, 6), EPOCH), 1)
        self.assertEqual(current_week_number(date(2023, 4, 7), EPOCH), 2)
        self.assertEqual(current_week_number(date(2023, 5, 9), EPOCH), 6)
        self.assertEqual(current_week_number(date(2100, 1, 1), EPOCH), 6)

    def test_week_date_range(self):
        self.assertEqual(week_date_range(1, EPOCH), "March 31 – April 6, 2023")
        self.assertEqual(week_date_range(2, EPOCH), "April 7 – April 13, 2023")
        # Last week only has the remaining plan days (36..40)
        self.assertEqual(week_date_range(6, EPOCH), "May 5 – May 9, 2023")

    def test_week_day_numbers(self):
        self.assertEqual(week_day_numbers(1), [1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(week_day_numbers(6), [36, 37, 38, 39, 40, 41, 42])
        self.assertEqual(week_day_numbers(6, within_plan=True), [36, 37, 38, 39, 40])

    def test_week_days(self):
        days = week_days(2, EPOCH)
        self.assertEqual([d["dayNumber"] for d in days], list(range(8, 15)))
        self.assertEqual(days[0]["day"], "monday")
        self.assertEqual(days[0]["date"], "2023-04-07")


if __name__ == '__main__':
    unittest.main()
