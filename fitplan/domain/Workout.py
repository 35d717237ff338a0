"""Workout and Exercise domain entities: one workout per weekday, exercises kept in display order."""
from typing import List, Optional


class Exercise:
    def __init__(self, id: int, workout_id: int, name: str = "", reps_and_weight: str = ""):
        self.id = id
        self.workout_id = workout_id
        self.name = name
        self.reps_and_weight = reps_and_weight

    def __str__(self) -> str:
        return f"{self.name} ({self.reps_and_weight})"

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "workoutId": self.workout_id,
            "name": self.name,
            "repsAndWeight": self.reps_and_weight,
        }


class Workout:
    def __init__(self, id: int, day: str, type: str = "", day_number: int = 1):
        self.id = id
        self.day = day
        self.type = type
        self.day_number = day_number

    def __str__(self) -> str:
        return f"{self.day} - {self.type}"

    __repr__ = __str__

    def to_dict(self, exercises: Optional[List[Exercise]] = None):
        '''Serialize the workout; embeds the exercise list when one is given.'''
        data = {
            "id": self.id,
            "day": self.day,
            "type": self.type,
            "dayNumber": self.day_number,
        }
        if exercises is not None:
            data["exercises"] = [ex.to_dict() for ex in exercises]
        return data
