"""Meal domain entity: one scheduled meal of a weekday template (time, description, calories)."""


class Meal:
    def __init__(self, id: int, day: str, time: str = "", description: str = "",
                 calories: int = 0, day_number: int = 1):
        self.id = id
        self.day = day
        self.time = time
        self.description = description
        self.calories = calories
        self.day_number = day_number

    def __str__(self) -> str:
        return f"{self.day} {self.time} - {self.description} - {self.calories} kcal"

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "day": self.day,
            "time": self.time,
            "description": self.description,
            "calories": self.calories,
            "dayNumber": self.day_number,
        }
