import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from fitplan.api.deps import get_catalog
from fitplan.infra.Plan_Catalog import PlanCatalog
from fitplan.logic.calendar.day_mapping import (
    current_day_number,
    current_week_number,
    day_mapping,
    week_date_range,
    week_days,
)
from fitplan.utilities.constants import PLAN_LENGTH_DAYS
from fitplan.utilities.validators import parse_week_number

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/meals/{day}")
def get_meals(day: str, catalog: PlanCatalog = Depends(get_catalog)):
    """Meals scheduled for a weekday; an unknown weekday has no meals."""
    meals = catalog.meals_for_weekday(day)
    logger.info("Found %d meals for day: %s", len(meals), day)
    return [m.to_dict() for m in meals]


@router.get("/api/workouts/{day}")
def get_workout(day: str, catalog: PlanCatalog = Depends(get_catalog)):
    workout = catalog.workout_with_exercises(day)
    if workout is None:
        logger.warning("No workout found for day: %s", day)
        return JSONResponse(status_code=404, content={"message": "Workout not found"})
    return workout


@router.get("/api/plan/today")
def get_today():
    day_number = current_day_number()
    week_number = current_week_number()
    return {
        **day_mapping(day_number),
        "weekNumber": week_number,
        "dateRange": week_date_range(week_number),
        "totalDays": PLAN_LENGTH_DAYS,
    }


@router.get("/api/plan/weeks/{week_number}")
def get_week(week_number: str):
    week = parse_week_number(week_number)
    return {
        "weekNumber": week,
        "dateRange": week_date_range(week),
        "days": week_days(week),
    }
