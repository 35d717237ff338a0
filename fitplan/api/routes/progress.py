import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from fitplan.api.deps import get_catalog, get_progress_repository, get_user_id
from fitplan.domain.errors import InternalError, TrackerError
from fitplan.infra.Plan_Catalog import PlanCatalog
from fitplan.infra.Progress_Repository import ProgressRepository
from fitplan.infra.pdf_utils import generate_pdf_for_week
from fitplan.logic.calendar.day_mapping import week_day_numbers
from fitplan.logic.progress.toggles import toggle_exercise, toggle_meal
from fitplan.logic.reporting.completion import compute_progress_stats, daily_progress_row, week_stats
from fitplan.utilities.validators import ProgressUpdateInput, parse_day_number, parse_week_number

router = APIRouter()
logger = logging.getLogger(__name__)


# -------------------- Daily progress --------------------
@router.get("/api/progress/{day_number}")
def get_progress(day_number: str,
                 repo: ProgressRepository = Depends(get_progress_repository),
                 user_id: int = Depends(get_user_id)):
    """Progress for a day, created empty on first read."""
    day = parse_day_number(day_number)
    return repo.get_or_create(user_id, day).to_dict()


@router.post("/api/progress/{day_number}")
def update_progress(day_number: str, payload: ProgressUpdateInput,
                    repo: ProgressRepository = Depends(get_progress_repository),
                    user_id: int = Depends(get_user_id)):
    day = parse_day_number(day_number)
    patch = payload.to_patch()
    try:
        progress = repo.apply_partial_update(user_id, day, patch)
    except TrackerError:
        raise
    except Exception as e:
        logger.exception("Progress update failed for day %s: %s", day, e)
        raise InternalError("Internal server error")
    return progress.to_dict()


@router.post("/api/notes/{day_number}")
def update_notes(day_number: str, payload: dict = Body(...),
                 repo: ProgressRepository = Depends(get_progress_repository),
                 user_id: int = Depends(get_user_id)):
    day = parse_day_number(day_number)
    return repo.set_notes(user_id, day, payload.get("notes")).to_dict()


@router.post("/api/progress/{day_number}/meals/{meal_id}/toggle")
def toggle_meal_completion(day_number: str, meal_id: int,
                           completed: Optional[bool] = Query(default=None),
                           repo: ProgressRepository = Depends(get_progress_repository),
                           catalog: PlanCatalog = Depends(get_catalog),
                           user_id: int = Depends(get_user_id)):
    """Check or uncheck one meal; without ``completed`` the current state is flipped."""
    day = parse_day_number(day_number)
    return toggle_meal(repo, catalog, user_id, day, meal_id, completed).to_dict()


@router.post("/api/progress/{day_number}/exercises/{exercise_id}/toggle")
def toggle_exercise_completion(day_number: str, exercise_id: int,
                               completed: Optional[bool] = Query(default=None),
                               repo: ProgressRepository = Depends(get_progress_repository),
                               catalog: PlanCatalog = Depends(get_catalog),
                               user_id: int = Depends(get_user_id)):
    day = parse_day_number(day_number)
    return toggle_exercise(repo, catalog, user_id, day, exercise_id, completed).to_dict()


# -------------------- Weekly summary & stats --------------------
@router.get("/api/weekly-summary/{week_number}")
def get_weekly_summary(week_number: str,
                       repo: ProgressRepository = Depends(get_progress_repository),
                       user_id: int = Depends(get_user_id)):
    """The seven progress records of a week, in day order."""
    week = parse_week_number(week_number)
    return [p.to_dict() for p in repo.for_days(user_id, week_day_numbers(week))]


@router.get("/api/weekly-summary/{week_number}/stats")
def get_weekly_stats(week_number: str,
                     repo: ProgressRepository = Depends(get_progress_repository),
                     catalog: PlanCatalog = Depends(get_catalog),
                     user_id: int = Depends(get_user_id)):
    week = parse_week_number(week_number)
    return week_stats(repo, catalog, user_id, week)


@router.get("/api/weekly-summary/{week_number}/export")
def export_weekly_summary(week_number: str,
                          repo: ProgressRepository = Depends(get_progress_repository),
                          catalog: PlanCatalog = Depends(get_catalog),
                          user_id: int = Depends(get_user_id)):
    week = parse_week_number(week_number)
    days = repo.for_days(user_id, week_day_numbers(week, within_plan=True))
    rows = [daily_progress_row(p, catalog) for p in days]
    pdf_bytes = generate_pdf_for_week(week_stats(repo, catalog, user_id, week), rows)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=weekly_summary_W{week}.pdf"
        },
    )


@router.get("/api/progress-stats")
def get_progress_stats(repo: ProgressRepository = Depends(get_progress_repository),
                       catalog: PlanCatalog = Depends(get_catalog),
                       user_id: int = Depends(get_user_id)):
    return compute_progress_stats(repo, catalog, user_id)
