"""Request-scoped access to the catalog, the progress store and the acting user."""
from fastapi import Request

from fitplan.infra.Plan_Catalog import PlanCatalog
from fitplan.infra.Progress_Repository import ProgressRepository


def get_catalog(request: Request) -> PlanCatalog:
    return request.app.state.catalog


def get_progress_repository(request: Request) -> ProgressRepository:
    return request.app.state.progress


def get_user_id(request: Request) -> int:
    # No authentication: every request acts for the configured user.
    return request.app.state.user_id
