from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from typing import Optional
import logging

from fitplan.domain.errors import TrackerError
from fitplan.infra.Plan_Catalog import PlanCatalog
from fitplan.infra.Progress_Repository import ProgressRepository
from fitplan.utilities.config import DEFAULT_USER_ID

# Routers
from fitplan.api.routes import plan, progress

# Logging
logger = logging.getLogger("fitplan_app")


def _field_errors(exc: RequestValidationError):
    """Flatten pydantic errors to {path, message, type}; the 'body' prefix is dropped."""
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        errors.append({
            "path": ".".join(loc),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        })
    return errors


def create_app(catalog: Optional[PlanCatalog] = None,
               repository: Optional[ProgressRepository] = None,
               user_id: int = DEFAULT_USER_ID) -> FastAPI:
    """Build the API with its own catalog and progress store.

    Each call gets fresh state unless a catalog/repository is passed in.
    """
    app = FastAPI(title="40-Day Meal & Workout Plan API")
    app.state.catalog = catalog or PlanCatalog()
    app.state.progress = repository or ProgressRepository()
    app.state.user_id = user_id

    # Include routers
    app.include_router(plan.router)
    app.include_router(progress.router)

    @app.exception_handler(TrackerError)
    async def _tracker_error(request: Request, exc: TrackerError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):
        errors = _field_errors(exc)
        logger.info("%s %s invalid data: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=400, content={"message": "Invalid data", "errors": errors})

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        logger.debug("Received %s request to %s", request.method, request.url.path)
        return await call_next(request)

    @app.get("/health")
    def health():
        return {"status": "healthy", "service": "fitplan"}

    return app


app = create_app()
