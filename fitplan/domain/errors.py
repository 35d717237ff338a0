"""Error taxonomy shared by the store, the aggregator and the API layer.

Each error carries the HTTP status the API answers with; the API renders
``{"message": ..., "errors": [...]}`` and never includes stack details.
"""
from typing import Any, Dict, List, Optional


class TrackerError(Exception):
    status_code = 500

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    def to_dict(self):
        body: Dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(TrackerError):
    """Malformed path parameter or request body."""
    status_code = 400


class NotFoundError(TrackerError):
    """Referenced workout, day or record does not exist."""
    status_code = 404


class InternalError(TrackerError):
    status_code = 500


__all__ = ["TrackerError", "ValidationError", "NotFoundError", "InternalError"]
