import re

from fastapi import Path, Request

from maintenance_tracker.core.exceptions import INVALID_ID_MESSAGE, ParseError
from maintenance_tracker.services.request_store import MaintenanceRequestStore

REQUEST_ID_PATTERN = re.compile(r"[0-9]+")


def get_request_store(request: Request) -> MaintenanceRequestStore:
    """Dependency returning the process-wide store created in the app lifespan."""
    return request.app.state.request_store


def get_request_id(request_id: str = Path(..., description="Numeric ID of the maintenance request.")) -> int:
    """
    Parse the item path segment.

    The route captures everything after ``/requests/``, so an empty ID and
    extra segments arrive here too. Only plain ASCII digits are accepted;
    forms that ``int()`` would coerce (``1.0``, ``+1``, ``1_0``, a leading
    space) are rejected.
    """
    if not REQUEST_ID_PATTERN.fullmatch(request_id):
        raise ParseError(INVALID_ID_MESSAGE)
    return int(request_id)
