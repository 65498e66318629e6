from typing import Any, List

from fastapi import APIRouter, Depends, Response

from maintenance_tracker.api.deps import get_request_id, get_request_store
from maintenance_tracker.schemas.maintenance_request import (
    ErrorRead,
    MaintenanceRequestCreate,
    MaintenanceRequestRead,
    MaintenanceRequestUpdate,
)
from maintenance_tracker.services.request_store import MaintenanceRequestStore

router = APIRouter()

# Handlers are plain functions so they run on the worker thread pool; the
# store's lock may block and must not hold up the event loop. Item routes
# capture the whole remainder of the path so that malformed IDs are rejected
# by get_request_id instead of falling through to a 404 or a redirect.


@router.get("", response_model=List[MaintenanceRequestRead])
def read_requests(
    store: MaintenanceRequestStore = Depends(get_request_store),
) -> Any:
    """
    Retrieve all maintenance requests, newest first.
    """
    return store.list()


@router.post(
    "",
    response_model=MaintenanceRequestRead,
    status_code=201,
    responses={400: {"model": ErrorRead}},
)
def create_request(
    *,
    request_in: MaintenanceRequestCreate,
    store: MaintenanceRequestStore = Depends(get_request_store),
) -> Any:
    """
    Create a new maintenance request. Status defaults to "Pending".
    """
    return store.create(
        asset=request_in.asset,
        description=request_in.description,
        status=request_in.status,
    )


@router.get(
    "/{request_id:path}",
    response_model=MaintenanceRequestRead,
    responses={400: {"model": ErrorRead}, 404: {"model": ErrorRead}},
)
def read_request(
    *,
    request_id: int = Depends(get_request_id),
    store: MaintenanceRequestStore = Depends(get_request_store),
) -> Any:
    """
    Get a specific maintenance request by its ID.
    """
    return store.get(request_id)


@router.put(
    "/{request_id:path}",
    response_model=MaintenanceRequestRead,
    responses={400: {"model": ErrorRead}, 404: {"model": ErrorRead}},
)
def update_request(
    *,
    request_id: int = Depends(get_request_id),
    request_in: MaintenanceRequestUpdate,
    store: MaintenanceRequestStore = Depends(get_request_store),
) -> Any:
    """
    Replace a request's asset, description and status.
    An empty status keeps the current one; id and createdAt never change.
    """
    return store.update(
        request_id,
        asset=request_in.asset,
        description=request_in.description,
        status=request_in.status,
    )


@router.delete(
    "/{request_id:path}",
    status_code=204,
    response_class=Response,
    responses={400: {"model": ErrorRead}, 404: {"model": ErrorRead}},
)
def delete_request(
    *,
    request_id: int = Depends(get_request_id),
    store: MaintenanceRequestStore = Depends(get_request_store),
) -> Response:
    """
    Delete a maintenance request permanently.
    """
    store.delete(request_id)
    return Response(status_code=204)
