"""
Maintenance Request Store

In-memory collection of maintenance requests guarded by a reader/writer lock.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from maintenance_tracker.core.exceptions import NotFoundError, ValidationError
from maintenance_tracker.core.locks import ReadWriteLock
from maintenance_tracker.models.maintenance_request import MaintenanceRequest, RequestStatus

logger = logging.getLogger(__name__)

DEMO_REQUESTS = (
    {
        "asset": "HVAC Unit 3",
        "description": "Unit is making a loud rattling noise and not cooling the server room.",
        "status": RequestStatus.PENDING.value,
    },
    {
        "asset": "Elevator B",
        "description": "Doors do not close fully on the 4th floor.",
        "status": RequestStatus.IN_PROGRESS.value,
    },
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MaintenanceRequestStore:
    """
    Owns the request collection and the ID counter.

    Reads (``list``, ``get``) share the lock; writes (``create``, ``update``,
    ``delete``) hold it exclusively. Each call validates, mutates and builds
    its result inside a single acquisition.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._requests: Dict[int, MaintenanceRequest] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()
        self._clock = clock or _utcnow

    @property
    def next_id(self) -> int:
        """The ID the next successful create will receive."""
        with self._lock.read_locked():
            return self._next_id

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._requests)

    def list(self) -> List[MaintenanceRequest]:
        """All requests, newest first; equal timestamps are ordered by id descending."""
        with self._lock.read_locked():
            return sorted(
                self._requests.values(),
                key=lambda request: (request.created_at, request.id),
                reverse=True,
            )

    def get(self, request_id: int) -> MaintenanceRequest:
        with self._lock.read_locked():
            request = self._requests.get(request_id)
        if request is None:
            raise NotFoundError(request_id)
        return request

    def create(self, asset: str, description: str, status: Optional[str] = None) -> MaintenanceRequest:
        """Validate and store a new request, assigning its id and creation time."""
        with self._lock.write_locked():
            self._validate(asset, description)
            request = MaintenanceRequest(
                id=self._next_id,
                asset=asset,
                description=description,
                status=status or RequestStatus.PENDING.value,
                created_at=self._clock(),
            )
            self._requests[request.id] = request
            self._next_id += 1

        logger.info("Created maintenance request %d for asset %r", request.id, request.asset)
        return request

    def update(
        self, request_id: int, asset: str, description: str, status: Optional[str] = None
    ) -> MaintenanceRequest:
        """
        Replace asset, description and status of an existing request.

        ``id`` and ``created_at`` are carried over from the stored record. An
        empty ``status`` keeps the current one.
        """
        with self._lock.write_locked():
            existing = self._requests.get(request_id)
            if existing is None:
                raise NotFoundError(request_id)
            self._validate(asset, description)
            updated = existing.model_copy(update={
                "asset": asset,
                "description": description,
                "status": status or existing.status,
            })
            self._requests[request_id] = updated

        logger.info("Updated maintenance request %d (status %r)", request_id, updated.status)
        return updated

    def delete(self, request_id: int) -> None:
        with self._lock.write_locked():
            if request_id not in self._requests:
                raise NotFoundError(request_id)
            del self._requests[request_id]

        logger.info("Deleted maintenance request %d", request_id)

    @staticmethod
    def _validate(asset: str, description: str) -> None:
        if not (asset or "").strip() or not (description or "").strip():
            logger.warning("Rejected maintenance request with empty asset or description")
            raise ValidationError("Asset and description are required")


def seed_demo_requests(store: MaintenanceRequestStore) -> List[MaintenanceRequest]:
    """Create the demonstration tickets shown on a fresh start."""
    created = [store.create(**fields) for fields in DEMO_REQUESTS]
    logger.info("Seeded %d demo maintenance requests", len(created))
    return created
