import enum
from datetime import datetime

from pydantic import BaseModel, Field


class RequestStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class MaintenanceRequest(BaseModel):
    """A stored maintenance ticket. Records are replaced, never mutated in place."""

    id: int = Field(..., gt=0)
    asset: str
    description: str
    # Free text; RequestStatus lists the values offered by the UI.
    status: str = RequestStatus.PENDING.value
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        frozen = True
        populate_by_name = True
