from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MaintenanceRequestIn(BaseModel):
    # Emptiness is checked by the store so that it is reported as a
    # validation error rather than a body decoding error.
    asset: str = Field("", description="Equipment or location, e.g. 'HVAC Unit 3'.")
    description: str = Field("", description="What is wrong with the asset.")
    status: Optional[str] = Field(
        None, description="Ticket status; defaults to 'Pending' on create and is kept on update when empty.")


class MaintenanceRequestCreate(MaintenanceRequestIn):
    pass


class MaintenanceRequestUpdate(MaintenanceRequestIn):
    pass


class MaintenanceRequestRead(BaseModel):
    id: int
    asset: str
    description: str
    status: str
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class ErrorRead(BaseModel):
    error: str
