from fastapi import APIRouter

from maintenance_tracker.api.endpoints import maintenance_requests

api_router = APIRouter()

# Include maintenance request endpoints
api_router.include_router(
    maintenance_requests.router, prefix="/requests", tags=["requests"])
