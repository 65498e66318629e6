import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from maintenance_tracker.api.api import api_router
from maintenance_tracker.core.config import settings
from maintenance_tracker.core.logging_config import setup_logging
from maintenance_tracker.middleware.cors_middleware import PermissiveCORSMiddleware
from maintenance_tracker.middleware.error_middleware import (
    ErrorHandlingMiddleware,
    register_exception_handlers,
)
from maintenance_tracker.services.request_store import MaintenanceRequestStore, seed_demo_requests

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the process-wide request store and seed the demo tickets.
    All state is discarded when the process stops.
    """
    setup_logging(settings.log_level, settings.log_file)
    store = MaintenanceRequestStore()
    if settings.seed_demo_data:
        seed_demo_requests(store)
    app.state.request_store = store
    logger.info("%s ready with %d maintenance requests", settings.app_name, len(store))
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="CRUD service for maintenance tickets",
    version="1.0.0",
    lifespan=lifespan,
    redirect_slashes=False,
)

register_exception_handlers(app)

# The CORS middleware is added last so it wraps error responses as well.
app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(
    PermissiveCORSMiddleware,
    allow_origin=settings.cors_allow_origin,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routes
app.include_router(api_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "maintenance_tracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
