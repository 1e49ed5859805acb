"""
Health check endpoint.

Used by container orchestration and by the UI's test harness to wait
for the service to come up.  It does not touch the directory store.
"""

from fastapi import APIRouter, Depends

from customer_directory_api.app.api.deps import get_settings
from customer_directory_api.app.core.config import Settings
from customer_directory_api.app.schemas.customer import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Report that the service is running."""
    return HealthResponse(status="ok", service=settings.service_name)
