import logging
import uuid
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from leave_service.config import get_settings
from leave_service.services.employee import get_employee_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    try:
        await get_employee_service().list_employees(uuid.UUID(int=0))
    except Exception:
        logger.exception("Health check: employee service unavailable")
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
    )
