"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter, status
from pydantic import BaseModel

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Probe target for client connection monitors.",
)
async def health_check() -> HealthResponse:
    """Basic health check - is the API up?"""
    return HealthResponse(status="OK", timestamp=datetime.now(UTC).isoformat())
