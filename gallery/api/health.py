"""Health check."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..schemas.folder import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(
        status="OK",
        message="Server is running",
        timestamp=datetime.now(timezone.utc),
    )
