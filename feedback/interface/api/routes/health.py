"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from feedback.config import AdminSettings, Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report for the board API."""

    status: str
    service: str
    environment: str
    git_sha: str
    admin_token_configured: bool  # False while the placeholder token is in use
    checked_at: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the board API is up and how it is configured."""
    return HealthResponse(
        status="healthy",
        service="feedback-hub",
        environment=settings.environment,
        git_sha=settings.git_sha,
        admin_token_configured=settings.admin.token != AdminSettings().token,
        checked_at=datetime.now(),
    )
