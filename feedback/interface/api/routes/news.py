"""News routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from feedback.application.usecase.news import ListNewsResponse, ListNewsUseCase

router = APIRouter(tags=["news"], route_class=DishkaRoute)


@router.get("/news", response_model=ListNewsResponse)
async def list_news(use_case: FromDishka[ListNewsUseCase]) -> ListNewsResponse:
    """Active announcements, by display order."""
    return await use_case.execute()
