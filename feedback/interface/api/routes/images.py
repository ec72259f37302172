"""Image upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status

from feedback.application.usecase.thread import (
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)

router = APIRouter(tags=["images"], route_class=DishkaRoute)


@router.post(
    "/images", response_model=UploadImageResponse, status_code=status.HTTP_201_CREATED
)
async def upload_image(
    request: Request,
    use_case: FromDishka[UploadImageUseCase],
) -> UploadImageResponse:
    """Store an image sent as the raw request body.

    The Content-Type header must be an image type. The returned URL is
    passed as ``image_url`` when submitting the thread.
    """
    content_type = request.headers.get("content-type", "")
    data = await request.body()
    return await use_case.execute(
        UploadImageRequest(data=data, content_type=content_type)
    )
