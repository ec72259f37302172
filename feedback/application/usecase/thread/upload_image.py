"""Upload image use case."""

import logfire
from pydantic import BaseModel

from feedback.adapter.storage import BlobStore
from feedback.config import ContentSettings
from feedback.domain.error import ValidationError


class UploadImageRequest(BaseModel):
    """Upload image request."""

    data: bytes
    content_type: str


class UploadImageResponse(BaseModel):
    """Upload image response."""

    url: str


class UploadImageUseCase:
    """Use case for storing an image to attach to a new thread."""

    def __init__(self, blob_store: BlobStore, content_settings: ContentSettings) -> None:
        """Initialize upload image use case.

        Args:
            blob_store: Where images are stored
            content_settings: Size and type limits for uploads
        """
        self.blob_store = blob_store
        self.content_settings = content_settings

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        """Validate and store the image.

        Raises:
            ValidationError: If the upload is empty, too large or not an image
            StorageError: If the blob store fails
        """
        size = len(request.data)
        max_bytes = self.content_settings.image_max_bytes
        prefix = self.content_settings.image_content_type_prefix

        with logfire.span(
            "upload_image.execute", size=size, content_type=request.content_type
        ):
            if not request.content_type.startswith(prefix):
                raise ValidationError("Please select an image file")
            if size == 0:
                raise ValidationError("Image file is empty")
            if size > max_bytes:
                raise ValidationError(
                    f"Image must be at most {max_bytes // (1024 * 1024)}MB"
                )

            url = await self.blob_store.put(request.data, request.content_type)
            logfire.info("Image stored", url=url, size=size)
            return UploadImageResponse(url=url)
