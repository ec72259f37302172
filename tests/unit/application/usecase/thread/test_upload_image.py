"""Unit tests for UploadImageUseCase."""

import pytest

from feedback.adapter.storage import BlobStore
from feedback.application.usecase.thread import (
    SubmitThreadRequest,
    SubmitThreadUseCase,
    UploadImageRequest,
    UploadImageUseCase,
)
from feedback.config import ContentSettings
from feedback.domain.error import ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestUploadImageUseCase:
    """Tests for UploadImageUseCase."""

    @pytest.mark.asyncio
    async def test_upload_then_attach(self, unit_env):
        """The returned URL can be attached to a new thread."""
        # Arrange
        upload = await unit_env.get(UploadImageUseCase)
        submit = await unit_env.get(SubmitThreadUseCase)
        blob_store = await unit_env.get(BlobStore)

        # Act
        uploaded = await upload.execute(
            UploadImageRequest(data=PNG, content_type="image/png")
        )
        thread = await submit.execute(
            SubmitThreadRequest(content="See screenshot", rating=2, image_url=uploaded.url)
        )

        # Assert
        assert uploaded.url.startswith("/media/")
        assert uploaded.url.endswith(".png")
        assert thread.image_url == uploaded.url
        assert list(blob_store.objects.values()) == [(PNG, "image/png")]

    @pytest.mark.asyncio
    async def test_non_image_rejected(self, unit_env):
        """Only image content types are accepted."""
        upload = await unit_env.get(UploadImageUseCase)

        with pytest.raises(ValidationError, match="Please select an image file"):
            await upload.execute(
                UploadImageRequest(data=b"%PDF-1.4", content_type="application/pdf")
            )

    @pytest.mark.asyncio
    async def test_empty_upload_rejected(self, unit_env):
        """An empty body is not an image."""
        upload = await unit_env.get(UploadImageUseCase)

        with pytest.raises(ValidationError):
            await upload.execute(UploadImageRequest(data=b"", content_type="image/png"))

    @pytest.mark.asyncio
    async def test_oversized_upload_rejected(self, unit_env):
        """Uploads above the size cap are refused and not stored."""
        upload = await unit_env.get(UploadImageUseCase)
        settings = await unit_env.get(ContentSettings)
        blob_store = await unit_env.get(BlobStore)

        with pytest.raises(ValidationError):
            await upload.execute(
                UploadImageRequest(
                    data=b"\x00" * (settings.image_max_bytes + 1),
                    content_type="image/jpeg",
                )
            )

        assert blob_store.objects == {}
