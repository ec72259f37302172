"""Unit tests for the blob store adapters."""

import pytest

from feedback.adapter.error import StorageError
from feedback.adapter.storage import BlobStore, InMemoryBlobStore, LocalBlobStore


class TestObjectName:
    """Tests for BlobStore.object_name."""

    def test_extension_from_content_type(self):
        """Known image types keep a matching extension."""
        assert BlobStore.object_name("image/png").endswith(".png")

    def test_unknown_type_has_no_extension(self):
        """Unknown types still get a unique name."""
        name = BlobStore.object_name("image/x-unknown-format")

        assert "." not in name
        assert name != BlobStore.object_name("image/x-unknown-format")


class TestLocalBlobStore:
    """Tests for LocalBlobStore."""

    @pytest.mark.asyncio
    async def test_put_writes_file(self, tmp_path):
        """Objects land in the directory and the URL points at them."""
        # Arrange
        store = LocalBlobStore(tmp_path / "media", "/media/")

        # Act
        url = await store.put(b"GIF89a", "image/gif")

        # Assert
        name = url.removeprefix("/media/")
        assert url.startswith("/media/")
        assert (tmp_path / "media" / name).read_bytes() == b"GIF89a"

    @pytest.mark.asyncio
    async def test_write_failure_raises_storage_error(self, tmp_path):
        """Filesystem errors surface as StorageError."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")
        store = LocalBlobStore(blocker, "/media")

        with pytest.raises(StorageError):
            await store.put(b"data", "image/png")


class TestInMemoryBlobStore:
    """Tests for InMemoryBlobStore."""

    @pytest.mark.asyncio
    async def test_put_keeps_object(self):
        """Objects are kept with their content type."""
        store = InMemoryBlobStore()

        url = await store.put(b"data", "image/png")

        assert store.objects[url] == (b"data", "image/png")
