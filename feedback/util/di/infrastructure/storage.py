"""Blob storage infrastructure providers."""

from pathlib import Path

from dishka import Scope, provide

from feedback.adapter.storage import BlobStore, LocalBlobStore
from feedback.config import Settings
from feedback.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to a local directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_blob_store(self, settings: Settings) -> BlobStore:
        """Provide local blob store served under the media mount."""
        return LocalBlobStore(
            directory=Path(settings.storage.directory),
            url_path=settings.storage.url_path,
        )
