"""Blob storage interface for image attachments."""

import mimetypes
from abc import ABC, abstractmethod
from uuid import uuid4


class BlobStore(ABC):
    """Stores uploaded bytes and hands back a public URL.

    Size and content-type checks happen before ``put`` is called.
    """

    @abstractmethod
    async def put(self, data: bytes, content_type: str) -> str:
        """Store an object.

        Args:
            data: Raw bytes
            content_type: MIME type of the data

        Returns:
            Public URL of the stored object

        Raises:
            StorageError: If the object could not be stored
        """
        pass

    @staticmethod
    def object_name(content_type: str) -> str:
        """Random object name with an extension derived from the MIME type."""
        extension = mimetypes.guess_extension(content_type) or ""
        return f"{uuid4().hex}{extension}"
