"""Local directory blob store, served by the API under a static mount."""

import asyncio
from pathlib import Path

import logfire

from feedback.adapter.error import StorageError

from .base import BlobStore


class LocalBlobStore(BlobStore):
    """Writes objects into a directory on the local filesystem."""

    def __init__(self, directory: Path, url_path: str) -> None:
        """Initialize local blob store.

        Args:
            directory: Target directory (created on first write)
            url_path: URL prefix the directory is served under
        """
        self.directory = directory
        self.url_path = url_path.rstrip("/")

    def _write(self, name: str, data: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / name).write_bytes(data)

    async def put(self, data: bytes, content_type: str) -> str:
        """Write the object to disk and return its URL."""
        name = self.object_name(content_type)
        with logfire.span(
            "local_blob_store.put", name=name, size=len(data), content_type=content_type
        ):
            try:
                await asyncio.to_thread(self._write, name, data)
            except OSError as e:
                logfire.error("Failed to write blob", name=name, error=str(e))
                raise StorageError(f"Could not store {name}: {e}") from e

            return f"{self.url_path}/{name}"
