"""In-memory blob store for testing."""

from .base import BlobStore


class InMemoryBlobStore(BlobStore):
    """Keeps objects in a dict keyed by URL."""

    def __init__(self, url_path: str = "/media") -> None:
        self.url_path = url_path.rstrip("/")
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def put(self, data: bytes, content_type: str) -> str:
        """Keep the object and return its URL."""
        url = f"{self.url_path}/{self.object_name(content_type)}"
        self.objects[url] = (data, content_type)
        return url
