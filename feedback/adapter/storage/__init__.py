"""Blob storage adapters."""

from .base import BlobStore
from .local import LocalBlobStore
from .memory import InMemoryBlobStore

__all__ = ["BlobStore", "InMemoryBlobStore", "LocalBlobStore"]
