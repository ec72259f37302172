"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class StorageError(AdapterError):
    """Blob storage failed to accept or serve an object."""

    pass
