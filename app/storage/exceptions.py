class ObjectStorageError(Exception):
    """Raised when the object storage service cannot serve a request."""
