from abc import ABC, abstractmethod


class BaseObjectStorage(ABC):
    """Contract for object storage adapters."""

    @abstractmethod
    def get_signed_url(self, container_id: str, object_key: str, ttl_seconds: int) -> str:
        """Return a time-limited GET URL for a stored object.

        Raises:
            ObjectStorageError: if the URL cannot be generated.
        """
