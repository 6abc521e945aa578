from abc import ABC, abstractmethod

from app.ocr.models import TextBlock


class BaseOcrClient(ABC):
    """Contract for OCR service adapters."""

    @abstractmethod
    def detect_text(self, container_id: str, object_key: str) -> list[TextBlock]:
        """Run text detection on a stored image.

        Args:
            container_id: Storage container (bucket) holding the image.
            object_key: Key of the image inside the container.

        Returns:
            Every block reported by the service, in reading order.

        Raises:
            OcrServiceError: if the service call fails.
        """
