from abc import ABC, abstractmethod

from app.database.models import DocumentRecord


class BaseDocumentRepository(ABC):
    """Contract for key-value stores of document summaries.

    Rows are keyed by (owner_id, document_id). Every write is a full
    overwrite, so repeating a write leaves the same final state.
    """

    @abstractmethod
    def upsert_owner_marker(self, owner_id: str) -> None:
        """Write the owner's first-contact marker.

        Raises:
            PersistenceError: if the store rejects the write.
        """

    @abstractmethod
    def upsert_document(self, record: DocumentRecord) -> None:
        """Write *record*, replacing any row with the same key.

        Raises:
            PersistenceError: if the store rejects the write.
        """
