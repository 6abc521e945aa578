from app.database.models import DocumentRecord, OwnerMarker
from app.database.repositories.base import BaseDocumentRepository


class InMemoryDocumentRepository(BaseDocumentRepository):
    """Process-local store for local runs. Not shared between processes."""

    def __init__(self) -> None:
        self.owner_markers: dict[str, OwnerMarker] = {}
        self.documents: dict[tuple[str, str], DocumentRecord] = {}

    def upsert_owner_marker(self, owner_id: str) -> None:
        self.owner_markers[owner_id] = OwnerMarker(owner_id=owner_id)

    def upsert_document(self, record: DocumentRecord) -> None:
        self.documents[(record.owner_id, record.document_id)] = record
