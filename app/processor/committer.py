from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from app.database.models import DocumentRecord
from app.database.repositories.base import BaseDocumentRepository
from app.logging.logger import Log
from app.notification.graphql_notifier import GraphqlNotifier
from app.processor.models import DocumentIdentity, SourceReference
from app.summarization.models import ExtractedSummary, TranslatedSummary
from app.usage.tally import UsageTally


@dataclass(frozen=True)
class CommitResult:
    record: DocumentRecord
    notification: dict[str, Any]


class ResultCommitter:
    """Persists a finished document, then notifies subscribers.

    Both writes are full overwrites keyed by identity, so a redelivered
    event can commit again safely. A notification failure does not undo
    the writes that already happened.
    """

    def __init__(self, repository: BaseDocumentRepository, notifier: GraphqlNotifier) -> None:
        self._repository = repository
        self._notifier = notifier

    def commit(
        self,
        identity: DocumentIdentity,
        source_ref: SourceReference,
        original_text: str | None,
        extracted: ExtractedSummary,
        translated: TranslatedSummary,
        target_language: str,
        usage: UsageTally,
        duration_ms: float,
    ) -> CommitResult:
        """Write the owner marker and document record, then send the notification.

        Raises:
            PersistenceError: if either write fails.
            NotificationError: if the notification fails after persisting.
        """
        self._repository.upsert_owner_marker(identity.owner_id)

        record = DocumentRecord(
            owner_id=identity.owner_id,
            document_id=identity.document_id,
            original_text=original_text,
            title=extracted.title,
            summary=extracted.summary,
            action=extracted.action,
            title_translated=translated.title_translated,
            summary_translated=translated.summary_translated,
            action_translated=translated.action_translated,
            target_language=target_language,
            created_at=datetime.now(timezone.utc).isoformat(),
            text_model_tokens=usage.text_model_tokens,
            vision_model_tokens=usage.vision_model_tokens,
            processing_duration_ms=duration_ms,
        )
        self._repository.upsert_document(record)
        Log.info(
            f"Saved summary for {source_ref.container_id}/{source_ref.object_key} "
            f"as {identity.owner_id}/{identity.document_id}"
        )

        notification = self._notifier.notify(record)
        return CommitResult(record=record, notification=notification)
