from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.database.exceptions import PersistenceError
from app.database.models import OWNER_MARKER_DOCUMENT_ID, DocumentRecord
from app.database.repositories.base import BaseDocumentRepository


class DynamoDocumentRepository(BaseDocumentRepository):
    """Stores summaries in a DynamoDB table keyed by (userId, documentId)."""

    def __init__(self, table_name: str, region: str) -> None:
        self._table_name = table_name
        self._client = boto3.client("dynamodb", region_name=region)

    def upsert_owner_marker(self, owner_id: str) -> None:
        self._put(
            {
                "userId": {"S": owner_id},
                "documentId": {"S": OWNER_MARKER_DOCUMENT_ID},
            }
        )

    def upsert_document(self, record: DocumentRecord) -> None:
        item: dict[str, dict[str, Any]] = {
            "userId": {"S": record.owner_id},
            "documentId": {"S": record.document_id},
            "title": {"S": record.title},
            "summary": {"S": record.summary},
            "action": {"S": record.action},
            "titleTranslated": {"S": record.title_translated},
            "summaryTranslated": {"S": record.summary_translated},
            "actionTranslated": {"S": record.action_translated},
            "translatedLanguage": {"S": record.target_language},
            "createdAt": {"S": record.created_at},
            "tokenUsedGPT3": {"N": str(record.text_model_tokens)},
            "tokenUsedGPT4": {"N": str(record.vision_model_tokens)},
            "generateSummariesTime": {"N": f"{record.processing_duration_ms:.2f}"},
        }
        # Fast-path records carry no transcript.
        item["originalText"] = (
            {"S": record.original_text}
            if record.original_text is not None
            else {"NULL": True}
        )
        self._put(item)

    def _put(self, item: dict[str, dict[str, Any]]) -> None:
        try:
            self._client.put_item(TableName=self._table_name, Item=item)
        except (ClientError, BotoCoreError) as exc:
            raise PersistenceError(f"DynamoDB put_item failed: {exc}") from exc
