import psycopg

from app.database.connection import get_connection
from app.database.exceptions import PersistenceError
from app.database.models import OWNER_MARKER_DOCUMENT_ID, DocumentRecord
from app.database.repositories.base import BaseDocumentRepository


class PostgresDocumentRepository(BaseDocumentRepository):
    """Database operations for the user_document_summaries table.

    The table's primary key is (owner_id, document_id). Owner markers are
    rows whose document_id is 'USER' and whose summary columns are NULL.
    """

    def upsert_owner_marker(self, owner_id: str) -> None:
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO user_document_summaries (owner_id, document_id)
                    VALUES (%s, %s)
                    ON CONFLICT (owner_id, document_id) DO NOTHING
                    """,
                    (owner_id, OWNER_MARKER_DOCUMENT_ID),
                )
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(f"Failed to write owner marker for {owner_id}: {exc}") from exc

    def upsert_document(self, record: DocumentRecord) -> None:
        try:
            with get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO user_document_summaries (
                        owner_id, document_id, original_text,
                        title, summary, action,
                        title_translated, summary_translated, action_translated,
                        target_language, created_at,
                        text_model_tokens, vision_model_tokens, processing_duration_ms
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    ON CONFLICT (owner_id, document_id) DO UPDATE SET
                        original_text = EXCLUDED.original_text,
                        title = EXCLUDED.title,
                        summary = EXCLUDED.summary,
                        action = EXCLUDED.action,
                        title_translated = EXCLUDED.title_translated,
                        summary_translated = EXCLUDED.summary_translated,
                        action_translated = EXCLUDED.action_translated,
                        target_language = EXCLUDED.target_language,
                        created_at = EXCLUDED.created_at,
                        text_model_tokens = EXCLUDED.text_model_tokens,
                        vision_model_tokens = EXCLUDED.vision_model_tokens,
                        processing_duration_ms = EXCLUDED.processing_duration_ms
                    """,
                    (
                        record.owner_id,
                        record.document_id,
                        record.original_text,
                        record.title,
                        record.summary,
                        record.action,
                        record.title_translated,
                        record.summary_translated,
                        record.action_translated,
                        record.target_language,
                        record.created_at,
                        record.text_model_tokens,
                        record.vision_model_tokens,
                        record.processing_duration_ms,
                    ),
                )
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(
                f"Failed to write document {record.owner_id}/{record.document_id}: {exc}"
            ) from exc
