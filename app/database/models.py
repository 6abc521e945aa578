from dataclasses import dataclass

OWNER_MARKER_DOCUMENT_ID = "USER"


@dataclass(frozen=True)
class OwnerMarker:
    """Sentinel row recording that an owner has produced at least one document."""

    owner_id: str
    document_id: str = OWNER_MARKER_DOCUMENT_ID


@dataclass(frozen=True)
class DocumentRecord:
    """Represents a row of the user_document_summaries table."""

    owner_id: str
    document_id: str
    original_text: str | None
    title: str
    summary: str
    action: str
    title_translated: str
    summary_translated: str
    action_translated: str
    target_language: str
    created_at: str
    text_model_tokens: int
    vision_model_tokens: int
    processing_duration_ms: float
