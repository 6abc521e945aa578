from dataclasses import dataclass
from enum import Enum

from app.summarization.models import ExtractedSummary, TranslatedSummary


class InvalidObjectKeyError(ValueError):
    """Raised when an object key does not name an owner and a document."""


@dataclass(frozen=True)
class SourceReference:
    """Location of the stored image that triggered processing."""

    container_id: str
    object_key: str


@dataclass(frozen=True)
class DocumentIdentity:
    owner_id: str
    document_id: str


def derive_identity(object_key: str) -> DocumentIdentity:
    """Derive {owner_id, document_id} from "<owner>/.../<name>.<ext>".

    Raises:
        InvalidObjectKeyError: if either part is empty.
    """
    segments = object_key.split("/")
    owner_id = segments[0]
    document_id = segments[-1].split(".")[0]
    if not owner_id or not document_id:
        raise InvalidObjectKeyError(f"Cannot derive document identity from '{object_key}'")
    return DocumentIdentity(owner_id=owner_id, document_id=document_id)


class CascadePath(str, Enum):
    FAST = "fast"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CascadeOutcome:
    """Successful result of the extraction cascade.

    original_text is only set when the OCR fallback produced a transcript.
    """

    path: CascadePath
    original_text: str | None
    extracted: ExtractedSummary
    translated: TranslatedSummary
