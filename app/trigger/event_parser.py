"""Parses object-created notifications into source references."""

from typing import Any
from urllib.parse import unquote_plus

from app.processor.models import SourceReference


class InvalidEventError(ValueError):
    """Raised when a trigger event does not describe any stored object."""


def parse_object_created_event(event: dict[str, Any]) -> list[SourceReference]:
    """Extract one SourceReference per record of an S3 notification.

    Object keys arrive URL-encoded with spaces as '+', so they are decoded here.

    Raises:
        InvalidEventError: if the event has no records or a record is malformed.
    """
    records = event.get("Records")
    if not isinstance(records, list) or not records:
        raise InvalidEventError("Event contains no records")

    refs: list[SourceReference] = []
    for index, record in enumerate(records):
        try:
            container_id = record["s3"]["bucket"]["name"]
            raw_key = record["s3"]["object"]["key"]
        except (KeyError, TypeError) as exc:
            raise InvalidEventError(f"Record at index {index} is malformed: {exc}") from exc
        if not isinstance(container_id, str) or not isinstance(raw_key, str):
            raise InvalidEventError(f"Record at index {index} has non-string bucket or key")
        refs.append(SourceReference(container_id=container_id, object_key=unquote_plus(raw_key)))
    return refs
