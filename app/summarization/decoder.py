"""Typed decoding of schema-constrained model responses."""

import json
import re
from collections.abc import Sequence
from typing import Any

from app.summarization.exceptions import SchemaDecodeError

_OPENING_FENCE_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE_RE = re.compile(r"\s*```$")


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding markdown code fence such as ```json ... ```.

    The fence may sit on its own lines or share a single line with the payload.
    """
    cleaned = raw.strip()
    cleaned = _OPENING_FENCE_RE.sub("", cleaned, count=1)
    cleaned = _CLOSING_FENCE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def decode_fields(raw: str, field_names: Sequence[str]) -> dict[str, str]:
    """Decode a JSON object holding exactly *field_names* as non-empty strings.

    Raises:
        SchemaDecodeError: on invalid JSON, a non-object payload, missing or
            unexpected keys, or non-string/empty values.
    """
    try:
        parsed: Any = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as exc:
        raise SchemaDecodeError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise SchemaDecodeError("JSON response must be an object")

    missing = [name for name in field_names if name not in parsed]
    if missing:
        raise SchemaDecodeError(f"Missing required fields: {missing}")
    unexpected = sorted(set(parsed) - set(field_names))
    if unexpected:
        raise SchemaDecodeError(f"Unexpected fields: {unexpected}")

    for name in field_names:
        value = parsed[name]
        if not isinstance(value, str) or not value.strip():
            raise SchemaDecodeError(f"'{name}' must be a non-empty string")
    return {name: parsed[name].strip() for name in field_names}
