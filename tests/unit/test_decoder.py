import json

import pytest

from app.summarization.decoder import decode_fields, strip_code_fences
from app.summarization.exceptions import SchemaDecodeError

FIELDS = ("title", "summary", "action")


def _payload(**overrides: object) -> str:
    data: dict[str, object] = {"title": "T", "summary": "S.", "action": "A."}
    data.update(overrides)
    return json.dumps(data)


class TestStripCodeFences:
    def test_strips_json_fence(self) -> None:
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_plain_fence(self) -> None:
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_single_line_json_fence(self) -> None:
        assert strip_code_fences('```json {"a": 1} ```') == '{"a": 1}'

    def test_strips_single_line_plain_fence(self) -> None:
        assert strip_code_fences('```{"a": 1}```') == '{"a": 1}'

    def test_keeps_inner_newlines(self) -> None:
        assert strip_code_fences('```json\n{\n"a": 1\n}\n```') == '{\n"a": 1\n}'

    def test_leaves_unfenced_text(self) -> None:
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


class TestDecodeFields:
    def test_decodes_exact_fields(self) -> None:
        assert decode_fields(_payload(), FIELDS) == {"title": "T", "summary": "S.", "action": "A."}

    def test_decodes_fenced_payload(self) -> None:
        assert decode_fields(f"```json\n{_payload()}\n```", FIELDS)["title"] == "T"

    def test_decodes_single_line_fenced_payload(self) -> None:
        raw = '```json {"title": "a", "summary": "b", "action": "c"} ```'
        assert decode_fields(raw, FIELDS) == {"title": "a", "summary": "b", "action": "c"}

    def test_invalid_json(self) -> None:
        with pytest.raises(SchemaDecodeError, match="Invalid JSON"):
            decode_fields("title: T", FIELDS)

    def test_non_object(self) -> None:
        with pytest.raises(SchemaDecodeError, match="must be an object"):
            decode_fields('["T", "S", "A"]', FIELDS)

    def test_missing_field(self) -> None:
        with pytest.raises(SchemaDecodeError, match="Missing required fields"):
            decode_fields(json.dumps({"title": "T", "summary": "S"}), FIELDS)

    def test_unexpected_field(self) -> None:
        with pytest.raises(SchemaDecodeError, match="Unexpected fields"):
            decode_fields(_payload(extra="x"), FIELDS)

    def test_wrong_type(self) -> None:
        with pytest.raises(SchemaDecodeError, match="'summary' must be a non-empty string"):
            decode_fields(_payload(summary=42), FIELDS)

    def test_blank_value(self) -> None:
        with pytest.raises(SchemaDecodeError, match="'action' must be a non-empty string"):
            decode_fields(_payload(action="   "), FIELDS)
