import json

from app.llm.example_client_adapter import ExampleClientAdapter
from app.summarization.decoder import decode_fields


class TestExampleClientAdapter:
    def test_summary_response_decodes(self) -> None:
        completion = ExampleClientAdapter().create_chat_completion(
            model="example",
            temperature=0.0,
            system_prompt="",
            user_prompt="text",
            schema_name="extractor",
        )
        fields = decode_fields(completion.content, ("title", "summary", "action"))
        assert fields["title"] == "Example document"
        assert completion.total_tokens == 0

    def test_translation_response_for_translation_schema(self) -> None:
        completion = ExampleClientAdapter().create_chat_completion(
            model="example",
            temperature=0.0,
            system_prompt="",
            user_prompt="text",
            schema_name="translation",
        )
        assert set(json.loads(completion.content)) == {
            "titleTranslated",
            "summaryTranslated",
            "actionTranslated",
        }
