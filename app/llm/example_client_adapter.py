"""Example language model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLlmClient and register the provider in LlmClientFactory.
"""

import json
from typing import ClassVar

from app.llm.client_base import BaseLlmClient
from app.llm.models import Completion


class ExampleClientAdapter(BaseLlmClient):
    """Example adapter that answers every schema with fixed valid JSON.

    No network calls. Useful for local development and tests.
    """

    SUMMARY_RESPONSE: ClassVar[dict[str, str]] = {
        "title": "Example document",
        "summary": "This is an example summary.",
        "action": "No action required.",
    }
    TRANSLATION_RESPONSE: ClassVar[dict[str, str]] = {
        "titleTranslated": "Example document",
        "summaryTranslated": "This is an example summary.",
        "actionTranslated": "No action required.",
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None = None,
        schema_name: str = "",
        image_url: str | None = None,
        max_tokens: int | None = None,
    ) -> Completion:
        _ = model, temperature, system_prompt, user_prompt, json_schema, image_url, max_tokens
        if schema_name == "translation":
            return Completion(content=json.dumps(self.TRANSLATION_RESPONSE))
        return Completion(content=json.dumps(self.SUMMARY_RESPONSE))
