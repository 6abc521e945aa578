from typing import Any

import httpx
import openai

from app.llm.client_base import BaseLlmClient
from app.llm.exceptions import LlmError, LlmNetworkError
from app.llm.models import Completion


class OpenAIClientAdapter(BaseLlmClient):
    """Language model client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

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
        request: dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "messages": self._build_messages(system_prompt, user_prompt, image_url),
        }
        if json_schema is not None:
            request["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": schema_name or "structured_output",
                    "strict": True,
                    "schema": json_schema,
                },
            }
        if max_tokens is not None:
            request["max_tokens"] = max_tokens

        try:
            response = self._client.chat.completions.create(**request)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LlmNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise LlmNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise LlmError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LlmError("AI returned empty response")
        total_tokens = response.usage.total_tokens if response.usage is not None else 0
        return Completion(content=content.strip(), total_tokens=total_tokens)

    @staticmethod
    def _build_messages(
        system_prompt: str,
        user_prompt: str,
        image_url: str | None,
    ) -> list[dict[str, Any]]:
        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        if image_url is None:
            messages.append({"role": "user", "content": user_prompt})
        else:
            messages.append({
                "role": "user",
                "content": [
                    {"type": "text", "text": user_prompt},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ],
            })
        return messages
