from abc import ABC, abstractmethod

from app.llm.models import Completion


class BaseLlmClient(ABC):
    """Contract for provider-specific language model clients."""

    @abstractmethod
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
        """Return the model's reply together with the tokens it consumed.

        When json_schema is given the reply is constrained to it. When
        image_url is given the image is attached to the user message.
        """
