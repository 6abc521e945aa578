"""Schema-constrained extraction of title, summary and action."""

from typing import ClassVar

from app.llm.client_base import BaseLlmClient
from app.llm.exceptions import LlmError
from app.llm.prompt_loader import load_json_schema, load_prompt_template
from app.logging.logger import Log
from app.processor.models import SourceReference
from app.storage.base import BaseObjectStorage
from app.storage.exceptions import ObjectStorageError
from app.summarization.decoder import decode_fields
from app.summarization.exceptions import (
    ExtractionParseError,
    SchemaDecodeError,
    VisionExtractionError,
)
from app.summarization.models import ExtractedSummary
from app.usage.tally import UsageBucket, UsageTally


class StructuredExtractor:
    """Asks the language model for {title, summary, action}.

    Two strategies share the same instruction: one reads normalized text,
    the other hands the model a short-lived URL to the stored image.
    """

    FIELDS: ClassVar[tuple[str, ...]] = ("title", "summary", "action")

    def __init__(
        self,
        *,
        client: BaseLlmClient,
        storage: BaseObjectStorage,
        text_model: str,
        vision_model: str,
        temperature: float = 0.2,
        vision_max_tokens: int = 300,
        signed_url_ttl_seconds: int = 300,
    ) -> None:
        self._client = client
        self._storage = storage
        self._text_model = text_model
        self._vision_model = vision_model
        self._temperature = temperature
        self._vision_max_tokens = vision_max_tokens
        self._signed_url_ttl_seconds = signed_url_ttl_seconds
        self._text_prompt = load_prompt_template("summary_prompt.txt")
        self._vision_prompt = load_prompt_template("vision_prompt.txt")
        self._json_schema = load_json_schema("summary_schema.json")

    def extract_from_text(self, text: str, usage: UsageTally) -> ExtractedSummary:
        """Extract the summary fields from normalized document text.

        Raises:
            ExtractionParseError: if the response does not match the schema.
            LlmError: if the model call itself fails.
        """
        prompt = self._text_prompt.format(text=text)
        Log.debug(f"Text extraction prompt:\n{prompt}")

        completion = self._client.create_chat_completion(
            model=self._text_model,
            temperature=self._temperature,
            system_prompt="",
            user_prompt=prompt,
            json_schema=self._json_schema,
            schema_name="extractor",
        )
        usage.record(UsageBucket.TEXT_MODEL, completion.total_tokens)
        Log.debug(f"Text extraction raw response:\n{completion.content}")

        try:
            fields = decode_fields(completion.content, self.FIELDS)
        except SchemaDecodeError as exc:
            raise ExtractionParseError(f"Text extraction response rejected: {exc}") from exc
        return ExtractedSummary(**fields)

    def extract_from_image(
        self,
        source_ref: SourceReference,
        usage: UsageTally,
    ) -> ExtractedSummary:
        """Extract the summary fields by showing the stored image to a vision model.

        Raises:
            VisionExtractionError: on URL signing, model call or decode failure.
        """
        try:
            image_url = self._storage.get_signed_url(
                source_ref.container_id,
                source_ref.object_key,
                self._signed_url_ttl_seconds,
            )
        except ObjectStorageError as exc:
            raise VisionExtractionError(f"Could not sign image URL: {exc}") from exc

        try:
            completion = self._client.create_chat_completion(
                model=self._vision_model,
                temperature=self._temperature,
                system_prompt="",
                user_prompt=self._vision_prompt,
                image_url=image_url,
                max_tokens=self._vision_max_tokens,
            )
        except LlmError as exc:
            raise VisionExtractionError(f"Vision model call failed: {exc}") from exc
        usage.record(UsageBucket.VISION_MODEL, completion.total_tokens)
        Log.debug(f"Vision extraction raw response:\n{completion.content}")

        try:
            fields = decode_fields(completion.content, self.FIELDS)
        except SchemaDecodeError as exc:
            raise VisionExtractionError(f"Vision response rejected: {exc}") from exc
        return ExtractedSummary(**fields)
