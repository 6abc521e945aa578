from app.llm.client_base import BaseLlmClient
from app.llm.prompt_loader import load_json_schema, load_prompt_template
from app.logging.logger import Log
from app.summarization.decoder import decode_fields
from app.summarization.exceptions import SchemaDecodeError, TranslationParseError
from app.summarization.models import ExtractedSummary, TranslatedSummary
from app.usage.tally import UsageBucket, UsageTally

_FIELDS = ("titleTranslated", "summaryTranslated", "actionTranslated")


class Translator:
    """Translates an extracted summary, leaving personal and company names as-is."""

    def __init__(
        self,
        *,
        client: BaseLlmClient,
        model: str,
        temperature: float = 0.2,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._prompt_template = load_prompt_template("translation_prompt.txt")
        self._json_schema = load_json_schema("translation_schema.json")

    def translate(
        self,
        summary: ExtractedSummary,
        target_language: str,
        usage: UsageTally,
    ) -> TranslatedSummary:
        """Translate all three fields into *target_language*.

        Raises:
            TranslationParseError: if the response does not match the schema.
            LlmError: if the model call itself fails.
        """
        prompt = self._prompt_template.format(
            language=target_language,
            title=summary.title,
            summary=summary.summary,
            action=summary.action,
        )
        Log.debug(f"Translation prompt:\n{prompt}")

        completion = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt="",
            user_prompt=prompt,
            json_schema=self._json_schema,
            schema_name="translation",
        )
        usage.record(UsageBucket.TEXT_MODEL, completion.total_tokens)
        Log.debug(f"Translation raw response:\n{completion.content}")

        try:
            fields = decode_fields(completion.content, _FIELDS)
        except SchemaDecodeError as exc:
            raise TranslationParseError(f"Translation response rejected: {exc}") from exc
        return TranslatedSummary(
            title_translated=fields["titleTranslated"],
            summary_translated=fields["summaryTranslated"],
            action_translated=fields["actionTranslated"],
        )
