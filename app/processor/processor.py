import time
from typing import Any

from app.config.settings import Settings
from app.database.repositories.factory import DocumentRepositoryFactory
from app.llm.factory import LlmClientFactory
from app.logging.logger import Log
from app.notification.graphql_notifier import GraphqlNotifier
from app.ocr.extractor import OcrTextExtractor
from app.ocr.textract_adapter import TextractAdapter
from app.processor.cascade import ExtractionCascade
from app.processor.committer import ResultCommitter
from app.processor.models import SourceReference, derive_identity
from app.storage.s3_adapter import S3ObjectStorage
from app.summarization.extractor import StructuredExtractor
from app.summarization.translator import Translator
from app.usage.tally import UsageTally


class Processor:
    """Runs one stored image through the whole pipeline.

    Pipeline: identity -> extraction cascade -> persist -> notify.
    """

    def __init__(
        self,
        cascade: ExtractionCascade,
        committer: ResultCommitter,
        target_language: str,
    ) -> None:
        self._cascade = cascade
        self._committer = committer
        self._target_language = target_language

    def process(self, source_ref: SourceReference) -> dict[str, Any]:
        """Summarize, store and broadcast one document.

        Returns:
            The notification response body.
        """
        identity = derive_identity(source_ref.object_key)
        Log.info(
            f"Processing {source_ref.container_id}/{source_ref.object_key} "
            f"(owner {identity.owner_id}, document {identity.document_id})"
        )
        usage = UsageTally()

        started = time.perf_counter()
        outcome = self._cascade.run(source_ref, self._target_language, usage)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        Log.info(
            f"Summarized document {identity.document_id} via {outcome.path.value} path "
            f"in {duration_ms} ms ({usage.total_tokens} tokens)"
        )

        result = self._committer.commit(
            identity,
            source_ref,
            outcome.original_text,
            outcome.extracted,
            outcome.translated,
            self._target_language,
            usage,
            duration_ms,
        )
        return result.notification


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    llm_client = LlmClientFactory.create(settings)
    extractor = StructuredExtractor(
        client=llm_client,
        storage=S3ObjectStorage(settings.aws_region),
        text_model=settings.llm_text_model_name,
        vision_model=settings.llm_vision_model_name,
        temperature=settings.llm_temperature,
        vision_max_tokens=settings.llm_vision_max_tokens,
        signed_url_ttl_seconds=settings.signed_url_ttl_seconds,
    )
    translator = Translator(
        client=llm_client,
        model=settings.llm_text_model_name,
        temperature=settings.llm_temperature,
    )
    cascade = ExtractionCascade(
        extractor=extractor,
        translator=translator,
        ocr=OcrTextExtractor(TextractAdapter(settings.aws_region)),
    )
    committer = ResultCommitter(
        repository=DocumentRepositoryFactory.create(settings),
        notifier=GraphqlNotifier(
            endpoint=settings.graphql_endpoint,
            api_key=settings.graphql_api_key,
            timeout_seconds=settings.graphql_timeout_seconds,
        ),
    )
    return Processor(cascade, committer, settings.target_language)
