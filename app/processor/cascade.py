"""Fast-path / fallback-path selection for turning an image into a summary.

FAST:     vision extraction on the stored image -> translation
FALLBACK: OCR -> text extraction -> translation

The fallback runs exactly once, and only when the fast path raised. A
fallback failure is terminal and carries both causes.
"""

from app.logging.logger import Log
from app.ocr.extractor import OcrTextExtractor
from app.processor.exceptions import CascadeExhaustedError
from app.processor.models import CascadeOutcome, CascadePath, SourceReference
from app.summarization.extractor import StructuredExtractor
from app.summarization.translator import Translator
from app.usage.tally import UsageTally


class ExtractionCascade:
    def __init__(
        self,
        *,
        extractor: StructuredExtractor,
        translator: Translator,
        ocr: OcrTextExtractor,
    ) -> None:
        self._extractor = extractor
        self._translator = translator
        self._ocr = ocr

    def run(
        self,
        source_ref: SourceReference,
        target_language: str,
        usage: UsageTally,
    ) -> CascadeOutcome:
        """Produce extracted and translated summaries for the referenced image.

        Raises:
            CascadeExhaustedError: if both paths failed.
        """
        try:
            return self._run_fast_path(source_ref, target_language, usage)
        except Exception as primary_error:
            Log.warning(
                f"Fast path failed for {source_ref.object_key}, falling back to OCR: "
                f"{type(primary_error).__name__}: {primary_error}"
            )
            try:
                return self._run_fallback_path(source_ref, target_language, usage)
            except Exception as fallback_error:
                raise CascadeExhaustedError(primary_error, fallback_error) from fallback_error

    def _run_fast_path(
        self,
        source_ref: SourceReference,
        target_language: str,
        usage: UsageTally,
    ) -> CascadeOutcome:
        extracted = self._extractor.extract_from_image(source_ref, usage)
        translated = self._translator.translate(extracted, target_language, usage)
        Log.info(f"Fast path succeeded for {source_ref.object_key}")
        return CascadeOutcome(
            path=CascadePath.FAST,
            original_text=None,
            extracted=extracted,
            translated=translated,
        )

    def _run_fallback_path(
        self,
        source_ref: SourceReference,
        target_language: str,
        usage: UsageTally,
    ) -> CascadeOutcome:
        original_text = self._ocr.extract_text(source_ref)
        extracted = self._extractor.extract_from_text(original_text, usage)
        translated = self._translator.translate(extracted, target_language, usage)
        Log.info(f"Fallback path succeeded for {source_ref.object_key}")
        return CascadeOutcome(
            path=CascadePath.FALLBACK,
            original_text=original_text,
            extracted=extracted,
            translated=translated,
        )
