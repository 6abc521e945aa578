from app.logging.logger import Log
from app.ocr.base import BaseOcrClient
from app.ocr.exceptions import OcrServiceError
from app.ocr.models import LINE_BLOCK
from app.processor.models import SourceReference
from app.text.normalizer import normalize


class OcrTextExtractor:
    """Turns a stored image into normalized text via the OCR service."""

    def __init__(self, client: BaseOcrClient) -> None:
        self._client = client

    def extract_text(self, source_ref: SourceReference) -> str:
        """Run OCR on the referenced image and normalize the line blocks.

        Raises:
            OcrServiceError: if the service fails, reports no text lines, or
                nothing survives normalization.
        """
        blocks = self._client.detect_text(source_ref.container_id, source_ref.object_key)
        lines = [b.text for b in blocks if b.block_type == LINE_BLOCK and b.text]
        if not lines:
            raise OcrServiceError(f"No text lines detected in {source_ref.object_key}")

        text = normalize(lines)
        if not text:
            raise OcrServiceError(
                f"No text left after normalizing {source_ref.object_key}"
            )
        Log.info(
            f"OCR extracted {len(lines)} lines ({len(text)} chars) "
            f"from {source_ref.object_key}"
        )
        return text
