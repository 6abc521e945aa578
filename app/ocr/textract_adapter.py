import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.ocr.base import BaseOcrClient
from app.ocr.exceptions import OcrServiceError
from app.ocr.models import TextBlock


class TextractAdapter(BaseOcrClient):
    """Detects document text with AWS Textract reading straight from S3."""

    def __init__(self, region: str) -> None:
        self._client = boto3.client("textract", region_name=region)

    def detect_text(self, container_id: str, object_key: str) -> list[TextBlock]:
        try:
            response = self._client.detect_document_text(
                Document={"S3Object": {"Bucket": container_id, "Name": object_key}}
            )
        except (ClientError, BotoCoreError) as exc:
            raise OcrServiceError(f"Textract detection failed: {exc}") from exc

        return [
            TextBlock(block_type=block.get("BlockType", ""), text=block.get("Text", ""))
            for block in response.get("Blocks", [])
        ]
