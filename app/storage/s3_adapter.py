import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.storage.base import BaseObjectStorage
from app.storage.exceptions import ObjectStorageError


class S3ObjectStorage(BaseObjectStorage):
    """Presigns S3 GET requests so external services can fetch an object."""

    def __init__(self, region: str) -> None:
        self._client = boto3.client("s3", region_name=region)

    def get_signed_url(self, container_id: str, object_key: str, ttl_seconds: int) -> str:
        try:
            return self._client.generate_presigned_url(
                "get_object",
                Params={"Bucket": container_id, "Key": object_key},
                ExpiresIn=ttl_seconds,
            )
        except (ClientError, BotoCoreError) as exc:
            raise ObjectStorageError(f"Failed to presign {object_key}: {exc}") from exc
