from typing import Any

import httpx

from app.database.models import DocumentRecord
from app.logging.logger import Log
from app.notification.exceptions import NotificationError

NEW_DOCUMENT_MUTATION = """
mutation NewDocument(
  $documentId: ID!
  $originalText: String
  $title: String
  $summary: String
  $action: String
  $titleTranslated: String
  $summaryTranslated: String
  $actionTranslated: String
) {
  newDocument(
    documentId: $documentId
    originalText: $originalText
    title: $title
    summary: $summary
    action: $action
    titleTranslated: $titleTranslated
    summaryTranslated: $summaryTranslated
    actionTranslated: $actionTranslated
  ) {
    documentId
    originalText
    title
    summary
    action
    titleTranslated
    summaryTranslated
    actionTranslated
  }
}
"""


class GraphqlNotifier:
    """Broadcasts committed documents through a GraphQL mutation."""

    def __init__(self, *, endpoint: str, api_key: str, timeout_seconds: int) -> None:
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds

    def notify(self, record: DocumentRecord) -> dict[str, Any]:
        """Send the newDocument mutation and return the response body.

        Raises:
            NotificationError: on transport failure, a non-2xx status, a
                non-JSON body or GraphQL errors in the response.
        """
        payload = {
            "query": NEW_DOCUMENT_MUTATION,
            "variables": self._build_variables(record),
        }
        try:
            response = httpx.post(
                self._endpoint,
                json=payload,
                headers={"x-api-key": self._api_key},
                timeout=self._timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise NotificationError(f"GraphQL request failed: {exc}") from exc

        if not response.is_success:
            raise NotificationError(
                f"GraphQL endpoint returned HTTP {response.status_code}: {response.text}"
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise NotificationError(f"GraphQL response is not JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise NotificationError("GraphQL response must be an object")
        if body.get("errors"):
            raise NotificationError(f"GraphQL mutation returned errors: {body['errors']}")

        Log.info(f"Notified subscribers of document {record.document_id}")
        return body

    @staticmethod
    def _build_variables(record: DocumentRecord) -> dict[str, str | None]:
        return {
            "documentId": record.document_id,
            "originalText": record.original_text,
            "title": record.title,
            "summary": record.summary,
            "action": record.action,
            "titleTranslated": record.title_translated,
            "summaryTranslated": record.summary_translated,
            "actionTranslated": record.action_translated,
        }
