import json

import pytest

from app.processor.models import SourceReference
from app.summarization.models import ExtractedSummary, TranslatedSummary


@pytest.fixture()
def source_ref() -> SourceReference:
    return SourceReference(container_id="scans-bucket", object_key="user42/doc7.png")


@pytest.fixture()
def extracted_summary() -> ExtractedSummary:
    return ExtractedSummary(
        title="Invoice from Acme Corp",
        summary="Acme Corp sent John an invoice for consulting work.",
        action="Pay the invoice by the end of the month.",
    )


@pytest.fixture()
def translated_summary() -> TranslatedSummary:
    return TranslatedSummary(
        title_translated="来自 Acme Corp 的发票",
        summary_translated="Acme Corp 向 John 发送了一张咨询工作的发票。",
        action_translated="请在月底前支付发票。",
    )


@pytest.fixture()
def summary_json() -> str:
    return json.dumps({
        "title": "Invoice from Acme Corp",
        "summary": "Acme Corp sent John an invoice for consulting work.",
        "action": "Pay the invoice by the end of the month.",
    })


@pytest.fixture()
def translation_json() -> str:
    return json.dumps({
        "titleTranslated": "来自 Acme Corp 的发票",
        "summaryTranslated": "Acme Corp 向 John 发送了一张咨询工作的发票。",
        "actionTranslated": "请在月底前支付发票。",
    })


@pytest.fixture()
def s3_event() -> dict[str, object]:
    """Minimal object-created notification for a single upload."""
    return {
        "Records": [
            {
                "s3": {
                    "bucket": {"name": "scans-bucket"},
                    "object": {"key": "user42/doc7.png"},
                }
            }
        ]
    }
