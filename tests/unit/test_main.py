from unittest.mock import MagicMock, patch

import pytest

from app import main as main_module
from app.notification.exceptions import NotificationError
from app.processor.models import SourceReference
from app.trigger.event_parser import InvalidEventError


@pytest.fixture(autouse=True)
def reset_cached_processor() -> None:
    main_module._processor = None


class TestHandler:
    @patch("app.main.build_processor")
    def test_processes_each_record(
        self, mock_build: MagicMock, s3_event: dict[str, object]
    ) -> None:
        processor = MagicMock()
        processor.process.return_value = {"data": {"newDocument": {"documentId": "doc7"}}}
        mock_build.return_value = processor

        responses = main_module.handler(s3_event)

        assert responses == [{"data": {"newDocument": {"documentId": "doc7"}}}]
        processor.process.assert_called_once_with(
            SourceReference(container_id="scans-bucket", object_key="user42/doc7.png")
        )

    @patch("app.main.build_processor")
    def test_builds_processor_once(
        self, mock_build: MagicMock, s3_event: dict[str, object]
    ) -> None:
        mock_build.return_value = MagicMock()
        main_module.handler(s3_event)
        main_module.handler(s3_event)
        mock_build.assert_called_once()

    @patch("app.main.build_processor")
    def test_reraises_fatal_errors(
        self, mock_build: MagicMock, s3_event: dict[str, object]
    ) -> None:
        processor = MagicMock()
        processor.process.side_effect = NotificationError("HTTP 500")
        mock_build.return_value = processor

        with patch("app.main.Log") as mock_log:
            with pytest.raises(NotificationError):
                main_module.handler(s3_event)
            assert "user42/doc7.png" in mock_log.error.call_args.args[0]

    @patch("app.main.build_processor")
    def test_invalid_event_raises(self, mock_build: MagicMock) -> None:
        with pytest.raises(InvalidEventError):
            main_module.handler({"Records": []})
        mock_build.assert_not_called()
