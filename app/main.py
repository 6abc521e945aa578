import json
import sys
from typing import Any

from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.models import SourceReference
from app.processor.processor import Processor, build_processor
from app.trigger.event_parser import parse_object_created_event

_processor: Processor | None = None


def _get_processor() -> Processor:
    """Build the processor once per process and reuse it across events."""
    global _processor  # noqa: PLW0603
    if _processor is None:
        settings = Settings()
        Log.configure(settings.log_level)
        _processor = build_processor(settings)
    return _processor


def handler(event: dict[str, Any], context: object = None) -> list[dict[str, Any]]:
    """Entry point for object-created notifications.

    Records are processed one after another. The first fatal error is
    logged and re-raised so the trigger can redeliver the event.
    """
    _ = context
    refs = parse_object_created_event(event)
    processor = _get_processor()
    responses: list[dict[str, Any]] = []
    for ref in refs:
        try:
            responses.append(processor.process(ref))
        except Exception as exc:
            Log.error(f"Failed to process {ref.container_id}/{ref.object_key}: {exc}")
            raise
    return responses


def main() -> None:
    """Local entry point: python -m app.main <container> <object-key>."""
    if len(sys.argv) != 3:
        sys.exit("usage: python -m app.main <container> <object-key>")
    response = _get_processor().process(
        SourceReference(container_id=sys.argv[1], object_key=sys.argv[2])
    )
    print(json.dumps(response, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
