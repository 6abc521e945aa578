from dataclasses import dataclass
from enum import Enum


class UsageBucket(str, Enum):
    TEXT_MODEL = "text_model"
    VISION_MODEL = "vision_model"


@dataclass
class UsageTally:
    """Token consumption for one document's processing.

    Create a fresh tally per invocation and pass it explicitly; never share it.
    """

    text_model_tokens: int = 0
    vision_model_tokens: int = 0

    def record(self, bucket: UsageBucket, tokens: int) -> None:
        if tokens < 0:
            raise ValueError(f"Token count must not be negative, got {tokens}")
        if bucket is UsageBucket.TEXT_MODEL:
            self.text_model_tokens += tokens
        else:
            self.vision_model_tokens += tokens

    @property
    def total_tokens(self) -> int:
        return self.text_model_tokens + self.vision_model_tokens
