from dataclasses import dataclass


@dataclass(frozen=True)
class Completion:
    """Provider-neutral chat completion result."""

    content: str
    total_tokens: int = 0
