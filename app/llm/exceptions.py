class LlmError(Exception):
    """Raised when the language model returns an unusable response."""


class LlmNetworkError(LlmError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
