class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class CascadeExhaustedError(ProcessorError):
    """Raised when both the fast path and the fallback path failed."""

    def __init__(self, primary_error: BaseException, fallback_error: BaseException) -> None:
        self.primary_error = primary_error
        self.fallback_error = fallback_error
        super().__init__(
            "Extraction cascade exhausted: "
            f"fast path failed with {type(primary_error).__name__}: {primary_error}; "
            f"fallback path failed with {type(fallback_error).__name__}: {fallback_error}"
        )
