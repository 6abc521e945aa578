class SummarizationError(Exception):
    """Base exception for structured extraction and translation."""


class SchemaDecodeError(SummarizationError):
    """Raised when a model response does not match the expected fields."""


class ExtractionParseError(SummarizationError):
    """Raised when the text strategy response does not conform to the schema."""


class VisionExtractionError(SummarizationError):
    """Raised when the image strategy fails at any stage."""


class TranslationParseError(SummarizationError):
    """Raised when the translation response does not conform to the schema."""
