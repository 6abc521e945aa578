class OcrServiceError(Exception):
    """Raised when the OCR service fails or finds no text lines."""
