from dataclasses import dataclass

LINE_BLOCK = "LINE"


@dataclass(frozen=True)
class TextBlock:
    """A single block returned by the OCR service."""

    block_type: str  # e.g. "PAGE", "LINE", "WORD"
    text: str = ""
