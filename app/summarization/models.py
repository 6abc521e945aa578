from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedSummary:
    """Title, short summary and required action derived from a document."""

    title: str
    summary: str
    action: str


@dataclass(frozen=True)
class TranslatedSummary:
    title_translated: str
    summary_translated: str
    action_translated: str
