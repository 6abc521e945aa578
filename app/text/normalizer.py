"""Cleans OCR line fragments into a single searchable string."""

import re
import unicodedata
from collections.abc import Sequence

_URL_RE = re.compile(r"https?://\S+")
_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(raw_lines: Sequence[str]) -> str:
    """Join line fragments and strip non-textual noise.

    URLs and email addresses are removed, whitespace runs collapse to a single
    space and the result is lowercased and trimmed. Applying it twice yields
    the same string.
    """
    text = unicodedata.normalize("NFC", " ".join(raw_lines)).lower()
    text = _URL_RE.sub("", text)
    text = _EMAIL_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
