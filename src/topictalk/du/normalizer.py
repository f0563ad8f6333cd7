"""Text normalization for rule-based query parsing."""

import re

# Marks that must never fuse with neighbouring words during substring search
PUNCTUATION: tuple[str, ...] = (",", ";", ".", "?", "!", "'", '"', "(", ")", "-")

_WHITESPACE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def normalize(text: str | None) -> str:
    """Trim, lowercase and pad punctuation with spaces.

    Examples:
        >>> normalize("  Where is Paris?")
        'where is paris ?'
    """
    if not text:
        return ""
    result = text.strip().lower()
    for mark in PUNCTUATION:
        result = result.replace(mark, f" {mark} ")
    return _collapse(result)


def strip(text: str | None) -> str:
    """Remove punctuation entirely and collapse whitespace.

    Used only when comparing against topic names.
    """
    if not text:
        return ""
    result = text
    for mark in PUNCTUATION:
        result = result.replace(mark, "")
    return _collapse(result)
