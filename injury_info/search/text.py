"""Text normalization shared by indexing, scoring and case matching."""

import re

PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")
SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
LIST_SEPARATOR_PATTERN = re.compile(r"[,;|]")

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "can", "this", "that", "these", "those",
        "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us",
        "them", "what", "when", "where", "why", "how", "who", "which",
        "whose", "whom",
    }
)  # fmt: skip


def normalize_tokens(text: str) -> list[str]:
    """Lowercase, replace punctuation with spaces and split on whitespace."""
    if not text:
        return []
    return PUNCTUATION_PATTERN.sub(" ", text.lower()).split()


def extract_query_words(query: object) -> list[str]:
    """Meaningful words of a query.

    Drops tokens of two characters or fewer, stop words and pure numbers.
    """
    if not isinstance(query, str):
        return []
    return [
        word
        for word in normalize_tokens(query)
        if len(word) > 2 and word not in STOP_WORDS and not word.isdigit()
    ]


def parse_keywords(value: str | None) -> tuple[str, ...]:
    """Parse a comma-separated keyword cell into lowercased terms."""
    if not value or not isinstance(value, str):
        return ()
    return tuple(
        keyword
        for keyword in (part.strip().lower() for part in value.split(","))
        if keyword
    )


def parse_list(value: str | None) -> tuple[str, ...]:
    """Split a list cell on commas, semicolons or pipes."""
    if not value:
        return ()
    parts = (part.strip() for part in LIST_SEPARATOR_PATTERN.split(value))
    return tuple(item for item in parts if item)


def create_slug(text: str) -> str:
    return SLUG_PATTERN.sub("-", text.lower()).strip("-")
