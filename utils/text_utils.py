"""
Text utilities for keyword extraction.

Keywords are picked with a fixed rule: lowercase the text, turn punctuation
into spaces, split on whitespace, drop short tokens and stopwords, keep the
first occurrence of each token and stop after ``max_keywords`` survivors.
There is no stemming and no phrase detection.
"""

from typing import Iterable, List
import logging
import re


logger = logging.getLogger(__name__)

STOPWORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has",
        "he", "in", "is", "it", "its", "of", "on", "that", "the", "to", "was",
        "will", "with",
    }
)

MAX_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 4

NO_KEYWORDS_MESSAGE = "No keywords found. Please enter more meaningful text."

# Anything that is not a letter, digit or whitespace (underscore included)
_PUNCTUATION_RE = re.compile(r"[^\w\s]|_")


def tokenize(text: str) -> List[str]:
    """
    Lowercase text, replace punctuation with spaces and split on whitespace.

    Args:
        text: Arbitrary user input

    Returns:
        List[str]: Non-empty tokens in input order
    """
    if not text:
        return []
    cleaned = _PUNCTUATION_RE.sub(" ", text.lower())
    return cleaned.split()


def is_candidate(token: str) -> bool:
    return len(token) >= MIN_KEYWORD_LENGTH and token not in STOPWORDS


def extract_keywords(text: str, max_keywords: int = MAX_KEYWORDS) -> List[str]:
    """
    Extract at most ``max_keywords`` keywords from free text.

    Args:
        text: Arbitrary user input
        max_keywords: Cap on the number of keywords returned, never above
            MAX_KEYWORDS

    Returns:
        List[str]: Distinct keywords in first-occurrence order (may be empty)

    Example:
        >>> extract_keywords("The quick brown fox jumps over the lazy dog")
        ['quick', 'brown', 'jumps', 'over', 'lazy']
    """
    limit = min(max_keywords, MAX_KEYWORDS)
    keywords: List[str] = []
    seen = set()
    for token in tokenize(text):
        if len(keywords) >= limit:
            break
        if token in seen or not is_candidate(token):
            continue
        seen.add(token)
        keywords.append(token)

    logger.debug("Extracted %d keyword(s): %s", len(keywords), keywords)
    return keywords


def normalize_keywords(keywords: Iterable[str]) -> List[str]:
    """
    Re-apply the extraction rule to a caller-supplied keyword set.

    Entries are tokenized, filtered, deduplicated and capped exactly like
    extracted keywords, so an edited set obeys the same rule.
    """
    return extract_keywords(build_query(k for k in keywords if k))


def build_query(keywords: Iterable[str]) -> str:
    """Join keywords into the single space-separated query sent to providers."""
    return " ".join(keywords)
