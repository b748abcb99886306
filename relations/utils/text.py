"""
Text helpers — keyword extraction and title normalization.
"""

import re
from typing import Iterable, List

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does",
    "did", "will", "would", "could", "should", "may", "might", "can", "this", "that",
    "these", "those", "i", "you", "he", "she", "it", "we", "they", "me", "him", "her",
    "us", "them", "my", "your", "his", "its", "our", "their", "from", "into", "about",
    "than", "then", "also", "not", "all", "any", "how", "what", "why", "when", "who",
})

_TOKEN_RE = re.compile(r"[^\W_]+", re.UNICODE)

# Version / sequence markers recognised at the end of a title.
_VERSION_MARKER_RE = re.compile(
    r"""
    [\s\-:,–]+
    (?:
        \(?\s*(?:v|ver\.?|version)\s*\d+(?:\.\d+)*\s*\)?   # v2, version 2, (v1.1)
      | \(?\s*(?:part|pt\.?|episode|ep\.?|vol\.?|volume|chapter)\s*\d+\s*\)?  # part 2
      | \#\s*\d+                                          # #3
      | \(\s*\d+\s*\)                                     # (2)
      | \d+                                               # trailing number
      | \(?\s*(?:updated|revised|sequel|continued)\s*\)?  # updated
    )
    \s*$
    """,
    re.IGNORECASE | re.VERBOSE,
)

_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Lowercased word tokens; punctuation and underscores are separators."""
    return _TOKEN_RE.findall(text.lower())


def extract_keywords(
    parts: Iterable[str],
    max_keywords: int = 50,
    min_length: int = 3,
) -> List[str]:
    """
    Keywords from free-text parts, in first-occurrence order.

    Drops stop words and words shorter than min_length, de-duplicates,
    and keeps at most max_keywords.
    """
    seen = set()
    keywords: List[str] = []
    for part in parts:
        if not part:
            continue
        for token in tokenize(part):
            if len(token) < min_length or token in STOP_WORDS or token in seen:
                continue
            seen.add(token)
            keywords.append(token)
            if len(keywords) >= max_keywords:
                return keywords
    return keywords


def normalize_title(title: str) -> str:
    """Lowercase, collapse whitespace, strip surrounding punctuation."""
    return _WHITESPACE_RE.sub(" ", (title or "").lower()).strip(" \t-:,.–")


def split_version_marker(title: str) -> tuple[str, bool]:
    """
    Split a normalized title into (base, had_marker).

    Only the last marker is stripped: "intro to rag part 2" -> ("intro to rag", True).
    A title made only of a marker keeps it as its base.
    """
    normalized = normalize_title(title)
    stripped = _VERSION_MARKER_RE.sub("", normalized)
    stripped = normalize_title(stripped)
    if not stripped or stripped == normalized:
        return normalized, False
    return stripped, True
