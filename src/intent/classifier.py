"""Keyword-based intent classifier.

Maps a free-text query to exactly one `Category`. The classifier is total for non-empty input and
never produces `Category.error`.
"""

from __future__ import annotations

from src.intent.dictionaries import KEYWORD_GROUPS, KeywordMatch, find_match
from src.intent.normalize import is_blank, normalize_text
from src.intent.schema import Category


class EmptyQueryError(ValueError):
    """Raised when a blank query reaches the classifier."""


def classify_with_match(query: str) -> KeywordMatch:
    """Classify a query and report which keyword selected the category."""

    if is_blank(query):
        raise EmptyQueryError("query is empty")
    return find_match(normalize_text(query), KEYWORD_GROUPS)


def classify(query: str) -> Category:
    """Classify a non-empty query into a `Category` (case-insensitive substring matching)."""

    return classify_with_match(query).category
