"""Keyword groups for intent classification.

Groups are declared in priority order: the first group with a matching keyword wins. Keywords are
lowercase substrings (Russian stems or English words) matched against normalized text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from src.intent.schema import Category


@dataclass(frozen=True)
class KeywordGroup:
    """A category together with the substrings that select it."""

    category: Category
    keywords: tuple[str, ...]


KEYWORD_GROUPS: tuple[KeywordGroup, ...] = (
    KeywordGroup(Category.statistics, ("средн", "average")),
    KeywordGroup(Category.chart, ("график", "chart", "тренд", "trend")),
)

FALLBACK_CATEGORY = Category.generic


@dataclass(frozen=True)
class KeywordMatch:
    """The group and concrete keyword that matched a query."""

    category: Category
    keyword: str | None


def find_match(text: str, groups: Sequence[KeywordGroup] = KEYWORD_GROUPS) -> KeywordMatch:
    """Return the first group (in declaration order) with a keyword contained in `text`.

    `text` must already be normalized. Falls back to `FALLBACK_CATEGORY` with no keyword.
    """

    for group in groups:
        for keyword in group.keywords:
            if keyword in text:
                return KeywordMatch(category=group.category, keyword=keyword)
    return KeywordMatch(category=FALLBACK_CATEGORY, keyword=None)
