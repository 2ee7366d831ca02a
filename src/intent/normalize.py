"""Text normalization for keyword-based intent classification."""

from __future__ import annotations

import re

_MULTISPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Normalize user text for keyword matching.

    Normalization is intentionally conservative:
        - Lowercase.
        - Replace `ё` -> `е`.
        - Collapse whitespace.

    Punctuation is preserved: keywords are matched as substrings, so it never splits a stem.
    """

    value = (text or "").strip().lower()
    value = value.replace("ё", "е")
    value = _MULTISPACE_RE.sub(" ", value)
    return value


def is_blank(text: str | None) -> bool:
    """Whether the text is empty or whitespace-only."""

    return not (text or "").strip()
