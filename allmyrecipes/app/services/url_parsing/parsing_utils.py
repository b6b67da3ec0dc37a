"""General text utilities shared by the recipe extractors."""

import re
from typing import Iterable, List, Optional


def clean_text(text: Optional[str]) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def dedupe_preserving_order(items: Iterable[str], limit: Optional[int] = None) -> List[str]:
    """Collapse whitespace, drop empties and case-insensitive duplicates, keep document order.

    When ``limit`` is set the result is truncated after de-duplication.
    """
    seen = set()
    result: List[str] = []
    for item in items:
        text = clean_text(item)
        if not text:
            continue
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(text)
        if limit is not None and len(result) >= limit:
            break
    return result


def coerce_text(value) -> str:
    """Return ``value`` as cleaned text; lists contribute their first string entry."""
    if isinstance(value, str):
        return clean_text(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, list):
        for item in value:
            text = coerce_text(item)
            if text:
                return text
    return ""
