"""Title and servings guesses for plain recipe text."""

import re
from typing import List

from allmyrecipes.app.services.text_parsing.classifier import has_marker, is_noise
from allmyrecipes.app.services.text_parsing.constants import (
    BULLET_RE,
    SERVINGS_LINE_RE,
    SERVINGS_SCAN_LINES,
    TITLE_SCAN_LINES,
    TITLE_STOP_RE,
    TITLE_STOP_WORDS,
)

_SITE_SUFFIX_RE = re.compile(r"\s+[-|]\s+.*$")
_TRAILING_RECIPE_RE = re.compile(r"\s*\brecipe\s*$", re.I)
_SURROUNDING_QUOTES_RE = re.compile(r"^[\"']+|[\"']+$")
_PARENTHETICAL_RE = re.compile(r"\s*\([^)]*\)\s*")

MIN_TITLE_WORDS = 2
MAX_TITLE_WORDS = 12
MAX_TITLE_DIGITS = 3


def _non_blank_lines(text: str) -> List[str]:
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def to_title_case(text: str) -> str:
    words = []
    for idx, word in enumerate(text.split()):
        lowered = word.lower()
        if idx > 0 and lowered in TITLE_STOP_WORDS:
            words.append(lowered)
        elif word.isupper() or word.islower():
            words.append(word[:1].upper() + word[1:].lower())
        else:
            words.append(word)
    return " ".join(words)


def clean_title(line: str, title_case: bool = False) -> str:
    """Drop site-name suffixes, a trailing "recipe" and surrounding quotes."""
    title = _SITE_SUFFIX_RE.sub("", _SURROUNDING_QUOTES_RE.sub("", line.strip()))
    title = _TRAILING_RECIPE_RE.sub("", title)
    title = _SURROUNDING_QUOTES_RE.sub("", title).strip()
    if title_case:
        title = to_title_case(title)
    return title


def guess_title(text: str, title_case: bool = False) -> str:
    lines = _non_blank_lines(text)[:TITLE_SCAN_LINES]
    for line in lines:
        if TITLE_STOP_RE.match(line):
            break
        if BULLET_RE.match(line) or is_noise(line):
            continue
        word_count = len(line.split())
        digit_count = sum(1 for ch in line if ch.isdigit())
        if MIN_TITLE_WORDS <= word_count <= MAX_TITLE_WORDS and digit_count <= MAX_TITLE_DIGITS:
            title = clean_title(line, title_case)
            if title:
                return title

    if lines and not TITLE_STOP_RE.match(lines[0]) and not BULLET_RE.match(lines[0]):
        return clean_title(lines[0], title_case)
    return ""


def _scan_servings(lines: List[str]) -> str:
    for line in lines:
        match = SERVINGS_LINE_RE.match(line)
        if not match:
            continue
        value = _PARENTHETICAL_RE.sub(" ", match.group(1))
        value = re.sub(r"\s+", " ", value).strip().rstrip(".")
        if value:
            return value
    return ""


def detect_servings(text: str) -> str:
    """Return the servings/yield declaration, scanning the head then the tail of the text."""
    lines = [line for line in _non_blank_lines(text) if not has_marker(line)]
    return _scan_servings(lines[:SERVINGS_SCAN_LINES]) or _scan_servings(lines[-SERVINGS_SCAN_LINES:])
