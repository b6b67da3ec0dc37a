"""Reassemble wrapped instruction lines and split over-long steps."""

import re
from typing import Callable, Iterable, List

from allmyrecipes.app.services.text_parsing.classifier import score_line, strip_markers
from allmyrecipes.app.services.text_parsing.constants import (
    ABBREVIATIONS,
    BULLET_RE,
    CONNECTIVES,
    LEADING_VERB_RE,
    MAX_STEP_LENGTH,
    NUMBER_PREFIX_RE,
    SENTENCE_END_RE,
    STEP_MARKER_RE,
)

_CONNECTIVE_SPLIT_RE = re.compile(r";|\.\s+(?=(?:%s)\b)" % "|".join(CONNECTIVES))
_THEN_SPLIT_RE = re.compile(r"\s+(?:and\s+then|then|after\s+that)\s+", re.I)
_SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]\s+(?=[A-Z0-9])")
_PREVIOUS_WORD_RE = re.compile(r"([A-Za-z]+)$")
_TRAILING_PERIOD_RE = re.compile(r"\s*\.\s*$")

PARAGRAPH_STEP_SCORE = 1.0


def starts_new_step(line: str, current: str = "") -> bool:
    """A marker always opens a step; so does an imperative line after a finished sentence."""
    if BULLET_RE.match(line) or STEP_MARKER_RE.match(line):
        return True
    return bool(SENTENCE_END_RE.search(current) and LEADING_VERB_RE.match(line.strip()))


def merge_step_lines(lines: Iterable[str]) -> List[str]:
    """Join soft-wrapped continuation lines onto the step they belong to.

    A bullet, list number or "Step N" marker opens a new step, as does a line
    starting with a cooking verb when the current step already ends in
    sentence punctuation. Anything else is appended to the current one.
    """
    merged: List[str] = []
    current = ""
    for line in lines:
        clean = strip_markers(line)
        if starts_new_step(line, current):
            if current.strip():
                merged.append(current.strip())
            current = clean
        else:
            current = f"{current} {clean}" if current else clean
    if current.strip():
        merged.append(current.strip())
    return merged


def split_sentences(text: str) -> List[str]:
    """Split at ``.``/``?``/``!`` followed by whitespace and an uppercase letter or digit.

    No split after a known abbreviation ("10 min. Stir") or between digits.
    """
    sentences: List[str] = []
    start = 0
    for match in _SENTENCE_BOUNDARY_RE.finditer(text):
        punct_at = match.start()
        previous = _PREVIOUS_WORD_RE.search(text[start:punct_at])
        if previous and previous.group(1).lower() in ABBREVIATIONS:
            continue
        if punct_at > 0 and text[punct_at - 1].isdigit() and text[match.end()].isdigit():
            continue
        sentence = text[start : punct_at + 1].strip()
        if sentence:
            sentences.append(sentence)
        start = match.end()
    tail = text[start:].strip()
    if tail:
        sentences.append(tail)
    return sentences


def _trim(fragment: str) -> str:
    return _TRAILING_PERIOD_RE.sub("", fragment).strip()


def chunk_long_step(step: str, max_length: int = MAX_STEP_LENGTH) -> List[str]:
    """Break a step longer than ``max_length`` into smaller instructions."""
    text = step.strip()
    if len(text) <= max_length:
        trimmed = _trim(text)
        return [trimmed] if trimmed else []

    parts = _split_long(_CONNECTIVE_SPLIT_RE.split, [text], max_length)
    parts = _split_long(_THEN_SPLIT_RE.split, parts, max_length)
    parts = _split_long(split_sentences, parts, max_length)
    return [t for t in (_trim(p) for p in parts) if t]


def _split_long(splitter: Callable[[str], List[str]], parts: List[str], max_length: int) -> List[str]:
    """Apply ``splitter`` to each part still longer than ``max_length``."""
    refined: List[str] = []
    for part in parts:
        pieces = splitter(part) if len(part) > max_length else [part]
        refined.extend(p.strip() for p in pieces if p and p.strip())
    return refined


def tidy_step(step: str) -> str:
    return _trim(NUMBER_PREFIX_RE.sub("", step.strip()))


def steps_from_lines(lines: Iterable[str]) -> List[str]:
    steps: List[str] = []
    for merged in merge_step_lines(lines):
        steps.extend(chunk_long_step(merged))
    return [s for s in (tidy_step(step) for step in steps) if s]


def steps_from_paragraphs(paragraphs: Iterable[str]) -> List[str]:
    """Fallback for prose instructions: keep paragraphs that read like directions."""
    steps: List[str] = []
    for paragraph in paragraphs:
        if score_line(paragraph).score.step_score >= PARAGRAPH_STEP_SCORE or SENTENCE_END_RE.search(paragraph):
            steps.extend(chunk_long_step(paragraph))
    return [s for s in (tidy_step(step) for step in steps) if len(s) > 2]
