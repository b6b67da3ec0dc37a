"""Score-based line classifier with section-mode tracking.

Each line is scored independently (``score_line``); the section mode set by
the most recent heading then biases the scores before a fixed decision rule
picks a label. A frozen ``ClassifierState`` is threaded through ``classify_lines``,
so parsing the same text always yields the same result.
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from allmyrecipes.app.services.text_parsing.constants import (
    BULLET_RE,
    CAPTION_HINTS_RE,
    DURATION_TEMPERATURE_RE,
    EXPLICIT_STEP_RE,
    FOOD_RE,
    HEADING_IGNORE_RE,
    HEADING_INGREDIENTS_RE,
    HEADING_STEPS_RE,
    LEADING_VERB_RE,
    MULTIPLIER_RE,
    NOISE_PATTERNS,
    PREP_QUALIFIER_RE,
    QUANTITY_RE,
    SENTENCE_END_RE,
    SERVINGS_LABEL_RE,
    STEP_MARKER_RE,
    SUBHEADING_RE,
    TIME_LABEL_RE,
    UNIT_RE,
    VERB_RE,
)
from allmyrecipes.app.services.text_parsing.models import (
    ClassificationResult,
    ClassifierState,
    ClassifiedLine,
    LineKind,
    LineLabel,
    LineScore,
    RawLine,
    SectionMode,
)

logger = logging.getLogger(__name__)

INGREDIENT_THRESHOLD = 1.8
STEP_THRESHOLD = 1.6
SECTION_BONUS = 2.0

QUANTITY_WEIGHT = 2.0
UNIT_WEIGHT = 2.0
PREP_QUALIFIER_WEIGHT = 0.7
MULTIPLIER_WEIGHT = 0.5
FOOD_WEIGHT = 0.6
INGREDIENT_MARKER_WEIGHT = 0.6

VERB_WEIGHT = 1.6
LEADING_VERB_WEIGHT = 1.0
STEP_MARKER_WEIGHT = 0.8
SENTENCE_END_WEIGHT = 0.4
DURATION_WEIGHT = 0.5
EXPLICIT_STEP_WEIGHT = 1.6

# "Prep time: 10 minutes", "Serves 4"
METADATA_STEP_PENALTY = 0.5
METADATA_INGREDIENT_PENALTY = 2.5

SECTION_HEADING_SCORE = 2.0
SUBHEADING_SCORE = 1.0


def strip_markers(line: str) -> str:
    """Remove a leading bullet, list number or "Step N" marker."""
    text = BULLET_RE.sub("", line.strip())
    text = STEP_MARKER_RE.sub("", text)
    return text.strip()


def has_marker(line: str) -> bool:
    return bool(BULLET_RE.match(line) or STEP_MARKER_RE.match(line))


def heading_transition(text: str) -> Optional[SectionMode]:
    """Return the mode a section heading switches to, or None for non-headings."""
    if HEADING_INGREDIENTS_RE.match(text):
        return SectionMode.INGREDIENTS
    if HEADING_STEPS_RE.match(text):
        return SectionMode.STEPS
    if HEADING_IGNORE_RE.match(text):
        return SectionMode.IGNORE
    return None


def is_noise(text: str) -> bool:
    if any(pattern.search(text) for pattern in NOISE_PATTERNS):
        return True
    return bool(CAPTION_HINTS_RE.search(text)) and not VERB_RE.search(text)


def clean_ingredient(text: str) -> str:
    s = BULLET_RE.sub("", text.strip())
    s = re.sub(r"\s*,\s*(?!\d)", ", ", s)
    s = re.sub(r"\s{2,}", " ", s)
    s = re.sub(r"\s*\.\s*$", "", s)
    s = re.sub(r"\b(tsp|tbsp|oz|lbs?)\.(?=\s|$)", r"\1", s, flags=re.I)
    return s.strip(" ,")


def score_line(line: str) -> RawLine:
    """Score one line for ingredient, step and heading evidence.

    The result carries no section bias; see ``apply_section_bias``.
    """
    text = line.strip()
    if not text:
        return RawLine(raw=line, stripped="", score=LineScore(kind=LineKind.BLANK))

    stripped = strip_markers(text)
    marker = has_marker(text)

    mode = heading_transition(stripped)
    if mode is not None or SUBHEADING_RE.match(stripped):
        heading_score = SECTION_HEADING_SCORE if mode is not None else SUBHEADING_SCORE
        return RawLine(
            raw=line,
            stripped=stripped,
            has_marker=marker,
            score=LineScore(heading_score=heading_score, kind=LineKind.HEADING),
        )

    if is_noise(stripped):
        return RawLine(raw=line, stripped=stripped, has_marker=marker, is_noise=True)

    ingredient_score = 0.0
    if QUANTITY_RE.search(stripped):
        ingredient_score += QUANTITY_WEIGHT
    if UNIT_RE.search(stripped):
        ingredient_score += UNIT_WEIGHT
    if PREP_QUALIFIER_RE.search(stripped):
        ingredient_score += PREP_QUALIFIER_WEIGHT
    if MULTIPLIER_RE.search(stripped):
        ingredient_score += MULTIPLIER_WEIGHT
    if FOOD_RE.search(stripped):
        ingredient_score += FOOD_WEIGHT
    if marker:
        ingredient_score += INGREDIENT_MARKER_WEIGHT

    step_score = 0.0
    if VERB_RE.search(stripped):
        step_score += VERB_WEIGHT
    if LEADING_VERB_RE.match(stripped):
        step_score += LEADING_VERB_WEIGHT
    if marker:
        step_score += STEP_MARKER_WEIGHT
    if SENTENCE_END_RE.search(stripped):
        step_score += SENTENCE_END_WEIGHT
    if DURATION_TEMPERATURE_RE.search(stripped):
        step_score += DURATION_WEIGHT
    if EXPLICIT_STEP_RE.search(text):
        step_score += EXPLICIT_STEP_WEIGHT
    if TIME_LABEL_RE.search(stripped) or SERVINGS_LABEL_RE.match(stripped):
        step_score -= METADATA_STEP_PENALTY
        ingredient_score -= METADATA_INGREDIENT_PENALTY

    return RawLine(
        raw=line,
        stripped=stripped,
        has_marker=marker,
        score=LineScore(ingredient_score=ingredient_score, step_score=step_score),
    )


def apply_section_bias(score: LineScore, mode: SectionMode) -> LineScore:
    if mode == SectionMode.INGREDIENTS:
        return score.model_copy(update={"ingredient_score": score.ingredient_score + SECTION_BONUS})
    if mode == SectionMode.STEPS:
        return score.model_copy(update={"step_score": score.step_score + SECTION_BONUS})
    return score


def decide(score: LineScore, marker: bool) -> LineLabel:
    if score.ingredient_score >= INGREDIENT_THRESHOLD and score.ingredient_score >= score.step_score:
        return LineLabel.INGREDIENT
    if score.step_score >= STEP_THRESHOLD:
        return LineLabel.STEP
    # Bulleted content without a strong step signal is more often an ingredient.
    if marker:
        return LineLabel.INGREDIENT
    return LineLabel.NOISE


def classify_line(line: RawLine, state: ClassifierState) -> Tuple[ClassifiedLine, ClassifierState]:
    """Label one scored line under ``state`` and return the state for the next line."""
    mode = state.mode
    kind = line.score.kind
    if kind == LineKind.BLANK:
        return ClassifiedLine(line=line, label=LineLabel.BLANK, mode=mode), state
    if kind == LineKind.HEADING:
        next_mode = heading_transition(line.stripped)
        if next_mode is None:
            return ClassifiedLine(line=line, label=LineLabel.HEADING, mode=mode), state
        next_state = state.enter(next_mode, line.stripped)
        return ClassifiedLine(line=line, label=LineLabel.HEADING, mode=next_mode), next_state
    if line.is_noise:
        return ClassifiedLine(line=line, label=LineLabel.NOISE, mode=mode), state
    if mode == SectionMode.IGNORE:
        return ClassifiedLine(line=line, label=LineLabel.NOTE, mode=mode), state

    label = decide(apply_section_bias(line.score, mode), line.has_marker)
    return ClassifiedLine(line=line, label=label, mode=mode), state


def recover_ingredients(lines: Sequence[RawLine]) -> List[str]:
    """Scan the whole document for ingredient-looking lines, ignoring step evidence."""
    recovered: List[str] = []
    for line in lines:
        if line.score.kind != LineKind.CONTENT or line.is_noise:
            continue
        if line.score.ingredient_score >= INGREDIENT_THRESHOLD:
            cleaned = clean_ingredient(line.stripped)
            if cleaned:
                recovered.append(cleaned)
    return recovered


def classify_lines(lines: Iterable[str]) -> ClassificationResult:
    """Classify normalized lines into headings, ingredients, step lines and notes."""
    result = ClassificationResult()
    state = ClassifierState()
    for text in lines:
        classified, state = classify_line(score_line(text), state)
        result.lines.append(classified)

        line = classified.line
        if classified.label == LineLabel.HEADING:
            result.headings.append(line.raw.strip())
        elif classified.label == LineLabel.INGREDIENT:
            cleaned = clean_ingredient(line.stripped)
            if cleaned:
                result.ingredients.append(cleaned)
        elif classified.label == LineLabel.STEP:
            result.step_lines.append(line.raw.strip())
        elif classified.label == LineLabel.NOTE:
            result.notes.append(line.stripped or line.raw.strip())

    if len(result.ingredients) < 2:
        recovered = recover_ingredients([c.line for c in result.lines])
        if len(recovered) > len(result.ingredients):
            logger.debug(
                "Ingredient pass found %d lines; full-document scan recovered %d",
                len(result.ingredients),
                len(recovered),
            )
            result.ingredients = recovered

    logger.debug(
        "Classified %d lines: headings=%d ingredients=%d step_lines=%d notes=%d",
        len(result.lines),
        len(result.headings),
        len(result.ingredients),
        len(result.step_lines),
        len(result.notes),
    )
    return result
