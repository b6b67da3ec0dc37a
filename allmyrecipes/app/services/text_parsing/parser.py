"""Plain-text recipe parsing: normalize, classify, assemble steps."""

import logging
from typing import List

from allmyrecipes.app.services.text_parsing.classifier import classify_lines
from allmyrecipes.app.services.text_parsing.models import ClassificationResult, LineLabel
from allmyrecipes.app.services.text_parsing.normalizer import normalize_text
from allmyrecipes.app.services.text_parsing.steps import steps_from_lines, steps_from_paragraphs
from allmyrecipes.app.services.text_parsing.title_servings import clean_title, detect_servings, guess_title
from allmyrecipes.app.services.url_parsing.models import ParsedRecipe
from allmyrecipes.app.services.url_parsing.parsing_utils import dedupe_preserving_order

logger = logging.getLogger(__name__)

MIN_LINE_STEPS = 2
_PARAGRAPH_LABELS = {LineLabel.STEP, LineLabel.NOISE}


def collect_paragraphs(result: ClassificationResult, title: str = "") -> List[str]:
    """Group consecutive step or unlabelled prose lines into paragraphs.

    Blank lines, headings, ingredients and noise-pattern lines end a paragraph.
    A paragraph that is just the recipe title is dropped.
    """
    paragraphs: List[str] = []
    current: List[str] = []
    for classified in result.lines + [None]:
        if classified is not None and classified.label in _PARAGRAPH_LABELS and not classified.line.is_noise:
            current.append(classified.line.stripped)
            continue
        if current:
            paragraph = " ".join(current)
            if not title or clean_title(paragraph).lower() != title.lower():
                paragraphs.append(paragraph)
            current = []
    return paragraphs


def parse_recipe_text(text: str, title_case: bool = False) -> ParsedRecipe:
    """Parse pasted or OCR-derived recipe text; empty input yields an empty recipe."""
    normalized = normalize_text(text or "")
    if not normalized:
        return ParsedRecipe()

    title = guess_title(normalized, title_case=title_case)
    servings = detect_servings(normalized)
    result = classify_lines(normalized.split("\n"))

    steps = steps_from_lines(result.step_lines)
    if len(steps) < MIN_LINE_STEPS:
        paragraph_steps = steps_from_paragraphs(collect_paragraphs(result, title))
        if len(paragraph_steps) > len(steps):
            logger.debug("Paragraph fallback produced %d steps (line pass had %d)", len(paragraph_steps), len(steps))
            steps = paragraph_steps

    ingredients = dedupe_preserving_order(result.ingredients)
    steps = dedupe_preserving_order(steps)
    notes = "\n".join(result.notes) or None

    logger.info(
        "Parsed recipe text: title=%s, servings=%s, ingredients=%d, steps=%d, notes=%s",
        title[:50] if title else "None",
        servings or "None",
        len(ingredients),
        len(steps),
        "yes" if notes else "no",
    )
    return ParsedRecipe(
        title=title,
        servings=servings,
        ingredients=ingredients,
        steps=steps,
        notes=notes,
    )
