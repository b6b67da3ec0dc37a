"""Plain-text recipe parsing package.

Turns pasted or OCR-derived recipe text into a ``ParsedRecipe`` by normalizing
the text, guessing title and servings, classifying each line with a
section-aware scorer and reassembling the instruction steps.
"""

from allmyrecipes.app.services.text_parsing.classifier import classify_lines, score_line
from allmyrecipes.app.services.text_parsing.normalizer import normalize_text
from allmyrecipes.app.services.text_parsing.parser import parse_recipe_text
from allmyrecipes.app.services.text_parsing.steps import chunk_long_step, split_sentences
from allmyrecipes.app.services.text_parsing.title_servings import detect_servings, guess_title

__all__ = [
    "chunk_long_step",
    "classify_lines",
    "detect_servings",
    "guess_title",
    "normalize_text",
    "parse_recipe_text",
    "score_line",
    "split_sentences",
]
