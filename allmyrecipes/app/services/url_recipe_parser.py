"""Recipe extraction from HTML pages: structured data first, page markup second."""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from allmyrecipes.app.core.config import get_settings
from allmyrecipes.app.services.url_parsing.extractors import (
    extract_recipe_from_dom,
    extract_recipe_from_schema_org,
)
from allmyrecipes.app.services.url_parsing.html_fetcher import fetch_html
from allmyrecipes.app.services.url_parsing.models import ParsedRecipe
from allmyrecipes.app.services.url_parsing.parsing_utils import clean_text, dedupe_preserving_order

logger = logging.getLogger(__name__)


def extract_recipe(soup: BeautifulSoup, url: Optional[str] = None) -> Optional[ParsedRecipe]:
    """Structured-markup extraction only; None means no usable schema.org Recipe."""
    return extract_recipe_from_schema_org(soup, url)


def parse_recipe_html(soup: BeautifulSoup, url: Optional[str] = None) -> ParsedRecipe:
    """Extract a recipe from a parsed page, falling back to page markup heuristics."""
    recipe = extract_recipe(soup, url)
    strategy = "schema_org"
    if recipe is None:
        logger.info("No schema.org recipe found for %s; using DOM fallback", url or "<document>")
        recipe = extract_recipe_from_dom(soup, url)
        strategy = "dom_fallback"

    limit = get_settings().html_max_items
    finalized = recipe.model_copy(
        update={
            "title": clean_text(recipe.title),
            "ingredients": dedupe_preserving_order(recipe.ingredients, limit=limit),
            "steps": dedupe_preserving_order(recipe.steps, limit=limit),
        }
    )
    logger.info(
        "Parsed %s via %s: ingredients=%d, steps=%d",
        url or "<document>",
        strategy,
        len(finalized.ingredients),
        len(finalized.steps),
    )
    return finalized


async def parse_recipe_from_url(url: str) -> ParsedRecipe:
    """Fetch ``url`` and parse it. Fetch and validation errors propagate to the caller."""
    html = await fetch_html(url)
    soup = BeautifulSoup(html, "lxml")
    return parse_recipe_html(soup, url.strip())
