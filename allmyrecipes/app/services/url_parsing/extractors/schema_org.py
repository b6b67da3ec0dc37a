"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from allmyrecipes.app.services.url_parsing.extractors.instructions import extract_instruction_steps
from allmyrecipes.app.services.url_parsing.models import ParsedRecipe
from allmyrecipes.app.services.url_parsing.parsing_utils import coerce_text

logger = logging.getLogger(__name__)

RECIPE_TYPES = frozenset(
    {
        "recipe",
        "schema:recipe",
        "http://schema.org/recipe",
        "https://schema.org/recipe",
    }
)


def is_recipe_type(obj: Dict[str, Any]) -> bool:
    obj_type = obj.get("@type")
    if not obj_type:
        return False
    types = [obj_type] if isinstance(obj_type, str) else obj_type
    if not isinstance(types, list):
        return False
    return any(str(t).strip().lower() in RECIPE_TYPES for t in types)


def _candidates(data: Any) -> List[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        graph = data.get("@graph")
        if isinstance(graph, list):
            return graph
        return [data]
    return []


def _load_block(script: Any, position: int) -> Any:
    payload = (script.string or script.get_text() or "").strip()
    if not payload:
        return None
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        logger.warning("Skipping malformed ld+json block #%d: %s", position, exc)
        return None


def find_recipe_object(soup: BeautifulSoup) -> Optional[Dict[str, Any]]:
    """Return the first Recipe-typed JSON-LD object in document order."""
    blocks = soup.select('script[type="application/ld+json"]')
    logger.debug("Scanning %d ld+json blocks", len(blocks))

    for position, script in enumerate(blocks):
        for candidate in _candidates(_load_block(script, position)):
            if isinstance(candidate, dict) and is_recipe_type(candidate):
                logger.info("Recipe object found in ld+json block #%d", position)
                return candidate
    return None


def _ingredient_list(raw: Any) -> List[str]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        return []
    return [text for text in (coerce_text(item) for item in raw) if text]


def extract_recipe_from_schema_org(soup: BeautifulSoup, url: Optional[str] = None) -> Optional[ParsedRecipe]:
    """Extract a recipe from schema.org JSON-LD data; None when no usable Recipe exists."""
    obj = find_recipe_object(soup)
    if obj is None:
        return None

    raw_ingredients = obj.get("recipeIngredient") or obj.get("ingredients") or []
    ingredients = _ingredient_list(raw_ingredients)
    steps = extract_instruction_steps(obj.get("recipeInstructions"))

    title = coerce_text(obj.get("name"))
    logger.info(
        "Structured recipe %r has %d ingredients and %d steps",
        title,
        len(ingredients),
        len(steps),
    )
    if not ingredients and not steps:
        return None

    return ParsedRecipe(
        title=title,
        servings=coerce_text(obj.get("recipeYield")),
        ingredients=ingredients,
        steps=steps,
        source_url=url,
    )
