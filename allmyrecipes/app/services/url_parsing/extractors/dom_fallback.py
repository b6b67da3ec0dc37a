"""Recipe extraction from common page markup when no structured data exists."""

import logging
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from allmyrecipes.app.services.url_parsing.models import ParsedRecipe
from allmyrecipes.app.services.url_parsing.parsing_utils import clean_text

logger = logging.getLogger(__name__)

INGREDIENT_SELECTORS = (
    "[itemprop='recipeIngredient']",
    ".ingredients li",
    "ul.ingredients li",
    "ol.ingredients li",
    "li.ingredient",
    ".recipe-ingredients li",
    ".ingredients__list li",
)
INSTRUCTION_CONTAINER_SELECTOR = ", ".join(
    f'[{attr}*="{word}"]'
    for word in ("instruction", "direction", "method", "step")
    for attr in ("class", "id")
)
MAX_CONTAINERS = 3
MIN_ITEMS = 2
MAX_ORDERED_LIST_STEPS = 50


def text_list(elements: Iterable) -> List[str]:
    texts = (clean_text(el.get_text(" ")) for el in elements)
    return [text for text in texts if text]


def find_title(soup: BeautifulSoup) -> str:
    for selector in ('meta[property="og:title"]', 'meta[name="twitter:title"]'):
        meta = soup.select_one(selector)
        content = clean_text(meta.get("content")) if meta else ""
        if content:
            return content
    h1 = soup.find("h1")
    return clean_text(h1.get_text(" ")) if h1 else ""


def find_ingredients(soup: BeautifulSoup) -> List[str]:
    for selector in INGREDIENT_SELECTORS:
        items = text_list(soup.select(selector))
        if len(items) >= MIN_ITEMS:
            logger.debug("Ingredient selector %s matched %d items", selector, len(items))
            return items
    return []


def find_steps(soup: BeautifulSoup) -> List[str]:
    """Collect steps from instruction-like containers, else from every ordered list."""
    steps: List[str] = []
    for container in soup.select(INSTRUCTION_CONTAINER_SELECTOR, limit=MAX_CONTAINERS):
        steps.extend(text_list(container.find_all("li")))
        if len(steps) < MIN_ITEMS:
            steps.extend(text_list(container.find_all("p")))
    if len(steps) < MIN_ITEMS:
        steps = text_list(soup.select("ol li"))[:MAX_ORDERED_LIST_STEPS]
    return steps


def extract_recipe_from_dom(soup: BeautifulSoup, url: Optional[str] = None) -> ParsedRecipe:
    """Best-effort extraction; missing elements yield empty fields."""
    title = find_title(soup)
    ingredients = find_ingredients(soup)
    steps = find_steps(soup)
    logger.info(
        "DOM fallback: title=%s, ingredients=%d, steps=%d",
        title[:50] if title else "None",
        len(ingredients),
        len(steps),
    )
    return ParsedRecipe(title=title, ingredients=ingredients, steps=steps, source_url=url)
