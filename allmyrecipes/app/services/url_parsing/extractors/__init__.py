"""Recipe extractors for different parsing strategies."""

from allmyrecipes.app.services.url_parsing.extractors.dom_fallback import extract_recipe_from_dom
from allmyrecipes.app.services.url_parsing.extractors.instructions import extract_instruction_steps
from allmyrecipes.app.services.url_parsing.extractors.schema_org import (
    extract_recipe_from_schema_org,
)

__all__ = [
    "extract_instruction_steps",
    "extract_recipe_from_dom",
    "extract_recipe_from_schema_org",
]
