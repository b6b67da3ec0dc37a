"""URL recipe parsing package.

This package provides functionality for extracting recipes from HTML pages
using two strategies: schema.org JSON-LD, then common page markup.
"""

from allmyrecipes.app.services.url_parsing.html_fetcher import (
    InvalidUrlError,
    fetch_html,
    is_private_host,
    validate_url,
)
from allmyrecipes.app.services.url_parsing.models import (
    InstructionNode,
    InstructionSection,
    InstructionStep,
    InstructionText,
    ParsedRecipe,
)
from allmyrecipes.app.services.url_parsing.parsing_utils import (
    clean_text,
    dedupe_preserving_order,
)

__all__ = [
    # Models
    "InstructionNode",
    "InstructionSection",
    "InstructionStep",
    "InstructionText",
    "ParsedRecipe",
    # HTML fetching
    "InvalidUrlError",
    "fetch_html",
    "is_private_host",
    "validate_url",
    # Parsing utilities
    "clean_text",
    "dedupe_preserving_order",
]
