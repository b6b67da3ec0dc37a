#!/usr/bin/env python
"""
Parse a recipe from a text file, standard input or a web page and print it as JSON.

    python scripts/parse_recipe.py recipe.txt
    pbpaste | python scripts/parse_recipe.py --title-case
    python scripts/parse_recipe.py --url https://example.com/chocolate-cake
"""
import argparse
import asyncio
import logging
import sys

import httpx

from allmyrecipes.app.core.config import get_settings
from allmyrecipes.app.services.text_parsing.parser import parse_recipe_text
from allmyrecipes.app.services.url_parsing.html_fetcher import InvalidUrlError
from allmyrecipes.app.services.url_recipe_parser import parse_recipe_from_url

logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger("parse_recipe")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("path", nargs="?", help="text file to parse (default: stdin)")
    parser.add_argument("--url", help="fetch and parse a recipe page instead of text")
    parser.add_argument("--title-case", action="store_true", help="title-case the guessed title")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.url:
        try:
            recipe = asyncio.run(parse_recipe_from_url(args.url))
        except InvalidUrlError as exc:
            logger.error("Invalid URL %s: %s", args.url, exc)
            return 2
        except httpx.HTTPError:
            logger.exception("Failed to fetch %s", args.url)
            return 1
    else:
        if args.path:
            with open(args.path, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
        recipe = parse_recipe_text(text, title_case=args.title_case)

    print(recipe.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
