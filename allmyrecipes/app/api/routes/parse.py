import logging
from typing import List, Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from allmyrecipes.app.services import url_recipe_parser
from allmyrecipes.app.services.text_parsing.parser import parse_recipe_text
from allmyrecipes.app.services.url_parsing.html_fetcher import InvalidUrlError, validate_url
from allmyrecipes.app.services.url_parsing.models import ParsedRecipe

router = APIRouter(tags=["parse"])
logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Missing or invalid ?url"
PARSE_FAILED_MESSAGE = "Failed to parse this page."


class ParsePageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source_url: str = Field(..., alias="sourceUrl")
    title: str = ""
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)


class ParseTextRequest(BaseModel):
    text: str
    title_case: bool = False


@router.get("/parse", response_model=ParsePageResponse)
async def parse_page(url: Optional[str] = Query(None)):
    try:
        source_url = validate_url(url)
    except InvalidUrlError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_URL_MESSAGE})

    try:
        recipe = await url_recipe_parser.parse_recipe_from_url(source_url)
    except InvalidUrlError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": INVALID_URL_MESSAGE})
    except Exception:  # noqa: BLE001
        logger.exception("Failed to parse %s", source_url)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": PARSE_FAILED_MESSAGE},
        )

    return ParsePageResponse(
        source_url=source_url,
        title=recipe.title,
        ingredients=recipe.ingredients,
        steps=recipe.steps,
    )


@router.post("/parse-text", response_model=ParsedRecipe)
async def parse_text(payload: ParseTextRequest):
    return parse_recipe_text(payload.text, title_case=payload.title_case)
