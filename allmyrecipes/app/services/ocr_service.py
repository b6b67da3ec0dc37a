"""Sequential OCR over uploaded recipe photos, combined into one parsed recipe."""

import io
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytesseract
from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel, Field

from allmyrecipes.app.services.ocr_tesseract import run_tesseract
from allmyrecipes.app.services.text_parsing.constants import PAGE_BREAK
from allmyrecipes.app.services.text_parsing.normalizer import normalize_text
from allmyrecipes.app.services.text_parsing.parser import parse_recipe_text
from allmyrecipes.app.services.url_parsing.models import ParsedRecipe

logger = logging.getLogger(__name__)

OcrEngine = Callable[[Image.Image], Tuple[str, Dict]]

OCR_ERRORS = (
    pytesseract.TesseractError,
    UnidentifiedImageError,
    Image.DecompressionBombError,
    OSError,
    RuntimeError,
    ValueError,
)


class OcrPage(BaseModel):
    index: int
    text: str = Field("", exclude=True)
    confidence: float = 0.0
    char_count: int = 0
    error: Optional[str] = None


class OcrResult(BaseModel):
    recipe: ParsedRecipe
    pages: List[OcrPage] = Field(default_factory=list)
    confidence: float = 0.0
    text: str = ""


def recognize_page(index: int, image_bytes: bytes, engine: OcrEngine = run_tesseract) -> OcrPage:
    """OCR one image; a decode or engine failure is recorded on the page instead of raised."""
    try:
        with Image.open(io.BytesIO(image_bytes)) as image:
            image.load()
            raw_text, metrics = engine(image)
    except OCR_ERRORS as exc:
        logger.warning("OCR failed for page %d: %s", index, exc)
        return OcrPage(index=index, error=f"{type(exc).__name__}: {exc}")

    text = normalize_text(raw_text)
    page = OcrPage(
        index=index,
        text=text,
        confidence=float(metrics.get("confidence") or 0),
        char_count=len(text),
    )
    logger.info(
        "OCR page %d: confidence=%.1f, chars=%d, duration_ms=%s",
        index,
        page.confidence,
        page.char_count,
        metrics.get("duration_ms"),
    )
    return page


def combine_pages(pages: Sequence[OcrPage]) -> str:
    return PAGE_BREAK.join(page.text for page in pages if page.text)


def recognize_images(images: Sequence[bytes], engine: OcrEngine = run_tesseract) -> OcrResult:
    """OCR each image in order, then parse the combined text.

    Images are processed one at a time; failed pages contribute a confidence
    of 0 to the mean.
    """
    pages = [recognize_page(index, image_bytes, engine) for index, image_bytes in enumerate(images)]
    combined = combine_pages(pages)
    confidence = sum(page.confidence for page in pages) / len(pages) if pages else 0.0
    recipe = parse_recipe_text(combined)
    logger.info(
        "OCR finished: pages=%d, failed=%d, mean_confidence=%.1f",
        len(pages),
        sum(1 for page in pages if page.error),
        confidence,
    )
    return OcrResult(recipe=recipe, pages=pages, confidence=confidence, text=combined)
