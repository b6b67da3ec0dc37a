import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from starlette.concurrency import run_in_threadpool

from allmyrecipes.app.api.deps import get_ocr_engine
from allmyrecipes.app.core.config import get_settings
from allmyrecipes.app.services import ocr_service
from allmyrecipes.app.services.ocr_service import OcrEngine, OcrResult

router = APIRouter(tags=["ocr"])
logger = logging.getLogger(__name__)


@router.post("/ocr", response_model=OcrResult)
async def recognize_recipe_images(
    images: List[UploadFile] = File(...),
    engine: OcrEngine = Depends(get_ocr_engine),
):
    settings = get_settings()
    if not images:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No images provided")
    if len(images) > settings.ocr_max_images:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many images (max {settings.ocr_max_images})",
        )

    payloads = []
    for file in images:
        data = await file.read()
        if not data:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty image upload")
        if len(data) > settings.ocr_max_image_bytes:
            raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="Image too large")
        payloads.append(data)

    logger.info("Running OCR on %d uploaded images", len(payloads))
    return await run_in_threadpool(ocr_service.recognize_images, payloads, engine)
