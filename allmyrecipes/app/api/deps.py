from allmyrecipes.app.services.ocr_service import OcrEngine
from allmyrecipes.app.services.ocr_tesseract import run_tesseract


def get_ocr_engine() -> OcrEngine:
    return run_tesseract
