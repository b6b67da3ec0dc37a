import time
from typing import Dict, Tuple

import pytesseract
from PIL import Image, ImageFilter, ImageOps

from allmyrecipes.app.core.config import get_settings

MIN_SIDE = 1000
MAX_UPSCALE = 2


def _preprocess(image: Image.Image, max_side: int) -> Image.Image:
    # Grayscale plus contrast stretch for printed text on colored backgrounds.
    gray = ImageOps.exif_transpose(image).convert("L")
    gray = ImageOps.autocontrast(gray)

    longest = max(gray.size)
    if longest > max_side:
        scale = max_side / longest
        gray = gray.resize((max(1, int(gray.size[0] * scale)), max(1, int(gray.size[1] * scale))), Image.LANCZOS)
    else:
        # Upscale small images to give tesseract more pixels to work with.
        shortest = min(gray.size)
        if shortest < MIN_SIDE:
            scale = min(MAX_UPSCALE, MIN_SIDE / max(shortest, 1), max_side / max(longest, 1))
            if scale > 1:
                gray = gray.resize((int(gray.size[0] * scale), int(gray.size[1] * scale)), Image.LANCZOS)

    return gray.filter(ImageFilter.SHARPEN)


def _lines_from_data(data: Dict) -> str:
    """Rebuild line and paragraph breaks from tesseract's word boxes."""
    lines = []
    current_key = None
    current_par = None
    words = []
    for idx, word in enumerate(data.get("text", [])):
        if not word or not word.strip():
            continue
        par = (data["block_num"][idx], data["par_num"][idx])
        key = par + (data["line_num"][idx],)
        if key != current_key:
            if words:
                lines.append(" ".join(words))
            if current_par is not None and par != current_par:
                lines.append("")
            words = []
            current_key = key
            current_par = par
        words.append(word.strip())
    if words:
        lines.append(" ".join(words))
    return "\n".join(lines)


def run_tesseract(image: Image.Image) -> Tuple[str, Dict]:
    start = time.time()
    settings = get_settings()
    processed = _preprocess(image, settings.ocr_max_side)
    data = pytesseract.image_to_data(
        processed,
        lang=settings.ocr_language,
        output_type=pytesseract.Output.DICT,
        config="--psm 6 --oem 3",
    )
    raw_text = _lines_from_data(data)
    confs = [float(c) for c in data.get("conf", []) if c not in ("-1", -1, "", None) and float(c) >= 0]
    mean_conf = sum(confs) / len(confs) if confs else None
    duration_ms = int((time.time() - start) * 1000)
    metrics = {
        "confidence": mean_conf if mean_conf is not None else 0,
        "char_count": len(raw_text),
        "duration_ms": duration_ms,
    }
    return raw_text, metrics
